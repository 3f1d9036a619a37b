"""Base classes for the liquidfan status interpretation layer."""

from liquidfan.base.capabilities import Capabilities, detect_capabilities
from liquidfan.base.entity import Entity
from liquidfan.base.errors import (
    AmbiguousStatusEntryError,
    DeviceNotRespondingError,
    LiquidctlError,
    LiquidfanError,
    MissingStatusEntryError,
    StatusEntryError,
)
from liquidfan.base.estimator import DutyEstimator
from liquidfan.base.parsing import NO_CHANNEL, parse_channel, parse_reading
from liquidfan.base.sensor import Control, Sensor
from liquidfan.base.status import StatusEntry, StatusReport, parse_status_reports

__all__ = [
    "NO_CHANNEL",
    "AmbiguousStatusEntryError",
    "Capabilities",
    "Control",
    "DeviceNotRespondingError",
    "DutyEstimator",
    "Entity",
    "LiquidctlError",
    "LiquidfanError",
    "MissingStatusEntryError",
    "Sensor",
    "StatusEntry",
    "StatusEntryError",
    "StatusReport",
    "detect_capabilities",
    "parse_channel",
    "parse_reading",
    "parse_status_reports",
]
