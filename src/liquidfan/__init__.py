"""Liquid cooler sensors and controls derived from liquidctl status."""

# Status interpretation layer
from .base import (
    NO_CHANNEL,
    AmbiguousStatusEntryError,
    Capabilities,
    Control,
    DeviceNotRespondingError,
    DutyEstimator,
    Entity,
    LiquidctlError,
    LiquidfanError,
    MissingStatusEntryError,
    Sensor,
    StatusEntry,
    StatusEntryError,
    StatusReport,
    detect_capabilities,
    parse_channel,
    parse_reading,
    parse_status_reports,
)

# Collaborators
from .backends import Backend, CommandSink, LiquidctlCLI, StatusSource
from .config import DEBUG_FLAG, Config

# Entities and aggregates
from .device import Device
from .entities import FanControl, FanSpeed, LiquidTemperature, PumpDuty, PumpSpeed
from .plugin import LiquidctlPlugin

__all__ = [
    "DEBUG_FLAG",
    "NO_CHANNEL",
    "AmbiguousStatusEntryError",
    "Backend",
    "Capabilities",
    "CommandSink",
    "Config",
    "Control",
    "Device",
    "DeviceNotRespondingError",
    "DutyEstimator",
    "Entity",
    "FanControl",
    "FanSpeed",
    "LiquidTemperature",
    "LiquidctlCLI",
    "LiquidctlError",
    "LiquidctlPlugin",
    "LiquidfanError",
    "MissingStatusEntryError",
    "PumpDuty",
    "PumpSpeed",
    "Sensor",
    "StatusEntry",
    "StatusEntryError",
    "StatusReport",
    "StatusSource",
    "detect_capabilities",
    "parse_channel",
    "parse_reading",
    "parse_status_reports",
]
