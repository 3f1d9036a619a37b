"""Capability detection from a device's first status report."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from .parsing import parse_channel
from .status import StatusReport

LIQUID_TEMPERATURE_KEY = "Liquid temperature"
PUMP_SPEED_KEY = "Pump speed"


class Capabilities(BaseModel):
    """Sensor and control roles a device supports.

    Computed once when a Device is built and never re-evaluated; a key
    that disappears from a later report leaves its entity in place with
    a stale value.
    """

    model_config = ConfigDict(frozen=True)

    has_temperature: bool = Field(default=False, description="Liquid probe present")
    has_pump_speed: bool = Field(default=False, description="Pump speed reported")
    has_pump_duty: bool = Field(
        default=False, description="Pump duty can be estimated and set"
    )
    fan_channels: tuple[int, ...] = Field(
        default=(), description="Fan channel indexes in report order"
    )

    @property
    def has_fans(self) -> bool:
        """Check whether at least one fan channel was detected."""
        return bool(self.fan_channels)


def _is_fan_speed_key(key: str) -> bool:
    lowered = key.lower()
    return "fan" in lowered and "speed" in lowered


def detect_capabilities(
    report: StatusReport, logger: logging.Logger
) -> Capabilities:
    """Scan a status report for the capabilities it exposes.

    Args:
        report: First status report of the device
        logger: Receives channel parsing diagnostics

    Returns:
        Capabilities for the device
    """
    has_pump = report.has_value(PUMP_SPEED_KEY)

    channels: list[int] = []
    for entry in report.entries:
        if entry.value is None or not _is_fan_speed_key(entry.key):
            continue
        channel = parse_channel(entry.key, "Fan", logger)
        if channel in channels:
            logger.warning(
                "%s maps to fan channel %d which is already tracked, skipping",
                entry.key,
                channel,
            )
            continue
        channels.append(channel)

    return Capabilities(
        has_temperature=report.has_value(LIQUID_TEMPERATURE_KEY),
        has_pump_speed=has_pump,
        has_pump_duty=has_pump,
        fan_channels=tuple(channels),
    )
