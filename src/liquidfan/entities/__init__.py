"""Concrete sensors and controls of a liquid cooler."""

from .fan import FanControl, FanSpeed
from .pump import PumpDuty, PumpSpeed
from .temperature import LiquidTemperature

__all__ = [
    "FanControl",
    "FanSpeed",
    "LiquidTemperature",
    "PumpDuty",
    "PumpSpeed",
]
