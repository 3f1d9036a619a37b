"""Device-control backends."""

from .base import Backend, CommandSink, StatusSource
from .liquidctl import LiquidctlCLI

__all__ = [
    "Backend",
    "CommandSink",
    "LiquidctlCLI",
    "StatusSource",
]
