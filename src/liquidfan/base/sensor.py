"""Sensor and control entities exposed to the host application."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from pydantic import ConfigDict, Field, PrivateAttr

from liquidfan.config import Config

from .entity import Entity
from .errors import StatusEntryError
from .parsing import parse_reading

if TYPE_CHECKING:
    from liquidfan.backends.base import CommandSink

    from .status import StatusEntry, StatusReport


class Sensor(Entity):
    """A read-only value derived from one key of a status report.

    The identity fields (id, name, address, key) are fixed when the
    entity is created. Only value and unit change, and only through
    load_from_status(), which the owning Device calls on every poll.

    Refresh policy:
    - missing or duplicated key: log, keep the previous value
    - non-empty unit: replace the unit
    - value of None: keep the previous value
    - unparsable value: log, fall back to 0
    """

    model_config = ConfigDict(frozen=False)

    id: str = Field(
        min_length=1,
        frozen=True,
        description="Stable host identifier, scoped to device and role",
    )
    name: str = Field(min_length=1, frozen=True, description="Display label")
    address: str = Field(frozen=True, description="Owning device address")
    key: str = Field(
        min_length=1, frozen=True, description="Status entry key to read"
    )
    value: float | None = Field(default=None, description="Current reading")
    unit: str = Field(default="", description="Unit of the current reading")

    _logger: logging.Logger = PrivateAttr()

    def __init__(self, logger: logging.Logger | None = None, **data: Any) -> None:
        """Initialize the sensor and its logger."""
        super().__init__(**data)
        self._logger = logger or logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}.{self.id}"
        )

    def update(self) -> None:
        """Host tick hook; values are pushed by Device.refresh()."""

    def load_from_status(self, report: "StatusReport") -> None:
        """Refresh value and unit from a status report."""
        entry = self._find_entry(report)
        if entry is None:
            return
        self._apply_unit(entry)
        if entry.value is None:
            return

        reading = parse_reading(entry.value)
        if reading is None:
            self._logger.warning(
                "%s, Error: Could not parse %r as float, defaulting..",
                self.name,
                entry.value,
            )
            reading = 0.0
        self.value = reading

    def _find_entry(self, report: "StatusReport") -> "StatusEntry | None":
        """Look up this entity's key, logging instead of raising."""
        try:
            return report.entry(self.key)
        except StatusEntryError as err:
            self._logger.warning("%s: Warning: %s, ignoring..", self.name, err)
            return None

    def _apply_unit(self, entry: "StatusEntry") -> None:
        if entry.unit:
            self.unit = entry.unit


class Control(Sensor, ABC):
    """A sensor whose device-side setting can also be written.

    set() only issues a command; the value observed on the next refresh
    reflects how the device reacted.
    """

    _commands: "CommandSink" = PrivateAttr()
    _config: Config = PrivateAttr()

    def __init__(
        self,
        commands: "CommandSink",
        config: Config | None = None,
        logger: logging.Logger | None = None,
        **data: Any,
    ) -> None:
        """Initialize the control with its command and config collaborators."""
        super().__init__(logger=logger, **data)
        self._commands = commands
        self._config = config if config is not None else Config()

    @abstractmethod
    def set(self, value: float) -> None:
        """Send a new setting to the device."""

    @abstractmethod
    def reset(self) -> None:
        """Send the default setting to the device."""
