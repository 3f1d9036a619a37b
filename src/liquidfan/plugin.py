"""Host-facing adapter that owns every detected cooler."""

import logging
from typing import Any

from pydantic import Field, PrivateAttr

from liquidfan.backends.base import Backend
from liquidfan.base.entity import Entity
from liquidfan.base.errors import LiquidfanError
from liquidfan.base.sensor import Control, Sensor
from liquidfan.config import DEBUG_FLAG, Config
from liquidfan.device import Device


class LiquidctlPlugin(Entity):
    """Bridges a fan-control host and the devices a backend reports.

    The host calls initialize() and load() once, then update() on every
    tick. A device that stops responding is logged and skipped for that
    tick; the other devices still refresh.
    """

    id: str = Field(default="liquidctl", min_length=1)
    name: str = Field(default="liquidctl", min_length=1)
    devices: list[Device] = Field(
        default_factory=list, description="Devices built by load()"
    )

    _backend: Backend = PrivateAttr()
    _config: Config = PrivateAttr()
    _logger: logging.Logger = PrivateAttr()

    def __init__(
        self,
        backend: Backend,
        config: Config | None = None,
        logger: logging.Logger | None = None,
        **data: Any,
    ) -> None:
        """Initialize the plugin with its backend and configuration."""
        super().__init__(**data)
        self._backend = backend
        self._config = config if config is not None else Config()
        self._logger = logger or logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}."
            f"{self.name}"
        )

    def initialize(self) -> None:
        """Run the backend's device initialisation."""
        self._backend.initialize_all()

    def load(self) -> list[Sensor]:
        """Build one Device per reported status and return all entities."""
        self.devices.clear()
        for report in self._backend.read_status():
            device = Device.from_report(report, self._backend, self._config)
            self._logger.info("Loaded %s", device.device_info())
            self.devices.append(device)
        return [entity for device in self.devices for entity in device.entities()]

    def sensors(self) -> list[Sensor]:
        """Return the read-only entities of every device."""
        return [sensor for device in self.devices for sensor in device.sensors()]

    def controls(self) -> list[Control]:
        """Return the control entities of every device."""
        return [control for device in self.devices for control in device.controls()]

    def update(self) -> None:
        """Refresh every device, continuing past devices that fail."""
        for device in self.devices:
            try:
                device.refresh()
            except LiquidfanError:
                self._logger.exception(
                    "Device %s failed to refresh", device.address
                )
                continue
            if self._config.get_bool(DEBUG_FLAG):
                self._logger.debug("%s", device.device_info())

    def close(self) -> None:
        """Forget every device."""
        self.devices.clear()
