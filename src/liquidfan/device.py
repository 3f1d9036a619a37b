"""Liquid cooler device aggregate."""

import logging
from typing import Any

from pydantic import Field, PrivateAttr

from liquidfan.backends.base import Backend, StatusSource
from liquidfan.base.capabilities import Capabilities, detect_capabilities
from liquidfan.base.entity import Entity
from liquidfan.base.errors import DeviceNotRespondingError, LiquidctlError
from liquidfan.base.sensor import Control, Sensor
from liquidfan.base.status import StatusReport
from liquidfan.config import Config
from liquidfan.entities import (
    FanControl,
    FanSpeed,
    LiquidTemperature,
    PumpDuty,
    PumpSpeed,
)


class Device(Entity):
    """One physical cooler and the entities derived from its status.

    The capability set is detected from the first status report and
    fixed for the lifetime of the device. Each refresh pushes a new
    report into every entity; entities are never added or removed
    afterwards.

    Refresh order is temperature, pump speed, pump duty, fan speeds,
    fan controls.
    """

    address: str = Field(description="Device address used for queries")
    description: str = Field(default="", description="Device model description")
    capabilities: Capabilities = Field(description="Detected roles")

    temperature: LiquidTemperature | None = None
    pump_speed: PumpSpeed | None = None
    pump_duty: PumpDuty | None = None
    fan_speeds: list[FanSpeed] = Field(default_factory=list)
    fan_controls: list[FanControl] = Field(default_factory=list)

    _source: StatusSource = PrivateAttr()
    _logger: logging.Logger = PrivateAttr()

    def __init__(
        self,
        source: StatusSource,
        logger: logging.Logger | None = None,
        **data: Any,
    ) -> None:
        """Initialize the device with the source used by refresh()."""
        super().__init__(**data)
        self._source = source
        self._logger = logger or logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}."
            f"{self.address}"
        )

    @classmethod
    def from_report(
        cls,
        report: StatusReport,
        backend: Backend,
        config: Config | None = None,
        logger: logging.Logger | None = None,
    ) -> "Device":
        """Detect capabilities and build entities from a first report.

        Args:
            report: First status report of the device
            backend: Status source for refresh and command sink for
                the controls
            config: Debug flags passed to the controls
            logger: Shared by the device and its entities; a per-object
                logger is created when omitted

        Returns:
            Device with its entities loaded from report
        """
        logger = logger or logging.getLogger(
            f"{cls.__module__}.{cls.__name__}.{report.address}"
        )
        capabilities = detect_capabilities(report, logger)

        fan_speeds = []
        fan_controls = []
        for channel in capabilities.fan_channels:
            fan_speeds.append(FanSpeed.from_report(report, channel, logger))
            fan_controls.append(
                FanControl.from_report(report, channel, backend, config, logger)
            )

        return cls(
            source=backend,
            logger=logger,
            id=report.address,
            name=report.description or report.address,
            address=report.address,
            description=report.description,
            capabilities=capabilities,
            temperature=(
                LiquidTemperature.from_report(report, logger)
                if capabilities.has_temperature
                else None
            ),
            pump_speed=(
                PumpSpeed.from_report(report, logger)
                if capabilities.has_pump_speed
                else None
            ),
            pump_duty=(
                PumpDuty.from_report(report, backend, config, logger)
                if capabilities.has_pump_duty
                else None
            ),
            fan_speeds=fan_speeds,
            fan_controls=fan_controls,
        )

    def refresh(self) -> None:
        """Query the device and push the new report into every entity.

        Raises:
            DeviceNotRespondingError: the source returned no report
        """
        try:
            reports = self._source.read_status(self.address)
        except LiquidctlError as err:
            msg = f"Device {self.address} not showing up"
            raise DeviceNotRespondingError(msg) from err
        if not reports:
            msg = f"Device {self.address} not showing up"
            raise DeviceNotRespondingError(msg)
        self.load_from_status(reports[0])

    def load_from_status(self, report: StatusReport) -> None:
        """Refresh every entity from a status report."""
        for entity in self.entities():
            entity.load_from_status(report)

    def sensors(self) -> list[Sensor]:
        """Return the read-only entities in refresh order."""
        sensors: list[Sensor] = []
        if self.temperature is not None:
            sensors.append(self.temperature)
        if self.pump_speed is not None:
            sensors.append(self.pump_speed)
        sensors.extend(self.fan_speeds)
        return sensors

    def controls(self) -> list[Control]:
        """Return the control entities in refresh order."""
        controls: list[Control] = []
        if self.pump_duty is not None:
            controls.append(self.pump_duty)
        controls.extend(self.fan_controls)
        return controls

    def entities(self) -> list[Sensor]:
        """Return all entities in refresh order."""
        entities: list[Sensor] = []
        if self.temperature is not None:
            entities.append(self.temperature)
        if self.pump_speed is not None:
            entities.append(self.pump_speed)
        if self.pump_duty is not None:
            entities.append(self.pump_duty)
        entities.extend(self.fan_speeds)
        entities.extend(self.fan_controls)
        return entities

    def device_info(self) -> str:
        """Return a human-readable summary of the current readings."""
        info = f"Device @ {self.address}"
        if self.temperature is not None:
            info += f", Liquid @ {self.temperature.value}"
        if self.pump_speed is not None:
            info += f", Pump @ {self.pump_speed.value}"
        if self.pump_duty is not None:
            info += f"({self.pump_duty.value})"
        if self.fan_speeds:
            info += f",\n Fans @ {self._fan_statuses()}"
        return info

    def _fan_statuses(self) -> str:
        return ",\n".join(
            f"{{ {speed.name} : {speed.value}{speed.unit}, "
            f"Duty: {control.value}{control.unit} }}"
            for speed, control in zip(self.fan_speeds, self.fan_controls)
        )
