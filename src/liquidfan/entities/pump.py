"""Pump speed sensor and pump duty control."""

import logging

from pydantic import Field

from liquidfan.backends.base import CommandSink
from liquidfan.base.capabilities import PUMP_SPEED_KEY
from liquidfan.base.estimator import DutyEstimator
from liquidfan.base.parsing import parse_reading
from liquidfan.base.sensor import Control, Sensor
from liquidfan.base.status import StatusReport
from liquidfan.config import Config

DEFAULT_PUMP_DUTY = 60.0


class PumpSpeed(Sensor):
    """Pump rotation speed."""

    key: str = Field(default=PUMP_SPEED_KEY, frozen=True)
    unit: str = Field(default="rpm")

    @classmethod
    def from_report(
        cls, report: StatusReport, logger: logging.Logger | None = None
    ) -> "PumpSpeed":
        sensor = cls(
            id=f"{report.address}-pumprpm",
            name=f"Pump - {report.description}",
            address=report.address,
            logger=logger,
        )
        sensor.load_from_status(report)
        return sensor


class PumpDuty(Control):
    """Pump duty control.

    The pump reports its speed but not its duty, so the value shown to
    the host is estimated from the speed through the calibration table.
    Writes go straight to the device as a percentage; there is no
    reverse lookup.
    """

    key: str = Field(default=PUMP_SPEED_KEY, frozen=True)
    unit: str = Field(default="%")
    estimator: DutyEstimator = Field(
        default_factory=DutyEstimator,
        description="Speed to duty calibration",
    )

    @classmethod
    def from_report(
        cls,
        report: StatusReport,
        commands: CommandSink,
        config: Config | None = None,
        logger: logging.Logger | None = None,
    ) -> "PumpDuty":
        control = cls(
            commands=commands,
            config=config,
            logger=logger,
            id=f"{report.address}-pumpduty",
            name=f"Pump Control - {report.description}",
            address=report.address,
        )
        control.load_from_status(report)
        return control

    def load_from_status(self, report: StatusReport) -> None:
        """Estimate the duty from the reported pump speed."""
        entry = self._find_entry(report)
        if entry is None or entry.value is None:
            return

        reading = parse_reading(entry.value)
        if reading is None:
            self._logger.warning(
                "%s, Warning: Could not parse %r as float, defaulting..",
                self.name,
                entry.value,
            )
            reading = 0.0
        self.value = float(self.estimator.estimate(reading))

    def set(self, value: float) -> None:
        self._commands.set_pump_duty(self.address, int(value))

    def reset(self) -> None:
        self.set(DEFAULT_PUMP_DUTY)
