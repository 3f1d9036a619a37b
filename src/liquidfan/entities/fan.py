"""Per-channel fan speed sensors and fan duty controls."""

import logging

from pydantic import Field

from liquidfan.backends.base import CommandSink
from liquidfan.base.parsing import NO_CHANNEL, parse_reading
from liquidfan.base.sensor import Control, Sensor
from liquidfan.base.status import StatusReport
from liquidfan.config import DEBUG_FLAG, Config

DEFAULT_FAN_DUTY = 50.0


def fan_key(channel: int, reading: str) -> str:
    """Return the status key of a fan reading, e.g. "Fan 2 duty"."""
    if channel == NO_CHANNEL:
        return f"Fan {reading}"
    return f"Fan {channel} {reading}"


def _fan_label(channel: int) -> str:
    return "Fan" if channel == NO_CHANNEL else f"Fan {channel}"


class FanSpeed(Sensor):
    """Rotation speed of one fan channel."""

    channel: int = Field(default=NO_CHANNEL, frozen=True, description="Fan index")
    unit: str = Field(default="rpm")

    @classmethod
    def from_report(
        cls,
        report: StatusReport,
        channel: int,
        logger: logging.Logger | None = None,
    ) -> "FanSpeed":
        sensor = cls(
            id=f"{report.address}-fanRPM{channel}",
            name=f"{_fan_label(channel)} - {report.description}",
            address=report.address,
            key=fan_key(channel, "speed"),
            channel=channel,
            logger=logger,
        )
        sensor.load_from_status(report)
        return sensor


class FanControl(Control):
    """Duty control of one fan channel.

    Parse failures are only logged when the debug flag is set, and never
    change the value.
    """

    channel: int = Field(default=NO_CHANNEL, frozen=True, description="Fan index")
    value: float | None = Field(default=DEFAULT_FAN_DUTY)
    unit: str = Field(default="%")

    @classmethod
    def from_report(
        cls,
        report: StatusReport,
        channel: int,
        commands: CommandSink,
        config: Config | None = None,
        logger: logging.Logger | None = None,
    ) -> "FanControl":
        control = cls(
            commands=commands,
            config=config,
            logger=logger,
            id=f"{report.address}-fanCtrl{channel}",
            name=f"{_fan_label(channel)} Control - {report.description}",
            address=report.address,
            key=fan_key(channel, "duty"),
            channel=channel,
        )
        control.load_from_status(report)
        return control

    def load_from_status(self, report: StatusReport) -> None:
        """Refresh the duty reported for this channel."""
        entry = self._find_entry(report)
        if entry is None:
            return
        self._apply_unit(entry)
        if entry.value is None:
            return

        reading = parse_reading(entry.value)
        if reading is None:
            if self._config.get_bool(DEBUG_FLAG):
                self._logger.warning(
                    "%s, Warning: Could not parse %r as float, ignoring..",
                    self.name,
                    entry.value,
                )
            return
        self.value = reading

    def set(self, value: float) -> None:
        if self.channel == NO_CHANNEL:
            self._commands.set_fan_duty(self.address, int(value))
        else:
            self._commands.set_fan_duty(
                self.address, int(value), channel=self.channel
            )

    def reset(self) -> None:
        self.set(DEFAULT_FAN_DUTY)
