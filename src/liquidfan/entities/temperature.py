"""Liquid temperature probe."""

import logging

from pydantic import Field

from liquidfan.base.capabilities import LIQUID_TEMPERATURE_KEY
from liquidfan.base.sensor import Sensor
from liquidfan.base.status import StatusReport


class LiquidTemperature(Sensor):
    """Coolant temperature reported by the pump head."""

    key: str = Field(default=LIQUID_TEMPERATURE_KEY, frozen=True)
    unit: str = Field(default="°C")

    @classmethod
    def from_report(
        cls, report: StatusReport, logger: logging.Logger | None = None
    ) -> "LiquidTemperature":
        sensor = cls(
            id=f"{report.address}-liqtmp",
            name=f"Liquid Temp. - {report.description}",
            address=report.address,
            logger=logger,
        )
        sensor.load_from_status(report)
        return sensor
