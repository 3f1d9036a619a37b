"""Pump duty estimation from the reported pump speed."""

from pydantic import BaseModel, ConfigDict, Field

# Highest pump speed observed at 100% duty
MAX_PUMP_RPM = 2870

# Measured pump speed (rpm) at each duty setting (%). The device never
# reports its duty, so it is read back through this table.
PUMP_RPM_TO_DUTY: dict[int, int] = {
    1200: 40, 1206: 41, 1212: 42, 1218: 43, 1224: 44,
    1230: 45, 1236: 46, 1242: 47, 1248: 48, 1254: 49,
    1260: 50, 1313: 51, 1366: 52, 1419: 53, 1472: 54,
    1525: 55, 1578: 56, 1631: 57, 1684: 58, 1737: 59,
    1790: 60, 1841: 61, 1892: 62, 1943: 63, 1994: 64,
    2045: 65, 2096: 66, 2147: 67, 2198: 68, 2249: 69,
    2300: 70, 2330: 71, 2360: 72, 2390: 73, 2420: 74,
    2450: 75, 2480: 76, 2510: 77, 2540: 78, 2570: 79,
    2600: 80, 2618: 81, 2636: 82, 2654: 83, 2672: 84,
    2690: 85, 2708: 86, 2726: 87, 2744: 88, 2762: 89,
    2780: 90, 2789: 91, 2798: 92, 2807: 93, 2816: 94,
    2825: 95, 2834: 96, 2843: 97, 2852: 98, 2861: 99,
    MAX_PUMP_RPM: 100,
}


class DutyEstimator(BaseModel):
    """Nearest-neighbour lookup from speed readings to duty percentages.

    The table is scanned linearly in insertion order and the first entry
    with the smallest distance to the reading wins, so equidistant
    readings resolve to the lower table entry when the table is sorted.
    """

    model_config = ConfigDict(frozen=True)

    table: dict[int, int] = Field(
        default_factory=lambda: dict(PUMP_RPM_TO_DUTY),
        min_length=1,
        description="Ordered mapping of speed (rpm) to duty (%)",
    )

    def estimate(self, rpm: float) -> int:
        """Return the duty of the table entry closest to rpm."""
        _, duty = min(self.table.items(), key=lambda item: abs(item[0] - rpm))
        return duty

    @property
    def max_rpm(self) -> int:
        """Return the highest speed in the table."""
        return max(self.table)
