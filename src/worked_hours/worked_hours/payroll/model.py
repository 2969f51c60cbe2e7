from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DailyMetricsResult:
    """Kết quả tính giờ công của một bản ghi chấm công.

    ``total_hours`` is always the sum of the three hour buckets.
    """

    normal_hours: float
    overtime_hours: float
    nocturnal_hours: float
    total_hours: float
    late_arrival_minutes: int
    cost: float

    @classmethod
    def from_minutes(
        cls,
        *,
        normal_minutes: int,
        overtime_minutes: int,
        nocturnal_minutes: int,
        late_arrival_minutes: int,
        cost: float,
    ) -> "DailyMetricsResult":
        normal = normal_minutes / 60
        overtime = overtime_minutes / 60
        nocturnal = nocturnal_minutes / 60
        return cls(
            normal_hours=normal,
            overtime_hours=overtime,
            nocturnal_hours=nocturnal,
            total_hours=normal + overtime + nocturnal,
            late_arrival_minutes=int(late_arrival_minutes),
            cost=cost,
        )

    def as_dict(self) -> dict:
        return {
            "normal_hours": round(self.normal_hours, 2),
            "overtime_hours": round(self.overtime_hours, 2),
            "nocturnal_hours": round(self.nocturnal_hours, 2),
            "total_hours": round(self.total_hours, 2),
            "late_arrival_minutes": self.late_arrival_minutes,
            "cost": round(self.cost, 2),
        }
