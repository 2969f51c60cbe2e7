from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, Optional

from ..core.enums import BlockKind, LimitKind


@dataclass(frozen=True)
class LunchWindow:
    start: Optional[str] = None
    end: Optional[str] = None


@dataclass(frozen=True)
class ShiftPlan:
    """Thực thể miền (domain): Ca dự kiến của một ngày.

    Either ``start``/``end`` ("HH:MM") or ``occupied_slots`` (half-hour
    indices in [0, 48)) describe the planned window. Overtime and lunch are
    annotations used by the weekly overview only.
    """

    start: Optional[str] = None
    end: Optional[str] = None
    occupied_slots: FrozenSet[int] = field(default_factory=frozenset)
    recorded_overtime_hours: float = 0.0
    lunch: Optional[LunchWindow] = None

    @property
    def has_window(self) -> bool:
        return bool(self.start and self.end)


@dataclass(frozen=True)
class ShiftBlock:
    start: Optional[str]
    end: Optional[str]
    hours: float
    kind: BlockKind


@dataclass(frozen=True)
class DayOverview:
    work_date: date
    total_hours: float
    overtime_hours: float
    blocks: tuple[ShiftBlock, ...] = ()
    lunch: Optional[LunchWindow] = None


@dataclass(frozen=True)
class WeeklyOverview:
    per_day: tuple[DayOverview, ...]
    weekly_base: float
    weekly_extra: float
    employee_id: Optional[str] = None

    @property
    def weekly_total(self) -> float:
        return self.weekly_base + self.weekly_extra


@dataclass(frozen=True)
class LimitFinding:
    kind: LimitKind
    hours: float
    limit: float
    work_date: Optional[date] = None
