from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import (
    DAILY_HOURS_LIMIT,
    DAILY_HOURS_LIMIT_WITH_LUNCH,
    WEEKLY_BASE_HOURS_LIMIT,
    WEEKLY_EXTRA_HOURS_LIMIT,
    WEEKLY_TOTAL_HOURS_LIMIT,
)
from ..core.enums import LimitKind
from .model import LimitFinding, WeeklyOverview


@dataclass(frozen=True)
class ScheduleLimits:
    daily_hours: float = DAILY_HOURS_LIMIT
    daily_hours_with_lunch: float = DAILY_HOURS_LIMIT_WITH_LUNCH
    weekly_base_hours: float = WEEKLY_BASE_HOURS_LIMIT
    weekly_extra_hours: float = WEEKLY_EXTRA_HOURS_LIMIT
    weekly_total_hours: float = WEEKLY_TOTAL_HOURS_LIMIT

    @classmethod
    def from_mapping(cls, data: dict | None) -> "ScheduleLimits":
        if not data:
            return cls()
        known = {k: float(v) for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


def check_limits(overview: WeeklyOverview, limits: ScheduleLimits | None = None) -> list[LimitFinding]:
    """List every daily/weekly limit the overview exceeds (informational only)."""
    limits = limits or ScheduleLimits()
    findings: list[LimitFinding] = []

    for day in overview.per_day:
        day_hours = day.total_hours + day.overtime_hours
        cap = limits.daily_hours_with_lunch if day.lunch is not None else limits.daily_hours
        if day_hours > cap:
            findings.append(LimitFinding(LimitKind.DAILY_TOTAL, hours=day_hours, limit=cap, work_date=day.work_date))

    if overview.weekly_base > limits.weekly_base_hours:
        findings.append(LimitFinding(LimitKind.WEEKLY_BASE, hours=overview.weekly_base, limit=limits.weekly_base_hours))
    if overview.weekly_extra > limits.weekly_extra_hours:
        findings.append(LimitFinding(LimitKind.WEEKLY_EXTRA, hours=overview.weekly_extra, limit=limits.weekly_extra_hours))
    if overview.weekly_total > limits.weekly_total_hours:
        findings.append(LimitFinding(LimitKind.WEEKLY_TOTAL, hours=overview.weekly_total, limit=limits.weekly_total_hours))

    return findings
