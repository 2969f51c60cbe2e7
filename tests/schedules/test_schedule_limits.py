from datetime import date

from src.worked_hours.worked_hours.core.enums import LimitKind
from src.worked_hours.worked_hours.schedules.decoder import build_weekly_overview
from src.worked_hours.worked_hours.schedules.limits import ScheduleLimits, check_limits
from src.worked_hours.worked_hours.schedules.model import LunchWindow, ShiftPlan

MONDAY = date(2026, 2, 2)


def week(plan_for_day):
    return build_weekly_overview(MONDAY, {date(2026, 2, 2 + i): plan_for_day(i) for i in range(7)})


def test_regular_week_has_no_findings():
    overview = week(lambda i: ShiftPlan(start="08:00", end="16:00") if i < 5 else None)
    assert check_limits(overview) == []


def test_daily_limit_depends_on_lunch():
    plans = {
        MONDAY: ShiftPlan(start="08:00", end="18:30"),
        date(2026, 2, 3): ShiftPlan(start="08:00", end="18:30", lunch=LunchWindow("12:00", "13:00")),
    }
    findings = check_limits(build_weekly_overview(MONDAY, plans))

    assert [(f.kind, f.work_date, f.limit) for f in findings] == [(LimitKind.DAILY_TOTAL, MONDAY, 10)]


def test_weekly_limits():
    overview = week(lambda i: ShiftPlan(start="08:00", end="16:00", recorded_overtime_hours=2) if i < 6 else None)
    kinds = {f.kind for f in check_limits(overview)}

    # 48h base, 12h extra, 60h total
    assert kinds == {LimitKind.WEEKLY_BASE, LimitKind.WEEKLY_TOTAL}


def test_limits_from_settings_mapping():
    limits = ScheduleLimits.from_mapping({"weekly_extra_hours": 4, "unknown": 1})
    assert limits.weekly_extra_hours == 4
    assert limits.weekly_base_hours == 44
    assert ScheduleLimits.from_mapping({}) == ScheduleLimits()
