from datetime import date

import pytest

from src.worked_hours.worked_hours.attendance.model import AttendanceRecord
from src.worked_hours.worked_hours.core.exceptions import IncompleteRecord, InvalidDate, InvalidTimeFormat
from src.worked_hours.worked_hours.payroll.calculator.nocturnal_calculator import (
    NocturnalDifferentialCalculator,
    compute_worked_metrics,
)
from src.worked_hours.worked_hours.payroll.rates import RateConfig
from src.worked_hours.worked_hours.schedules.model import ShiftPlan
from src.worked_hours.worked_hours.timeline.interval import apply_crossover, resolve_time_point

DAY = date(2026, 2, 2)


def record(entry, exit_, rate=None):
    return AttendanceRecord(work_date=DAY, entry_time=entry, exit_time=exit_, embedded_rate=rate)


def test_day_shift_without_plan_is_all_normal():
    m = compute_worked_metrics(record("08:00", "17:00"))

    assert m.normal_hours == 9.0
    assert m.overtime_hours == 0
    assert m.nocturnal_hours == 0
    assert m.late_arrival_minutes == 0
    assert m.total_hours == 9.0


def test_night_shift_crossing_midnight_is_all_nocturnal():
    m = compute_worked_metrics(record("22:00", "06:00"))

    assert m.nocturnal_hours == 8.0
    assert m.normal_hours == 0
    assert m.overtime_hours == 0
    assert m.total_hours == 8.0


def test_early_arrival_is_clamped_and_overtime_split():
    plan = ShiftPlan(start="08:00", end="17:00")
    m = compute_worked_metrics(record("07:30", "19:00"), plan)

    assert m.overtime_hours == 2.0
    assert m.normal_hours == 9.0
    assert m.nocturnal_hours == 0
    assert m.late_arrival_minutes == 0
    assert m.total_hours == 11.0


def test_late_arrival_reduces_normal_hours():
    plan = ShiftPlan(start="08:00", end="17:00")
    m = compute_worked_metrics(record("08:45", "17:00"), plan)

    assert m.late_arrival_minutes == 45
    assert m.normal_hours == 8.25
    assert m.overtime_hours == 0
    assert m.total_hours == 8.25


def test_slot_plan_behaves_like_explicit_window():
    plan = ShiftPlan(occupied_slots=frozenset(range(16, 34)))  # 08:00-17:00
    m = compute_worked_metrics(record("07:30", "19:00"), plan)

    assert (m.normal_hours, m.overtime_hours, m.total_hours) == (9.0, 2.0, 11.0)


def test_evening_overlap_is_split_between_normal_and_nocturnal():
    m = compute_worked_metrics(record("15:00", "23:00"))

    assert m.normal_hours == 4.0
    assert m.nocturnal_hours == 4.0


def test_time_after_plan_inside_nocturnal_window_is_not_overtime():
    plan = ShiftPlan(start="14:00", end="22:00")
    m = compute_worked_metrics(record("14:00", "23:00"), plan)

    assert m.overtime_hours == 0
    assert m.normal_hours == 5.0
    assert m.nocturnal_hours == 4.0


def test_nocturnal_minutes_before_plan_start_are_kept():
    plan = ShiftPlan(start="19:30", end="03:00")
    m = compute_worked_metrics(record("19:10", "03:00"), plan)

    assert m.nocturnal_hours == 470 / 60
    assert m.normal_hours == 0
    assert m.late_arrival_minutes == 0


def test_late_arrival_with_overtime():
    plan = ShiftPlan(start="08:00", end="17:00")
    m = compute_worked_metrics(record("09:00", "18:30"), plan)

    assert m.late_arrival_minutes == 60
    assert m.normal_hours == 8.0
    assert m.overtime_hours == 1.5


def test_early_morning_is_diurnal_for_the_record_date():
    plan = ShiftPlan(start="06:00", end="08:00")
    m = compute_worked_metrics(record("06:00", "12:00"), plan)

    assert m.nocturnal_hours == 0
    assert m.overtime_hours == 4.0
    assert m.normal_hours == 2.0


def test_leaving_before_counted_start_yields_zero():
    plan = ShiftPlan(start="08:00", end="17:00")
    m = compute_worked_metrics(record("05:00", "06:00"), plan)

    assert m.total_hours == 0
    assert m.late_arrival_minutes == 0
    assert m.cost == 0


def test_grace_window_is_configurable():
    plan = ShiftPlan(start="08:00", end="17:00")
    calc = NocturnalDifferentialCalculator(grace_minutes=0)
    m = calc.compute(record("07:30", "19:00"), plan)

    assert m.total_hours == 11.0
    assert m.normal_hours == 9.0


def test_cost_uses_multipliers_of_embedded_rate():
    plan = ShiftPlan(start="08:00", end="17:00")
    m = compute_worked_metrics(record("07:30", "19:00", rate=10), plan)

    assert m.cost == pytest.approx(9 * 10 + 2 * 15)


def test_cost_for_night_shift_uses_nocturnal_rate():
    m = compute_worked_metrics(record("22:00", "06:00"), rates=RateConfig(base_rate=10))
    assert m.cost == pytest.approx(8 * 13.5)

    m = compute_worked_metrics(record("22:00", "06:00"), rates=RateConfig(base_rate=10, nocturnal_rate=20))
    assert m.cost == pytest.approx(160)


def test_cost_is_zero_without_any_rate():
    assert compute_worked_metrics(record("08:00", "17:00")).cost == 0


def test_open_record_cannot_be_metered():
    with pytest.raises(IncompleteRecord):
        compute_worked_metrics(record("08:00", None))


def test_malformed_punch_raises():
    with pytest.raises(InvalidTimeFormat):
        compute_worked_metrics(record("8h", "17:00"))
    with pytest.raises(InvalidDate):
        compute_worked_metrics(AttendanceRecord(work_date="02-02-2026", entry_time="08:00", exit_time="17:00"))


@pytest.mark.parametrize(
    "entry,exit_,plan",
    [
        ("08:00", "17:00", None),
        ("22:00", "06:00", None),
        ("07:30", "19:00", ShiftPlan(start="08:00", end="17:00")),
        ("08:45", "17:00", ShiftPlan(start="08:00", end="17:00")),
        ("18:00", "07:00", ShiftPlan(start="20:00", end="05:00")),
        ("05:10", "20:20", ShiftPlan(start="06:00", end="14:00")),
        ("13:07", "13:07", None),
        ("23:59", "00:01", ShiftPlan(occupied_slots=frozenset({46, 47}))),
    ],
)
def test_totals_are_consistent(entry, exit_, plan):
    m = compute_worked_metrics(record(entry, exit_), plan)
    raw = apply_crossover(resolve_time_point(DAY, entry), resolve_time_point(DAY, exit_))

    assert m.total_hours == m.normal_hours + m.overtime_hours + m.nocturnal_hours
    assert min(m.normal_hours, m.overtime_hours, m.nocturnal_hours, m.late_arrival_minutes) >= 0
    assert m.total_hours <= raw.minutes / 60
    if plan is None:
        assert m.total_hours == raw.minutes / 60
    elif plan.has_window:
        planned_start = resolve_time_point(DAY, plan.start)
        entry_point = resolve_time_point(DAY, entry)
        if entry_point >= planned_start:
            assert m.total_hours == raw.minutes / 60
        else:
            assert m.total_hours < raw.minutes / 60
