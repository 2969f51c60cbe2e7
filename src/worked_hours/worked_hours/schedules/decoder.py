from __future__ import annotations

import logging
from datetime import date
from functools import reduce
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import week_dates
from ..core.constants import SLOT_MINUTES, SLOTS_PER_DAY
from ..core.enums import BlockKind
from ..core.exceptions import InvalidTimeFormat
from ..timeline.interval import apply_crossover, resolve_time_point
from .model import DayOverview, ShiftBlock, ShiftPlan, WeeklyOverview

logger = logging.getLogger(__name__)


def slot_to_hhmm(slot: int) -> str:
    """Wall-clock start of a half-hour slot; slot 48 (end of day) renders as 00:00."""
    minutes = (slot * SLOT_MINUTES) % (24 * 60)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def validate_slots(slots: Iterable[int]) -> list[int]:
    out = []
    for s in slots:
        if isinstance(s, bool) or not isinstance(s, int) or not 0 <= s < SLOTS_PER_DAY:
            raise InvalidTimeFormat(f"Slot index must be an integer in [0, {SLOTS_PER_DAY}): {s!r}")
        out.append(s)
    return sorted(set(out))


def decode_slot_envelope(slots: Iterable[int]) -> Optional[ShiftBlock]:
    """Single base block from the first to the last occupied slot.

    Gaps inside the set are not represented in start/end; hours count only
    the occupied slots (0.5h each).
    """
    ordered = validate_slots(slots)
    if not ordered:
        return None
    return ShiftBlock(
        start=slot_to_hhmm(ordered[0]),
        end=slot_to_hhmm(ordered[-1] + 1),
        hours=len(ordered) * SLOT_MINUTES / 60,
        kind=BlockKind.BASE,
    )


def slot_runs(slots: Iterable[int]) -> list[ShiftBlock]:
    """Maximal contiguous runs of occupied slots, one base block per run."""
    runs: list[tuple[int, int]] = []
    for s in validate_slots(slots):
        if runs and s == runs[-1][1]:
            runs[-1] = (runs[-1][0], s + 1)
        else:
            runs.append((s, s + 1))

    return [
        ShiftBlock(
            start=slot_to_hhmm(first),
            end=slot_to_hhmm(last),
            hours=(last - first) * SLOT_MINUTES / 60,
            kind=BlockKind.BASE,
        )
        for first, last in runs
    ]


def planned_window(plan: Optional[ShiftPlan]) -> Optional[tuple[str, str]]:
    """(start, end) "HH:MM" of a plan: the explicit window, else the slot envelope."""
    if plan is None:
        return None
    if plan.has_window:
        return plan.start, plan.end
    if plan.occupied_slots:
        envelope = decode_slot_envelope(plan.occupied_slots)
        return envelope.start, envelope.end
    return None


def _base_block(work_date: date, plan: ShiftPlan) -> Optional[ShiftBlock]:
    if plan.has_window:
        interval = apply_crossover(
            resolve_time_point(work_date, plan.start),
            resolve_time_point(work_date, plan.end),
        )
        return ShiftBlock(start=plan.start, end=plan.end, hours=interval.minutes / 60, kind=BlockKind.BASE)
    if plan.occupied_slots:
        return decode_slot_envelope(plan.occupied_slots)
    return None


def _overtime_block(work_date: date, base: Optional[ShiftBlock], hours: float) -> ShiftBlock:
    if base is None:
        return ShiftBlock(start=None, end=None, hours=hours, kind=BlockKind.EXTRA)

    anchor = resolve_time_point(work_date, base.end)
    end = anchor.plus_minutes(int(round(hours * 60)))
    return ShiftBlock(start=base.end, end=end.hhmm(), hours=hours, kind=BlockKind.EXTRA)


def build_day_overview(work_date: date, plan: Optional[ShiftPlan]) -> DayOverview:
    if plan is None:
        return DayOverview(work_date=work_date, total_hours=0.0, overtime_hours=0.0)

    base = _base_block(work_date, plan)
    blocks = [base] if base is not None else []

    overtime = float(plan.recorded_overtime_hours or 0)
    if overtime > 0:
        blocks.append(_overtime_block(work_date, base, overtime))

    return DayOverview(
        work_date=work_date,
        total_hours=base.hours if base is not None else 0.0,
        overtime_hours=overtime,
        blocks=tuple(blocks),
        lunch=plan.lunch,
    )


def build_weekly_overview(
    week_start: date,
    plans: Mapping[date, ShiftPlan],
    *,
    employee_id: Optional[str] = None,
) -> WeeklyOverview:
    """Fold the seven days starting at ``week_start`` into a WeeklyOverview.

    Days without a plan contribute an empty entry and zero hours.
    """

    def step(acc, work_date):
        days, base, extra = acc
        day = build_day_overview(work_date, plans.get(work_date))
        return days + (day,), base + day.total_hours, extra + day.overtime_hours

    days, weekly_base, weekly_extra = reduce(step, week_dates(week_start), ((), 0.0, 0.0))
    logger.debug("weekly overview %s employee=%s base=%s extra=%s", week_start, employee_id, weekly_base, weekly_extra)
    return WeeklyOverview(per_day=days, weekly_base=weekly_base, weekly_extra=weekly_extra, employee_id=employee_id)
