from __future__ import annotations

import logging
from typing import Optional

from ...attendance.model import AttendanceRecord
from ...core.constants import DEFAULT_EARLY_GRACE_MINUTES
from ...core.exceptions import IncompleteRecord
from ...schedules.decoder import planned_window
from ...schedules.model import ShiftPlan
from ...timeline.interval import (
    Interval,
    TimePoint,
    apply_crossover,
    clamp_early_arrival,
    nocturnal_window,
    overlap_minutes,
    resolve_time_point,
)
from ..model import DailyMetricsResult
from ..rates import RateConfig, resolve_rates
from .base import WorkedMetricsCalculator

logger = logging.getLogger(__name__)


def _diurnal_minutes(start: TimePoint, end: TimePoint, nocturnal: Interval) -> int:
    span = Interval.between(start, end)
    if span is None:
        return 0
    return span.minutes - overlap_minutes(span, nocturnal)


class NocturnalDifferentialCalculator(WorkedMetricsCalculator):
    """Split one closed punch pair into normal / overtime / nocturnal hours.

    Rules:
    - exit not after entry means the exit is on the next day;
    - entry earlier than ``planned_start - grace`` is counted from that bound;
    - 19:00-06:00 (+1 day) is nocturnal, whether inside the plan or not;
    - diurnal time before the planned start is dropped, diurnal time after
      the planned end is overtime, the rest is normal;
    - late minutes count from the planned start to the counted entry.
    """

    def __init__(self, *, grace_minutes: int = DEFAULT_EARLY_GRACE_MINUTES):
        self._grace_minutes = int(grace_minutes)

    def compute(
        self,
        record: AttendanceRecord,
        plan: Optional[ShiftPlan] = None,
        rates: Optional[RateConfig] = None,
    ) -> DailyMetricsResult:
        if not record.entry_time or not record.exit_time:
            raise IncompleteRecord(f"Attendance record {record.record_id or record.work_date} has no exit punch")

        punch_in = resolve_time_point(record.work_date, record.entry_time)
        punch_out = resolve_time_point(record.work_date, record.exit_time)
        worked_span = apply_crossover(punch_in, punch_out)

        planned_start: Optional[TimePoint] = None
        planned_end: Optional[TimePoint] = None
        window = planned_window(plan)
        if window:
            planned = apply_crossover(
                resolve_time_point(record.work_date, window[0]),
                resolve_time_point(record.work_date, window[1]),
            )
            planned_start, planned_end = planned.start, planned.end

        counted_in = clamp_early_arrival(worked_span.start, planned_start, self._grace_minutes)
        out = worked_span.end

        worked = Interval.between(counted_in, out)
        nocturnal = nocturnal_window(record.work_date)
        worked_minutes = worked.minutes if worked else 0
        nocturnal_minutes = overlap_minutes(worked, nocturnal)
        diurnal_minutes = worked_minutes - nocturnal_minutes

        # Diurnal time before the plan starts is not paid; nocturnal time is.
        if planned_start is not None:
            pre_plan = _diurnal_minutes(counted_in, min(planned_start, out), nocturnal)
            diurnal_minutes = max(0, diurnal_minutes - pre_plan)

        overtime_minutes = 0
        if planned_end is not None:
            post_plan = _diurnal_minutes(max(planned_end, counted_in), out, nocturnal)
            overtime_minutes = min(diurnal_minutes, post_plan)

        normal_minutes = diurnal_minutes - overtime_minutes

        late_minutes = 0
        if planned_start is not None:
            late_minutes = max(0, planned_start.minutes_until(counted_in))

        resolved = resolve_rates(record, rates)
        cost = (
            normal_minutes / 60 * resolved.base_rate
            + overtime_minutes / 60 * resolved.extra_rate
            + nocturnal_minutes / 60 * resolved.nocturnal_rate
        )

        logger.debug(
            "metrics %s %s-%s: normal=%s overtime=%s nocturnal=%s late=%s",
            record.work_date,
            record.entry_time,
            record.exit_time,
            normal_minutes,
            overtime_minutes,
            nocturnal_minutes,
            late_minutes,
        )
        return DailyMetricsResult.from_minutes(
            normal_minutes=normal_minutes,
            overtime_minutes=overtime_minutes,
            nocturnal_minutes=nocturnal_minutes,
            late_arrival_minutes=late_minutes,
            cost=round(cost, 2),
        )


def compute_worked_metrics(
    record: AttendanceRecord,
    plan: Optional[ShiftPlan] = None,
    rates: Optional[RateConfig] = None,
    *,
    grace_minutes: int = DEFAULT_EARLY_GRACE_MINUTES,
) -> DailyMetricsResult:
    return NocturnalDifferentialCalculator(grace_minutes=grace_minutes).compute(record, plan, rates)
