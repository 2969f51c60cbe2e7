from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional

from ..core.constants import DAYS_PER_WEEK
from .decoder import build_weekly_overview, slot_runs
from .limits import ScheduleLimits, check_limits
from .model import DayOverview, LimitFinding, ShiftBlock, ShiftPlan, WeeklyOverview

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeeklyReport:
    overview: WeeklyOverview
    findings: list[LimitFinding]
    plans: Mapping[date, ShiftPlan]


class WeeklyOverviewService:
    def __init__(self, *, limits: Optional[ScheduleLimits] = None):
        self._limits = limits or ScheduleLimits()

    def build(
        self,
        *,
        week_start: date,
        plans: Mapping[date, ShiftPlan],
        employee_id: Optional[str] = None,
    ) -> WeeklyReport:
        outside = [d for d in plans if (d - week_start).days not in range(DAYS_PER_WEEK)]
        if outside:
            logger.info("ignoring %d plan(s) outside week starting %s", len(outside), week_start)

        overview = build_weekly_overview(week_start, plans, employee_id=employee_id)
        findings = check_limits(overview, self._limits)
        for f in findings:
            logger.warning(
                "schedule limit exceeded employee=%s kind=%s hours=%s limit=%s date=%s",
                employee_id,
                f.kind.value,
                f.hours,
                f.limit,
                f.work_date,
            )
        return WeeklyReport(overview=overview, findings=findings, plans=plans)

    def to_dict(self, report: WeeklyReport) -> dict:
        overview = report.overview
        return {
            "employee_id": overview.employee_id,
            "per_day": [self._day_to_dict(d, report.plans.get(d.work_date)) for d in overview.per_day],
            "weekly_base": overview.weekly_base,
            "weekly_extra": overview.weekly_extra,
            "weekly_total": overview.weekly_total,
            "limit_findings": [
                {
                    "kind": f.kind.value,
                    "hours": f.hours,
                    "limit": f.limit,
                    "date": f.work_date.strftime("%Y-%m-%d") if f.work_date else None,
                }
                for f in report.findings
            ],
        }

    def _day_to_dict(self, day: DayOverview, plan: Optional[ShiftPlan]) -> dict:
        # Gap-accurate runs only exist for slot-encoded days without an explicit window.
        runs = []
        if plan is not None and not plan.has_window and plan.occupied_slots:
            runs = [self._block_to_dict(b) for b in slot_runs(plan.occupied_slots)]

        return {
            "date": day.work_date.strftime("%Y-%m-%d"),
            "total_hours": day.total_hours,
            "overtime_hours": day.overtime_hours,
            "lunch": {"start": day.lunch.start, "end": day.lunch.end} if day.lunch else None,
            "blocks": [self._block_to_dict(b) for b in day.blocks],
            "slot_runs": runs,
        }

    @staticmethod
    def _block_to_dict(block: ShiftBlock) -> dict:
        return {"start": block.start, "end": block.end, "hours": block.hours, "kind": block.kind.value}
