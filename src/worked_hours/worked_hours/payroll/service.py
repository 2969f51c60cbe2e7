from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_duration
from ..core.exceptions import ValidationError
from ..schedules.model import ShiftPlan
from .calculator.base import WorkedMetricsCalculator
from .calculator.nocturnal_calculator import NocturnalDifferentialCalculator
from .rates import RateConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkedEntry:
    record: AttendanceRecord
    plan: Optional[ShiftPlan] = None


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]
    skipped: list[dict]


class WorkedHoursReportService:
    def __init__(self, *, calculator: Optional[WorkedMetricsCalculator] = None):
        self._calculator = calculator or NocturnalDifferentialCalculator()

    def build_report(self, entries: Iterable[WorkedEntry], *, rates: Optional[RateConfig] = None) -> ReportData:
        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []
        skipped: list[dict] = []

        for e in entries:
            r = e.record
            try:
                metrics = self._calculator.compute(r, e.plan, rates)
            except ValidationError as exc:
                logger.warning("skipping attendance record %s (%s): %s", r.record_id, r.work_date, exc)
                skipped.append(
                    {
                        "record_id": r.record_id,
                        "employee_id": r.employee_id,
                        "work_date": r.work_date.strftime("%Y-%m-%d"),
                        "reason": str(exc),
                    }
                )
                continue

            out_rows.append(
                {
                    "record_id": r.record_id,
                    "employee_id": r.employee_id,
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "entry": r.entry_time,
                    "exit": r.exit_time,
                    "worked_hours": format_duration(metrics.total_hours * 60),
                    **metrics.as_dict(),
                }
            )

            key = r.employee_id or "-"
            s = summary_map.get(key)
            if not s:
                s = {
                    "employee_id": r.employee_id,
                    "normal_hours": 0.0,
                    "overtime_hours": 0.0,
                    "nocturnal_hours": 0.0,
                    "late_arrival_minutes": 0,
                    "cost": 0.0,
                }
                summary_map[key] = s
            s["normal_hours"] += metrics.normal_hours
            s["overtime_hours"] += metrics.overtime_hours
            s["nocturnal_hours"] += metrics.nocturnal_hours
            s["late_arrival_minutes"] += metrics.late_arrival_minutes
            s["cost"] += metrics.cost

        summary = []
        for s in summary_map.values():
            total = s["normal_hours"] + s["overtime_hours"] + s["nocturnal_hours"]
            summary.append(
                {
                    "employee_id": s["employee_id"],
                    "normal_hours": round(s["normal_hours"], 2),
                    "overtime_hours": round(s["overtime_hours"], 2),
                    "nocturnal_hours": round(s["nocturnal_hours"], 2),
                    "total_hours": round(total, 2),
                    "worked_hours": format_duration(total * 60),
                    "late_arrival_minutes": s["late_arrival_minutes"],
                    "cost": round(s["cost"], 2),
                }
            )

        summary.sort(key=lambda x: x["total_hours"], reverse=True)
        return ReportData(rows=out_rows, summary=summary, skipped=skipped)
