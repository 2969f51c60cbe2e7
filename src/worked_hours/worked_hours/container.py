from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_EARLY_GRACE_MINUTES
from .payroll.calculator.nocturnal_calculator import NocturnalDifferentialCalculator
from .payroll.service import WorkedHoursReportService
from .schedules.limits import ScheduleLimits
from .schedules.service import WeeklyOverviewService


@dataclass(frozen=True)
class Container:
    calculator: NocturnalDifferentialCalculator
    report_service: WorkedHoursReportService
    weekly_service: WeeklyOverviewService


def build_container(*, settings) -> Container:
    grace_minutes = int(getattr(settings, "EARLY_GRACE_MINUTES", DEFAULT_EARLY_GRACE_MINUTES))
    limits = ScheduleLimits.from_mapping(getattr(settings, "SCHEDULE_LIMITS", None))

    calculator = NocturnalDifferentialCalculator(grace_minutes=grace_minutes)
    report_service = WorkedHoursReportService(calculator=calculator)
    weekly_service = WeeklyOverviewService(limits=limits)

    return Container(
        calculator=calculator,
        report_service=report_service,
        weekly_service=weekly_service,
    )
