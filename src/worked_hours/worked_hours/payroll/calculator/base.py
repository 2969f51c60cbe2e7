from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...attendance.model import AttendanceRecord
from ...schedules.model import ShiftPlan
from ..model import DailyMetricsResult
from ..rates import RateConfig


class WorkedMetricsCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(
        self,
        record: AttendanceRecord,
        plan: Optional[ShiftPlan] = None,
        rates: Optional[RateConfig] = None,
    ) -> DailyMetricsResult:
        raise NotImplementedError
