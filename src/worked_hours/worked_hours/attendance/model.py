from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công.

    Canonical shape consumed by the worked-metrics calculator. ``entry_time``
    and ``exit_time`` are "HH:MM" strings; ``exit_time`` is None while the
    record is still open.
    """

    work_date: date
    entry_time: str
    exit_time: Optional[str] = None
    embedded_rate: Optional[float] = None
    employee_id: Optional[str] = None
    record_id: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.exit_time is None
