"""Boundary normalisation of upstream payloads.

Upstream sources (the REST backend, older report exports) name the same
fields in several ways. Everything is mapped to the canonical
``AttendanceRecord`` / ``ShiftPlan`` here, so the calculators only ever see
one shape.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_canonical_date, to_canonical_hhmm
from ..common.validators import first_present, optional_non_negative, require_mapping
from ..core.constants import MAX_RECORDED_OVERTIME_HOURS
from ..core.exceptions import InvalidDate, InvalidTimeFormat, ValidationError
from ..schedules.decoder import slot_to_hhmm, validate_slots
from ..schedules.model import LunchWindow, ShiftPlan
from .model import AttendanceRecord

logger = logging.getLogger(__name__)

DATE_KEYS = ("date", "work_date", "fecha", "dia")
ENTRY_KEYS = ("entry_time", "entryTime", "horaIngreso", "clockIn")
EXIT_KEYS = ("exit_time", "exitTime", "horaSalida", "clockOut")
RATE_KEYS = ("embedded_rate", "embeddedRate", "tarifaHora", "salarioHora")
EMPLOYEE_KEYS = ("employee_id", "employeeId", "empleadoId")
RECORD_ID_KEYS = ("record_id", "id", "_id")

PLAN_START_KEYS = (
    "start",
    "plannedStart",
    "planInicio",
    "horaInicioPlanificada",
    "planHoraInicio",
    "plan_start",
    "horaInicio",
)
PLAN_END_KEYS = (
    "end",
    "plannedEnd",
    "planFin",
    "horaFinPlanificada",
    "planHoraFin",
    "plan_end",
    "horaFin",
)
SLOT_KEYS = ("occupied_slots", "occupiedSlots", "shifts")
OVERTIME_KEYS = ("recorded_overtime_hours", "recordedOvertimeHours", "overtimeHours")


def _optional_time(value: Any) -> Optional[str]:
    if value is None:
        return None
    return to_canonical_hhmm(value)


def _as_id(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def normalize_attendance(data: Mapping[str, Any]) -> AttendanceRecord:
    """Map an upstream attendance payload to an AttendanceRecord.

    Raises InvalidDate / InvalidTimeFormat when the required fields are
    missing or unparseable. A missing exit time is allowed (open record).
    """
    if not isinstance(data, Mapping):
        raise ValidationError("Attendance payload must be an object")

    raw_date = first_present(data, DATE_KEYS)
    if raw_date is None:
        raise InvalidDate("Attendance record has no date")

    raw_entry = first_present(data, ENTRY_KEYS)
    if raw_entry is None:
        raise InvalidTimeFormat("Attendance record has no entry time")

    raw_rate = first_present(data, RATE_KEYS)
    if raw_rate is None and isinstance(data.get("empleado"), Mapping):
        raw_rate = data["empleado"].get("salarioHora")

    employee_id = first_present(data, EMPLOYEE_KEYS)
    if employee_id is None and isinstance(data.get("empleado"), Mapping):
        employee_id = first_present(data["empleado"], ("id", "_id"))

    return AttendanceRecord(
        work_date=to_canonical_date(raw_date),
        entry_time=to_canonical_hhmm(raw_entry),
        exit_time=_optional_time(first_present(data, EXIT_KEYS)),
        embedded_rate=optional_non_negative(raw_rate, "Hourly rate"),
        employee_id=_as_id(employee_id),
        record_id=_as_id(first_present(data, RECORD_ID_KEYS)),
    )


def _lunch(value: Any) -> Optional[LunchWindow]:
    # Schedule exports store a one-hour lunch as its first slot index.
    if isinstance(value, int) and not isinstance(value, bool):
        first = validate_slots([value])[0]
        return LunchWindow(start=slot_to_hhmm(first), end=slot_to_hhmm(first + 2))
    if not isinstance(value, Mapping):
        return None
    start = _optional_time(value.get("start"))
    end = _optional_time(value.get("end"))
    if start is None and end is None:
        return None
    return LunchWindow(start=start, end=end)


def _slots(value: Any) -> frozenset[int]:
    if value is None:
        return frozenset()
    if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
        raise InvalidTimeFormat(f"Occupied slots must be a list of integers: {value!r}")
    return frozenset(validate_slots(value))


def normalize_shift_plan(data: Optional[Mapping[str, Any]]) -> Optional[ShiftPlan]:
    """Map an upstream plan payload to a ShiftPlan (None when nothing is planned).

    Accepts both the explicit ``start``/``end`` form and the slot form, plus
    the optional overtime/lunch annotations. A start without an end (or the
    reverse) is rejected.
    """
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise ValidationError("Shift plan payload must be an object")

    start = _optional_time(first_present(data, PLAN_START_KEYS))
    end = _optional_time(first_present(data, PLAN_END_KEYS))
    if (start is None) != (end is None):
        raise InvalidTimeFormat("Planned window needs both start and end")

    slots = _slots(first_present(data, SLOT_KEYS))
    overtime = (
        optional_non_negative(first_present(data, OVERTIME_KEYS), "Overtime hours", MAX_RECORDED_OVERTIME_HOURS)
        or 0.0
    )
    lunch = _lunch(data.get("lunch"))
    if lunch is None and first_present(data, ("has_lunch", "tieneAlmuerzo")):
        lunch = LunchWindow()

    if start is None and not slots and not overtime and lunch is None:
        logger.debug("empty shift plan payload: %s", dict(data))
        return None

    return ShiftPlan(
        start=start,
        end=end,
        occupied_slots=slots,
        recorded_overtime_hours=overtime,
        lunch=lunch,
    )


EMBEDDED_PLAN_START_KEYS = ("plannedStart", "planInicio", "horaInicioPlanificada", "planHoraInicio", "plan_start")
EMBEDDED_PLAN_END_KEYS = ("plannedEnd", "planFin", "horaFinPlanificada", "planHoraFin", "plan_end")


def embedded_shift_plan(data: Mapping[str, Any]) -> Optional[ShiftPlan]:
    """Planned window carried inside an attendance payload, if any."""
    start = _optional_time(first_present(data, EMBEDDED_PLAN_START_KEYS))
    end = _optional_time(first_present(data, EMBEDDED_PLAN_END_KEYS))
    if start is None or end is None:
        return None
    return ShiftPlan(start=start, end=end)


def normalize_week_plans(data: Mapping[str, Any]) -> dict:
    """Per-date ShiftPlans from a weekly schedule payload.

    Two layouts are accepted: ``days`` mapping each date to a plan payload,
    and the backend layout of ``dias`` (explicit windows) plus ``shifts``
    (slot lists), ``overtimeHours`` and ``lunchHours`` keyed by date.
    """
    require_mapping(data, "Schedule payload")
    merged: dict[Any, dict] = {}

    def slot_for(key: Any) -> dict:
        return merged.setdefault(to_canonical_date(key), {})

    days = require_mapping(data.get("days") or {}, "days")
    for key, value in days.items():
        if value is not None:
            slot_for(key).update(require_mapping(value, f"days[{key}]"))

    dias = data.get("dias") or []
    if not isinstance(dias, (list, tuple)):
        raise ValidationError("dias must be a list of schedule days")
    for item in dias:
        item = require_mapping(item, "Schedule day")
        raw_date = first_present(item, DATE_KEYS)
        if raw_date is None:
            raise InvalidDate("Schedule day has no date")
        slot_for(raw_date).update({k: v for k, v in item.items() if k not in DATE_KEYS})

    for key, slots in require_mapping(data.get("shifts") or {}, "shifts").items():
        slot_for(key).setdefault("occupied_slots", slots)
    for key, hours in require_mapping(data.get("overtimeHours") or {}, "overtimeHours").items():
        slot_for(key).setdefault("recorded_overtime_hours", hours)
    for key, lunch in require_mapping(data.get("lunchHours") or {}, "lunchHours").items():
        slot_for(key).setdefault("lunch", lunch)

    plans = {}
    for work_date, raw in merged.items():
        plan = normalize_shift_plan(raw)
        if plan is not None:
            plans[work_date] = plan
    return plans
