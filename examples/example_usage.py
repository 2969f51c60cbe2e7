"""Ví dụ: dùng service layer (không qua Flask).

Controllers chỉ là lớp mỏng; tính giờ công nằm ở calculator/service.
"""

from datetime import date

from config import load_settings

from src.worked_hours.worked_hours.attendance.normalizer import normalize_attendance, normalize_shift_plan
from src.worked_hours.worked_hours.container import build_container
from src.worked_hours.worked_hours.payroll.rates import RateConfig
from src.worked_hours.worked_hours.schedules.model import ShiftPlan


def main():
    container = build_container(settings=load_settings())

    record = normalize_attendance({"fecha": "2026-02-02", "horaIngreso": "07:30", "horaSalida": "19:00", "tarifaHora": 10})
    plan = normalize_shift_plan({"planInicio": "08:00", "planFin": "17:00"})
    print(container.calculator.compute(record, plan, RateConfig()).as_dict())

    week_start = date(2026, 2, 2)
    report = container.weekly_service.build(
        week_start=week_start,
        plans={week_start: ShiftPlan(occupied_slots=frozenset(range(16, 34)), recorded_overtime_hours=1)},
    )
    print(container.weekly_service.to_dict(report))


if __name__ == "__main__":
    main()
