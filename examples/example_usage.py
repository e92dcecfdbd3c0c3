"""Example: run the payroll engine through the service layer (no Flask).

Controllers are a thin layer; all rules live in the services.
"""

import importlib

from config import get_settings_module

from src.cafe_backoffice.cafe_backoffice.attendance.model import AttendanceRecord
from src.cafe_backoffice.cafe_backoffice.container import build_container
from src.cafe_backoffice.cafe_backoffice.employees.model import Employee
from src.cafe_backoffice.cafe_backoffice.schedules.model import ScheduleEntry


def main():
    settings = importlib.import_module(get_settings_module())
    config = {k: getattr(settings, k) for k in dir(settings) if k.isupper()}

    shift = ScheduleEntry(time_in="09:00", time_out="17:00")
    container = build_container(
        settings=config,
        employees=[
            Employee(employee_id=1, name="Ana", rate=80, schedule={"2025-10-16": shift}),
            Employee(employee_id=2, name="Ben", rate=75, schedule={"2025-10-16": shift}),
        ],
        attendance=[
            AttendanceRecord("Ana", "2025-10-16", "08:55 AM", "05:00 PM"),
            AttendanceRecord("ben", "2025-10-16", "09:00", "13:00"),
        ],
        sales=[
            {"Date": "16 Oct 25", "Service Amount": "1,000.00", "Total": "10,000"},
        ],
    )

    for record in container.payroll_service.generate("2025-10-16", "2025-10-16"):
        print(record.employee, round(record.regular_hours, 2), record.service_charge, round(record.net_pay, 2))


if __name__ == "__main__":
    main()
