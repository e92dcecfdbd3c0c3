from __future__ import annotations

from datetime import datetime

import pytest

from src.cafe_backoffice.cafe_backoffice.attendance.model import AttendanceRecord
from src.cafe_backoffice.cafe_backoffice.container import build_container
from src.cafe_backoffice.cafe_backoffice.employees.model import Employee
from src.cafe_backoffice.cafe_backoffice.schedules.model import ScheduleEntry


@pytest.fixture
def fixed_now():
    return datetime(2025, 10, 31, 12, 0, 0)


@pytest.fixture
def shift():
    return ScheduleEntry(time_in="09:00", time_out="17:00")


@pytest.fixture
def payroll_container(shift):
    """One cook over three scheduled days.

    Oct 1: on time with one approved overtime hour. Oct 2: late 15 minutes.
    Oct 3: absent. Service charge of 1000 on Oct 1 only.
    """
    employee = Employee(
        employee_id=1,
        name="Ana",
        rate=100,
        schedule={"2025-10-01": shift, "2025-10-02": shift, "2025-10-03": shift},
        approved_overtime={"2025-10-01": 60},
    )
    return build_container(
        employees=[employee],
        attendance=[
            AttendanceRecord("Ana", "2025-10-01", "09:00", "18:00"),
            AttendanceRecord("ana", "2025-10-02", "9:15 AM", "5:00 PM"),
        ],
        sales=[{"Date": "10/01/2025", "Service Amount": "1,000.00", "Total": "12,500"}],
    )
