import pytest

from src.cafe_backoffice.cafe_backoffice.core.enums import OvertimeDecision, Role
from src.cafe_backoffice.cafe_backoffice.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_approve_stores_clocked_overtime(payroll_container):
    svc = payroll_container.overtime_service

    # Oct 1 was pre-approved at 60; re-deciding overwrites the ledger entry.
    assert svc.decide(current_role=Role.ADMIN, employee_id=1, date_key="2025-10-01", approved=True, minutes=30) == 30
    assert payroll_container.employees_repo.get_by_id(1).approved_overtime["2025-10-01"] == 30
    assert svc.decision(1, "2025-10-01") == OvertimeDecision.APPROVED


def test_approve_without_minutes_uses_potential_overtime(payroll_container):
    payroll_container.attendance_service.edit_record(
        employee_name="Ana", date_key="2025-10-02", time_in="09:00", time_out="18:30"
    )
    svc = payroll_container.overtime_service

    assert svc.decision(1, "2025-10-02") == OvertimeDecision.PENDING
    assert [log.date_key for log in svc.pending(1, "2025-10-01", "2025-10-03")] == ["2025-10-02"]

    assert svc.decide(current_role=Role.ADMIN, employee_id=1, date_key="2025-10-02", approved=True) == 90
    assert svc.pending(1, "2025-10-01", "2025-10-03") == []


def test_reject_stores_zero(payroll_container):
    svc = payroll_container.overtime_service

    assert svc.decide(current_role=Role.ADMIN, employee_id=1, date_key="2025-10-01", approved=False) == 0
    assert svc.decision(1, "2025-10-01") == OvertimeDecision.REJECTED


def test_staff_cannot_decide(payroll_container):
    with pytest.raises(AuthorizationError):
        payroll_container.overtime_service.decide(
            current_role=Role.STAFF, employee_id=1, date_key="2025-10-01", approved=True
        )


def test_day_without_overtime_cannot_be_decided(payroll_container):
    with pytest.raises(ValidationError):
        payroll_container.overtime_service.decide(
            current_role=Role.ADMIN, employee_id=1, date_key="2025-10-03", approved=True
        )


def test_unknown_employee(payroll_container):
    with pytest.raises(NotFoundError):
        payroll_container.overtime_service.decide(
            current_role=Role.ADMIN, employee_id=42, date_key="2025-10-01", approved=True
        )
