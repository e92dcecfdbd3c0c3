import codecs
import csv
import io
from datetime import date

import pytest

from src.cafe_backoffice.cafe_backoffice.container import build_container
from src.cafe_backoffice.cafe_backoffice.core.enums import Role
from src.cafe_backoffice.cafe_backoffice.core.exceptions import ValidationError
from src.cafe_backoffice.cafe_backoffice.employees.model import Employee
from src.cafe_backoffice.cafe_backoffice.payroll.export import EXPORT_COLUMNS, to_csv_bytes, to_dataframe
from src.cafe_backoffice.cafe_backoffice.payroll.service import PayrollService, default_pay_period

START, END = "2025-10-01", "2025-10-03"


def test_generate_payroll_record(payroll_container):
    (record,) = payroll_container.payroll_service.generate(START, END)

    # Oct 1: 420 regular + 60 approved; Oct 2: late, 405 regular; Oct 3: absent.
    assert record.regular_hours == pytest.approx(825 / 60)
    assert record.overtime_hours == pytest.approx(1.0)
    assert record.regular_pay == pytest.approx(1375.0)
    assert record.overtime_pay == pytest.approx(150.0)
    assert record.service_charge == pytest.approx(600.0)
    assert record.gross_pay == pytest.approx(2125.0)
    assert record.net_pay == pytest.approx(2125.0)
    assert (record.days_present, record.days_late, record.days_absent) == (2, 1, 1)
    assert record.total_hours == pytest.approx(14.75)
    assert record.service_charge_breakdown.covered_days == 1


def test_custom_deduction_reduces_net_only(payroll_container):
    (record,) = payroll_container.payroll_service.generate(START, END, custom_deductions={1: 25})

    assert record.gross_pay == pytest.approx(2125.0)
    assert record.net_pay == pytest.approx(2100.0)
    assert record.custom_deduction == 25.0


def test_no_employees_means_no_payroll():
    assert build_container().payroll_service.generate(START, END) == []


def test_adjust_overrides_and_retotals(payroll_container):
    svc = payroll_container.payroll_service
    (record,) = svc.generate(START, END)

    adjusted = svc.adjust(record, service_charge=500, custom_deduction=100, deduction_notes="cash advance")

    assert adjusted.service_charge == 500
    assert adjusted.gross_pay == pytest.approx(2025.0)
    assert adjusted.net_pay == pytest.approx(1925.0)
    assert adjusted.deduction_notes == "cash advance"
    assert svc.adjust(adjusted, custom_deduction=0).deduction_notes == "cash advance"
    with pytest.raises(ValidationError):
        svc.adjust(record, custom_deduction=-1)
    with pytest.raises(ValidationError):
        svc.adjust(record, service_charge="abc")
    with pytest.raises(ValidationError):
        svc.adjust(record, custom_deduction=float("nan"))


def test_snapshot_round_trip(payroll_container):
    svc = payroll_container.payroll_service
    records = svc.generate(START, END)

    assert svc.get_snapshot(START, END) is None
    svc.save_snapshot(date(2025, 10, 1), date(2025, 10, 3), records)
    assert svc.get_snapshot(START, END) == records


def test_period_summary(payroll_container):
    svc = payroll_container.payroll_service
    records = svc.generate(START, END, custom_deductions={1: 25})

    summary = svc.period_summary(records, START, END)

    assert summary.total_gross == 2125.0
    assert summary.total_net == 2100.0
    assert summary.total_hours == 14.75
    assert summary.service_charge_pool_total == 1000.0
    assert summary.service_charge_entries == [("2025-10-01", 1000.0)]


def test_overtime_multiplier_is_configurable(payroll_container):
    container = build_container(
        settings={"OVERTIME_RATE_MULTIPLIER": 2.0},
        employees=payroll_container.employees_repo.list_all(),
        attendance=payroll_container.attendance_repo.list_all(),
    )

    (record,) = container.payroll_service.generate(START, END)

    assert record.overtime_pay == pytest.approx(200.0)
    assert record.service_charge == 0.0


def test_default_pay_period():
    assert default_pay_period(date(2024, 2, 10)) == ("2024-02-01", "2024-02-29")
    assert default_pay_period(date(2025, 12, 31)) == ("2025-12-01", "2025-12-31")


def test_csv_export(payroll_container):
    records = payroll_container.payroll_service.generate(START, END)

    payload = to_csv_bytes(records)

    assert payload.startswith(codecs.BOM_UTF8)
    rows = list(csv.DictReader(io.StringIO(payload.decode("utf-8-sig"))))
    assert list(rows[0].keys()) == EXPORT_COLUMNS
    assert rows[0]["Staff"] == "Ana"
    assert rows[0]["Net Pay"] == "2125.0"
    assert rows[0]["Late"] == "1"


def test_dataframe_export(payroll_container):
    frame = to_dataframe(payroll_container.payroll_service.generate(START, END))

    assert list(frame.columns) == EXPORT_COLUMNS
    assert frame.loc[0, "Service Charge"] == 600.0


def test_today_is_not_counted_absent_yet(fixed_now, shift):
    container = build_container(
        employees=[
            Employee(employee_id=1, name="Ana", rate=100, schedule={"2025-10-30": shift, "2025-10-31": shift})
        ]
    )
    svc = PayrollService(
        container.employees_repo,
        container.attendance_service,
        container.service_charge_service,
        container.snapshots_repo,
        clock=lambda: fixed_now,
    )

    (record,) = svc.generate("2025-10-30", "2025-10-31")

    assert record.days_absent == 1


def test_approved_overtime_is_paid_without_clock_out(payroll_container):
    payroll_container.attendance_service.edit_record(
        employee_name="Ana", date_key="2025-10-02", time_in="09:00", time_out=""
    )
    stored = payroll_container.overtime_service.decide(
        current_role=Role.ADMIN, employee_id=1, date_key="2025-10-02", approved=True, minutes=120
    )

    (record,) = payroll_container.payroll_service.generate(START, END)

    assert stored == 120
    assert record.overtime_hours == pytest.approx(3.0)
    assert record.regular_hours == pytest.approx(7.0)
