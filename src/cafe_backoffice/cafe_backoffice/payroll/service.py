from __future__ import annotations

import calendar
import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Mapping, Optional, Sequence

from ..attendance.service import AttendanceService
from ..common.datetime_utils import DateLike, date_key, iter_date_keys, now_local, to_date, today_key
from ..common.validators import require_non_negative, require_number
from ..core import constants
from ..core.enums import DayStatus
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..service_charge.model import ServiceChargeBreakdown, round_currency
from ..service_charge.service import ServiceChargeDistributionService
from .model import Deductions, PayrollPeriodSummary, PayrollRecord
from .repository import PayrollSnapshotRepository

logger = logging.getLogger(__name__)


def default_pay_period(today: Optional[date] = None) -> tuple[str, str]:
    """First and last day of the current month."""
    today = today or now_local().date()
    last_day = calendar.monthrange(today.year, today.month)[1]
    return date_key(today.replace(day=1)), date_key(today.replace(day=last_day))


class PayrollService:
    """Aggregates reconciled days and service-charge shares into payroll records."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceService,
        distribution: ServiceChargeDistributionService,
        snapshots: PayrollSnapshotRepository,
        *,
        overtime_multiplier: float = constants.OVERTIME_RATE_MULTIPLIER,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employees = employees
        self._attendance = attendance
        self._distribution = distribution
        self._snapshots = snapshots
        self._overtime_multiplier = float(overtime_multiplier)
        self._clock = clock

    def generate(
        self,
        start: DateLike,
        end: DateLike,
        *,
        custom_deductions: Optional[Mapping[int, float]] = None,
    ) -> list[PayrollRecord]:
        employees = list(self._employees.list_all())
        if not employees:
            return []

        custom_deductions = custom_deductions or {}
        distribution = self._distribution.distribute(start, end, employees=employees)
        today = today_key(self._clock())

        records = []
        for employee in employees:
            breakdown = distribution.allocations.get(employee.employee_id)
            records.append(
                self._build_record(
                    employee,
                    start,
                    end,
                    today=today,
                    breakdown=breakdown.rounded() if breakdown else None,
                    custom_deduction=custom_deductions.get(employee.employee_id, 0.0),
                )
            )
        logger.info("Generated payroll for %d employees (%s..%s)", len(records), date_key(to_date(start)), date_key(to_date(end)))
        return records

    def _build_record(
        self,
        employee: Employee,
        start: DateLike,
        end: DateLike,
        *,
        today: str,
        breakdown: Optional[ServiceChargeBreakdown],
        custom_deduction: float,
    ) -> PayrollRecord:
        regular_minutes = overtime_minutes = 0
        present = absent = late = 0
        for key in iter_date_keys(start, end):
            log = self._attendance.reconcile_day(employee, key, today=today)
            regular_minutes += log.regular_minutes
            # Paid from the ledger, also on days without a usable clock span.
            overtime_minutes += max(int(employee.approved_overtime.get(key) or 0), 0)
            if log.status in (DayStatus.PRESENT, DayStatus.LATE):
                present += 1
            if log.status == DayStatus.LATE:
                late += 1
            elif log.status == DayStatus.ABSENT and key < today:
                # Today may still see a clock-in.
                absent += 1

        regular_hours = regular_minutes / 60
        overtime_hours = overtime_minutes / 60
        regular_pay = regular_hours * employee.rate
        overtime_pay = overtime_hours * employee.rate * self._overtime_multiplier
        service_charge = breakdown.total_share if breakdown else 0.0
        deductions = Deductions()
        custom_deduction = max(0.0, float(custom_deduction or 0))
        gross_pay = regular_pay + overtime_pay + service_charge

        return PayrollRecord(
            employee_id=employee.employee_id,
            employee=employee.name,
            position=employee.position,
            rate=employee.rate,
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            service_charge=service_charge,
            gross_pay=gross_pay,
            net_pay=gross_pay - deductions.total - custom_deduction,
            days_present=present,
            days_absent=absent,
            days_late=late,
            deductions=deductions,
            custom_deduction=custom_deduction,
            service_charge_breakdown=breakdown,
        )

    def adjust(
        self,
        record: PayrollRecord,
        *,
        service_charge: Optional[float] = None,
        custom_deduction: Optional[float] = None,
        deduction_notes: Optional[str] = None,
    ) -> PayrollRecord:
        """Payslip edit: override the service charge and/or the custom deduction, then re-total."""
        if service_charge is not None:
            service_charge = require_non_negative(require_number(service_charge, "service_charge"), "service_charge")
        else:
            service_charge = record.service_charge
        if custom_deduction is not None:
            custom_deduction = require_non_negative(require_number(custom_deduction, "custom_deduction"), "custom_deduction")
        else:
            custom_deduction = record.custom_deduction

        gross_pay = record.regular_pay + record.overtime_pay + service_charge
        return replace(
            record,
            service_charge=service_charge,
            gross_pay=gross_pay,
            net_pay=gross_pay - record.deductions.total - custom_deduction,
            custom_deduction=custom_deduction,
            deduction_notes=deduction_notes if deduction_notes is not None else record.deduction_notes,
        )

    def save_snapshot(self, start: DateLike, end: DateLike, records: Sequence[PayrollRecord]) -> None:
        self._snapshots.save(start=date_key(to_date(start)), end=date_key(to_date(end)), records=records)
        logger.info("Saved payroll snapshot %s..%s (%d records)", start, end, len(records))

    def get_snapshot(self, start: DateLike, end: DateLike) -> Optional[Sequence[PayrollRecord]]:
        return self._snapshots.get(start=date_key(to_date(start)), end=date_key(to_date(end)))

    def period_summary(self, records: Sequence[PayrollRecord], start: DateLike, end: DateLike) -> PayrollPeriodSummary:
        start_key, end_key = date_key(to_date(start)), date_key(to_date(end))
        pools = self._distribution.daily_totals()
        entries = sorted((k, v) for k, v in pools.items() if start_key <= k <= end_key)
        return PayrollPeriodSummary(
            start=start_key,
            end=end_key,
            total_gross=round_currency(sum(r.gross_pay for r in records)),
            total_net=round_currency(sum(r.net_pay for r in records)),
            total_hours=round(sum(r.total_hours for r in records), 2),
            service_charge_pool_total=round_currency(sum(v for _, v in entries if v > 0)),
            service_charge_entries=[(k, round_currency(v)) for k, v in entries],
        )
