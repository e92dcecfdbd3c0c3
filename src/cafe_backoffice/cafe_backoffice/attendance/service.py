from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime
from typing import Callable, Iterable, Mapping, Optional, Union

from ..common.datetime_utils import DateLike, iter_date_keys, normalize_date_key, now_local, parse_clock_time, today_key
from ..common.validators import require_date_key, require_non_empty
from ..core.enums import DayStatus
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, AttendanceSummary, DailyWorkLog, WorkDay
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

RawRecord = Union[AttendanceRecord, Mapping[str, str]]


class AttendanceService:
    """Reconciles schedules against clock records, one employee-day at a time."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        calculator: StandardPayrollCalculator | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._calculator = calculator or StandardPayrollCalculator()
        self._clock = clock

    # -- source data -----------------------------------------------------

    def import_records(self, rows: Iterable[RawRecord]) -> int:
        """Replace the whole attendance set with ``rows``.

        Rows without a name, a parseable date or a time-in are skipped.
        """
        records: list[AttendanceRecord] = []
        skipped = 0
        for row in rows:
            record = self._coerce(row)
            if record is None:
                skipped += 1
                continue
            records.append(record)

        stored = self._attendance.replace_all(records)
        logger.info("Attendance import stored %d records (skipped %d)", stored, skipped)
        return stored

    def edit_record(self, *, employee_name: str, date_key: str, time_in: str, time_out: str = "") -> AttendanceRecord:
        record = AttendanceRecord(
            employee_name=require_non_empty(employee_name, "employee_name"),
            date_key=require_date_key(date_key, "date_key"),
            time_in=(time_in or "").strip(),
            time_out=(time_out or "").strip(),
        )
        self._attendance.upsert(record)
        return record

    def _coerce(self, row: RawRecord) -> Optional[AttendanceRecord]:
        if isinstance(row, AttendanceRecord):
            name, raw_date, time_in, time_out = row.employee_name, row.date_key, row.time_in, row.time_out
        else:
            name = row.get("employee_name") or row.get("employee") or ""
            raw_date = row.get("date_key") or row.get("date") or ""
            time_in = row.get("time_in") or ""
            time_out = row.get("time_out") or ""

        key = normalize_date_key(raw_date, default_year=self._clock().year)
        if not name or not name.strip() or not key or not time_in or not time_in.strip():
            return None
        return AttendanceRecord(
            employee_name=name.strip(),
            date_key=key,
            time_in=time_in.strip(),
            time_out=(time_out or "").strip(),
        )

    # -- reconciliation --------------------------------------------------

    def _employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def work_day(self, employee: Employee, date_key: str, *, today: Optional[str] = None) -> WorkDay:
        today = today or today_key(self._clock())
        return WorkDay(
            date_key=date_key,
            schedule=employee.schedule.get(date_key),
            record=self._attendance.find_first(name=employee.name, date_key=date_key),
            approved_overtime=employee.approved_overtime.get(date_key),
            is_future=date_key > today,
        )

    def reconcile_day(self, employee: Employee, date_key: str, *, today: Optional[str] = None) -> DailyWorkLog:
        day = self.work_day(employee, date_key, today=today)
        decision = self._factory.for_day(day).decide(day)

        minutes = self._calculator.breakdown(day)

        schedule = day.schedule
        record = day.record
        span = record.clock_span() if record else None
        return DailyWorkLog(
            date_key=date_key,
            status=decision.status,
            scheduled_in=schedule.time_in if schedule and not schedule.off else "",
            scheduled_out=schedule.time_out if schedule and not schedule.off else "",
            time_in=record.time_in if record else "",
            time_out=record.time_out if record else "",
            worked_minutes=minutes.worked_minutes,
            break_deducted=minutes.break_deducted,
            payable_minutes=minutes.payable_minutes,
            potential_overtime_minutes=minutes.potential_overtime_minutes,
            approved_overtime_minutes=minutes.approved_overtime_minutes,
            overtime_decision=day.overtime_decision,
            login_minutes=max(span[1] - span[0], 0) if span else 0,
            late_minutes=decision.late_minutes,
            note=decision.note,
        )

    def daily_log(self, employee_id: int, start: DateLike, end: DateLike) -> list[DailyWorkLog]:
        employee = self._employee(employee_id)
        today = today_key(self._clock())
        return [self.reconcile_day(employee, key, today=today) for key in iter_date_keys(start, end)]

    def summary(self, employee_id: int, start: DateLike, end: DateLike) -> AttendanceSummary:
        scheduled = worked = approved = paid = delay = late = absent = login = 0
        for log in self.daily_log(employee_id, start, end):
            scheduled_in = parse_clock_time(log.scheduled_in)
            scheduled_out = parse_clock_time(log.scheduled_out)
            if scheduled_in is not None and scheduled_out is not None:
                scheduled += max(scheduled_out - scheduled_in, 0)

            worked += log.worked_minutes
            approved += log.approved_overtime_minutes
            paid += log.payable_minutes
            login += log.login_minutes
            if log.status == DayStatus.LATE:
                late += 1
                delay += log.late_minutes
            elif log.status == DayStatus.ABSENT:
                absent += 1

        return AttendanceSummary(
            scheduled_minutes=scheduled,
            worked_minutes=worked,
            approved_overtime_minutes=approved,
            paid_minutes=paid,
            difference_minutes=(worked + approved) - scheduled,
            total_delay_minutes=delay,
            late_count=late,
            absence_count=absent,
            total_login_minutes=login,
        )

    def daily_attendance_totals(self) -> dict[str, int]:
        """Raw clocked minutes per date across every record (out must follow in)."""
        totals: dict[str, int] = defaultdict(int)
        for record in self._attendance.list_all():
            span = record.clock_span()
            if span is None or span[1] <= span[0]:
                continue
            totals[record.date_key] += span[1] - span[0]
        return dict(totals)
