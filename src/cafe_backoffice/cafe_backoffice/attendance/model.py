from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import parse_clock_time
from ..core.enums import DayStatus, OvertimeDecision
from ..employees.model import normalize_name
from ..schedules.model import ScheduleEntry


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one clock-in/clock-out row from the timeclock export.

    There is no foreign key to the employee; rows are matched by name.
    """

    employee_name: str
    date_key: str
    time_in: str
    time_out: str = ""

    @property
    def name_key(self) -> str:
        return normalize_name(self.employee_name)

    def clock_span(self) -> Optional[tuple[int, int]]:
        """(in, out) in minutes since midnight, or None when either side is unknown."""
        actual_in = parse_clock_time(self.time_in)
        actual_out = parse_clock_time(self.time_out)
        if actual_in is None or actual_out is None:
            return None
        return actual_in, actual_out


@dataclass(frozen=True)
class WorkDay:
    """Everything the rules need about one employee on one date."""

    date_key: str
    schedule: Optional[ScheduleEntry]
    record: Optional[AttendanceRecord]
    approved_overtime: Optional[int] = None
    is_future: bool = False

    @property
    def scheduled_window(self) -> Optional[tuple[int, int]]:
        """Planned (in, out) minutes for a working day, or None when off/unscheduled/unparseable."""
        if not self.schedule or self.schedule.off or not self.schedule.has_times:
            return None
        scheduled_in = parse_clock_time(self.schedule.time_in)
        scheduled_out = parse_clock_time(self.schedule.time_out)
        if scheduled_in is None or scheduled_out is None:
            return None
        return scheduled_in, scheduled_out

    @property
    def overtime_decision(self) -> OvertimeDecision:
        if self.approved_overtime is None:
            return OvertimeDecision.PENDING
        if self.approved_overtime > 0:
            return OvertimeDecision.APPROVED
        return OvertimeDecision.REJECTED


@dataclass(frozen=True)
class DailyWorkLog:
    """Read-model: reconciled attendance of one employee for one day."""

    date_key: str
    status: DayStatus
    scheduled_in: str = ""
    scheduled_out: str = ""
    time_in: str = ""
    time_out: str = ""
    worked_minutes: int = 0
    break_deducted: bool = False
    payable_minutes: int = 0
    potential_overtime_minutes: int = 0
    approved_overtime_minutes: int = 0
    overtime_decision: OvertimeDecision = OvertimeDecision.PENDING
    login_minutes: int = 0
    late_minutes: int = 0
    note: Optional[str] = None

    @property
    def regular_minutes(self) -> int:
        """Worked minutes after the unpaid-break rule, before overtime."""
        return self.payable_minutes - self.approved_overtime_minutes


@dataclass(frozen=True)
class AttendanceSummary:
    """Totals over a date range, in minutes.

    ``difference_minutes`` is signed: worked plus approved overtime minus scheduled.
    """

    scheduled_minutes: int = 0
    worked_minutes: int = 0
    approved_overtime_minutes: int = 0
    paid_minutes: int = 0
    difference_minutes: int = 0
    total_delay_minutes: int = 0
    late_count: int = 0
    absence_count: int = 0
    total_login_minutes: int = 0
