from __future__ import annotations

import logging
from typing import Optional

from ..attendance.model import DailyWorkLog
from ..attendance.service import AttendanceService
from ..common.datetime_utils import DateLike
from ..common.validators import require_date_key
from ..core.enums import OvertimeDecision, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


class OvertimeService:
    """Manager decisions on clocked overtime.

    The ledger is three-state per date: no entry (pending), 0 (rejected) and a
    positive minute count (approved). Entries are overwritten by date key and
    never expire.
    """

    def __init__(self, employees: EmployeeRepository, attendance: AttendanceService):
        self._employees = employees
        self._attendance = attendance

    def decision(self, employee_id: int, date_key: str) -> OvertimeDecision:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        minutes = employee.approved_overtime.get(date_key)
        if minutes is None:
            return OvertimeDecision.PENDING
        return OvertimeDecision.APPROVED if minutes > 0 else OvertimeDecision.REJECTED

    def decide(
        self,
        *,
        current_role: Role,
        employee_id: int,
        date_key: str,
        approved: bool,
        minutes: Optional[int] = None,
    ) -> int:
        """Record a decision and return the stored minutes.

        Approving stores the day's clocked overtime unless ``minutes`` overrides it.
        """
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only managers can decide overtime")

        date_key = require_date_key(date_key, "date_key")
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        log = self._attendance.reconcile_day(employee, date_key)
        if log.potential_overtime_minutes <= 0 and minutes is None:
            raise ValidationError(f"No overtime clocked on {date_key}")

        stored = 0
        if approved:
            stored = int(minutes) if minutes is not None else log.potential_overtime_minutes
            if stored <= 0:
                raise ValidationError("Approved overtime must be positive")

        self._employees.set_approved_overtime(employee_id=employee.employee_id, date_key=date_key, minutes=stored)
        logger.info(
            "Overtime %s for employee %s on %s (%d min)",
            "approved" if approved else "rejected",
            employee.employee_id,
            date_key,
            stored,
        )
        return stored

    def pending(self, employee_id: int, start: DateLike, end: DateLike) -> list[DailyWorkLog]:
        """Days with clocked overtime that still await a decision."""
        return [
            log
            for log in self._attendance.daily_log(employee_id, start, end)
            if log.potential_overtime_minutes > 0 and log.overtime_decision == OvertimeDecision.PENDING
        ]
