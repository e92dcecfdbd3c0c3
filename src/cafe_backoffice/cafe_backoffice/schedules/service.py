from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import to_24_hour
from ..common.validators import require_clock_time, require_date_key
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import ScheduleEntry
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def _write(self, *, current_role: Role, employee_id: int, date_key: str, entry: Optional[ScheduleEntry]) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to edit schedules")

        date_key = require_date_key(date_key, "date_key")
        if not self._employees.set_schedule(employee_id=int(employee_id), date_key=date_key, entry=entry):
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.debug("Schedule for employee %s on %s set to %r", employee_id, date_key, entry)

    def assign(self, *, current_role: Role, employee_id: int, date_key: str, time_in: str, time_out: str) -> ScheduleEntry:
        """Schedule a shift. 12-hour input such as ``9:00 AM`` is stored as ``09:00``."""
        time_in = to_24_hour(require_clock_time(time_in, "time_in"))
        time_out = to_24_hour(require_clock_time(time_out, "time_out"))
        if time_in == time_out:
            raise ValidationError("Shift start and end must differ")

        entry = ScheduleEntry(time_in=time_in, time_out=time_out, off=False)
        self._write(current_role=current_role, employee_id=employee_id, date_key=date_key, entry=entry)
        return entry

    def mark_off(self, *, current_role: Role, employee_id: int, date_key: str) -> ScheduleEntry:
        entry = ScheduleEntry(off=True)
        self._write(current_role=current_role, employee_id=employee_id, date_key=date_key, entry=entry)
        return entry

    def clear(self, *, current_role: Role, employee_id: int, date_key: str) -> None:
        self._write(current_role=current_role, employee_id=employee_id, date_key=date_key, entry=None)
