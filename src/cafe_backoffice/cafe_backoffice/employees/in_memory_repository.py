from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional, Sequence

from ..schedules.model import ScheduleEntry
from .model import Employee, normalize_name


class InMemoryEmployeeRepository:
    """Employee store kept in process memory.

    Employees are immutable; every ledger write swaps in an updated copy under a
    single lock, so concurrent edits apply one at a time and the last one wins.
    """

    def __init__(self, employees: Sequence[Employee] = ()):
        self._lock = threading.Lock()
        self._by_id: dict[int, Employee] = {}
        for employee in employees:
            self._by_id[employee.employee_id] = employee

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def list_all(self) -> Sequence[Employee]:
        return list(self._by_id.values())

    def set_schedule(self, *, employee_id: int, date_key: str, entry: Optional[ScheduleEntry]) -> bool:
        with self._lock:
            current = self._by_id.get(int(employee_id))
            if not current:
                return False
            schedule = dict(current.schedule)
            if entry is None:
                schedule.pop(date_key, None)
            else:
                schedule[date_key] = entry
            self._by_id[current.employee_id] = replace(current, schedule=schedule)
            return True

    def set_approved_overtime(self, *, employee_id: int, date_key: str, minutes: int) -> bool:
        with self._lock:
            current = self._by_id.get(int(employee_id))
            if not current:
                return False
            ledger = dict(current.approved_overtime)
            ledger[date_key] = max(int(minutes), 0)
            self._by_id[current.employee_id] = replace(current, approved_overtime=ledger)
            return True
