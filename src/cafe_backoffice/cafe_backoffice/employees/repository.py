from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..schedules.model import ScheduleEntry
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees and their per-day ledgers.

    Note (DIP): services depend on this interface, never on a concrete store.
    Schedule and overtime writes overwrite by date key.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def set_schedule(self, *, employee_id: int, date_key: str, entry: Optional[ScheduleEntry]) -> bool:
        """Store ``entry`` for the date, or remove the key when ``entry`` is None."""

        raise NotImplementedError

    def set_approved_overtime(self, *, employee_id: int, date_key: str, minutes: int) -> bool:
        raise NotImplementedError
