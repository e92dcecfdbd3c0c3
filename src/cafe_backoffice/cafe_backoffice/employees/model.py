from __future__ import annotations

from dataclasses import dataclass, field

from ..schedules.model import ScheduleEntry


@dataclass(frozen=True)
class Employee:
    """Domain entity: staff member with a per-day schedule and overtime ledger.

    ``schedule`` and ``approved_overtime`` are keyed by ``YYYY-MM-DD`` date keys.
    A missing schedule key means "not scheduled"; a missing overtime key means
    the manager has not decided yet.
    """

    employee_id: int
    name: str
    rate: float
    position: str = "Staff"
    schedule: dict[str, ScheduleEntry] = field(default_factory=dict)
    approved_overtime: dict[str, int] = field(default_factory=dict)

    @property
    def name_key(self) -> str:
        return normalize_name(self.name)


def normalize_name(name: str) -> str:
    return (name or "").strip().lower()
