from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleEntry:
    """Planned shift for one calendar day.

    ``off=True`` marks a day off regardless of the times. Times are kept as the
    raw strings entered by the manager and parsed on demand.
    """

    time_in: str = ""
    time_out: str = ""
    off: bool = False

    @property
    def has_times(self) -> bool:
        return bool(self.time_in) and bool(self.time_out)
