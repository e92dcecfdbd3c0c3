from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import DayStatus
from ..model import WorkDay


@dataclass(frozen=True)
class StatusDecision:
    status: DayStatus
    note: Optional[str] = None
    late_minutes: int = 0


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a day's attendance status."""

    @abstractmethod
    def decide(self, day: WorkDay) -> StatusDecision:
        raise NotImplementedError
