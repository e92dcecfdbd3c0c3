from __future__ import annotations

from ...core.enums import DayStatus
from ..model import WorkDay
from .base import AttendanceStrategy, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    """Scheduled to work on a past or current day but never clocked in."""

    def decide(self, day: WorkDay) -> StatusDecision:
        return StatusDecision(status=DayStatus.ABSENT)
