from __future__ import annotations

from ...core.enums import DayStatus
from ..model import WorkDay
from .base import AttendanceStrategy, StatusDecision


class NotScheduledStrategy(AttendanceStrategy):
    def decide(self, day: WorkDay) -> StatusDecision:
        return StatusDecision(status=DayStatus.NOT_SCHEDULED)


class FutureStrategy(AttendanceStrategy):
    """Dates after today are unknown, not absent."""

    def decide(self, day: WorkDay) -> StatusDecision:
        return StatusDecision(status=DayStatus.FUTURE)
