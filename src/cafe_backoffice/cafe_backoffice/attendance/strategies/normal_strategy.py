from __future__ import annotations

from ...core.enums import DayStatus
from ..model import WorkDay
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """Clocked in at or before the scheduled start."""

    def decide(self, day: WorkDay) -> StatusDecision:
        return StatusDecision(status=DayStatus.PRESENT)
