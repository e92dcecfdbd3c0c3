from __future__ import annotations

from ...core.enums import DayStatus
from ..model import WorkDay
from .base import AttendanceStrategy, StatusDecision


class OffStrategy(AttendanceStrategy):
    """Day off: never absent, never late, even if someone clocked in."""

    def decide(self, day: WorkDay) -> StatusDecision:
        return StatusDecision(status=DayStatus.OFF)
