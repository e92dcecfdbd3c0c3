from __future__ import annotations

from ...common.datetime_utils import parse_clock_time
from ...core.enums import DayStatus
from ..model import WorkDay
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in: any minute after the scheduled start, no grace period."""

    def decide(self, day: WorkDay) -> StatusDecision:
        actual_in = parse_clock_time(day.record.time_in) if day.record else None
        scheduled_in = parse_clock_time(day.schedule.time_in) if day.schedule else None
        late = 0
        if actual_in is not None and scheduled_in is not None:
            late = max(actual_in - scheduled_in, 0)
        return StatusDecision(status=DayStatus.LATE, note=f"Late {late} min", late_minutes=late)
