from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import parse_clock_time
from .model import WorkDay
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .strategies.off_strategy import OffStrategy
from .strategies.unscheduled_strategy import FutureStrategy, NotScheduledStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_day(self, day: WorkDay) -> AttendanceStrategy:
        if day.is_future:
            return FutureStrategy()

        schedule = day.schedule
        if schedule and schedule.off:
            return OffStrategy()
        if not schedule or not schedule.time_in:
            return NotScheduledStrategy()
        if not day.record or not day.record.time_in:
            return AbsentStrategy()

        actual_in = parse_clock_time(day.record.time_in)
        scheduled_in = parse_clock_time(schedule.time_in)
        if actual_in is not None and scheduled_in is not None and actual_in > scheduled_in:
            return LateStrategy()
        return NormalStrategy()
