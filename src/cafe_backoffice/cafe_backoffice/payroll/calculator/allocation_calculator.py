from __future__ import annotations

from .base import PaidMinutesCalculator, apply_break_rule, clipped_base_minutes
from ...attendance.model import WorkDay
from ...common.datetime_utils import parse_clock_time
from ...core.constants import EXTRA_DEDUCTION_MINUTES


class AllocationWeightCalculator(PaidMinutesCalculator):
    """Service-charge weighting rule, stricter than payroll in two ways.

    - A late arrival against a scheduled start zeroes the whole day, even when
      the end time is missing.
    - Minutes clocked past the scheduled end count even without an approval,
      unless the manager approved a specific amount.

    Days without a usable schedule weigh the full clock span (break rule applied).
    """

    def __init__(self, extra_deduction_minutes: int = EXTRA_DEDUCTION_MINUTES):
        self._extra_deduction = int(extra_deduction_minutes)

    def paid_minutes(self, day: WorkDay) -> int:
        record = day.record
        if not record or not record.time_in or not record.time_out:
            return 0
        span = record.clock_span()
        if span is None:
            return 0
        actual_in, actual_out = span
        if actual_out <= actual_in:
            return 0
        login = actual_out - actual_in

        schedule = day.schedule
        if schedule and not schedule.off:
            scheduled_in = parse_clock_time(schedule.time_in)
            if scheduled_in is not None and actual_in > scheduled_in:
                return 0

        if not schedule or schedule.off or not schedule.has_times:
            regular = apply_break_rule(login, login)
        else:
            window = day.scheduled_window
            if window is None:
                return 0
            scheduled_in, scheduled_out = window
            regular = apply_break_rule(
                clipped_base_minutes(actual_in, actual_out, scheduled_in, scheduled_out), login
            )

        approved = int(day.approved_overtime or 0)
        if approved > 0:
            return regular + approved

        if schedule and schedule.time_out:
            scheduled_out = parse_clock_time(schedule.time_out)
            if scheduled_out is not None and actual_out > scheduled_out:
                return regular + (actual_out - scheduled_out)
        return regular

    def allocation_weight_minutes(self, day: WorkDay) -> int:
        """Paid minutes less the fixed extra hour; the basis for pool shares."""
        return max(0, self.paid_minutes(day) - self._extra_deduction)
