from __future__ import annotations

from dataclasses import dataclass

from .base import PaidMinutesCalculator, apply_break_rule, clipped_base_minutes
from ...attendance.model import WorkDay
from ...core.constants import BREAK_THRESHOLD_MINUTES


@dataclass(frozen=True)
class PayableBreakdown:
    worked_minutes: int = 0
    regular_minutes: int = 0
    break_deducted: bool = False
    potential_overtime_minutes: int = 0
    approved_overtime_minutes: int = 0
    login_minutes: int = 0

    @property
    def payable_minutes(self) -> int:
        return self.regular_minutes + self.approved_overtime_minutes


class StandardPayrollCalculator(PaidMinutesCalculator):
    """Payroll rule.

    Worked time is clipped to the scheduled window, one hour is deducted when
    the clock span exceeds four hours, and only manager-approved overtime is
    added. Lateness affects the status label only.
    """

    def breakdown(self, day: WorkDay) -> PayableBreakdown:
        window = day.scheduled_window
        span = day.record.clock_span() if day.record else None
        if window is None or span is None:
            return PayableBreakdown()

        scheduled_in, scheduled_out = window
        actual_in, actual_out = span
        login = max(actual_out - actual_in, 0)
        worked = clipped_base_minutes(actual_in, actual_out, scheduled_in, scheduled_out)
        regular = apply_break_rule(worked, actual_out - actual_in)

        return PayableBreakdown(
            worked_minutes=worked,
            regular_minutes=regular,
            break_deducted=(actual_out - actual_in) > BREAK_THRESHOLD_MINUTES,
            potential_overtime_minutes=max(0, actual_out - scheduled_out),
            approved_overtime_minutes=max(int(day.approved_overtime or 0), 0),
            login_minutes=login,
        )

    def payable_minutes(self, day: WorkDay) -> int:
        return self.breakdown(day).payable_minutes

    def paid_minutes(self, day: WorkDay) -> int:
        return self.payable_minutes(day)
