from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import WorkDay
from ...core.constants import BREAK_THRESHOLD_MINUTES, DEDUCTED_BREAK_MINUTES


class PaidMinutesCalculator(ABC):
    """Calculator interface (Strategy Pattern for paid minutes).

    Payroll and service-charge allocation deliberately use different rules, so
    each path gets its own implementation.
    """

    @abstractmethod
    def paid_minutes(self, day: WorkDay) -> int:
        raise NotImplementedError


def apply_break_rule(worked: int, login_minutes: int) -> int:
    """Deduct the unpaid lunch hour from shifts whose clock span exceeds four hours."""
    if login_minutes > BREAK_THRESHOLD_MINUTES:
        return max(0, worked - DEDUCTED_BREAK_MINUTES)
    return max(0, worked)


def clipped_base_minutes(actual_in: int, actual_out: int, scheduled_in: int, scheduled_out: int) -> int:
    """Minutes worked inside the scheduled window only."""
    effective_in = max(actual_in, scheduled_in)
    return max(0, min(actual_out, scheduled_out) - effective_in)
