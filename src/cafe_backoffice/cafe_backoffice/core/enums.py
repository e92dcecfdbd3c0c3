from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization checks."""

    ADMIN = "admin"
    STAFF = "staff"


class DayStatus(str, Enum):
    """Reconciled status of one employee on one calendar day."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    OFF = "OFF"
    NOT_SCHEDULED = "Not Scheduled"
    FUTURE = "Future"


class OvertimeDecision(str, Enum):
    """Manager decision state for a day's overtime.

    PENDING: no ledger entry. REJECTED: entry of 0 minutes. APPROVED: entry > 0.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
