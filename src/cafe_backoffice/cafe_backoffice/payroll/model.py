from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..service_charge.model import ServiceChargeBreakdown


@dataclass(frozen=True)
class Deductions:
    """Mandatory contributions. Always zero for now; kept for payslip layout."""

    sss: float = 0.0
    philhealth: float = 0.0
    pagibig: float = 0.0

    @property
    def total(self) -> float:
        return self.sss + self.philhealth + self.pagibig


@dataclass(frozen=True)
class PayrollRecord:
    employee_id: int
    employee: str
    position: str
    rate: float
    regular_hours: float
    overtime_hours: float
    regular_pay: float
    overtime_pay: float
    service_charge: float
    gross_pay: float
    net_pay: float
    days_present: int = 0
    days_absent: int = 0
    days_late: int = 0
    deductions: Deductions = field(default_factory=Deductions)
    custom_deduction: float = 0.0
    deduction_notes: str = ""
    service_charge_breakdown: Optional[ServiceChargeBreakdown] = None

    @property
    def total_hours(self) -> float:
        return self.regular_hours + self.overtime_hours


@dataclass(frozen=True)
class PayrollPeriodSummary:
    start: str
    end: str
    total_gross: float
    total_net: float
    total_hours: float
    service_charge_pool_total: float
    service_charge_entries: list[tuple[str, float]] = field(default_factory=list)
