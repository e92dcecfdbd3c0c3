from __future__ import annotations

from dataclasses import dataclass, field, replace


def round_currency(value: float) -> float:
    return round(value, 2)


@dataclass(frozen=True)
class DailyMinutesSummary:
    """Per-date minute totals behind the pool split.

    ``team_minutes`` sums qualifying allocation weights only; ``attendance_minutes``
    is the raw clocked time of everyone and is informational.
    """

    total_minutes: int = 0
    team_minutes: int = 0
    attendance_minutes: int = 0
    employee_minutes: dict[int, int] = field(default_factory=dict)
    ghost_minutes: int = 0


@dataclass(frozen=True)
class ServiceChargeDayDetail:
    date_key: str
    pool: float
    total_minutes: int
    team_minutes: int
    attendance_minutes: int
    employee_minutes: int
    gross_share: float
    share: float
    deduction_amount: float
    deduction_rate: float
    ghost_minutes: int
    ghost_count: int
    ghost_share_total: float
    ghost_share_per_ghost: float


@dataclass
class ServiceChargeBreakdown:
    total_share: float = 0.0
    total_pool: float = 0.0
    covered_days: int = 0
    details: list[ServiceChargeDayDetail] = field(default_factory=list)

    def add(self, detail: ServiceChargeDayDetail) -> None:
        self.total_share += detail.share
        self.total_pool += detail.pool
        self.covered_days += 1
        self.details.append(detail)

    def rounded(self) -> "ServiceChargeBreakdown":
        """Copy for display/export with currency fields rounded to cents."""
        return ServiceChargeBreakdown(
            total_share=round_currency(self.total_share),
            total_pool=round_currency(self.total_pool),
            covered_days=self.covered_days,
            details=[
                replace(
                    d,
                    pool=round_currency(d.pool),
                    gross_share=round_currency(d.gross_share),
                    share=round_currency(d.share),
                    deduction_amount=round_currency(d.deduction_amount),
                    ghost_share_total=round_currency(d.ghost_share_total),
                    ghost_share_per_ghost=round_currency(d.ghost_share_per_ghost),
                )
                for d in sorted(self.details, key=lambda d: d.date_key)
            ],
        )


@dataclass(frozen=True)
class DistributionResult:
    allocations: dict[int, ServiceChargeBreakdown] = field(default_factory=dict)
    daily_service_charge_totals: dict[str, float] = field(default_factory=dict)
    daily_minutes: dict[str, DailyMinutesSummary] = field(default_factory=dict)
    undistributed_pools: dict[str, float] = field(default_factory=dict)

    def breakdown_for(self, employee_id: int) -> ServiceChargeBreakdown:
        return self.allocations.get(employee_id) or ServiceChargeBreakdown()
