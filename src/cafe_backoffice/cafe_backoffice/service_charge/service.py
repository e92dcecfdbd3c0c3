from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord, WorkDay
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import DateLike, iter_date_keys, to_date
from ..core import constants
from ..employees.model import Employee, normalize_name
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.allocation_calculator import AllocationWeightCalculator
from ..sales.repository import SalesRepository
from ..sales.service import SalesIngestService
from .model import DailyMinutesSummary, DistributionResult, ServiceChargeBreakdown, ServiceChargeDayDetail

logger = logging.getLogger(__name__)


class ServiceChargeDistributionService:
    """Splits each day's service-charge pool across the staff who worked it.

    Weights come from ``AllocationWeightCalculator``. Whenever anyone qualifies,
    two ghost slots of twelve hours each join the day; the pool is split into a
    payout part shared by real staff in proportion to their weight and a
    withheld part notionally held by the ghosts, which is reported but never
    paid. A day on which nobody qualifies keeps its pool undistributed.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        sales: SalesRepository,
        *,
        sales_service: Optional[SalesIngestService] = None,
        calculator: Optional[AllocationWeightCalculator] = None,
        ghost_count: int = constants.GHOST_COUNT,
        ghost_minutes_each: int = constants.GHOST_MINUTES_EACH,
        payout_rate: float = constants.PAYOUT_RATE,
    ):
        self._employees = employees
        self._attendance = attendance
        self._sales = sales
        self._sales_service = sales_service or SalesIngestService()
        self._calculator = calculator or AllocationWeightCalculator()
        self._ghost_count = int(ghost_count)
        self._ghost_minutes_each = int(ghost_minutes_each)
        self._payout_rate = float(payout_rate)
        self._withhold_rate = 1.0 - self._payout_rate

    def daily_totals(self) -> dict[str, float]:
        return self._sales_service.build_daily_service_charge_totals(self._sales.list_all())

    def _first_records(self) -> dict[str, dict[str, AttendanceRecord]]:
        """name key -> date key -> first record for that day."""
        index: dict[str, dict[str, AttendanceRecord]] = {}
        for record in self._attendance.list_all():
            index.setdefault(record.name_key, {}).setdefault(record.date_key, record)
        return index

    def distribute(
        self,
        start: Optional[DateLike],
        end: Optional[DateLike],
        *,
        daily_totals: Optional[Mapping[str, float]] = None,
        employees: Optional[Sequence[Employee]] = None,
    ) -> DistributionResult:
        if not start or not end or to_date(start) > to_date(end):
            return DistributionResult()

        pools = dict(daily_totals) if daily_totals else self.daily_totals()
        staff = list(employees) if employees is not None else list(self._employees.list_all())
        records = self._first_records()
        known = {e.name_key for e in staff}
        orphaned = set(records) - known
        if orphaned:
            logger.debug("Ignoring attendance for unknown staff: %s", sorted(orphaned))

        allocations: dict[int, ServiceChargeBreakdown] = {}
        daily_minutes: dict[str, DailyMinutesSummary] = {}
        range_totals: dict[str, float] = {}
        undistributed: dict[str, float] = {}

        for key in iter_date_keys(start, end):
            employee_minutes: dict[int, int] = {}
            team_minutes = 0
            attendance_minutes = 0

            for employee in staff:
                record = records.get(normalize_name(employee.name), {}).get(key)
                day = WorkDay(
                    date_key=key,
                    schedule=employee.schedule.get(key),
                    record=record,
                    approved_overtime=employee.approved_overtime.get(key),
                )
                weight = self._calculator.allocation_weight_minutes(day)
                if weight > 0:
                    employee_minutes[employee.employee_id] = weight
                    team_minutes += weight

                span = record.clock_span() if record else None
                if span and span[1] > span[0]:
                    attendance_minutes += span[1] - span[0]

            ghost_minutes = self._ghost_count * self._ghost_minutes_each if team_minutes > 0 else 0
            summary = DailyMinutesSummary(
                total_minutes=team_minutes + ghost_minutes if team_minutes > 0 else 0,
                team_minutes=team_minutes,
                attendance_minutes=attendance_minutes,
                employee_minutes=employee_minutes,
                ghost_minutes=ghost_minutes,
            )
            daily_minutes[key] = summary

            pool = float(pools.get(key) or 0)
            if pool <= 0:
                continue
            if team_minutes <= 0:
                undistributed[key] = pool
                logger.info("Service charge of %.2f on %s not distributed: no qualifying staff", pool, key)
                continue

            range_totals[key] = pool
            self._split_day(key, pool, summary, allocations)

        return DistributionResult(
            allocations=allocations,
            daily_service_charge_totals=range_totals,
            daily_minutes=daily_minutes,
            undistributed_pools=undistributed,
        )

    def _split_day(
        self,
        key: str,
        pool: float,
        summary: DailyMinutesSummary,
        allocations: dict[int, ServiceChargeBreakdown],
    ) -> None:
        employee_share_pool = pool * self._payout_rate
        ghost_share_total = pool * self._withhold_rate
        ghost_share_per_ghost = ghost_share_total / self._ghost_count if self._ghost_count else 0.0

        for employee_id, minutes in summary.employee_minutes.items():
            ratio = minutes / summary.team_minutes
            gross_share = pool * ratio
            share = employee_share_pool * ratio
            detail = ServiceChargeDayDetail(
                date_key=key,
                pool=pool,
                total_minutes=summary.total_minutes,
                team_minutes=summary.team_minutes,
                attendance_minutes=summary.attendance_minutes,
                employee_minutes=minutes,
                gross_share=gross_share,
                share=share,
                deduction_amount=gross_share - share,
                deduction_rate=self._withhold_rate,
                ghost_minutes=summary.ghost_minutes,
                ghost_count=self._ghost_count,
                ghost_share_total=ghost_share_total,
                ghost_share_per_ghost=ghost_share_per_ghost,
            )
            allocations.setdefault(employee_id, ServiceChargeBreakdown()).add(detail)

    def breakdown(self, employee_id: int, start: DateLike, end: DateLike) -> ServiceChargeBreakdown:
        return self.distribute(start, end).breakdown_for(employee_id).rounded()
