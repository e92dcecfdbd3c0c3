from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.in_memory_repository import InMemoryAttendanceRepository
from .attendance.model import AttendanceRecord
from .attendance.service import AttendanceService
from .core import constants
from .employees.in_memory_repository import InMemoryEmployeeRepository
from .employees.model import Employee
from .overtime.service import OvertimeService
from .payroll.calculator.allocation_calculator import AllocationWeightCalculator
from .payroll.repository import InMemoryPayrollSnapshotRepository
from .payroll.service import PayrollService
from .sales.repository import InMemorySalesRepository, SalesRow
from .sales.service import SalesIngestService
from .schedules.service import ScheduleService
from .service_charge.service import ServiceChargeDistributionService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    attendance_repo: InMemoryAttendanceRepository
    sales_repo: InMemorySalesRepository
    snapshots_repo: InMemoryPayrollSnapshotRepository

    attendance_service: AttendanceService
    schedule_service: ScheduleService
    overtime_service: OvertimeService
    sales_service: SalesIngestService
    service_charge_service: ServiceChargeDistributionService
    payroll_service: PayrollService


def build_container(
    *,
    settings: Optional[Mapping[str, Any]] = None,
    employees: Iterable[Employee] = (),
    attendance: Iterable[AttendanceRecord] = (),
    sales: Iterable[SalesRow] = (),
) -> Container:
    settings = settings or {}

    employees_repo = InMemoryEmployeeRepository(list(employees))
    attendance_repo = InMemoryAttendanceRepository(attendance)
    sales_repo = InMemorySalesRepository(sales)
    snapshots_repo = InMemoryPayrollSnapshotRepository()

    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        strategy_factory=AttendanceStrategyFactory(),
    )
    schedule_service = ScheduleService(employees_repo)
    overtime_service = OvertimeService(employees_repo, attendance_service)
    sales_service = SalesIngestService()
    service_charge_service = ServiceChargeDistributionService(
        employees_repo,
        attendance_repo,
        sales_repo,
        sales_service=sales_service,
        calculator=AllocationWeightCalculator(
            int(settings.get("SERVICE_CHARGE_EXTRA_DEDUCTION_MINUTES", constants.EXTRA_DEDUCTION_MINUTES))
        ),
        ghost_count=int(settings.get("SERVICE_CHARGE_GHOST_COUNT", constants.GHOST_COUNT)),
        ghost_minutes_each=int(settings.get("SERVICE_CHARGE_GHOST_MINUTES", constants.GHOST_MINUTES_EACH)),
        payout_rate=float(settings.get("SERVICE_CHARGE_PAYOUT_RATE", constants.PAYOUT_RATE)),
    )
    payroll_service = PayrollService(
        employees_repo,
        attendance_service,
        service_charge_service,
        snapshots_repo,
        overtime_multiplier=float(settings.get("OVERTIME_RATE_MULTIPLIER", constants.OVERTIME_RATE_MULTIPLIER)),
    )

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        sales_repo=sales_repo,
        snapshots_repo=snapshots_repo,
        attendance_service=attendance_service,
        schedule_service=schedule_service,
        overtime_service=overtime_service,
        sales_service=sales_service,
        service_charge_service=service_charge_service,
        payroll_service=payroll_service,
    )
