from src.cafe_backoffice.cafe_backoffice.attendance.factory import AttendanceStrategyFactory
from src.cafe_backoffice.cafe_backoffice.attendance.model import AttendanceRecord, WorkDay
from src.cafe_backoffice.cafe_backoffice.attendance.strategies.absent_strategy import AbsentStrategy
from src.cafe_backoffice.cafe_backoffice.attendance.strategies.late_strategy import LateStrategy
from src.cafe_backoffice.cafe_backoffice.attendance.strategies.normal_strategy import NormalStrategy
from src.cafe_backoffice.cafe_backoffice.attendance.strategies.off_strategy import OffStrategy
from src.cafe_backoffice.cafe_backoffice.attendance.strategies.unscheduled_strategy import (
    FutureStrategy,
    NotScheduledStrategy,
)
from src.cafe_backoffice.cafe_backoffice.core.enums import DayStatus
from src.cafe_backoffice.cafe_backoffice.schedules.model import ScheduleEntry


def _day(schedule=None, record=None, is_future=False):
    return WorkDay(date_key="2025-10-16", schedule=schedule, record=record, is_future=is_future)


def test_factory_checkin_on_time(shift):
    day = _day(shift, AttendanceRecord("Ana", "2025-10-16", "09:00", "17:00"))

    strategy = AttendanceStrategyFactory().for_day(day)

    assert isinstance(strategy, NormalStrategy)
    assert strategy.decide(day).status == DayStatus.PRESENT


def test_factory_checkin_late_has_no_grace(shift):
    day = _day(shift, AttendanceRecord("Ana", "2025-10-16", "09:01", "17:00"))

    strategy = AttendanceStrategyFactory().for_day(day)
    decision = strategy.decide(day)

    assert isinstance(strategy, LateStrategy)
    assert decision.status == DayStatus.LATE
    assert decision.late_minutes == 1
    assert decision.note == "Late 1 min"


def test_factory_off_day_wins_over_attendance():
    day = _day(ScheduleEntry(off=True), AttendanceRecord("Ana", "2025-10-16", "09:00", "17:00"))

    assert isinstance(AttendanceStrategyFactory().for_day(day), OffStrategy)


def test_factory_scheduled_without_clock_in_is_absent(shift):
    assert isinstance(AttendanceStrategyFactory().for_day(_day(shift)), AbsentStrategy)


def test_factory_without_schedule_is_not_scheduled():
    day = _day(None, AttendanceRecord("Ana", "2025-10-16", "09:00", "17:00"))

    assert isinstance(AttendanceStrategyFactory().for_day(day), NotScheduledStrategy)


def test_factory_future_day(shift):
    strategy = AttendanceStrategyFactory().for_day(_day(shift, is_future=True))

    assert isinstance(strategy, FutureStrategy)
    assert strategy.decide(_day(shift, is_future=True)).status == DayStatus.FUTURE
