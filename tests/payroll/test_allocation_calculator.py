from src.cafe_backoffice.cafe_backoffice.attendance.model import AttendanceRecord, WorkDay
from src.cafe_backoffice.cafe_backoffice.payroll.calculator.allocation_calculator import AllocationWeightCalculator
from src.cafe_backoffice.cafe_backoffice.schedules.model import ScheduleEntry


def _day(time_in, time_out, schedule, approved=None):
    return WorkDay(
        date_key="2025-10-16",
        schedule=schedule,
        record=AttendanceRecord("Ana", "2025-10-16", time_in, time_out),
        approved_overtime=approved,
    )


def test_late_arrival_zeroes_the_day(shift):
    calc = AllocationWeightCalculator()

    assert calc.paid_minutes(_day("09:15", "20:00", shift)) == 0
    assert calc.allocation_weight_minutes(_day("09:15", "20:00", shift)) == 0


def test_unapproved_overtime_counts(shift):
    calc = AllocationWeightCalculator()
    day = _day("09:00", "18:00", shift)

    assert calc.paid_minutes(day) == 480
    assert calc.allocation_weight_minutes(day) == 420


def test_approved_amount_replaces_clocked_overtime(shift):
    calc = AllocationWeightCalculator()

    assert calc.paid_minutes(_day("09:00", "18:00", shift, approved=30)) == 450


def test_rejected_overtime_still_counts_clocked_minutes(shift):
    assert AllocationWeightCalculator().paid_minutes(_day("09:00", "18:00", shift, approved=0)) == 480


def test_unscheduled_day_uses_full_span():
    calc = AllocationWeightCalculator()

    assert calc.paid_minutes(_day("10:00", "16:00", None)) == 300
    assert calc.paid_minutes(_day("10:00", "16:00", ScheduleEntry(off=True))) == 300
    assert calc.paid_minutes(_day("10:00", "13:00", None)) == 180


def test_unusable_clock_or_schedule_weighs_nothing(shift):
    calc = AllocationWeightCalculator()

    assert calc.paid_minutes(_day("17:00", "09:00", shift)) == 0
    assert calc.paid_minutes(_day("09:00", "", shift)) == 0
    assert calc.paid_minutes(_day("09:00", "17:00", ScheduleEntry(time_in="nine", time_out="five"))) == 0


def test_extra_deduction_never_goes_negative():
    calc = AllocationWeightCalculator(extra_deduction_minutes=60)

    assert calc.allocation_weight_minutes(_day("10:00", "10:30", None)) == 0


def test_late_against_start_only_schedule_zeroes_the_day():
    start_only = ScheduleEntry(time_in="09:00", time_out="")
    calc = AllocationWeightCalculator()

    assert calc.allocation_weight_minutes(_day("09:30", "17:00", start_only)) == 0
    # On time against the same schedule falls back to the full clock span.
    assert calc.paid_minutes(_day("09:00", "17:00", start_only)) == 420
