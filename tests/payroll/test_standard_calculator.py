from src.cafe_backoffice.cafe_backoffice.attendance.model import AttendanceRecord, WorkDay
from src.cafe_backoffice.cafe_backoffice.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.cafe_backoffice.cafe_backoffice.schedules.model import ScheduleEntry


def _day(time_in, time_out, schedule, approved=None):
    return WorkDay(
        date_key="2025-10-16",
        schedule=schedule,
        record=AttendanceRecord("Ana", "2025-10-16", time_in, time_out),
        approved_overtime=approved,
    )


def test_standard_calculator_late_day_subtracts_break(shift):
    breakdown = StandardPayrollCalculator().breakdown(_day("09:15", "17:00", shift))

    assert breakdown.worked_minutes == 465
    assert breakdown.break_deducted is True
    assert breakdown.payable_minutes == 405


def test_standard_calculator_clips_early_arrival(shift):
    # 08:30 arrival: only the scheduled window counts, break rule uses the full span.
    assert StandardPayrollCalculator().payable_minutes(_day("08:30", "17:00", shift)) == 420


def test_standard_calculator_short_shift_keeps_break():
    schedule = ScheduleEntry(time_in="09:00", time_out="13:00")
    breakdown = StandardPayrollCalculator().breakdown(_day("09:00", "13:00", schedule))

    assert breakdown.break_deducted is False
    assert breakdown.payable_minutes == 240


def test_standard_calculator_adds_only_approved_overtime(shift):
    calc = StandardPayrollCalculator()

    pending = calc.breakdown(_day("09:00", "18:00", shift))
    approved = calc.breakdown(_day("09:00", "18:00", shift, approved=30))
    rejected = calc.breakdown(_day("09:00", "18:00", shift, approved=0))

    assert pending.potential_overtime_minutes == 60
    assert pending.payable_minutes == 420
    assert approved.payable_minutes == 450
    assert rejected.payable_minutes == 420


def test_standard_calculator_pays_nothing_without_working_schedule():
    calc = StandardPayrollCalculator()

    assert calc.paid_minutes(_day("09:00", "17:00", ScheduleEntry(off=True))) == 0
    assert calc.paid_minutes(_day("09:00", "17:00", None)) == 0


def test_standard_calculator_inverted_or_missing_clock_out(shift):
    calc = StandardPayrollCalculator()

    assert calc.paid_minutes(_day("17:00", "09:00", shift)) == 0
    assert calc.paid_minutes(_day("09:00", "", shift)) == 0
