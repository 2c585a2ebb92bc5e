from datetime import date

import pytest

from src.attendance_tracker.attendance_tracker.attendance.calculator import DailyRecordCalculator
from src.attendance_tracker.attendance_tracker.attendance.model import ShortLeaveLedger
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus, BreakType
from src.attendance_tracker.attendance_tracker.core.exceptions import InvalidTimeFormat, PolicyViolation
from src.attendance_tracker.attendance_tracker.location.geo import LocationCheck

MONDAY = date(2025, 1, 6)
SUNDAY = date(2025, 1, 5)


@pytest.fixture
def calc():
    ids = iter(f"id-{n}" for n in range(100))
    return DailyRecordCalculator(id_factory=lambda: next(ids))


def _checked_in(calc, time="09:30"):
    return calc.check_in(None, employee_id="u1", work_date=MONDAY, time=time)


def test_check_in_creates_record(calc):
    day = _checked_in(calc)
    assert day.record_id == "id-0"
    assert day.check_in == "09:30"
    assert day.status == AttendanceStatus.PRESENT
    assert day.is_checked_in


def test_late_check_in_is_partial_until_check_out(calc):
    assert _checked_in(calc, "10:15").status == AttendanceStatus.PARTIAL


def test_check_in_twice_is_rejected(calc):
    day = _checked_in(calc)
    with pytest.raises(PolicyViolation, match="Already checked in"):
        calc.check_in(day, employee_id="u1", work_date=MONDAY, time="10:00")


def test_check_in_on_sunday_is_rejected(calc):
    with pytest.raises(PolicyViolation, match="Sunday"):
        calc.check_in(None, employee_id="u1", work_date=SUNDAY, time="09:00")


def test_check_in_rejects_bad_time(calc):
    with pytest.raises(InvalidTimeFormat):
        calc.check_in(None, employee_id="u1", work_date=MONDAY, time="9:00")


def test_check_in_records_location(calc):
    verdict = LocationCheck(allowed=True, distance=12, message="ok", coordinates="28.661106, 77.345794")
    day = calc.check_in(None, employee_id="u1", work_date=MONDAY, time="09:00", location=verdict)
    assert day.location == "28.661106, 77.345794"
    assert day.location_verified
    assert day.distance_from_office == 12


def test_full_day_without_short_leave(calc):
    result = calc.check_out(_checked_in(calc, "09:30"), time="18:15", ledger=ShortLeaveLedger())
    assert result.day.status == AttendanceStatus.PRESENT
    assert result.day.total_hours == 8.75
    assert result.day.overtime_hours == 0.75
    assert not result.day.short_leave_used
    assert result.ledger.used("2025-01") == 0


def test_late_arrival_consumes_short_leave(calc):
    result = calc.check_out(_checked_in(calc, "11:00"), time="18:00", ledger=ShortLeaveLedger())
    assert result.day.status == AttendanceStatus.PRESENT
    assert result.day.short_leave_used
    assert result.ledger.used("2025-01") == 1


def test_third_short_leave_in_month_is_not_available(calc):
    ledger = ShortLeaveLedger(used_by_month={"2025-01": 2})
    result = calc.check_out(_checked_in(calc, "11:00"), time="18:00", ledger=ledger)
    # Seven raw hours still make a present day on their own.
    assert result.day.status == AttendanceStatus.PRESENT
    assert not result.day.short_leave_used
    assert result.ledger.used("2025-01") == 2


def test_quota_from_other_month_does_not_count(calc):
    ledger = ShortLeaveLedger(used_by_month={"2024-12": 2})
    result = calc.check_out(_checked_in(calc, "11:00"), time="18:00", ledger=ledger)
    assert result.day.short_leave_used


def test_short_day_is_partial(calc):
    result = calc.check_out(_checked_in(calc, "10:00"), time="15:00", ledger=ShortLeaveLedger())
    assert result.day.status == AttendanceStatus.PARTIAL
    assert result.day.total_hours == 5
    assert not result.day.short_leave_used


def test_breaks_are_subtracted_from_total(calc):
    day = _checked_in(calc, "09:45")
    day = calc.start_break(day, time="13:00", break_type=BreakType.LUNCH)
    day = calc.end_break(day, time="14:00")
    result = calc.check_out(day, time="18:00", ledger=ShortLeaveLedger())

    assert result.day.total_hours == 7.25
    assert result.day.breaks[0].duration == 1
    assert result.day.break_hours == 1
    assert result.day.status == AttendanceStatus.PRESENT


def test_second_break_while_one_is_open_is_rejected(calc):
    day = calc.start_break(_checked_in(calc), time="11:00")
    with pytest.raises(PolicyViolation, match="already in progress"):
        calc.start_break(day, time="11:05")


def test_end_break_without_open_break_is_rejected(calc):
    with pytest.raises(PolicyViolation, match="No break in progress"):
        calc.end_break(_checked_in(calc), time="11:00")


def test_break_before_check_in_is_rejected(calc):
    with pytest.raises(PolicyViolation):
        calc.start_break(_checked_in(calc, "10:00"), time="09:00")


def test_break_requires_check_in(calc):
    with pytest.raises(PolicyViolation, match="No active check-in"):
        calc.start_break(None, time="11:00")


def test_break_after_check_out_is_rejected(calc):
    result = calc.check_out(_checked_in(calc), time="18:00", ledger=ShortLeaveLedger())
    with pytest.raises(PolicyViolation, match="after checking out"):
        calc.start_break(result.day, time="18:30")


def test_check_out_while_on_break_is_rejected(calc):
    day = calc.start_break(_checked_in(calc, "09:00"), time="16:00")
    with pytest.raises(PolicyViolation, match="End your break"):
        calc.check_out(day, time="18:00", ledger=ShortLeaveLedger())
    assert day.check_out is None

    day = calc.end_break(day, time="16:30")
    result = calc.check_out(day, time="18:00", ledger=ShortLeaveLedger())
    assert result.day.total_hours == 8.5
    assert result.day.overtime_hours == 0.5


def test_latest_allowed_arrival_with_exactly_seven_hours_spends_quota(calc):
    result = calc.check_out(_checked_in(calc, "11:30"), time="18:30", ledger=ShortLeaveLedger())
    assert result.day.total_hours == 7
    assert result.day.status == AttendanceStatus.PRESENT
    assert result.day.short_leave_used
    assert result.ledger.used("2025-01") == 1


def test_check_out_rules(calc):
    with pytest.raises(PolicyViolation, match="No active check-in"):
        calc.check_out(None, time="18:00", ledger=ShortLeaveLedger())

    day = _checked_in(calc, "09:30")
    with pytest.raises(PolicyViolation, match="earlier than check-in"):
        calc.check_out(day, time="09:00", ledger=ShortLeaveLedger())

    done = calc.check_out(day, time="18:00", ledger=ShortLeaveLedger()).day
    with pytest.raises(PolicyViolation, match="Already checked out"):
        calc.check_out(done, time="18:30", ledger=ShortLeaveLedger())


def test_rejected_transition_leaves_input_untouched(calc):
    day = calc.start_break(_checked_in(calc), time="11:00")
    with pytest.raises(PolicyViolation):
        calc.start_break(day, time="11:30")
    assert len(day.breaks) == 1
    assert day.breaks[0].end_time is None


def test_add_note(calc):
    day = calc.add_note(_checked_in(calc), note="  client visit ")
    assert day.notes == "client visit"
    with pytest.raises(PolicyViolation, match="No attendance record"):
        calc.add_note(None, note="x")
