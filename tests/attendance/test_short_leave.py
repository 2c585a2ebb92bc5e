from src.attendance_tracker.attendance_tracker.attendance.short_leave import consumes_quota, is_eligible, matching_schedule


def test_late_arrival_schedule():
    assert matching_schedule("11:30", "18:00").name == "late arrival"
    assert matching_schedule("11:31", "18:00") is None


def test_early_departure_schedule():
    assert matching_schedule("09:45", "16:00").name == "early departure"
    assert matching_schedule("09:45", "15:59") is None


def test_no_schedule_without_check_out():
    assert matching_schedule("09:00", None) is None


def test_eligibility_respects_monthly_quota():
    assert is_eligible("11:00", "18:00", 0)
    assert is_eligible("11:00", "18:00", 1)
    assert not is_eligible("11:00", "18:00", 2)
    assert not is_eligible("10:00", "15:00", 0)


def test_quota_spent_only_for_late_or_short_days():
    assert not consumes_quota(check_in="09:30", total_hours=8.75)
    assert consumes_quota(check_in="11:00", total_hours=7)
    assert consumes_quota(check_in="09:00", total_hours=6.5)
