from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.reports.service import AdminReportService

TODAY = date(2025, 1, 8)


def _at(day, hhmm):
    h, m = hhmm.split(":")
    return datetime(2025, 1, day, int(h), int(m))


@pytest.fixture
def report(attendance_repo, employees_repo, employee_service, attendance_service):
    # u1: two full days then checked in today; u2: nothing.
    for day in (6, 7):
        attendance_service.check_in("u1", now=_at(day, "09:30"))
        attendance_service.check_out("u1", now=_at(day, "18:00"))
    attendance_service.check_in("u1", now=_at(8, "09:40"))
    return AdminReportService(attendance_repo, employees_repo)


def _by_id(result):
    return {s.employee.employee_id: s for s in result.employees}


def test_per_employee_summary(report):
    rows = _by_id(report.build_report(today=TODAY))

    u1 = rows["u1"]
    assert u1.today_status == AttendanceStatus.PRESENT
    assert u1.today_check_in == "09:40"
    assert u1.today_check_out is None
    assert u1.is_checked_in
    assert u1.monthly_attendance_rate == 100
    assert u1.monthly_avg_hours == pytest.approx(5.67)
    assert u1.total_records == 3
    assert u1.last_activity == "2025-01-08"

    u2 = rows["u2"]
    assert u2.today_status == AttendanceStatus.ABSENT
    assert u2.monthly_attendance_rate == 0
    assert u2.last_activity == "Never"


def test_overall_stats(report):
    overall = report.build_report(today=TODAY).overall
    assert overall.total_employees == 2
    assert overall.present_today == 1
    assert overall.checked_in_now == 1
    assert overall.absent_today == 1
    assert overall.avg_attendance_rate == 50


def test_filters(report):
    assert list(_by_id(report.build_report(search="asha", today=TODAY))) == ["u1"]
    assert list(_by_id(report.build_report(search="EXP0", today=TODAY))) == ["u2"]
    assert list(_by_id(report.build_report(department="Export", today=TODAY))) == ["u2"]
    assert list(_by_id(report.build_report(status="checked-in", today=TODAY))) == ["u1"]
    assert list(_by_id(report.build_report(status="absent", today=TODAY))) == ["u2"]
    assert report.build_report(status="partial", today=TODAY).employees == []
    assert report.build_report(today=TODAY).departments == ["Accounts", "Export"]


def test_unknown_status_filter(report):
    with pytest.raises(ValidationError):
        report.build_report(status="late", today=TODAY)


def test_inactive_employees_are_left_out(report, employees_repo):
    from dataclasses import replace

    employees_repo.upsert(replace(employees_repo.get_by_id("u2"), is_active=False))
    result = report.build_report(today=TODAY)
    assert list(_by_id(result)) == ["u1"]
    assert result.overall.total_employees == 1
