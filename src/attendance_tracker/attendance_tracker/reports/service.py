from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_key, now_local
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository

STATUS_FILTERS = ("all", "present", "absent", "partial", "checked-in")


@dataclass(frozen=True)
class EmployeeSummary:
    employee: Employee
    today_status: AttendanceStatus
    today_check_in: Optional[str]
    today_check_out: Optional[str]
    today_hours: float
    monthly_attendance_rate: int
    monthly_avg_hours: float
    total_records: int
    is_checked_in: bool
    last_activity: str


@dataclass(frozen=True)
class OverallStats:
    total_employees: int
    present_today: int
    checked_in_now: int
    avg_attendance_rate: int
    absent_today: int


@dataclass(frozen=True)
class AdminReport:
    employees: list[EmployeeSummary]
    overall: OverallStats
    departments: list[str]


def _matches_search(e: Employee, term: str) -> bool:
    term = term.lower()
    return any(term in (v or "").lower() for v in (e.name, e.email, e.department, e.employee_code))


def _matches_status(s: EmployeeSummary, status: str) -> bool:
    if status == "all":
        return True
    if status == "checked-in":
        return s.is_checked_in
    return s.today_status.value == status


class AdminReportService:
    """Dashboard numbers for administrators, one row per active employee."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def summarize(self, employee: Employee, today: date) -> EmployeeSummary:
        days = self._attendance.get_days(employee.employee_id)
        today_record = next((d for d in days if d.work_date == today), None)

        month = month_key(today)
        month_days = [d for d in days if month_key(d.work_date) == month]
        present = sum(1 for d in month_days if d.status == AttendanceStatus.PRESENT)
        hours = sum(d.total_hours or 0 for d in month_days)

        return EmployeeSummary(
            employee=employee,
            today_status=today_record.status if today_record else AttendanceStatus.ABSENT,
            today_check_in=today_record.check_in if today_record else None,
            today_check_out=today_record.check_out if today_record else None,
            today_hours=(today_record.total_hours or 0) if today_record else 0,
            monthly_attendance_rate=round(present / len(month_days) * 100) if month_days else 0,
            monthly_avg_hours=round(hours / len(month_days), 2) if month_days else 0,
            total_records=len(days),
            is_checked_in=bool(today_record and today_record.check_in and not today_record.check_out),
            last_activity=days[-1].work_date.isoformat() if days else "Never",
        )

    def build_report(
        self,
        *,
        search: str = "",
        department: str = "all",
        status: str = "all",
        today: Optional[date] = None,
    ) -> AdminReport:
        if status not in STATUS_FILTERS:
            raise ValidationError(f"Unknown status filter: {status!r}")

        today = today or now_local().date()
        everyone = self._employees.list_all()
        summaries = [self.summarize(e, today) for e in everyone if e.is_active]

        filtered = [
            s
            for s in summaries
            if (not search or _matches_search(s.employee, search))
            and (department == "all" or s.employee.department == department)
            and _matches_status(s, status)
        ]

        total = len(summaries)
        present_today = sum(1 for s in summaries if s.today_status == AttendanceStatus.PRESENT)
        overall = OverallStats(
            total_employees=total,
            present_today=present_today,
            checked_in_now=sum(1 for s in summaries if s.is_checked_in),
            avg_attendance_rate=round(sum(s.monthly_attendance_rate for s in summaries) / total) if total else 0,
            absent_today=total - present_today,
        )
        departments = sorted({e.department for e in everyone})
        return AdminReport(employees=filtered, overall=overall, departments=departments)
