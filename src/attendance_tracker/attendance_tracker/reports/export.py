"""Row formatting for CSV downloads and the Google Sheets sink."""
from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceDay
from ..employees.model import Employee
from .service import EmployeeSummary

SHEET_COLUMNS = [
    "Date",
    "Employee Name",
    "Employee ID",
    "Department",
    "Email",
    "Check-In",
    "Check-Out",
    "Total Hours",
    "Status",
    "Overtime",
    "Break Duration",
    "Notes",
    "Location Verified",
    "Distance",
    "Short-Leave Used",
    "Sync Timestamp",
]

SUMMARY_COLUMNS = [
    "name",
    "email",
    "department",
    "role",
    "employee_id",
    "today_status",
    "today_check_in",
    "today_check_out",
    "today_hours",
    "monthly_attendance_rate",
    "monthly_avg_hours",
    "total_records",
]


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def sheet_row(day: AttendanceDay, employee: Optional[Employee], synced_at: datetime) -> list[str]:
    return [
        day.work_date.isoformat(),
        employee.name if employee else "Unknown",
        (employee.employee_code or employee.employee_id) if employee else "N/A",
        employee.department if employee else "N/A",
        employee.email if employee else "N/A",
        day.check_in or "",
        day.check_out or "",
        f"{day.total_hours:.2f}" if day.total_hours is not None else "",
        day.status.value,
        f"{day.overtime_hours:.2f}" if day.overtime_hours is not None else "0.00",
        f"{day.break_hours:.2f}",
        day.notes,
        _yes_no(day.location_verified),
        f"{day.distance_from_office:g}m" if day.distance_from_office is not None else "",
        _yes_no(day.short_leave_used),
        synced_at.isoformat(timespec="seconds"),
    ]


def sheet_rows(
    days_by_employee: Mapping[str, Sequence[AttendanceDay]],
    employees: Iterable[Employee],
    *,
    synced_at: datetime,
) -> list[list[str]]:
    """All records ordered by date then employee, without the header."""
    directory = {e.employee_id: e for e in employees}
    rows = [
        (day.work_date, employee_id, sheet_row(day, directory.get(employee_id), synced_at))
        for employee_id, days in days_by_employee.items()
        for day in days
    ]
    rows.sort(key=lambda r: (r[0], r[1]))
    return [r[2] for r in rows]


def summary_row(s: EmployeeSummary) -> dict:
    e = s.employee
    return {
        "name": e.name,
        "email": e.email,
        "department": e.department,
        "role": e.role.value,
        "employee_id": e.employee_code or e.employee_id,
        "today_status": s.today_status.value,
        "today_check_in": s.today_check_in or "N/A",
        "today_check_out": s.today_check_out or "N/A",
        "today_hours": s.today_hours,
        "monthly_attendance_rate": s.monthly_attendance_rate,
        "monthly_avg_hours": s.monthly_avg_hours,
        "total_records": s.total_records,
    }


def write_summary_csv(summaries: Iterable[EmployeeSummary]) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=SUMMARY_COLUMNS)
    writer.writeheader()
    for s in summaries:
        writer.writerow(summary_row(s))
    return out.getvalue().encode("utf-8-sig")
