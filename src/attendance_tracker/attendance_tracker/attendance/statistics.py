from __future__ import annotations

from typing import Iterable, Sequence

from ..common.datetime_utils import is_sunday
from ..core.enums import AttendanceStatus
from .model import AttendanceDay, AttendanceStats


def working_days(days: Iterable[AttendanceDay]) -> list[AttendanceDay]:
    """Recorded days without Sundays, oldest first."""
    return sorted((d for d in days if not is_sunday(d.work_date)), key=lambda d: d.work_date)


def _streaks(days: Sequence[AttendanceDay]) -> tuple[int, int]:
    longest = run = 0
    for d in days:
        run = run + 1 if d.status == AttendanceStatus.PRESENT else 0
        longest = max(longest, run)

    current = 0
    for d in reversed(days):
        if d.status != AttendanceStatus.PRESENT:
            break
        current += 1
    return current, longest


def compute_stats(days: Iterable[AttendanceDay]) -> AttendanceStats:
    """Roll up an employee's history.

    Only stored records count: a working day with no record is not an
    absence here.
    """
    ordered = working_days(days)

    total_days = len(ordered)
    present_days = sum(1 for d in ordered if d.status == AttendanceStatus.PRESENT)
    absent_days = sum(1 for d in ordered if d.status == AttendanceStatus.ABSENT)
    total_hours = sum(d.total_hours or 0 for d in ordered)
    total_overtime = sum(d.overtime_hours or 0 for d in ordered)

    average_hours = total_hours / total_days if total_days else 0
    attendance_rate = present_days / total_days * 100 if total_days else 0
    current_streak, longest_streak = _streaks(ordered)

    return AttendanceStats(
        total_days=total_days,
        present_days=present_days,
        absent_days=absent_days,
        average_hours=round(average_hours, 2),
        attendance_rate=round(attendance_rate, 2),
        total_overtime=round(total_overtime, 2),
        current_streak=current_streak,
        longest_streak=longest_streak,
    )
