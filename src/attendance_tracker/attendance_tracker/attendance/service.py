from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import format_time, is_sunday, month_key, month_label, now_local
from ..core.enums import BreakType
from ..core.exceptions import PolicyViolation
from ..location.geo import LocationCheck
from .calculator import DailyRecordCalculator
from .model import AttendanceDay, AttendanceStats, ShortLeaveInfo
from .repository import AttendanceRepository
from .statistics import compute_stats

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str, Sequence[AttendanceDay]], None]


def _replace_day(days: Sequence[AttendanceDay], day: AttendanceDay) -> list[AttendanceDay]:
    out = [d for d in days if d.work_date != day.work_date]
    out.append(day)
    out.sort(key=lambda d: d.work_date)
    return out


def _find(days: Iterable[AttendanceDay], work_date: date) -> Optional[AttendanceDay]:
    return next((d for d in days if d.work_date == work_date), None)


class AttendanceService:
    """Use case: record check-in/out, breaks and notes for an employee.

    Loads the employee's history, runs the pure calculator and writes the
    result back. The clock is injectable through ``now``.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[DailyRecordCalculator] = None,
        listeners: Iterable[ChangeListener] = (),
    ):
        self._attendance = attendance
        self._calculator = calculator or DailyRecordCalculator()
        self._listeners = list(listeners)

    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    @staticmethod
    def _require_location(location: Optional[LocationCheck], action: str) -> None:
        if location is not None and not location.allowed:
            raise PolicyViolation(f"{action} denied: {location.message or 'outside office range'}")

    def _save(self, employee_id: str, days: Sequence[AttendanceDay]) -> None:
        self._attendance.save_days(employee_id, days)
        self._notify(employee_id, days)

    def _notify(self, employee_id: str, days: Sequence[AttendanceDay]) -> None:
        # Runs after the write; failures are logged only.
        for listener in self._listeners:
            try:
                listener(employee_id, days)
            except Exception:
                logger.exception("Attendance listener %r failed for %s", listener, employee_id)

    def check_in(
        self,
        employee_id: str,
        *,
        now: Optional[datetime] = None,
        location: Optional[LocationCheck] = None,
    ) -> AttendanceDay:
        now = now or now_local()
        today = now.date()
        self._require_location(location, "Check-in")

        days = self._attendance.get_days(employee_id)
        day = self._calculator.check_in(
            _find(days, today),
            employee_id=employee_id,
            work_date=today,
            time=format_time(now),
            location=location,
        )
        self._save(employee_id, _replace_day(days, day))
        logger.info("Employee %s checked in at %s (%s)", employee_id, day.check_in, day.status.value)
        return day

    def check_out(
        self,
        employee_id: str,
        *,
        now: Optional[datetime] = None,
        location: Optional[LocationCheck] = None,
    ) -> AttendanceDay:
        now = now or now_local()
        today = now.date()
        self._require_location(location, "Check-out")

        days = self._attendance.get_days(employee_id)
        ledger = self._attendance.get_ledger(employee_id)
        result = self._calculator.check_out(
            _find(days, today),
            time=format_time(now),
            ledger=ledger,
            location=location,
        )

        days = _replace_day(days, result.day)
        if result.day.short_leave_used:
            self._attendance.save_checkout(employee_id, days, result.ledger)
            self._notify(employee_id, days)
        else:
            self._save(employee_id, days)
        logger.info(
            "Employee %s checked out at %s: %.2fh, %s%s",
            employee_id,
            result.day.check_out,
            result.day.total_hours or 0,
            result.day.status.value,
            " (short leave)" if result.day.short_leave_used else "",
        )
        return result.day

    def start_break(
        self,
        employee_id: str,
        break_type: BreakType = BreakType.OTHER,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceDay:
        now = now or now_local()
        days = self._attendance.get_days(employee_id)
        day = self._calculator.start_break(_find(days, now.date()), time=format_time(now), break_type=break_type)
        self._save(employee_id, _replace_day(days, day))
        return day

    def end_break(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceDay:
        now = now or now_local()
        days = self._attendance.get_days(employee_id)
        day = self._calculator.end_break(_find(days, now.date()), time=format_time(now))
        self._save(employee_id, _replace_day(days, day))
        return day

    def add_note(
        self,
        employee_id: str,
        note: str,
        *,
        work_date: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceDay:
        work_date = work_date or (now or now_local()).date()
        days = self._attendance.get_days(employee_id)
        day = self._calculator.add_note(_find(days, work_date), note=note)
        self._save(employee_id, _replace_day(days, day))
        return day

    def get_days(self, employee_id: str) -> Sequence[AttendanceDay]:
        return self._attendance.get_days(employee_id)

    def get_today_record(self, employee_id: str, today: date) -> Optional[AttendanceDay]:
        return _find(self._attendance.get_days(employee_id), today)

    def get_stats(self, employee_id: str) -> AttendanceStats:
        return compute_stats(self._attendance.get_days(employee_id))

    def get_short_leave_info(self, employee_id: str, *, today: Optional[date] = None) -> ShortLeaveInfo:
        today = today or now_local().date()
        ledger = self._attendance.get_ledger(employee_id)
        month = month_key(today)
        return ShortLeaveInfo(
            used=ledger.used(month),
            remaining=ledger.remaining(month),
            total=ledger.limit,
            month=month_label(today),
        )

    def can_check_in(self, employee_id: str, *, today: Optional[date] = None) -> bool:
        today = today or now_local().date()
        if is_sunday(today):
            return False
        day = self.get_today_record(employee_id, today)
        return not day or not day.check_in

    def can_check_out(self, employee_id: str, *, today: Optional[date] = None) -> bool:
        today = today or now_local().date()
        day = self.get_today_record(employee_id, today)
        return bool(day and day.check_in and not day.check_out and not day.open_break)
