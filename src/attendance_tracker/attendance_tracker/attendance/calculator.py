from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import hours_between, is_sunday, month_key, to_minutes
from ..core.constants import STANDARD_DAILY_HOURS
from ..core.enums import BreakType
from ..core.exceptions import PolicyViolation
from ..location.geo import LocationCheck
from .factory import AttendanceStrategyFactory
from .model import AttendanceDay, BreakInterval, ShortLeaveLedger
from .short_leave import consumes_quota, is_eligible


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class CheckOutResult:
    day: AttendanceDay
    ledger: ShortLeaveLedger


class DailyRecordCalculator:
    """State machine for one employee's day.

    NoRecord -> CheckedIn -> (OnBreak -> CheckedIn)* -> Completed.
    Every transition returns new values; a rejected transition raises
    ``PolicyViolation`` and changes nothing.
    """

    def __init__(
        self,
        *,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        id_factory: Callable[[], str] = _new_id,
    ):
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._new_id = id_factory

    def _status(self, work_date: date, check_in: str, check_out: Optional[str], eligible: bool):
        strategy = self._factory.for_day(work_date=work_date, check_out=check_out, short_leave_eligible=eligible)
        return strategy.decide(check_in=check_in, check_out=check_out).status

    def check_in(
        self,
        existing: Optional[AttendanceDay],
        *,
        employee_id: str,
        work_date: date,
        time: str,
        location: Optional[LocationCheck] = None,
    ) -> AttendanceDay:
        to_minutes(time)
        if is_sunday(work_date):
            raise PolicyViolation("Sunday is a rest day")
        if existing and existing.check_in:
            raise PolicyViolation("Already checked in today")

        status = self._status(work_date, time, None, False)
        fields = dict(
            check_in=time,
            status=status,
            location=location.coordinates if location else None,
            location_verified=bool(location and location.allowed),
            distance_from_office=location.distance if location else None,
        )
        if existing:
            return replace(existing, **fields)
        return AttendanceDay(record_id=self._new_id(), employee_id=employee_id, work_date=work_date, **fields)

    def start_break(self, day: Optional[AttendanceDay], *, time: str, break_type: BreakType = BreakType.OTHER) -> AttendanceDay:
        to_minutes(time)
        if not day or not day.check_in:
            raise PolicyViolation("No active check-in")
        if day.check_out:
            raise PolicyViolation("Cannot take a break after checking out")
        if day.open_break:
            raise PolicyViolation("A break is already in progress")
        if to_minutes(time) < to_minutes(day.check_in):
            raise PolicyViolation("A break cannot start before check-in")

        new_break = BreakInterval(break_id=self._new_id(), break_type=BreakType(break_type), start_time=time)
        return replace(day, breaks=day.breaks + (new_break,))

    def end_break(self, day: Optional[AttendanceDay], *, time: str) -> AttendanceDay:
        to_minutes(time)
        active = day.open_break if day else None
        if not active:
            raise PolicyViolation("No break in progress")
        return replace(day, breaks=self._close_break(day, active, time))

    @staticmethod
    def _close_break(day: AttendanceDay, active: BreakInterval, time: str) -> tuple[BreakInterval, ...]:
        duration = hours_between(active.start_time, time)
        if duration < 0:
            raise PolicyViolation("A break cannot end before it starts")
        closed = replace(active, end_time=time, duration=round(duration, 2))
        return tuple(closed if b.break_id == active.break_id else b for b in day.breaks)

    def check_out(
        self,
        day: Optional[AttendanceDay],
        *,
        time: str,
        ledger: ShortLeaveLedger,
        location: Optional[LocationCheck] = None,
    ) -> CheckOutResult:
        to_minutes(time)
        if not day or not day.check_in:
            raise PolicyViolation("No active check-in")
        if day.check_out:
            raise PolicyViolation("Already checked out today")
        if to_minutes(time) < to_minutes(day.check_in):
            raise PolicyViolation("Check-out cannot be earlier than check-in")

        if day.open_break:
            raise PolicyViolation("End your break before checking out")

        total_hours = hours_between(day.check_in, time) - sum(b.duration or 0 for b in day.breaks)
        overtime = max(0.0, total_hours - STANDARD_DAILY_HOURS)

        month = month_key(day.work_date)
        eligible = is_eligible(day.check_in, time, ledger.used(month), limit=ledger.limit)
        status = self._status(day.work_date, day.check_in, time, eligible)

        used_short_leave = eligible and consumes_quota(check_in=day.check_in, total_hours=total_hours)
        if used_short_leave:
            ledger = ledger.consume(month)

        completed = replace(
            day,
            check_out=time,
            total_hours=round(total_hours, 2),
            overtime_hours=round(overtime, 2),
            status=status,
            short_leave_used=used_short_leave,
            check_out_location=location.coordinates if location else None,
            check_out_location_verified=bool(location and location.allowed),
            check_out_distance_from_office=location.distance if location else None,
        )
        return CheckOutResult(day=completed, ledger=ledger)

    def add_note(self, day: Optional[AttendanceDay], *, note: str) -> AttendanceDay:
        if not day:
            raise PolicyViolation("No attendance record for this date")
        return replace(day, notes=(note or "").strip())
