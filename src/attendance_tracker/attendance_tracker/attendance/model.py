from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Mapping, Optional

from ..core.constants import MAX_SHORT_LEAVES_PER_MONTH
from ..core.enums import AttendanceStatus, BreakType
from ..core.exceptions import QuotaExceeded


@dataclass(frozen=True)
class BreakInterval:
    break_id: str
    break_type: BreakType
    start_time: str
    end_time: Optional[str] = None
    duration: Optional[float] = None

    @property
    def is_open(self) -> bool:
        return self.end_time is None


@dataclass(frozen=True)
class AttendanceDay:
    """Domain entity: one employee's attendance for one calendar date."""

    record_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    breaks: tuple[BreakInterval, ...] = ()
    total_hours: Optional[float] = None
    overtime_hours: Optional[float] = None
    short_leave_used: bool = False
    notes: str = ""
    location: Optional[str] = None
    location_verified: bool = False
    distance_from_office: Optional[float] = None
    check_out_location: Optional[str] = None
    check_out_location_verified: bool = False
    check_out_distance_from_office: Optional[float] = None

    @property
    def open_break(self) -> Optional[BreakInterval]:
        return next((b for b in self.breaks if b.is_open), None)

    @property
    def is_checked_in(self) -> bool:
        return bool(self.check_in) and not self.check_out

    @property
    def break_hours(self) -> float:
        return round(sum(b.duration or 0 for b in self.breaks), 2)


@dataclass(frozen=True)
class ShortLeaveLedger:
    """Short leaves consumed per "YYYY-MM" month for one employee.

    Value object: ``consume`` returns a new ledger and leaves this one untouched.
    """

    used_by_month: Mapping[str, int] = field(default_factory=dict)
    limit: int = MAX_SHORT_LEAVES_PER_MONTH

    def used(self, month: str) -> int:
        return int(self.used_by_month.get(month, 0))

    def remaining(self, month: str) -> int:
        return max(self.limit - self.used(month), 0)

    def consume(self, month: str) -> "ShortLeaveLedger":
        if self.used(month) >= self.limit:
            raise QuotaExceeded(f"Short leave limit of {self.limit} per month reached for {month}")
        updated = dict(self.used_by_month)
        updated[month] = self.used(month) + 1
        return replace(self, used_by_month=updated)


@dataclass(frozen=True)
class AttendanceStats:
    total_days: int
    present_days: int
    absent_days: int
    average_hours: float
    attendance_rate: float
    total_overtime: float
    current_streak: int
    longest_streak: int


@dataclass(frozen=True)
class ShortLeaveInfo:
    used: int
    remaining: int
    total: int
    month: str
