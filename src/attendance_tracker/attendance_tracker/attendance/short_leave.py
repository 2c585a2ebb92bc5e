"""Short-leave evaluation.

A short leave turns a late arrival or an early departure into a full present
day when the day fits one of two fixed schedules. Each employee may use at
most ``MAX_SHORT_LEAVES_PER_MONTH`` of them per calendar month.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import to_minutes
from ..core.constants import (
    EARLY_CHECK_OUT_LIMIT,
    LATE_CHECK_IN_LIMIT,
    MAX_SHORT_LEAVES_PER_MONTH,
    MIN_HOURS_FOR_PRESENT,
    STANDARD_CHECK_IN,
    STANDARD_CHECK_OUT,
)


@dataclass(frozen=True)
class ShortLeaveSchedule:
    name: str
    latest_check_in: str
    earliest_check_out: str

    def matches(self, check_in: str, check_out: str) -> bool:
        return to_minutes(check_in) <= to_minutes(self.latest_check_in) and to_minutes(check_out) >= to_minutes(
            self.earliest_check_out
        )


SHORT_LEAVE_SCHEDULES = (
    ShortLeaveSchedule("late arrival", LATE_CHECK_IN_LIMIT, STANDARD_CHECK_OUT),
    ShortLeaveSchedule("early departure", STANDARD_CHECK_IN, EARLY_CHECK_OUT_LIMIT),
)


def matching_schedule(check_in: str, check_out: Optional[str]) -> Optional[ShortLeaveSchedule]:
    if not check_out:
        return None
    return next((s for s in SHORT_LEAVE_SCHEDULES if s.matches(check_in, check_out)), None)


def is_eligible(
    check_in: str,
    check_out: Optional[str],
    used_this_month: int,
    *,
    limit: int = MAX_SHORT_LEAVES_PER_MONTH,
) -> bool:
    if used_this_month >= limit:
        return False
    return matching_schedule(check_in, check_out) is not None


def consumes_quota(*, check_in: str, total_hours: float) -> bool:
    """Whether an eligible day actually spends a short leave.

    A day that already has the hours and an on-time arrival is a clean
    present day and keeps the quota.
    """
    return total_hours < MIN_HOURS_FOR_PRESENT or to_minutes(check_in) > to_minutes(STANDARD_CHECK_IN)
