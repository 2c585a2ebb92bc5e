from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import is_sunday
from ..core.enums import AttendanceStatus
from .strategies.base import AttendanceStrategy
from .strategies.open_day_strategy import OpenDayStrategy
from .strategies.rest_day_strategy import RestDayStrategy
from .strategies.short_leave_strategy import ShortLeaveStrategy
from .strategies.worked_hours_strategy import WorkedHoursStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_day(self, *, work_date: date, check_out: Optional[str], short_leave_eligible: bool) -> AttendanceStrategy:
        if is_sunday(work_date):
            return RestDayStrategy()
        if not check_out:
            return OpenDayStrategy()
        if short_leave_eligible:
            return ShortLeaveStrategy()
        return WorkedHoursStrategy()


def classify(
    work_date: date,
    check_in: str,
    check_out: Optional[str] = None,
    short_leave_eligible: bool = False,
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> AttendanceStatus:
    """Status of a day given its times and short-leave eligibility."""
    factory = factory or AttendanceStrategyFactory()
    strategy = factory.for_day(work_date=work_date, check_out=check_out, short_leave_eligible=short_leave_eligible)
    return strategy.decide(check_in=check_in, check_out=check_out).status
