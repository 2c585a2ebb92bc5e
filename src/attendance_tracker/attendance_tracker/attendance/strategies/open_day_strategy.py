from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import to_minutes
from ...core.constants import STANDARD_CHECK_IN
from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class OpenDayStrategy(AttendanceStrategy):
    """Still checked in: judged by arrival time only."""

    def decide(self, *, check_in: str, check_out: Optional[str]) -> StatusDecision:
        if to_minutes(check_in) <= to_minutes(STANDARD_CHECK_IN):
            return StatusDecision(status=AttendanceStatus.PRESENT)
        return StatusDecision(status=AttendanceStatus.PARTIAL, note="Late check-in")
