from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class RestDayStrategy(AttendanceStrategy):
    """Sunday: never counted as a working day."""

    def decide(self, *, check_in: str, check_out: Optional[str]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT, note="Sunday is a rest day")
