from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class ShortLeaveStrategy(AttendanceStrategy):
    """A day covered by a short-leave schedule counts as a full day."""

    def decide(self, *, check_in: str, check_out: Optional[str]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, note="Short leave")
