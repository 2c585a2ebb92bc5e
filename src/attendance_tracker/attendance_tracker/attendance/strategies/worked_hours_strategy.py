from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import hours_between
from ...core.constants import MIN_HOURS_FOR_PRESENT
from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class WorkedHoursStrategy(AttendanceStrategy):
    """Completed day without short leave: raw check-in to check-out span."""

    def decide(self, *, check_in: str, check_out: Optional[str]) -> StatusDecision:
        if check_out and hours_between(check_in, check_out) >= MIN_HOURS_FOR_PRESENT:
            return StatusDecision(status=AttendanceStatus.PRESENT)
        return StatusDecision(status=AttendanceStatus.PARTIAL, note=f"Less than {MIN_HOURS_FOR_PRESENT} hours")
