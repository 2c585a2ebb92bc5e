from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import GoalType


@dataclass(frozen=True)
class Goal:
    goal_id: str
    employee_id: str
    goal_type: GoalType
    target: float
    current: float
    description: str
    period: str

    @property
    def progress(self) -> float:
        """Percent of target reached, capped at 100."""
        if self.target <= 0:
            return 0.0
        return round(min(self.current / self.target * 100, 100.0), 2)
