from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import month_key, now_local, week_start
from ..common.validators import require_non_empty, require_positive
from ..core.enums import GoalType
from ..core.exceptions import NotFoundError, ValidationError
from .repository import GoalRepository
from .model import Goal


def default_goals(employee_id: str, today: date) -> list[Goal]:
    return [
        Goal("1", employee_id, GoalType.DAILY, 8, 0, "Work 8 hours daily", today.isoformat()),
        Goal("2", employee_id, GoalType.WEEKLY, 5, 0, "Attend 5 days per week", week_start(today).isoformat()),
        Goal("3", employee_id, GoalType.MONTHLY, 22, 0, "Attend 22 days per month", month_key(today)),
    ]


class GoalService:
    def __init__(self, goals: GoalRepository):
        self._goals = goals

    def list_goals(self, employee_id: str, *, today: Optional[date] = None) -> Sequence[Goal]:
        """Goals of an employee; a first visit seeds and stores the defaults."""
        goals = self._goals.list_for_employee(employee_id)
        if goals is None:
            goals = default_goals(employee_id, today or now_local().date())
            self._goals.save_all(employee_id, goals)
        return goals

    def add_goal(
        self,
        employee_id: str,
        *,
        goal_type: GoalType,
        target: float,
        description: str,
        period: str,
        current: float = 0,
    ) -> Goal:
        try:
            goal_type = GoalType(goal_type)
        except ValueError:
            raise ValidationError(f"Unknown goal type: {goal_type!r}")

        goal = Goal(
            goal_id=str(uuid.uuid4()),
            employee_id=employee_id,
            goal_type=goal_type,
            target=require_positive(target, "Target"),
            current=float(current or 0),
            description=require_non_empty(description, "Description"),
            period=require_non_empty(period, "Period"),
        )
        self._goals.save_all(employee_id, [*self.list_goals(employee_id), goal])
        return goal

    def update_progress(self, employee_id: str, goal_id: str, current: float) -> Goal:
        goals = list(self.list_goals(employee_id))
        for i, goal in enumerate(goals):
            if goal.goal_id == goal_id:
                goals[i] = replace(goal, current=float(current))
                self._goals.save_all(employee_id, goals)
                return goals[i]
        raise NotFoundError("Goal not found")

    def delete_goal(self, employee_id: str, goal_id: str) -> None:
        goals = self.list_goals(employee_id)
        remaining = [g for g in goals if g.goal_id != goal_id]
        if len(remaining) == len(goals):
            raise NotFoundError("Goal not found")
        self._goals.save_all(employee_id, remaining)
