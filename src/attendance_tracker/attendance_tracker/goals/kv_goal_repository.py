from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import GoalType, RecordType
from ..storage.store import KeyValueStore
from .model import Goal
from .repository import GoalRepository


def goal_to_row(g: Goal) -> dict:
    return {
        "id": g.goal_id,
        "employee_id": g.employee_id,
        "type": g.goal_type.value,
        "target": g.target,
        "current": g.current,
        "description": g.description,
        "period": g.period,
    }


def _from_row(r: dict) -> Goal:
    return Goal(
        goal_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        goal_type=GoalType(r["type"]),
        target=float(r["target"]),
        current=float(r.get("current") or 0),
        description=r.get("description") or "",
        period=r.get("period") or "",
    )


class KeyValueGoalRepository(GoalRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_for_employee(self, employee_id: str) -> Optional[Sequence[Goal]]:
        """None when the employee never had goals stored."""
        rows = self._store.get(employee_id, RecordType.GOALS)
        if rows is None:
            return None
        return [_from_row(r) for r in rows]

    def save_all(self, employee_id: str, goals: Sequence[Goal]) -> None:
        self._store.put(employee_id, RecordType.GOALS, [goal_to_row(g) for g in goals])
