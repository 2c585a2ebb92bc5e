from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Goal


class GoalRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Optional[Sequence[Goal]]:
        raise NotImplementedError

    def save_all(self, employee_id: str, goals: Sequence[Goal]) -> None:
        raise NotImplementedError
