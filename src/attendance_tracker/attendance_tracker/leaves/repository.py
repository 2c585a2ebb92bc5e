from __future__ import annotations

from typing import Protocol, Sequence

from .model import LeaveRequest


class LeaveRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def save_all(self, employee_id: str, leaves: Sequence[LeaveRequest]) -> None:
        raise NotImplementedError
