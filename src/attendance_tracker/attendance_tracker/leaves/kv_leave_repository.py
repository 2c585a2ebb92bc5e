from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import LeaveType, RecordType, RequestStatus
from ..storage.store import KeyValueStore
from .model import LeaveRequest
from .repository import LeaveRepository


def leave_to_row(r: LeaveRequest) -> dict:
    return {
        "id": r.request_id,
        "employee_id": r.employee_id,
        "type": r.leave_type.value,
        "start_date": r.start_date.isoformat(),
        "end_date": r.end_date.isoformat(),
        "reason": r.reason,
        "status": r.status.value,
        "request_date": r.request_date.isoformat(),
        "approved_by": r.approved_by,
    }


def _from_row(r: dict) -> LeaveRequest:
    return LeaveRequest(
        request_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        leave_type=LeaveType(r["type"]),
        start_date=date.fromisoformat(r["start_date"]),
        end_date=date.fromisoformat(r["end_date"]),
        reason=r.get("reason") or "",
        status=RequestStatus(r["status"]),
        request_date=date.fromisoformat(r["request_date"]),
        approved_by=r.get("approved_by"),
    )


class KeyValueLeaveRepository(LeaveRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        return [_from_row(r) for r in self._store.get(employee_id, RecordType.LEAVES) or []]

    def save_all(self, employee_id: str, leaves: Sequence[LeaveRequest]) -> None:
        self._store.put(employee_id, RecordType.LEAVES, [leave_to_row(r) for r in leaves])
