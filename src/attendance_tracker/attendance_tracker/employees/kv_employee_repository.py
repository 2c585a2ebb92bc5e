from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import RecordType, Role
from ..storage.store import GLOBAL_SCOPE, KeyValueStore
from .model import Employee
from .repository import EmployeeRepository


def employee_to_row(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "email": e.email,
        "department": e.department,
        "role": e.role.value,
        "employee_id": e.employee_code,
        "is_active": e.is_active,
        "join_date": e.join_date,
    }


def _from_row(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["id"]),
        name=r.get("name") or "",
        email=r.get("email") or "",
        department=r.get("department") or "",
        role=Role(r.get("role") or Role.EMPLOYEE.value),
        employee_code=r.get("employee_id"),
        is_active=bool(r.get("is_active", True)),
        join_date=r.get("join_date"),
    )


class KeyValueEmployeeRepository(EmployeeRepository):
    """The whole directory is one global document, as in the browser app."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return [_from_row(r) for r in self._store.get(GLOBAL_SCOPE, RecordType.EMPLOYEES) or []]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.list_all() if e.employee_id == str(employee_id)), None)

    def upsert(self, employee: Employee) -> None:
        rows = [employee_to_row(e) for e in self.list_all() if e.employee_id != employee.employee_id]
        rows.append(employee_to_row(employee))
        self._store.put(GLOBAL_SCOPE, RecordType.EMPLOYEES, rows)
