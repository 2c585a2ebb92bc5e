from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: maintain the employee directory (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_active(self) -> Sequence[Employee]:
        return [e for e in self._employees.list_all() if e.is_active]

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def register(
        self,
        *,
        employee_id: str,
        name: str,
        email: str,
        department: str,
        role: Role = Role.EMPLOYEE,
        employee_code: Optional[str] = None,
        join_date: Optional[str] = None,
    ) -> Employee:
        employee = Employee(
            employee_id=require_non_empty(str(employee_id), "Employee id"),
            name=require_non_empty(name, "Name"),
            email=(email or "").strip(),
            department=require_non_empty(department, "Department"),
            role=Role(role),
            employee_code=(employee_code or "").strip() or None,
            join_date=join_date,
        )
        self._employees.upsert(employee)
        return employee
