from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee metadata used by reports and exports.

    Note: plain data, no credentials (authentication lives outside this system).
    """

    employee_id: str
    name: str
    email: str
    department: str
    role: Role = Role.EMPLOYEE
    employee_code: Optional[str] = None
    is_active: bool = True
    join_date: Optional[str] = None
