from __future__ import annotations

import logging

from ..core.enums import Role
from .service import EmployeeService

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = (
    dict(employee_id="admin-system", name="System Administrator", email="admin@example.com",
         department="Administration", role=Role.ADMIN, employee_code="ADM001"),
    dict(employee_id="hr-admin", name="HR Administrator", email="hr@example.com",
         department="HR Administration", role=Role.ADMIN, employee_code="HRA001"),
    dict(employee_id="accounts-head", name="Accounts Head", email="accounts@example.com",
         department="Accounts", role=Role.MANAGER, employee_code="ACC001"),
    dict(employee_id="accounts-clerk", name="Accounts Clerk", email="clerk@example.com",
         department="Accounts", role=Role.EMPLOYEE, employee_code="ACC101"),
    dict(employee_id="export-manager", name="Export Manager", email="export@example.com",
         department="Export", role=Role.MANAGER, employee_code="EXP001"),
)


def ensure_demo_employees(service: EmployeeService) -> int:
    """Register the demo directory when it is empty. Returns how many were added."""
    if service.list_all():
        return 0
    for e in DEMO_EMPLOYEES:
        service.register(**e)
    logger.info("Seeded %d demo employees", len(DEMO_EMPLOYEES))
    return len(DEMO_EMPLOYEES)
