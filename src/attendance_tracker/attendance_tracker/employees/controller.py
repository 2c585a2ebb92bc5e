from __future__ import annotations

from flask import Flask

from ..common.http import api_errors, json_body, ok
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .kv_employee_repository import employee_to_row


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/admin/employees", methods=["GET"], endpoint="api_employees")
    @api_errors
    def list_employees():
        return ok([employee_to_row(e) for e in service.list_all()])

    @app.route("/api/admin/employees", methods=["POST"], endpoint="api_employee_register")
    @api_errors
    def register_employee():
        body = json_body()
        try:
            role = Role(body.get("role") or Role.EMPLOYEE.value)
        except ValueError:
            raise ValidationError(f"Unknown role: {body.get('role')!r}")
        employee = service.register(
            employee_id=body.get("id") or "",
            name=body.get("name") or "",
            email=body.get("email") or "",
            department=body.get("department") or "",
            role=role,
            employee_code=body.get("employee_id"),
            join_date=body.get("join_date"),
        )
        return ok(employee_to_row(employee), 201)
