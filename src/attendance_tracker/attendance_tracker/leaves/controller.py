from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.http import api_errors, json_body, ok
from ..container import Container
from .kv_leave_repository import leave_to_row


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/api/employees/<employee_id>/leaves", methods=["GET"], endpoint="api_leaves")
    @api_errors
    def list_leaves(employee_id: str):
        return ok([leave_to_row(r) for r in service.list_leaves(employee_id)])

    @app.route("/api/employees/<employee_id>/leaves", methods=["POST"], endpoint="api_leave_submit")
    @api_errors
    def submit_leave(employee_id: str):
        body = json_body()
        leave = service.submit_leave(
            employee_id=employee_id,
            leave_type=body.get("type"),
            start_date=parse_iso_date(body.get("start_date")),
            end_date=parse_iso_date(body.get("end_date")),
            reason=body.get("reason") or "",
            today=container.clock().date(),
        )
        return ok(leave_to_row(leave), 201)

    @app.route("/api/leaves/<employee_id>/<request_id>/approve", methods=["POST"], endpoint="api_leave_approve")
    @api_errors
    def approve_leave(employee_id: str, request_id: str):
        leave = service.approve_leave(
            employee_id=employee_id,
            request_id=request_id,
            decided_by=json_body().get("approved_by"),
        )
        return ok(leave_to_row(leave))

    @app.route("/api/leaves/<employee_id>/<request_id>/reject", methods=["POST"], endpoint="api_leave_reject")
    @api_errors
    def reject_leave(employee_id: str, request_id: str):
        leave = service.reject_leave(
            employee_id=employee_id,
            request_id=request_id,
            decided_by=json_body().get("approved_by"),
        )
        return ok(leave_to_row(leave))

    @app.route("/api/employees/<employee_id>/leaves/<request_id>", methods=["DELETE"], endpoint="api_leave_delete")
    @api_errors
    def delete_leave(employee_id: str, request_id: str):
        service.delete_leave(employee_id=employee_id, request_id=request_id)
        return ok()
