from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.http import api_errors, json_body, ok
from ..container import Container
from ..core.enums import BreakType
from ..core.exceptions import ValidationError
from ..location.geo import LocationCheck, check_location
from .kv_attendance_repository import day_to_row


def _location_from_body(body: dict, container: Container) -> Optional[LocationCheck]:
    """Verdict for the posted coordinates; None when the client sent none."""
    if body.get("latitude") is None or body.get("longitude") is None:
        return None
    try:
        latitude = float(body["latitude"])
        longitude = float(body["longitude"])
        accuracy = float(body["accuracy"]) if body.get("accuracy") is not None else None
    except (TypeError, ValueError):
        raise ValidationError("latitude/longitude must be numbers")
    return check_location(latitude, longitude, accuracy=accuracy, office=container.office)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/employees/<employee_id>/checkin", methods=["POST"], endpoint="api_checkin")
    @api_errors
    def checkin(employee_id: str):
        location = _location_from_body(json_body(), container)
        day = service.check_in(employee_id, now=container.clock(), location=location)
        return ok(day_to_row(day), 201)

    @app.route("/api/employees/<employee_id>/checkout", methods=["POST"], endpoint="api_checkout")
    @api_errors
    def checkout(employee_id: str):
        location = _location_from_body(json_body(), container)
        day = service.check_out(employee_id, now=container.clock(), location=location)
        return ok(day_to_row(day))

    @app.route("/api/employees/<employee_id>/breaks/start", methods=["POST"], endpoint="api_break_start")
    @api_errors
    def break_start(employee_id: str):
        raw_type = json_body().get("type") or BreakType.OTHER.value
        try:
            break_type = BreakType(raw_type)
        except ValueError:
            raise ValidationError(f"Unknown break type: {raw_type!r}")
        day = service.start_break(employee_id, break_type, now=container.clock())
        return ok(day_to_row(day))

    @app.route("/api/employees/<employee_id>/breaks/end", methods=["POST"], endpoint="api_break_end")
    @api_errors
    def break_end(employee_id: str):
        day = service.end_break(employee_id, now=container.clock())
        return ok(day_to_row(day))

    @app.route("/api/employees/<employee_id>/notes", methods=["PUT"], endpoint="api_notes")
    @api_errors
    def notes(employee_id: str):
        body = json_body()
        work_date = parse_iso_date(body["date"]) if body.get("date") else None
        day = service.add_note(employee_id, body.get("notes") or "", work_date=work_date, now=container.clock())
        return ok(day_to_row(day))

    @app.route("/api/employees/<employee_id>/attendance", methods=["GET"], endpoint="api_attendance")
    @api_errors
    def attendance(employee_id: str):
        today = container.clock().date()
        record = service.get_today_record(employee_id, today)
        return ok(
            {
                "records": [day_to_row(d) for d in service.get_days(employee_id)],
                "today": day_to_row(record) if record else None,
                "can_check_in": service.can_check_in(employee_id, today=today),
                "can_check_out": service.can_check_out(employee_id, today=today),
            }
        )

    @app.route("/api/employees/<employee_id>/stats", methods=["GET"], endpoint="api_stats")
    @api_errors
    def stats(employee_id: str):
        return ok(asdict(service.get_stats(employee_id)))

    @app.route("/api/employees/<employee_id>/short-leave", methods=["GET"], endpoint="api_short_leave")
    @api_errors
    def short_leave(employee_id: str):
        info = service.get_short_leave_info(employee_id, today=container.clock().date())
        return ok(asdict(info))
