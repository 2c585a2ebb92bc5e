from __future__ import annotations

from flask import Flask

from ..achievements.service import achievement_to_row
from ..common.http import api_errors, json_body, ok
from ..container import Container
from ..core.exceptions import ValidationError
from .kv_goal_repository import goal_to_row


def _with_progress(goal) -> dict:
    row = goal_to_row(goal)
    row["progress"] = goal.progress
    return row


def register(app: Flask, container: Container) -> None:
    goals = container.goal_service

    @app.route("/api/employees/<employee_id>/goals", methods=["GET"], endpoint="api_goals")
    @api_errors
    def list_goals(employee_id: str):
        items = goals.list_goals(employee_id, today=container.clock().date())
        return ok([_with_progress(g) for g in items])

    @app.route("/api/employees/<employee_id>/goals", methods=["POST"], endpoint="api_goal_add")
    @api_errors
    def add_goal(employee_id: str):
        body = json_body()
        goal = goals.add_goal(
            employee_id,
            goal_type=body.get("type"),
            target=body.get("target"),
            description=body.get("description") or "",
            period=body.get("period") or "",
            current=body.get("current") or 0,
        )
        return ok(_with_progress(goal), 201)

    @app.route("/api/employees/<employee_id>/goals/<goal_id>", methods=["PUT"], endpoint="api_goal_update")
    @api_errors
    def update_goal(employee_id: str, goal_id: str):
        current = json_body().get("current")
        try:
            current = float(current)
        except (TypeError, ValueError):
            raise ValidationError("current must be a number")
        return ok(_with_progress(goals.update_progress(employee_id, goal_id, current)))

    @app.route("/api/employees/<employee_id>/goals/<goal_id>", methods=["DELETE"], endpoint="api_goal_delete")
    @api_errors
    def delete_goal(employee_id: str, goal_id: str):
        goals.delete_goal(employee_id, goal_id)
        return ok()

    @app.route("/api/employees/<employee_id>/achievements", methods=["GET"], endpoint="api_achievements")
    @api_errors
    def achievements(employee_id: str):
        return ok([achievement_to_row(a) for a in container.achievement_service.list_achievements(employee_id)])
