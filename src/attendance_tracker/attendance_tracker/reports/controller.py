from __future__ import annotations

from dataclasses import asdict

from flask import Flask, request

from ..common.http import api_errors, json_body, ok
from ..container import Container
from .export import summary_row, write_summary_csv


def register(app: Flask, container: Container) -> None:
    reports = container.report_service
    sheets = container.sheets_service

    def _build_report():
        return reports.build_report(
            search=request.args.get("search", "").strip(),
            department=request.args.get("department") or "all",
            status=request.args.get("status") or "all",
            today=container.clock().date(),
        )

    @app.route("/api/admin/report", methods=["GET"], endpoint="api_admin_report")
    @api_errors
    def admin_report():
        report = _build_report()
        return ok(
            {
                "employees": [
                    {**summary_row(s), "is_checked_in": s.is_checked_in, "last_activity": s.last_activity}
                    for s in report.employees
                ],
                "overall": asdict(report.overall),
                "departments": report.departments,
            }
        )

    @app.route("/api/admin/report.csv", methods=["GET"], endpoint="api_admin_report_csv")
    @api_errors
    def admin_report_csv():
        report = _build_report()
        filename = f"employee-attendance-{container.clock().date().isoformat()}.csv"
        return app.response_class(
            write_summary_csv(report.employees),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/admin/sheets/config", methods=["GET"], endpoint="api_sheets_config")
    @api_errors
    def sheets_config():
        config = sheets.get_config()
        return ok({**asdict(config), "is_connected": config.is_connected, "last_sync": sheets.last_sync()})

    @app.route("/api/admin/sheets/config", methods=["PUT"], endpoint="api_sheets_config_save")
    @api_errors
    def sheets_config_save():
        config = sheets.save_config(**json_body())
        return ok({**asdict(config), "is_connected": config.is_connected})

    @app.route("/api/admin/sheets/test", methods=["POST"], endpoint="api_sheets_test")
    @api_errors
    def sheets_test():
        return ok({"title": sheets.test_connection()})

    @app.route("/api/admin/sheets/create", methods=["POST"], endpoint="api_sheets_create")
    @api_errors
    def sheets_create():
        sheets.create_sheet()
        return ok()

    @app.route("/api/admin/sheets/sync", methods=["POST"], endpoint="api_sheets_sync")
    @api_errors
    def sheets_sync():
        result = sheets.sync(now=container.clock())
        return ok(asdict(result))
