from __future__ import annotations

from datetime import date, datetime

import pytest
import requests

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceDay
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import SheetsSyncError
from src.attendance_tracker.attendance_tracker.integrations.google_sheets import (
    GoogleSheetsClient,
    SheetsConfig,
    SheetsSyncService,
)

CONFIG = SheetsConfig(spreadsheet_id="sheet123", api_key="k", sheet_name="Attendance Data", enabled=True)
NOW = datetime(2025, 1, 8, 19, 0)


class FakeResponse:
    def __init__(self, status=200, payload=None):
        self.status_code = status
        self._payload = payload or {}

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, responses=None, error=None):
        self.calls = []
        self._responses = list(responses or [])
        self._error = error

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self._error:
            raise self._error
        return self._responses.pop(0) if self._responses else FakeResponse()


def test_is_connected_needs_all_fields():
    assert CONFIG.is_connected
    assert not SheetsConfig(spreadsheet_id="s", api_key="k").is_connected
    assert not SheetsConfig(api_key="k", enabled=True).is_connected


def test_write_values_clears_then_puts():
    session = FakeSession()
    GoogleSheetsClient(CONFIG, session=session).write_values([["Date"], ["2025-01-06"]])

    (m1, url1, kw1), (m2, url2, kw2) = session.calls
    assert m1 == "POST"
    assert url1.endswith("/sheet123/values/Attendance Data!A:P:clear")
    assert kw1["params"] == {"key": "k"}
    assert m2 == "PUT"
    assert url2.endswith("/sheet123/values/Attendance Data!A1:P2")
    assert kw2["params"] == {"valueInputOption": "RAW", "key": "k"}
    assert kw2["json"] == {"values": [["Date"], ["2025-01-06"]]}


def test_write_values_requires_connected_config():
    with pytest.raises(SheetsSyncError, match="not configured"):
        GoogleSheetsClient(SheetsConfig(), session=FakeSession()).write_values([["Date"]])


def test_api_error_message_is_surfaced():
    session = FakeSession(responses=[FakeResponse(403, {"error": {"message": "The caller does not have permission"}})])
    with pytest.raises(SheetsSyncError, match="does not have permission"):
        GoogleSheetsClient(CONFIG, session=session).test_connection()


def test_network_error_becomes_sync_error():
    session = FakeSession(error=requests.ConnectionError("boom"))
    with pytest.raises(SheetsSyncError, match="Failed to connect"):
        GoogleSheetsClient(CONFIG, session=session).test_connection()


def test_test_connection_returns_title():
    session = FakeSession(responses=[FakeResponse(200, {"properties": {"title": "HR Attendance"}})])
    assert GoogleSheetsClient(CONFIG, session=session).test_connection() == "HR Attendance"


def test_create_sheet_posts_add_sheet():
    session = FakeSession()
    GoogleSheetsClient(CONFIG, session=session).create_sheet()
    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert url.endswith("/sheet123:batchUpdate")
    assert kwargs["json"] == {"requests": [{"addSheet": {"properties": {"title": "Attendance Data"}}}]}


def test_credentials_required_for_test_connection():
    with pytest.raises(SheetsSyncError, match="Spreadsheet ID and API Key"):
        GoogleSheetsClient(SheetsConfig(), session=FakeSession()).test_connection()


def test_config_persisted_in_store(store, attendance_repo, employees_repo):
    service = SheetsSyncService(store, attendance_repo, employees_repo, session=FakeSession())
    assert service.get_config() == SheetsConfig()

    saved = service.save_config(spreadsheet_id="sheet123", api_key="k", enabled=True, unknown="ignored")
    assert saved.is_connected
    assert service.get_config() == saved
    assert service.save_config(sheet_name="Jan").spreadsheet_id == "sheet123"


def test_sync_uploads_header_and_rows(store, attendance_repo, employees_repo, employee_service):
    attendance_repo.save_days(
        "u1",
        [AttendanceDay(record_id="r1", employee_id="u1", work_date=date(2025, 1, 6), status=AttendanceStatus.PRESENT, check_in="09:30")],
    )
    session = FakeSession()
    service = SheetsSyncService(store, attendance_repo, employees_repo, session=session)
    service.save_config(spreadsheet_id="sheet123", api_key="k", enabled=True)

    result = service.sync(now=NOW)

    assert result.record_count == 1
    assert result.synced_at == "2025-01-08T19:00:00"
    assert service.last_sync() == "2025-01-08T19:00:00"
    values = session.calls[1][2]["json"]["values"]
    assert values[0][0] == "Date"
    assert values[1][:3] == ["2025-01-06", "Asha Verma", "ACC101"]


def test_auto_sync_failure_is_logged_not_raised(store, attendance_repo, employees_repo, caplog):
    session = FakeSession(error=requests.ConnectionError("offline"))
    service = SheetsSyncService(store, attendance_repo, employees_repo, session=session)
    service.save_config(spreadsheet_id="sheet123", api_key="k", enabled=True)

    service.on_attendance_change("u1", [])

    assert "Automatic Google Sheets sync failed" in caplog.text
    assert service.last_sync() is None


def test_auto_sync_skipped_when_not_connected(store, attendance_repo, employees_repo):
    session = FakeSession()
    SheetsSyncService(store, attendance_repo, employees_repo, session=session).on_attendance_change("u1", [])
    assert session.calls == []
