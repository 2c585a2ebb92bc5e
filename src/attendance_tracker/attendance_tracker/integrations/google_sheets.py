"""Google Sheets v4 sink for attendance rows.

Authenticates with a plain API key; the sheet must allow writes for it.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from datetime import datetime
from typing import Any, Optional, Sequence

import requests

from ..attendance.model import AttendanceDay
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_SHEET_NAME
from ..core.enums import RecordType
from ..core.exceptions import SheetsSyncError
from ..employees.repository import EmployeeRepository
from ..reports.export import SHEET_COLUMNS, sheet_rows
from ..storage.store import GLOBAL_SCOPE, KeyValueStore
from .http_client import DEFAULT_TIMEOUT, create_session

logger = logging.getLogger(__name__)

BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"
LAST_COLUMN = "P"


@dataclass(frozen=True)
class SheetsConfig:
    spreadsheet_id: str = ""
    api_key: str = ""
    sheet_name: str = DEFAULT_SHEET_NAME
    enabled: bool = False

    @property
    def is_connected(self) -> bool:
        return bool(self.enabled and self.spreadsheet_id and self.api_key)

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> "SheetsConfig":
        d = d or {}
        return cls(
            spreadsheet_id=str(d.get("spreadsheet_id") or ""),
            api_key=str(d.get("api_key") or ""),
            sheet_name=str(d.get("sheet_name") or DEFAULT_SHEET_NAME),
            enabled=bool(d.get("enabled", False)),
        )


def _error_message(resp: requests.Response, fallback: str) -> str:
    try:
        return resp.json().get("error", {}).get("message") or fallback
    except ValueError:
        return fallback


class GoogleSheetsClient:
    def __init__(self, config: SheetsConfig, *, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self._config = config
        self._session = session or create_session()
        self._timeout = timeout

    def _require_credentials(self) -> None:
        if not self._config.spreadsheet_id or not self._config.api_key:
            raise SheetsSyncError("Please provide both Spreadsheet ID and API Key")

    def _request(self, method: str, url: str, fallback: str, **kwargs: Any) -> requests.Response:
        params = {**kwargs.pop("params", {}), "key": self._config.api_key}
        try:
            resp = self._session.request(method, url, params=params, timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            raise SheetsSyncError(f"{fallback}: {exc}") from exc
        if not resp.ok:
            raise SheetsSyncError(_error_message(resp, fallback))
        return resp

    def write_values(self, values: Sequence[Sequence[Any]]) -> None:
        """Replace the sheet contents: clear A:P, then write from A1."""
        if not self._config.is_connected:
            raise SheetsSyncError("Google Sheets not configured properly")

        base = f"{BASE_URL}/{self._config.spreadsheet_id}/values"
        sheet = self._config.sheet_name
        self._request("POST", f"{base}/{sheet}!A:{LAST_COLUMN}:clear", "Failed to clear sheet")
        self._request(
            "PUT",
            f"{base}/{sheet}!A1:{LAST_COLUMN}{len(values)}",
            "Failed to sync to Google Sheets",
            params={"valueInputOption": "RAW"},
            json={"values": [list(v) for v in values]},
        )

    def test_connection(self) -> Optional[str]:
        """Spreadsheet title when the id and key work."""
        self._require_credentials()
        resp = self._request("GET", f"{BASE_URL}/{self._config.spreadsheet_id}", "Failed to connect to Google Sheets")
        return (resp.json().get("properties") or {}).get("title")

    def create_sheet(self) -> None:
        self._require_credentials()
        self._request(
            "POST",
            f"{BASE_URL}/{self._config.spreadsheet_id}:batchUpdate",
            "Failed to create sheet",
            json={"requests": [{"addSheet": {"properties": {"title": self._config.sheet_name}}}]},
        )


@dataclass(frozen=True)
class SyncResult:
    record_count: int
    synced_at: str


class SheetsSyncService:
    """Pushes every employee's records to the configured sheet."""

    def __init__(
        self,
        store: KeyValueStore,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        session: Optional[requests.Session] = None,
        defaults: Optional[dict] = None,
    ):
        self._store = store
        self._attendance = attendance
        self._employees = employees
        self._session = session
        self._defaults = SheetsConfig.from_dict(defaults)

    def get_config(self) -> SheetsConfig:
        stored = self._store.get(GLOBAL_SCOPE, RecordType.SHEETS_CONFIG)
        if stored is None:
            return self._defaults
        return SheetsConfig.from_dict(stored)

    def save_config(self, **changes: Any) -> SheetsConfig:
        known = {k: v for k, v in changes.items() if k in SheetsConfig.__dataclass_fields__}
        config = SheetsConfig.from_dict(asdict(replace(self.get_config(), **known)))
        self._store.put(GLOBAL_SCOPE, RecordType.SHEETS_CONFIG, asdict(config))
        return config

    def last_sync(self) -> Optional[str]:
        return self._store.get(GLOBAL_SCOPE, RecordType.SHEETS_LAST_SYNC)

    def _client(self) -> GoogleSheetsClient:
        return GoogleSheetsClient(self.get_config(), session=self._session)

    def test_connection(self) -> Optional[str]:
        return self._client().test_connection()

    def create_sheet(self) -> None:
        self._client().create_sheet()

    def sync(self, *, now: Optional[datetime] = None) -> SyncResult:
        now = now or now_local()
        employees = self._employees.list_all()
        days_by_employee = {e.employee_id: self._attendance.get_days(e.employee_id) for e in employees}
        rows = sheet_rows(days_by_employee, employees, synced_at=now)

        self._client().write_values([SHEET_COLUMNS, *rows])

        synced_at = now.isoformat(timespec="seconds")
        self._store.put(GLOBAL_SCOPE, RecordType.SHEETS_LAST_SYNC, synced_at)
        logger.info("Synced %d attendance rows to Google Sheets", len(rows))
        return SyncResult(record_count=len(rows), synced_at=synced_at)

    def on_attendance_change(self, employee_id: str, days: Sequence[AttendanceDay]) -> None:
        """Background sync after a record change; failures never reach the caller."""
        if not self.get_config().is_connected:
            return
        try:
            self.sync()
        except SheetsSyncError:
            logger.exception("Automatic Google Sheets sync failed after update for %s", employee_id)
