from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus, BreakType, RecordType
from ..storage.store import KeyValueStore
from .model import AttendanceDay, BreakInterval, ShortLeaveLedger
from .repository import AttendanceRepository


def _break_to_row(b: BreakInterval) -> dict:
    return {
        "id": b.break_id,
        "type": b.break_type.value,
        "start_time": b.start_time,
        "end_time": b.end_time,
        "duration": b.duration,
    }


def _row_to_break(r: dict) -> BreakInterval:
    return BreakInterval(
        break_id=str(r["id"]),
        break_type=BreakType(r.get("type") or BreakType.OTHER.value),
        start_time=r["start_time"],
        end_time=r.get("end_time"),
        duration=r.get("duration"),
    )


def day_to_row(d: AttendanceDay) -> dict:
    return {
        "id": d.record_id,
        "employee_id": d.employee_id,
        "date": d.work_date.isoformat(),
        "check_in": d.check_in,
        "check_out": d.check_out,
        "total_hours": d.total_hours,
        "overtime": d.overtime_hours,
        "status": d.status.value,
        "breaks": [_break_to_row(b) for b in d.breaks],
        "notes": d.notes,
        "short_leave_used": d.short_leave_used,
        "location": d.location,
        "location_verified": d.location_verified,
        "distance_from_office": d.distance_from_office,
        "check_out_location": d.check_out_location,
        "check_out_location_verified": d.check_out_location_verified,
        "check_out_distance_from_office": d.check_out_distance_from_office,
    }


def row_to_day(r: dict) -> AttendanceDay:
    return AttendanceDay(
        record_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        work_date=date.fromisoformat(r["date"]),
        status=AttendanceStatus(r["status"]),
        check_in=r.get("check_in"),
        check_out=r.get("check_out"),
        breaks=tuple(_row_to_break(b) for b in r.get("breaks") or []),
        total_hours=r.get("total_hours"),
        overtime_hours=r.get("overtime"),
        short_leave_used=bool(r.get("short_leave_used")),
        notes=r.get("notes") or "",
        location=r.get("location"),
        location_verified=bool(r.get("location_verified")),
        distance_from_office=r.get("distance_from_office"),
        check_out_location=r.get("check_out_location"),
        check_out_location_verified=bool(r.get("check_out_location_verified")),
        check_out_distance_from_office=r.get("check_out_distance_from_office"),
    )


def _days_document(days: Sequence[AttendanceDay]) -> list[dict]:
    return [day_to_row(d) for d in sorted(days, key=lambda d: d.work_date)]


class KeyValueAttendanceRepository(AttendanceRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get_days(self, employee_id: str) -> Sequence[AttendanceDay]:
        rows = self._store.get(employee_id, RecordType.ATTENDANCE) or []
        return sorted((row_to_day(r) for r in rows), key=lambda d: d.work_date)

    def save_days(self, employee_id: str, days: Sequence[AttendanceDay]) -> None:
        self._store.put(employee_id, RecordType.ATTENDANCE, _days_document(days))

    def get_ledger(self, employee_id: str) -> ShortLeaveLedger:
        data = self._store.get(employee_id, RecordType.SHORT_LEAVES) or {}
        return ShortLeaveLedger(used_by_month={str(k): int(v) for k, v in data.items()})

    def save_ledger(self, employee_id: str, ledger: ShortLeaveLedger) -> None:
        self._store.put(employee_id, RecordType.SHORT_LEAVES, dict(ledger.used_by_month))

    def save_checkout(self, employee_id: str, days: Sequence[AttendanceDay], ledger: ShortLeaveLedger) -> None:
        self._store.put_many(
            employee_id,
            {
                RecordType.ATTENDANCE: _days_document(days),
                RecordType.SHORT_LEAVES: dict(ledger.used_by_month),
            },
        )
