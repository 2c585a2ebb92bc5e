from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceDay, ShortLeaveLedger


class AttendanceRepository(Protocol):
    def get_days(self, employee_id: str) -> Sequence[AttendanceDay]:
        raise NotImplementedError

    def save_days(self, employee_id: str, days: Sequence[AttendanceDay]) -> None:
        raise NotImplementedError

    def get_ledger(self, employee_id: str) -> ShortLeaveLedger:
        raise NotImplementedError

    def save_ledger(self, employee_id: str, ledger: ShortLeaveLedger) -> None:
        raise NotImplementedError

    def save_checkout(self, employee_id: str, days: Sequence[AttendanceDay], ledger: ShortLeaveLedger) -> None:
        """Persist the day list and the ledger together, or neither."""
        raise NotImplementedError
