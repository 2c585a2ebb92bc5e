from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceDay, AttendanceStats
from ..attendance.statistics import compute_stats
from ..common.datetime_utils import now_local
from ..core.enums import AchievementCategory, RecordType
from ..storage.store import KeyValueStore
from .model import Achievement
from .rules import RULES, AchievementRule

logger = logging.getLogger(__name__)


def achievement_to_row(a: Achievement) -> dict:
    return {
        "id": a.achievement_id,
        "employee_id": a.employee_id,
        "title": a.title,
        "description": a.description,
        "icon": a.icon,
        "unlocked_at": a.unlocked_at,
        "category": a.category.value,
    }


def _from_row(r: dict) -> Achievement:
    return Achievement(
        achievement_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        title=r["title"],
        description=r.get("description") or "",
        icon=r.get("icon") or "",
        unlocked_at=r.get("unlocked_at") or "",
        category=AchievementCategory(r["category"]),
    )


class AchievementService:
    def __init__(self, store: KeyValueStore, *, rules: Iterable[AchievementRule] = RULES):
        self._store = store
        self._rules = tuple(rules)

    def list_achievements(self, employee_id: str) -> Sequence[Achievement]:
        return [_from_row(r) for r in self._store.get(employee_id, RecordType.ACHIEVEMENTS) or []]

    def check_achievements(
        self,
        employee_id: str,
        stats: AttendanceStats,
        *,
        now: Optional[datetime] = None,
    ) -> list[Achievement]:
        """Unlock every rule the stats satisfy; each title is unlocked once."""
        existing = list(self.list_achievements(employee_id))
        titles = {a.title for a in existing}
        unlocked_at = (now or now_local()).isoformat()

        new = [
            Achievement(
                achievement_id=str(uuid.uuid4()),
                employee_id=employee_id,
                title=rule.title,
                description=rule.description,
                icon=rule.icon,
                unlocked_at=unlocked_at,
                category=rule.category,
            )
            for rule in self._rules
            if rule.title not in titles and rule.earned(stats)
        ]
        if new:
            self._store.put(employee_id, RecordType.ACHIEVEMENTS, [achievement_to_row(a) for a in existing + new])
            logger.info("Employee %s unlocked %s", employee_id, ", ".join(a.title for a in new))
        return new

    def on_attendance_change(self, employee_id: str, days: Sequence[AttendanceDay]) -> None:
        self.check_achievements(employee_id, compute_stats(days))
