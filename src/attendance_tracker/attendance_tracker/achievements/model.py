from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AchievementCategory


@dataclass(frozen=True)
class Achievement:
    achievement_id: str
    employee_id: str
    title: str
    description: str
    icon: str
    unlocked_at: str
    category: AchievementCategory
