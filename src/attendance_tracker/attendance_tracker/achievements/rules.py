from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..attendance.model import AttendanceStats
from ..core.enums import AchievementCategory


@dataclass(frozen=True)
class AchievementRule:
    title: str
    description: str
    icon: str
    category: AchievementCategory
    earned: Callable[[AttendanceStats], bool]


RULES = (
    AchievementRule(
        "First Day",
        "Completed your first day of attendance tracking",
        "🎉",
        AchievementCategory.STREAK,
        lambda s: s.total_days >= 1,
    ),
    AchievementRule(
        "Week Warrior",
        "Maintained a 7-day attendance streak",
        "🔥",
        AchievementCategory.STREAK,
        lambda s: s.current_streak >= 7,
    ),
    AchievementRule(
        "Monthly Master",
        "Maintained a 30-day attendance streak",
        "👑",
        AchievementCategory.STREAK,
        lambda s: s.current_streak >= 30,
    ),
    AchievementRule(
        "Dedicated Worker",
        "Maintained 8+ hours average daily",
        "💪",
        AchievementCategory.HOURS,
        lambda s: s.total_days > 0 and s.average_hours >= 8,
    ),
    AchievementRule(
        "Perfect Attendance",
        "Achieved 100% attendance rate",
        "⭐",
        AchievementCategory.PUNCTUALITY,
        lambda s: s.attendance_rate == 100 and s.total_days >= 10,
    ),
)
