from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Employee role shown in the admin report."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Derived status of one attendance day."""

    PRESENT = "present"
    PARTIAL = "partial"
    ABSENT = "absent"


class BreakType(str, Enum):
    LUNCH = "lunch"
    COFFEE = "coffee"
    OTHER = "other"


class RequestStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveType(str, Enum):
    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    EMERGENCY = "emergency"


class GoalType(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class AchievementCategory(str, Enum):
    STREAK = "streak"
    HOURS = "hours"
    PUNCTUALITY = "punctuality"
    CONSISTENCY = "consistency"


class RecordType(str, Enum):
    """Keys of the documents kept per employee (or globally) in the store."""

    ATTENDANCE = "attendance_records"
    SHORT_LEAVES = "short_leaves"
    LEAVES = "leave_requests"
    GOALS = "attendance_goals"
    ACHIEVEMENTS = "achievements"
    EMPLOYEES = "users"
    SHEETS_CONFIG = "google_sheets_config"
    SHEETS_LAST_SYNC = "google_sheets_last_sync"
