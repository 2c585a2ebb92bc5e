from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .achievements.service import AchievementService
from .attendance.calculator import DailyRecordCalculator
from .attendance.factory import AttendanceStrategyFactory
from .attendance.kv_attendance_repository import KeyValueAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .database.connection import DBConfig, DatabaseConnection
from .employees.kv_employee_repository import KeyValueEmployeeRepository
from .employees.service import EmployeeService
from .goals.kv_goal_repository import KeyValueGoalRepository
from .goals.service import GoalService
from .integrations.google_sheets import SheetsSyncService
from .leaves.kv_leave_repository import KeyValueLeaveRepository
from .leaves.service import LeaveService
from .location.geo import OfficeLocation
from .reports.service import AdminReportService
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.store import KeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    office: OfficeLocation
    clock: Callable[[], datetime]

    attendance_repo: KeyValueAttendanceRepository
    employees_repo: KeyValueEmployeeRepository
    leaves_repo: KeyValueLeaveRepository
    goals_repo: KeyValueGoalRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    goal_service: GoalService
    achievement_service: AchievementService
    report_service: AdminReportService
    sheets_service: SheetsSyncService


def build_store(*, backend: str, db_config: Optional[dict] = None) -> KeyValueStore:
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mysql":
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {})))
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(
    *,
    store: KeyValueStore,
    office: Optional[dict] = None,
    sheets_defaults: Optional[dict] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    attendance_repo = KeyValueAttendanceRepository(store)
    employees_repo = KeyValueEmployeeRepository(store)
    leaves_repo = KeyValueLeaveRepository(store)
    goals_repo = KeyValueGoalRepository(store)

    achievement_service = AchievementService(store)
    sheets_service = SheetsSyncService(store, attendance_repo, employees_repo, defaults=sheets_defaults)
    attendance_service = AttendanceService(
        attendance_repo,
        calculator=DailyRecordCalculator(strategy_factory=AttendanceStrategyFactory()),
        listeners=[achievement_service.on_attendance_change, sheets_service.on_attendance_change],
    )

    return Container(
        store=store,
        office=OfficeLocation(**office) if office else OfficeLocation(),
        clock=clock,
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        leaves_repo=leaves_repo,
        goals_repo=goals_repo,
        employee_service=EmployeeService(employees_repo),
        attendance_service=attendance_service,
        leave_service=LeaveService(leaves_repo),
        goal_service=GoalService(goals_repo),
        achievement_service=achievement_service,
        report_service=AdminReportService(attendance_repo, employees_repo),
        sheets_service=sheets_service,
    )
