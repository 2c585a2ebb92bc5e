from __future__ import annotations

from datetime import datetime

import pytest

from src.attendance_tracker.attendance_tracker.attendance.kv_attendance_repository import KeyValueAttendanceRepository
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.employees.kv_employee_repository import KeyValueEmployeeRepository
from src.attendance_tracker.attendance_tracker.employees.service import EmployeeService
from src.attendance_tracker.attendance_tracker.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture
def fixed_now():
    # Monday
    return datetime(2025, 1, 6, 9, 30)


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def attendance_repo(store):
    return KeyValueAttendanceRepository(store)


@pytest.fixture
def attendance_service(attendance_repo):
    return AttendanceService(attendance_repo)


@pytest.fixture
def employees_repo(store):
    return KeyValueEmployeeRepository(store)


@pytest.fixture
def employee_service(employees_repo):
    service = EmployeeService(employees_repo)
    service.register(employee_id="u1", name="Asha Verma", email="asha@example.com", department="Accounts", employee_code="ACC101")
    service.register(employee_id="u2", name="Ravi Singh", email="ravi@example.com", department="Export", employee_code="EXP001")
    return service
