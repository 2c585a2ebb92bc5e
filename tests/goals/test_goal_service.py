from __future__ import annotations

from datetime import date

import pytest

from src.attendance_tracker.attendance_tracker.core.enums import GoalType
from src.attendance_tracker.attendance_tracker.core.exceptions import NotFoundError, ValidationError
from src.attendance_tracker.attendance_tracker.goals.kv_goal_repository import KeyValueGoalRepository
from src.attendance_tracker.attendance_tracker.goals.service import GoalService

WEDNESDAY = date(2025, 1, 8)


@pytest.fixture
def service(store):
    return GoalService(KeyValueGoalRepository(store))


def test_defaults_seeded_on_first_load(service):
    goals = service.list_goals("u1", today=WEDNESDAY)
    assert [(g.goal_id, g.goal_type, g.target) for g in goals] == [
        ("1", GoalType.DAILY, 8),
        ("2", GoalType.WEEKLY, 5),
        ("3", GoalType.MONTHLY, 22),
    ]
    assert [g.period for g in goals] == ["2025-01-08", "2025-01-05", "2025-01"]
    # Stored, so a later day sees the same set.
    assert service.list_goals("u1", today=date(2025, 2, 1)) == goals


def test_deleting_all_goals_does_not_reseed(service):
    for goal in service.list_goals("u1", today=WEDNESDAY):
        service.delete_goal("u1", goal.goal_id)
    assert service.list_goals("u1", today=WEDNESDAY) == []


def test_update_progress(service):
    service.list_goals("u1", today=WEDNESDAY)
    goal = service.update_progress("u1", "1", 6)
    assert goal.current == 6
    assert goal.progress == 75
    assert service.update_progress("u1", "1", 20).progress == 100
    with pytest.raises(NotFoundError):
        service.update_progress("u1", "missing", 1)


def test_add_goal(service):
    goal = service.add_goal("u1", goal_type="weekly", target=40, description="Log 40 hours", period="2025-01-05")
    assert goal.goal_type == GoalType.WEEKLY
    assert goal.goal_id not in {"1", "2", "3"}
    assert goal in service.list_goals("u1")
    assert len(service.list_goals("u1")) == 4


def test_add_goal_validation(service):
    with pytest.raises(ValidationError):
        service.add_goal("u1", goal_type="yearly", target=1, description="x", period="2025")
    with pytest.raises(ValidationError):
        service.add_goal("u1", goal_type=GoalType.DAILY, target=0, description="x", period="2025-01-06")
    with pytest.raises(ValidationError):
        service.add_goal("u1", goal_type=GoalType.DAILY, target=8, description=" ", period="2025-01-06")
