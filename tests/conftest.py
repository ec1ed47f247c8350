"""Pytest configuration and shared fixtures for taskcadence tests."""

import pytest
import yaml

from taskcadence.schema import RecurringRule
from taskcadence.types import Frequency

# ============================================================================
# Rule Builders
# ============================================================================


def make_rule(frequency: Frequency = Frequency.DAILY, interval: int = 1, **kwargs) -> RecurringRule:
    """Create a RecurringRule; extra keyword arguments use snake_case field names."""
    return RecurringRule(frequency=frequency, interval=interval, **kwargs)


def make_task_dict(
    task_id: str = "test-task",
    due_date: str = "2024-01-15",
    rule: dict = None,
    **kwargs,
) -> dict:
    """Create a task record as it appears in a task file."""
    if rule is None:
        rule = {"frequency": "daily", "interval": 1}

    task = {"id": task_id, "title": kwargs.pop("title", "Test task"), "due_date": due_date, "rule": rule}
    task.update(kwargs)
    return task


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def sample_rule():
    """Fixture providing a rule builder function."""
    return make_rule


@pytest.fixture
def sample_task_dict():
    """Fixture providing a task record builder function."""
    return make_task_dict


@pytest.fixture
def tasks_yaml_file(tmp_path):
    """Create a temporary tasks.yaml file with a mix of recurring tasks."""
    tasks_data = {
        "config": {"catch_up_overdue": False, "preview_count": 3},
        "tasks": [
            make_task_dict(
                "daily-review",
                due_date="2024-01-15",
                rule={"frequency": "daily", "interval": 1},
                title="Daily review",
            ),
            make_task_dict(
                "standup",
                due_date="2024-01-15",
                rule={"frequency": "weekly", "interval": 1, "daysOfWeek": [1, 3, 5]},
                title="Standup notes",
            ),
            make_task_dict(
                "board-report",
                due_date="2024-01-30",
                rule={
                    "frequency": "monthly",
                    "interval": 1,
                    "monthlyPattern": "dayOfWeek",
                    "weekOfMonth": -1,
                    "monthlyDayOfWeek": 2,
                },
                title="Board report",
            ),
            make_task_dict(
                "old-cleanup",
                due_date="2024-01-10",
                rule={"frequency": "daily", "interval": 1, "endDate": "2024-01-12"},
                enabled=False,
            ),
        ],
    }

    path = tmp_path / "tasks.yaml"
    with open(path, "w") as f:
        yaml.dump(tasks_data, f)
    return path
