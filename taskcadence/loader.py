"""YAML task file loader and validator."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from . import constants
from .schema import GlobalConfig, RecurringTask, TaskFile

logger = logging.getLogger(__name__)


def find_tasks_file() -> Optional[Path]:
    """
    Locate the task file.

    Search order (highest to lowest priority):
    1. TASKCADENCE_FILE environment variable
    2. tasks.yaml in current directory

    Returns:
        Path to the task file or None if not found
    """
    if env_file := os.getenv(constants.ENV_TASKS_FILE):
        path = Path(env_file)
        if path.is_file():
            return path
        logger.warning("%s points to non-existent file: %s", constants.ENV_TASKS_FILE, env_file)

    cwd_file = Path.cwd() / constants.DEFAULT_TASKS_FILE
    if cwd_file.is_file():
        return cwd_file

    return None


def load_tasks_file(filepath: Optional[Path] = None) -> Optional[TaskFile]:
    """
    Load and validate a task file.

    Args:
        filepath: Optional explicit path. If None, uses find_tasks_file()
                  to auto-discover.

    Returns:
        TaskFile object, or None if no file was found

    Raises:
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If schema validation fails
    """
    if filepath is None:
        filepath = find_tasks_file()
        if filepath is None:
            logger.info("No task file found")
            return None

    logger.info("Loading recurring tasks from: %s", filepath)

    try:
        with filepath.open() as f:
            data = yaml.safe_load(f)

        if data is None:
            logger.warning("Empty task file: %s", filepath)
            return TaskFile(tasks=[], config=GlobalConfig())

        # Handle case where tasks key is None (all commented out)
        if data.get("tasks") is None:
            data["tasks"] = []

        task_file = TaskFile(**data)

        logger.info(
            "Loaded %d recurring tasks (%d enabled)",
            len(task_file.tasks),
            sum(1 for t in task_file.tasks if t.enabled),
        )

        return task_file

    except yaml.YAMLError as e:
        logger.error("YAML parsing error in %s: %s", filepath, e)
        raise
    except Exception as e:
        logger.error("Error loading recurring tasks from %s: %s", filepath, e)
        raise


def get_enabled_tasks(task_file: Optional[TaskFile]) -> list[RecurringTask]:
    """
    Get list of enabled tasks.

    Args:
        task_file: TaskFile object or None

    Returns:
        List of enabled RecurringTask objects
    """
    if task_file is None:
        return []

    return [t for t in task_file.tasks if t.enabled]


def get_task(task_file: TaskFile, task_id: str) -> Optional[RecurringTask]:
    """Find a task by id."""
    for task in task_file.tasks:
        if task.id == task_id:
            return task
    return None
