"""Click CLI commands for taskcadence."""

import json
import logging
import sys
import traceback
from datetime import date
from pathlib import Path
from typing import Optional

import click

from taskcadence import __version__
from taskcadence.describe import describe_rule, short_label
from taskcadence.loader import get_enabled_tasks, get_task, load_tasks_file
from taskcadence.recurrence import iter_occurrences, plan_next_occurrence
from taskcadence.schema import check_rule

from .formatters import print_descriptions, print_next_json, print_next_table

logger = logging.getLogger(__name__)


def _resolve_today(today) -> date:
    """Reference date from --today, defaulting to the current local date."""
    if today is None:
        return date.today()  # noqa: DTZ011
    return today.date()


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    if logger.isEnabledFor(logging.DEBUG):
        traceback.print_exc()
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__)
def main(verbose: bool):
    """Taskcadence - Recurring task scheduling engine."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@main.command()
@click.argument("rule_json")
def check(rule_json: str):
    """Validate a single recurrence rule given as JSON.

    Examples:
        taskcadence check '{"frequency": "weekly", "interval": 1, "daysOfWeek": [1, 3, 5]}'
    """
    try:
        candidate = json.loads(rule_json)
    except json.JSONDecodeError as e:
        click.echo(f"✗ Not valid JSON: {e}", err=True)
        sys.exit(1)

    result = check_rule(candidate)
    if not result.valid:
        click.echo("✗ Invalid rule:", err=True)
        for error in result.errors:
            click.echo(f"  - {error}", err=True)
        sys.exit(1)

    click.echo(f"✓ Valid rule: {describe_rule(result.rule)}")


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def validate(path: str):
    """Validate a task file for syntax and schema compliance.

    Examples:
        taskcadence validate tasks.yaml
    """
    path_obj = Path(path)

    click.echo(f"Validating recurring tasks from: {path_obj}")

    try:
        task_file = load_tasks_file(path_obj)

        num_tasks = len(task_file.tasks)
        num_enabled = len(get_enabled_tasks(task_file))

        click.echo("✓ Validation successful!")
        click.echo(f"  Total tasks: {num_tasks}")
        click.echo(f"  Enabled: {num_enabled}")
        click.echo(f"  Disabled: {num_tasks - num_enabled}")

    except Exception as e:
        click.echo(f"✗ Validation failed: {e}", err=True)
        if logger.isEnabledFor(logging.DEBUG):
            traceback.print_exc()
        sys.exit(1)


@main.command(name="next")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date in YYYY-MM-DD format (default: today)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
def next_due(path: str, today, output_format: str):
    """Show the next due date of every enabled recurring task.

    Examples:
        taskcadence next tasks.yaml
        taskcadence next tasks.yaml --today 2024-01-15 --format json
    """
    try:
        task_file = load_tasks_file(Path(path))
        reference = _resolve_today(today)

        tasks = get_enabled_tasks(task_file)
        if not tasks:
            click.echo("No recurring tasks found")
            return

        rows = []
        for task in tasks:
            step = plan_next_occurrence(
                task.rule,
                task.due_date,
                task.occurrences_generated,
                reference,
                catch_up=task_file.config.catch_up_overdue,
            )
            rows.append(
                {
                    "id": task.id,
                    "due_date": task.due_date.isoformat(),
                    "next_due_date": step.next_due_date,
                    "label": short_label(task.rule),
                    "reason": step.reason,
                },
            )

        if output_format == "json":
            print_next_json(rows)
        else:
            print_next_table(rows)

    except Exception as e:
        _fail(e)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--short", "short", is_flag=True, help="Use compact labels")
def describe(path: str, short: bool):
    """Describe the recurrence of every task in a task file.

    Examples:
        taskcadence describe tasks.yaml
        taskcadence describe tasks.yaml --short
    """
    try:
        task_file = load_tasks_file(Path(path))
        if not task_file.tasks:
            click.echo("No recurring tasks found")
            return

        print_descriptions(task_file.tasks, short_label if short else describe_rule)

    except Exception as e:
        _fail(e)


@main.command()
@click.argument("task_id")
@click.option(
    "--tasks-path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to task file (default: $TASKCADENCE_FILE or ./tasks.yaml)",
)
@click.option("--count", type=click.IntRange(min=1), default=None, help="Dates to show")
def preview(task_id: str, tasks_path: Optional[str], count: Optional[int]):
    """Preview upcoming occurrences of a task.

    TASK_ID: The ID of the task to preview

    Examples:
        taskcadence preview weekly-standup --count 10
        taskcadence preview rent --tasks-path my-tasks.yaml
    """
    try:
        task_file = load_tasks_file(Path(tasks_path) if tasks_path else None)
        if task_file is None:
            click.echo("Error: No task file found", err=True)
            sys.exit(1)

        task = get_task(task_file, task_id)
        if task is None:
            click.echo(f"Error: Task '{task_id}' not found", err=True)
            sys.exit(1)

        limit = count or task_file.config.preview_count
        dates = list(
            iter_occurrences(
                task.rule,
                task.due_date,
                limit,
                occurrences_generated=max(task.occurrences_generated, 1),
            ),
        )

        click.echo(f"{task.id}: {describe_rule(task.rule)}")
        click.echo(f"Last occurrence: {task.due_date.isoformat()}")
        if not dates:
            click.echo("No upcoming occurrences (series has ended)")
            return
        for i, d in enumerate(dates, start=1):
            click.echo(f"{i:>3}. {d}")

    except Exception as e:
        _fail(e)
