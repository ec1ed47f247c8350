"""Output formatting functions for CLI commands."""

import json

import click

from taskcadence import constants


def print_next_table(rows: list[dict]) -> None:
    """
    Print planned next occurrences as a formatted ASCII table.

    Column widths are auto-calculated based on content.

    Args:
        rows: Dicts with id, due_date, next_due_date, label and reason keys.
    """
    id_width = max(len(r["id"]) for r in rows)
    id_width = max(id_width, len("ID"))

    label_width = max(len(r["label"]) for r in rows)
    label_width = max(label_width, len("Recurrence"))
    label_width = min(label_width, constants.MAX_TABLE_COLUMN_WIDTH)

    click.echo(f"{'ID':<{id_width}}  {'Due':<10}  {'Next':<10}  {'Recurrence':<{label_width}}")
    click.echo("-" * (id_width + 10 + 10 + label_width + 6))

    for r in rows:
        next_due = r["next_due_date"] or "-"
        label = r["label"][:label_width]
        line = f"{r['id']:<{id_width}}  {r['due_date']:<10}  {next_due:<10}  {label:<{label_width}}"
        if r["reason"]:
            line += f"  ({r['reason']})"
        click.echo(line)

    click.echo(f"\nTotal: {len(rows)} tasks")


def print_next_json(rows: list[dict]) -> None:
    """Print planned next occurrences as JSON."""
    click.echo(json.dumps(rows, indent=2, default=str))


def print_descriptions(tasks: list, describe) -> None:
    """
    Print one description line per task.

    Args:
        tasks: RecurringTask objects
        describe: Callable rendering a rule as text
    """
    id_width = max(len(t.id) for t in tasks)
    for t in tasks:
        title = f"  {t.title}" if t.title else ""
        click.echo(f"{t.id:<{id_width}}  {describe(t.rule)}{title}")
