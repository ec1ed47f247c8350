"""Recurrence engine for computing the next occurrence of a repeating task.

All functions take the reference date ("today") as an argument; nothing here
reads the system clock. Rules are assumed to have passed validation.
"""

import logging
from collections.abc import Iterator
from datetime import date, timedelta
from typing import NamedTuple, Optional

from . import constants
from .calendar_math import (
    DateLike,
    add_months,
    clamp_day,
    nth_weekday_of_month,
    to_date,
    weekday_index,
)
from .schema import RecurringRule
from .types import Frequency

logger = logging.getLogger(__name__)

# Months advanced per unit of interval
_MONTH_STEPS = {
    Frequency.MONTHLY: 1,
    Frequency.QUARTERLY: constants.QUARTERLY_MONTHS,
    Frequency.YEARLY: constants.MONTHS_PER_YEAR,
}

REASON_OCCURRENCE_LIMIT = "occurrence limit reached"
REASON_END_DATE = "end date passed"


class SeriesStep(NamedTuple):
    """Result of planning the next instance of a recurring series."""

    next_due_date: Optional[str]
    reason: Optional[str] = None

    @property
    def ended(self) -> bool:
        return self.next_due_date is None


def _next_weekly(current: date, days_of_week: tuple[int, ...], week_interval: int) -> date:
    """
    Next selected weekday after ``current``.

    Weeks run Sunday to Saturday. A later selected day in the same week wins;
    otherwise jump ``week_interval`` weeks ahead to the earliest selected day.
    """
    if not days_of_week:
        return current + timedelta(weeks=week_interval)

    days = sorted(set(days_of_week))
    current_day = weekday_index(current)

    for day in days:
        if day > current_day:
            return current + timedelta(days=day - current_day)

    days_until_week_end = constants.DAYS_PER_WEEK - current_day
    return current + timedelta(
        days=days_until_week_end + (week_interval - 1) * constants.DAYS_PER_WEEK + days[0],
    )


def _next_month_based(current: date, rule: RecurringRule, month_interval: int) -> date:
    """Advance ``month_interval`` months, then pick the day per the rule's pattern."""
    target = add_months(current, month_interval)

    if rule.uses_nth_weekday:
        return nth_weekday_of_month(
            target.year,
            target.month - 1,
            rule.week_of_month,
            rule.monthly_day_of_week,
        )

    day = rule.day_of_month if rule.day_of_month is not None else current.day
    return clamp_day(target, day)


def _advance(rule: RecurringRule, current: date) -> date:
    """Step one period forward from ``current``."""
    if rule.frequency == Frequency.DAILY:
        return current + timedelta(days=rule.interval)
    if rule.frequency == Frequency.WEEKLY:
        return _next_weekly(current, rule.days_of_week or (), rule.interval)
    if rule.frequency == Frequency.BIWEEKLY:
        return _next_weekly(
            current, rule.days_of_week or (), rule.interval * constants.BIWEEKLY_WEEKS
        )
    return _next_month_based(current, rule, rule.interval * _MONTH_STEPS[rule.frequency])


def next_occurrence(
    rule: RecurringRule,
    current_date: DateLike,
    reference_date: DateLike,
    *,
    catch_up: bool = False,
) -> Optional[str]:
    """
    Calculate the next occurrence date of a recurring rule.

    Args:
        rule: Validated recurrence rule
        current_date: Date of the most recent occurrence (YYYY-MM-DD)
        reference_date: "Today" used to evaluate the end date (YYYY-MM-DD)
        catch_up: Keep advancing while the candidate is on or before
            reference_date, so overdue series land in the future

    Returns:
        Next occurrence as YYYY-MM-DD, or None if the series has ended
    """
    current = to_date(current_date)
    today = to_date(reference_date)
    end_date = rule.end_date_value

    if end_date is not None and today > end_date:
        logger.debug("Series ended: reference %s is past end date %s", today, end_date)
        return None

    candidate = _advance(rule, current)

    if catch_up:
        while candidate <= today:
            candidate = _advance(rule, candidate)

    if end_date is not None and candidate > end_date:
        logger.debug("Series ended: next occurrence %s is past end date %s", candidate, end_date)
        return None

    return candidate.isoformat()


def should_generate_next(
    rule: RecurringRule,
    occurrences_generated: int,
    reference_date: DateLike,
) -> bool:
    """
    Check whether a recurring series should produce another occurrence.

    Cheap to call before ``next_occurrence``: no date stepping is done.

    Args:
        rule: Validated recurrence rule
        occurrences_generated: Occurrences already created for the series
        reference_date: "Today" used to evaluate the end date

    Returns:
        False once the occurrence cap is reached or the end date has passed
    """
    if (
        rule.end_after_occurrences is not None
        and occurrences_generated >= rule.end_after_occurrences
    ):
        return False

    end_date = rule.end_date_value
    if end_date is not None and to_date(reference_date) > end_date:
        return False

    return True


def plan_next_occurrence(
    rule: RecurringRule,
    completed_due_date: DateLike,
    occurrences_generated: int,
    reference_date: DateLike,
    *,
    catch_up: bool = True,
) -> SeriesStep:
    """
    Decide the due date of the next instance when a recurring task is completed.

    Args:
        rule: Validated recurrence rule
        completed_due_date: Due date of the instance just completed
        occurrences_generated: Instances created so far in the series
        reference_date: Completion date ("today")
        catch_up: Skip occurrences already on or before reference_date

    Returns:
        SeriesStep with the next due date, or a reason the series ended
    """
    if not should_generate_next(rule, occurrences_generated, reference_date):
        if (
            rule.end_after_occurrences is not None
            and occurrences_generated >= rule.end_after_occurrences
        ):
            return SeriesStep(None, REASON_OCCURRENCE_LIMIT)
        return SeriesStep(None, REASON_END_DATE)

    next_due = next_occurrence(rule, completed_due_date, reference_date, catch_up=catch_up)
    if next_due is None:
        return SeriesStep(None, REASON_END_DATE)

    logger.debug("Next occurrence after %s: %s", completed_due_date, next_due)
    return SeriesStep(next_due)


def iter_occurrences(
    rule: RecurringRule,
    start_date: DateLike,
    limit: int,
    occurrences_generated: int = 1,
) -> Iterator[str]:
    """
    Yield successive occurrences after ``start_date``.

    Args:
        rule: Validated recurrence rule
        start_date: Most recent occurrence (not yielded)
        limit: Maximum number of dates to yield
        occurrences_generated: Occurrences already counted toward
            endAfterOccurrences, including start_date

    Yields:
        YYYY-MM-DD strings until the end date, the occurrence cap, or limit
    """
    current = to_date(start_date)
    end_date = rule.end_date_value
    generated = occurrences_generated

    for _ in range(limit):
        if rule.end_after_occurrences is not None and generated >= rule.end_after_occurrences:
            return
        current = _advance(rule, current)
        if end_date is not None and current > end_date:
            return
        generated += 1
        yield current.isoformat()
