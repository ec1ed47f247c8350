"""Human-readable descriptions of recurrence rules."""

from typing import Optional

from . import constants
from .calendar_math import to_date
from .schema import RecurringRule
from .types import MONTH_BASED_FREQUENCIES, WEEKLY_FREQUENCIES, Frequency

_LABELS = {
    Frequency.DAILY: "Daily",
    Frequency.WEEKLY: "Weekly",
    Frequency.BIWEEKLY: "Biweekly",
    Frequency.MONTHLY: "Monthly",
    Frequency.QUARTERLY: "Quarterly",
    Frequency.YEARLY: "Yearly",
}

# Plural unit for "Every N <unit>" phrases
_UNITS = {
    Frequency.DAILY: "days",
    Frequency.WEEKLY: "weeks",
    Frequency.BIWEEKLY: "weeks",
    Frequency.MONTHLY: "months",
    Frequency.QUARTERLY: "quarters",
    Frequency.YEARLY: "years",
}


def ordinal(n: int) -> str:
    """Return ``n`` with its English ordinal suffix (1st, 2nd, 3rd, 11th, 21st)."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def week_of_month_label(week_of_month: int) -> str:
    """Label for a weekday ordinal: '1st' ... '4th', or 'last' for -1."""
    if week_of_month == constants.WEEK_OF_MONTH_LAST:
        return "last"
    return ordinal(week_of_month)


def format_display_date(value: str) -> str:
    """Format YYYY-MM-DD as 'Dec 31, 2024'."""
    d = to_date(value)
    return f"{constants.SHORT_MONTH_NAMES[d.month]} {d.day}, {d.year}"


def _weekday_list(days_of_week: tuple[int, ...]) -> str:
    return ", ".join(constants.SHORT_DAY_NAMES[d] for d in sorted(set(days_of_week)))


def _every(rule: RecurringRule) -> str:
    """'Every N <units>' phrase; biweekly counts its two-week base period."""
    count = rule.interval
    if rule.frequency == Frequency.BIWEEKLY:
        count *= constants.BIWEEKLY_WEEKS
    return f"Every {count} {_UNITS[rule.frequency]}"


def _month_day_phrase(rule: RecurringRule, day_names: tuple[str, ...]) -> Optional[str]:
    """Day-within-month portion, e.g. '15th' or 'last Tuesday'."""
    if rule.uses_nth_weekday:
        return f"{week_of_month_label(rule.week_of_month)} {day_names[rule.monthly_day_of_week]}"
    if rule.day_of_month:
        return ordinal(rule.day_of_month)
    return None


def _end_clause(rule: RecurringRule) -> str:
    if rule.end_date:
        return f" until {format_display_date(rule.end_date)}"
    if rule.end_after_occurrences:
        return f", {rule.end_after_occurrences} times"
    return ""


def describe_rule(rule: RecurringRule) -> str:
    """
    Describe a rule in full, including its end condition.

    Examples:
        - "Every 3 days until Dec 31, 2024"
        - "Weekly on Mon, Wed, Fri"
        - "Monthly on the 2nd Friday"
        - "Weekly, 10 times"

    Args:
        rule: Recurrence rule

    Returns:
        Verbose description
    """
    frequency = rule.frequency

    if frequency == Frequency.DAILY:
        description = "Every day" if rule.interval == 1 else _every(rule)
    elif frequency in WEEKLY_FREQUENCIES:
        if frequency == Frequency.WEEKLY and rule.interval == 1:
            description = _LABELS[frequency]
        else:
            description = _every(rule)
        if rule.days_of_week:
            description += f" on {_weekday_list(rule.days_of_week)}"
    else:
        description = _LABELS[frequency] if rule.interval == 1 else _every(rule)
        day_phrase = _month_day_phrase(rule, constants.DAY_NAMES)
        if day_phrase:
            description += f" on the {day_phrase}"

    return description + _end_clause(rule)


def short_label(rule: RecurringRule) -> str:
    """
    Compact label for list views.

    Examples:
        - "Daily"
        - "Every 2 weeks"
        - "Monthly on last Fri"
    """
    label = _LABELS[rule.frequency] if rule.interval == 1 else _every(rule)

    if rule.frequency in MONTH_BASED_FREQUENCIES and rule.uses_nth_weekday:
        label += f" on {_month_day_phrase(rule, constants.SHORT_DAY_NAMES)}"

    return label
