"""Calendar arithmetic primitives for recurrence calculations.

Weekday numbers follow the rule convention (0 = Sunday ... 6 = Saturday),
which differs from Python's ``date.weekday()`` (0 = Monday).
"""

import calendar
import re
from datetime import date, datetime
from typing import Union

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from . import constants

DateLike = Union[str, date]

# dateutil weekday objects indexed by rule weekday number
_RELATIVE_WEEKDAYS = (SU, MO, TU, WE, TH, FR, SA)

_ISO_DATE_RE = re.compile(constants.ISO_DATE_PATTERN)


def to_date(value: DateLike) -> date:
    """
    Coerce a ``YYYY-MM-DD`` string or date into a ``date``.

    Args:
        value: ISO date string, date, or datetime (time part is dropped)

    Returns:
        Calendar date without time or timezone

    Raises:
        ValueError: If the string is not a real ``YYYY-MM-DD`` date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {value!r}")
    return date.fromisoformat(value)


def weekday_index(d: date) -> int:
    """Return the weekday of ``d`` with 0 = Sunday."""
    return (d.weekday() + 1) % constants.DAYS_PER_WEEK


def is_leap_year(year: int) -> bool:
    """Gregorian leap year: divisible by 4, except centuries not divisible by 400."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``."""
    return calendar.monthrange(year, month)[1]


def clamp_day(d: date, day: int) -> date:
    """Move ``d`` to ``day`` of its month, clamped down to the month's last day."""
    return d.replace(day=min(day, days_in_month(d.year, d.month)))


def add_months(d: date, months: int) -> date:
    """Add calendar months; a day past the target month's end clamps to its last day."""
    return d + relativedelta(months=months)


def nth_weekday_of_month(year: int, month_index: int, n: int, weekday: int) -> date:
    """
    Find the Nth occurrence of a weekday within a month.

    Examples:
        - nth_weekday_of_month(2024, 0, 2, 5) -> 2024-01-12 (2nd Friday of January)
        - nth_weekday_of_month(2024, 0, -1, 2) -> 2024-01-30 (last Tuesday of January)

    Args:
        year: Full year
        month_index: 0-based month (0 = January), as stored on rules
        n: 1-5 for the Nth occurrence, -1 for the last one
        weekday: 0-6 (0 = Sunday)

    Returns:
        Date of the requested weekday, always inside the given month

    Raises:
        ValueError: If any argument is out of range, or the month has no
            Nth occurrence of the weekday (e.g. a 5th Monday in a 4-Monday month)
    """
    if not 0 <= month_index < constants.MONTHS_PER_YEAR:
        raise ValueError(f"month_index must be between 0 and 11, got {month_index}")
    if not constants.MIN_WEEKDAY <= weekday <= constants.MAX_WEEKDAY:
        raise ValueError(f"weekday must be between 0 and 6, got {weekday}")

    month = month_index + 1
    relative_weekday = _RELATIVE_WEEKDAYS[weekday]

    if n == constants.WEEK_OF_MONTH_LAST:
        # Walk back from the last day of the month
        last = date(year, month, days_in_month(year, month))
        return last + relativedelta(weekday=relative_weekday(-1))

    if not 1 <= n <= constants.NTH_WEEKDAY_MAX:
        raise ValueError(f"n must be 1-{constants.NTH_WEEKDAY_MAX} or -1 (last), got {n}")

    first = date(year, month, 1)
    result = first + relativedelta(weekday=relative_weekday(+n))
    if result.month != month:
        raise ValueError(
            f"{calendar.month_name[month]} {year} has no occurrence #{n} "
            f"of {constants.DAY_NAMES[weekday]}"
        )
    return result
