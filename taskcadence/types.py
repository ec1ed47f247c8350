"""Type definitions and enums for taskcadence."""

from enum import Enum


class Frequency(str, Enum):
    """Recurrence frequency types."""

    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class MonthlyPattern(str, Enum):
    """How monthly, quarterly and yearly rules pick the day within a month."""

    DAY_OF_MONTH = "dayOfMonth"  # Fixed calendar day (e.g., the 15th)
    DAY_OF_WEEK = "dayOfWeek"  # Nth weekday (e.g., 2nd Friday, last Tuesday)


class Weekday(int, Enum):
    """Weekday numbers as stored on rules (0 = Sunday)."""

    SUN = 0
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6


WEEKLY_FREQUENCIES = frozenset({Frequency.WEEKLY, Frequency.BIWEEKLY})
MONTH_BASED_FREQUENCIES = frozenset({Frequency.MONTHLY, Frequency.QUARTERLY, Frequency.YEARLY})
