"""Taskcadence - Recurring task scheduling engine.

This package computes the next occurrence of repeating tasks from a
recurrence rule, validates rules, and renders them as readable text.

Main exports:
    validate_rule / check_rule: Validate an untyped rule record
    next_occurrence: Next due date of a series (or None once it has ended)
    should_generate_next: Cheap termination check
    describe_rule / short_label: Human-readable descriptions
"""

__version__ = "1.0.0"

from .calendar_math import nth_weekday_of_month
from .describe import describe_rule, short_label
from .recurrence import (
    SeriesStep,
    iter_occurrences,
    next_occurrence,
    plan_next_occurrence,
    should_generate_next,
)
from .schema import RecurringRule, ValidationResult, check_rule, validate_rule
from .types import Frequency, MonthlyPattern, Weekday

__all__ = [
    "Frequency",
    "MonthlyPattern",
    "RecurringRule",
    "SeriesStep",
    "ValidationResult",
    "Weekday",
    "check_rule",
    "describe_rule",
    "iter_occurrences",
    "next_occurrence",
    "nth_weekday_of_month",
    "plan_next_occurrence",
    "short_label",
    "should_generate_next",
    "validate_rule",
]
