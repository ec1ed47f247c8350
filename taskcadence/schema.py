"""Pydantic schema models for recurrence rule validation."""

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from . import constants
from .calendar_math import to_date
from .types import WEEKLY_FREQUENCIES, Frequency, MonthlyPattern

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def _check_weekday(v: int, field_name: str) -> int:
    if v < constants.MIN_WEEKDAY or v > constants.MAX_WEEKDAY:
        raise ValueError(f"{field_name} must be between 0 (Sunday) and 6 (Saturday)")
    return v


class RecurringRule(BaseModel):
    """
    Recurrence rule attached to a repeating task.

    Rules cross the application boundary as camelCase records
    (``daysOfWeek``, ``endAfterOccurrences``, ...); snake_case field names are
    accepted as well. Unknown fields are ignored. Instances are immutable.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    frequency: Frequency = Field(..., description="Base recurrence frequency")
    interval: StrictInt = Field(..., description="Multiplier on the base period (1-99)")

    # Weekly / biweekly
    days_of_week: Optional[tuple[StrictInt, ...]] = Field(
        None, description="Weekdays to repeat on (0 = Sunday)"
    )

    # Monthly / quarterly / yearly
    day_of_month: Optional[StrictInt] = Field(None, description="Day of month (1-31)")
    monthly_pattern: Optional[MonthlyPattern] = Field(
        None, description="Fixed day of month or Nth weekday of month"
    )
    week_of_month: Optional[StrictInt] = Field(
        None, description="Weekday ordinal (1-4, -1 for last)"
    )
    monthly_day_of_week: Optional[StrictInt] = Field(
        None, description="Weekday for the Nth-weekday pattern (0 = Sunday)"
    )

    # Termination (at most one)
    end_date: Optional[StrictStr] = Field(None, description="Last allowed date (YYYY-MM-DD)")
    end_after_occurrences: Optional[StrictInt] = Field(
        None, description="Maximum number of occurrences"
    )

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        """Ensure interval is in valid range."""
        if v < constants.MIN_INTERVAL or v > constants.MAX_INTERVAL:
            msg = f"interval must be between {constants.MIN_INTERVAL} and {constants.MAX_INTERVAL}"
            raise ValueError(msg)
        return v

    @field_validator("days_of_week")
    @classmethod
    def validate_days_of_week(cls, v: Optional[tuple[int, ...]]) -> Optional[tuple[int, ...]]:
        """Ensure every weekday is 0-6."""
        if v is not None:
            for day in v:
                _check_weekday(day, "daysOfWeek")
        return v

    @field_validator("day_of_month")
    @classmethod
    def validate_day_of_month(cls, v: Optional[int]) -> Optional[int]:
        """Ensure day_of_month is in valid range."""
        if v is not None and (v < constants.MIN_DAY_OF_MONTH or v > constants.MAX_DAY_OF_MONTH):
            msg = (
                f"dayOfMonth must be between {constants.MIN_DAY_OF_MONTH} "
                f"and {constants.MAX_DAY_OF_MONTH}"
            )
            raise ValueError(msg)
        return v

    @field_validator("week_of_month")
    @classmethod
    def validate_week_of_month(cls, v: Optional[int]) -> Optional[int]:
        """Ensure week_of_month is 1-4 or -1 (last)."""
        if v is not None and v not in constants.WEEK_OF_MONTH_VALUES:
            raise ValueError("weekOfMonth must be 1-4 or -1 (last)")
        return v

    @field_validator("monthly_day_of_week")
    @classmethod
    def validate_monthly_day_of_week(cls, v: Optional[int]) -> Optional[int]:
        if v is not None:
            _check_weekday(v, "monthlyDayOfWeek")
        return v

    @field_validator("end_date", mode="before")
    @classmethod
    def coerce_end_date(cls, v: Any) -> Any:
        """Accept date objects (YAML parses bare dates) as ISO strings."""
        if isinstance(v, date) and not isinstance(v, datetime):
            return v.isoformat()
        return v

    @field_validator("end_date")
    @classmethod
    def validate_end_date(cls, v: Optional[str]) -> Optional[str]:
        """Ensure end_date is a real YYYY-MM-DD date."""
        if v is not None:
            try:
                to_date(v)
            except ValueError as e:
                raise ValueError(f"endDate must be a valid YYYY-MM-DD date, got '{v}'") from e
        return v

    @field_validator("end_after_occurrences")
    @classmethod
    def validate_end_after_occurrences(cls, v: Optional[int]) -> Optional[int]:
        """Ensure end_after_occurrences is a positive count."""
        if v is not None and (
            v < constants.MIN_END_AFTER_OCCURRENCES or v > constants.MAX_END_AFTER_OCCURRENCES
        ):
            msg = (
                f"endAfterOccurrences must be between {constants.MIN_END_AFTER_OCCURRENCES} "
                f"and {constants.MAX_END_AFTER_OCCURRENCES}"
            )
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_cross_field(self) -> "RecurringRule":
        """Enforce constraints that span several fields."""
        if self.frequency in WEEKLY_FREQUENCIES and not self.days_of_week:
            raise ValueError("Days of week required for weekly/biweekly frequency")
        if self.monthly_pattern == MonthlyPattern.DAY_OF_WEEK and (
            self.week_of_month is None or self.monthly_day_of_week is None
        ):
            raise ValueError(
                "Week of month and day of week required for day-of-week monthly pattern"
            )
        if self.end_date is not None and self.end_after_occurrences is not None:
            raise ValueError("Cannot set both end date and occurrence limit")
        return self

    @property
    def uses_nth_weekday(self) -> bool:
        """True when month-based dates come from the Nth-weekday pattern."""
        return (
            self.monthly_pattern == MonthlyPattern.DAY_OF_WEEK
            and self.week_of_month is not None
            and self.monthly_day_of_week is not None
        )

    @property
    def end_date_value(self) -> Optional[date]:
        return to_date(self.end_date) if self.end_date is not None else None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase record form, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ValidationResult(BaseModel):
    """Outcome of checking a candidate rule: the rule, or the reasons it was rejected."""

    valid: bool = Field(..., description="Whether the candidate is a usable rule")
    rule: Optional[RecurringRule] = Field(None, description="Validated rule (valid only)")
    errors: list[str] = Field(default_factory=list, description="Rejection reasons")


def _format_error(error: dict[str, Any]) -> str:
    message = error["msg"]
    if message.startswith(_VALUE_ERROR_PREFIX):
        message = message[len(_VALUE_ERROR_PREFIX) :]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {message}" if location else message


def check_rule(candidate: Any) -> ValidationResult:
    """
    Validate an untyped rule record.

    Args:
        candidate: Mapping in the camelCase rule shape (or a RecurringRule)

    Returns:
        ValidationResult with the normalized rule on success, or every
        rejection reason on failure. Never a partially valid rule.
    """
    if isinstance(candidate, RecurringRule):
        return ValidationResult(valid=True, rule=candidate)

    if not isinstance(candidate, Mapping):
        return ValidationResult(
            valid=False,
            errors=[f"rule must be a mapping, got {type(candidate).__name__}"],
        )

    try:
        rule = RecurringRule.model_validate(dict(candidate))
    except ValidationError as e:
        errors = [_format_error(err) for err in e.errors()]
        logger.debug("Rejected recurrence rule %r: %s", candidate, "; ".join(errors))
        return ValidationResult(valid=False, errors=errors)

    return ValidationResult(valid=True, rule=rule)


def validate_rule(candidate: Any) -> Optional[RecurringRule]:
    """
    Validate an untyped rule record.

    Returns:
        The validated rule, or None if the candidate is invalid
    """
    return check_rule(candidate).rule


class GlobalConfig(BaseModel):
    """Global configuration for a task file."""

    catch_up_overdue: bool = Field(
        constants.DEFAULT_CATCH_UP_OVERDUE,
        description="Skip occurrences on or before the reference date when planning",
    )
    preview_count: int = Field(
        constants.DEFAULT_PREVIEW_COUNT, description="Default number of dates to preview"
    )

    @field_validator("preview_count")
    @classmethod
    def validate_preview_count(cls, v: int) -> int:
        """Ensure preview_count is positive."""
        if v < 1:
            raise ValueError("preview_count must be at least 1")
        return v


class RecurringTask(BaseModel):
    """A repeating task as recorded in a task file."""

    id: str = Field(..., description="Unique task identifier")
    title: str = Field("", description="Task title")
    enabled: bool = Field(True, description="Whether the series is active")
    due_date: date = Field(..., description="Due date of the most recent occurrence")
    rule: RecurringRule = Field(..., description="Recurrence rule")
    occurrences_generated: int = Field(0, description="Occurrences created so far")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Ensure id is valid."""
        if not v or not v.strip():
            raise ValueError("id cannot be empty")
        return v

    @field_validator("occurrences_generated")
    @classmethod
    def validate_occurrences_generated(cls, v: int) -> int:
        if v < 0:
            raise ValueError("occurrences_generated must be non-negative")
        return v


class TaskFile(BaseModel):
    """Root task file structure."""

    version: str = Field(constants.TASK_FILE_VERSION, description="Task file format version")
    tasks: list[RecurringTask] = Field(default_factory=list, description="Recurring tasks")
    config: GlobalConfig = Field(default_factory=GlobalConfig, description="Global configuration")

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "TaskFile":
        """Reject task files that reuse a task id."""
        seen = set()
        for task in self.tasks:
            if task.id in seen:
                raise ValueError(f"Duplicate task id '{task.id}'")
            seen.add(task.id)
        return self
