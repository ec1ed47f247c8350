"""Tests for human-readable rule descriptions."""

import pytest

from taskcadence.describe import (
    describe_rule,
    format_display_date,
    ordinal,
    short_label,
    week_of_month_label,
)
from taskcadence.schema import RecurringRule, validate_rule
from taskcadence.types import Frequency


class TestDescribeRule:
    """Tests for verbose descriptions."""

    @pytest.mark.parametrize(
        ("config", "expected"),
        [
            ({"frequency": "daily", "interval": 1}, "Every day"),
            ({"frequency": "daily", "interval": 3}, "Every 3 days"),
            ({"frequency": "weekly", "interval": 1, "daysOfWeek": [1, 3, 5]}, "Weekly on Mon, Wed, Fri"),
            ({"frequency": "weekly", "interval": 2, "daysOfWeek": [2]}, "Every 2 weeks on Tue"),
            ({"frequency": "biweekly", "interval": 1, "daysOfWeek": [1]}, "Every 2 weeks on Mon"),
            ({"frequency": "biweekly", "interval": 2, "daysOfWeek": [1]}, "Every 4 weeks on Mon"),
            ({"frequency": "monthly", "interval": 1, "dayOfMonth": 15}, "Monthly on the 15th"),
            ({"frequency": "monthly", "interval": 1, "dayOfMonth": 1}, "Monthly on the 1st"),
            ({"frequency": "monthly", "interval": 3, "dayOfMonth": 22}, "Every 3 months on the 22nd"),
            ({"frequency": "monthly", "interval": 1}, "Monthly"),
            ({"frequency": "quarterly", "interval": 1}, "Quarterly"),
            ({"frequency": "quarterly", "interval": 2, "dayOfMonth": 3}, "Every 2 quarters on the 3rd"),
            ({"frequency": "yearly", "interval": 1}, "Yearly"),
            ({"frequency": "yearly", "interval": 2}, "Every 2 years"),
        ],
    )
    def test_basic_descriptions(self, config, expected):
        assert describe_rule(RecurringRule.model_validate(config)) == expected

    def test_weekdays_in_ascending_order(self):
        rule = RecurringRule.model_validate(
            {"frequency": "weekly", "interval": 1, "daysOfWeek": [5, 0, 3, 3]}
        )
        assert describe_rule(rule) == "Weekly on Sun, Wed, Fri"

    @pytest.mark.parametrize(
        ("frequency", "interval", "week", "weekday", "expected"),
        [
            ("monthly", 1, -1, 2, "Monthly on the last Tuesday"),
            ("monthly", 1, 2, 5, "Monthly on the 2nd Friday"),
            ("monthly", 2, 1, 1, "Every 2 months on the 1st Monday"),
            ("quarterly", 1, 3, 3, "Quarterly on the 3rd Wednesday"),
            ("yearly", 1, 4, 4, "Yearly on the 4th Thursday"),
        ],
    )
    def test_nth_weekday_descriptions(self, frequency, interval, week, weekday, expected):
        rule = RecurringRule.model_validate(
            {
                "frequency": frequency,
                "interval": interval,
                "monthlyPattern": "dayOfWeek",
                "weekOfMonth": week,
                "monthlyDayOfWeek": weekday,
            }
        )
        assert describe_rule(rule) == expected

    def test_end_date_clause(self):
        rule = RecurringRule.model_validate(
            {"frequency": "daily", "interval": 1, "endDate": "2024-12-31"}
        )
        assert describe_rule(rule) == "Every day until Dec 31, 2024"

    def test_end_date_clause_with_interval(self):
        rule = RecurringRule.model_validate(
            {"frequency": "daily", "interval": 3, "endDate": "2024-12-31"}
        )
        assert describe_rule(rule) == "Every 3 days until Dec 31, 2024"

    def test_occurrence_clause(self):
        rule = RecurringRule.model_validate(
            {"frequency": "weekly", "interval": 1, "daysOfWeek": [1], "endAfterOccurrences": 10}
        )
        assert describe_rule(rule) == "Weekly on Mon, 10 times"

    def test_weekly_without_days(self):
        """Formatters tolerate unvalidated rules that omit weekdays."""
        weekly = RecurringRule.model_construct(frequency=Frequency.WEEKLY, interval=1)
        assert describe_rule(weekly) == "Weekly"
        every_two = RecurringRule.model_construct(frequency=Frequency.WEEKLY, interval=2)
        assert describe_rule(every_two) == "Every 2 weeks"
        capped = RecurringRule.model_construct(
            frequency=Frequency.WEEKLY, interval=1, end_after_occurrences=10
        )
        assert describe_rule(capped) == "Weekly, 10 times"


class TestShortLabel:
    """Tests for compact labels."""

    @pytest.mark.parametrize(
        ("config", "expected"),
        [
            ({"frequency": "daily", "interval": 1}, "Daily"),
            ({"frequency": "weekly", "interval": 1, "daysOfWeek": [1]}, "Weekly"),
            ({"frequency": "biweekly", "interval": 1, "daysOfWeek": [1]}, "Biweekly"),
            ({"frequency": "monthly", "interval": 1}, "Monthly"),
            ({"frequency": "quarterly", "interval": 1}, "Quarterly"),
            ({"frequency": "yearly", "interval": 1}, "Yearly"),
            ({"frequency": "daily", "interval": 3}, "Every 3 days"),
            ({"frequency": "weekly", "interval": 2, "daysOfWeek": [1]}, "Every 2 weeks"),
            ({"frequency": "monthly", "interval": 6}, "Every 6 months"),
            ({"frequency": "yearly", "interval": 5}, "Every 5 years"),
            ({"frequency": "monthly", "interval": 1, "dayOfMonth": 15}, "Monthly"),
            ({"frequency": "daily", "interval": 1, "endDate": "2024-12-31"}, "Daily"),
        ],
    )
    def test_labels(self, config, expected):
        assert short_label(RecurringRule.model_validate(config)) == expected

    @pytest.mark.parametrize(
        ("frequency", "interval", "week", "weekday", "expected"),
        [
            ("monthly", 1, -1, 5, "Monthly on last Fri"),
            ("monthly", 2, 2, 1, "Every 2 months on 2nd Mon"),
            ("quarterly", 1, 3, 3, "Quarterly on 3rd Wed"),
        ],
    )
    def test_nth_weekday_labels(self, frequency, interval, week, weekday, expected):
        rule = RecurringRule.model_validate(
            {
                "frequency": frequency,
                "interval": interval,
                "monthlyPattern": "dayOfWeek",
                "weekOfMonth": week,
                "monthlyDayOfWeek": weekday,
            }
        )
        assert short_label(rule) == expected


class TestHelpers:
    """Tests for ordinal and date formatting helpers."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (23, "23rd"),
            (30, "30th"),
            (31, "31st"),
        ],
    )
    def test_ordinal(self, n, expected):
        assert ordinal(n) == expected

    def test_week_of_month_label(self):
        assert week_of_month_label(-1) == "last"
        assert week_of_month_label(2) == "2nd"

    def test_format_display_date(self):
        assert format_display_date("2024-01-05") == "Jan 5, 2024"
        assert format_display_date("2024-12-31") == "Dec 31, 2024"


class TestDescriptionVocabularyRoundTrip:
    """Rules built from the formatter vocabulary always validate."""

    @pytest.mark.parametrize(
        "config",
        [
            {"frequency": "daily", "interval": 3, "endDate": "2024-12-31"},
            {"frequency": "weekly", "interval": 1, "daysOfWeek": [1, 3, 5]},
            {"frequency": "biweekly", "interval": 1, "daysOfWeek": [0], "endAfterOccurrences": 10},
            {"frequency": "monthly", "interval": 1, "dayOfMonth": 31},
            {
                "frequency": "quarterly",
                "interval": 1,
                "monthlyPattern": "dayOfWeek",
                "weekOfMonth": 3,
                "monthlyDayOfWeek": 3,
            },
            {"frequency": "yearly", "interval": 2},
        ],
    )
    def test_round_trip(self, config):
        rule = validate_rule(config)
        assert rule is not None
        assert describe_rule(rule)
        assert validate_rule(rule.to_dict()) == rule
