"""
Global constants for taskcadence.

This module centralizes all magic strings, bounds, and default values
to improve maintainability and make configuration easier.
"""

# ============================================================================
# File Paths and Environment
# ============================================================================

DEFAULT_TASKS_FILE = "tasks.yaml"
TASK_FILE_VERSION = "1.0"

# Environment variable for task file discovery
ENV_TASKS_FILE = "TASKCADENCE_FILE"

# ============================================================================
# Default Configuration Values
# ============================================================================

DEFAULT_CATCH_UP_OVERDUE = True
DEFAULT_PREVIEW_COUNT = 5

# ============================================================================
# Validation Constraints
# ============================================================================

MIN_INTERVAL = 1
MAX_INTERVAL = 99
MIN_DAY_OF_MONTH = 1
MAX_DAY_OF_MONTH = 31
MIN_WEEKDAY = 0  # Sunday
MAX_WEEKDAY = 6  # Saturday
MIN_END_AFTER_OCCURRENCES = 1
MAX_END_AFTER_OCCURRENCES = 999

WEEK_OF_MONTH_LAST = -1
WEEK_OF_MONTH_VALUES = (1, 2, 3, 4, WEEK_OF_MONTH_LAST)
NTH_WEEKDAY_MAX = 5  # Largest ordinal any month can hold

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# ============================================================================
# Frequency Interval Constants
# ============================================================================

DAYS_PER_WEEK = 7
BIWEEKLY_WEEKS = 2  # Bi-weekly base period (2 weeks)
QUARTERLY_MONTHS = 3  # Quarterly = 3 months
MONTHS_PER_YEAR = 12

# ============================================================================
# Display/Formatting Constants
# ============================================================================

# Indexed by weekday number, 0 = Sunday
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
SHORT_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# Indexed by calendar month, 1 = January
SHORT_MONTH_NAMES = (
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

MAX_TABLE_COLUMN_WIDTH = 40  # Max width for table columns in CLI
