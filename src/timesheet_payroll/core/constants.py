"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_DAY_HOURS = 24
DEFAULT_SHIFT_HOURS = 8
LONG_SHIFT_HOURS = 12

DEFAULT_ADVANCE_CUTOFF_DAY = 15
SALARY_DEADLINE_DAY = 5

DEFAULT_QUALITY_SCORE = 3
MIN_QUALITY_SCORE = 1
MAX_QUALITY_SCORE = 4

DEFAULT_BUDGET_TOLERANCE = 0.05

DEFAULT_LOCALE = "ru"
DEFAULT_ADMINISTRATOR_KEYWORD = "администратор"

MONTH_FORMAT = "%Y-%m"
