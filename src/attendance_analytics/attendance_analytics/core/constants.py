"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_WINDOW_DAYS = 90
DEFAULT_TREND_MONTHS = 3
DEFAULT_TIMEZONE = "UTC"

# Subject code used when an event carries none.
GENERAL_SUBJECT_CODE = "general"

WEIGHT_PRESENT = 1.0
WEIGHT_LATE = 0.5
WEIGHT_ABSENT = 0.0
