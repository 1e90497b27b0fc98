"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_SHIFT_DURATION_MINUTES = 30
MAX_SHIFT_DURATION_HOURS = 24

SKILL_MIN_LENGTH = 2
SKILL_MAX_LENGTH = 50
SKILL_PATTERN = r"^[A-Z0-9][A-Z0-9 -]*$"

EMPLOYEE_NAME_MIN_LENGTH = 2
LOCATION_NAME_MIN_LENGTH = 2
MIN_HOURS_PER_WEEK = 1
MAX_HOURS_PER_WEEK = 168
