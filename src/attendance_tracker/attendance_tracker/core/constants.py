"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Times are "HH:MM" strings, compared through ``common.datetime_utils.to_minutes``.
"""

STANDARD_CHECK_IN = "09:45"
STANDARD_CHECK_OUT = "18:00"
LATE_CHECK_IN_LIMIT = "11:30"
EARLY_CHECK_OUT_LIMIT = "16:00"

MIN_HOURS_FOR_PRESENT = 7
STANDARD_DAILY_HOURS = 8

MAX_SHORT_LEAVES_PER_MONTH = 2

DEFAULT_OFFICE_LATITUDE = 28.6611056
DEFAULT_OFFICE_LONGITUDE = 77.3457939
DEFAULT_OFFICE_NAME = "Main Office"
DEFAULT_OFFICE_RADIUS_METERS = 100

DEFAULT_SHEET_NAME = "Attendance Data"
