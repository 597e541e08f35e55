"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

LATE_THRESHOLD_MINUTES = 15
CALENDAR_CELLS = 42
SEAT_ROWS = 5
SEAT_COLUMNS = 6
QR_ATTENDANCE_PREFIX = "attend:"
DEFAULT_TIMEOUT_SECONDS = 15
SCHEDULE_BUFFER_MINUTES = 10
DEFAULT_API_BASE_URL = "http://localhost:8080/api"
