"""Setting keys, fallback values and input limits."""

from datetime import time

# Settings keys (settings table)
KEY_WORK_START_TIME = "work_start_time"
KEY_WORK_END_TIME = "work_end_time"
KEY_LATE_TOLERANCE = "late_tolerance"
KEY_OFFICE_LATITUDE = "office_latitude"
KEY_OFFICE_LONGITUDE = "office_longitude"
KEY_GEOFENCE_RADIUS = "geofence_radius"

# Defaults used when a settings key is absent
DEFAULT_WORK_START_TIME = "08:00"
DEFAULT_WORK_END_TIME = "17:00"
DEFAULT_TOLERANCE_MINUTES = 15
DEFAULT_OFFICE_LATITUDE = 15.7634
DEFAULT_OFFICE_LONGITUDE = -86.75342
DEFAULT_GEOFENCE_RADIUS = 100.0
DEFAULT_OFFICE_ADDRESS = "Residencial Monte Real, La Ceiba"

# Sunday=0 .. Saturday=6
DEFAULT_WORK_DAYS = frozenset({1, 2, 3, 4, 5, 6})
SATURDAY = 6

SATURDAY_START = time(8, 0)
SATURDAY_END = time(12, 0)

# Testing override: any day is admissible until 22:00 (+ tolerance)
EXTENDED_HOURS_END = time(22, 0)

MAX_TOLERANCE_MINUTES = 240
MIN_GEOFENCE_RADIUS = 10
MAX_GEOFENCE_RADIUS = 1000
EARTH_RADIUS_METERS = 6_371_000

DEFAULT_HISTORY_LIMIT = 30
MAX_HISTORY_LIMIT = 500
DEFAULT_TOKEN_HOURS = 24
MIN_PASSWORD_LENGTH = 6
MIN_NAME_LENGTH = 2

DEFAULT_POOL_SIZE = 30
DEFAULT_POOL_TIMEOUT_SECONDS = 60
