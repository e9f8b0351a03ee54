from __future__ import annotations

import logging
import re
from typing import Any, Optional, Sequence

from ..common.validators import require_hhmm, require_int, require_latitude, require_longitude, require_number
from ..core.constants import (
    DEFAULT_GEOFENCE_RADIUS,
    DEFAULT_OFFICE_ADDRESS,
    DEFAULT_OFFICE_LATITUDE,
    DEFAULT_OFFICE_LONGITUDE,
    DEFAULT_TOLERANCE_MINUTES,
    DEFAULT_WORK_DAYS,
    DEFAULT_WORK_END_TIME,
    DEFAULT_WORK_START_TIME,
    KEY_GEOFENCE_RADIUS,
    KEY_LATE_TOLERANCE,
    KEY_OFFICE_LATITUDE,
    KEY_OFFICE_LONGITUDE,
    KEY_WORK_END_TIME,
    KEY_WORK_START_TIME,
    MAX_GEOFENCE_RADIUS,
    MAX_TOLERANCE_MINUTES,
    MIN_GEOFENCE_RADIUS,
)
from ..core.exceptions import ValidationError
from ..schedules.model import WorkSchedule
from .model import OfficeLocation
from .repository import SettingsRepository

logger = logging.getLogger(__name__)

_STORED_TIME_RE = re.compile(r"^((?:[01]\d|2[0-3]):[0-5]\d)(?::[0-5]\d)?$")


class SettingsService:
    """Typed access to the key-value settings table.

    Every read goes to the store (no cache); a missing key or an unparsable
    value yields the documented default.
    """

    def __init__(
        self,
        settings: SettingsRepository,
        *,
        extended_hours: bool = False,
        office_address: str = DEFAULT_OFFICE_ADDRESS,
    ):
        self._settings = settings
        self._extended_hours = bool(extended_hours)
        self._office_address = office_address

    # -- raw accessors -------------------------------------------------------

    def get(self, key: str) -> Optional[str]:
        return self._settings.get(key)

    def set(self, key: str, value: Any) -> None:
        self._settings.set(key, str(value))

    def get_str(self, key: str, default: str) -> str:
        value = self._settings.get(key)
        return value if value is not None else default

    def get_int(self, key: str, default: int) -> int:
        value = self._settings.get(key)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError:
            logger.warning("Setting %s=%r is not an integer, using default %s", key, value, default)
            return default

    def get_float(self, key: str, default: float) -> float:
        value = self._settings.get(key)
        if value is None:
            return default
        try:
            return float(value.strip())
        except ValueError:
            logger.warning("Setting %s=%r is not a number, using default %s", key, value, default)
            return default

    def get_hhmm(self, key: str, default: str) -> str:
        """Stored time as HH:MM; a trailing :SS (TIME column format) is dropped."""
        value = self._settings.get(key)
        if value is None:
            return default
        match = _STORED_TIME_RE.match(value.strip())
        if not match:
            logger.warning("Setting %s=%r is not a HH:MM time, using default %s", key, value, default)
            return default
        return match.group(1)

    def list_all(self) -> Sequence:
        return self._settings.list_all()

    # -- work schedule -------------------------------------------------------

    def get_work_schedule(self) -> WorkSchedule:
        return WorkSchedule(
            start_time=self.get_hhmm(KEY_WORK_START_TIME, DEFAULT_WORK_START_TIME),
            end_time=self.get_hhmm(KEY_WORK_END_TIME, DEFAULT_WORK_END_TIME),
            tolerance_minutes=self.get_int(KEY_LATE_TOLERANCE, DEFAULT_TOLERANCE_MINUTES),
            work_days=DEFAULT_WORK_DAYS,
            extended_hours=self._extended_hours,
        )

    def update_work_schedule(self, *, start_time: Any, end_time: Any, tolerance_minutes: Any, work_days: Any) -> dict:
        """Persist start/end/tolerance. ``work_days`` is validated and echoed back
        but the working-day set itself is fixed (Monday..Saturday)."""

        if start_time is None or end_time is None or tolerance_minutes is None or work_days is None:
            raise ValidationError("start_time, end_time, tolerance_minutes and work_days are required")

        start_time = require_hhmm(start_time, "start_time")
        end_time = require_hhmm(end_time, "end_time")
        if start_time >= end_time:
            raise ValidationError("start_time must be earlier than end_time")
        tolerance = require_int(tolerance_minutes, "tolerance_minutes", minimum=0, maximum=MAX_TOLERANCE_MINUTES)

        if not isinstance(work_days, list) or not work_days:
            raise ValidationError("work_days must be a non-empty list")
        days = sorted({require_int(d, "work_days", minimum=0, maximum=6) for d in work_days})

        self.set(KEY_WORK_START_TIME, start_time)
        self.set(KEY_WORK_END_TIME, end_time)
        self.set(KEY_LATE_TOLERANCE, tolerance)
        logger.info("Work schedule updated: %s - %s (tolerance %s min)", start_time, end_time, tolerance)

        return {
            "start_time": start_time,
            "end_time": end_time,
            "tolerance_minutes": tolerance,
            "work_days": days,
        }

    # -- office location -----------------------------------------------------

    def get_office_location(self) -> OfficeLocation:
        return OfficeLocation(
            latitude=self.get_float(KEY_OFFICE_LATITUDE, DEFAULT_OFFICE_LATITUDE),
            longitude=self.get_float(KEY_OFFICE_LONGITUDE, DEFAULT_OFFICE_LONGITUDE),
            radius=self.get_float(KEY_GEOFENCE_RADIUS, DEFAULT_GEOFENCE_RADIUS),
            address=self._office_address,
        )

    def update_office_location(self, *, latitude: Any, longitude: Any, radius: Any) -> dict:
        latitude = require_latitude(latitude)
        longitude = require_longitude(longitude)
        radius = require_number(radius, "radius", minimum=MIN_GEOFENCE_RADIUS, maximum=MAX_GEOFENCE_RADIUS)

        self.set(KEY_OFFICE_LATITUDE, latitude)
        self.set(KEY_OFFICE_LONGITUDE, longitude)
        self.set(KEY_GEOFENCE_RADIUS, radius)
        logger.info("Office location updated: (%s, %s) radius=%sm", latitude, longitude, radius)

        return {"latitude": latitude, "longitude": longitude, "radius": radius}
