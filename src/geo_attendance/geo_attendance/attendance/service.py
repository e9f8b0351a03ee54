from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthorizationError, ConflictError, DuplicateRecordError, NotFoundError, PolicyError
from ..geofence.policy import distance_meters, is_within_geofence
from ..schedules.policy import is_valid_work_time
from ..settings.service import SettingsService
from ..users.repository import UserRepository
from ..users.security import TokenClaims
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .schemas import CheckInRequest, CheckOutRequest, DateRangeQuery, HistoryQuery

logger = logging.getLogger(__name__)

ALREADY_CHECKED_IN = "You already checked in today"
ALREADY_COMPLETED = "You already completed your workday today"
ALREADY_CHECKED_OUT = "Check-out already registered for this record"


def elapsed_hours(check_in_time: datetime, check_out_time: datetime) -> float:
    """Whole elapsed minutes divided by 60, fractional hours kept."""
    minutes = int((check_out_time - check_in_time).total_seconds() // 60)
    return minutes / 60


class AttendanceService:
    """Check-in / check-out state transitions for one record per user per day.

    no entry -> checked in (pending) -> checked out (completed)
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        settings: SettingsService,
        *,
        enforce_geofence: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._users = users
        self._settings = settings
        self._enforce_geofence = bool(enforce_geofence)
        self._clock = clock or now_local

    def _ensure_no_entry_today(self, user_id: int, today: date) -> None:
        existing = self._attendance.list_for_user_and_date(user_id, today)
        if any(r.is_pending for r in existing):
            raise ConflictError(ALREADY_CHECKED_IN)
        if any(not r.is_pending for r in existing):
            raise ConflictError(ALREADY_COMPLETED)

    def check_in(self, request: CheckInRequest, *, actor: Optional[TokenClaims] = None) -> AttendanceRecord:
        if actor is not None and not actor.is_admin and actor.user_id != request.user_id:
            raise AuthorizationError("You can only check in for yourself")

        user = self._users.get_by_id(request.user_id)
        if not user or not user.is_active:
            raise NotFoundError("User not found")

        now = self._clock()
        today = now.date()
        self._ensure_no_entry_today(request.user_id, today)

        schedule = self._settings.get_work_schedule()
        if not is_valid_work_time(now, schedule):
            logger.info("Check-in rejected for user %s at %s: outside work hours", request.user_id, now)
            raise PolicyError(f"Outside permitted work hours ({schedule.window_label})")

        if self._enforce_geofence:
            office = self._settings.get_office_location()
            if not is_within_geofence(office, request.latitude, request.longitude):
                distance = distance_meters(office.latitude, office.longitude, request.latitude, request.longitude)
                logger.info("Check-in rejected for user %s: %.0fm from office", request.user_id, distance)
                raise PolicyError(f"You are {distance:.0f}m from the office (allowed radius {office.radius:.0f}m)")

        try:
            attendance_id = self._attendance.create_checkin(
                user_id=request.user_id,
                user_name=request.user_name,
                work_date=today,
                check_in_time=now,
                latitude=request.latitude,
                longitude=request.longitude,
                status=AttendanceStatus.ON_TIME.value,
            )
        except DuplicateRecordError:
            # Lost a race with a concurrent check-in for the same day.
            self._ensure_no_entry_today(request.user_id, today)
            raise ConflictError(ALREADY_CHECKED_IN) from None

        logger.info("User %s checked in (attendance %s)", request.user_id, attendance_id)
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    def check_out(
        self,
        attendance_id: int,
        request: CheckOutRequest,
        *,
        actor: Optional[TokenClaims] = None,
    ) -> int:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        if actor is not None and not actor.is_admin and actor.user_id != record.user_id:
            raise AuthorizationError("You can only check out your own records")
        if not record.is_pending:
            raise ConflictError(ALREADY_CHECKED_OUT)

        now = self._clock()
        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=now,
            latitude=request.latitude,
            longitude=request.longitude,
            total_hours=elapsed_hours(record.check_in_time, now),
        )
        if not updated:
            raise ConflictError(ALREADY_CHECKED_OUT)

        logger.info("User %s checked out (attendance %s)", record.user_id, record.attendance_id)
        return record.attendance_id

    def history(self, user_id: int, query: HistoryQuery) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_user(user_id, limit=query.limit, offset=query.offset)

    def latest_pending(self, user_id: int) -> Optional[AttendanceRecord]:
        return self._attendance.get_latest_pending(user_id)

    def today(self) -> Sequence[AttendanceRecord]:
        today = self._clock().date()
        return self._attendance.list_for_date_range(start_date=today, end_date=today)

    def date_range(self, query: DateRangeQuery) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_date_range(
            start_date=query.start_date,
            end_date=query.end_date,
            user_id=query.user_id,
        )
