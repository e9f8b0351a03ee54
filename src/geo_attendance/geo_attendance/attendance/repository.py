from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_user_and_date(self, user_id: int, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        user_id: int,
        user_name: str,
        work_date: date,
        check_in_time: datetime,
        latitude: float,
        longitude: float,
        status: str,
    ) -> int:
        """Insert a pending record and return its id.

        Raises DuplicateRecordError when the (user_id, work_date) unique index
        already holds a record.
        """

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        latitude: float,
        longitude: float,
        total_hours: float,
    ) -> bool:
        """Complete a pending record. Returns False when no pending record matched."""

        raise NotImplementedError

    def list_for_user(self, user_id: int, *, limit: int, offset: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_latest_pending(self, user_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date_range(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
