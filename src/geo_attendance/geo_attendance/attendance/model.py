from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record (one per user per calendar day)."""

    attendance_id: int
    user_id: int
    user_name: str
    work_date: date
    check_in_time: datetime
    check_in_lat: Optional[float]
    check_in_lng: Optional[float]
    check_out_time: Optional[datetime] = None
    check_out_lat: Optional[float] = None
    check_out_lng: Optional[float] = None
    status: str = AttendanceStatus.ON_TIME.value
    total_hours: Optional[float] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.check_out_time is None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "user_id": self.user_id,
            "user_name": self.user_name,
            "check_in_time": self.check_in_time.isoformat(),
            "check_out_time": self.check_out_time.isoformat() if self.check_out_time else None,
            "check_in_lat": self.check_in_lat,
            "check_in_lng": self.check_in_lng,
            "check_out_lat": self.check_out_lat,
            "check_out_lng": self.check_out_lng,
            "status": self.status,
            "total_hours": self.total_hours,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports/exports (attendance joined with its user)."""

    attendance_id: int
    user_id: int
    user_name: str
    email: str
    department: Optional[str]
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    check_in_lat: Optional[float]
    check_in_lng: Optional[float]
    check_out_lat: Optional[float]
    check_out_lng: Optional[float]
    status: Optional[str]
    total_hours: Optional[float]
