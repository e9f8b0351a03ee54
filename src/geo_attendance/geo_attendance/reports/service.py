from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..attendance.schemas import DateRangeQuery

NOT_AVAILABLE = "N/A"

# (key, header) in export order
REPORT_COLUMNS = [
    ("id", "ID"),
    ("user_name", "Employee"),
    ("email", "Email"),
    ("department", "Department"),
    ("check_in_date", "Check-in Date"),
    ("check_in_time", "Check-in Time"),
    ("check_out_date", "Check-out Date"),
    ("check_out_time", "Check-out Time"),
    ("status", "Status"),
    ("total_hours", "Hours Worked"),
    ("check_in_location", "Check-in Location"),
    ("check_out_location", "Check-out Location"),
]


@dataclass(frozen=True)
class ReportData:
    period: str
    rows: list[dict]

    @property
    def total_records(self) -> int:
        return len(self.rows)

    def to_dict(self) -> dict:
        return {"period": self.period, "total_records": self.total_records, "data": self.rows}


def format_date(value: Optional[datetime]) -> str:
    return value.strftime("%d/%m/%Y") if value is not None else NOT_AVAILABLE


def format_time(value: Optional[datetime]) -> str:
    return value.strftime("%H:%M:%S") if value is not None else NOT_AVAILABLE


def format_location(lat: Optional[float], lng: Optional[float]) -> str:
    if lat is None or lng is None:
        return NOT_AVAILABLE
    return f"{float(lat):.6f}, {float(lng):.6f}"


def format_hours(total_hours: Optional[float]) -> str:
    if total_hours is None:
        return NOT_AVAILABLE
    return f"{float(total_hours):.2f} hours"


def project_row(r: AttendanceReportRow) -> dict:
    """Flatten one joined attendance row into display strings."""

    return {
        "id": r.attendance_id,
        "user_name": r.user_name,
        "email": r.email,
        "department": r.department or NOT_AVAILABLE,
        "check_in_date": format_date(r.check_in_time),
        "check_in_time": format_time(r.check_in_time),
        "check_out_date": format_date(r.check_out_time),
        "check_out_time": format_time(r.check_out_time),
        "status": r.status or NOT_AVAILABLE,
        "total_hours": format_hours(r.total_hours),
        "check_in_location": format_location(r.check_in_lat, r.check_in_lng),
        "check_out_location": format_location(r.check_out_lat, r.check_out_lng),
    }


class ReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_attendance_report(self, query: DateRangeQuery) -> ReportData:
        rows = self._attendance.get_report_rows(
            start_date=query.start_date,
            end_date=query.end_date,
            user_id=query.user_id,
        )
        period = f"{query.start_date.isoformat()} to {query.end_date.isoformat()}"
        return ReportData(period=period, rows=[project_row(r) for r in rows])
