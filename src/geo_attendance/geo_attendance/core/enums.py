from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Status stored on an attendance record at check-in."""

    ON_TIME = "on-time"


class ReportFormat(str, Enum):
    EXCEL = "excel"
    JSON = "json"
