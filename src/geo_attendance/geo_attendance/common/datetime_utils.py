from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    hours, minutes = value.split(":")
    return time(hour=int(hours), minute=int(minutes))


def minute_of_day(value) -> int:
    return value.hour * 60 + value.minute


def day_of_week(moment: datetime) -> int:
    """Sunday=0 .. Saturday=6 (datetime.weekday() is Monday=0)."""
    return (moment.weekday() + 1) % 7


def now_local(tz_name: Optional[str] = None) -> datetime:
    """Current local wall-clock time, naive.

    Attendance timestamps are stored as naive local times so work_date
    matches the calendar day the employee sees.
    """
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)
    return datetime.now()
