from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

from ..core.constants import DEFAULT_TOLERANCE_MINUTES, DEFAULT_WORK_DAYS, DEFAULT_WORK_END_TIME, DEFAULT_WORK_START_TIME


@dataclass(frozen=True)
class WorkSchedule:
    """Work hours built per request from the settings table.

    ``start_time``/``end_time`` are "HH:MM" strings as stored in settings;
    ``work_days`` uses Sunday=0 .. Saturday=6.
    """

    start_time: str = DEFAULT_WORK_START_TIME
    end_time: str = DEFAULT_WORK_END_TIME
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES
    work_days: FrozenSet[int] = field(default=DEFAULT_WORK_DAYS)
    extended_hours: bool = False

    @property
    def window_label(self) -> str:
        return f"{self.start_time} - {self.end_time}"

    def to_dict(self) -> dict:
        return {
            "start_time": self.start_time,
            "end_time": self.end_time,
            "tolerance_minutes": self.tolerance_minutes,
            "work_days": sorted(self.work_days),
            "extended_hours": self.extended_hours,
        }
