"""Work-time admissibility rules for check-in.

Rules are evaluated in order; the first matching rule decides:

1. Extended hours (only when ``schedule.extended_hours`` is on): any day is
   admissible up to 22:00 + tolerance. This swallows the two rules below for
   almost every time of day, so production deployments keep it off.
2. Saturday: 08:00 - 12:00, widened by the tolerance on both ends.
3. Other days: the day must be a work day and the time must lie within
   start - tolerance .. end + tolerance.

All boundaries are inclusive.
"""

from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import day_of_week, minute_of_day, parse_hhmm
from ..core.constants import EXTENDED_HOURS_END, SATURDAY, SATURDAY_END, SATURDAY_START
from .model import WorkSchedule


def is_valid_work_time(moment: datetime, schedule: WorkSchedule) -> bool:
    day = day_of_week(moment)
    minutes = minute_of_day(moment)
    tolerance = int(schedule.tolerance_minutes)

    if schedule.extended_hours and minutes <= minute_of_day(EXTENDED_HOURS_END) + tolerance:
        return True

    if day == SATURDAY:
        return minute_of_day(SATURDAY_START) - tolerance <= minutes <= minute_of_day(SATURDAY_END) + tolerance

    start = minute_of_day(parse_hhmm(schedule.start_time)) - tolerance
    end = minute_of_day(parse_hhmm(schedule.end_time)) + tolerance
    return day in schedule.work_days and start <= minutes <= end
