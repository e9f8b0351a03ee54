from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..common.validators import (
    require_int,
    require_iso_date,
    require_latitude,
    require_longitude,
    require_non_empty,
    require_object,
)
from ..core.constants import DEFAULT_HISTORY_LIMIT, MAX_HISTORY_LIMIT
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class CheckInRequest:
    user_id: int
    user_name: str
    latitude: float
    longitude: float

    @classmethod
    def from_payload(cls, data: Any) -> "CheckInRequest":
        data = require_object(data)
        return cls(
            user_id=require_int(data.get("user_id"), "user_id", minimum=1),
            user_name=require_non_empty(data.get("user_name"), "user_name"),
            latitude=require_latitude(data.get("latitude")),
            longitude=require_longitude(data.get("longitude")),
        )


@dataclass(frozen=True)
class CheckOutRequest:
    latitude: float
    longitude: float

    @classmethod
    def from_payload(cls, data: Any) -> "CheckOutRequest":
        data = require_object(data)
        return cls(
            latitude=require_latitude(data.get("latitude")),
            longitude=require_longitude(data.get("longitude")),
        )


@dataclass(frozen=True)
class HistoryQuery:
    limit: int = DEFAULT_HISTORY_LIMIT
    offset: int = 0

    @classmethod
    def from_args(cls, args) -> "HistoryQuery":
        limit = args.get("limit")
        offset = args.get("offset")
        return cls(
            limit=require_int(limit, "limit", minimum=1, maximum=MAX_HISTORY_LIMIT) if limit is not None else DEFAULT_HISTORY_LIMIT,
            offset=require_int(offset, "offset", minimum=0) if offset is not None else 0,
        )


@dataclass(frozen=True)
class DateRangeQuery:
    start_date: date
    end_date: date
    user_id: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Any) -> "DateRangeQuery":
        """Build from query args or a JSON body; an empty user_id means all users."""

        if not data or not data.get("start_date") or not data.get("end_date"):
            raise ValidationError("start_date and end_date are required")

        start = require_iso_date(data.get("start_date"), "start_date")
        end = require_iso_date(data.get("end_date"), "end_date")
        if start > end:
            raise ValidationError("start_date must not be after end_date")

        user_id = data.get("user_id")
        return cls(
            start_date=start,
            end_date=end,
            user_id=require_int(user_id, "user_id", minimum=1) if user_id not in (None, "") else None,
        )
