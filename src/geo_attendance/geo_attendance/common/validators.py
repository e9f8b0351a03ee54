from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_HHMM_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
_INT_RE = re.compile(r"^-?[0-9]+$")


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_int(value: Any, field_name: str, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _INT_RE.match(value.strip()):
        number = int(value.strip())
    else:
        raise ValidationError(f"{field_name} must be an integer")

    if minimum is not None and number < minimum:
        raise ValidationError(f"{field_name} must be >= {minimum}")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field_name} must be <= {maximum}")
    return number


def require_number(value: Any, field_name: str, *, minimum: Optional[float] = None, maximum: Optional[float] = None) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number") from None
    if number != number or number in (float("inf"), float("-inf")):
        raise ValidationError(f"{field_name} must be a number")

    if minimum is not None and number < minimum:
        raise ValidationError(f"{field_name} must be between {minimum} and {maximum}")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field_name} must be between {minimum} and {maximum}")
    return number


def require_latitude(value: Any, field_name: str = "latitude") -> float:
    return require_number(value, field_name, minimum=-90, maximum=90)


def require_longitude(value: Any, field_name: str = "longitude") -> float:
    return require_number(value, field_name, minimum=-180, maximum=180)


def require_email(value: Any, field_name: str = "email") -> str:
    email = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"{field_name} must be a valid email")
    return email.lower()


def require_hhmm(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not _HHMM_RE.match(value.strip()):
        raise ValidationError(f"{field_name} must use the HH:MM format")
    return value.strip()


def require_iso_date(value: Any, field_name: str) -> date:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must use the YYYY-MM-DD format") from None


def require_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if value in (0, 1):
        return bool(value)
    raise ValidationError(f"{field_name} must be a boolean")


def require_object(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data
