from __future__ import annotations

import math
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import date_key, parse_clock_time, parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_date_key(value: Optional[str], field_name: str) -> str:
    """Validate a ``YYYY-MM-DD`` key and return it in canonical form."""
    value = require_non_empty(value or "", field_name)
    try:
        return date_key(parse_iso_date(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None


def require_date_range(start: Optional[str], end: Optional[str]) -> tuple[date, date]:
    start_d = parse_iso_date(require_date_key(start, "start"))
    end_d = parse_iso_date(require_date_key(end, "end"))
    if start_d > end_d:
        raise ValidationError("start must not be after end")
    return start_d, end_d


def require_clock_time(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value or "", field_name)
    if parse_clock_time(value) is None:
        raise ValidationError(f"{field_name} is not a valid time")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_number(value, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    return number


def require_int(value, field_name: str) -> int:
    number = require_number(value, field_name)
    if not number.is_integer():
        raise ValidationError(f"{field_name} must be a whole number")
    return int(number)
