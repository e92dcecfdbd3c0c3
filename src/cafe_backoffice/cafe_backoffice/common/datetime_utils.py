"""Clock-time and calendar-date normalization.

Every date key in the system is a local calendar day rendered as ``YYYY-MM-DD``.
Keys are built from ``datetime.date`` values only, never from UTC timestamps, so
month and year boundaries cannot shift a record onto the neighbouring day.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union

import pandas as pd

DateLike = Union[str, date]

_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)?")
_AMPM_SEARCH_RE = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)")
_NUMERIC_DATE_RE = re.compile(r"(\d{1,4})/(\d{1,2})/(\d{1,4})")
_LEADING_INT_RE = re.compile(r"\d+")
_YEAR_RE = re.compile(r"\b\d{4}\b")
_DATE_PART_RE = re.compile(r"[A-Za-z]+|\d+")

MONTHS = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}


def now_local() -> datetime:
    """Current local time.

    Services take a ``clock`` callable defaulting to this one.
    """
    return datetime.now()


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value: Optional[str]) -> Optional[int]:
    """Parse ``H:MM``/``HH:MM`` with an optional AM/PM suffix into minutes since midnight.

    Returns None for anything that is not a clock time. Callers treat None as
    "unknown", never as midnight.
    """
    if not value:
        return None
    match = _CLOCK_RE.fullmatch(value.strip().upper())
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = match.group(3)
    if period == "PM" and hours < 12:
        hours += 12
    if period == "AM" and hours == 12:
        hours = 0
    return hours * 60 + minutes


def to_24_hour(value: Optional[str]) -> str:
    """Normalize a schedule cell such as ``09:30 PM`` to ``21:30``.

    ``OFF`` and empty cells become an empty string; other values pass through.
    """
    if not value or value.strip().upper() == "OFF":
        return ""
    match = _AMPM_SEARCH_RE.search(value.strip().upper())
    if not match:
        return value
    hours = int(match.group(1))
    if match.group(3) == "PM" and hours < 12:
        hours += 12
    if match.group(3) == "AM" and hours == 12:
        hours = 0
    return f"{hours:02d}:{match.group(2)}"


def format_minutes(minutes: int) -> str:
    minutes = max(int(minutes), 0)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def normalize_year(raw_year: int) -> int:
    if raw_year < 100:
        return raw_year + (1900 if raw_year >= 70 else 2000)
    return raw_year


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _leading_int(token: str) -> Optional[int]:
    match = _LEADING_INT_RE.match(token)
    return int(match.group(0)) if match else None


def _parse_direct(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def _parse_numeric(cleaned: str) -> Optional[date]:
    match = _NUMERIC_DATE_RE.fullmatch(cleaned)
    if not match:
        return None

    first, second, third = match.groups()
    if len(first) == 4:
        month, day = int(second), int(third)
        if 1 <= month <= 12 and 1 <= day <= 31:
            return _safe_date(normalize_year(int(first)), month, day)
        return None

    month, day = int(first), int(second)
    year = normalize_year(int(third))
    # 16/10/2025 is day-first: swap when the leading part cannot be a month.
    if month > 12 and day <= 12:
        month, day = day, month
    if 1 <= month <= 12 and 1 <= day <= 31:
        return _safe_date(year, month, day)
    return None


def _parse_words(cleaned: str) -> Optional[date]:
    tokens = [t for t in re.split(r"[ /]", cleaned) if t]
    if len(tokens) < 3:
        return None

    first, second, third = tokens[0].lower(), tokens[1].lower(), tokens[2]
    year_raw = _leading_int(third)
    if year_raw is None:
        return None
    year = normalize_year(year_raw)

    day = _leading_int(first)
    if day is not None and second in MONTHS:
        parsed = _safe_date(year, MONTHS[second], day)
        if parsed:
            return parsed

    day = _leading_int(second)
    if first in MONTHS and day is not None:
        return _safe_date(year, MONTHS[first], day)
    return None


def _parse_timestamp(value: str) -> Optional[date]:
    """Cells carrying a time or weekday, e.g. ``10/16/2025 14:30`` or ``Thu Oct 16 2025``.

    Only tried with an explicit four-digit year: pandas would otherwise fill in
    the current year and apply its own two-digit-year window.
    """
    if not _YEAR_RE.search(value) or len(_DATE_PART_RE.findall(value)) < 3:
        return None
    try:
        parsed = pd.to_datetime(value, dayfirst=False)
    except (ValueError, OverflowError):
        return None
    if pd.isna(parsed):
        return None
    return parsed.date()


def parse_loose_date(value: Optional[str]) -> Optional[date]:
    """Parse the date layouts found in POS and timeclock exports.

    Tries ISO first, then ``n/n/n`` numeric forms (year-first when the leading
    part has four digits, otherwise month-first with a day/month swap when the
    first part exceeds 12), then ``16 Oct 2025`` / ``Oct 16 2025`` word forms,
    then pandas for cells carrying a time or weekday. Two-digit years map onto
    1970-2069. Returns None when nothing matches.
    """
    if not value:
        return None
    trimmed = value.strip()
    if not trimmed:
        return None

    parsed = _parse_direct(trimmed)
    if parsed:
        return parsed

    cleaned = trimmed.replace(",", " ").replace(".", "/").replace("-", "/")
    cleaned = re.sub(r"\s+", " ", cleaned).strip()

    return _parse_numeric(cleaned) or _parse_words(cleaned) or _parse_timestamp(trimmed)


def date_key(value: Union[date, datetime]) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def to_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def normalize_date_key(value: Optional[str], *, default_year: Optional[int] = None) -> Optional[str]:
    """Loose-parse a date cell into a key, retrying with a year appended for ``16 Oct`` cells."""
    if not value or not value.strip():
        return None
    parsed = parse_loose_date(value)
    if parsed is None:
        year = default_year or now_local().year
        parsed = parse_loose_date(f"{value.strip()} {year}")
    return date_key(parsed) if parsed else None


def today_key(now: Optional[datetime] = None) -> str:
    return date_key((now or now_local()).date())


def iter_date_keys(start: DateLike, end: DateLike) -> Iterator[str]:
    """Yield every date key from start to end, both inclusive."""
    cursor = to_date(start)
    last = to_date(end)
    while cursor <= last:
        yield date_key(cursor)
        cursor += timedelta(days=1)
