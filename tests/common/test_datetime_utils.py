from datetime import date

import pytest

from src.cafe_backoffice.cafe_backoffice.common.datetime_utils import (
    date_key,
    format_minutes,
    iter_date_keys,
    normalize_date_key,
    parse_clock_time,
    parse_loose_date,
    to_24_hour,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("9:00", 540),
        ("17:30", 1050),
        ("12:00 AM", 0),
        ("12:30 PM", 750),
        ("1:05pm", 785),
        ("09:00PM", 1260),
        (" 08:15 am ", 495),
    ],
)
def test_parse_clock_time(value, expected):
    assert parse_clock_time(value) == expected


@pytest.mark.parametrize("value", ["", None, "9", "abc", "9:5", "OFF"])
def test_parse_clock_time_unknown_is_none(value):
    assert parse_clock_time(value) is None


@pytest.mark.parametrize(
    "value",
    ["16 Oct 25", "10/16/2025", "16/10/2025", "2025-10-16", "Oct 16, 2025", "2025.10.16", "16-Oct-2025", "October 16 2025"],
)
def test_parse_loose_date_layouts(value):
    assert parse_loose_date(value) == date(2025, 10, 16)


def test_parse_loose_date_two_digit_years():
    assert parse_loose_date("1/2/69") == date(2069, 1, 2)
    assert parse_loose_date("1/2/70") == date(1970, 1, 2)


@pytest.mark.parametrize("value", ["", "   ", "garbage", "31/02/2025", "13/13/2025"])
def test_parse_loose_date_rejects(value):
    assert parse_loose_date(value) is None


def test_normalize_date_key_appends_year():
    assert normalize_date_key("16 Oct", default_year=2025) == "2025-10-16"
    assert normalize_date_key("") is None


def test_iter_date_keys_is_inclusive_across_boundaries():
    assert list(iter_date_keys("2024-12-30", "2025-01-02")) == [
        "2024-12-30",
        "2024-12-31",
        "2025-01-01",
        "2025-01-02",
    ]
    assert list(iter_date_keys("2024-02-28", "2024-03-01")) == ["2024-02-28", "2024-02-29", "2024-03-01"]
    assert list(iter_date_keys("2025-01-02", "2025-01-01")) == []


def test_date_keys_stable_over_dst_changes():
    # US DST transitions; keys come from calendar dates, so no day is skipped or doubled.
    keys = list(iter_date_keys("2025-03-08", "2025-03-10")) + list(iter_date_keys("2025-11-01", "2025-11-03"))
    assert keys == ["2025-03-08", "2025-03-09", "2025-03-10", "2025-11-01", "2025-11-02", "2025-11-03"]
    assert date_key(date(2025, 3, 9)) == "2025-03-09"


def test_to_24_hour():
    assert to_24_hour("09:30 PM") == "21:30"
    assert to_24_hour("12:00 AM") == "00:00"
    assert to_24_hour("OFF") == ""
    assert to_24_hour("08:00") == "08:00"


def test_format_minutes():
    assert format_minutes(405) == "06:45"
    assert format_minutes(-5) == "00:00"


@pytest.mark.parametrize(
    "value",
    ["10/16/2025 14:30", "Thu Oct 16 2025", "2025/10/16 14:30:00", "Oct 16, 2025 2:30 PM", "2025-10-16 08:00:00"],
)
def test_parse_loose_date_timestamped_cells(value):
    assert parse_loose_date(value) == date(2025, 10, 16)


def test_timestamped_cells_without_year_use_the_default_year():
    assert parse_loose_date("Thu Oct 16") is None
    assert normalize_date_key("Thu 16 Oct", default_year=2025) == "2025-10-16"
