from datetime import datetime, timedelta, timezone

import pytest

from prodreport.util import formatting


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Lathe #4", "4"),
        ("Lathe #12 (left) 3", "12"),
        ("#7", "7"),
        ("Press12", "12"),
        ("Press 3", "3"),
        ("Press #A 5", "5"),
        ("Press", ""),
        ("12 Press", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_get_machine_number(label, expected):
    assert formatting.get_machine_number(label) == expected


def test_truncate_to_minute():
    timestamp = datetime(2024, 3, 4, 9, 15, 59, 999999)
    assert formatting.truncate_to_minute(timestamp) == datetime(2024, 3, 4, 9, 15)


def test_format_time_and_date():
    timestamp = datetime(2024, 3, 4, 7, 5, 30)
    assert formatting.format_time_hhmm(timestamp) == "07:05"
    assert formatting.format_date(timestamp) == "2024-03-04"
    assert formatting.format_time_hhmm(None) == ""
    assert formatting.format_date(None) == ""


def test_minutes_between():
    start = datetime(2024, 3, 4, 23, 50)
    assert formatting.minutes_between(start, datetime(2024, 3, 5, 0, 20)) == 30
    assert formatting.minutes_between(start, datetime(2024, 3, 4, 23, 40)) == -10


def test_to_naive_local():
    naive = datetime(2024, 3, 4, 9, 0)
    assert formatting.to_naive_local(naive) is naive
    assert formatting.to_naive_local(None) is None

    aware = datetime(2024, 3, 4, 9, 0, tzinfo=timezone(timedelta(hours=2)))
    converted = formatting.to_naive_local(aware)
    assert converted.tzinfo is None
    assert converted == aware.astimezone().replace(tzinfo=None)
