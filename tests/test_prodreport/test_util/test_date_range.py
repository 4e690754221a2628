from datetime import date, datetime, time

import pytest

from prodreport.models.report_data import ReportTypeEnum
from prodreport.util.date_range import get_date_range

# a Wednesday
NOW = datetime(2024, 3, 6, 14, 30)
END_OF_TODAY = datetime.combine(date(2024, 3, 6), time.max)


def test_daily_range():
    assert get_date_range(ReportTypeEnum.DAILY, now=NOW) == (
        datetime(2024, 3, 6),
        END_OF_TODAY,
    )


def test_weekly_range_starts_on_sunday():
    assert get_date_range("weekly", now=NOW) == (datetime(2024, 3, 3), END_OF_TODAY)


def test_weekly_range_on_sunday_starts_today():
    sunday = datetime(2024, 3, 10, 8, 0)
    start, _ = get_date_range(ReportTypeEnum.WEEKLY, now=sunday)
    assert start == datetime(2024, 3, 10)


def test_monthly_range():
    assert get_date_range(ReportTypeEnum.MONTHLY, now=NOW) == (
        datetime(2024, 3, 1),
        END_OF_TODAY,
    )


def test_explicit_range_covers_full_days():
    start, end = get_date_range(
        ReportTypeEnum.PROCESS_WISE, "2024-02-01", "2024-02-03", now=NOW
    )
    assert start == datetime(2024, 2, 1)
    assert end == datetime(2024, 2, 3, 23, 59, 59, 999999)


def test_explicit_range_wins_over_report_type():
    start, end = get_date_range(ReportTypeEnum.MONTHLY, date(2024, 1, 5), date(2024, 1, 5), now=NOW)
    assert (start.date(), end.date()) == (date(2024, 1, 5), date(2024, 1, 5))


def test_process_wise_without_dates_starts_now():
    assert get_date_range(ReportTypeEnum.PROCESS_WISE, now=NOW) == (NOW, END_OF_TODAY)


def test_only_one_date_is_ignored():
    assert get_date_range(ReportTypeEnum.DAILY, "2024-01-01", None, now=NOW)[0] == datetime(2024, 3, 6)


def test_invalid_date_raises_value_error():
    with pytest.raises(ValueError):
        get_date_range(ReportTypeEnum.DAILY, "04.03.2024", "2024-03-05", now=NOW)


def test_end_before_start_raises_value_error():
    with pytest.raises(ValueError):
        get_date_range(ReportTypeEnum.DAILY, "2024-03-05", "2024-03-04", now=NOW)
