"""
Derivation of the time window of a report from its report type or an explicit date range.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple, Union

import logging

from prodreport.models.report_data import ReportTypeEnum

logger = logging.getLogger(__name__)


def _parse_date(value: Union[str, date]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(value).date()
    except ValueError as e:
        raise ValueError(f"Invalid date '{value}'. Expected ISO format YYYY-MM-DD.") from e


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def get_date_range(
    report_type: Union[ReportTypeEnum, str],
    start_date: Optional[Union[str, date]] = None,
    end_date: Optional[Union[str, date]] = None,
    now: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """
    Returns the start and end of the time window a report covers.

    An explicit date range always wins and covers the full days from start_date to end_date.
    Otherwise the window ends at the end of the current day and starts at:

    - daily: the beginning of the current day.
    - weekly: the beginning of the current week. Weeks start on Sunday.
    - monthly: the beginning of the first day of the current month.
    - any other report type: the current time.

    Args:
        report_type (Union[ReportTypeEnum, str]): Type of the report.
        start_date (Optional[Union[str, date]], optional): First day of an explicit range. Defaults to None.
        end_date (Optional[Union[str, date]], optional): Last day of an explicit range. Defaults to None.
        now (Optional[datetime], optional): Reference time. Defaults to the current time.

    Raises:
        ValueError: If a given date cannot be parsed or the end lies before the start.

    Returns:
        Tuple[datetime, datetime]: Start and end of the report window.
    """
    now = now or datetime.now()
    if start_date and end_date:
        start = start_of_day(_parse_date(start_date))
        end = end_of_day(_parse_date(end_date))
        if end < start:
            raise ValueError(
                f"End date {end_date} lies before start date {start_date}."
            )
        return start, end

    end = end_of_day(now.date())
    if report_type == ReportTypeEnum.DAILY:
        start = start_of_day(now.date())
    elif report_type == ReportTypeEnum.WEEKLY:
        days_since_sunday = (now.weekday() + 1) % 7
        start = start_of_day(now.date() - timedelta(days=days_since_sunday))
    elif report_type == ReportTypeEnum.MONTHLY:
        start = start_of_day(now.date().replace(day=1))
    else:
        logger.debug(
            f"No date range given for report type {report_type}, using the rest of the current day."
        )
        start = now
    return start, end
