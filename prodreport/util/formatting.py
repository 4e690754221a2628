"""
Helpers to format the fields of report rows from event timestamps and labels.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

MACHINE_NUMBER_AFTER_HASH = re.compile(r"#(\d+)")
TRAILING_MACHINE_NUMBER = re.compile(r"(\d+)$")


def get_machine_number(machine_label: Optional[str]) -> str:
    """
    Extracts the numeric designator of a machine from its label.

    The first run of digits after a `#` is used, e.g. "Lathe #4 (left)" -> "4". Labels without a
    `#` marker fall back to the trailing digits, e.g. "Press12" -> "12".

    Args:
        machine_label (Optional[str]): Display name of the machine.

    Returns:
        str: The machine number or an empty string if the label contains none.
    """
    if not machine_label:
        return ""
    match = MACHINE_NUMBER_AFTER_HASH.search(machine_label)
    if match:
        return match.group(1)
    match = TRAILING_MACHINE_NUMBER.search(machine_label)
    if match:
        return match.group(1)
    return ""


def to_naive_local(timestamp: Optional[datetime]) -> Optional[datetime]:
    """
    Converts a timezone aware timestamp to naive local time. Naive timestamps are returned unchanged.

    Args:
        timestamp (Optional[datetime]): Timestamp to convert.

    Returns:
        Optional[datetime]: Naive timestamp in local time.
    """
    if timestamp is None or timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone().replace(tzinfo=None)


def truncate_to_minute(timestamp: datetime) -> datetime:
    return timestamp.replace(second=0, microsecond=0)


def format_time_hhmm(timestamp: Optional[datetime]) -> str:
    if timestamp is None:
        return ""
    return timestamp.strftime("%H:%M")


def format_date(timestamp: Optional[datetime]) -> str:
    if timestamp is None:
        return ""
    return timestamp.date().isoformat()


def minutes_between(start: datetime, end: datetime) -> int:
    """
    Returns the rounded number of minutes from start to end. Negative if end lies before start.
    """
    return round((end - start).total_seconds() / 60)
