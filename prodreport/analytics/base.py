"""
Base classes and shared utilities for report calculations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from prodreport.models.event_data import Event, StateEnum

import logging

logger = logging.getLogger(__name__)


@dataclass
class ReportContext:
    """
    Context object that holds the shared data of one report calculation.

    The events are expected to be filtered to the report window and operation already. The context
    only carries the window for naming the report and never filters by itself.

    Args:
        events (List[Event]): Events of the report in the order they were fetched.
        operation (Optional[str], optional): Operation (process) of the report. Defaults to None.
        start_date (str, optional): First day of the report window (YYYY-MM-DD). Defaults to "".
        end_date (str, optional): Last day of the report window (YYYY-MM-DD). Defaults to "".
    """

    events: List[Event] = field(default_factory=list)
    operation: Optional[str] = None
    start_date: str = ""
    end_date: str = ""

    def get_report_name(self) -> str:
        return f"{self.operation}_{self.start_date}_{self.end_date}_report"


def get_conditions_for_on_state(df: pd.DataFrame) -> pd.Series:
    """
    Returns a boolean series indicating whether a row is an ON event (start of a production run).

    Args:
        df: Data frame with the events.

    Returns:
        pd.Series: Boolean series indicating ON events.
    """
    return df["State"] == StateEnum.ON.value


def get_conditions_for_off_state(df: pd.DataFrame) -> pd.Series:
    """
    Returns a boolean series indicating whether a row is an OFF event (end of a production run).

    Args:
        df: Data frame with the events.

    Returns:
        pd.Series: Boolean series indicating OFF events.
    """
    return df["State"] == StateEnum.OFF.value
