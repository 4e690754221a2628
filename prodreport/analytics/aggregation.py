"""
Aggregation module for report calculations.

This module merges equal report rows, sums up the report total and provides the fallback rows for
reports without reconciled rows.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, List

import pandas as pd

from prodreport.models.event_data import Event
from prodreport.models.report_data import ROW_KEY_FIELDS, MatchedRow
from prodreport.analytics.base import ReportContext
from prodreport.analytics.reconciliation import Reconciler
from prodreport.util.formatting import format_date, format_time_hhmm

import logging

logger = logging.getLogger(__name__)


def _to_native(value: Any) -> Any:
    if hasattr(value, "item"):
        return value.item()
    return value


def aggregate_rows(df_rows: pd.DataFrame) -> pd.DataFrame:
    """
    Merges rows that are equal in all columns except the quantity by summing up their quantity.

    Args:
        df_rows (pd.DataFrame): Data frame with the row fields as columns.

    Returns:
        pd.DataFrame: Data frame with one row per distinct key in order of first appearance.
    """
    if df_rows.empty:
        return df_rows.copy()
    df = df_rows.groupby(by=list(ROW_KEY_FIELDS), sort=False, dropna=False)["quantity"].sum()
    return df.reset_index()


def create_fallback_row(event: Event) -> MatchedRow:
    """
    Creates a best-effort row from the available fields of a single event.

    Args:
        event (Event): Event to report.

    Returns:
        MatchedRow: Row without total time. The quantity is at least 1.
    """
    return MatchedRow(
        product_label=event.product_label or str(event.product_id) or "Unknown",
        machine_number=event.machine_number,
        date=format_date(event.occurred_at),
        on_time=format_time_hhmm(event.occurred_at),
        off_time=format_time_hhmm(event.closed_at),
        quantity=event.quantity or 1,
    )


class RowAggregator:
    """
    Handles the aggregation of reconciled rows and the report totals.
    """

    def __init__(self, context: ReportContext, reconciler: Reconciler):
        """
        Initialize the row aggregator.

        Args:
            context: Report context containing the events.
            reconciler: Reconciler providing the rows to aggregate.
        """
        self.context = context
        self.reconciler = reconciler

    @cached_property
    def df_aggregated_rows(self) -> pd.DataFrame:
        """
        Returns a data frame with the reconciled rows merged by all columns except the quantity.

        Returns:
            pd.DataFrame: Data frame with the aggregated rows.
        """
        return aggregate_rows(self.reconciler.df_matched_rows)

    @cached_property
    def aggregated_rows(self) -> List[MatchedRow]:
        """
        Returns the aggregated rows as report rows.

        Returns:
            List[MatchedRow]: Aggregated rows in order of first appearance.
        """
        return [
            MatchedRow(**{key: _to_native(value) for key, value in record.items()})
            for record in self.df_aggregated_rows.to_dict(orient="records")
        ]

    @cached_property
    def total_quantity(self) -> int:
        """
        Returns the sum of the quantity of the aggregated rows. Fallback and placeholder rows do not count.

        Returns:
            int: Total quantity of the report.
        """
        return sum(row.quantity for row in self.aggregated_rows)

    @cached_property
    def fallback_rows(self) -> List[MatchedRow]:
        return [create_fallback_row(event) for event in self.context.events]

    @property
    def uses_fallback(self) -> bool:
        return not self.aggregated_rows and bool(self.context.events)

    @cached_property
    def report_rows(self) -> List[MatchedRow]:
        """
        Returns the rows to show in the report.

        A report is never blank when events exist: without reconciled rows, one best-effort row per
        event is returned. Without any events, a single placeholder row explains the empty report.

        Returns:
            List[MatchedRow]: Rows of the report.
        """
        if self.aggregated_rows:
            return self.aggregated_rows
        if self.uses_fallback:
            logger.info(
                f"No rows could be reconciled from {len(self.context.events)} events, reporting one row per event."
            )
            return self.fallback_rows
        logger.info("No events found for the report, adding placeholder row.")
        return [MatchedRow.placeholder()]
