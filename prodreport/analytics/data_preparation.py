"""
Data preparation module for report calculations.

This module converts the fetched events into a data frame and removes events that cannot be reported.
"""

from __future__ import annotations

from functools import cached_property
from typing import List

import pandas as pd

from prodreport.analytics.base import ReportContext

import logging

logger = logging.getLogger(__name__)

EVENT_COLUMNS = [
    "Event_index",
    "ID",
    "Product",
    "Machine",
    "State",
    "Quantity",
    "Time",
    "Product_label",
    "Machine_label",
    "Resolved",
]


class DataPreparation:
    """
    Handles data preparation for report calculations.
    """

    def __init__(self, context: ReportContext):
        """
        Initialize data preparation with report context.

        Args:
            context: Report context containing the events.
        """
        self.context = context

    @cached_property
    def df_events(self) -> pd.DataFrame:
        """
        Returns a data frame with one row per event in input order.

        The column Event_index holds the position of the event in the context, so that calculations
        can refer back to the immutable event objects.

        Returns:
            pd.DataFrame: Data frame with the columns Event_index, ID, Product, Machine, State, Quantity, Time, Product_label, Machine_label and Resolved.
        """
        records = [
            {
                "Event_index": index,
                "ID": event.ID,
                "Product": event.product_id,
                "Machine": event.machine_id,
                "State": event.state.value,
                "Quantity": event.quantity,
                "Time": event.occurred_at,
                "Product_label": event.product_label,
                "Machine_label": event.machine_label,
                "Resolved": event.is_resolved,
            }
            for index, event in enumerate(self.context.events)
        ]
        return pd.DataFrame(records, columns=EVENT_COLUMNS)

    @cached_property
    def df_resolved(self) -> pd.DataFrame:
        """
        Returns a data frame with only the events whose product and machine could be resolved.

        Returns:
            pd.DataFrame: Data frame with resolved events in input order.
        """
        df = self.df_events
        return df.loc[df["Resolved"].astype(bool)].copy()

    @cached_property
    def dropped_event_ids(self) -> List[str]:
        """
        Returns the IDs of the events that are skipped because their product or machine is missing.

        Returns:
            List[str]: IDs of the dropped events in input order.
        """
        df = self.df_events
        df_dropped = df.loc[~df["Event_index"].isin(self.df_resolved["Event_index"])]
        dropped_event_ids = df_dropped["ID"].tolist()
        for event_id in dropped_event_ids:
            logger.warning(f"Skipping event {event_id} with missing product or machine.")
        return dropped_event_ids
