"""
Reconciliation module for report calculations.

This module pairs the ON and OFF events of each group to production run intervals.
"""

from __future__ import annotations

from functools import cached_property
from typing import List

import pandas as pd

from prodreport.models.event_data import Event
from prodreport.models.report_data import ROW_KEY_FIELDS, MatchedRow
from prodreport.analytics.base import ReportContext
from prodreport.analytics.grouping import EventGroup, EventGrouper
from prodreport.util.formatting import (
    format_date,
    format_time_hhmm,
    minutes_between,
    truncate_to_minute,
)

import logging

logger = logging.getLogger(__name__)


class PairingInvariantError(RuntimeError):
    """
    Raised when pairing can advance neither the ON nor the OFF side of a group.
    """


def create_matched_row(on_event: Event, off_event: Event, quantity: int) -> MatchedRow:
    on_time = truncate_to_minute(on_event.occurred_at)
    off_time = truncate_to_minute(off_event.close_time)
    total_time = minutes_between(on_time, off_time)
    return MatchedRow(
        product_label=on_event.product_label or str(on_event.product_id),
        machine_number=on_event.machine_number,
        date=format_date(on_time),
        on_time=format_time_hhmm(on_time),
        off_time=format_time_hhmm(off_time),
        # a run closed within the same minute has no displayable duration
        total_time_minutes=total_time if total_time else "",
        quantity=quantity,
    )


def create_unmatched_row(on_event: Event, quantity: int) -> MatchedRow:
    on_time = truncate_to_minute(on_event.occurred_at)
    return MatchedRow(
        product_label=on_event.product_label or str(on_event.product_id),
        machine_number=on_event.machine_number,
        date=format_date(on_time),
        on_time=format_time_hhmm(on_time),
        quantity=quantity,
    )


def reconcile_group(group: EventGroup) -> List[MatchedRow]:
    """
    Pairs the ON and OFF events of a group first in, first out and returns the resulting rows.

    The earliest ON event with remaining quantity is paired with the earliest OFF event with
    remaining quantity for the smaller of both remaining quantities. The quantity of an event may
    therefore be split over several rows. Remaining ON quantity results in rows without OFF time.
    Remaining OFF quantity has no start and is not reported.

    The events are not modified, the remaining quantities are tracked in separate lists.

    Args:
        group (EventGroup): Group with sorted ON and OFF events.

    Raises:
        PairingInvariantError: If neither side can be advanced in a pairing step.

    Returns:
        List[MatchedRow]: Matched rows followed by the rows of unmatched ON quantity.
    """
    on_events, off_events = group.on_events, group.off_events
    on_remaining = [event.quantity for event in on_events]
    off_remaining = [event.quantity for event in off_events]
    rows: List[MatchedRow] = []

    on_index, off_index = 0, 0
    while on_index < len(on_events) and off_index < len(off_events):
        on_event, off_event = on_events[on_index], off_events[off_index]
        pair_quantity = min(on_remaining[on_index], off_remaining[off_index])
        if pair_quantity > 0:
            logger.debug(
                f"Pairing ON {on_event.ID} with OFF {off_event.ID} for quantity {pair_quantity}."
            )
            rows.append(create_matched_row(on_event, off_event, pair_quantity))
            on_remaining[on_index] -= pair_quantity
            off_remaining[off_index] -= pair_quantity

        on_exhausted = on_remaining[on_index] == 0
        off_exhausted = off_remaining[off_index] == 0
        if not on_exhausted and not off_exhausted:
            logger.error(
                f"Pairing of ON {on_event.ID} and OFF {off_event.ID} in group {group.key} did not exhaust either event."
            )
            raise PairingInvariantError(
                f"Pairing in group {group.key} cannot advance: ON {on_event.ID} has {on_remaining[on_index]} and OFF {off_event.ID} has {off_remaining[off_index]} remaining."
            )
        if on_exhausted:
            on_index += 1
        if off_exhausted:
            off_index += 1

    for index in range(on_index, len(on_events)):
        if on_remaining[index] > 0:
            logger.debug(
                f"Unmatched ON {on_events[index].ID} with remaining quantity {on_remaining[index]}."
            )
            rows.append(create_unmatched_row(on_events[index], on_remaining[index]))

    surplus_off_quantity = sum(off_remaining[off_index:])
    if surplus_off_quantity > 0:
        logger.debug(
            f"Group {group.key} has OFF quantity {surplus_off_quantity} without ON event, not reported."
        )
    return rows


class Reconciler:
    """
    Handles the reconciliation of the event groups of a report to production run rows.
    """

    def __init__(self, context: ReportContext, grouper: EventGrouper):
        """
        Initialize the reconciler.

        Args:
            context: Report context containing the events.
            grouper: Event grouper providing the groups to reconcile.
        """
        self.context = context
        self.grouper = grouper

    @cached_property
    def matched_rows(self) -> List[MatchedRow]:
        """
        Returns the rows of all groups in group order, not yet aggregated.

        Returns:
            List[MatchedRow]: Rows of all groups.
        """
        rows: List[MatchedRow] = []
        for group in self.grouper.groups.values():
            rows.extend(reconcile_group(group))
        return rows

    @cached_property
    def df_matched_rows(self) -> pd.DataFrame:
        """
        Returns a data frame with the rows of all groups.

        Returns:
            pd.DataFrame: Data frame with one column per row field.
        """
        columns = list(ROW_KEY_FIELDS) + ["quantity"]
        return pd.DataFrame(
            [row.model_dump(by_alias=False) for row in self.matched_rows],
            columns=columns,
        )
