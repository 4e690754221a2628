"""
Grouping module for report calculations.

This module partitions the events of a report into groups of one product on one machine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, List, NamedTuple, Union

from prodreport.models.event_data import Event
from prodreport.analytics.base import (
    ReportContext,
    get_conditions_for_off_state,
    get_conditions_for_on_state,
)
from prodreport.analytics.data_preparation import DataPreparation

import logging

logger = logging.getLogger(__name__)


class GroupKey(NamedTuple):
    product_id: Union[int, str]
    machine_id: Union[int, str]


@dataclass(frozen=True)
class EventGroup:
    """
    The events of one product on one machine, split by state.

    Args:
        key (GroupKey): Product and machine of the group.
        on_events (List[Event]): ON events sorted by occurrence time.
        off_events (List[Event]): OFF events sorted by occurrence time.
    """

    key: GroupKey
    on_events: List[Event] = field(default_factory=list)
    off_events: List[Event] = field(default_factory=list)


class EventGrouper:
    """
    Handles the grouping of events by product and machine.
    """

    def __init__(self, context: ReportContext, data_prep: DataPreparation):
        """
        Initialize the event grouper.

        Args:
            context: Report context containing the events.
            data_prep: Data preparation instance for accessing the resolved events.
        """
        self.context = context
        self.data_prep = data_prep

    @cached_property
    def groups(self) -> Dict[GroupKey, EventGroup]:
        """
        Returns the event groups keyed by product and machine.

        Groups are ordered by the first appearance of their product and machine in the events.
        Within a group, ON and OFF events are sorted by occurrence time with a stable sort, so
        that events with equal time keep their input order.

        Returns:
            Dict[GroupKey, EventGroup]: Event groups in order of first appearance.
        """
        if self.data_prep.dropped_event_ids:
            logger.warning(
                f"Skipped {len(self.data_prep.dropped_event_ids)} of {len(self.context.events)} events with missing product or machine."
            )
        df = self.data_prep.df_resolved
        groups: Dict[GroupKey, EventGroup] = {}
        if df.empty:
            return groups

        for _, df_group in df.groupby(by=["Product", "Machine"], sort=False):
            df_group = df_group.sort_values(by="Time", kind="stable")
            on_indices = df_group.loc[get_conditions_for_on_state(df_group), "Event_index"].tolist()
            off_indices = df_group.loc[get_conditions_for_off_state(df_group), "Event_index"].tolist()
            first_event = self.context.events[df_group["Event_index"].min()]
            key = GroupKey(first_event.product_id, first_event.machine_id)
            groups[key] = EventGroup(
                key=key,
                on_events=[self.context.events[index] for index in on_indices],
                off_events=[self.context.events[index] for index in off_indices],
            )
            logger.debug(
                f"Group {key} has {len(on_indices)} ON and {len(off_indices)} OFF events."
            )
        return groups
