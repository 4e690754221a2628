"""
Tests for the grouping of events by product and machine.
"""

import logging

import pytest

from prodreport.analytics.base import ReportContext
from prodreport.analytics.data_preparation import DataPreparation
from prodreport.analytics.grouping import EventGrouper, GroupKey
from prodreport.models.event_data import StateEnum


@pytest.fixture
def create_grouper():
    def _create_grouper(events) -> EventGrouper:
        context = ReportContext(events=events, operation="Lathe")
        return EventGrouper(context, DataPreparation(context))

    return _create_grouper


def test_groups_in_order_of_first_appearance(create_grouper, mixed_events):
    groups = create_grouper(mixed_events).groups

    assert list(groups.keys()) == [GroupKey(1, 4), GroupKey(2, 4), GroupKey(1, 7)]


def test_groups_split_on_and_off_events(create_grouper, mixed_events):
    groups = create_grouper(mixed_events).groups

    group = groups[GroupKey(1, 4)]
    assert [event.quantity for event in group.on_events] == [10]
    assert [event.quantity for event in group.off_events] == [4, 6]
    assert groups[GroupKey(1, 7)].off_events == []


def test_events_sorted_by_time_with_stable_ties(create_grouper, make_event):
    events = [
        make_event(StateEnum.OFF, 1, (10, 0), ID="late"),
        make_event(StateEnum.OFF, 1, (9, 0), ID="tie_first"),
        make_event(StateEnum.OFF, 1, (9, 0), ID="tie_second"),
        make_event(StateEnum.ON, 3, (8, 0), ID="on"),
    ]

    group = create_grouper(events).groups[GroupKey(1, 4)]

    assert [event.ID for event in group.off_events] == ["tie_first", "tie_second", "late"]
    assert [event.ID for event in group.on_events] == ["on"]


def test_unresolved_events_are_dropped(create_grouper, make_event, caplog):
    events = [
        make_event(StateEnum.ON, 5, (9, 0), ID="ok"),
        make_event(StateEnum.ON, 5, (9, 5), product_label=None, ID="no_product"),
        make_event(StateEnum.OFF, 5, (9, 30), machine_label=None, ID="no_machine"),
    ]
    grouper = create_grouper(events)

    with caplog.at_level(logging.WARNING):
        groups = grouper.groups

    assert grouper.data_prep.dropped_event_ids == ["no_product", "no_machine"]
    assert [event.ID for event in groups[GroupKey(1, 4)].on_events] == ["ok"]
    assert groups[GroupKey(1, 4)].off_events == []
    assert "no_product" in caplog.text


def test_no_groups_without_resolved_events(create_grouper, make_event):
    events = [make_event(StateEnum.ON, 5, (9, 0), machine_label=None)]

    assert create_grouper(events).groups == {}
    assert create_grouper([]).groups == {}


def test_string_and_integer_ids_are_distinct_groups(create_grouper, make_event):
    events = [
        make_event(StateEnum.ON, 1, (9, 0), product_id=1),
        make_event(StateEnum.ON, 1, (9, 0), product_id="1"),
    ]

    groups = create_grouper(events).groups

    assert list(groups.keys()) == [GroupKey(1, 4), GroupKey("1", 4)]
