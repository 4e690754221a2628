import itertools
from datetime import datetime
from typing import List

import pytest
import prodreport
from prodreport.models.event_data import Event, StateEnum


@pytest.fixture(autouse=True, scope="function")
def cleanup_test_state():
    """Fixture to reset logging to the default level (WARNING) before and after each test."""
    prodreport.set_logging("WARNING")
    yield
    prodreport.set_logging("WARNING")


@pytest.fixture
def make_event():
    """
    Returns a factory for events of product 1 on machine "Lathe #4" on 2024-03-04.

    Times are given as (hour, minute) tuples or datetimes.
    """
    counter = itertools.count(1)

    def _make_event(
        state: StateEnum,
        quantity: int,
        at,
        closed_at=None,
        product_id=1,
        machine_id=4,
        product_label="Flange A",
        machine_label="Lathe #4",
        ID=None,
    ) -> Event:
        if isinstance(at, tuple):
            at = datetime(2024, 3, 4, *at)
        if isinstance(closed_at, tuple):
            closed_at = datetime(2024, 3, 4, *closed_at)
        return Event(
            ID=ID or f"job_{next(counter)}",
            product_id=product_id,
            machine_id=machine_id,
            state=state,
            quantity=quantity,
            occurred_at=at,
            closed_at=closed_at,
            product_label=product_label,
            machine_label=machine_label,
        )

    return _make_event


@pytest.fixture
def mixed_events(make_event) -> List[Event]:
    """
    Events of two products on two machines of the same operation, in fetch order.
    """
    return [
        make_event(StateEnum.ON, 10, (9, 0)),
        make_event(StateEnum.ON, 4, (9, 5), product_id=2, product_label="Flange B"),
        make_event(StateEnum.OFF, 4, (9, 15)),
        make_event(StateEnum.ON, 3, (9, 20), machine_id=7, machine_label="Lathe #7"),
        make_event(StateEnum.OFF, 6, (9, 45)),
        make_event(StateEnum.OFF, 4, (9, 50), product_id=2, product_label="Flange B"),
    ]
