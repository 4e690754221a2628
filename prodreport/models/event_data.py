"""
The `event_data` module contains the `prodreport.models` classes for the raw records a report is generated from.

- `Event`: A machine state change (ON / OFF) of a product on a machine, carrying a quantity.
- `DispatchRecord`: An already aggregated record of a dispatched product.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

from prodreport.util.formatting import get_machine_number, to_naive_local


class StateEnum(str, Enum):
    """
    Enum that represents the state a machine switches to with an event.

    - ON: Start of a production run.
    - OFF: End of a production run.
    """

    ON = "ON"
    OFF = "OFF"


class DispatchStatusEnum(str, Enum):
    """
    Enum that represents the dispatch status of a product update.
    """

    PENDING = "Pending"
    DISPATCHED = "Dispatched"


class Event(BaseModel):
    """
    Class that represents a recorded state change of a machine for a product.

    The labels are resolved from the related product and machine. A label of None signals that
    the relation could not be resolved and the event is skipped during report generation.

    Args:
        ID (str): ID of the event.
        product_id (Union[int, str]): ID of the product the event belongs to.
        machine_id (Union[int, str]): ID of the machine the event belongs to.
        state (StateEnum): State the machine switched to.
        quantity (int): Non-negative quantity of the event.
        occurred_at (datetime): Time the state change was recorded. Aware times are converted to naive local time.
        closed_at (Optional[datetime], optional): Actual close time of an OFF event. Defaults to None.
        product_label (Optional[str], optional): Display name of the product. Defaults to None.
        machine_label (Optional[str], optional): Display name of the machine. Defaults to None.
    """

    ID: str = Field(alias="id")
    product_id: Union[int, str] = Field(alias="productId")
    machine_id: Union[int, str] = Field(alias="machineId")
    state: StateEnum
    quantity: NonNegativeInt
    occurred_at: datetime = Field(alias="occurredAt")
    closed_at: Optional[datetime] = Field(default=None, alias="closedAt")
    product_label: Optional[str] = Field(default=None, alias="productLabel")
    machine_label: Optional[str] = Field(default=None, alias="machineLabel")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        serialize_by_alias=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "job_1",
                    "productId": 1,
                    "machineId": 4,
                    "state": "ON",
                    "quantity": 10,
                    "occurredAt": "2024-03-04T09:00:00",
                    "closedAt": None,
                    "productLabel": "Flange A",
                    "machineLabel": "Lathe #4",
                },
                {
                    "id": "job_2",
                    "productId": 1,
                    "machineId": 4,
                    "state": "OFF",
                    "quantity": 10,
                    "occurredAt": "2024-03-04T09:30:00",
                    "closedAt": "2024-03-04T09:31:12",
                    "productLabel": "Flange A",
                    "machineLabel": "Lathe #4",
                },
            ]
        },
    )

    @field_validator("occurred_at", "closed_at")
    def convert_to_local_time(cls, v):
        # report windows and row times are naive local times
        return to_naive_local(v)

    @property
    def is_resolved(self) -> bool:
        return self.product_label is not None and self.machine_label is not None

    @property
    def close_time(self) -> datetime:
        """
        Returns the time an OFF event actually closed the run, falling back to the recording time.

        Returns:
            datetime: Close time of the event.
        """
        return self.closed_at or self.occurred_at

    @property
    def machine_number(self) -> str:
        return get_machine_number(self.machine_label)


class DispatchRecord(BaseModel):
    """
    Class that represents a dispatched product. Dispatch records are reported as they are, without any pairing.

    Args:
        ID (str): ID of the record.
        product (str): Name of the dispatched product.
        quantity (int): Dispatched quantity.
        created_at (datetime): Time of the dispatch.
        dispatch_status (DispatchStatusEnum, optional): Status of the dispatch. Defaults to Pending.
    """

    ID: str = Field(alias="id")
    product: str
    quantity: NonNegativeInt
    created_at: datetime = Field(alias="createdAt")
    dispatch_status: DispatchStatusEnum = Field(
        default=DispatchStatusEnum.PENDING, alias="dispatchStatus"
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        serialize_by_alias=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "dispatch_1",
                    "product": "Flange A",
                    "quantity": 40,
                    "createdAt": "2024-03-04T15:12:00",
                    "dispatchStatus": "Pending",
                }
            ]
        },
    )

    @field_validator("created_at")
    def convert_to_local_time(cls, v):
        return to_naive_local(v)
