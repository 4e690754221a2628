"""
The `report_data` module contains the `prodreport.models` classes that represent generated reports.

- `MatchedRow`: A reconciled (or leftover) production run interval of an operation-wise report.
- `OperationReport`: The rows and totals of an operation-wise report.
- `DispatchReport`: The records and totals of a dispatched products report.
- `ReportDownload`: A log entry for a generated report.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from prodreport.models.event_data import DispatchRecord

NO_DATA_MESSAGE = "No data found for the selected criteria."

ROW_KEY_FIELDS = (
    "product_label",
    "machine_number",
    "date",
    "on_time",
    "off_time",
    "total_time_minutes",
)


class ReportTypeEnum(str, Enum):
    """
    Enum that represents the kind of report to generate.

    - daily: Dispatched products of the current day.
    - weekly: Dispatched products of the current week (starting on Sunday).
    - monthly: Dispatched products of the current month.
    - processWise: Reconciled production runs of one operation.
    """

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    PROCESS_WISE = "processWise"


class MatchedRow(BaseModel):
    """
    Class that represents one row of an operation-wise report.

    A row is either a matched interval (an ON event paired with an OFF event for a part of their
    quantity) or the unmatched remainder of an ON event, in which case `off_time` and
    `total_time_minutes` are empty.

    Args:
        product_label (str): Display name of the product.
        machine_number (str, optional): Numeric designator of the machine. Defaults to "".
        date (str, optional): Day of the ON time (YYYY-MM-DD). Defaults to "".
        on_time (str, optional): ON time truncated to the minute (HH:MM). Defaults to "".
        off_time (str, optional): OFF time truncated to the minute (HH:MM). Defaults to "".
        total_time_minutes (Union[int, Literal[""]], optional): Minutes between ON and OFF. Defaults to "".
        quantity (Optional[int], optional): Quantity of the row. Only None for the placeholder row. Defaults to None.
    """

    product_label: str = Field(alias="productLabel")
    machine_number: str = Field(default="", alias="machineNumber")
    date: str = ""
    on_time: str = Field(default="", alias="onTime")
    off_time: str = Field(default="", alias="offTime")
    total_time_minutes: Union[int, Literal[""]] = Field(default="", alias="totalTime")
    quantity: Optional[int] = None

    model_config = ConfigDict(
        populate_by_name=True,
        serialize_by_alias=True,
        json_schema_extra={
            "examples": [
                {
                    "productLabel": "Flange A",
                    "machineNumber": "4",
                    "date": "2024-03-04",
                    "onTime": "09:00",
                    "offTime": "09:30",
                    "totalTime": 30,
                    "quantity": 10,
                }
            ]
        },
    )

    @classmethod
    def placeholder(cls) -> MatchedRow:
        return cls(product_label=NO_DATA_MESSAGE)


class OperationReport(BaseModel):
    """
    Class that represents an operation-wise report.

    Args:
        name (str): Name of the report.
        operation (str): Operation (process) the report was generated for.
        rows (List[MatchedRow]): Aggregated rows of the report.
        total_quantity (int): Sum of the quantity of the aggregated rows.
        fallback (bool, optional): Whether the rows are best-effort rows per event. Defaults to False.
        dropped_event_ids (List[str], optional): IDs of events skipped due to unresolved relations. Defaults to [].
    """

    name: str
    operation: str
    rows: List[MatchedRow]
    total_quantity: int = Field(alias="totalQuantity")
    fallback: bool = False
    dropped_event_ids: List[str] = Field(default=[], alias="droppedEventIds")

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)


class DispatchReport(BaseModel):
    """
    Class that represents a dispatched products report.

    Args:
        name (str): Name of the report.
        records (List[DispatchRecord]): Dispatch records, newest first.
        total_quantity (int): Sum of the dispatched quantity.
    """

    name: str
    records: List[DispatchRecord]
    total_quantity: int = Field(alias="totalQuantity")

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)


class ReportDownload(BaseModel):
    """
    Class that represents the log entry of a generated report.

    Args:
        report_name (str): Name of the report.
        created_at (datetime): Time the report was generated.
    """

    report_name: str = Field(alias="reportName")
    created_at: datetime = Field(alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)
