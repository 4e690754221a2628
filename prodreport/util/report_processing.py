from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

import logging

from prodreport.models.event_data import Event
from prodreport.models.report_data import MatchedRow, OperationReport
from prodreport.adapters.json_adapter import JsonEventAdapter

from prodreport.analytics.base import ReportContext
from prodreport.analytics.data_preparation import DataPreparation
from prodreport.analytics.grouping import EventGroup, EventGrouper, GroupKey
from prodreport.analytics.reconciliation import Reconciler
from prodreport.analytics.aggregation import RowAggregator
from prodreport.analytics.report_generator import ReportGenerator

logger = logging.getLogger(__name__)


@dataclass
class ReportProcessor:
    """
    Class that represents a report processor for machine state change events. It provides methods to read events from a json file and to calculate the rows and totals of an operation-wise report.

    The events are expected to be fetched for the report window and the operation already. Processing
    does not perform any I/O apart from reading the optional event file and holds no state shared
    with other processors.

    Args:
        filepath (str): Path to a json file with the events.
        events (List[Event]): Events of the report.
        operation (Optional[str]): Operation (process) of the report.
        start_date (str): First day of the report window (YYYY-MM-DD).
        end_date (str): Last day of the report window (YYYY-MM-DD).
    """

    filepath: str = field(default="")
    events: List[Event] = field(default_factory=list)
    operation: Optional[str] = field(default=None)
    start_date: str = field(default="")
    end_date: str = field(default="")
    _context: Optional[ReportContext] = field(default=None, init=False, repr=False)
    _data_prep: Optional[DataPreparation] = field(default=None, init=False, repr=False)
    _grouper: Optional[EventGrouper] = field(default=None, init=False, repr=False)
    _reconciler: Optional[Reconciler] = field(default=None, init=False, repr=False)
    _aggregator: Optional[RowAggregator] = field(default=None, init=False, repr=False)
    _report_generator: Optional[ReportGenerator] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if self.filepath:
            self.read_events_from_json()
        self._initialize_analytics()

    def _initialize_analytics(self):
        """Initialize analytics modules."""
        self._context = ReportContext(
            events=self.events,
            operation=self.operation,
            start_date=self.start_date,
            end_date=self.end_date,
        )
        self._data_prep = DataPreparation(self._context)
        self._grouper = EventGrouper(self._context, self._data_prep)
        self._reconciler = Reconciler(self._context, self._grouper)
        self._aggregator = RowAggregator(self._context, self._reconciler)
        self._report_generator = ReportGenerator(
            self._context, self._data_prep, self._aggregator
        )

    def read_events_from_json(self, filepath: str = ""):
        """
        Reads the events from a json file and resets all calculated results.

        Args:
            filepath (str, optional): Path to the json file. Defaults to the filepath of the processor.
        """
        if filepath:
            self.filepath = filepath
        self.events = JsonEventAdapter().read_events(self.filepath)
        logger.info(f"Read {len(self.events)} events from {self.filepath}.")
        self._initialize_analytics()

    @property
    def df_events(self) -> pd.DataFrame:
        """
        Returns a data frame with one row per event.

        Returns:
            pd.DataFrame: Data frame with the events.
        """
        return self._data_prep.df_events

    @property
    def dropped_event_ids(self) -> List[str]:
        """
        Returns the IDs of events skipped because their product or machine is missing.

        Returns:
            List[str]: IDs of the dropped events.
        """
        return self._data_prep.dropped_event_ids

    @property
    def groups(self) -> Dict[GroupKey, EventGroup]:
        """
        Returns the events grouped by product and machine.

        Returns:
            Dict[GroupKey, EventGroup]: Event groups in order of first appearance.
        """
        return self._grouper.groups

    @property
    def matched_rows(self) -> List[MatchedRow]:
        """
        Returns the reconciled rows of all groups before aggregation.

        Returns:
            List[MatchedRow]: Reconciled rows.
        """
        return self._reconciler.matched_rows

    @property
    def df_aggregated_rows(self) -> pd.DataFrame:
        return self._aggregator.df_aggregated_rows

    @property
    def aggregated_rows(self) -> List[MatchedRow]:
        """
        Returns the reconciled rows merged by all fields except the quantity.

        Returns:
            List[MatchedRow]: Aggregated rows.
        """
        return self._aggregator.aggregated_rows

    @property
    def report_rows(self) -> List[MatchedRow]:
        return self._aggregator.report_rows

    @property
    def total_quantity(self) -> int:
        return self._aggregator.total_quantity

    def get_operation_report(self) -> OperationReport:
        """
        Returns the operation-wise report with rows, totals and the skipped events.

        Returns:
            OperationReport: The operation-wise report.
        """
        return self._report_generator.get_operation_report()
