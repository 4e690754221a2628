"""
Report generator module.

This module assembles the operation-wise report from the results of the other analytics modules.
"""

from __future__ import annotations

from prodreport.models.report_data import OperationReport
from prodreport.analytics.base import ReportContext
from prodreport.analytics.data_preparation import DataPreparation
from prodreport.analytics.aggregation import RowAggregator

import logging

logger = logging.getLogger(__name__)


class ReportGenerator:
    """
    Generates the operation-wise report.
    """

    def __init__(
        self,
        context: ReportContext,
        data_prep: DataPreparation,
        aggregator: RowAggregator,
    ):
        """
        Initialize the report generator.

        Args:
            context: Report context containing the events and the report window.
            data_prep: Data preparation instance for the dropped events.
            aggregator: Row aggregator providing rows and totals.
        """
        self.context = context
        self.data_prep = data_prep
        self.aggregator = aggregator

    def get_operation_report(self) -> OperationReport:
        report = OperationReport(
            name=self.context.get_report_name(),
            operation=self.context.operation or "",
            rows=self.aggregator.report_rows,
            total_quantity=self.aggregator.total_quantity,
            fallback=self.aggregator.uses_fallback,
            dropped_event_ids=self.data_prep.dropped_event_ids,
        )
        logger.info(
            f"Generated report {report.name} with {len(report.rows)} rows and total quantity {report.total_quantity}."
        )
        return report
