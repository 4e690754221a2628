"""
Analytics module for generating reports from machine state change events.

This module provides the modular calculations of an operation-wise report: grouping of the events,
reconciliation of ON and OFF events to production runs and aggregation of the resulting rows.
"""

from prodreport.analytics.base import ReportContext
from prodreport.analytics.data_preparation import DataPreparation
from prodreport.analytics.grouping import EventGroup, EventGrouper, GroupKey
from prodreport.analytics.reconciliation import (
    PairingInvariantError,
    Reconciler,
    reconcile_group,
)
from prodreport.analytics.aggregation import RowAggregator, aggregate_rows
from prodreport.analytics.report_generator import ReportGenerator
from prodreport.analytics.dispatch import create_dispatch_report

__all__ = [
    "ReportContext",
    "DataPreparation",
    "EventGroup",
    "EventGrouper",
    "GroupKey",
    "PairingInvariantError",
    "Reconciler",
    "reconcile_group",
    "RowAggregator",
    "aggregate_rows",
    "ReportGenerator",
    "create_dispatch_report",
]
