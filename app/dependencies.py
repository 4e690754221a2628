import os
from datetime import datetime
from typing import Optional, Tuple

from fastapi import HTTPException

from app.backends.backend import Backend
from app.backends.in_memory import InMemoryBackend
import prodreport
from prodreport.analytics.dispatch import create_dispatch_report
from prodreport.models.report_data import DispatchReport, OperationReport, ReportTypeEnum
from prodreport.util.date_range import get_date_range
from prodreport.util.report_processing import ReportProcessor

import logging

logger = logging.getLogger(__name__)

MISSING_OPERATION_MESSAGE = "Operation/Machine is required for process-wise report."
NO_DISPATCHES_MESSAGE = "No dispatched products found for the selected date range."


def get_backend() -> Backend:
    backend_name = os.getenv("PRODREPORT_BACKEND") or "in_memory"
    if backend_name == "in_memory":
        logger.info("Using in-memory backend")
        return InMemoryBackend()
    else:
        raise Exception(f"Backend {backend_name} not possible to use for prodreport API.")


prodreport_backend = get_backend()


def seed_backend(events_path: Optional[str] = None, dispatches_path: Optional[str] = None):
    adapter = prodreport.adapters.JsonEventAdapter()
    if events_path:
        for event in adapter.read_events(events_path):
            prodreport_backend.create_event(event)
    if dispatches_path:
        for dispatch in adapter.read_dispatches(dispatches_path):
            prodreport_backend.create_dispatch(dispatch)


def get_report_window(
    report_type: str, start_date: Optional[str], end_date: Optional[str]
) -> Tuple[datetime, datetime]:
    try:
        return get_date_range(report_type, start_date, end_date)
    except ValueError as e:
        raise HTTPException(400, str(e))


def get_operation_report(
    report_type: str,
    operation: Optional[str],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> OperationReport:
    if not operation:
        raise HTTPException(400, MISSING_OPERATION_MESSAGE)
    start, end = get_report_window(report_type, start_date, end_date)
    events = prodreport_backend.get_events(start=start, end=end, operation=operation)
    report_processor = ReportProcessor(
        events=events,
        operation=operation,
        start_date=start_date or start.date().isoformat(),
        end_date=end_date or end.date().isoformat(),
    )
    try:
        return report_processor.get_operation_report()
    except Exception as e:
        logger.exception(f"Error generating report for operation {operation}")
        raise HTTPException(status_code=500, detail=str(e))


def get_dispatch_report(
    report_type: str, start_date: Optional[str] = None, end_date: Optional[str] = None
) -> DispatchReport:
    start, end = get_report_window(report_type, start_date, end_date)
    records = prodreport_backend.get_dispatches(start=start, end=end)
    if not records:
        raise HTTPException(404, NO_DISPATCHES_MESSAGE)
    return create_dispatch_report(records, report_type)


def is_operation_report(report_type: str) -> bool:
    return report_type == ReportTypeEnum.PROCESS_WISE
