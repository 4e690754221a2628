"""
Dispatch analytics module.

Dispatched products are already aggregated records and are reported without any pairing.
"""

from __future__ import annotations

from typing import List, Union

from prodreport.models.event_data import DispatchRecord
from prodreport.models.report_data import DispatchReport, ReportTypeEnum


def get_dispatch_report_name(report_type: Union[ReportTypeEnum, str]) -> str:
    report_type = getattr(report_type, "value", report_type)
    return f"{report_type[:1].upper()}{report_type[1:]} Dispatched Products Report"


def create_dispatch_report(
    records: List[DispatchRecord], report_type: Union[ReportTypeEnum, str]
) -> DispatchReport:
    """
    Creates the dispatched products report with the newest records first.

    Args:
        records (List[DispatchRecord]): Dispatch records of the report window.
        report_type (Union[ReportTypeEnum, str]): Type of the report, used for the report name.

    Returns:
        DispatchReport: Report with the sorted records and their total quantity.
    """
    sorted_records = sorted(records, key=lambda record: record.created_at, reverse=True)
    return DispatchReport(
        name=get_dispatch_report_name(report_type),
        records=sorted_records,
        total_quantity=sum(record.quantity for record in sorted_records),
    )
