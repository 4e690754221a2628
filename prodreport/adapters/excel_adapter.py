from __future__ import annotations

import io
from typing import List, Tuple

import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from prodreport.models.report_data import DispatchReport, OperationReport

import logging

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

OPERATION_REPORT_SHEET = "Operation Wise Report"
DISPATCH_REPORT_SHEET = "Dispatched Products Report"

# (field, header, width)
OPERATION_REPORT_COLUMNS: List[Tuple[str, str, int]] = [
    ("product_label", "Product ID", 20),
    ("quantity", "Quantity", 12),
    ("machine_number", "Machine Number", 18),
    ("date", "Date", 15),
    ("on_time", "ON Time", 10),
    ("off_time", "OFF Time", 10),
    ("total_time_minutes", "Total Time (min)", 20),
]

DISPATCH_REPORT_COLUMNS: List[Tuple[str, str, int]] = [
    ("product", "Product", 30),
    ("quantity", "Quantity", 15),
    ("created_at", "Date", 25),
]


def get_download_filename(report_name: str) -> str:
    return f"{report_name.replace(' ', '_')}.xlsx"


def _format_sheet(
    worksheet: Worksheet, columns: List[Tuple[str, str, int]], summary_label: str, total: int
):
    for column_index, (_, _, width) in enumerate(columns, start=1):
        worksheet.column_dimensions[get_column_letter(column_index)].width = width
    worksheet.append([])
    worksheet.append([summary_label, total] + [""] * (len(columns) - 2))
    summary_row = worksheet.max_row
    worksheet.cell(row=summary_row, column=1).font = Font(bold=True)
    worksheet.cell(row=summary_row, column=2).font = Font(bold=True)


def get_operation_report_data_frame(report: OperationReport) -> pd.DataFrame:
    """
    Returns the rows of an operation-wise report as a data frame with the report headers as columns.

    Args:
        report (OperationReport): The report.

    Returns:
        pd.DataFrame: Data frame with one row per report row.
    """
    fields = [column[0] for column in OPERATION_REPORT_COLUMNS]
    df = pd.DataFrame(
        [row.model_dump(by_alias=False) for row in report.rows], columns=fields
    )
    return df.rename(columns={field: header for field, header, _ in OPERATION_REPORT_COLUMNS})


def write_operation_report(report: OperationReport) -> bytes:
    """
    Writes an operation-wise report to an xlsx workbook.

    The sheet contains the report rows followed by an empty row and a bold summary row with the
    total quantity.

    Args:
        report (OperationReport): The report to write.

    Returns:
        bytes: Content of the xlsx file.
    """
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        get_operation_report_data_frame(report).to_excel(
            writer, sheet_name=OPERATION_REPORT_SHEET, index=False
        )
        _format_sheet(
            writer.sheets[OPERATION_REPORT_SHEET],
            OPERATION_REPORT_COLUMNS,
            "Total Products:",
            report.total_quantity,
        )
    logger.debug(f"Wrote workbook for report {report.name} with {len(report.rows)} rows.")
    return buffer.getvalue()


def write_dispatch_report(report: DispatchReport) -> bytes:
    """
    Writes a dispatched products report to an xlsx workbook.

    Args:
        report (DispatchReport): The report to write.

    Returns:
        bytes: Content of the xlsx file.
    """
    df = pd.DataFrame(
        [
            {
                "Product": record.product,
                "Quantity": record.quantity,
                # excel does not support timezones
                "Date": record.created_at.replace(tzinfo=None),
            }
            for record in report.records
        ],
        columns=[header for _, header, _ in DISPATCH_REPORT_COLUMNS],
    )
    buffer = io.BytesIO()
    with pd.ExcelWriter(
        buffer, engine="openpyxl", datetime_format="yyyy-mm-dd hh:mm:ss"
    ) as writer:
        df.to_excel(writer, sheet_name=DISPATCH_REPORT_SHEET, index=False)
        _format_sheet(
            writer.sheets[DISPATCH_REPORT_SHEET],
            DISPATCH_REPORT_COLUMNS,
            "Total Products Dispatched:",
            report.total_quantity,
        )
    logger.debug(f"Wrote workbook for report {report.name} with {len(report.records)} records.")
    return buffer.getvalue()
