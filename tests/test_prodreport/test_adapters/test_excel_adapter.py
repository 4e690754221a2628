import io
from datetime import datetime

import pytest
from openpyxl import load_workbook

from prodreport.adapters import excel_adapter
from prodreport.analytics.dispatch import create_dispatch_report
from prodreport.models.event_data import DispatchRecord
from prodreport.models.report_data import MatchedRow, OperationReport


def load_sheet(content: bytes, sheet_name: str):
    workbook = load_workbook(io.BytesIO(content))
    return workbook[sheet_name]


@pytest.fixture
def operation_report() -> OperationReport:
    return OperationReport(
        name="Lathe_2024-03-04_2024-03-04_report",
        operation="Lathe",
        rows=[
            MatchedRow(
                product_label="Flange A",
                machine_number="4",
                date="2024-03-04",
                on_time="09:00",
                off_time="09:30",
                total_time_minutes=30,
                quantity=5,
            ),
            MatchedRow(
                product_label="Flange A",
                machine_number="4",
                date="2024-03-04",
                on_time="10:00",
                quantity=2,
            ),
        ],
        total_quantity=7,
    )


def test_operation_report_workbook(operation_report):
    content = excel_adapter.write_operation_report(operation_report)

    sheet = load_sheet(content, excel_adapter.OPERATION_REPORT_SHEET)

    headers = [cell.value for cell in sheet[1]]
    assert headers == [header for _, header, _ in excel_adapter.OPERATION_REPORT_COLUMNS]
    assert [cell.value for cell in sheet[2]][:5] == ["Flange A", 5, "4", "2024-03-04", "09:00"]
    assert sheet.cell(row=2, column=7).value == 30
    assert sheet.cell(row=3, column=2).value == 2
    assert sheet.cell(row=4, column=1).value is None
    assert sheet.cell(row=5, column=1).value == "Total Products:"
    assert sheet.cell(row=5, column=2).value == 7
    assert sheet.cell(row=5, column=1).font.bold
    assert sheet.cell(row=5, column=2).font.bold
    assert sheet.column_dimensions["A"].width == 20


def test_placeholder_report_workbook():
    report = OperationReport(
        name="Lathe_2024-03-04_2024-03-04_report",
        operation="Lathe",
        rows=[MatchedRow.placeholder()],
        total_quantity=0,
    )

    sheet = load_sheet(
        excel_adapter.write_operation_report(report), excel_adapter.OPERATION_REPORT_SHEET
    )

    assert sheet.cell(row=2, column=1).value == "No data found for the selected criteria."
    assert sheet.cell(row=4, column=1).value == "Total Products:"
    assert sheet.cell(row=4, column=2).value == 0


def test_dispatch_report_workbook():
    records = [
        DispatchRecord(ID="d1", product="Flange A", quantity=40, created_at=datetime(2024, 3, 4, 8, 0)),
        DispatchRecord(ID="d2", product="Flange B", quantity=2, created_at=datetime(2024, 3, 4, 15, 12, 5)),
    ]
    report = create_dispatch_report(records, "daily")

    sheet = load_sheet(
        excel_adapter.write_dispatch_report(report), excel_adapter.DISPATCH_REPORT_SHEET
    )

    assert [cell.value for cell in sheet[1]] == ["Product", "Quantity", "Date"]
    assert sheet.cell(row=2, column=1).value == "Flange B"
    assert sheet.cell(row=2, column=3).value == datetime(2024, 3, 4, 15, 12, 5)
    assert sheet.cell(row=5, column=1).value == "Total Products Dispatched:"
    assert sheet.cell(row=5, column=2).value == 42
    assert sheet.cell(row=5, column=2).font.bold


def test_download_filename():
    assert (
        excel_adapter.get_download_filename("Daily Dispatched Products Report")
        == "Daily_Dispatched_Products_Report.xlsx"
    )
