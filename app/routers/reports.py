from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from app.dependencies import (
    get_dispatch_report,
    get_operation_report,
    is_operation_report,
    prodreport_backend,
)
from prodreport.adapters.excel_adapter import (
    XLSX_MEDIA_TYPE,
    get_download_filename,
    write_dispatch_report,
    write_operation_report,
)
from prodreport.models.report_data import OperationReport, ReportDownload

import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reports",
    tags=["reports"],
    responses={404: {"description": "Not found"}},
)


@router.get(
    "/download",
    response_class=Response,
    responses={
        200: {
            "description": "Sucessfully generated report",
            "content": {XLSX_MEDIA_TYPE: {}},
        },
        400: {"description": "Missing operation or invalid date range"},
        404: {"description": "No dispatched products found"},
    },
)
async def download_report(
    report_type: str = Query("daily", alias="reportType"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    process: Optional[str] = None,
) -> Response:
    if is_operation_report(report_type):
        report = get_operation_report(report_type, process, start_date, end_date)
        write_report = write_operation_report
    else:
        report = get_dispatch_report(report_type, start_date, end_date)
        write_report = write_dispatch_report
    try:
        content = write_report(report)
        prodreport_backend.create_report_download(report.name)
    except Exception as e:
        logger.exception(f"Error writing report {report.name}")
        raise HTTPException(status_code=500, detail=str(e))
    headers = {
        "Content-Disposition": f'attachment; filename="{get_download_filename(report.name)}"'
    }
    return Response(content=content, media_type=XLSX_MEDIA_TYPE, headers=headers)


@router.get("/operation", response_model=OperationReport)
async def get_operation_report_rows(
    process: str,
    report_type: str = Query("processWise", alias="reportType"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
) -> OperationReport:
    return get_operation_report(report_type, process, start_date, end_date)


@router.get("/downloads", response_model=List[ReportDownload])
async def get_report_downloads() -> List[ReportDownload]:
    return prodreport_backend.get_report_downloads()
