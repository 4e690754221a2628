from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter

from app.dependencies import prodreport_backend
from prodreport.models.event_data import DispatchRecord, DispatchStatusEnum

router = APIRouter(
    prefix="/dispatches",
    tags=["dispatches"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[DispatchRecord])
async def get_dispatches(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    dispatch_status: Optional[DispatchStatusEnum] = None,
) -> List[DispatchRecord]:
    return prodreport_backend.get_dispatches(
        start=start, end=end, dispatch_status=dispatch_status
    )


@router.post("/", response_model=DispatchRecord)
async def create_dispatch(dispatch: DispatchRecord) -> DispatchRecord:
    return prodreport_backend.create_dispatch(dispatch)
