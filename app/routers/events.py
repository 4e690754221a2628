from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter

from app.dependencies import prodreport_backend
from prodreport.models.event_data import Event

EVENT_EXAMPLES = Event.model_config["json_schema_extra"]["examples"]

router = APIRouter(
    prefix="/events",
    tags=["events"],
    responses={404: {"description": "Not found"}},
)


@router.get(
    "/",
    response_model=List[Event],
    responses={
        200: {
            "description": "Sucessfully returned events",
            "content": {"application/json": {"example": EVENT_EXAMPLES}},
        }
    },
)
async def get_events(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    operation: Optional[str] = None,
) -> List[Event]:
    return prodreport_backend.get_events(start=start, end=end, operation=operation)


@router.get("/{event_id}", response_model=Event)
async def get_event(event_id: str) -> Event:
    return prodreport_backend.get_event(event_id)


@router.post("/", response_model=Event)
async def create_event(event: Event) -> Event:
    return prodreport_backend.create_event(event)


@router.delete("/{event_id}", response_model=str)
async def delete_event(event_id: str) -> str:
    prodreport_backend.delete_event(event_id)
    return "Sucessfully deleted event with ID: " + event_id
