from datetime import datetime
from typing import Dict, List, Optional

from fastapi import HTTPException

from prodreport.models.event_data import DispatchRecord, DispatchStatusEnum, Event
from prodreport.models.report_data import ReportDownload
from prodreport.util.formatting import to_naive_local


def _in_range(
    timestamp: datetime, start: Optional[datetime], end: Optional[datetime]
) -> bool:
    start, end = to_naive_local(start), to_naive_local(end)
    if start is not None and timestamp < start:
        return False
    if end is not None and timestamp > end:
        return False
    return True


class InMemoryBackend:
    def __init__(self):
        self.events: Dict[str, Event] = {}
        self.dispatches: Dict[str, DispatchRecord] = {}
        self.report_downloads: List[ReportDownload] = []

    def get_events(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        operation: Optional[str] = None,
    ) -> List[Event]:
        """
        Returns the events of a time window, optionally only for machines of one operation.

        An event belongs to an operation if its machine label starts with the operation name.
        Events are sorted by occurrence time, events with equal time keep their insertion order.
        """
        events = [
            event
            for event in self.events.values()
            if _in_range(event.occurred_at, start, end)
            and (
                operation is None
                or (event.machine_label is not None and event.machine_label.startswith(operation))
            )
        ]
        return sorted(events, key=lambda event: event.occurred_at)

    def get_event(self, event_id: str) -> Event:
        if event_id not in self.events:
            raise HTTPException(404, f"Event {event_id} not found")
        return self.events[event_id]

    def create_event(self, event: Event) -> Event:
        if event.ID in self.events:
            raise HTTPException(409, f"Event {event.ID} already exists.")
        self.events[event.ID] = event
        return event

    def delete_event(self, event_id: str):
        if event_id not in self.events:
            raise HTTPException(404, f"Event {event_id} not found.")
        del self.events[event_id]

    def get_dispatches(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        dispatch_status: Optional[DispatchStatusEnum] = DispatchStatusEnum.PENDING,
    ) -> List[DispatchRecord]:
        dispatches = [
            dispatch
            for dispatch in self.dispatches.values()
            if _in_range(dispatch.created_at, start, end)
            and (dispatch_status is None or dispatch.dispatch_status == dispatch_status)
        ]
        return sorted(dispatches, key=lambda dispatch: dispatch.created_at, reverse=True)

    def create_dispatch(self, dispatch: DispatchRecord) -> DispatchRecord:
        if dispatch.ID in self.dispatches:
            raise HTTPException(409, f"Dispatch {dispatch.ID} already exists.")
        self.dispatches[dispatch.ID] = dispatch
        return dispatch

    def get_report_downloads(self) -> List[ReportDownload]:
        return list(self.report_downloads)

    def create_report_download(self, report_name: str) -> ReportDownload:
        report_download = ReportDownload(report_name=report_name, created_at=datetime.now())
        self.report_downloads.append(report_download)
        return report_download
