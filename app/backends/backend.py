from datetime import datetime
from typing import List, Optional, Protocol

from prodreport.models.event_data import DispatchRecord, DispatchStatusEnum, Event
from prodreport.models.report_data import ReportDownload


class Backend(Protocol):

    def get_events(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        operation: Optional[str] = None,
    ) -> List[Event]: ...

    def get_event(self, event_id: str) -> Event: ...

    def create_event(self, event: Event) -> Event: ...

    def delete_event(self, event_id: str): ...

    def get_dispatches(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        dispatch_status: Optional[DispatchStatusEnum] = DispatchStatusEnum.PENDING,
    ) -> List[DispatchRecord]: ...

    def create_dispatch(self, dispatch: DispatchRecord) -> DispatchRecord: ...

    def get_report_downloads(self) -> List[ReportDownload]: ...

    def create_report_download(self, report_name: str) -> ReportDownload: ...
