from __future__ import annotations

import prodreport
from prodreport.analytics.dispatch import create_dispatch_report
from prodreport.util.report_processing import ReportProcessor


if __name__ == '__main__':
    prodreport.set_logging("INFO")

    adapter_object = prodreport.adapters.JsonEventAdapter()
    events = adapter_object.read_events('examples/reporting/events.json')
    # the API backend selects the events of an operation, here the file holds all of them
    lathe_events = [event for event in events if event.machine_label.startswith('Lathe')]

    report_processor = ReportProcessor(
        events=lathe_events,
        operation='Lathe',
        start_date='2024-03-04',
        end_date='2024-03-04',
    )
    report = report_processor.get_operation_report()
    for row in report.rows:
        print(row.model_dump())
    print(f"Total Products: {report.total_quantity}")

    with open(prodreport.adapters.get_download_filename(report.name), 'wb') as f:
        f.write(prodreport.adapters.write_operation_report(report))

    dispatches = adapter_object.read_dispatches('examples/reporting/dispatches.json')
    dispatch_report = create_dispatch_report(dispatches, 'daily')
    with open(prodreport.adapters.get_download_filename(dispatch_report.name), 'wb') as f:
        f.write(prodreport.adapters.write_dispatch_report(dispatch_report))
