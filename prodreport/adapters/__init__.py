"""
This module contains the adapters that read the records reports are generated from and write generated reports.

- `JsonEventAdapter` reads and writes events and dispatch records as json.
- `excel_adapter` writes operation-wise and dispatched products reports as xlsx workbooks.
"""

from prodreport.adapters.json_adapter import JsonEventAdapter
from prodreport.adapters.excel_adapter import (
    XLSX_MEDIA_TYPE,
    get_download_filename,
    write_dispatch_report,
    write_operation_report,
)
