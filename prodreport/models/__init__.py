"""
The `prodreport.models` package contains the data structures for the records reports are generated from and for the reports themselves.
All algorithms in prodreport and the prodreport webserver use these formats.

The following modules are available:

- `prodreport.models.event_data`: Contains classes to represent machine state change events and dispatch records.
- `prodreport.models.report_data`: Contains classes to represent report rows, reports and the report download log.
"""
