"""Reports package: CSV export and projection chart frames."""

from fintrack.reports.chart import interpolate_frames, smoothstep
from fintrack.reports.csv_export import (
    CSV_COLUMNS,
    ExportedReport,
    build_csv,
    export_report,
    report_filename,
)

__all__ = [
    "CSV_COLUMNS",
    "ExportedReport",
    "build_csv",
    "export_report",
    "interpolate_frames",
    "report_filename",
    "smoothstep",
]
