"""Chart rendering and report export."""

from pidf_graph.report.chart import ChartRenderer, gains_label
from pidf_graph.report.exporter import (
    ReportExporter,
    SaveResult,
    SaveErrorKind,
    FileSystemError,
    format_data_sheet,
)
from pidf_graph.report.reader import ReportData, ReportFormatError, read_report

__all__ = [
    "ChartRenderer",
    "gains_label",
    "ReportExporter",
    "SaveResult",
    "SaveErrorKind",
    "FileSystemError",
    "format_data_sheet",
    "ReportData",
    "ReportFormatError",
    "read_report",
]
