"""
PIDF Graph
==========

Run recorder for feedback controller tuning:
- Records a process value over time at a fixed step or explicit timestamps
- Tracks gains (P, I, D, F), setpoint and tolerance band
- Saves a PNG chart with reference lines and a plain-text data sheet

Example:
    >>> import pidf_graph
    >>> pidf_graph.configure(0.1, 0.03, 0.7)
    >>> pidf_graph.configure_target(90.0, 5.0)
    >>> pidf_graph.add(42.0)
    >>> pidf_graph.save("/tmp/run1")
"""

from pidf_graph.core.config import ConfigStore, GainSet, Target, RenderConfig
from pidf_graph.core.series import SeriesRecorder, Sample
from pidf_graph.core.graph import (
    PIDFGraph,
    get_default_graph,
    reset_default_graph,
    configure,
    configure_target,
    configure_resolution,
    add,
    save,
)
from pidf_graph.report.chart import ChartRenderer
from pidf_graph.report.exporter import (
    ReportExporter,
    SaveResult,
    SaveErrorKind,
    FileSystemError,
)
from pidf_graph.report.reader import ReportData, ReportFormatError, read_report
from pidf_graph.utils.validators import ValidationError

__version__ = "1.0.0"
__all__ = [
    "PIDFGraph",
    "ConfigStore",
    "GainSet",
    "Target",
    "RenderConfig",
    "SeriesRecorder",
    "Sample",
    "ChartRenderer",
    "ReportExporter",
    "SaveResult",
    "SaveErrorKind",
    "FileSystemError",
    "ReportData",
    "ReportFormatError",
    "read_report",
    "ValidationError",
    "get_default_graph",
    "reset_default_graph",
    "configure",
    "configure_target",
    "configure_resolution",
    "add",
    "save",
]
