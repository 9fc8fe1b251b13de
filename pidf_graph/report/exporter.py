"""
Writes a run report to disk: ``graph.png`` and ``data.txt``.

Data sheet layout::

    <p> , <i> , <d> , <f>
    <setpoint> , <tolerance>

    <value> , <time>
    <value> , <time>
    ...

Sample lines list the value first, then the time, which is the layout
existing sheets use.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union
import logging

from pidf_graph.core.config import ConfigStore
from pidf_graph.core.series import SeriesRecorder
from pidf_graph.report.chart import ChartRenderer
from pidf_graph.utils.formatting import join_numbers

log = logging.getLogger(__name__)

GRAPH_FILENAME = "graph.png"
DATA_FILENAME = "data.txt"


class SaveErrorKind(Enum):
    """Why a report could not be written."""
    MISSING_DIRECTORY = "missing_directory"
    NOT_A_DIRECTORY = "not_a_directory"
    PERMISSION_DENIED = "permission_denied"
    WRITE_FAILED = "write_failed"


class FileSystemError(OSError):
    """Report output location is missing or not writable."""

    def __init__(self, kind: SaveErrorKind, path: Path, cause: Optional[OSError] = None):
        detail = f": {cause.strerror or cause}" if cause is not None else ""
        super().__init__(f"Cannot write report to {path} ({kind.value}){detail}")
        self.kind = kind
        self.path = path
        self.cause = cause


@dataclass
class SaveResult:
    """
    Outcome of a save.

    ``files`` lists what was fully written before any failure, so a failed
    result may still report the chart image.
    """
    path: Path
    files: List[Path] = field(default_factory=list)
    error: Optional[FileSystemError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[SaveErrorKind]:
        return self.error.kind if self.error is not None else None

    def raise_for_error(self) -> 'SaveResult':
        """Raise the stored FileSystemError, if any; otherwise return self."""
        if self.error is not None:
            raise self.error
        return self

    def __bool__(self) -> bool:
        return self.ok


def classify_os_error(error: OSError) -> SaveErrorKind:
    """Map an OSError raised while writing onto a SaveErrorKind."""
    if isinstance(error, FileNotFoundError):
        return SaveErrorKind.MISSING_DIRECTORY
    if isinstance(error, NotADirectoryError):
        return SaveErrorKind.NOT_A_DIRECTORY
    if isinstance(error, PermissionError):
        return SaveErrorKind.PERMISSION_DENIED
    return SaveErrorKind.WRITE_FAILED


def format_data_sheet(config: ConfigStore, recorder: SeriesRecorder) -> str:
    """
    Build the text of ``data.txt``.

    Args:
        config: Gains and target written in the header
        recorder: Samples written one per line

    Returns:
        Complete sheet contents, newline terminated
    """
    gains = config.gains
    target = config.target
    lines = [
        join_numbers((gains.p, gains.i, gains.d, gains.f)),
        join_numbers((target.setpoint, target.tolerance)),
        "",
    ]
    lines.extend(join_numbers((s.value, s.time)) for s in recorder.samples)
    return "\n".join(lines) + "\n"


class ReportExporter:
    """
    Saves the chart image and data sheet for a run.

    File-system failures are returned as a failed :class:`SaveResult`
    rather than raised; partially written files are left in place.

    Example:
        >>> exporter = ReportExporter()
        >>> result = exporter.save(config, recorder, "/tmp/run1")
        >>> result.raise_for_error()
    """

    def __init__(self, renderer: Optional[ChartRenderer] = None):
        """
        Initialize exporter.

        Args:
            renderer: Chart renderer (a default one is created if None)
        """
        self._renderer = renderer if renderer is not None else ChartRenderer()

    @property
    def renderer(self) -> ChartRenderer:
        return self._renderer

    def save(
        self,
        config: ConfigStore,
        recorder: SeriesRecorder,
        path: Union[str, Path]
    ) -> SaveResult:
        """
        Write ``graph.png`` and ``data.txt`` into an existing directory.

        Args:
            config: Run configuration
            recorder: Recorded series
            path: Target directory; it is not created

        Returns:
            SaveResult describing written files or the failure
        """
        directory = Path(path)
        result = SaveResult(path=directory)
        graph_path = directory / GRAPH_FILENAME
        data_path = directory / DATA_FILENAME

        log.debug("Saving report with %d samples to %s", len(recorder), directory)

        try:
            self._write_graph(config, recorder, graph_path)
            result.files.append(graph_path)
            data_path.write_text(
                format_data_sheet(config, recorder), encoding="utf-8", newline="\n"
            )
            result.files.append(data_path)
        except OSError as e:
            kind = classify_os_error(e)
            result.error = FileSystemError(kind, directory, e)
            log.error("Failed to save report to %s: %s", directory, kind.value)
            return result

        log.info("Saved report (%d samples) to %s", len(recorder), directory)
        return result

    def _write_graph(self, config: ConfigStore, recorder: SeriesRecorder, graph_path: Path) -> None:
        fig = self._renderer.render(config, recorder)
        try:
            # No bbox_inches='tight': it would change the pixel size.
            fig.savefig(graph_path, dpi=self._renderer.dpi, format="png")
        finally:
            fig.clear()
