"""
Reader for saved ``data.txt`` sheets.

Parses the gains and target header and the ``value , time`` sample lines
back into typed records.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

import numpy as np

from pidf_graph.core.config import GainSet, Target
from pidf_graph.core.series import Sample
from pidf_graph.report.exporter import DATA_FILENAME

SEPARATOR = ","


class ReportFormatError(ValueError):
    """Data sheet does not follow the expected layout."""
    pass


@dataclass
class ReportData:
    """Contents of a saved data sheet."""
    gains: GainSet
    target: Target
    samples: List[Sample]

    @property
    def times(self) -> np.ndarray:
        return np.array([s.time for s in self.samples], dtype=float)

    @property
    def values(self) -> np.ndarray:
        return np.array([s.value for s in self.samples], dtype=float)

    def __len__(self) -> int:
        return len(self.samples)


def _parse_numbers(line: str, count: int, line_no: int) -> Tuple[float, ...]:
    fields = [part.strip() for part in line.split(SEPARATOR)]
    if len(fields) != count:
        raise ReportFormatError(
            f"Line {line_no}: expected {count} fields, got {len(fields)}"
        )
    try:
        return tuple(float(part) for part in fields)
    except ValueError:
        raise ReportFormatError(f"Line {line_no}: not a number in {line!r}")


def read_report(path: Union[str, Path]) -> ReportData:
    """
    Read a saved data sheet.

    Args:
        path: Report directory or the ``data.txt`` file itself

    Returns:
        ReportData with gains, target and samples in file order

    Raises:
        FileNotFoundError: If the sheet does not exist
        ReportFormatError: If the header or a sample line is malformed
    """
    file_path = Path(path)
    if file_path.is_dir():
        file_path = file_path / DATA_FILENAME
    if not file_path.exists():
        raise FileNotFoundError(f"Report data not found: {file_path}")

    lines = file_path.read_text(encoding="utf-8").split("\n")
    if len(lines) < 3:
        raise ReportFormatError("Missing header lines")

    p, i, d, f = _parse_numbers(lines[0], 4, 1)
    setpoint, tolerance = _parse_numbers(lines[1], 2, 2)
    if lines[2].strip():
        raise ReportFormatError("Line 3: expected a blank separator line")

    samples = []
    for line_no, line in enumerate(lines[3:], start=4):
        if not line.strip():
            continue
        value, time = _parse_numbers(line, 2, line_no)
        samples.append(Sample(time=time, value=value))

    return ReportData(
        gains=GainSet(p=p, i=i, d=d, f=f),
        target=Target(setpoint=setpoint, tolerance=tolerance),
        samples=samples,
    )
