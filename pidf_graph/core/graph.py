"""
PIDF Graph recorder.

Records a control loop's process value during a run and saves a chart and
data sheet for tuning review:
- Gains and target band configuration
- Implicit (fixed step) or explicit sample timestamps
- PNG chart with setpoint and tolerance reference lines
- Plain-text data sheet

A host loop typically calls :meth:`PIDFGraph.configure` once, then
:meth:`PIDFGraph.add` every cycle and :meth:`PIDFGraph.save` when the run
ends. Module-level functions drive a shared default instance for hosts
that prefer not to pass a recorder around.
"""

from pathlib import Path
from typing import Optional, Tuple, Union
import logging

from pidf_graph.core.config import ConfigStore, GainSet, Target, RenderConfig
from pidf_graph.core.series import SeriesRecorder, Sample
from pidf_graph.report.exporter import ReportExporter, SaveResult
from pidf_graph.utils.validators import validate_type

log = logging.getLogger(__name__)


class PIDFGraph:
    """
    Recorder for one controller tuning run.

    Gains, target and samples are all held on the instance; separate
    instances do not share state. Not thread-safe.

    Example:
        >>> graph = PIDFGraph()
        >>> graph.configure(0.1, 0.03, 0.7)
        >>> graph.configure_target(90.0, 5.0)
        >>> graph.add(10.0)
        >>> graph.add(20.0)
        >>> graph.save("/tmp/run1").raise_for_error()
    """

    def __init__(self, exporter: Optional[ReportExporter] = None):
        """
        Initialize recorder with zero gains and target.

        Args:
            exporter: Report exporter (a default one is created if None)
        """
        self._config = ConfigStore()
        self._recorder = SeriesRecorder()
        self._exporter = exporter if exporter is not None else ReportExporter()

    def configure(self, p: float, i: float, d: float, f: float = 0.0) -> None:
        """
        Start a new run with the given gains.

        Clears recorded samples, rewinds the time cursor, restores the
        default step and the default resolution. The target is kept.

        Args:
            p: Proportional gain
            i: Integral gain
            d: Derivative gain
            f: Feed-forward gain
        """
        self.configure_gains(GainSet(p=p, i=i, d=d, f=f))

    def configure_gains(self, gains: GainSet) -> None:
        """Same as :meth:`configure`, taking a GainSet."""
        validate_type(gains, "gains", GainSet)
        self._config.configure(gains)
        self._recorder.reset()

    def configure_target(self, setpoint: float, tolerance: float) -> None:
        """Set setpoint and tolerance. Recorded samples are kept."""
        self._config.configure_target(setpoint, tolerance)

    def configure_resolution(self, width: int, height: int) -> None:
        """
        Set chart size in pixels.

        Must be called after :meth:`configure`, which restores the default.
        """
        self._config.configure_resolution(width, height)

    def reset(self) -> None:
        """Restart the run with the current gains."""
        self.configure_gains(self._config.gains)

    def add(self, value: float, time: Optional[float] = None) -> None:
        """
        Record a measurement.

        Args:
            value: Measured process value
            time: Explicit timestamp; the time cursor only advances when
                  this is omitted
        """
        self._recorder.add(value, time)

    def save(self, path: Union[str, Path]) -> SaveResult:
        """
        Save ``graph.png`` and ``data.txt`` into an existing directory.

        Recorded state is not modified, so a run may be saved repeatedly.

        Returns:
            SaveResult; call ``raise_for_error()`` to propagate failures
        """
        return self._exporter.save(self._config, self._recorder, path)

    # Component access

    @property
    def config(self) -> ConfigStore:
        return self._config

    @property
    def recorder(self) -> SeriesRecorder:
        return self._recorder

    @property
    def gains(self) -> GainSet:
        return self._config.gains

    @property
    def target(self) -> Target:
        return self._config.target

    @property
    def resolution(self) -> RenderConfig:
        return self._config.resolution

    @property
    def samples(self) -> Tuple[Sample, ...]:
        return self._recorder.samples

    @property
    def time_cursor(self) -> float:
        return self._recorder.time_cursor

    # Scalar accessors

    @property
    def p(self) -> float:
        return self._config.p

    @p.setter
    def p(self, value: float) -> None:
        self._config.p = value

    @property
    def i(self) -> float:
        return self._config.i

    @i.setter
    def i(self, value: float) -> None:
        self._config.i = value

    @property
    def d(self) -> float:
        return self._config.d

    @d.setter
    def d(self, value: float) -> None:
        self._config.d = value

    @property
    def f(self) -> float:
        return self._config.f

    @f.setter
    def f(self, value: float) -> None:
        self._config.f = value

    @property
    def setpoint(self) -> float:
        return self._config.setpoint

    @setpoint.setter
    def setpoint(self, value: float) -> None:
        self._config.setpoint = value

    @property
    def tolerance(self) -> float:
        return self._config.tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self._config.tolerance = value

    @property
    def step(self) -> float:
        """Time between implicit samples (default 0.02)."""
        return self._recorder.step

    @step.setter
    def step(self, value: float) -> None:
        self._recorder.step = value

    def __len__(self) -> int:
        return len(self._recorder)

    def __str__(self) -> str:
        return (
            f"PIDFGraph({self._config.gains}, setpoint={self.setpoint}, "
            f"tolerance={self.tolerance}, samples={len(self)})"
        )


_default_graph: Optional[PIDFGraph] = None


def get_default_graph() -> PIDFGraph:
    """Return the process-wide recorder, creating it on first use."""
    global _default_graph
    if _default_graph is None:
        _default_graph = PIDFGraph()
        log.debug("Created default PIDFGraph")
    return _default_graph


def reset_default_graph() -> None:
    """Drop the process-wide recorder; the next call creates a fresh one."""
    global _default_graph
    _default_graph = None


def configure(p: float, i: float, d: float, f: float = 0.0) -> None:
    get_default_graph().configure(p, i, d, f)


def configure_target(setpoint: float, tolerance: float) -> None:
    get_default_graph().configure_target(setpoint, tolerance)


def configure_resolution(width: int, height: int) -> None:
    get_default_graph().configure_resolution(width, height)


def add(value: float, time: Optional[float] = None) -> None:
    get_default_graph().add(value, time)


def save(path: Union[str, Path]) -> SaveResult:
    return get_default_graph().save(path)
