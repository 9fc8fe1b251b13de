"""
Line chart of a recorded run with setpoint and tolerance reference lines.
"""

from typing import Dict, Any
import logging
import math

from matplotlib.figure import Figure
from matplotlib.axes import Axes

from pidf_graph.core.config import ConfigStore, GainSet
from pidf_graph.core.series import SeriesRecorder
from pidf_graph.utils.formatting import format_number

log = logging.getLogger(__name__)

CHART_TITLE = "PIDFGraph"


def gains_label(gains: GainSet) -> str:
    """Legend label of the recorded series, e.g. ``P=0.1 , I=0.0 , D=0.0 , F=0.0``."""
    return (
        f"P={format_number(gains.p)} , I={format_number(gains.i)} , "
        f"D={format_number(gains.d)} , F={format_number(gains.f)}"
    )


class ChartRenderer:
    """
    Builds the report chart from the current configuration and series.

    Rendering is stateless: the same inputs always give the same figure.
    The horizontal axis spans ``[0, time_cursor]`` regardless of where
    explicit-time samples fall, so out-of-range samples are clipped.
    """

    def __init__(self, dpi: int = 100):
        """
        Initialize renderer.

        Args:
            dpi: Dots per inch used to turn the pixel resolution into a
                 figure size
        """
        self._dpi = dpi

        self._colors = {
            'measurement': '#1F77B4',
            'setpoint': '#000000',
            'tolerance': '#FF0000',
        }
        # Dash patterns are (on, off) in points, scaled by matplotlib with
        # the line width.
        self._dashes = {
            'setpoint': (15.0, 5.0),
            'tolerance': (5.0, 7.5),
        }
        self._line_width = 2.0

    @property
    def dpi(self) -> int:
        return self._dpi

    def render(self, config: ConfigStore, recorder: SeriesRecorder) -> Figure:
        """
        Render the chart.

        Args:
            config: Gains, target and resolution of the run
            recorder: Recorded samples and time cursor

        Returns:
            Matplotlib Figure sized to the configured resolution
        """
        resolution = config.resolution
        fig = Figure(
            figsize=(resolution.width / self._dpi, resolution.height / self._dpi),
            dpi=self._dpi,
        )
        ax = fig.add_subplot(1, 1, 1)

        ax.plot(
            recorder.times, recorder.values, '-',
            color=self._colors['measurement'],
            linewidth=self._line_width,
            solid_capstyle='round',
            solid_joinstyle='round',
            antialiased=True,
            label=gains_label(config.gains),
        )

        target = config.target
        self._add_reference_line(ax, target.setpoint, 'setpoint')
        self._add_reference_line(ax, target.lower, 'tolerance')
        self._add_reference_line(ax, target.upper, 'tolerance')

        ax.set_title(CHART_TITLE, fontsize=14, fontweight='bold')
        ax.set_xlabel('Time')
        ax.set_ylabel('Value')
        ax.legend(loc='upper right')
        ax.grid(True, alpha=0.3)

        self._set_domain(ax, recorder.time_cursor)

        fig.tight_layout()
        return fig

    def _add_reference_line(self, ax: Axes, y: float, kind: str) -> None:
        """Draw a horizontal dashed marker, skipping values that cannot be placed."""
        if not math.isfinite(y):
            log.warning("Skipping %s line at non-finite value %r", kind, y)
            return
        ax.axhline(
            y=y,
            color=self._colors[kind],
            linewidth=self._line_width,
            linestyle=(0, self._dashes[kind]),
            dash_capstyle='round',
            dash_joinstyle='round',
            antialiased=True,
        )

    def _set_domain(self, ax: Axes, cursor: float) -> None:
        # [0, 0] is not a drawable range; leave autoscaling in charge
        # until at least one implicit sample has moved the cursor.
        if math.isfinite(cursor) and cursor > 0:
            ax.set_xlim(0.0, cursor)

    def describe(self, config: ConfigStore, recorder: SeriesRecorder) -> Dict[str, Any]:
        """
        Summarize what :meth:`render` will draw without building a figure.

        Returns:
            Dictionary with label, reference levels, domain and pixel size
        """
        target = config.target
        cursor = recorder.time_cursor
        return {
            'label': gains_label(config.gains),
            'setpoint': target.setpoint,
            'tolerance_band': (target.lower, target.upper),
            'domain': (0.0, cursor) if math.isfinite(cursor) and cursor > 0 else None,
            'size': (config.resolution.width, config.resolution.height),
            'points': len(recorder),
        }
