"""
Append-only recording of (time, value) samples.

The recorder owns the time cursor used for implicit timestamps. Samples
keep insertion order; explicit timestamps are stored as given and are not
sorted or checked for monotonicity.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
import logging

import numpy as np

log = logging.getLogger(__name__)

DEFAULT_STEP = 0.02  # One cycle of a 50 Hz control loop


@dataclass(frozen=True)
class Sample:
    """Single recorded measurement."""
    time: float
    value: float


class SeriesRecorder:
    """
    Accumulates samples for the current run.

    Example:
        >>> recorder = SeriesRecorder()
        >>> recorder.add(10.0)
        >>> recorder.add(20.0)
        >>> recorder.times
        array([0.  , 0.02])
    """

    def __init__(self, step: float = DEFAULT_STEP):
        """
        Initialize recorder.

        Args:
            step: Time increment applied after every implicit-time sample
        """
        self._samples: List[Sample] = []
        self._cursor: float = 0.0
        self._step: float = step

    def add(self, value: float, time: Optional[float] = None) -> None:
        """
        Record a measurement.

        Args:
            value: Measured process value
            time: Explicit timestamp. When given, the cursor is not
                  advanced; when omitted, the current cursor is used and
                  then advanced by ``step``.
        """
        if time is None:
            self._samples.append(Sample(time=self._cursor, value=value))
            self._cursor += self._step
        else:
            self._samples.append(Sample(time=time, value=value))

    def reset(self) -> None:
        """Drop all samples and rewind the cursor to 0 with the default step."""
        dropped = len(self._samples)
        self._samples = []
        self._cursor = 0.0
        self._step = DEFAULT_STEP
        if dropped:
            log.debug("Series reset, dropped %d samples", dropped)

    @property
    def step(self) -> float:
        """Time increment between implicit samples."""
        return self._step

    @step.setter
    def step(self, value: float) -> None:
        self._step = value

    @property
    def time_cursor(self) -> float:
        """Time that the next implicit sample will get."""
        return self._cursor

    @property
    def samples(self) -> Tuple[Sample, ...]:
        """Recorded samples in insertion order."""
        return tuple(self._samples)

    @property
    def times(self) -> np.ndarray:
        """Sample times as a float array."""
        return np.array([s.time for s in self._samples], dtype=float)

    @property
    def values(self) -> np.ndarray:
        """Sample values as a float array."""
        return np.array([s.value for s in self._samples], dtype=float)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(list(self._samples))
