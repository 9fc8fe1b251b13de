"""
Run configuration: controller gains, target band and render resolution.

Gains and targets are plain data. They are never range-checked, so NaN,
infinities and negative tolerances are all stored as given.
"""

from dataclasses import dataclass
from typing import Dict, Any
import json
import logging

from pidf_graph.utils.validators import validate_pixels

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 700
DEFAULT_HEIGHT = 500


@dataclass
class GainSet:
    """
    Controller gains for one run.

    Only used to label the recorded series; the recorder never
    interprets them.
    """

    p: float = 0.0  # Proportional gain
    i: float = 0.0  # Integral gain
    d: float = 0.0  # Derivative gain
    f: float = 0.0  # Feed-forward gain

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {'p': self.p, 'i': self.i, 'd': self.d, 'f': self.f}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GainSet':
        """Create from dictionary. Missing ``f`` defaults to 0."""
        return cls(
            p=float(data['p']),
            i=float(data['i']),
            d=float(data['d']),
            f=float(data.get('f', 0.0)),
        )

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> 'GainSet':
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def __str__(self) -> str:
        return f"GainSet(P={self.p}, I={self.i}, D={self.d}, F={self.f})"


@dataclass
class Target:
    """Setpoint and the acceptable deviation around it."""

    setpoint: float = 0.0
    tolerance: float = 0.0

    @property
    def lower(self) -> float:
        """Lower edge of the tolerance band."""
        return self.setpoint - self.tolerance

    @property
    def upper(self) -> float:
        """Upper edge of the tolerance band."""
        return self.setpoint + self.tolerance

    def to_dict(self) -> Dict[str, Any]:
        return {'setpoint': self.setpoint, 'tolerance': self.tolerance}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Target':
        return cls(setpoint=float(data['setpoint']), tolerance=float(data['tolerance']))

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> 'Target':
        return cls.from_dict(json.loads(json_str))


@dataclass
class RenderConfig:
    """Output raster size in pixels."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def __post_init__(self):
        """Validate dimensions after initialization."""
        self.width = validate_pixels(self.width, "width")
        self.height = validate_pixels(self.height, "height")

    def to_dict(self) -> Dict[str, Any]:
        return {'width': self.width, 'height': self.height}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RenderConfig':
        return cls(width=data['width'], height=data['height'])


class ConfigStore:
    """
    Holds the active gains, target and resolution of a recorder.

    Example:
        >>> store = ConfigStore()
        >>> store.configure(GainSet(p=0.1, i=0.03, d=0.7))
        >>> store.configure_target(90.0, 5.0)
        >>> store.target.upper
        95.0
    """

    def __init__(self):
        self._gains = GainSet()
        self._target = Target()
        self._resolution = RenderConfig()

    def configure(self, gains: GainSet) -> None:
        """
        Start a new run configuration.

        Replaces the gains and restores the default resolution, so any
        resolution override must be applied after this call. The target
        is left untouched.

        Args:
            gains: Gains for the new run
        """
        self._gains = GainSet(p=gains.p, i=gains.i, d=gains.d, f=gains.f)
        self._resolution = RenderConfig()
        log.debug("Configured gains %s", self._gains)

    def configure_target(self, setpoint: float, tolerance: float) -> None:
        """Set the target band. Has no other side effects."""
        self._target = Target(setpoint=setpoint, tolerance=tolerance)

    def configure_resolution(self, width: int, height: int) -> None:
        """
        Set the output raster size.

        Raises:
            ValidationError: If either dimension is not a positive integer
        """
        self._resolution = RenderConfig(width=width, height=height)

    @property
    def gains(self) -> GainSet:
        return self._gains

    @property
    def target(self) -> Target:
        return self._target

    @property
    def resolution(self) -> RenderConfig:
        return self._resolution

    @property
    def p(self) -> float:
        return self._gains.p

    @p.setter
    def p(self, value: float) -> None:
        self._gains.p = value

    @property
    def i(self) -> float:
        return self._gains.i

    @i.setter
    def i(self, value: float) -> None:
        self._gains.i = value

    @property
    def d(self) -> float:
        return self._gains.d

    @d.setter
    def d(self, value: float) -> None:
        self._gains.d = value

    @property
    def f(self) -> float:
        return self._gains.f

    @f.setter
    def f(self, value: float) -> None:
        self._gains.f = value

    @property
    def setpoint(self) -> float:
        return self._target.setpoint

    @setpoint.setter
    def setpoint(self, value: float) -> None:
        self._target.setpoint = value

    @property
    def tolerance(self) -> float:
        return self._target.tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self._target.tolerance = value

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the whole configuration."""
        return {
            'gains': self._gains.to_dict(),
            'target': self._target.to_dict(),
            'resolution': self._resolution.to_dict(),
        }
