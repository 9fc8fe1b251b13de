"""
Unit tests for run configuration records and ConfigStore.
"""

import math
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pidf_graph.core.config import (
    ConfigStore,
    GainSet,
    Target,
    RenderConfig,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
)
from pidf_graph.utils.validators import ValidationError


class TestGainSet:
    """Test suite for GainSet."""

    def test_f_defaults_to_zero(self):
        """Test feed-forward gain defaults to 0."""
        gains = GainSet(p=1.0, i=2.0, d=3.0)
        assert gains.f == 0.0

    def test_dict_roundtrip(self):
        """Test dictionary serialization."""
        gains = GainSet(p=0.1, i=0.03, d=0.7, f=0.2)
        assert GainSet.from_dict(gains.to_dict()) == gains

    def test_from_dict_missing_f(self):
        """Test from_dict without f."""
        gains = GainSet.from_dict({'p': 1, 'i': 2, 'd': 3})
        assert gains == GainSet(p=1.0, i=2.0, d=3.0, f=0.0)

    def test_json_roundtrip(self):
        """Test JSON serialization."""
        gains = GainSet(p=1.5, i=0.25, d=0.0, f=-3.0)
        assert GainSet.from_json(gains.to_json()) == gains


class TestTarget:
    """Test suite for Target."""

    def test_band_edges(self):
        """Test lower and upper band edges."""
        target = Target(setpoint=90.0, tolerance=5.0)
        assert target.lower == 85.0
        assert target.upper == 95.0

    def test_negative_tolerance_accepted(self):
        """Test negative tolerance is stored unchanged (edges swap)."""
        target = Target(setpoint=10.0, tolerance=-2.0)
        assert target.tolerance == -2.0
        assert target.lower == 12.0
        assert target.upper == 8.0

    def test_json_roundtrip(self):
        """Test JSON serialization."""
        target = Target(setpoint=-45.0, tolerance=0.5)
        assert Target.from_json(target.to_json()) == target


class TestRenderConfig:
    """Test suite for RenderConfig."""

    def test_defaults(self):
        """Test default resolution."""
        config = RenderConfig()
        assert config.width == 700
        assert config.height == 500

    def test_dict_roundtrip(self):
        """Test dictionary serialization."""
        config = RenderConfig(width=800, height=600)
        assert RenderConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize("width,height", [(0, 500), (700, -1), (700.5, 500), (True, 500)])
    def test_invalid_dimensions(self, width, height):
        """Test non-positive or non-integer dimensions are rejected."""
        with pytest.raises(ValidationError):
            RenderConfig(width=width, height=height)


class TestConfigStore:
    """Test suite for ConfigStore."""

    def test_initial_state_is_zero(self):
        """Test unconfigured store uses zero gains and target."""
        store = ConfigStore()
        assert (store.p, store.i, store.d, store.f) == (0.0, 0.0, 0.0, 0.0)
        assert (store.setpoint, store.tolerance) == (0.0, 0.0)
        assert store.resolution == RenderConfig(DEFAULT_WIDTH, DEFAULT_HEIGHT)

    def test_configure_sets_gains(self):
        """Test configure stores all four gains."""
        store = ConfigStore()
        store.configure(GainSet(p=0.1, i=0.03, d=0.7, f=0.5))
        assert store.p == 0.1
        assert store.i == 0.03
        assert store.d == 0.7
        assert store.f == 0.5

    def test_configure_copies_gains(self):
        """Test later changes to the passed GainSet do not leak in."""
        gains = GainSet(p=1.0, i=1.0, d=1.0)
        store = ConfigStore()
        store.configure(gains)
        gains.p = 99.0
        assert store.p == 1.0

    def test_configure_restores_default_resolution(self):
        """Test configure overwrites an earlier resolution."""
        store = ConfigStore()
        store.configure_resolution(1024, 768)
        store.configure(GainSet(p=1.0))
        assert store.resolution.width == 700
        assert store.resolution.height == 500

    def test_configure_keeps_target(self):
        """Test configuring gains never resets the target."""
        store = ConfigStore()
        store.configure_target(90.0, 5.0)
        store.configure(GainSet(p=2.0))
        assert store.setpoint == 90.0
        assert store.tolerance == 5.0

    def test_resolution_after_configure(self):
        """Test resolution set after configure is kept."""
        store = ConfigStore()
        store.configure(GainSet(p=1.0))
        store.configure_resolution(800, 600)
        assert store.resolution == RenderConfig(800, 600)

    def test_accessors_accept_any_number(self):
        """Test setters store values without validation."""
        store = ConfigStore()
        store.p = -1.0
        store.i = float('inf')
        store.d = float('nan')
        store.f = 3.0
        store.setpoint = -10.0
        store.tolerance = -1.0

        assert store.p == -1.0
        assert store.i == float('inf')
        assert math.isnan(store.d)
        assert store.f == 3.0
        assert store.setpoint == -10.0
        assert store.tolerance == -1.0

    def test_to_dict(self):
        """Test configuration snapshot."""
        store = ConfigStore()
        store.configure(GainSet(p=1.0, i=2.0, d=3.0))
        store.configure_target(4.0, 0.5)
        assert store.to_dict() == {
            'gains': {'p': 1.0, 'i': 2.0, 'd': 3.0, 'f': 0.0},
            'target': {'setpoint': 4.0, 'tolerance': 0.5},
            'resolution': {'width': 700, 'height': 500},
        }


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
