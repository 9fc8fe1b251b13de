"""
Unit tests for SeriesRecorder.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pidf_graph.core.series import SeriesRecorder, Sample, DEFAULT_STEP


class TestSeriesRecorder:
    """Test suite for SeriesRecorder."""

    def test_initial_state(self):
        """Test empty recorder."""
        recorder = SeriesRecorder()
        assert len(recorder) == 0
        assert recorder.time_cursor == 0.0
        assert recorder.step == DEFAULT_STEP == 0.02

    def test_implicit_times(self):
        """Test implicit adds use cursor and advance by step."""
        recorder = SeriesRecorder()
        values = [5.0, 6.0, 7.0, 8.0, 9.0]
        for v in values:
            recorder.add(v)

        expected_times = np.arange(len(values)) * 0.02
        np.testing.assert_allclose(recorder.times, expected_times, atol=1e-12)
        np.testing.assert_array_equal(recorder.values, values)
        assert recorder.time_cursor == pytest.approx(len(values) * 0.02)

    def test_first_samples_exact(self):
        """Test the first two implicit samples."""
        recorder = SeriesRecorder()
        recorder.add(10.0)
        recorder.add(20.0)
        assert recorder.samples == (Sample(0.0, 10.0), Sample(0.02, 20.0))

    def test_explicit_time_does_not_move_cursor(self):
        """Test explicit timestamps leave the cursor alone."""
        recorder = SeriesRecorder()
        recorder.add(1.0)
        recorder.add(2.0, time=100.0)
        recorder.add(3.0)

        assert recorder.samples[1] == Sample(time=100.0, value=2.0)
        assert recorder.samples[2].time == pytest.approx(0.02)

    def test_insertion_order_kept(self):
        """Test explicit samples are not sorted by time."""
        recorder = SeriesRecorder()
        recorder.add(1.0, time=3.0)
        recorder.add(2.0, time=1.0)
        recorder.add(3.0, time=2.0)
        assert list(recorder.times) == [3.0, 1.0, 2.0]

    def test_custom_step(self):
        """Test changing the step."""
        recorder = SeriesRecorder()
        recorder.step = 0.5
        recorder.add(1.0)
        recorder.add(2.0)
        assert list(recorder.times) == [0.0, 0.5]
        assert recorder.time_cursor == 1.0

    def test_reset(self):
        """Test reset clears samples, cursor and step."""
        recorder = SeriesRecorder()
        recorder.step = 1.0
        for v in range(10):
            recorder.add(float(v))

        recorder.reset()
        assert len(recorder) == 0
        assert recorder.time_cursor == 0.0
        assert recorder.step == DEFAULT_STEP

    def test_samples_snapshot(self):
        """Test samples view is detached from later adds."""
        recorder = SeriesRecorder()
        recorder.add(1.0)
        snapshot = recorder.samples
        recorder.add(2.0)
        assert len(snapshot) == 1
        assert len(recorder) == 2

    def test_non_finite_values_stored(self):
        """Test NaN and infinite values are recorded as given."""
        recorder = SeriesRecorder()
        recorder.add(float('nan'))
        recorder.add(float('inf'))
        assert np.isnan(recorder.values[0])
        assert np.isinf(recorder.values[1])

    def test_iteration(self):
        """Test iterating yields samples in order."""
        recorder = SeriesRecorder()
        for v in (3.0, 2.0, 1.0):
            recorder.add(v)
        assert [s.value for s in recorder] == [3.0, 2.0, 1.0]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
