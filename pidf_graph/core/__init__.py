"""Core recorder components."""

from pidf_graph.core.config import ConfigStore, GainSet, Target, RenderConfig
from pidf_graph.core.series import SeriesRecorder, Sample, DEFAULT_STEP
from pidf_graph.core.graph import PIDFGraph, get_default_graph, reset_default_graph

__all__ = [
    "ConfigStore",
    "GainSet",
    "Target",
    "RenderConfig",
    "SeriesRecorder",
    "Sample",
    "DEFAULT_STEP",
    "PIDFGraph",
    "get_default_graph",
    "reset_default_graph",
]
