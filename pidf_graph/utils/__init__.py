"""Utility functions and helpers."""

from pidf_graph.utils.validators import (
    ValidationError,
    validate_type,
    validate_pixels,
)
from pidf_graph.utils.formatting import format_number, join_numbers

__all__ = [
    "ValidationError",
    "validate_type",
    "validate_pixels",
    "format_number",
    "join_numbers",
]
