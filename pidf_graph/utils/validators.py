"""
Validation utilities for parameter checking.

Gains and targets are stored exactly as given; only values that would make
a report impossible to produce (such as the raster size) are checked here.
"""

from typing import Any, Type, Union, Tuple
import numbers


class ValidationError(ValueError):
    """Custom exception for validation failures."""
    pass


def validate_type(value: Any, name: str, expected_type: Union[Type, Tuple[Type, ...]]) -> Any:
    """
    Validate that a value is of the expected type.

    Args:
        value: The value to validate
        name: Parameter name for error messages
        expected_type: Expected type or tuple of types

    Returns:
        The validated value

    Raises:
        ValidationError: If value is not of expected type
    """
    if not isinstance(value, expected_type):
        if isinstance(expected_type, tuple):
            type_names = " or ".join(t.__name__ for t in expected_type)
        else:
            type_names = expected_type.__name__
        raise ValidationError(
            f"{name} must be of type {type_names}, got {type(value).__name__}"
        )
    return value


def validate_pixels(value: Any, name: str) -> int:
    """
    Validate a raster dimension: a strictly positive integer.

    Args:
        value: The value to validate
        name: Parameter name for error messages

    Returns:
        The validated value as int

    Raises:
        ValidationError: If value is not a positive integer
    """
    # bool is an Integral too, but True pixels is never meant
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return int(value)
