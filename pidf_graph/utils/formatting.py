"""Number formatting shared by the chart label and the data sheet."""

from typing import Iterable


def format_number(value: float) -> str:
    """
    Format a number the way it appears in reports.

    Uses the shortest repr that round-trips through ``float``, so integers
    gain a trailing ``.0`` (``90`` -> ``"90.0"``) and ``0.1`` stays ``"0.1"``.
    """
    return repr(float(value))


def join_numbers(values: Iterable[float], separator: str = " , ") -> str:
    """Format and join several numbers with the report separator."""
    return separator.join(format_number(v) for v in values)
