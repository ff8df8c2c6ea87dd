"""
Count helpers - no external dependencies.

Pure functions turning countable values into counts, and counts into text.
"""

__all__ = [
    "Countable",
    "to_count",
    "format_count",
]

import math
from numbers import Number
from typing import Any, Sized, Union

from .constants import NON_FINITE_SPELLINGS

Countable = Union[int, float, Sized]


def to_count(countable: Any) -> Union[int, float]:
    """
    Turn a countable value into a count.

    Args:
        countable: A number, or any sized value whose length is the count

    Returns:
        The number itself, or the length of the sized value

    Raises:
        TypeError: If the value is neither a number nor sized

    Example:
        >>> to_count(3)
        3
        >>> to_count(["Tick", "Trick", "Track"])
        3
    """
    if isinstance(countable, Number) and not isinstance(countable, bool):
        return countable
    if hasattr(countable, "__len__"):
        return len(countable)
    raise TypeError(
        f"Expected a number or a sized value, got {type(countable).__name__}"
    )


def format_count(count: Union[int, float]) -> str:
    """
    Format a count as its decimal string.

    Floats use their shortest form without a trailing ``.0`` and non-finite
    values are spelled out, so ``2.0`` renders the same as ``2``.

    Example:
        >>> format_count(0.75)
        '0.75'
        >>> format_count(2.0)
        '2'
        >>> format_count(float("inf"))
        'Infinity'
    """
    if isinstance(count, float):
        if math.isnan(count):
            return NON_FINITE_SPELLINGS["nan"]
        if math.isinf(count):
            return NON_FINITE_SPELLINGS["inf" if count > 0 else "-inf"]
        text = repr(count)
        return text[:-2] if text.endswith(".0") else text
    return str(count)
