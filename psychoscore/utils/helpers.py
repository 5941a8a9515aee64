"""Helper utilities for the PsychoScore engine.

Numeric coercion and rounding rules shared by every scorer live here so that
the same answer always turns into the same number.
"""

import math
import re
from typing import Any, Hashable, Iterable, List, Optional, Sequence, Union

Number = Union[int, float]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# Numeric utilities

def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    ``2.5`` rounds to 3 and ``-2.5`` rounds to -2. Composite factor values can
    be negative, so the tie direction matters.

    Args:
        value: Value to round

    Returns:
        int: Rounded value
    """
    return int(math.floor(value + 0.5))


def parse_int(value: Any) -> int:
    """Coerce a raw answer to an integer by its leading integer prefix.

    ``"4"`` gives 4, ``"4.7"`` gives 4, ``"3abc"`` gives 3. Anything without a
    leading integer (empty, ``None``, ``"abc"``, booleans) gives 0.

    Args:
        value: Raw answer value

    Returns:
        int: Parsed integer, 0 when no integer prefix exists
    """
    if value is None or isinstance(value, bool):
        return 0

    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


def clamp(value: Number, lower: Number, upper: Number) -> Number:
    return min(upper, max(lower, value))


def mean(values: Sequence[Number]) -> Optional[float]:
    """Arithmetic mean, or None for an empty sequence."""
    if not values:
        return None
    return sum(values) / len(values)


def percent_of(part: Number, total: Number) -> int:
    """Rounded percentage of ``part`` in ``total``; 0 when ``total`` is 0."""
    if not total:
        return 0
    return round_half_up(part / total * 100)


def likert_values(values: Iterable[int], lower: int = 1, upper: int = 5) -> List[int]:
    """Keep only values inside the closed answer scale."""
    return [value for value in values if lower <= value <= upper]


# Sequence utilities

def longest_identical_run(values: Sequence[Hashable]) -> int:
    """Length of the longest run of equal consecutive values.

    Args:
        values: Values in submission order

    Returns:
        int: Longest run length, 0 for an empty sequence
    """
    if not values:
        return 0

    longest = current = 1
    for previous, item in zip(values, values[1:]):
        current = current + 1 if item == previous else 1
        longest = max(longest, current)
    return longest


def answer_key(value: Any) -> str:
    """String form of an answer or id, used for equality checks."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
