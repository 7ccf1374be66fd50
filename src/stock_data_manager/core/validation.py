"""Invariant enforcement helpers for prices and indicator periods."""

import math
from typing import Iterable, List


def require_finite(name: str, x: float) -> float:
    """
    Require that a value is finite (not NaN or inf).

    Args:
        name: Name of the value for error messages
        x: Value to check

    Returns:
        The value as float if finite

    Raises:
        ValueError: If value is not numeric or not finite
    """
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        raise ValueError(f"{name} must be a number, got {type(x).__name__}")
    if not math.isfinite(x):
        raise ValueError(f"{name} must be finite, got {x}")
    return float(x)


def normalize_periods(name: str, periods: Iterable[int]) -> List[int]:
    """
    Validate an indicator period set.

    Duplicates are collapsed keeping the first occurrence, so the
    configured order is preserved.

    Raises:
        ValueError: If any period is not a positive integer
    """
    result: List[int] = []
    for p in periods:
        if isinstance(p, bool) or not isinstance(p, int):
            raise ValueError(f"{name} must contain integers, got {p!r}")
        if p <= 0:
            raise ValueError(f"{name} must contain positive integers, got {p}")
        if p not in result:
            result.append(p)
    return result
