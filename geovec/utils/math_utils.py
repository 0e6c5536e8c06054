"""Scalar math helpers used by both vector modules."""

from __future__ import annotations

import math


TWO_PI = 2.0 * math.pi


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values.

    ``t`` is not clamped, so values outside ``[0, 1]`` extrapolate.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor

    Returns:
        Interpolated value: a + (b - a) * t
    """
    return a + (b - a) * t


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def is_close(a: float, b: float, tolerance: float) -> bool:
    """Return ``True`` when ``|a - b| <= tolerance``."""
    return abs(a - b) <= tolerance


def format_float(value: float) -> str:
    """Render a component with the trailing ``.0`` of whole numbers dropped."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def safe_acos(value: float) -> float:
    """Arc cosine with the argument clamped to ``[-1, 1]``.

    Rounding can push a normalised dot product slightly past the unit
    interval, where :func:`math.acos` would raise.
    """
    if math.isnan(value):
        return math.nan
    return math.acos(clamp(value, -1.0, 1.0))


__all__ = [
    "TWO_PI",
    "clamp",
    "format_float",
    "is_close",
    "lerp",
    "safe_acos",
]
