"""Scalar helpers shared by the vector modules."""

from .math_utils import clamp, format_float, is_close, lerp, safe_acos

__all__ = ["clamp", "format_float", "is_close", "lerp", "safe_acos"]
