"""Exceptions raised by the vector types."""

from __future__ import annotations


class VectorError(ValueError):
    """Base class for vector operation failures."""


class DivisionByZeroError(VectorError, ZeroDivisionError):
    """Raised when a vector is divided by a zero scalar."""


class ZeroVectorError(VectorError):
    """Raised by strict operations that need a non-zero direction."""


__all__ = ["DivisionByZeroError", "VectorError", "ZeroVectorError"]
