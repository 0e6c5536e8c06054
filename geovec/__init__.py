"""Fixed dimension Euclidean vectors for 2D and 3D geometry."""

from __future__ import annotations

import logging

from .config import settings as settings  # Re-export for runtime overrides.
from .errors import DivisionByZeroError, VectorError, ZeroVectorError
from .vector2 import Vector2
from .vector3 import Vector3

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DivisionByZeroError",
    "Vector2",
    "Vector3",
    "VectorError",
    "ZeroVectorError",
    "settings",
]
