"""Conversions between geovec vectors and :mod:`pygame.math` vectors."""

from __future__ import annotations

from typing import Union

from pygame.math import Vector2 as PygameVector2
from pygame.math import Vector3 as PygameVector3

from .vector2 import Vector2
from .vector3 import Vector3


def to_pygame(vector: Union[Vector2, Vector3]) -> Union[PygameVector2, PygameVector3]:
    """Return a pygame vector with the same components."""

    if isinstance(vector, Vector3):
        return PygameVector3(vector.x, vector.y, vector.z)
    if isinstance(vector, Vector2):
        return PygameVector2(vector.x, vector.y)
    raise TypeError(f"Expected a Vector2 or Vector3, got {type(vector).__name__}")


def from_pygame(vector: Union[PygameVector2, PygameVector3]) -> Union[Vector2, Vector3]:
    """Convert a pygame vector back into a mutable geovec vector."""

    if isinstance(vector, PygameVector3):
        return Vector3(float(vector.x), float(vector.y), float(vector.z))
    if isinstance(vector, PygameVector2):
        return Vector2(float(vector.x), float(vector.y))
    raise TypeError(f"Expected a pygame Vector2 or Vector3, got {type(vector).__name__}")


__all__ = ["from_pygame", "to_pygame"]
