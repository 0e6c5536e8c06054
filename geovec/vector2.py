"""Two dimensional Euclidean vector on the cartesian plane.

Mirrors :mod:`geovec.vector3` for the plane: headings are a single signed
angle measured counter-clockwise from the X axis, and the cross product
is the scalar z component of the 3D cross product.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from . import random_source
from .config import settings
from .errors import DivisionByZeroError, ZeroVectorError
from .utils.math_utils import format_float, is_close, safe_acos
from .utils.math_utils import lerp as _lerp_scalar

logger = logging.getLogger(__name__)


@dataclass
class Vector2:
    """Mutable 2D vector with ``x`` and ``y`` components."""

    x: float = 0.0
    y: float = 0.0

    # Construction ---------------------------------------------------------
    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> "Vector2":
        return cls(math.cos(angle) * length, math.sin(angle) * length)

    @classmethod
    def random(cls, length: float = 1.0, rng: Optional[random.Random] = None) -> "Vector2":
        """Return a vector of ``length`` at a uniformly random heading."""

        return cls.from_angle(random_source.random_angle(rng), length)

    # Representation -------------------------------------------------------
    def __str__(self) -> str:
        return f"{{X: {format_float(self.x)}, Y: {format_float(self.y)}}}"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    # Comparison -----------------------------------------------------------
    def equal(self, other: "Vector2", tolerance: float = 0.0) -> bool:
        """Component-wise match within ``tolerance`` plus ``EQUAL_TOLERANCE``."""

        tolerance = settings.EQUAL_TOLERANCE + tolerance
        return is_close(self.x, other.x, tolerance) and is_close(self.y, other.y, tolerance)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    # Copying --------------------------------------------------------------
    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def assign(self, other: "Vector2") -> "Vector2":
        self.x = other.x
        self.y = other.y
        return self

    # Magnitude and heading ------------------------------------------------
    def mag(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def mag_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def heading(self) -> float:
        """Angle from the X axis in ``(-π, π]``."""

        return math.atan2(self.y, self.x)

    def normalize(self) -> "Vector2":
        mag = self.mag()
        if mag == 0:
            logger.debug("normalize() on a zero vector left it unchanged")
            return self
        self.x /= mag
        self.y /= mag
        return self

    def resize(self, mag: float) -> "Vector2":
        """Set the magnitude to ``mag``; the zero vector stays zero."""

        current = self.mag()
        if current == 0:
            logger.debug("resize() on a zero vector left it unchanged")
            return self
        self.x = self.x * mag / current
        self.y = self.y * mag / current
        return self

    def rotate(self, angle: float) -> "Vector2":
        """Turn counter-clockwise by ``angle`` radians keeping the magnitude."""

        return self.set_heading(self.heading() + angle)

    def set_heading(self, angle: float) -> "Vector2":
        mag = self.mag()
        self.x = math.cos(angle) * mag
        self.y = math.sin(angle) * mag
        return self

    # In-place arithmetic --------------------------------------------------
    def add(self, other: "Vector2") -> "Vector2":
        self.x += other.x
        self.y += other.y
        return self

    def sub(self, other: "Vector2") -> "Vector2":
        self.x -= other.x
        self.y -= other.y
        return self

    def mult(self, scalar: float) -> "Vector2":
        self.x *= scalar
        self.y *= scalar
        return self

    def div(self, scalar: float) -> "Vector2":
        """Divide in place; a zero ``scalar`` raises instead of yielding inf."""

        if scalar == 0:
            raise DivisionByZeroError("Cannot divide a vector by zero.")
        self.x /= scalar
        self.y /= scalar
        return self

    # Operators ------------------------------------------------------------
    def __add__(self, other: "Vector2") -> "Vector2":
        return add(self, other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return sub(self, other)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return mult(self, scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return div(self, scalar)

    # Products and measures ------------------------------------------------
    def dist(self, other: "Vector2") -> float:
        return dist(self, other)

    def dot(self, other: "Vector2") -> float:
        return dot(self, other)

    def cross(self, other: "Vector2") -> float:
        return cross(self, other)

    def angle_between(self, other: "Vector2", strict: bool = False) -> float:
        return angle_between(self, other, strict=strict)


def from_angle(angle: float, length: float = 1.0) -> Vector2:
    return Vector2.from_angle(angle, length)


def random_vector(length: float = 1.0, rng: Optional[random.Random] = None) -> Vector2:
    return Vector2.random(length, rng)


def copy(v: Vector2) -> Vector2:
    return Vector2(v.x, v.y)


def equal(v1: Vector2, v2: Vector2, tolerance: float = 0.0) -> bool:
    return v1.equal(v2, tolerance)


def unit(v: Vector2) -> Vector2:
    mag = v.mag()
    if mag == 0:
        return Vector2.zero()
    return Vector2(v.x / mag, v.y / mag)


def resized(v: Vector2, mag: float) -> Vector2:
    return copy(v).resize(mag)


def rotate(v: Vector2, angle: float) -> Vector2:
    """Return ``v`` turned counter-clockwise by ``angle`` radians."""

    return copy(v).rotate(angle)


def set_heading(v: Vector2, angle: float) -> Vector2:
    return copy(v).set_heading(angle)


def add(v1: Vector2, v2: Vector2) -> Vector2:
    return Vector2(v1.x + v2.x, v1.y + v2.y)


def sub(v1: Vector2, v2: Vector2) -> Vector2:
    return Vector2(v1.x - v2.x, v1.y - v2.y)


def mult(v: Vector2, scalar: float) -> Vector2:
    return Vector2(v.x * scalar, v.y * scalar)


def div(v: Vector2, scalar: float) -> Vector2:
    return copy(v).div(scalar)


def dist(v1: Vector2, v2: Vector2) -> float:
    return sub(v1, v2).mag()


def dot(v1: Vector2, v2: Vector2) -> float:
    return v1.x * v2.x + v1.y * v2.y


def cross(v1: Vector2, v2: Vector2) -> float:
    """Scalar cross product, the z component of ``v1 × v2`` in 3D.

    Positive when ``v2`` lies counter-clockwise of ``v1``.
    """

    return v1.x * v2.y - v1.y * v2.x


def angle_between(v1: Vector2, v2: Vector2, strict: bool = False) -> float:
    """Signed angle from ``v1`` to ``v2`` in ``(-π, π]``.

    The result is negative when ``v2`` lies clockwise of ``v1``. A zero
    operand gives NaN, or raises :class:`ZeroVectorError` when ``strict``.
    """

    m1 = v1.mag()
    m2 = v2.mag()
    if m1 == 0 or m2 == 0:
        if strict:
            raise ZeroVectorError("Cannot calculate the angle between zero vectors.")
        return math.nan
    result = safe_acos(dot(v1, v2) / (m1 * m2))
    if cross(v1, v2) < 0:
        result = -result
    return result


def lerp(v1: Vector2, v2: Vector2, t: float) -> Vector2:
    return Vector2(_lerp_scalar(v1.x, v2.x, t), _lerp_scalar(v1.y, v2.y, t))


def lerp2(v1: Vector2, v2: Vector2, n: int, i: int) -> Vector2:
    if n == 0:
        raise DivisionByZeroError("lerp2() needs a non-zero step count.")
    return lerp(v1, v2, i / n)


__all__ = [
    "Vector2",
    "add",
    "angle_between",
    "copy",
    "cross",
    "dist",
    "div",
    "dot",
    "equal",
    "from_angle",
    "lerp",
    "lerp2",
    "mult",
    "random_vector",
    "resized",
    "rotate",
    "set_heading",
    "sub",
    "unit",
]
