"""Three dimensional Euclidean vector with spherical coordinate helpers.

Instance methods that change a vector (``add``, ``normalize``,
``rotate_along_axis`` ...) work in place and return the instance so calls
can be chained. The module level functions and the arithmetic operators
never touch their operands and always build a new vector.

Angles follow the physics convention for spherical coordinates: ``theta``
is the azimuth measured in the XY plane from the X axis and ``phi`` is
the zenith measured from the Z axis.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from . import random_source
from .config import settings
from .errors import DivisionByZeroError
from .utils.math_utils import format_float, is_close, safe_acos
from .utils.math_utils import lerp as _lerp_scalar

logger = logging.getLogger(__name__)


@dataclass
class Vector3:
    """Mutable 3D vector with ``x``, ``y`` and ``z`` components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # Construction ---------------------------------------------------------
    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> "Vector3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> "Vector3":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_angles(cls, theta: float, phi: float, length: float = 1.0) -> "Vector3":
        """Build a vector from azimuth ``theta`` and zenith ``phi``."""

        sin_phi = math.sin(phi)
        return cls(
            length * math.cos(theta) * sin_phi,
            length * math.sin(theta) * sin_phi,
            length * math.cos(phi),
        )

    @classmethod
    def random(cls, length: float = 1.0, rng: Optional[random.Random] = None) -> "Vector3":
        """Return a vector of ``length`` pointing in a random direction.

        Both angles are drawn uniformly from ``[0, 2π)``, from ``rng`` when
        given and from the shared :mod:`geovec.random_source` otherwise.
        """

        theta = random_source.random_angle(rng)
        phi = random_source.random_angle(rng)
        return cls.from_angles(theta, phi, length)

    # Representation -------------------------------------------------------
    def __str__(self) -> str:
        return f"{{X: {format_float(self.x)}, Y: {format_float(self.y)}, Z: {format_float(self.z)}}}"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    # Comparison -----------------------------------------------------------
    def equal(self, other: "Vector3", tolerance: float = 0.0) -> bool:
        """Compare each component independently.

        Components match when they differ by at most ``tolerance`` plus the
        configured ``EQUAL_TOLERANCE``, which absorbs rounding error.
        """

        tolerance = settings.EQUAL_TOLERANCE + tolerance
        return (
            is_close(self.x, other.x, tolerance)
            and is_close(self.y, other.y, tolerance)
            and is_close(self.z, other.z, tolerance)
        )

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    # Copying --------------------------------------------------------------
    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def assign(self, other: "Vector3") -> "Vector3":
        """Overwrite the components with those of ``other``."""

        self.x = other.x
        self.y = other.y
        self.z = other.z
        return self

    # Magnitude ------------------------------------------------------------
    def mag(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def mag_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> "Vector3":
        """Scale to unit length; the zero vector is left unchanged."""

        mag = self.mag()
        if mag == 0:
            logger.debug("normalize() on a zero vector left it unchanged")
            return self
        self.x /= mag
        self.y /= mag
        self.z /= mag
        return self

    def resize(self, mag: float) -> "Vector3":
        """Set the magnitude to ``mag`` keeping the direction."""

        self.normalize()
        self.mult(mag)
        return self

    # In-place arithmetic --------------------------------------------------
    def add(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def sub(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def mult(self, scalar: float) -> "Vector3":
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    # Operators ------------------------------------------------------------
    def __add__(self, other: "Vector3") -> "Vector3":
        return add(self, other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return sub(self, other)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return mult(self, scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise DivisionByZeroError("Cannot divide a vector by zero.")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    # Products and measures ------------------------------------------------
    def dist(self, other: "Vector3") -> float:
        return dist(self, other)

    def dot(self, other: "Vector3") -> float:
        return dot(self, other)

    def cross(self, other: "Vector3") -> "Vector3":
        return cross(self, other)

    def angle(self, other: "Vector3") -> float:
        return angle(self, other)

    # Heading --------------------------------------------------------------
    def heading(self) -> Tuple[float, float]:
        """Return the ``(theta, phi)`` pair that :meth:`from_angles` inverts.

        ``phi`` is NaN for the zero vector, ``theta`` is then 0.
        """

        theta = math.atan2(self.y, self.x)
        mag = self.mag()
        if mag == 0:
            return theta, math.nan
        return theta, safe_acos(self.z / mag)

    def set_heading(self, theta: float, phi: float) -> "Vector3":
        """Point the vector along ``(theta, phi)`` keeping its magnitude."""

        return self.assign(Vector3.from_angles(theta, phi, self.mag()))

    # Decomposition and rotation --------------------------------------------
    def component(self, axis: "Vector3") -> Tuple["Vector3", "Vector3"]:
        return component(self, axis)

    def rotate_along_axis(self, axis: "Vector3", angle: float) -> "Vector3":
        return self.assign(rotate_along_axis(self, axis, angle))

    def reflect_through_plane(self, normal: "Vector3") -> "Vector3":
        return self.assign(reflect_through_plane(self, normal))


def from_angles(theta: float, phi: float, length: float = 1.0) -> Vector3:
    return Vector3.from_angles(theta, phi, length)


def random_vector(length: float = 1.0, rng: Optional[random.Random] = None) -> Vector3:
    return Vector3.random(length, rng)


def copy(v: Vector3) -> Vector3:
    return Vector3(v.x, v.y, v.z)


def equal(v1: Vector3, v2: Vector3, tolerance: float = 0.0) -> bool:
    return v1.equal(v2, tolerance)


def unit(v: Vector3) -> Vector3:
    """Return a unit vector along ``v``, or a new zero vector."""

    mag = v.mag()
    if mag == 0:
        return Vector3.zero()
    return Vector3(v.x / mag, v.y / mag, v.z / mag)


def resized(v: Vector3, mag: float) -> Vector3:
    return copy(v).resize(mag)


def set_heading(v: Vector3, theta: float, phi: float) -> Vector3:
    """Return a vector of the same length pointing along ``(theta, phi)``."""

    return copy(v).set_heading(theta, phi)


def add(v1: Vector3, v2: Vector3) -> Vector3:
    return Vector3(v1.x + v2.x, v1.y + v2.y, v1.z + v2.z)


def sub(v1: Vector3, v2: Vector3) -> Vector3:
    return Vector3(v1.x - v2.x, v1.y - v2.y, v1.z - v2.z)


def mult(v: Vector3, scalar: float) -> Vector3:
    return Vector3(v.x * scalar, v.y * scalar, v.z * scalar)


def dist(v1: Vector3, v2: Vector3) -> float:
    """Euclidean distance between two points given as vectors."""

    return sub(v1, v2).mag()


def dot(v1: Vector3, v2: Vector3) -> float:
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def cross(v1: Vector3, v2: Vector3) -> Vector3:
    """Right-handed cross product ``v1 × v2``."""

    return Vector3(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def angle(v1: Vector3, v2: Vector3) -> float:
    """Unsigned angle between two vectors in ``[0, π]``.

    Returns NaN when either vector has zero magnitude.
    """

    m1 = v1.mag()
    m2 = v2.mag()
    if m1 == 0 or m2 == 0:
        return math.nan
    return safe_acos(dot(v1, v2) / (m1 * m2))


def component(v: Vector3, axis: Vector3) -> Tuple[Vector3, Vector3]:
    """Split ``v`` into parts parallel and perpendicular to ``axis``.

    A zero ``axis`` defines no direction, both parts are then zero vectors.
    """

    if axis.is_zero():
        logger.debug("component() along a zero axis returned zero parts")
        return Vector3.zero(), Vector3.zero()
    parallel = unit(axis)
    parallel.mult(dot(v, parallel))
    perpendicular = sub(v, parallel)
    return parallel, perpendicular


def _rotate_on_plane(v: Vector3, normal: Vector3, angle: float) -> Vector3:
    # v must lie in the plane orthogonal to normal
    rotated = mult(v, math.cos(angle))
    rotated.add(cross(unit(normal), v).mult(math.sin(angle)))
    return rotated


def rotate_along_axis(v: Vector3, axis: Vector3, angle: float) -> Vector3:
    """Rotate ``v`` by ``angle`` radians around ``axis``.

    Only the part of ``v`` perpendicular to ``axis`` turns; the right hand
    rule gives the direction. A zero ``axis`` returns an unchanged copy.
    """

    if axis.is_zero():
        logger.debug("rotate_along_axis() around a zero axis is a no-op")
        return copy(v)
    parallel, perpendicular = component(v, axis)
    return parallel.add(_rotate_on_plane(perpendicular, axis, angle))


def reflect_through_plane(v: Vector3, normal: Vector3) -> Vector3:
    """Mirror ``v`` through the plane with the given ``normal``."""

    if normal.is_zero():
        logger.debug("reflect_through_plane() with a zero normal is a no-op")
        return copy(v)
    n = unit(normal)
    return sub(v, n.mult(2 * dot(v, n)))


def lerp(v1: Vector3, v2: Vector3, t: float) -> Vector3:
    """Linear interpolation ``v1 + (v2 - v1) * t``; ``t`` is not clamped."""

    return Vector3(
        _lerp_scalar(v1.x, v2.x, t),
        _lerp_scalar(v1.y, v2.y, t),
        _lerp_scalar(v1.z, v2.z, t),
    )


def lerp2(v1: Vector3, v2: Vector3, n: int, i: int) -> Vector3:
    """Step ``i`` of ``n`` between ``v1`` and ``v2``."""

    if n == 0:
        raise DivisionByZeroError("lerp2() needs a non-zero step count.")
    return lerp(v1, v2, i / n)


__all__ = [
    "Vector3",
    "add",
    "angle",
    "component",
    "copy",
    "cross",
    "dist",
    "dot",
    "equal",
    "from_angles",
    "lerp",
    "lerp2",
    "mult",
    "random_vector",
    "reflect_through_plane",
    "resized",
    "rotate_along_axis",
    "set_heading",
    "sub",
    "unit",
]
