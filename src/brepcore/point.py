"""Three component vectors over bounded scalars.

A ``Point`` doubles as a position and as a direction/tangent vector.
All components
are :class:`~brepcore.efloat.BoundedScalar` values, so every predicate
(``is_zero``, ``is_parallel``, equality) goes through the tolerance
contract of :mod:`brepcore.efloat`.

Copyright (c) 2026 brepcore contributors
MIT License
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from brepcore import efloat as ef
from brepcore.efloat import BoundedScalar, efloat
from brepcore.errors import DegenerateOperation


@dataclass(frozen=True, eq=False)
class Point:
    x: BoundedScalar
    y: BoundedScalar
    z: BoundedScalar

    def __post_init__(self):
        object.__setattr__(self, 'x', efloat(self.x))
        object.__setattr__(self, 'y', efloat(self.y))
        object.__setattr__(self, 'z', efloat(self.z))

    @staticmethod
    def zero() -> 'Point':
        return Point(0.0, 0.0, 0.0)

    @staticmethod
    def unit_x() -> 'Point':
        return Point(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> 'Point':
        return Point(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> 'Point':
        return Point(0.0, 0.0, 1.0)

    def __repr__(self):
        return "Point({}, {}, {})".format(self.x, self.y, self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        """Nominal coordinates as plain floats."""
        return (self.x.value, self.y.value, self.z.value)

    ## vector algebra
    ## --------------

    def __add__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, c) -> 'Point':
        if isinstance(c, Point):
            return NotImplemented
        return Point(self.x * c, self.y * c, self.z * c)

    __rmul__ = __mul__

    def __truediv__(self, c) -> 'Point':
        return Point(self.x / c, self.y / c, self.z / c)

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y, -self.z)

    def dot(self, other: 'Point') -> BoundedScalar:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Point') -> 'Point':
        return Point(self.y * other.z - self.z * other.y,
                     self.z * other.x - self.x * other.z,
                     self.x * other.y - self.y * other.x)

    def norm_sq(self) -> BoundedScalar:
        return self.dot(self)

    def norm(self) -> BoundedScalar:
        return ef.sqrt(self.norm_sq())

    def is_zero(self) -> bool:
        return self.x.is_zero() and self.y.is_zero() and self.z.is_zero()

    def normalize(self) -> 'Point':
        """Unit vector in the direction of ``self``."""
        n = self.norm()
        if n.is_zero():
            raise DegenerateOperation('cannot normalize a zero vector', {'vector': self})
        return self / n

    def angle(self, other: 'Point') -> BoundedScalar:
        """Unsigned angle in ``[0, pi]`` between two non-zero vectors."""
        return ef.atan2(self.cross(other).norm(), self.dot(other))

    def signed_angle(self, other: 'Point', axis: 'Point') -> BoundedScalar:
        """Angle in ``(-pi, pi]`` from ``self`` to ``other`` measured
        counter-clockwise around ``axis``."""
        return ef.atan2(self.cross(other).dot(axis.normalize()), self.dot(other))

    def rotate(self, axis: 'Point', angle) -> 'Point':
        """Rotate around the unit vector ``axis`` by ``angle`` radians
        (Rodrigues' formula)."""
        k = axis.normalize()
        c = ef.cos(angle)
        s = ef.sin(angle)
        return self * c + k.cross(self) * s + k * (k.dot(self) * (1.0 - c))

    def is_parallel(self, other: 'Point') -> bool:
        """True for parallel and anti-parallel non-zero vectors."""
        return self.normalize().cross(other.normalize()).is_zero()

    def is_perpendicular(self, other: 'Point') -> bool:
        return self.normalize().dot(other.normalize()).is_zero()

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __ne__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None


def point(x=0.0, y=0.0, z=0.0) -> Point:
    """Convenience function for making a point from practically anything:
    three numbers, or a single sequence of two or three numbers."""
    if isinstance(x, Point):
        return x
    if isinstance(x, (list, tuple)):
        coords = list(x) + [0.0] * (3 - len(x))
        return Point(coords[0], coords[1], coords[2])
    return Point(x, y, z)


def reference_axis(normal: Point) -> Point:
    """Canonical unit vector orthogonal to ``normal``.

    The world axis least aligned with the normal is projected into the
    plane orthogonal to it.  For a +z normal this is +x, which makes angles
    measured in ``(reference_axis, normal x reference_axis)`` agree with the
    usual counter-clockwise XY convention.
    """
    n = normal.normalize()
    ax = abs(n.x.value)
    ay = abs(n.y.value)
    az = abs(n.z.value)
    if ax <= ay and ax <= az:
        world = Point.unit_x()
    elif ay <= az:
        world = Point.unit_y()
    else:
        world = Point.unit_z()
    return (world - n * n.dot(world)).normalize()


def orthonormal_frame(normal: Point) -> Tuple[Point, Point, Point]:
    """Right-handed frame ``(u, v, n)`` with ``u = reference_axis(n)``."""
    n = normal.normalize()
    u = reference_axis(n)
    return u, n.cross(u), n


__all__ = ['Point', 'point', 'reference_axis', 'orthonormal_frame']
