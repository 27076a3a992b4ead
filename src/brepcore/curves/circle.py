"""Circles in arbitrary planes."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Optional

from brepcore import efloat as ef
from brepcore.curves import periodic
from brepcore.curves.ellipse import Ellipse
from brepcore.efloat import BoundedScalar, efloat
from brepcore.errors import UnsupportedOperation, require
from brepcore.point import Point, reference_axis


@dataclass(frozen=True, eq=False)
class Circle:
    """Circle around ``basis`` in the plane orthogonal to ``normal``.

    Angles are measured counter-clockwise around the normal, starting at
    :func:`~brepcore.point.reference_axis` of the normal.  Negating the
    normal reverses the direction of travel.
    """

    basis: Point
    normal: Point
    radius: BoundedScalar

    def __post_init__(self):
        require(not self.normal.is_zero(), 'circle normal must not be zero')
        radius = efloat(self.radius)
        require(radius.is_positive(), 'circle radius must be positive', radius=radius)
        object.__setattr__(self, 'normal', self.normal.normalize())
        object.__setattr__(self, 'radius', radius)

    @cached_property
    def _frame(self):
        u = reference_axis(self.normal)
        return u, self.normal.cross(u)

    def angle(self, p: Point):
        u, v = self._frame
        rel = p - self.basis
        return ef.wrap_angle(ef.atan2(rel.dot(v), rel.dot(u)))

    parameter = angle

    def point_at_angle(self, a) -> Point:
        u, v = self._frame
        return self.basis + u * (self.radius * ef.cos(a)) + v * (self.radius * ef.sin(a))

    def as_ellipse(self) -> Ellipse:
        u, v = self._frame
        return Ellipse(self.basis, self.normal, u * self.radius, v * self.radius)

    def transform(self, transform):
        """Image of the circle; a non-uniform scale turns it into an
        :class:`Ellipse`."""
        u, v = self._frame
        basis = transform.apply(self.basis)
        a = transform.apply_vector(u * self.radius)
        b = transform.apply_vector(v * self.radius)
        if not a.normalize().dot(b.normalize()).is_zero():
            raise UnsupportedOperation('sheared circles are not supported yet',
                                       {'transform': transform})
        if a.norm() == b.norm():
            return Circle(basis, a.cross(b), a.norm())
        return Ellipse(basis, a.cross(b), a, b)

    def neg(self) -> 'Circle':
        return Circle(self.basis, -self.normal, self.radius)

    def tangent(self, p: Point) -> Point:
        require(self.on_curve(p), 'point is not on circle', point=p)
        return self.normal.cross(p - self.basis).normalize()

    def on_curve(self, p: Point) -> bool:
        rel = p - self.basis
        return rel.dot(self.normal).is_zero() and rel.norm() == self.radius

    def _bound_angles(self, start, end):
        a0 = a1 = None
        if start is not None:
            require(self.on_curve(start), 'start is not on circle', start=start)
            a0 = self.angle(start)
        if end is not None:
            require(self.on_curve(end), 'end is not on circle', end=end)
            a1 = self.angle(end)
        return a0, a1

    def interpolate(self, start: Optional[Point], end: Optional[Point], t) -> Point:
        a0, a1 = self._bound_angles(start, end)
        return self.point_at_angle(periodic.interpolate_angle(a0, a1, t))

    def between(self, m: Point, start: Optional[Point], end: Optional[Point]) -> bool:
        require(self.on_curve(m), 'point is not on circle', point=m)
        a0, a1 = self._bound_angles(start, end)
        return periodic.angle_between(self.angle(m), a0, a1)

    def get_midpoint(self, start: Optional[Point], end: Optional[Point]) -> Point:
        if start is not None and end is not None:
            a0, a1 = self._bound_angles(start, end)
            mid = ((start - self.basis) + (end - self.basis)) * 0.5
            if mid.is_zero():
                return self.point_at_angle(periodic.midpoint_angle(a0, a1))
            mid = mid.normalize() * self.radius
            p1 = self.basis + mid
            if self.between(p1, start, end):
                return p1
            return self.basis - mid
        if start is not None:
            require(self.on_curve(start), 'start is not on circle', start=start)
            return self.basis - (start - self.basis)
        if end is not None:
            require(self.on_curve(end), 'end is not on circle', end=end)
            return self.basis - (end - self.basis)
        return self.point_at_angle(0.0)

    def project(self, p: Point) -> Point:
        v = p - self.basis
        v = v - self.normal * v.dot(self.normal)
        return v.normalize() * self.radius + self.basis

    def distance(self, x: Point, y: Point):
        require(self.on_curve(x) and self.on_curve(y), 'points are not on circle')
        return self.radius * (x - self.basis).angle(y - self.basis)

    def __eq__(self, other):
        if not isinstance(other, Circle):
            return NotImplemented
        return (self.basis == other.basis and self.normal == other.normal
                and self.radius == other.radius)

    def __ne__(self, other):
        if not isinstance(other, Circle):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None
