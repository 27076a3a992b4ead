"""Ellipses in arbitrary planes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from brepcore import efloat as ef
from brepcore.curves import periodic
from brepcore.errors import UnsupportedOperation, require
from brepcore.point import Point


@dataclass(frozen=True, eq=False)
class Ellipse:
    """Ellipse ``basis + cos(a) * major_radius + sin(a) * minor_radius``.

    The normal is normalized on construction.  Normal, major radius and
    minor radius must be pairwise orthogonal; anything else is a caller
    bug and fails the construction.  The curve runs from the major radius
    toward the minor radius as the angle grows.
    """

    basis: Point
    normal: Point
    major_radius: Point
    minor_radius: Point

    def __post_init__(self):
        require(not self.normal.is_zero(), 'ellipse normal must not be zero')
        require(not self.major_radius.is_zero() and not self.minor_radius.is_zero(),
                'ellipse radii must not be zero')
        n = self.normal.normalize()
        a = self.major_radius.normalize()
        b = self.minor_radius.normalize()
        require(n.dot(a).is_zero(), 'Major radius and normal must be orthogonal',
                normal=n, major_radius=self.major_radius)
        require(n.dot(b).is_zero(), 'Minor radius and normal must be orthogonal',
                normal=n, minor_radius=self.minor_radius)
        require(a.dot(b).is_zero(), 'Major and minor radii must be orthogonal',
                major_radius=self.major_radius, minor_radius=self.minor_radius)
        object.__setattr__(self, 'normal', n)

    def _coordinates(self, p: Point):
        """Components of ``p - basis`` in units of the two radii, and the
        out-of-plane offset."""
        rel = p - self.basis
        x = rel.dot(self.major_radius) / self.major_radius.norm_sq()
        y = rel.dot(self.minor_radius) / self.minor_radius.norm_sq()
        return x, y, rel.dot(self.normal)

    def angle(self, p: Point):
        x, y, _ = self._coordinates(p)
        return ef.wrap_angle(ef.atan2(y, x))

    parameter = angle

    def point_at_angle(self, a) -> Point:
        return self.basis + self.major_radius * ef.cos(a) + self.minor_radius * ef.sin(a)

    def transform(self, transform) -> 'Ellipse':
        basis = transform.apply(self.basis)
        major = transform.apply_vector(self.major_radius)
        minor = transform.apply_vector(self.minor_radius)
        if not major.normalize().dot(minor.normalize()).is_zero():
            raise UnsupportedOperation('sheared ellipses are not supported yet',
                                       {'transform': transform})
        orientation = self.normal.dot(self.major_radius.cross(self.minor_radius))
        normal = major.cross(minor)
        if orientation.is_negative():
            normal = -normal
        return Ellipse(basis, normal, major, minor)

    def neg(self) -> 'Ellipse':
        return Ellipse(self.basis, -self.normal, self.major_radius, -self.minor_radius)

    def tangent(self, p: Point) -> Point:
        require(self.on_curve(p), 'point is not on ellipse', point=p)
        x, y, _ = self._coordinates(p)
        return (self.minor_radius * x - self.major_radius * y).normalize()

    def on_curve(self, p: Point) -> bool:
        x, y, z = self._coordinates(p)
        return z.is_zero() and (x * x + y * y - 1.0).is_zero()

    def _bound_angles(self, start, end):
        a0 = a1 = None
        if start is not None:
            require(self.on_curve(start), 'start is not on ellipse', start=start)
            a0 = self.angle(start)
        if end is not None:
            require(self.on_curve(end), 'end is not on ellipse', end=end)
            a1 = self.angle(end)
        return a0, a1

    def interpolate(self, start: Optional[Point], end: Optional[Point], t) -> Point:
        a0, a1 = self._bound_angles(start, end)
        return self.point_at_angle(periodic.interpolate_angle(a0, a1, t))

    def between(self, m: Point, start: Optional[Point], end: Optional[Point]) -> bool:
        require(self.on_curve(m), 'point is not on ellipse', point=m)
        a0, a1 = self._bound_angles(start, end)
        return periodic.angle_between(self.angle(m), a0, a1)

    def get_midpoint(self, start: Optional[Point], end: Optional[Point]) -> Point:
        if start is not None and end is not None:
            a0, a1 = self._bound_angles(start, end)
            mid = ((start - self.basis) + (end - self.basis)) * 0.5
            if mid.is_zero():
                return self.point_at_angle(periodic.midpoint_angle(a0, a1))
            p1 = self.project(self.basis + mid)
            if self.between(p1, start, end):
                return p1
            return self.basis - (p1 - self.basis)
        if start is not None:
            require(self.on_curve(start), 'start is not on ellipse', start=start)
            return self.basis - (start - self.basis)
        if end is not None:
            require(self.on_curve(end), 'end is not on ellipse', end=end)
            return self.basis - (end - self.basis)
        return self.basis + self.major_radius

    def project(self, p: Point) -> Point:
        x, y, _ = self._coordinates(p)
        return self.point_at_angle(ef.atan2(y, x))

    def distance(self, x: Point, y: Point):
        require(self.on_curve(x) and self.on_curve(y), 'points are not on ellipse')
        angle = (x - self.basis).angle(y - self.basis)
        return self.major_radius.norm() * angle

    def __eq__(self, other):
        if not isinstance(other, Ellipse):
            return NotImplemented
        return (self.basis == other.basis and self.normal == other.normal
                and self.major_radius == other.major_radius
                and self.minor_radius == other.minor_radius)

    def __ne__(self, other):
        if not isinstance(other, Ellipse):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None
