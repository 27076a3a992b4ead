"""Spheres.

Geodesics on a sphere are great circles, so ``exp``, ``log`` and
``parallel_transport`` are closed-form rotations about the axis
orthogonal to both endpoints.  A negative radius describes the same
point set facing inward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from brepcore import efloat as ef
from brepcore.curves import Circle, Ellipse, Helix, Line
from brepcore.efloat import PI, BoundedScalar, efloat
from brepcore.errors import UnsupportedOperation, require
from brepcore.point import Point, reference_axis
from brepcore.surfaces.grid import PointGrid, angle_samples, grid_size
from brepcore.tolerance import HORIZON_DIST


@dataclass(frozen=True, eq=False)
class Sphere:
    basis: Point
    radius: BoundedScalar

    def __post_init__(self):
        radius = efloat(self.radius)
        require(not radius.is_zero(), 'sphere radius must not be zero')
        object.__setattr__(self, 'radius', radius)

    @property
    def abs_radius(self) -> BoundedScalar:
        return abs(self.radius)

    def point_at(self, u, v) -> Point:
        """Spherical coordinates: ``u`` is the azimuth, ``v`` the polar
        angle measured from +z."""
        s = ef.sin(v)
        return self.basis + Point(ef.cos(u) * s, ef.sin(u) * s, ef.cos(v)) * self.radius

    def normal(self, p: Point) -> Point:
        require(self.on_surface(p), 'point is not on sphere', point=p)
        return (p - self.basis) / self.radius

    def on_surface(self, p: Point) -> bool:
        return (p - self.basis).norm() == self.abs_radius

    def project(self, p: Point) -> Point:
        return self.basis + (p - self.basis).normalize() * self.abs_radius

    def normalize(self) -> 'Sphere':
        return Sphere(self.basis, self.abs_radius)

    def is_normalized(self) -> bool:
        return not self.radius.is_negative()

    def neg(self) -> 'Sphere':
        return Sphere(self.basis, -self.radius)

    def transform(self, transform) -> 'Sphere':
        if not transform.is_uniform():
            raise UnsupportedOperation('transforming a sphere into an ellipsoid is not supported',
                                       {'transform': transform})
        return Sphere(transform.apply(self.basis), self.radius * transform.scale_factor())

    ## geodesic operations
    ## -------------------

    def exp(self, x: Point, u: Point) -> Point:
        """Walk the great circle leaving ``x`` along the tangent vector
        ``u`` for the arc length ``|u|``."""
        require(self.on_surface(x), 'point is not on sphere', point=x)
        rel = x - self.basis
        n = rel / self.abs_radius
        t = u - n * u.dot(n)
        if t.is_zero():
            return x
        angle = t.norm() / self.abs_radius
        return self.basis + rel * ef.cos(angle) + t.normalize() * (self.abs_radius * ef.sin(angle))

    def log(self, x: Point, y: Point) -> Optional[Point]:
        """Tangent vector at ``x`` pointing along the great circle toward
        ``y`` with length equal to the arc length.  None for antipodal
        points, where the great circle is not unique."""
        require(self.on_surface(x) and self.on_surface(y), 'points are not on sphere')
        a = x - self.basis
        b = y - self.basis
        angle = a.angle(b)
        if angle.is_zero():
            return Point.zero()
        if angle == PI:
            return None
        n = a / self.abs_radius
        d = y - x
        return (d - n * d.dot(n)).normalize() * (angle * self.abs_radius)

    def parallel_transport(self, v: Optional[Point], x: Point, y: Point) -> Optional[Point]:
        require(self.on_surface(x) and self.on_surface(y), 'points are not on sphere')
        if v is None:
            return None
        a = x - self.basis
        b = y - self.basis
        angle = a.angle(b)
        if angle.is_zero():
            return v
        if angle == PI:
            return None
        return v.rotate(a.cross(b), angle)

    def metric(self, x: Point, u: Point, v: Point):
        return u.dot(v)

    def distance(self, x: Point, y: Point):
        require(self.on_surface(x) and self.on_surface(y), 'points are not on sphere')
        return self.abs_radius * (x - self.basis).angle(y - self.basis)

    def geodesic(self, x: Point, y: Point) -> Circle:
        """Great circle through ``x`` and ``y`` running the short way from
        ``x`` to ``y``.  Antipodal points pick an arbitrary great circle."""
        require(self.on_surface(x) and self.on_surface(y), 'points are not on sphere')
        a = x - self.basis
        normal = a.cross(y - self.basis)
        if normal.is_zero():
            normal = a.cross(reference_axis(a))
        return Circle(self.basis, normal, self.abs_radius)

    def contains_curve(self, curve) -> bool:
        if isinstance(curve, Circle):
            offset = curve.basis - self.basis
            if not offset.cross(curve.normal).is_zero():
                return False
            return curve.radius * curve.radius + offset.norm_sq() == self.radius * self.radius
        elif isinstance(curve, Ellipse):
            if not curve.major_radius.norm() == curve.minor_radius.norm():
                return False
            return self.contains_curve(Circle(curve.basis, curve.normal,
                                              curve.major_radius.norm()))
        elif isinstance(curve, (Line, Helix)):
            return False
        raise ValueError('Not a curve: {!r}'.format(curve))

    def point_grid(self, density, horizon=HORIZON_DIST) -> PointGrid:
        n = grid_size(density)
        return PointGrid(self.point_at, angle_samples(2 * n), np.linspace(0.0, np.pi, n))

    def __eq__(self, other):
        if not isinstance(other, Sphere):
            return NotImplemented
        return self.basis == other.basis and self.radius == other.radius

    def __ne__(self, other):
        if not isinstance(other, Sphere):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None
