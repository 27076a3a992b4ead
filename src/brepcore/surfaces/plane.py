"""Infinite planes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from brepcore.curves import Circle, Ellipse, Helix, Line
from brepcore.errors import require
from brepcore.point import Point, orthonormal_frame
from brepcore.surfaces.grid import PointGrid, centered_samples, grid_size
from brepcore.tolerance import HORIZON_DIST


@dataclass(frozen=True, eq=False)
class Plane:
    """Plane through ``basis`` spanned by two slopes.

    The slopes are normalized on construction and must not be parallel.
    The plane faces along ``u_slope x v_slope``; :meth:`neg` flips it by
    reversing the second slope.
    """

    basis: Point
    u_slope: Point
    v_slope: Point

    def __post_init__(self):
        require(not self.u_slope.is_zero() and not self.v_slope.is_zero(),
                'plane slopes must not be zero')
        require(not self.u_slope.is_parallel(self.v_slope),
                'plane slopes must not be parallel',
                u_slope=self.u_slope, v_slope=self.v_slope)
        object.__setattr__(self, 'u_slope', self.u_slope.normalize())
        object.__setattr__(self, 'v_slope', self.v_slope.normalize())

    def normal(self, p: Optional[Point] = None) -> Point:
        return self.u_slope.cross(self.v_slope).normalize()

    def point_at(self, u, v) -> Point:
        return self.basis + self.u_slope * u + self.v_slope * v

    def signed_distance(self, p: Point):
        return (p - self.basis).dot(self.normal())

    def on_surface(self, p: Point) -> bool:
        return self.signed_distance(p).is_zero()

    def project(self, p: Point) -> Point:
        return p - self.normal() * self.signed_distance(p)

    def normalize(self) -> 'Plane':
        """Same oriented plane with the basis at the foot of the origin and
        the canonical orthonormal frame of the normal as slopes."""
        n = self.normal()
        u, v, _ = orthonormal_frame(n)
        return Plane(n * self.basis.dot(n), u, v)

    def is_normalized(self) -> bool:
        c = self.normalize()
        return (self.basis == c.basis and self.u_slope == c.u_slope
                and self.v_slope == c.v_slope)

    def neg(self) -> 'Plane':
        return Plane(self.basis, self.u_slope, -self.v_slope)

    def transform(self, transform) -> 'Plane':
        return Plane(transform.apply(self.basis),
                     transform.apply_vector(self.u_slope),
                     transform.apply_vector(self.v_slope))

    ## geodesic operations
    ## -------------------

    def exp(self, x: Point, u: Point) -> Point:
        require(self.on_surface(x), 'point is not on plane', point=x)
        return x + u

    def log(self, x: Point, y: Point) -> Optional[Point]:
        require(self.on_surface(x) and self.on_surface(y), 'points are not on plane')
        return y - x

    def parallel_transport(self, v: Optional[Point], x: Point, y: Point) -> Optional[Point]:
        require(self.on_surface(x) and self.on_surface(y), 'points are not on plane')
        return v

    def metric(self, x: Point, u: Point, v: Point):
        return u.dot(v)

    def distance(self, x: Point, y: Point):
        return (x - y).norm()

    def geodesic(self, x: Point, y: Point) -> Line:
        require(self.on_surface(x) and self.on_surface(y), 'points are not on plane')
        return Line(x, y - x)

    def contains_curve(self, curve) -> bool:
        n = self.normal()
        if isinstance(curve, Line):
            return n.is_perpendicular(curve.direction) and self.on_surface(curve.basis)
        elif isinstance(curve, (Circle, Ellipse)):
            return n.is_parallel(curve.normal) and self.on_surface(curve.basis)
        elif isinstance(curve, Helix):
            return False
        raise ValueError('Not a curve: {!r}'.format(curve))

    def point_grid(self, density, horizon=HORIZON_DIST) -> PointGrid:
        n = grid_size(density)
        return PointGrid(self.point_at, centered_samples(n, horizon),
                         centered_samples(n, horizon))

    def __eq__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        return self.normal() == other.normal() and self.on_surface(other.basis)

    def __ne__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None
