"""Infinite circular cylinders.

A cylinder is intrinsically flat: unrolled around its axis it becomes a
plane, and straight lines of that plane roll back up into generators,
circles and helices.  ``exp``, ``log`` and ``parallel_transport`` are
computed in the unrolled picture and need no numerical integration.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Optional

from brepcore import efloat as ef
from brepcore.curves import Circle, Ellipse, Helix, Line
from brepcore.efloat import PI, PI2, BoundedScalar, efloat
from brepcore.errors import UnsupportedOperation, require
from brepcore.point import Point, reference_axis
from brepcore.surfaces.grid import PointGrid, angle_samples, centered_samples, grid_size
from brepcore.tolerance import HORIZON_DIST


@dataclass(frozen=True, eq=False)
class Cylinder:
    """Cylinder of ``|radius|`` around the axis through ``basis`` along
    ``direction``.  The sign of the radius selects outward (positive) or
    inward facing normals."""

    basis: Point
    direction: Point
    radius: BoundedScalar

    def __post_init__(self):
        require(not self.direction.is_zero(), 'cylinder direction must not be zero')
        radius = efloat(self.radius)
        require(not radius.is_zero(), 'cylinder radius must not be zero')
        object.__setattr__(self, 'direction', self.direction.normalize())
        object.__setattr__(self, 'radius', radius)

    @property
    def abs_radius(self) -> BoundedScalar:
        return abs(self.radius)

    @cached_property
    def _frame(self):
        u = reference_axis(self.direction)
        return u, self.direction.cross(u)

    def decompose(self, p: Point):
        """Return ``(axis point, radial vector, height)`` of ``p``."""
        rel = p - self.basis
        h = rel.dot(self.direction)
        foot = self.basis + self.direction * h
        return foot, p - foot, h

    def point_at(self, u, v) -> Point:
        """``u`` is the angle around the axis, ``v`` the height along it."""
        a, b = self._frame
        radial = a * ef.cos(u) + b * ef.sin(u)
        return self.basis + radial * self.abs_radius + self.direction * v

    def normal(self, p: Point) -> Point:
        require(self.on_surface(p), 'point is not on cylinder', point=p)
        _, radial, _ = self.decompose(p)
        n = radial.normalize()
        return -n if self.radius.is_negative() else n

    def on_surface(self, p: Point) -> bool:
        _, radial, _ = self.decompose(p)
        return radial.norm() == self.abs_radius

    def project(self, p: Point) -> Point:
        foot, radial, _ = self.decompose(p)
        return foot + radial.normalize() * self.abs_radius

    def normalize(self) -> 'Cylinder':
        """Canonical form: non-negative radius, basis at the point of the
        axis closest to the origin, direction with its first non-zero
        component positive."""
        d = self.direction
        for c in (d.x, d.y, d.z):
            if not c.is_zero():
                if c.is_negative():
                    d = -d
                break
        basis = self.basis - d * self.basis.dot(d)
        return Cylinder(basis, d, self.abs_radius)

    def is_normalized(self) -> bool:
        c = self.normalize()
        return (self.basis == c.basis and self.direction == c.direction
                and self.radius == c.radius)

    def neg(self) -> 'Cylinder':
        return Cylinder(self.basis, self.direction, -self.radius)

    def transform(self, transform) -> 'Cylinder':
        if not transform.is_uniform():
            raise UnsupportedOperation('elliptic cylinders are not supported',
                                       {'transform': transform})
        return Cylinder(transform.apply(self.basis),
                        transform.apply_vector(self.direction),
                        self.radius * transform.scale_factor())

    ## geodesic operations
    ## -------------------

    def unroll(self, x: Point, y: Point):
        """Signed angle around the axis and height difference from ``x``
        to ``y``."""
        _, rx, hx = self.decompose(x)
        _, ry, hy = self.decompose(y)
        return rx.signed_angle(ry, self.direction), hy - hx

    def exp(self, x: Point, u: Point) -> Point:
        require(self.on_surface(x), 'point is not on cylinder', point=x)
        foot, radial, _ = self.decompose(x)
        axial = u.dot(self.direction)
        around = u - self.direction * axial
        rise = self.direction * axial
        if around.is_zero():
            return x + rise
        angle = around.norm() / self.abs_radius
        if radial.cross(around).dot(self.direction).is_negative():
            angle = -angle
        return foot + radial.rotate(self.direction, angle) + rise

    def log(self, x: Point, y: Point) -> Optional[Point]:
        """Tangent vector at ``x`` whose geodesic reaches ``y``.  None when
        ``y`` lies on the generator opposite ``x``, where two geodesics of
        equal length exist."""
        require(self.on_surface(x) and self.on_surface(y), 'points are not on cylinder')
        angle, dh = self.unroll(x, y)
        if abs(angle) == PI:
            return None
        _, radial, _ = self.decompose(x)
        around = self.direction.cross(radial).normalize()
        return around * (angle * self.abs_radius) + self.direction * dh

    def parallel_transport(self, v: Optional[Point], x: Point, y: Point) -> Optional[Point]:
        require(self.on_surface(x) and self.on_surface(y), 'points are not on cylinder')
        if v is None:
            return None
        angle, _ = self.unroll(x, y)
        if abs(angle) == PI:
            return None
        return v.rotate(self.direction, angle)

    def metric(self, x: Point, u: Point, v: Point):
        return u.dot(v)

    def distance(self, x: Point, y: Point):
        require(self.on_surface(x) and self.on_surface(y), 'points are not on cylinder')
        angle, dh = self.unroll(x, y)
        arc = abs(angle) * self.abs_radius
        return ef.sqrt(arc * arc + dh * dh)

    def geodesic(self, x: Point, y: Point):
        """Shortest curve from ``x`` to ``y``: a generator line, a circle
        around the axis, or a helix."""
        require(self.on_surface(x) and self.on_surface(y), 'points are not on cylinder')
        angle, dh = self.unroll(x, y)
        foot, radial, _ = self.decompose(x)
        if angle.is_zero():
            require(not dh.is_zero(), 'geodesic endpoints must differ')
            return Line(x, self.direction * dh)
        if dh.is_zero():
            normal = self.direction if angle.is_positive() else -self.direction
            return Circle(foot, normal, self.abs_radius)
        pitch = self.direction * (dh * PI2 / abs(angle))
        return Helix(foot, pitch, radial, angle.is_positive() == dh.is_positive())

    def contains_curve(self, curve) -> bool:
        if isinstance(curve, Line):
            return self.direction.is_parallel(curve.direction) and self.on_surface(curve.basis)
        elif isinstance(curve, Circle):
            return self.contains_curve(curve.as_ellipse())
        elif isinstance(curve, Ellipse):
            _, offset, _ = self.decompose(curve.basis)
            if not offset.is_zero():
                return False
            d = self.direction
            a = curve.major_radius - d * curve.major_radius.dot(d)
            b = curve.minor_radius - d * curve.minor_radius.dot(d)
            return (a.norm() == self.abs_radius and b.norm() == self.abs_radius
                    and a.dot(b).is_zero())
        elif isinstance(curve, Helix):
            _, offset, _ = self.decompose(curve.basis)
            return (offset.is_zero() and self.direction.is_parallel(curve.pitch)
                    and curve.radius.norm() == self.abs_radius)
        raise ValueError('Not a curve: {!r}'.format(curve))

    def point_grid(self, density, horizon=HORIZON_DIST) -> PointGrid:
        n = grid_size(density)
        return PointGrid(self.point_at, angle_samples(2 * n), centered_samples(n, horizon))

    def __eq__(self, other):
        if not isinstance(other, Cylinder):
            return NotImplemented
        if not (self.radius == other.radius and self.direction.is_parallel(other.direction)):
            return False
        _, offset, _ = self.decompose(other.basis)
        return offset.is_zero()

    def __ne__(self, other):
        if not isinstance(other, Cylinder):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None
