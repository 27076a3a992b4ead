"""Circular helices."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Optional

from brepcore import efloat as ef
from brepcore.efloat import PI, PI2
from brepcore.errors import UnsupportedOperation, require
from brepcore.point import Point


@dataclass(frozen=True, eq=False)
class Helix:
    """Helix ``basis + cos(t) r + s sin(t) (n x r) + t / 2pi * pitch``.

    ``pitch`` is the advance along the axis per full turn and ``n`` its
    unit direction; ``radius`` is the vector from the axis to the point at
    ``t = 0`` and must be orthogonal to the pitch.  ``s`` is 1 for a right
    handed helix and -1 for a left handed one.  Unlike circles the
    parameter ``t`` is not wrapped: every point has exactly one parameter.
    """

    basis: Point
    pitch: Point
    radius: Point
    right_winding: bool = True

    def __post_init__(self):
        require(not self.pitch.is_zero(), 'helix pitch must not be zero')
        require(not self.radius.is_zero(), 'helix radius must not be zero')
        require(self.pitch.is_perpendicular(self.radius),
                'helix radius must be orthogonal to the pitch',
                pitch=self.pitch, radius=self.radius)

    @cached_property
    def _frame(self):
        n = self.pitch.normalize()
        w = n.cross(self.radius)
        return n, (w if self.right_winding else -w)

    def point_at(self, t) -> Point:
        _, w = self._frame
        return (self.basis + self.radius * ef.cos(t) + w * ef.sin(t)
                + self.pitch * (ef.efloat(t) / PI2))

    def parameter(self, p: Point):
        """Unrolled angle of ``p``: the radial angle plus the number of full
        turns implied by the height of ``p`` along the axis."""
        n, w = self._frame
        rel = p - self.basis
        phi = ef.atan2(rel.dot(w), rel.dot(self.radius))
        by_height = rel.dot(n) / self.pitch.norm() * PI2
        turns = round(((by_height - phi) / PI2).value)
        return phi + PI2 * turns

    def transform(self, transform) -> 'Helix':
        if not transform.is_uniform():
            raise UnsupportedOperation('helix transforms must be similarities',
                                       {'transform': transform})
        n, w = self._frame
        r = transform.apply_vector(self.radius)
        # a mirror image winds the other way round
        mirrored = transform.apply_vector(n).dot(
            r.cross(transform.apply_vector(w))).is_negative() == self.right_winding
        return Helix(transform.apply(self.basis), transform.apply_vector(self.pitch), r,
                     self.right_winding != mirrored)

    def neg(self) -> 'Helix':
        return Helix(self.basis, -self.pitch, self.radius, self.right_winding)

    def tangent(self, p: Point) -> Point:
        require(self.on_curve(p), 'point is not on helix', point=p)
        _, w = self._frame
        t = self.parameter(p)
        return (w * ef.cos(t) - self.radius * ef.sin(t) + self.pitch / PI2).normalize()

    def on_curve(self, p: Point) -> bool:
        return self.point_at(self.parameter(p)) == p

    def _bound_parameters(self, start, end):
        t0 = t1 = None
        if start is not None:
            require(self.on_curve(start), 'start is not on helix', start=start)
            t0 = self.parameter(start)
        if end is not None:
            require(self.on_curve(end), 'end is not on helix', end=end)
            t1 = self.parameter(end)
        return t0, t1

    def interpolate(self, start: Optional[Point], end: Optional[Point], t) -> Point:
        t0, t1 = self._bound_parameters(start, end)
        if t0 is not None and t1 is not None:
            return self.point_at(t0 + (t1 - t0) * t)
        if t0 is not None:
            return self.point_at(t0 + PI2 * t)
        if t1 is not None:
            return self.point_at(t1 - PI2 * (1.0 - ef.efloat(t)))
        return self.point_at(PI2 * t)

    def between(self, m: Point, start: Optional[Point], end: Optional[Point]) -> bool:
        require(self.on_curve(m), 'point is not on helix', point=m)
        t0, t1 = self._bound_parameters(start, end)
        if t0 is None or t1 is None:
            return True
        if t1.compare(t0) < 0:
            t0, t1 = t1, t0
        s = self.parameter(m)
        return t0 <= s and s <= t1

    def get_midpoint(self, start: Optional[Point], end: Optional[Point]) -> Point:
        t0, t1 = self._bound_parameters(start, end)
        if t0 is not None and t1 is not None:
            return self.point_at((t0 + t1) * 0.5)
        if t0 is not None:
            return self.point_at(t0 + PI)
        if t1 is not None:
            return self.point_at(t1 - PI)
        return self.basis + self.radius

    def project(self, p: Point) -> Point:
        return self.point_at(self.parameter(p))

    def distance(self, x: Point, y: Point):
        require(self.on_curve(x) and self.on_curve(y), 'points are not on helix')
        rise = self.pitch.norm() / PI2
        speed = ef.sqrt(self.radius.norm_sq() + rise * rise)
        return abs(self.parameter(y) - self.parameter(x)) * speed

    def __eq__(self, other):
        if not isinstance(other, Helix):
            return NotImplemented
        return (self.basis == other.basis and self.pitch == other.pitch
                and self.radius == other.radius
                and self.right_winding == other.right_winding)

    def __ne__(self, other):
        if not isinstance(other, Helix):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None
