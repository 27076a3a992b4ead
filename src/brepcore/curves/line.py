"""Infinite straight lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from brepcore.errors import require
from brepcore.point import Point
from brepcore.tolerance import HORIZON_DIST


@dataclass(frozen=True, eq=False)
class Line:
    """Line through ``basis`` with unit ``direction``.

    The direction is normalized on construction; a zero direction is a
    precondition failure.  Positions along the line are measured by
    :meth:`parameter`, the signed distance from the basis.
    """

    basis: Point
    direction: Point

    def __post_init__(self):
        require(not self.direction.is_zero(), 'line direction must not be zero',
                direction=self.direction)
        object.__setattr__(self, 'direction', self.direction.normalize())

    def point_at(self, s) -> Point:
        return self.basis + self.direction * s

    def parameter(self, p: Point):
        return (p - self.basis).dot(self.direction)

    def transform(self, transform) -> 'Line':
        basis = transform.apply(self.basis)
        direction = transform.apply(self.basis + self.direction) - basis
        return Line(basis, direction)

    def neg(self) -> 'Line':
        return Line(self.basis, -self.direction)

    def tangent(self, p: Point) -> Point:
        require(self.on_curve(p), 'point is not on line', point=p)
        return self.direction

    def on_curve(self, p: Point) -> bool:
        return (p - self.basis).cross(self.direction).is_zero()

    def interpolate(self, start: Optional[Point], end: Optional[Point], t) -> Point:
        if start is not None and end is not None:
            require(self.on_curve(start) and self.on_curve(end), 'bounds are not on line')
            return start + (end - start) * t
        if start is not None:
            require(self.on_curve(start), 'start is not on line', start=start)
            return start + self.direction * (HORIZON_DIST * t)
        if end is not None:
            require(self.on_curve(end), 'end is not on line', end=end)
            return end - self.direction * (HORIZON_DIST * (1.0 - t))
        return self.basis + self.direction * (HORIZON_DIST * (t - 0.5))

    def between(self, m: Point, start: Optional[Point], end: Optional[Point]) -> bool:
        """True if ``m`` lies on the closed segment between the bounds.  A
        missing bound extends the segment to infinity in that direction."""
        require(self.on_curve(m), 'point is not on line', point=m)
        s = self.parameter(m)
        if start is not None and end is not None:
            s0 = self.parameter(start)
            s1 = self.parameter(end)
            if s1.compare(s0) < 0:
                s0, s1 = s1, s0
            return s0 <= s and s <= s1
        if start is not None:
            return self.parameter(start) <= s
        if end is not None:
            return s <= self.parameter(end)
        return True

    def get_midpoint(self, start: Optional[Point], end: Optional[Point]) -> Point:
        if start is not None and end is not None:
            return (start + end) * 0.5
        if start is not None:
            return start + self.direction
        if end is not None:
            return end - self.direction
        return self.basis

    def project(self, p: Point) -> Point:
        return self.point_at(self.parameter(p))

    def distance(self, x: Point, y: Point):
        require(self.on_curve(x) and self.on_curve(y), 'points are not on line')
        return (x - y).norm()

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.basis == other.basis and self.direction == other.direction

    def __ne__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None

    def is_same_carrier(self, other: 'Line') -> bool:
        """True if both lines are the same point set, regardless of basis or
        direction."""
        return self.direction.is_parallel(other.direction) and self.on_curve(other.basis)
