"""Edges: curves restricted by optional start and end points.

Bounds are one of four explicit states:

* :class:`FullCurve` -- the whole (periodic or infinite) curve,
* :class:`StartBounded` -- from a start point on, in the curve direction,
* :class:`EndBounded` -- up to an end point,
* :class:`Bounded` -- from a start point to a different end point.

:func:`make_bounds` is the only way optional endpoints become bounds, and
it folds ``start == end`` into :class:`FullCurve`.  Endpoints are
boundary markers and never part of the edge's interior.

Copyright (c) 2026 brepcore contributors
MIT License
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

import numpy as np

from brepcore import efloat as ef
from brepcore.curves import Circle, Ellipse, is_curve, periodic
from brepcore.efloat import BoundedScalar
from brepcore.errors import require
from brepcore.intersections import (CoincidentIntersection, curve_curve_intersection,
                                    intersection_points)
from brepcore.point import Point
from brepcore.tolerance import RASTER_POINTS

logger = logging.getLogger(__name__)

CLOSED_CURVES = (Circle, Ellipse)


@dataclass(frozen=True)
class FullCurve:
    start = None
    end = None


@dataclass(frozen=True)
class StartBounded:
    start: Point
    end = None


@dataclass(frozen=True)
class EndBounded:
    end: Point
    start = None


@dataclass(frozen=True)
class Bounded:
    start: Point
    end: Point

    def __post_init__(self):
        require(self.start != self.end, 'bounded edge needs distinct endpoints',
                start=self.start)


Bounds = Union[FullCurve, StartBounded, EndBounded, Bounded]


def make_bounds(start: Optional[Point], end: Optional[Point]) -> Bounds:
    if start is not None and end is not None:
        if start == end:
            return FullCurve()
        return Bounded(start, end)
    if start is not None:
        return StartBounded(start)
    if end is not None:
        return EndBounded(end)
    return FullCurve()


class EdgeContains(Enum):
    """Where a point lies relative to an edge."""
    INSIDE = "inside"
    OUTSIDE = "outside"
    ON_BOUNDARY = "on_boundary"


def _same_bound(p: Optional[Point], q: Optional[Point]) -> bool:
    if p is None or q is None:
        return p is None and q is None
    return p == q


class Edge:
    """A curve restricted to the part between its bounds.

    Both endpoints, where present, must lie on the curve.
    """

    __slots__ = ('curve', 'bounds')

    def __init__(self, curve, start: Optional[Point] = None, end: Optional[Point] = None):
        require(is_curve(curve), 'edge needs a curve', curve=curve)
        if start is not None:
            require(curve.on_curve(start), 'edge start is not on its curve', start=start)
        if end is not None:
            require(curve.on_curve(end), 'edge end is not on its curve', end=end)
        self.curve = curve
        self.bounds = make_bounds(start, end)

    @property
    def start(self) -> Optional[Point]:
        return self.bounds.start

    @property
    def end(self) -> Optional[Point]:
        return self.bounds.end

    def __repr__(self):
        return "Edge({!r}, start={!r}, end={!r})".format(self.curve, self.start, self.end)

    def neg(self) -> 'Edge':
        """Swap start and end, keeping the curve as it is."""
        return Edge(self.curve, self.end, self.start)

    def flip(self) -> 'Edge':
        """Swap start and end and reverse the curve: the same edge
        traversed the other way round."""
        return Edge(self.curve.neg(), self.end, self.start)

    def transform(self, transform) -> 'Edge':
        start = transform.apply(self.start) if self.start is not None else None
        end = transform.apply(self.end) if self.end is not None else None
        return Edge(self.curve.transform(transform), start, end)

    def get_midpoint(self) -> Point:
        return self.curve.get_midpoint(self.start, self.end)

    def tangent(self, p: Point) -> Point:
        require(self.contains(p) != EdgeContains.OUTSIDE, 'point is not on edge', point=p)
        return self.curve.tangent(p).normalize()

    def interpolate(self, t) -> Point:
        require(0.0 <= t <= 1.0, 'interpolation parameter must be in [0, 1]', t=t)
        return self.curve.interpolate(self.start, self.end, t)

    def length(self) -> Optional[BoundedScalar]:
        """Arc length of the edge, or None for an edge of infinite length.

        Closed curves missing a bound measure a full turn.
        """
        if isinstance(self.curve, CLOSED_CURVES):
            a0 = self.curve.angle(self.start) if self.start is not None else None
            a1 = self.curve.angle(self.end) if self.end is not None else None
            a0, a1 = periodic.sweep(a0, a1)
            if isinstance(self.curve, Circle):
                return self.curve.radius * (a1 - a0)
            return _ellipse_arc_length(self.curve, a0.value, a1.value)
        if not isinstance(self.bounds, Bounded):
            return None
        return self.curve.distance(self.start, self.end)

    def contains(self, p: Point) -> EdgeContains:
        if not self.curve.on_curve(p):
            return EdgeContains.OUTSIDE
        if _same_bound(p, self.start) or _same_bound(p, self.end):
            return EdgeContains.ON_BOUNDARY
        if self.curve.between(p, self.start, self.end):
            return EdgeContains.INSIDE
        return EdgeContains.OUTSIDE

    def split(self, p: Point) -> Tuple['Edge', 'Edge']:
        """Two edges meeting at the inner point ``p``."""
        require(self.contains(p) == EdgeContains.INSIDE, 'split point is not inside the edge',
                point=p)
        return Edge(self.curve, self.start, p), Edge(self.curve, p, self.end)

    def rasterize(self, num_points: int = RASTER_POINTS) -> 'Polyline':
        return Polyline(self, num_points)

    def position(self, p: Point) -> float:
        """Sort key of a point along the edge.  Closed curves measure the
        angle from the start, or from the end when only the end is set, so
        that points come out in sweep order."""
        s = self.curve.parameter(p)
        if isinstance(self.curve, CLOSED_CURVES):
            anchor = self.start if self.start is not None else self.end
            if anchor is not None:
                s = ef.wrap_angle(s - self.curve.parameter(anchor))
        return s.value

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        same = _same_bound(self.start, other.start) and _same_bound(self.end, other.end)
        swapped = _same_bound(self.start, other.end) and _same_bound(self.end, other.start)
        return ((same and _same_curve(self.curve, other.curve))
                or (swapped and _same_curve(self.curve, other.curve.neg())))

    def __ne__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None

    ## intersections
    ## -------------

    def inner_intersections(self, other: 'Edge') -> List[Point]:
        """Points strictly inside both edges, sorted along ``self``.

        Equal edges have infinitely many common points and are rejected.
        Edges on the same carrier curve share segments rather than points
        and give an empty list; :meth:`intersections` reports the overlap.
        """
        require(self != other, 'cannot intersect an edge with an equal edge', edge=self)
        result = curve_curve_intersection(self.curve, other.curve)
        if isinstance(result, CoincidentIntersection):
            return []
        points = [p for p in intersection_points(result)
                  if self.contains(p) == EdgeContains.INSIDE
                  and other.contains(p) == EdgeContains.INSIDE]
        return sorted(points, key=self.position)

    def intersections(self, other: 'Edge') -> List[Union[Point, 'Edge']]:
        """Everything the two edges have in common: isolated points
        (endpoints included) and, for edges on the same carrier curve, the
        overlapping sub-edges."""
        result = curve_curve_intersection(self.curve, other.curve)
        if isinstance(result, CoincidentIntersection):
            return self._overlap(other)
        points = [p for p in intersection_points(result)
                  if self.contains(p) != EdgeContains.OUTSIDE
                  and other.contains(p) != EdgeContains.OUTSIDE]
        return sorted(points, key=self.position)

    def _overlap(self, other: 'Edge') -> List['Edge']:
        probe = self.get_midpoint()
        if self.curve.tangent(probe).dot(other.curve.tangent(probe)).is_negative():
            other = other.flip()
        breaks = []
        for p in (self.start, self.end, other.start, other.end):
            if p is None or any(p == q for q in breaks):
                continue
            if (self.contains(p) != EdgeContains.OUTSIDE
                    and other.contains(p) != EdgeContains.OUTSIDE):
                breaks.append(p)
        breaks.sort(key=self.position)
        if not breaks:
            inside = other.contains(self.get_midpoint()) == EdgeContains.INSIDE
            return [self] if inside else []
        if isinstance(self.curve, CLOSED_CURVES):
            spans = list(zip(breaks, breaks[1:] + breaks[:1]))
            if len(breaks) == 1:
                spans = [(breaks[0], None)]
        else:
            spans = list(zip([None] + breaks, breaks + [None]))
        pieces = []
        for start, end in spans:
            piece = Edge(self.curve, start, end)
            mid = piece.get_midpoint()
            if (self.contains(mid) == EdgeContains.INSIDE
                    and other.contains(mid) == EdgeContains.INSIDE):
                pieces.append(piece)
        logger.debug('edges overlap in %d pieces', len(pieces))
        return pieces


def _same_curve(a, b) -> bool:
    return type(a) is type(b) and a == b


def _ellipse_arc_length(ellipse: Ellipse, a0: float, a1: float, order: int = 32):
    """Composite Gauss-Legendre quadrature of the ellipse speed over
    ``[a0, a1]``, one panel per quarter turn or less."""
    nodes, weights = np.polynomial.legendre.leggauss(order)
    panels = max(1, int(np.ceil((a1 - a0) / (0.5 * np.pi) - 1e-9)))
    ma = ellipse.major_radius.norm_sq().value
    mb = ellipse.minor_radius.norm_sq().value
    breaks = np.linspace(a0, a1, panels + 1)
    total = 0.0
    for lo, hi in zip(breaks[:-1], breaks[1:]):
        half = 0.5 * (hi - lo)
        theta = half * nodes + 0.5 * (hi + lo)
        speed = np.sqrt(ma * np.sin(theta) ** 2 + mb * np.cos(theta) ** 2)
        total += float(half * np.dot(weights, speed))
    return BoundedScalar(total, 1e-12 * max(1.0, abs(total)))


class Polyline:
    """Lazy, restartable polyline approximation of an edge, for display."""

    def __init__(self, edge: Edge, num_points: int = RASTER_POINTS):
        require(num_points >= 2, 'a polyline needs at least two points', num_points=num_points)
        self.edge = edge
        self.num_points = num_points

    def __iter__(self):
        for t in np.linspace(0.0, 1.0, self.num_points):
            yield self.edge.interpolate(float(t))

    def __len__(self):
        return self.num_points


__all__ = ['Bounded', 'Bounds', 'Edge', 'EdgeContains', 'EndBounded', 'FullCurve',
           'Polyline', 'StartBounded', 'make_bounds']
