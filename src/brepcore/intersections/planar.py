"""Planar building blocks shared by the intersection routines.

Conics live in planes, so most curve and surface intersections reduce to
one of three questions: where do two planes meet, where does a line meet
a conic, and where do two coplanar circles meet.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from brepcore import efloat as ef
from brepcore.algebra import solve_quadratic
from brepcore.curves import Circle, Ellipse, Line
from brepcore.point import Point

logger = logging.getLogger(__name__)


def plane_plane_line(p1: Point, n1: Point, p2: Point, n2: Point) -> Optional[Line]:
    """Line shared by the plane through ``p1`` with unit normal ``n1`` and
    the plane through ``p2`` with unit normal ``n2``; None for parallel
    planes."""
    direction = n1.cross(n2)
    if direction.is_zero():
        return None
    c = n1.dot(n2)
    h1 = n1.dot(p1)
    h2 = n2.dot(p2)
    det = 1.0 - c * c
    c1 = (h1 - h2 * c) / det
    c2 = (h2 - h1 * c) / det
    return Line(n1 * c1 + n2 * c2, direction)


def as_ellipse(conic) -> Ellipse:
    if isinstance(conic, Circle):
        return conic.as_ellipse()
    elif isinstance(conic, Ellipse):
        return conic
    raise ValueError('Not a conic: {!r}'.format(conic))


def line_conic_points(line: Line, conic) -> List[Point]:
    """Intersection points of a line with a circle or ellipse, unordered.

    A line crossing the conic's plane can only meet it at the crossing
    point.  A line inside the plane is substituted into the implicit
    equation ``x**2 + y**2 = 1`` of the conic's normalized coordinates,
    which leaves a quadratic in the line parameter.
    """
    e = as_ellipse(conic)
    along = line.direction.dot(e.normal)
    offset = (line.basis - e.basis).dot(e.normal)
    if not along.is_zero():
        p = line.point_at(-offset / along)
        return [p] if e.on_curve(p) else []
    if not offset.is_zero():
        return []
    rel = line.basis - e.basis
    a2 = e.major_radius.norm_sq()
    b2 = e.minor_radius.norm_sq()
    x0 = rel.dot(e.major_radius) / a2
    x1 = line.direction.dot(e.major_radius) / a2
    y0 = rel.dot(e.minor_radius) / b2
    y1 = line.direction.dot(e.minor_radius) / b2
    roots = solve_quadratic(x1 * x1 + y1 * y1,
                            (x0 * x1 + y0 * y1) * 2.0,
                            x0 * x0 + y0 * y0 - 1.0)
    return [line.point_at(s) for s in roots]


def circle_circle_points(ca: Point, ra, cb: Point, rb, normal: Point) -> Optional[List[Point]]:
    """Intersections of two coplanar circles given by centre and radius.

    Mirrors the sphere pair case split one dimension down: distance based
    rejection, then the coincident case (returned as None), then the
    proper intersection giving one tangent point or two points.
    """
    axis = cb - ca
    d = axis.norm()
    if d.compare(ra + rb) > 0:
        logger.debug('circles too far apart')
        return []
    if d.compare(abs(ra - rb)) < 0:
        logger.debug('circle strictly inside the other')
        return []
    if d.is_zero() and ra == rb:
        return None
    x = (ra * ra - rb * rb + d * d) / (d * 2.0)
    y = ef.sqrt(ef.bmax(ra * ra - x * x, 0.0))
    z = axis / d
    p = ca + z * x
    if y.is_zero():
        logger.debug('circles touch')
        return [p]
    w = normal.cross(z).normalize()
    return [p + w * y, p - w * y]
