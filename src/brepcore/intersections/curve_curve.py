"""Curve against curve.

:func:`curve_curve_intersection` dispatches on the pair of curve types.
Every pair first checks whether the two curves are the same point set,
which is reported as :class:`CoincidentIntersection` of the first curve.
Isolated points come back ordered by increasing parameter along the
first curve.
"""

from __future__ import annotations

import logging
import math
from typing import List

from brepcore.algebra import MonomialPolynomial, real_roots
from brepcore.curves import Circle, Ellipse, Helix, Line, is_curve
from brepcore.errors import UnsupportedOperation
from brepcore.intersections.planar import (as_ellipse, circle_circle_points,
                                           line_conic_points, plane_plane_line)
from brepcore.intersections.results import CoincidentIntersection, from_points
from brepcore.point import Point

logger = logging.getLogger(__name__)

CONICS = (Circle, Ellipse)


def same_point_set(a, b) -> bool:
    """True if two curves trace the same points, whatever their basis or
    direction of travel."""
    if isinstance(a, Line) and isinstance(b, Line):
        return a.is_same_carrier(b)
    elif isinstance(a, CONICS) and isinstance(b, CONICS):
        ea = as_ellipse(a)
        eb = as_ellipse(b)
        if not (ea.basis == eb.basis and ea.normal.is_parallel(eb.normal)):
            return False
        # a centred conic is fixed by three of its points
        probes = (0.0, math.pi / 4.0, math.pi / 2.0)
        return all(ea.on_curve(eb.point_at_angle(t)) for t in probes)
    elif isinstance(a, Helix) and isinstance(b, Helix):
        return a == b or a == b.neg()
    return False


def line_line_points(a: Line, b: Line) -> List[Point]:
    n = a.direction.cross(b.direction)
    if n.is_zero():
        return []
    w = b.basis - a.basis
    if not w.dot(n.normalize()).is_zero():
        logger.debug('skew lines')
        return []
    s = w.cross(b.direction).dot(n) / n.norm_sq()
    return [a.point_at(s)]


def conic_conic_points(a, b) -> List[Point]:
    """Intersections of two circles or ellipses that are not the same
    point set."""
    if isinstance(a, Circle) and isinstance(b, Circle) and a.normal.is_parallel(b.normal):
        if not (b.basis - a.basis).dot(a.normal).is_zero():
            return []
        return circle_circle_points(a.basis, a.radius, b.basis, b.radius, a.normal) or []
    ea = as_ellipse(a)
    eb = as_ellipse(b)
    if not ea.normal.is_parallel(eb.normal):
        line = plane_plane_line(ea.basis, ea.normal, eb.basis, eb.normal)
        return [p for p in line_conic_points(line, a) if b.on_curve(p)]
    if not (eb.basis - ea.basis).dot(ea.normal).is_zero():
        return []
    return _coplanar_conic_points(ea, eb)


def _coplanar_conic_points(a: Ellipse, b: Ellipse) -> List[Point]:
    """Substitute ``a(theta)`` into the implicit equation of ``b`` and
    solve the quartic in ``t = tan(theta / 2)``."""
    rel = a.basis - b.basis
    a2 = b.major_radius.norm_sq()
    b2 = b.minor_radius.norm_sq()

    def components(axis, norm_sq):
        return (rel.dot(axis) / norm_sq, a.major_radius.dot(axis) / norm_sq,
                a.minor_radius.dot(axis) / norm_sq)

    x0, x1, x2 = components(b.major_radius, a2)
    y0, y1, y2 = components(b.minor_radius, b2)
    # (1 + t^2) cos = 1 - t^2, (1 + t^2) sin = 2t
    x = MonomialPolynomial([x0 + x1, x2 * 2.0, x0 - x1])
    y = MonomialPolynomial([y0 + y1, y2 * 2.0, y0 - y1])
    w = MonomialPolynomial([1.0, 0.0, 1.0])
    quartic = x * x + y * y + (w * w) * -1.0
    angles = [2.0 * math.atan(t) for t in real_roots(quartic)]
    # t = tan(theta / 2) cannot reach theta = pi
    angles.append(math.pi)
    points = [a.point_at_angle(theta) for theta in angles]
    return [p for p in points if b.on_curve(p)]


def _ordered(curve, points):
    return sorted(points, key=lambda p: curve.parameter(p).value)


def curve_curve_intersection(a, b):
    """Intersect two curves.

    Returns :class:`CoincidentIntersection` for curves tracing the same
    points and a point result otherwise.  Pairs involving a helix are only
    supported when the helices coincide.
    """
    if not (is_curve(a) and is_curve(b)):
        raise ValueError('Not a curve pair: {!r}, {!r}'.format(a, b))
    if same_point_set(a, b):
        logger.debug('coincident curves')
        return CoincidentIntersection(a)
    if isinstance(a, Helix) or isinstance(b, Helix):
        raise UnsupportedOperation('helix intersections are not supported yet',
                                   {'a': a, 'b': b})
    if isinstance(a, Line) and isinstance(b, Line):
        points = line_line_points(a, b)
    elif isinstance(a, Line):
        points = line_conic_points(a, b)
    elif isinstance(b, Line):
        points = line_conic_points(b, a)
    else:
        points = conic_conic_points(a, b)
    return from_points(_ordered(a, points))
