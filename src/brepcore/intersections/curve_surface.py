"""Curve against surface.

A curve lying entirely on the surface is reported as
:class:`CoincidentIntersection` of the curve.  Otherwise the isolated
intersection points are returned ordered by increasing parameter along
the curve.
"""

from __future__ import annotations

import logging
from typing import List

from brepcore import efloat as ef
from brepcore.algebra import solve_quadratic
from brepcore.curves import Circle, Ellipse, Helix, Line, is_curve
from brepcore.efloat import PI2
from brepcore.errors import UnsupportedOperation
from brepcore.intersections.planar import (as_ellipse, circle_circle_points,
                                           line_conic_points, plane_plane_line)
from brepcore.intersections.results import CoincidentIntersection, from_points
from brepcore.point import Point
from brepcore.surfaces import Cylinder, Plane, Sphere, is_surface

logger = logging.getLogger(__name__)


def line_plane_points(line: Line, plane: Plane) -> List[Point]:
    n = plane.normal()
    along = line.direction.dot(n)
    if along.is_zero():
        return []
    return [line.point_at(-plane.signed_distance(line.basis) / along)]


def line_sphere_points(line: Line, sphere: Sphere) -> List[Point]:
    w = line.basis - sphere.basis
    r = sphere.abs_radius
    roots = solve_quadratic(1.0, line.direction.dot(w) * 2.0, w.norm_sq() - r * r)
    return [line.point_at(s) for s in roots]


def line_cylinder_points(line: Line, cylinder: Cylinder) -> List[Point]:
    """Drop the axial components and intersect the remaining 2D line with
    the cross-section circle."""
    d = cylinder.direction
    dp = line.direction - d * line.direction.dot(d)
    if dp.is_zero():
        return []
    w = line.basis - cylinder.basis
    wp = w - d * w.dot(d)
    r = cylinder.abs_radius
    roots = solve_quadratic(dp.norm_sq(), dp.dot(wp) * 2.0, wp.norm_sq() - r * r)
    return [line.point_at(s) for s in roots]


def conic_plane_points(conic, plane: Plane) -> List[Point]:
    e = as_ellipse(conic)
    line = plane_plane_line(e.basis, e.normal, plane.basis, plane.normal())
    if line is None:
        return []
    return line_conic_points(line, conic)


def circle_sphere_points(circle: Circle, sphere: Sphere) -> List[Point]:
    """Cut the sphere with the circle's plane and intersect the two
    coplanar circles."""
    n = circle.normal
    h = (sphere.basis - circle.basis).dot(n)
    foot = sphere.basis - n * h
    r = sphere.abs_radius
    if abs(h).compare(r) > 0:
        return []
    section = ef.sqrt(ef.bmax(r * r - h * h, 0.0))
    if section.is_zero():
        return [foot] if circle.on_curve(foot) else []
    return circle_circle_points(circle.basis, circle.radius, foot, section, n) or []


def circle_cylinder_points(circle: Circle, cylinder: Cylinder) -> List[Point]:
    if not circle.normal.is_parallel(cylinder.direction):
        raise UnsupportedOperation('circle must be orthogonal to the cylinder axis',
                                   {'circle': circle, 'cylinder': cylinder})
    foot, _, _ = cylinder.decompose(circle.basis)
    return circle_circle_points(circle.basis, circle.radius, foot,
                                cylinder.abs_radius, circle.normal) or []


def helix_plane_points(helix: Helix, plane: Plane) -> List[Point]:
    """A plane orthogonal to the helix axis meets it exactly once."""
    n = helix.pitch.normalize()
    if not n.is_parallel(plane.normal()):
        raise UnsupportedOperation('plane must be orthogonal to the helix axis',
                                   {'helix': helix, 'plane': plane})
    height = (plane.basis - helix.basis).dot(n)
    return [helix.point_at(height / helix.pitch.norm() * PI2)]


def curve_surface_intersection(curve, surface):
    """Intersect a curve with a surface."""
    if not (is_curve(curve) and is_surface(surface)):
        raise ValueError('Not a curve and a surface: {!r}, {!r}'.format(curve, surface))
    if surface.contains_curve(curve):
        logger.debug('curve lies on surface')
        return CoincidentIntersection(curve)
    if isinstance(curve, Line):
        if isinstance(surface, Plane):
            points = line_plane_points(curve, surface)
        elif isinstance(surface, Sphere):
            points = line_sphere_points(curve, surface)
        else:
            points = line_cylinder_points(curve, surface)
    elif isinstance(curve, (Circle, Ellipse)) and isinstance(surface, Plane):
        points = conic_plane_points(curve, surface)
    elif isinstance(curve, Circle) and isinstance(surface, Sphere):
        points = circle_sphere_points(curve, surface)
    elif isinstance(curve, Circle) and isinstance(surface, Cylinder):
        points = circle_cylinder_points(curve, surface)
    elif isinstance(curve, Helix) and isinstance(surface, Plane):
        points = helix_plane_points(curve, surface)
    else:
        logger.debug('unsupported curve/surface pair %s/%s',
                     type(curve).__name__, type(surface).__name__)
        raise UnsupportedOperation('{} / {} intersections are not supported yet'.format(
            type(curve).__name__, type(surface).__name__), {'curve': curve, 'surface': surface})
    points = sorted(points, key=lambda p: curve.parameter(p).value)
    return from_points(points)
