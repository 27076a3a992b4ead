"""Surface against surface.

Pairs are dispatched on their types with the arguments swapped into a
canonical order where needed.  Surfaces that are the same point set
(regardless of orientation) give :class:`CoincidentIntersection` of the
first surface.
"""

from __future__ import annotations

import logging

from brepcore import efloat as ef
from brepcore.curves import Circle, Ellipse, Line
from brepcore.errors import UnsupportedOperation
from brepcore.intersections.planar import circle_circle_points, plane_plane_line
from brepcore.intersections.results import (CoincidentIntersection, CurveIntersection,
                                            NoIntersection, PointIntersection,
                                            TwoCurveIntersection)
from brepcore.intersections.sphere_sphere import sphere_sphere_intersection
from brepcore.surfaces import Cylinder, Plane, Sphere, is_surface

logger = logging.getLogger(__name__)


def plane_plane_intersection(a: Plane, b: Plane):
    line = plane_plane_line(a.basis, a.normal(), b.basis, b.normal())
    if line is None:
        return NoIntersection()
    return CurveIntersection(line)


def plane_sphere_intersection(plane: Plane, sphere: Sphere):
    n = plane.normal()
    h = plane.signed_distance(sphere.basis)
    r = sphere.abs_radius
    if abs(h).compare(r) > 0:
        return NoIntersection()
    foot = sphere.basis - n * h
    section = ef.sqrt(ef.bmax(r * r - h * h, 0.0))
    if section.is_zero():
        logger.debug('plane touches sphere')
        return PointIntersection(foot)
    return CurveIntersection(Circle(foot, n, section))


def plane_cylinder_intersection(plane: Plane, cylinder: Cylinder):
    """Circle, ellipse, one tangent generator or two generators,
    depending on how the plane is tilted against the axis."""
    n = plane.normal()
    d = cylinder.direction
    r = cylinder.abs_radius
    cos_tilt = n.dot(d)
    if cos_tilt.is_zero():
        h = plane.signed_distance(cylinder.basis)
        if abs(h).compare(r) > 0:
            return NoIntersection()
        foot = cylinder.basis - n * h
        half_width = ef.sqrt(ef.bmax(r * r - h * h, 0.0))
        if half_width.is_zero():
            logger.debug('plane touches cylinder along a generator')
            return CurveIntersection(Line(foot, d))
        w = n.cross(d).normalize() * half_width
        return TwoCurveIntersection(Line(foot + w, d), Line(foot - w, d))
    center = cylinder.basis + d * (-plane.signed_distance(cylinder.basis) / cos_tilt)
    if n.is_parallel(d):
        return CurveIntersection(Circle(center, n, r))
    minor = n.cross(d).normalize()
    major = n.cross(minor) * (r / abs(cos_tilt))
    return CurveIntersection(Ellipse(center, n, major, minor * r))


def sphere_cylinder_intersection(sphere: Sphere, cylinder: Cylinder):
    """Only spheres centred on the cylinder axis are supported."""
    foot, offset, _ = cylinder.decompose(sphere.basis)
    if not offset.is_zero():
        raise UnsupportedOperation('sphere must be centred on the cylinder axis',
                                   {'sphere': sphere, 'cylinder': cylinder})
    rs = sphere.abs_radius
    rc = cylinder.abs_radius
    d = cylinder.direction
    if rs.compare(rc) < 0:
        return NoIntersection()
    h = ef.sqrt(ef.bmax(rs * rs - rc * rc, 0.0))
    if h.is_zero():
        return CurveIntersection(Circle(foot, d, rc))
    return TwoCurveIntersection(Circle(foot - d * h, d, rc), Circle(foot + d * h, d, rc))


def cylinder_cylinder_intersection(a: Cylinder, b: Cylinder):
    """Parallel axes only: intersect the two cross sections and sweep the
    resulting points along the axis."""
    if not a.direction.is_parallel(b.direction):
        raise UnsupportedOperation('cylinders with skew axes are not supported yet',
                                   {'a': a, 'b': b})
    d = a.direction
    foot_b = b.basis - d * (b.basis - a.basis).dot(d)
    points = circle_circle_points(a.basis, a.abs_radius, foot_b, b.abs_radius, d)
    if points is None:
        return CoincidentIntersection(a)
    lines = [Line(p, d) for p in points]
    if not lines:
        return NoIntersection()
    if len(lines) == 1:
        return CurveIntersection(lines[0])
    return TwoCurveIntersection(lines[0], lines[1])


def surface_surface_intersection(a, b):
    """Intersect two surfaces."""
    if not (is_surface(a) and is_surface(b)):
        raise ValueError('Not a surface pair: {!r}, {!r}'.format(a, b))
    if type(a) is type(b) and (a == b or a == b.neg()):
        logger.debug('coincident surfaces')
        return CoincidentIntersection(a)
    if isinstance(a, Plane) and isinstance(b, Plane):
        return plane_plane_intersection(a, b)
    elif isinstance(a, Sphere) and isinstance(b, Sphere):
        return sphere_sphere_intersection(a, b)
    elif isinstance(a, Cylinder) and isinstance(b, Cylinder):
        return cylinder_cylinder_intersection(a, b)
    elif isinstance(a, Plane) and isinstance(b, Sphere):
        return plane_sphere_intersection(a, b)
    elif isinstance(a, Sphere) and isinstance(b, Plane):
        return plane_sphere_intersection(b, a)
    elif isinstance(a, Plane) and isinstance(b, Cylinder):
        return plane_cylinder_intersection(a, b)
    elif isinstance(a, Cylinder) and isinstance(b, Plane):
        return plane_cylinder_intersection(b, a)
    elif isinstance(a, Sphere) and isinstance(b, Cylinder):
        return sphere_cylinder_intersection(a, b)
    return sphere_cylinder_intersection(b, a)
