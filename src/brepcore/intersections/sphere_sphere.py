"""Sphere against sphere.

The checks run in a fixed order: distance based rejection first, then the
coincident case, and only then the general construction, which divides by
the centre distance.
"""

import logging

from brepcore import efloat as ef
from brepcore.curves import Circle
from brepcore.intersections.results import (CoincidentIntersection, CurveIntersection,
                                            NoIntersection, PointIntersection)
from brepcore.surfaces import Sphere

logger = logging.getLogger(__name__)


def sphere_sphere_intersection(a: Sphere, b: Sphere):
    """Intersect two spheres.

    Returns :class:`NoIntersection` for spheres that are too far apart or
    nested without contact, :class:`CoincidentIntersection` holding the
    sphere for equal spheres, :class:`PointIntersection` for tangent
    spheres and otherwise :class:`CurveIntersection` with the circle of
    intersection.  The circle's normal points from ``a`` toward ``b``.
    """
    ra = a.abs_radius
    rb = b.abs_radius
    axis = b.basis - a.basis
    d = axis.norm()
    if d.compare(ra + rb) > 0:
        logger.debug('spheres too far apart: d=%s', d)
        return NoIntersection()
    if d.compare(abs(ra - rb)) < 0:
        logger.debug('sphere strictly inside the other: d=%s', d)
        return NoIntersection()
    if d.is_zero() and ra == rb:
        logger.debug('coincident spheres')
        return CoincidentIntersection(Sphere(a.basis, ef.bmin(ra, rb)))
    x = (ra * ra - rb * rb + d * d) / (d * 2.0)
    y = ef.sqrt(ef.bmax(ra * ra - x * x, 0.0))
    z = axis / d
    p = a.basis + z * x
    if y.is_zero():
        logger.debug('tangent spheres')
        return PointIntersection(p)
    return CurveIntersection(Circle(p, z, y))
