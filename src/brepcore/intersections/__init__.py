"""Intersection engine.

Entry points:

* :func:`curve_curve_intersection`
* :func:`curve_surface_intersection`
* :func:`surface_surface_intersection`
* :func:`sphere_sphere_intersection`

All of them return one of the result variants in
:mod:`brepcore.intersections.results`.
"""

from brepcore.intersections.curve_curve import curve_curve_intersection
from brepcore.intersections.curve_surface import curve_surface_intersection
from brepcore.intersections.results import (
    CoincidentIntersection,
    CurveIntersection,
    NoIntersection,
    PointIntersection,
    PointsIntersection,
    TwoCurveIntersection,
    TwoPointIntersection,
    intersection_curves,
    intersection_points,
)
from brepcore.intersections.sphere_sphere import sphere_sphere_intersection
from brepcore.intersections.surface_surface import surface_surface_intersection

__all__ = [
    'CoincidentIntersection',
    'CurveIntersection',
    'NoIntersection',
    'PointIntersection',
    'PointsIntersection',
    'TwoCurveIntersection',
    'TwoPointIntersection',
    'curve_curve_intersection',
    'curve_surface_intersection',
    'intersection_curves',
    'intersection_points',
    'sphere_sphere_intersection',
    'surface_surface_intersection',
]
