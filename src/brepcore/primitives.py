"""Convenience constructors for common edges and faces."""

from brepcore.curves import Circle, Line
from brepcore.errors import require
from brepcore.point import Point, orthonormal_frame
from brepcore.surfaces import Cylinder, Plane, Sphere
from brepcore.topology import Edge, EdgeLoop, Face


def primitive_line(p: Point, q: Point) -> Edge:
    """Straight edge from ``p`` to ``q``."""
    require(p != q, 'line endpoints must differ', start=p)
    return Edge(Line(p, q - p), p, q)


def primitive_arc(start: Point, end: Point, center: Point, normal: Point) -> Edge:
    """Circular arc from ``start`` to ``end`` around ``center``, running
    counter-clockwise about ``normal``."""
    radius = (start - center).norm()
    require(radius == (end - center).norm(), 'arc endpoints must be equidistant from the center',
            start=start, end=end, center=center)
    return Edge(Circle(center, normal, radius), start, end)


def primitive_circle(center: Point, normal: Point, radius) -> Edge:
    return Edge(Circle(center, normal, radius))


def primitive_rectangle(center: Point, u: Point, v: Point) -> Face:
    """Planar face with corners ``center +- u +- v``, facing ``u x v``."""
    corners = [center - u - v, center + u - v, center + u + v, center - u + v]
    edges = [primitive_line(corners[i], corners[(i + 1) % 4]) for i in range(4)]
    return Face(Plane(center, u, v), [EdgeLoop(edges)])


def primitive_disk(center: Point, normal: Point, radius) -> Face:
    u, v, _ = orthonormal_frame(normal)
    boundary = EdgeLoop([primitive_circle(center, normal, radius)])
    return Face(Plane(center, u, v), [boundary])


def primitive_sphere(center: Point, radius) -> Face:
    return Face(Sphere(center, radius))


def primitive_cylinder(basis: Point, direction: Point, radius) -> Face:
    return Face(Cylinder(basis, direction, radius))


__all__ = [
    'primitive_arc',
    'primitive_circle',
    'primitive_cylinder',
    'primitive_disk',
    'primitive_line',
    'primitive_rectangle',
    'primitive_sphere',
]
