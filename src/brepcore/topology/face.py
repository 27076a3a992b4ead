"""Faces: surfaces restricted by loops of edges.

A face is assumed to be homeomorphic to a disk: seen from its interior
reference point (:meth:`Face.inner_point`) every path to a point of the
face stays inside it.  Point containment therefore walks a path from the
reference point to the candidate and counts boundary crossings; an even
count keeps the path inside the face.

Copyright (c) 2026 brepcore contributors
MIT License
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from brepcore.curves import Circle, Ellipse, Helix, Line
from brepcore.efloat import PI2
from brepcore.errors import DegenerateOperation, UnsupportedOperation, require
from brepcore.intersections import (CoincidentIntersection, NoIntersection,
                                    PointIntersection, curve_curve_intersection,
                                    intersection_curves, intersection_points,
                                    surface_surface_intersection)
from brepcore.point import Point
from brepcore.surfaces import is_surface
from brepcore.topology.edge import Edge, EdgeContains
from brepcore.topology.edge_loop import EdgeLoop

logger = logging.getLogger(__name__)

# samples per edge used to locate the interior reference point
REFERENCE_SAMPLES = 16


class FaceContains(Enum):
    """Where a point lies relative to a face."""
    INSIDE = "inside"
    OUTSIDE = "outside"
    ON_EDGE = "on_edge"


def _side(ray: Edge, x: Point, direction: Point, normal: Point) -> int:
    """-1, 0 or 1 for ``direction`` pointing right of, along or left of
    the ray at ``x``."""
    return ray.curve.tangent(x).cross(direction).dot(normal).compare(0.0)


class Face:
    """A surface bounded by edge loops.  A face without loops covers the
    whole surface."""

    def __init__(self, surface, boundaries: Sequence[EdgeLoop] = ()):
        require(is_surface(surface), 'face needs a surface', surface=surface)
        boundaries = tuple(boundaries)
        for loop in boundaries:
            require(isinstance(loop, EdgeLoop), 'face boundaries must be edge loops', loop=loop)
            for edge in loop:
                require(surface.contains_curve(edge.curve),
                        'boundary edge does not lie on the face surface', edge=edge)
        self.surface = surface
        self.boundaries = boundaries

    def __repr__(self):
        return "Face({!r}, {!r})".format(self.surface, list(self.boundaries))

    def boundary_edges(self) -> List[Edge]:
        return [e for loop in self.boundaries for e in loop]

    def inner_point(self) -> Point:
        """Interior reference point: the centroid of the boundary, pulled
        onto the surface.

        A boundary symmetric about the centre of a sphere or the axis of a
        cylinder has its centroid there, where projecting is undefined.
        The point is then found by walking into the face from the middle
        of the first boundary edge.
        """
        if not self.boundaries:
            return self.surface.point_at(0.0, 0.0)
        samples = []
        for edge in self.boundaries[0]:
            for t in np.linspace(0.0, 1.0, REFERENCE_SAMPLES, endpoint=False):
                samples.append(edge.interpolate(float(t)))
        centroid = samples[0]
        for p in samples[1:]:
            centroid = centroid + p
        try:
            return self.surface.project(centroid / len(samples))
        except DegenerateOperation:
            logger.debug('boundary centroid has no projection, stepping in from the boundary')
            return self._step_inside(self.boundaries[0])

    def _step_inside(self, loop: EdgeLoop) -> Point:
        """Walk from the middle of the first edge along the surface, to the
        left of the edge, for the radius of a circle as long as the loop."""
        edge = loop.edges[0]
        x = edge.get_midpoint()
        inward = self.surface.normal(x).cross(edge.tangent(x))
        length = edge.length()
        for other in loop.edges[1:]:
            length = length + other.length()
        return self.surface.exp(x, inward * (length / PI2))

    def edge_from_to(self, p: Point, q: Point) -> Edge:
        """Shortest edge on the surface from ``p`` to ``q``."""
        return Edge(self.surface.geodesic(p, q), p, q)

    def neg(self) -> 'Face':
        return Face(self.surface.neg(), [loop.neg() for loop in self.boundaries])

    def transform(self, transform) -> 'Face':
        return Face(self.surface.transform(transform),
                    [loop.transform(transform) for loop in self.boundaries])

    def point_grid(self, density) -> 'FacePointGrid':
        return FacePointGrid(self, density)

    ## containment
    ## -----------

    def _path(self, q: Point, p: Point) -> List[Edge]:
        """Edges leading from ``q`` to ``p`` over the surface.  Cylinders
        avoid helices by walking around the axis first and then along it."""
        curve = self.surface.geodesic(q, p)
        if not isinstance(curve, Helix):
            return [Edge(curve, q, p)]
        cylinder = self.surface
        foot, _, _ = cylinder.decompose(q)
        _, radial, _ = cylinder.decompose(p)
        corner = foot + radial
        angle, _ = cylinder.unroll(q, p)
        normal = cylinder.direction if angle.is_positive() else -cylinder.direction
        arc = Circle(foot, normal, cylinder.abs_radius)
        return [Edge(arc, q, corner), Edge(Line(corner, p - corner), corner, p)]

    def _crossings(self, path: List[Edge]) -> int:
        hits = []
        for ray in path:
            for loop in self.boundaries:
                edges = loop.edges
                for i, edge in enumerate(edges):
                    result = curve_curve_intersection(ray.curve, edge.curve)
                    if isinstance(result, CoincidentIntersection):
                        continue
                    for x in intersection_points(result):
                        if ray.contains(x) == EdgeContains.OUTSIDE:
                            continue
                        if any(x == h for h, _ in hits):
                            continue
                        where = edge.contains(x)
                        normal = self.surface.normal(x)
                        if where == EdgeContains.INSIDE:
                            crossing = _side(ray, x, edge.tangent(x), normal) != 0
                        elif where == EdgeContains.ON_BOUNDARY and x == edge.start:
                            # vertex hit: a crossing only if the two edges
                            # meeting here leave to opposite sides of the ray
                            previous = edges[i - 1]
                            before = _side(ray, x, -previous.tangent(x), normal)
                            after = _side(ray, x, edge.tangent(x), normal)
                            crossing = before * after < 0
                        else:
                            continue
                        hits.append((x, 1 if crossing else 0))
        return sum(w for _, w in hits)

    def contains(self, p: Point) -> FaceContains:
        if not self.surface.on_surface(p):
            return FaceContains.OUTSIDE
        if any(loop.contains(p) for loop in self.boundaries):
            return FaceContains.ON_EDGE
        if not self.boundaries:
            return FaceContains.INSIDE
        q = self.inner_point()
        if p == q:
            return FaceContains.INSIDE
        crossings = self._crossings(self._path(q, p))
        logger.debug('%d boundary crossings from the reference point', crossings)
        return FaceContains.INSIDE if crossings % 2 == 0 else FaceContains.OUTSIDE

    ## face / face operations
    ## ----------------------

    def intersect(self, other: 'Face') -> List[Union[Edge, Point]]:
        """Edges and points shared by the two faces.

        The surface/surface intersection is clipped to the parts lying
        inside both faces.  Faces on the same surface overlap in an area,
        which is not supported yet.
        """
        if self.surface == other.surface or self.surface == other.surface.neg():
            raise UnsupportedOperation('intersecting faces on a shared surface is not supported yet',
                                       {'surface': self.surface})
        result = surface_surface_intersection(self.surface, other.surface)
        if isinstance(result, NoIntersection):
            return []
        if isinstance(result, PointIntersection):
            p = result.point
            inside = (self.contains(p) != FaceContains.OUTSIDE
                      and other.contains(p) != FaceContains.OUTSIDE)
            return [p] if inside else []
        pieces = []
        for curve in intersection_curves(result):
            pieces.extend(self._clip(curve, other))
        return pieces

    def _clip(self, curve, other: 'Face') -> List[Edge]:
        cuts = []
        for edge in self.boundary_edges() + other.boundary_edges():
            hit = curve_curve_intersection(curve, edge.curve)
            if isinstance(hit, CoincidentIntersection):
                candidates = [x for x in (edge.start, edge.end) if x is not None]
            else:
                candidates = [x for x in intersection_points(hit)
                              if edge.contains(x) != EdgeContains.OUTSIDE]
            for x in candidates:
                if not any(x == c for c in cuts):
                    cuts.append(x)
        cuts.sort(key=lambda x: curve.parameter(x).value)
        if not cuts:
            spans = [(None, None)]
        elif isinstance(curve, (Circle, Ellipse)):
            spans = list(zip(cuts, cuts[1:] + cuts[:1])) if len(cuts) > 1 else [(cuts[0], None)]
        else:
            spans = list(zip([None] + cuts, cuts + [None]))
        kept = []
        for start, end in spans:
            piece = Edge(curve, start, end)
            mid = piece.get_midpoint()
            if (self.contains(mid) == FaceContains.INSIDE
                    and other.contains(mid) == FaceContains.INSIDE):
                kept.append(piece)
        return kept

    def split_if_necessary(self, loop: EdgeLoop) -> Optional[Tuple['Face', EdgeLoop]]:
        """Prepare this face and ``loop`` for a Boolean combination.

        Every edge of ``loop`` is intersected with every boundary edge.
        Without any common point nothing needs splitting and None is
        returned; otherwise both this face's boundary loops and ``loop``
        are subdivided at all common points.
        """
        markers = []
        for edge_other in loop:
            for edge_self in self.boundary_edges():
                for item in edge_other.intersections(edge_self):
                    found = [item] if isinstance(item, Point) else [item.start, item.end]
                    for x in found:
                        if x is not None and not any(x == m for m in markers):
                            markers.append(x)
        if not markers:
            return None
        logger.debug('splitting face boundary at %d markers', len(markers))
        face = Face(self.surface, [b.split(markers) for b in self.boundaries])
        return face, loop.split(markers)

    def boolean_merge(self, other: 'Face', operation: str = 'union'):
        """Combine two split faces; not implemented yet."""
        raise UnsupportedOperation('Boolean merge of faces is not supported yet',
                                   {'operation': operation})


class FacePointGrid:
    """Surface samples restricted to the face; lazy and restartable."""

    def __init__(self, face: Face, density):
        self.face = face
        self.density = density

    def __iter__(self):
        for p in self.face.surface.point_grid(self.density):
            if self.face.contains(p) != FaceContains.OUTSIDE:
                yield p


__all__ = ['Face', 'FaceContains', 'FacePointGrid']
