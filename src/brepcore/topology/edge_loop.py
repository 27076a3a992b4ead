"""Closed chains of edges."""

from __future__ import annotations

from typing import List, Sequence

from brepcore.curves import Circle, Ellipse
from brepcore.errors import require
from brepcore.point import Point
from brepcore.topology.edge import Bounded, Edge, EdgeContains, FullCurve


class EdgeLoop:
    """An ordered, cyclic sequence of edges where each edge ends where the
    next one starts.  A single edge spanning a full circle or ellipse is a
    loop on its own."""

    def __init__(self, edges: Sequence[Edge]):
        edges = tuple(edges)
        require(len(edges) > 0, 'edge loop needs at least one edge')
        if len(edges) == 1:
            edge = edges[0]
            require(isinstance(edge.bounds, FullCurve)
                    and isinstance(edge.curve, (Circle, Ellipse)),
                    'a single edge loop must be a full closed curve', edge=edge)
        else:
            for i, edge in enumerate(edges):
                require(isinstance(edge.bounds, Bounded), 'loop edges must be bounded', edge=edge)
                following = edges[(i + 1) % len(edges)]
                require(edge.end == following.start, 'loop edges do not chain',
                        index=i, end=edge.end, start=following.start)
        self.edges = edges

    def __repr__(self):
        return "EdgeLoop({!r})".format(list(self.edges))

    def __len__(self):
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)

    def neg(self) -> 'EdgeLoop':
        """The same loop traversed backwards."""
        return EdgeLoop([e.flip() for e in reversed(self.edges)])

    def transform(self, transform) -> 'EdgeLoop':
        return EdgeLoop([e.transform(transform) for e in self.edges])

    def vertices(self) -> List[Point]:
        return [e.start for e in self.edges if e.start is not None]

    def contains(self, p: Point) -> bool:
        """True if ``p`` lies on the loop."""
        return any(e.contains(p) != EdgeContains.OUTSIDE for e in self.edges)

    def split(self, points: Sequence[Point]) -> 'EdgeLoop':
        """The same loop with every edge subdivided at the given points
        that lie strictly inside it."""
        edges = []
        for edge in self.edges:
            inner = []
            for p in points:
                if edge.contains(p) == EdgeContains.INSIDE and not any(p == q for q in inner):
                    inner.append(p)
            edges.extend(subdivide(edge, inner))
        return EdgeLoop(edges)

    def __eq__(self, other):
        if not isinstance(other, EdgeLoop):
            return NotImplemented
        n = len(self.edges)
        if n != len(other.edges):
            return False
        return any(all(self.edges[i] == other.edges[(i + k) % n] for i in range(n))
                   for k in range(n))

    def __ne__(self, other):
        if not isinstance(other, EdgeLoop):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None


def subdivide(edge: Edge, inner: Sequence[Point]) -> List[Edge]:
    """Split ``edge`` at points strictly inside it, keeping their order
    along the edge.  A full closed curve needs two points before it can be
    cut into bounded pieces."""
    if not inner:
        return [edge]
    inner = sorted(inner, key=edge.position)
    if isinstance(edge.bounds, FullCurve):
        if len(inner) < 2:
            return [edge]
        ends = inner[1:] + inner[:1]
        return [Edge(edge.curve, s, e) for s, e in zip(inner, ends)]
    marks = [edge.start] + list(inner) + [edge.end]
    return [Edge(edge.curve, s, e) for s, e in zip(marks, marks[1:])]


__all__ = ['EdgeLoop', 'subdivide']
