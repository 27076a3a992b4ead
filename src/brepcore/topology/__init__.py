"""Topological layer: edges, edge loops and faces."""

from brepcore.topology.edge import (Bounded, Bounds, Edge, EdgeContains, EndBounded,
                                    FullCurve, Polyline, StartBounded, make_bounds)
from brepcore.topology.edge_loop import EdgeLoop
from brepcore.topology.face import Face, FaceContains

__all__ = [
    'Bounded',
    'Bounds',
    'Edge',
    'EdgeContains',
    'EdgeLoop',
    'EndBounded',
    'Face',
    'FaceContains',
    'FullCurve',
    'Polyline',
    'StartBounded',
    'make_bounds',
]
