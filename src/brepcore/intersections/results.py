"""Typed intersection results.

Every intersection routine returns exactly one of these variants; callers
branch on the type.  Point variants hold their points in the order the
routine documents (increasing parameter along the first argument).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from brepcore.point import Point


@dataclass(frozen=True)
class NoIntersection:
    pass


@dataclass(frozen=True)
class PointIntersection:
    point: Point


@dataclass(frozen=True)
class TwoPointIntersection:
    first: Point
    second: Point


@dataclass(frozen=True)
class PointsIntersection:
    """Three or more isolated points."""
    points: Tuple[Point, ...]


@dataclass(frozen=True)
class CurveIntersection:
    curve: Any


@dataclass(frozen=True)
class TwoCurveIntersection:
    first: Any
    second: Any


@dataclass(frozen=True)
class CoincidentIntersection:
    """Both arguments share the returned geometry entirely (or, for a
    curve and a surface, the curve lies on the surface)."""
    geometry: Any


POINT_RESULTS = (NoIntersection, PointIntersection, TwoPointIntersection, PointsIntersection)


def from_points(points) -> Any:
    """Wrap an ordered point list in the matching result variant, dropping
    repeated points."""
    unique = []
    for p in points:
        if not any(p == q for q in unique):
            unique.append(p)
    if not unique:
        return NoIntersection()
    if len(unique) == 1:
        return PointIntersection(unique[0])
    if len(unique) == 2:
        return TwoPointIntersection(unique[0], unique[1])
    return PointsIntersection(tuple(unique))


def intersection_points(result) -> Tuple[Point, ...]:
    """Points of a point-valued result, empty for :class:`NoIntersection`."""
    if isinstance(result, NoIntersection):
        return ()
    elif isinstance(result, PointIntersection):
        return (result.point,)
    elif isinstance(result, TwoPointIntersection):
        return (result.first, result.second)
    elif isinstance(result, PointsIntersection):
        return tuple(result.points)
    raise ValueError('intersection result has no finite point set: {!r}'.format(result))


def intersection_curves(result) -> Tuple[Any, ...]:
    """Curves of a curve-valued result."""
    if isinstance(result, CurveIntersection):
        return (result.curve,)
    elif isinstance(result, TwoCurveIntersection):
        return (result.first, result.second)
    raise ValueError('intersection result is not curve valued: {!r}'.format(result))
