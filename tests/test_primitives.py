"""Tests for the primitive constructors."""

import math

import pytest

from brepcore.curves import Circle, Line
from brepcore.errors import PreconditionError
from brepcore.point import Point
from brepcore.primitives import (primitive_arc, primitive_circle, primitive_cylinder,
                                 primitive_disk, primitive_line, primitive_rectangle,
                                 primitive_sphere)
from brepcore.surfaces import Cylinder, Plane, Sphere
from brepcore.topology import Bounded, EdgeContains, FaceContains, FullCurve

O = Point.zero()
X = Point.unit_x()
Y = Point.unit_y()
Z = Point.unit_z()


class TestEdges:
    """Test edge primitives."""

    def test_line(self):
        """A segment between two points."""
        e = primitive_line(X, Y)
        assert isinstance(e.curve, Line)
        assert e.start == X
        assert e.end == Y
        assert e.length() == math.sqrt(2)
        assert e.contains(Point(0.5, 0.5, 0)) == EdgeContains.INSIDE
        with pytest.raises(PreconditionError):
            primitive_line(X, X)

    def test_arc(self):
        """Arcs run counter-clockwise about the normal."""
        e = primitive_arc(X, Y, O, Z)
        assert isinstance(e.bounds, Bounded)
        assert e.length() == math.pi / 2
        assert e.contains(Point(math.sqrt(0.5), math.sqrt(0.5), 0)) == EdgeContains.INSIDE
        long_way = primitive_arc(Y, X, O, Z)
        assert long_way.length() == 1.5 * math.pi
        with pytest.raises(PreconditionError):
            primitive_arc(X, Point(0, 2, 0), O, Z)

    def test_circle(self):
        """A full circle has no bounds."""
        e = primitive_circle(Point(1, 1, 1), Z, 2)
        assert isinstance(e.bounds, FullCurve)
        assert e.curve == Circle(Point(1, 1, 1), Z, 2)
        assert e.length() == 4 * math.pi


class TestFaces:
    """Test face primitives."""

    def test_rectangle(self):
        """Four chained edges around the center."""
        face = primitive_rectangle(Point(0, 0, 2), X * 2, Y)
        assert isinstance(face.surface, Plane)
        assert face.surface.normal() == Z
        loop = face.boundaries[0]
        assert len(loop) == 4
        assert loop.vertices() == [Point(-2, -1, 2), Point(2, -1, 2),
                                   Point(2, 1, 2), Point(-2, 1, 2)]
        assert face.contains(Point(1.5, 0.5, 2)) == FaceContains.INSIDE
        assert face.contains(Point(2.5, 0, 2)) == FaceContains.OUTSIDE

    def test_disk(self):
        """A planar face bounded by one circle."""
        face = primitive_disk(Z, Point(0, 0, 2), 3)
        assert face.surface.normal() == Z
        assert len(face.boundary_edges()) == 1
        assert face.boundary_edges()[0].curve == Circle(Z, Z, 3)
        assert face.contains(Point(2, 2, 1)) == FaceContains.INSIDE
        assert face.contains(Point(3, 0, 1)) == FaceContains.ON_EDGE

    def test_closed_surfaces(self):
        """Spheres and cylinders are faces without boundaries."""
        sphere = primitive_sphere(X, 2)
        assert sphere.surface == Sphere(X, 2)
        assert sphere.boundaries == ()
        assert sphere.contains(Point(3, 0, 0)) == FaceContains.INSIDE
        cylinder = primitive_cylinder(O, Z, 1)
        assert cylinder.surface == Cylinder(O, Z, 1)
        assert cylinder.contains(Point(0, -1, 42)) == FaceContains.INSIDE
        assert cylinder.contains(O) == FaceContains.OUTSIDE
