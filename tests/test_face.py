"""Tests for faces."""

import pytest

from brepcore.curves import Circle, Line
from brepcore.errors import PreconditionError, UnsupportedOperation
from brepcore.point import Point
from brepcore.primitives import primitive_disk, primitive_rectangle, primitive_sphere
from brepcore.surfaces import Cylinder, Plane, Sphere
from brepcore.topology import Edge, EdgeLoop, Face, FaceContains
from brepcore.xform import Translation

O = Point.zero()
X = Point.unit_x()
Y = Point.unit_y()
Z = Point.unit_z()


def cap():
    """Spherical cap around the north pole of the unit sphere."""
    rim = EdgeLoop([Edge(Circle(Point(0, 0, 0.6), Z, 0.8))])
    return Face(Sphere(O, 1), [rim])


class TestFaceConstruction:
    """Test face construction."""

    def test_edges_must_lie_on_surface(self):
        """Boundary curves must lie on the surface."""
        loop = EdgeLoop([Edge(Circle(Z, Z, 1))])
        with pytest.raises(PreconditionError):
            Face(Plane(O, X, Y), [loop])
        with pytest.raises(PreconditionError):
            Face(Line(O, X))

    def test_inner_point(self):
        """The reference point is the boundary centroid on the surface."""
        assert primitive_rectangle(O, X, Y).inner_point() == O
        assert primitive_disk(Point(1, 2, 3), Z, 2).inner_point() == Point(1, 2, 3)
        assert cap().inner_point() == Z
        assert primitive_sphere(O, 1).inner_point() == Z

    def test_neg_and_transform(self):
        """Negation flips the surface, transforms move the boundary."""
        face = primitive_rectangle(O, X, Y)
        assert face.neg().surface.normal() == -Z
        assert len(face.neg().boundary_edges()) == 4
        moved = face.transform(Translation(Z))
        assert moved.contains(Point(0.5, 0.5, 1)) == FaceContains.INSIDE
        assert moved.contains(Point(0.5, 0.5, 0)) == FaceContains.OUTSIDE

    def test_edge_from_to(self):
        """Edges follow geodesics."""
        e = primitive_sphere(O, 1).edge_from_to(X, Y)
        assert isinstance(e.curve, Circle)
        assert e.length() == 3.141592653589793 / 2
        flat = primitive_rectangle(O, X, Y).edge_from_to(O, X)
        assert isinstance(flat.curve, Line)


class TestContainment:
    """Test point containment by boundary crossings."""

    def test_rectangle(self):
        """Inside, on the edge and outside a square."""
        face = primitive_rectangle(O, X, Y)
        assert face.contains(O) == FaceContains.INSIDE
        assert face.contains(Point(0.5, 0.5, 0)) == FaceContains.INSIDE
        assert face.contains(Point(-0.9, 0.3, 0)) == FaceContains.INSIDE
        assert face.contains(Point(1, 0.5, 0)) == FaceContains.ON_EDGE
        assert face.contains(Point(1, 1, 0)) == FaceContains.ON_EDGE
        assert face.contains(Point(2, 0.5, 0)) == FaceContains.OUTSIDE
        assert face.contains(Point(0, -3, 0)) == FaceContains.OUTSIDE
        assert face.contains(Point(0, 0, 1)) == FaceContains.OUTSIDE

    def test_ray_through_vertex(self):
        """A path leaving through a corner crosses the boundary once."""
        face = primitive_rectangle(O, X, Y)
        assert face.contains(Point(2, 2, 0)) == FaceContains.OUTSIDE
        assert face.contains(Point(-3, 3, 0)) == FaceContains.OUTSIDE

    def test_disk(self):
        """Containment in a disk."""
        face = primitive_disk(O, Z, 1)
        assert face.contains(Point(0.5, 0, 0)) == FaceContains.INSIDE
        assert face.contains(Point(0, -0.7, 0)) == FaceContains.INSIDE
        assert face.contains(X) == FaceContains.ON_EDGE
        assert face.contains(Point(2, 0, 0)) == FaceContains.OUTSIDE
        assert face.contains(Point(-1, -1, 0)) == FaceContains.OUTSIDE

    def test_spherical_cap(self):
        """Containment on a curved surface walks great circles."""
        face = cap()
        assert face.contains(Z) == FaceContains.INSIDE
        assert face.contains(Point(0.6, 0, 0.8)) == FaceContains.INSIDE
        assert face.contains(Point(0.8, 0, 0.6)) == FaceContains.ON_EDGE
        assert face.contains(X) == FaceContains.OUTSIDE
        assert face.contains(Point(0, -0.6, -0.8)) == FaceContains.OUTSIDE
        assert face.contains(Point(0, 0, 0.5)) == FaceContains.OUTSIDE

    def test_unbounded_faces(self):
        """A face without boundaries covers its whole surface."""
        face = primitive_sphere(O, 2)
        assert face.contains(Point(0, 2, 0)) == FaceContains.INSIDE
        assert face.contains(O) == FaceContains.OUTSIDE
        face = Face(Cylinder(O, Z, 1))
        assert face.contains(Point(0, 1, 7)) == FaceContains.INSIDE

    def test_point_grid(self):
        """Face grids only yield points of the face."""
        face = primitive_rectangle(O, X * 60, Y * 60)
        points = list(face.point_grid(4))
        assert len(points) == 25
        assert points == list(face.point_grid(4))
        small = primitive_rectangle(O, X, Y)
        assert all(small.contains(p) != FaceContains.OUTSIDE for p in small.point_grid(4))


class TestFaceIntersection:
    """Test face / face intersection."""

    def test_crossing_rectangles(self):
        """Two orthogonal squares share a segment."""
        a = primitive_rectangle(O, X, Y)
        b = primitive_rectangle(O, X, Z)
        pieces = a.intersect(b)
        assert len(pieces) == 1
        assert pieces[0] == Edge(Line(O, X), -X, X)

    def test_partial_overlap(self):
        """The shared segment is clipped to both faces."""
        a = primitive_rectangle(O, X, Y)
        b = primitive_rectangle(Point(1, 0, 0), X, Z)
        pieces = a.intersect(b)
        assert len(pieces) == 1
        assert pieces[0] == Edge(Line(O, X), O, X)

    def test_disjoint(self):
        """Faces on parallel or distant surfaces share nothing."""
        a = primitive_rectangle(O, X, Y)
        assert a.intersect(primitive_rectangle(Z, X, Y)) == []
        assert a.intersect(primitive_rectangle(Point(5, 0, 0), Y, Z)) == []

    def test_disk_and_sphere(self):
        """A disk through a sphere meets it in a circle."""
        disk = primitive_disk(O, Z, 2)
        pieces = disk.intersect(primitive_sphere(O, 1))
        assert len(pieces) == 1
        assert pieces[0].curve == Circle(O, Z, 1)

    def test_tangent_point(self):
        """A disk touching a sphere meets it in a point."""
        disk = primitive_disk(Z, Z, 1)
        assert disk.intersect(primitive_sphere(O, 1)) == [Z]

    def test_shared_surface_unsupported(self):
        """Overlapping areas are not supported yet."""
        a = primitive_rectangle(O, X, Y)
        with pytest.raises(UnsupportedOperation):
            a.intersect(primitive_rectangle(X, X, Y))
        with pytest.raises(UnsupportedOperation):
            a.boolean_merge(primitive_rectangle(X, X, Y))


class TestSplit:
    """Test splitting for Boolean operations."""

    def test_overlapping_squares(self):
        """Both boundaries gain the two crossing points."""
        a = primitive_rectangle(O, X, Y)
        loop = primitive_rectangle(Point(1, 1, 0), X, Y).boundaries[0]
        face, split = a.split_if_necessary(loop)
        assert len(face.boundary_edges()) == 6
        assert len(split) == 6
        for marker in (X, Y):
            assert marker in face.boundaries[0].vertices()
            assert marker in split.vertices()

    def test_nothing_to_split(self):
        """Disjoint boundaries need no split."""
        a = primitive_rectangle(O, X, Y)
        loop = primitive_rectangle(Point(5, 5, 0), X, Y).boundaries[0]
        assert a.split_if_necessary(loop) is None


class TestSymmetricBoundaries:
    """Test faces whose boundary centroid is the centre or axis of the surface."""

    def test_hemisphere(self):
        """The upper half of the unit sphere, bounded by the equator."""
        face = Face(Sphere(O, 1), [EdgeLoop([Edge(Circle(O, Z, 1))])])
        q = face.inner_point()
        assert face.surface.on_surface(q)
        assert q.z.is_positive()
        assert face.contains(Z) == FaceContains.INSIDE
        assert face.contains(Point(0, 0.6, 0.8)) == FaceContains.INSIDE
        assert face.contains(-Y) == FaceContains.ON_EDGE
        assert face.contains(-Z) == FaceContains.OUTSIDE

    def test_cylinder_above_circle(self):
        """A cylinder cut by one circle keeps the part to the left of it."""
        face = Face(Cylinder(O, Z, 1), [EdgeLoop([Edge(Circle(O, Z, 1))])])
        assert face.inner_point() == Point(1, 0, 1)
        assert face.contains(Point(1, 0, 1)) == FaceContains.INSIDE
        assert face.contains(Point(0, 1, 3)) == FaceContains.INSIDE
        assert face.contains(-X) == FaceContains.ON_EDGE
        assert face.contains(Point(0, 1, -2)) == FaceContains.OUTSIDE
