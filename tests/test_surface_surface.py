"""Tests for surface / surface intersection."""

import math

import pytest

from brepcore.curves import Circle, Ellipse, Line
from brepcore.errors import UnsupportedOperation
from brepcore.intersections import (CoincidentIntersection, CurveIntersection,
                                    NoIntersection, PointIntersection,
                                    TwoCurveIntersection, intersection_curves,
                                    intersection_points, surface_surface_intersection)
from brepcore.point import Point
from brepcore.surfaces import Cylinder, Plane, Sphere

O = Point.zero()
X = Point.unit_x()
Y = Point.unit_y()
Z = Point.unit_z()


class TestPlanes:
    """Test plane pairs."""

    def test_crossing_planes(self):
        """Crossing planes share a line."""
        a = Plane(O, X, Y)
        b = Plane(Point(0, 0, 0), X, Z)
        result = surface_surface_intersection(a, b)
        assert isinstance(result, CurveIntersection)
        line = result.curve
        assert isinstance(line, Line)
        assert line.direction.is_parallel(X)
        assert a.contains_curve(line) and b.contains_curve(line)

    def test_offset_line(self):
        """The shared line of offset planes."""
        a = Plane(Point(0, 0, 2), X, Y)
        b = Plane(Point(3, 0, 0), Y, Z)
        line = surface_surface_intersection(a, b).curve
        assert line.on_curve(Point(3, 7, 2))

    def test_parallel_and_coincident(self):
        """Parallel planes miss, equal planes coincide whatever their orientation."""
        a = Plane(O, X, Y)
        assert isinstance(surface_surface_intersection(a, Plane(Z, X, Y)), NoIntersection)
        result = surface_surface_intersection(a, Plane(Point(3, 3, 0), Y, X))
        assert isinstance(result, CoincidentIntersection)
        assert result.geometry is a


class TestPlaneSphere:
    """Test planes against spheres."""

    def test_section(self):
        """A plane through a sphere cuts a circle."""
        result = surface_surface_intersection(Plane(Point(0, 0, 0.5), X, Y), Sphere(O, 1))
        circle = result.curve
        assert circle.basis == Point(0, 0, 0.5)
        assert circle.radius == math.sqrt(0.75)
        assert circle.normal.is_parallel(Z)

    def test_tangent_and_missing(self):
        """Tangent planes touch, far planes miss."""
        assert surface_surface_intersection(Plane(Z, X, Y), Sphere(O, 1)) \
            == PointIntersection(Z)
        assert isinstance(surface_surface_intersection(Plane(Point(0, 0, 2), X, Y),
                                                       Sphere(O, 1)), NoIntersection)

    def test_argument_order(self):
        """Sphere first works too."""
        result = surface_surface_intersection(Sphere(O, 1), Plane(O, X, Y))
        assert result.curve == Circle(O, Z, 1)


class TestPlaneCylinder:
    """Test planes against cylinders."""

    def setup_method(self):
        self.cylinder = Cylinder(O, Z, 1)

    def test_perpendicular(self):
        """A perpendicular plane cuts a circle."""
        result = surface_surface_intersection(Plane(Point(0, 0, 2), X, Y), self.cylinder)
        assert result.curve == Circle(Point(0, 0, 2), Z, 1)

    def test_parallel(self):
        """Planes along the axis cut two, one or no generators."""
        result = surface_surface_intersection(Plane(O, X, Z), self.cylinder)
        assert isinstance(result, TwoCurveIntersection)
        lines = intersection_curves(result)
        assert all(line.direction.is_parallel(Z) for line in lines)
        assert sorted(line.basis.x.value for line in lines) == pytest.approx([-1.0, 1.0])
        tangent = surface_surface_intersection(Plane(Y, X, Z), self.cylinder)
        assert isinstance(tangent, CurveIntersection)
        assert tangent.curve.on_curve(Point(0, 1, 5))
        assert isinstance(surface_surface_intersection(Plane(Point(0, 2, 0), X, Z),
                                                       self.cylinder), NoIntersection)

    def test_tilted(self):
        """A tilted plane cuts an ellipse lying on both surfaces."""
        plane = Plane(O, X, Point(0, 1, 1))
        result = surface_surface_intersection(self.cylinder, plane)
        ellipse = result.curve
        assert isinstance(ellipse, Ellipse)
        assert ellipse.major_radius.norm() == math.sqrt(2)
        assert ellipse.minor_radius.norm() == 1
        for i in range(8):
            p = ellipse.point_at_angle(i * math.pi / 4)
            assert plane.on_surface(p)
            assert self.cylinder.on_surface(p)


class TestSphereCylinder:
    """Test spheres centred on a cylinder axis."""

    def test_two_circles(self):
        """A big sphere cuts two circles, lowest first."""
        result = surface_surface_intersection(Sphere(O, 2), Cylinder(O, Z, 1))
        first, second = intersection_curves(result)
        assert first == Circle(Point(0, 0, -math.sqrt(3)), Z, 1)
        assert second == Circle(Point(0, 0, math.sqrt(3)), Z, 1)

    def test_tangent_and_missing(self):
        """Equal radii touch along the equator, small spheres miss."""
        result = surface_surface_intersection(Cylinder(O, Z, 1), Sphere(Point(0, 0, 4), 1))
        assert result.curve == Circle(Point(0, 0, 4), Z, 1)
        assert isinstance(surface_surface_intersection(Sphere(O, 0.5), Cylinder(O, Z, 1)),
                          NoIntersection)

    def test_off_axis_unsupported(self):
        """Spheres off the axis are not supported yet."""
        with pytest.raises(UnsupportedOperation):
            surface_surface_intersection(Sphere(Point(3, 0, 0), 1), Cylinder(O, Z, 1))


class TestCylinders:
    """Test cylinder pairs."""

    def test_parallel_axes(self):
        """Parallel cylinders share generators."""
        a = Cylinder(O, Z, 1)
        result = surface_surface_intersection(a, Cylinder(X, Z, 1))
        first, second = intersection_curves(result)
        assert first == Line(Point(0.5, math.sqrt(3) / 2, 0), Z)
        assert second == Line(Point(0.5, -math.sqrt(3) / 2, 0), Z)
        touching = surface_surface_intersection(a, Cylinder(Point(2, 0, 7), -Z, 1))
        assert touching.curve.on_curve(Point(1, 0, -3))
        assert isinstance(surface_surface_intersection(a, Cylinder(Point(3, 0, 0), Z, 1)),
                          NoIntersection)

    def test_coincident(self):
        """The same cylinder, inward or outward, coincides."""
        a = Cylinder(O, Z, 1)
        assert isinstance(surface_surface_intersection(a, Cylinder(Point(0, 0, 5), Z, -1)),
                          CoincidentIntersection)

    def test_skew_unsupported(self):
        """Cylinders with skew axes are not supported yet."""
        with pytest.raises(UnsupportedOperation):
            surface_surface_intersection(Cylinder(O, Z, 1), Cylinder(O, X, 1))


class TestResults:
    """Test the result accessors."""

    def test_points_of_curve_result(self):
        """Curve results have no finite point set."""
        result = surface_surface_intersection(Plane(O, X, Y), Sphere(O, 1))
        with pytest.raises(ValueError):
            intersection_points(result)
        assert intersection_points(NoIntersection()) == ()
        with pytest.raises(ValueError):
            intersection_curves(NoIntersection())

    def test_rejects_non_surfaces(self):
        """Only surfaces can be intersected."""
        with pytest.raises(ValueError):
            surface_surface_intersection(Line(O, X), Plane(O, X, Y))
