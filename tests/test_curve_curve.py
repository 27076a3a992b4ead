"""Tests for curve / curve intersection."""

import math

import pytest

from brepcore.curves import Circle, Ellipse, Helix, Line
from brepcore.errors import UnsupportedOperation
from brepcore.intersections import (CoincidentIntersection, NoIntersection,
                                    PointIntersection, PointsIntersection,
                                    TwoPointIntersection, curve_curve_intersection,
                                    intersection_points)
from brepcore.point import Point

O = Point.zero()
X = Point.unit_x()
Y = Point.unit_y()
Z = Point.unit_z()
S3 = math.sqrt(3) / 2


class TestLines:
    """Test line pairs."""

    def test_crossing(self):
        """Crossing lines meet once."""
        result = curve_curve_intersection(Line(O, X), Line(Point(1, -1, 0), Y))
        assert result == PointIntersection(Point(1, 0, 0))

    def test_skew_and_parallel(self):
        """Skew and parallel lines do not meet."""
        assert isinstance(curve_curve_intersection(Line(O, X), Line(Z, Y)), NoIntersection)
        assert isinstance(curve_curve_intersection(Line(O, X), Line(Y, X)), NoIntersection)

    def test_same_carrier(self):
        """The same line with another basis and direction coincides."""
        result = curve_curve_intersection(Line(O, X), Line(Point(4, 0, 0), -X))
        assert isinstance(result, CoincidentIntersection)
        assert result.geometry == Line(O, X)


class TestLineConic:
    """Test lines against circles and ellipses."""

    def test_secant(self):
        """Points come ordered along the line."""
        result = curve_curve_intersection(Line(Point(-2, 0, 0), X), Circle(O, Z, 1))
        assert result == TwoPointIntersection(Point(-1, 0, 0), Point(1, 0, 0))
        result = curve_curve_intersection(Line(Point(2, 0, 0), -X), Circle(O, Z, 1))
        assert result == TwoPointIntersection(Point(1, 0, 0), Point(-1, 0, 0))

    def test_tangent(self):
        """A tangent line touches once."""
        result = curve_curve_intersection(Line(Y, X), Circle(O, Z, 1))
        assert result == PointIntersection(Y)

    def test_crossing_the_plane(self):
        """A line through the plane of the circle can only meet it once."""
        result = curve_curve_intersection(Line(Point(1, 0, -1), Z), Circle(O, Z, 1))
        assert result == PointIntersection(X)
        result = curve_curve_intersection(Line(Point(0.5, 0, -1), Z), Circle(O, Z, 1))
        assert isinstance(result, NoIntersection)

    def test_ellipse(self):
        """Lines against ellipses."""
        ellipse = Ellipse(O, Z, Point(2, 0, 0), Y)
        result = curve_curve_intersection(Line(Point(-3, 0, 0), X), ellipse)
        assert result == TwoPointIntersection(Point(-2, 0, 0), Point(2, 0, 0))
        result = curve_curve_intersection(ellipse, Line(Point(-3, 0, 0), X))
        assert result == TwoPointIntersection(Point(2, 0, 0), Point(-2, 0, 0))


class TestConics:
    """Test circle and ellipse pairs."""

    def test_two_circles(self):
        """Unit circles one apart meet at 60 and 300 degrees."""
        a = Circle(O, Z, 1)
        b = Circle(X, Z, 1)
        result = curve_curve_intersection(a, b)
        assert result == TwoPointIntersection(Point(0.5, S3, 0), Point(0.5, -S3, 0))

    def test_circle_cases(self):
        """Disjoint, nested, tangent and offset circles."""
        a = Circle(O, Z, 1)
        assert isinstance(curve_curve_intersection(a, Circle(Point(3, 0, 0), Z, 1)),
                          NoIntersection)
        assert isinstance(curve_curve_intersection(a, Circle(Point(0.1, 0, 0), Z, 0.5)),
                          NoIntersection)
        assert isinstance(curve_curve_intersection(a, Circle(Z, Z, 1)), NoIntersection)
        assert curve_curve_intersection(a, Circle(Point(2, 0, 0), Z, 1)) == PointIntersection(X)

    def test_coincident_circles(self):
        """Orientation does not matter for coincidence."""
        result = curve_curve_intersection(Circle(O, Z, 1), Circle(O, -Z, 1))
        assert isinstance(result, CoincidentIntersection)
        circle_as_ellipse = Ellipse(O, Z, Y, -X)
        assert isinstance(curve_curve_intersection(Circle(O, Z, 1), circle_as_ellipse),
                          CoincidentIntersection)

    def test_circles_in_crossing_planes(self):
        """Circles in orthogonal planes meet where the planes cross."""
        result = curve_curve_intersection(Circle(O, Z, 1), Circle(O, X, 1))
        assert result == TwoPointIntersection(Y, -Y)

    def test_ellipse_and_circle(self):
        """A coplanar ellipse and circle can meet four times."""
        ellipse = Ellipse(O, Z, Point(2, 0, 0), Y)
        circle = Circle(O, Z, 1.5)
        result = curve_curve_intersection(ellipse, circle)
        assert isinstance(result, PointsIntersection)
        points = intersection_points(result)
        assert len(points) == 4
        assert all(ellipse.on_curve(p) and circle.on_curve(p) for p in points)
        angles = [ellipse.parameter(p).value for p in points]
        assert angles == sorted(angles)

    def test_two_ellipses(self):
        """Crossed ellipses meet at x = y = +-2/sqrt(5)."""
        a = Ellipse(O, Z, Point(2, 0, 0), Y)
        b = Ellipse(O, Z, X, Point(0, 2, 0))
        points = intersection_points(curve_curve_intersection(a, b))
        c = 2 / math.sqrt(5)
        assert len(points) == 4
        for expected in (Point(c, c, 0), Point(-c, c, 0), Point(-c, -c, 0), Point(c, -c, 0)):
            assert any(p == expected for p in points)


class TestHelices:
    """Helix pairs are only supported when they coincide."""

    def test_coincident(self):
        """Test equal helices."""
        h = Helix(O, Z, X)
        assert isinstance(curve_curve_intersection(h, Helix(O, Z, X)), CoincidentIntersection)
        assert isinstance(curve_curve_intersection(h, h.neg()), CoincidentIntersection)

    def test_unsupported(self):
        """Test helix pairs without a closed form."""
        with pytest.raises(UnsupportedOperation):
            curve_curve_intersection(Helix(O, Z, X), Line(O, X))
        with pytest.raises(UnsupportedOperation):
            curve_curve_intersection(Circle(O, Z, 1), Helix(O, Z, X))


def test_rejects_non_curves():
    """Only curves can be intersected."""
    with pytest.raises(ValueError):
        curve_curve_intersection(O, Line(O, X))
