import math
from decimal import Decimal
from fractions import Fraction

import pytest

from v3d.geometry import DegenerateGeometryError
from v3d.point import Point
from v3d.rational import line, segment, triangle
from v3d.segment import LineSegment


def unit():
    return triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))


def test_collinear_vertices_rejected():
    with pytest.raises(DegenerateGeometryError):
        triangle((0, 0, 0), (1, 1, 1), (3, 3, 3))


def test_measures():
    t = unit()
    assert t.area() == Decimal('0.5')
    assert t.perimeter() == Decimal('3.414')
    assert t.centroid == Point(Fraction(1, 3), Fraction(1, 3), 0)
    assert len(t.edges) == 3
    assert t.envelope.max == (1, 1, 0)
    assert t.plane.contains(Point(7, 7, 0))


def test_contains():
    t = unit()
    assert t.contains(Point('0.25', '0.25', 0))
    assert t.contains(Point('0.5', '0.5', 0))
    assert t.contains(Point(0, 1, 0))
    assert not t.contains(Point(1, 1, 0))
    assert not t.contains(Point('0.25', '0.25', 1))


def test_equality_ignores_vertex_order():
    assert unit().equals(triangle((0, 1, 0), (0, 0, 0), (1, 0, 0)))


class TestLineIntersection:

    def test_through_interior(self):
        hit = unit().intersection(line(('0.25', '0.25', 1), (0, 0, 1)))
        assert hit == Point('0.25', '0.25', 0)

    def test_miss(self):
        assert unit().intersection(line((1, 1, 1), (0, 0, 1))) is None
        assert unit().intersection(line((0, 0, 1), (1, 0, 0))) is None

    def test_coplanar_chord(self):
        hit = unit().intersection(line((0, '0.5', 0), (1, 0, 0)))
        assert isinstance(hit, LineSegment)
        assert hit.equals(segment((0, '0.5', 0), ('0.5', '0.5', 0)))

    def test_coplanar_along_edge(self):
        t = unit()
        hit = t.intersection(line((5, 0, 0), (1, 0, 0)))
        assert hit.equals(segment((0, 0, 0), (1, 0, 0)))
        assert hit.offset is not t.offset

    def test_coplanar_through_vertex_only(self):
        assert unit().intersection(line((1, 0, 0), (1, 1, 0))) == Point(1, 0, 0)

    def test_line_side(self):
        assert line(('0.25', '0.25', 1), (0, 0, 1)).intersects(unit())


class TestSegmentIntersection:

    def test_piercing(self):
        s = segment(('0.25', '0.25', -1), ('0.25', '0.25', 1))
        assert unit().intersection(s) == Point('0.25', '0.25', 0)
        assert s.intersection(unit()) == Point('0.25', '0.25', 0)

    def test_short_of_plane(self):
        s = segment(('0.25', '0.25', 1), ('0.25', '0.25', 2))
        assert unit().intersection(s) is None

    def test_coplanar_overlap(self):
        s = segment((-1, '0.5', 0), ('0.25', '0.5', 0))
        hit = unit().intersection(s)
        assert hit.equals(segment((0, '0.5', 0), ('0.25', '0.5', 0)))


class TestDistance:

    def test_point(self):
        t = unit()
        assert t.distance_squared(Point('0.25', '0.25', 2)) == 4
        assert t.distance_squared(Point(2, 0, 0)) == 1
        assert t.distance_squared(Point(0, 0, 0)) == 0

    def test_line(self):
        t = unit()
        assert t.distance_squared(line((0, 0, 1), (1, 0, 0))) == 1
        assert t.distance_squared(line(('0.25', '0.25', 1), (0, 0, 1))) == 0

    def test_segment(self):
        t = unit()
        assert t.distance_squared(segment((0, 0, 1), (1, 0, 1))) == 1
        assert t.distance_squared(segment((2, 2, 0), (3, 3, 0))) == \
            Fraction(9, 2)


def test_rotate():
    axis = line((0, 0, 0), (0, 0, 1))
    turned = unit().rotate(axis, math.pi)
    assert turned.equals(triangle((0, 0, 0), (-1, 0, 0), (0, -1, 0)))
