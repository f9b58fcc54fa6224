import math
from decimal import Decimal
from fractions import Fraction

import pytest

from v3d.geometry import DegenerateGeometryError
from v3d.point import Point
from v3d.rational import line, segment, tetrahedron
from v3d.segment import LineSegment
from v3d import floating


def unit():
    return tetrahedron((0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1))


def test_coplanar_vertices_rejected():
    with pytest.raises(DegenerateGeometryError):
        tetrahedron((0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0))


class TestMeasures:

    def test_volume_is_exact(self):
        assert unit().volume() == Fraction(1, 6)
        assert tetrahedron((0, 0, 0), (0, 1, 0), (1, 0, 0),
                           (0, 0, 3)).volume() == Fraction(1, 2)

    def test_area(self):
        ## three right triangles of area 1/2 and one of area sqrt(3)/2
        assert unit().area() == Decimal('2.366')

    def test_centroid_and_envelope(self):
        t = unit()
        q = Fraction(1, 4)
        assert t.centroid == Point(q, q, q)
        assert t.envelope.max == (1, 1, 1)
        assert len(t.faces) == 4

    def test_floating(self):
        t = floating.tetrahedron((0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1))
        assert math.isclose(t.volume(), 1 / 6)
        assert math.isclose(t.area(), 1.5 + math.sqrt(3) / 2)


def test_contains():
    t = unit()
    assert t.contains(t.centroid)
    assert t.contains(Point(0, 0, 1))
    assert t.contains(Point('0.5', '0.5', 0))
    assert not t.contains(Point(1, 1, 1))
    assert not t.contains(Point('-0.1', '0.1', '0.1'))


class TestIntersection:

    def test_line_through_solid(self):
        hit = unit().intersection(line(('0.1', '0.1', -1), (0, 0, 1)))
        assert isinstance(hit, LineSegment)
        assert hit.equals(segment(('0.1', '0.1', 0), ('0.1', '0.1', '0.8')))

    def test_line_missing(self):
        assert unit().intersection(line((1, 1, -1), (0, 0, 1))) is None

    def test_line_through_vertex(self):
        hit = unit().intersection(line((1, 0, 0), (0, 1, -1)))
        assert hit == Point(1, 0, 0)

    def test_segment_inside(self):
        s = segment(('0.1', '0.1', '0.1'), ('0.1', '0.1', '0.2'))
        assert unit().intersection(s).equals(s)

    def test_segment_leaving(self):
        s = segment(('0.1', '0.1', '0.5'), ('0.1', '0.1', 3))
        hit = s.intersection(unit())
        assert hit.equals(segment(('0.1', '0.1', '0.5'), ('0.1', '0.1', '0.8')))

    def test_segment_short(self):
        s = segment(('0.1', '0.1', 2), ('0.1', '0.1', 3))
        assert unit().intersection(s) is None

    def test_point(self):
        assert unit().intersection(Point(0, 0, 0)) == Point(0, 0, 0)
        assert Point(2, 0, 0).intersection(unit()) is None


class TestDistance:

    def test_point(self):
        t = unit()
        assert t.distance_squared(Point(1, 1, 1)) == Fraction(4, 3)
        assert t.distance_squared(Point('0.1', '0.1', '0.1')) == 0
        assert Point(0, 0, -2).distance_squared(t) == 4

    def test_segment(self):
        t = unit()
        assert t.distance_squared(segment((2, 0, 0), (3, 0, 0))) == 1
        assert t.distance_squared(segment(('0.1', '0.1', -1),
                                          ('0.1', '0.1', 1))) == 0

    def test_line(self):
        assert unit().distance_squared(line((0, 0, -1), (1, 0, 0))) == 1

    def test_unsupported(self):
        with pytest.raises(NotImplementedError):
            unit().distance_squared(unit())


def test_rotate():
    turned = unit().rotate(line((0, 0, 0), (0, 0, 1)), math.pi / 2)
    assert turned.equals(tetrahedron((0, 0, 0), (0, 1, 0), (-1, 0, 0),
                                     (0, 0, 1)))
    assert turned.volume() == Fraction(1, 6)
