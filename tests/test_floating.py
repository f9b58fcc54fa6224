"""the concrete scenarios again in floating point arithmetic, plus the
behaviour of the tolerance"""

import math

import pytest

from v3d import floating
from v3d.arith import FLOATING, Floating
from v3d.collinear import LineSegmentsCollinear, merge
from v3d.geometry import DegenerateGeometryError
from v3d.line import Line
from v3d.point import Point
from v3d.segment import LineSegment
from v3d.vector import Vector


class TestScenarios:

    def test_overlap_merge(self):
        result = merge(floating.segment((0, 0, 0), (2, 0, 0)),
                       floating.segment((1, 0, 0), (3, 0, 0)))
        assert result.equals(floating.segment((0, 0, 0), (3, 0, 0)))

    def test_disjoint_kept(self):
        agg = floating.collinear(((0, 0, 0), (1, 0, 0)), ((2, 0, 0), (3, 0, 0)))
        assert len(agg.simplify()) == 2

    def test_coincident_line(self):
        s = floating.segment((0, 0, 0), (1, 1, 1))
        assert s.intersection(floating.line((0, 0, 0), (1, 1, 1))) is s

    def test_point_on_segment(self):
        s = floating.segment((0, 0, 0), (1, 0, 0))
        assert floating.point(0.5, 0, 0).distance_squared(s) == 0

    def test_envelope_clip(self):
        env = floating.envelope((-1, -1, -1), (1, 1, 1))
        hit = env.intersection(floating.line((0, 0, 0), (1, 0, 0)))
        assert hit.equals(floating.segment((-1, 0, 0), (1, 0, 0)))

    def test_half_turn(self):
        axis = floating.line((0, 0, 0), Vector(1, 1, 0, arith=FLOATING).unit())
        turned = floating.point(3, 2, 1).rotate(axis, math.pi)
        assert turned.equals(floating.point(2, 3, -1))


class TestTolerance:

    def test_nearly_collinear_segments_merge(self):
        a = floating.segment((0, 0, 0), (1, 0, 0))
        b = floating.segment((1 + 1e-12, 0, 0), (2, 1e-12, 0))
        assert merge(a, b).equals(floating.segment((0, 0, 0), (2, 0, 0)))

    def test_tiny_segment_is_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            floating.segment((0, 0, 0), (1e-12, 0, 0))

    def test_custom_epsilon(self):
        loose = Floating(epsilon=1e-3)
        a = Point(0, 0, 0, arith=loose)
        assert a.equals(Point(1e-4, 0, 0, arith=loose))
        assert not Point(0, 0, 0, arith=FLOATING).equals(
            Point(1e-4, 0, 0, arith=FLOATING))

    def test_rotation_round_trip(self):
        axis = floating.line((1, 2, 3), (0.3, -0.4, 0.5))
        s = floating.segment((1, 0, 0), (4, 5, 6))
        back = s.rotate(axis, 1.234).rotate(axis, -1.234)
        assert back.equals(s)

    def test_simplify_many_pieces(self):
        pieces = [floating.segment((i * 0.1, 0, 0), ((i + 1) * 0.1, 0, 0))
                  for i in range(20)]
        result = LineSegmentsCollinear(*pieces).simplify()
        assert isinstance(result, LineSegment)
        assert result.equals(floating.segment((0, 0, 0), (2, 0, 0)))

    def test_translate_aggregate(self):
        agg = floating.collinear(((0, 0, 0), (1, 0, 0)), ((2, 0, 0), (3, 0, 0)))
        agg.translate(Vector(0.1, 0.2, 0.3, arith=FLOATING))
        assert math.isclose(agg.envelope.xmax, 3.1)
        assert agg.segments[0].p.equals(floating.point(0.1, 0.2, 0.3))


def test_line_in_floating_arithmetic():
    l = Line(Point(0, 0, 0, arith=FLOATING), Vector(1, 0, 0, arith=FLOATING))
    assert l.contains(Point(5, 1e-12, 0, arith=FLOATING))
