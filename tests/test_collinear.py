import math
from fractions import Fraction

import pytest

from v3d.collinear import (LineSegmentsCollinear, Overlap, PointsAndSegments,
                           classify, collinear_intersection, merge)
from v3d.geometry import DegenerateGeometryError
from v3d.point import Point
from v3d.rational import collinear, line, segment
from v3d.segment import LineSegment
from v3d.vector import Vector


def xseg(a, b):
    """segment on the x axis from ``a`` to ``b``"""
    return segment((a, 0, 0), (b, 0, 0))


def xpt(a):
    return Point(a, 0, 0)


## (l1, l2, classification, union); l1 and l2 are given forward and are
## reversed below to cover every direction combination
CONFIGURATIONS = [
    ((0, 1), (2, 3), Overlap.DISJOINT, None),
    ((0, 1), (1, 2), Overlap.TOUCHING, (0, 2)),
    ((0, 2), (1, 3), Overlap.PARTIAL, (0, 3)),
    ((0, 3), (1, 2), Overlap.NESTED, (0, 3)),
    ((0, 2), (0, 1), Overlap.NESTED, (0, 2)),
    ((0, 1), (0, 1), Overlap.IDENTICAL, (0, 1)),
]


def _oriented(span, reverse):
    a, b = span
    return xseg(b, a) if reverse else xseg(a, b)


@pytest.mark.parametrize('l1_span,l2_span,overlap,union', CONFIGURATIONS)
@pytest.mark.parametrize('rev1', [False, True])
@pytest.mark.parametrize('rev2', [False, True])
@pytest.mark.parametrize('swap', [False, True])
def test_merge_permutations(l1_span, l2_span, overlap, union,
                            rev1, rev2, swap):
    l1 = _oriented(l1_span, rev1)
    l2 = _oriented(l2_span, rev2)
    if swap:
        l1, l2 = l2, l1
    assert classify(l1, l2)[0] is overlap
    result = merge(l1, l2)
    if union is None:
        assert isinstance(result, LineSegmentsCollinear)
        assert result.equals(LineSegmentsCollinear(l1, l2))
    else:
        assert isinstance(result, LineSegment)
        assert result.equals(xseg(*union))


@pytest.mark.parametrize('l1_span,l2_span,overlap,union', CONFIGURATIONS)
def test_merge_commutes(l1_span, l2_span, overlap, union):
    for rev1 in (False, True):
        for rev2 in (False, True):
            l1 = _oriented(l1_span, rev1)
            l2 = _oriented(l2_span, rev2)
            assert merge(l1, l2).equals(merge(l2, l1))


def test_containment_predicates():
    overlap, c = classify(xseg(0, 2), xseg(1, 3))
    assert overlap is Overlap.PARTIAL
    assert c == (False, True, True, False)
    assert c.first_in_second == 1 and c.second_in_first == 1


def test_classify_requires_collinear_segments():
    with pytest.raises(ValueError):
        classify(xseg(0, 1), segment((0, 1, 0), (1, 1, 0)))


class TestScenarios:

    def test_overlapping_segments_merge(self):
        result = merge(segment((0, 0, 0), (2, 0, 0)),
                       segment((1, 0, 0), (3, 0, 0)))
        assert result.equals(segment((0, 0, 0), (3, 0, 0)))

    def test_separated_segments_do_not_merge(self):
        agg = collinear(((0, 0, 0), (1, 0, 0)), ((2, 0, 0), (3, 0, 0)))
        simple = agg.simplify()
        assert isinstance(simple, LineSegmentsCollinear)
        assert len(simple) == 2
        assert simple.equals(agg)


def test_collinear_intersection():
    assert collinear_intersection(xseg(0, 2), xseg(1, 3)).equals(xseg(1, 2))
    assert collinear_intersection(xseg(0, 1), xseg(1, 3)) == xpt(1)
    assert collinear_intersection(xseg(0, 1), xseg(2, 3)) is None
    assert collinear_intersection(xseg(3, 0), xseg(1, 2)).equals(xseg(1, 2))


class TestAggregate:

    def test_construction(self):
        with pytest.raises(DegenerateGeometryError):
            LineSegmentsCollinear()
        with pytest.raises(DegenerateGeometryError):
            LineSegmentsCollinear(xseg(0, 1), segment((0, 1, 0), (1, 1, 0)))
        agg = LineSegmentsCollinear(xseg(0, 1), xseg(5, 4))
        assert len(agg.points) == 4
        assert all(s.offset is agg.offset for s in agg.segments)
        assert agg.line.is_collinear(line((0, 0, 0), (1, 0, 0)))

    def test_equality_is_set_equality(self):
        a = LineSegmentsCollinear(xseg(0, 1), xseg(2, 3))
        b = LineSegmentsCollinear(xseg(3, 2), xseg(1, 0))
        assert a.equals(b)
        assert not a.equals(LineSegmentsCollinear(xseg(0, 1), xseg(2, 4)))
        assert not a.equals(LineSegmentsCollinear(xseg(0, 1)))

    def test_envelope_is_union(self):
        agg = collinear(((0, 0, 0), (1, 1, 1)), ((3, 3, 3), (2, 2, 2)))
        env = agg.envelope
        assert env.min == (0, 0, 0)
        assert env.max == (3, 3, 3)

    def test_translate_moves_every_member(self):
        agg = LineSegmentsCollinear(xseg(0, 1), xseg(2, 3))
        assert agg.envelope.xmax == 3
        agg.translate(Vector(0, 0, 1))
        assert agg.segments[1].q == Point(3, 0, 1)
        assert agg.envelope.zmin == 1
        assert agg.segments[0].envelope.zmin == 1

    def test_rotate_returns_new_aggregate(self):
        agg = LineSegmentsCollinear(xseg(0, 1), xseg(2, 3))
        axis = line((0, 0, 0), (0, 0, 1))
        turned = agg.rotate(axis, math.pi / 2)
        assert turned.equals(collinear(((0, 0, 0), (0, 1, 0)),
                                       ((0, 2, 0), (0, 3, 0))))
        assert agg.segments[1].q == xpt(3)


class TestSimplify:

    SEGMENTS = [(0, 1), (3, 4), (Fraction(1, 2), 2), (5, 6), (2, 3)]

    def _aggregate(self):
        return LineSegmentsCollinear(*(xseg(a, b) for a, b in self.SEGMENTS))

    def test_minimal_spans(self):
        simple = self._aggregate().simplify()
        assert simple.equals(LineSegmentsCollinear(xseg(0, 4), xseg(5, 6)))

    def test_idempotent(self):
        once = self._aggregate().simplify()
        assert once.simplify().equals(once)

    def test_union_coverage(self):
        agg = self._aggregate()
        simple = agg.simplify()
        for s in agg.segments:
            mid = Point(*((a + b) / 2 for a, b in zip(s.p, s.q)))
            for p in (s.p, s.q, mid):
                assert simple.contains(p)
        for s in simple.segments:
            for p in s.points:
                assert agg.contains(p)
        assert not simple.contains(xpt('4.5'))

    def test_single_span_becomes_segment(self):
        agg = LineSegmentsCollinear(xseg(0, 2), xseg(3, 1), xseg(2, 5))
        simple = agg.simplify()
        assert isinstance(simple, LineSegment)
        assert simple.equals(xseg(0, 5))

    @pytest.mark.parametrize('spans', [
        [(0, 2)],
        [(0, 2), (1, 2)],
        [(0, 2), (2, 0)],
        [(0, 1), (3, 4), (3, 4)],
    ])
    def test_result_owns_its_offset(self, spans):
        agg = LineSegmentsCollinear(*(xseg(a, b) for a, b in spans))
        before = [s.p.position for s in agg.segments]
        simple = agg.simplify()
        simple.translate(Vector(0, 0, 5))
        assert [s.p.position for s in agg.segments] == before
        assert simple.offset is not agg.offset


class TestAggregateIntersection:

    def _agg(self):
        return LineSegmentsCollinear(xseg(0, 1), xseg(2, 3))

    def test_crossing_line_gives_point(self):
        hit = self._agg().intersection(line(('2.5', -1, 0), (0, 1, 0)))
        assert hit == xpt('2.5')

    def test_coincident_line_gives_aggregate(self):
        agg = self._agg()
        assert agg.intersection(line((7, 0, 0), (-1, 0, 0))) is agg

    def test_missing_line(self):
        assert self._agg().intersection(line(('1.5', -1, 0), (0, 1, 0))) is None

    def test_collinear_segment_pieces(self):
        hit = self._agg().intersection(xseg('0.5', '2.5'))
        assert hit.equals(LineSegmentsCollinear(xseg('0.5', 1), xseg(2, '2.5')))

    def test_collinear_segment_one_piece(self):
        hit = self._agg().intersection(xseg(-1, '0.5'))
        assert isinstance(hit, LineSegment)
        assert hit.equals(xseg(0, '0.5'))

    def test_single_point_result(self):
        assert self._agg().intersection(xseg(3, 4)) == xpt(3)

    def test_several_points_result(self):
        hit = self._agg().intersection(xseg(1, 2))
        assert isinstance(hit, PointsAndSegments)
        assert hit.equals(PointsAndSegments([xpt(1), xpt(2)], []))

    def test_mixed_points_and_segments(self):
        hit = self._agg().intersection(xseg(1, '2.5'))
        assert isinstance(hit, PointsAndSegments)
        assert hit.equals(PointsAndSegments([xpt(1)], [xseg(2, '2.5')]))
        assert len(hit) == 2
        assert hit.envelope.xmax == Fraction(5, 2)

    def test_non_collinear_segment(self):
        hit = self._agg().intersection(segment(('2.5', -1, 0), ('2.5', 1, 0)))
        assert hit == xpt('2.5')
        assert segment(('2.5', -1, 0), ('2.5', 1, 0)).intersection(
            self._agg()) == xpt('2.5')

    def test_aggregate_with_aggregate(self):
        other = LineSegmentsCollinear(xseg('0.5', '2.5'), xseg(4, 5))
        hit = self._agg().intersection(other)
        assert hit.equals(LineSegmentsCollinear(xseg('0.5', 1), xseg(2, '2.5')))

    def test_point(self):
        agg = self._agg()
        assert agg.intersection(xpt('0.5')) == xpt('0.5')
        assert agg.intersection(xpt('1.5')) is None


class TestAggregateDistance:

    def test_zero_on_intersection(self):
        agg = LineSegmentsCollinear(xseg(0, 1), xseg(2, 3))
        assert agg.distance_squared(xpt('2.5')) == 0
        assert agg.distance_squared(segment(('2.5', -1, 0), ('2.5', 1, 0))) == 0

    def test_minimum_over_members(self):
        agg = LineSegmentsCollinear(xseg(0, 1), xseg(2, 3))
        assert agg.distance_squared(Point('1.5', 1, 0)) == Fraction(5, 4)
        assert Point(5, 0, 0).distance_squared(agg) == 4
        assert agg.distance_squared(line((0, 0, 2), (0, 1, 0))) == 4
