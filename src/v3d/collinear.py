## collinear segment aggregates for v3d
## Copyright (c) 2026 v3d contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


"""collinear line segment aggregates, merging and simplification

Two collinear segments ``l1`` and ``l2`` relate in one of five ways,
decided from four containment predicates (is ``l1.p`` on ``l2``, is
``l1.q`` on ``l2``, is ``l2.p`` on ``l1``, is ``l2.q`` on ``l1``):

  ``DISJOINT``   no endpoint of either lies on the other
  ``TOUCHING``   they share exactly one point, an endpoint of each
  ``NESTED``     one lies entirely within the other
  ``PARTIAL``    each contains exactly one endpoint of the other
  ``IDENTICAL``  same span, endpoints possibly reversed

``merge()`` forms the union of two such segments, ``simplify()``
reduces an aggregate to its minimal set of disjoint spans.  An
aggregate's member segments all share the aggregate's offset.
"""

import logging
from collections import namedtuple
from enum import Enum
from functools import reduce

from v3d.arith import arith_of
from v3d.geometry import DegenerateGeometryError, Geometry
from v3d.line import Line
from v3d.point import Point, unique
from v3d.precision import DEFAULT_POLICY
from v3d.segment import LineSegment
from v3d.vector import dot, sub

logger = logging.getLogger(__name__)


class Overlap(Enum):
    DISJOINT = 'disjoint'
    TOUCHING = 'touching'
    NESTED = 'nested'
    PARTIAL = 'partial'
    IDENTICAL = 'identical'


class Containment(namedtuple('Containment',
                             'l1p_in_l2 l1q_in_l2 l2p_in_l1 l2q_in_l1')):
    """which endpoints of two collinear segments lie on the other"""

    __slots__ = ()

    @property
    def first_in_second(self) -> int:
        return int(self.l1p_in_l2) + int(self.l1q_in_l2)

    @property
    def second_in_first(self) -> int:
        return int(self.l2p_in_l1) + int(self.l2q_in_l1)


def containment(l1, l2) -> Containment:
    return Containment(l2.contains(l1.p), l2.contains(l1.q),
                       l1.contains(l2.p), l1.contains(l2.q))


def classify(l1, l2):
    """the ``(Overlap, Containment)`` relation of collinear segments
    ``l1`` and ``l2``"""
    if not l1.line.is_collinear(l2.line):
        raise ValueError('segments {!r} and {!r} are not collinear'.format(
            l1, l2))
    c = containment(l1, l2)
    n1 = c.first_in_second
    n2 = c.second_in_first
    if n1 == 2 and n2 == 2:
        overlap = Overlap.IDENTICAL
    elif n1 == 2 or n2 == 2:
        overlap = Overlap.NESTED
    elif n1 == 0 and n2 == 0:
        overlap = Overlap.DISJOINT
    elif n1 == 1 and n2 == 1:
        a = l1.p if c.l1p_in_l2 else l1.q
        b = l2.p if c.l2p_in_l1 else l2.q
        overlap = Overlap.TOUCHING if a.equals(b) else Overlap.PARTIAL
    else:
        ## only reachable within floating point tolerance
        overlap = Overlap.PARTIAL
    return overlap, c


def span(points):
    """the smallest geometry covering collinear ``points``: ``None`` for
    no points, a ``Point`` for one distinct point, else the segment
    between the two extreme points"""
    points = unique(points)
    if not points:
        return None
    if len(points) == 1:
        return points[0].copy()
    base = points[0].position
    d = sub(points[1].position, base)
    ts = [dot(sub(p.position, base), d) for p in points]
    lo = min(range(len(points)), key=ts.__getitem__)
    hi = max(range(len(points)), key=ts.__getitem__)
    return LineSegment(points[lo], points[hi])


def merge(l1, l2):
    """the union of collinear segments ``l1`` and ``l2``: a segment, or
    the two member aggregate when they are disjoint"""
    overlap, c = classify(l1, l2)
    if overlap is Overlap.DISJOINT:
        result = LineSegmentsCollinear(l1, l2)
    elif overlap is Overlap.IDENTICAL:
        result = l1
    elif overlap is Overlap.NESTED:
        result = l2 if c.first_in_second == 2 else l1
    elif c.first_in_second == 1 and c.second_in_first == 1:
        ## keep the endpoint of each that lies outside the other
        a = l1.q if c.l1p_in_l2 else l1.p
        b = l2.q if c.l2p_in_l1 else l2.p
        result = span([a, b])
    else:
        result = span(l1.points + l2.points)
    logger.debug('merge %r, %r: %s -> %r', l1, l2, overlap.name, result)
    return result


def collinear_intersection(l1, l2):
    """the overlap of collinear segments ``l1`` and ``l2``: ``None``, a
    ``Point`` or a ``LineSegment``"""
    c = containment(l1, l2)
    candidates = (l1.p, l1.q, l2.p, l2.q)
    return span([pt for pt, inside in zip(candidates, c) if inside])


class PointsAndSegments:
    """a mixed intersection result: isolated points plus disjoint
    collinear segments"""

    def __init__(self, points, segments):
        self.points = tuple(points)
        self.segments = tuple(segments)

    def __repr__(self):
        return 'PointsAndSegments({!r}, {!r})'.format(list(self.points),
                                                      list(self.segments))

    def __len__(self):
        return len(self.points) + len(self.segments)

    def __iter__(self):
        yield from self.points
        yield from self.segments

    @property
    def envelope(self):
        return reduce(lambda a, b: a.union(b), (g.envelope for g in self))

    def equals(self, other) -> bool:
        if not isinstance(other, PointsAndSegments):
            return False
        return (_same_members(self.points, other.points)
                and _same_members(self.segments, other.segments))


def _same_members(a, b):
    if len(a) != len(b):
        return False
    return (all(any(x.equals(y) for y in b) for x in a)
            and all(any(y.equals(x) for x in a) for y in b))


class LineSegmentsCollinear(Geometry):
    """an unordered collection of collinear line segments, i.e. a
    possibly disconnected subset of one line"""

    rank = 9

    def __init__(self, *segments, offset=None):
        if not segments:
            raise DegenerateGeometryError('an aggregate needs a segment')
        arith = arith_of(*segments)
        first = segments[0].line
        for s in segments[1:]:
            if not first.is_collinear(s.line):
                raise DegenerateGeometryError(
                    '{!r} is not collinear with {!r}'.format(s, segments[0]))
        super().__init__(arith, offset)
        self._segments = tuple(LineSegment(s.p, s.q, offset=self.offset)
                               for s in segments)

    def __repr__(self):
        return 'LineSegmentsCollinear({})'.format(
            ', '.join(repr(s) for s in self._segments))

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)

    @property
    def segments(self):
        return self._segments

    @property
    def line(self):
        return self._segments[0].line

    @property
    def points(self):
        return tuple(p for s in self._segments for p in s.points)

    def _make_envelope(self):
        return reduce(lambda a, b: a.union(b),
                      (s.envelope for s in self._segments))

    def equals(self, other) -> bool:
        """set equality of the members"""
        if not isinstance(other, LineSegmentsCollinear):
            return False
        return _same_members(self._segments, other.segments)

    def contains(self, point) -> bool:
        return any(s.contains(point) for s in self._segments)

    def simplify(self):
        """merge overlapping and touching members until none remain;
        returns a ``LineSegment`` when a single span is left, otherwise
        a new aggregate of disjoint spans"""
        spans = list(self._segments)
        count = len(spans)
        passes = 0
        merged = True
        while merged:
            merged = False
            passes += 1
            i = 0
            while i < len(spans):
                j = i + 1
                while j < len(spans):
                    overlap, _ = classify(spans[i], spans[j])
                    if overlap is Overlap.DISJOINT:
                        j += 1
                        continue
                    result = merge(spans[i], spans[j])
                    if isinstance(result, LineSegment):
                        spans[i] = result
                    del spans[j]
                    merged = True
                    j = i + 1
                i += 1
        logger.debug('simplified %d segments to %d in %d passes',
                     count, len(spans), passes)
        if len(spans) == 1:
            ## detach the survivor from this aggregate's offset
            return LineSegment(spans[0].p, spans[0].q)
        return LineSegmentsCollinear(*spans)

    def intersection(self, other):
        if isinstance(other, Point):
            return other if self.contains(other) else None
        if isinstance(other, Line):
            return self._intersect_line(other)
        if not isinstance(other, Geometry):
            raise TypeError('cannot intersect {} with {!r}'.format(
                type(self).__name__, other))
        arith_of(self, other)
        return _assemble(m.intersection(other) for m in self._segments)

    def _intersect_line(self, line):
        arith_of(self, line)
        for s in self._segments:
            hit = s.intersection(line)
            if isinstance(hit, Point):
                return hit
            if hit is not None:
                ## the aggregate lies on the line
                return self
        return None

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        """a new aggregate, every member rotated by ``theta`` radians about
        line ``axis``.  Members are placed by their parameter along the
        rotated line so they stay exactly collinear after rounding."""
        line = self.line
        rotated = line.rotate(axis, theta, policy)
        return LineSegmentsCollinear(*(
            LineSegment(rotated.at(line.parameter(s.p)),
                        rotated.at(line.parameter(s.q)))
            for s in self._segments))


def _assemble(results):
    """combine member intersection results into the simplest geometry
    covering them"""
    points = []
    segments = []
    for r in results:
        if r is None:
            continue
        if isinstance(r, Point):
            points.append(r)
        elif isinstance(r, LineSegment):
            segments.append(r)
        elif isinstance(r, LineSegmentsCollinear):
            segments.extend(r.segments)
        else:
            points.extend(r.points)
            segments.extend(r.segments)
    merged = None
    spans = []
    if segments:
        merged = LineSegmentsCollinear(*segments).simplify()
        spans = list(merged) if isinstance(merged, LineSegmentsCollinear) \
            else [merged]
    loose = [p.copy() for p in unique(points)
             if not any(s.contains(p) for s in spans)]
    if not loose:
        return merged
    if not spans and len(loose) == 1:
        return loose[0]
    return PointsAndSegments(loose, spans)


__all__ = [
    'Containment',
    'LineSegmentsCollinear',
    'Overlap',
    'PointsAndSegments',
    'classify',
    'collinear_intersection',
    'containment',
    'merge',
    'span',
]
