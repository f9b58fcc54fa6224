## tetrahedra for v3d
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


"""tetrahedra in 3-space

A ``Tetrahedron`` is the closed solid spanned by four non-coplanar
points.  Its four faces are triangles sharing the tetrahedron's
offset.  Volume is exact in rational mode; surface area is a sum of
square roots and is rounded once.
"""

import logging

from v3d.arith import arith_of
from v3d.collinear import span
from v3d.geometry import DegenerateGeometryError, Geometry
from v3d.line import Line
from v3d.point import Point
from v3d.precision import DEFAULT_POLICY
from v3d.ray import Ray
from v3d.segment import LineSegment
from v3d.triangle import Triangle
from v3d.vector import add, cross, dot, mag2, sub

logger = logging.getLogger(__name__)


class Tetrahedron(Geometry):
    """the closed tetrahedron ``p``, ``q``, ``r``, ``s``"""

    rank = 8

    def __init__(self, p, q, r, s, offset=None):
        arith = arith_of(p, q, r, s)
        a = p.position
        det = dot(cross(sub(q.position, a), sub(r.position, a)),
                  sub(s.position, a))
        if arith.is_zero(det):
            raise DegenerateGeometryError(
                'tetrahedron vertices {!r}, {!r}, {!r}, {!r} are '
                'coplanar'.format(p, q, r, s))
        super().__init__(arith, offset)
        self.p = p.rebased(self.offset)
        self.q = q.rebased(self.offset)
        self.r = r.rebased(self.offset)
        self.s = s.rebased(self.offset)

    def __repr__(self):
        return 'Tetrahedron({!r}, {!r}, {!r}, {!r})'.format(
            self.p, self.q, self.r, self.s)

    @property
    def points(self):
        return (self.p, self.q, self.r, self.s)

    def _faces_with_apex(self):
        p, q, r, s = self.points
        return (((p, q, r), s), ((q, s, r), p), ((s, p, r), q), ((p, s, q), r))

    @property
    def faces(self):
        return tuple(Triangle(*f, offset=self.offset)
                     for f, _ in self._faces_with_apex())

    def _det(self):
        a = self.p.position
        return dot(cross(sub(self.q.position, a), sub(self.r.position, a)),
                   sub(self.s.position, a))

    def volume(self):
        """exact volume, ``|det(q - p, r - p, s - p)| / 6``"""
        return self.arith.divide(abs(self._det()), 6)

    def area(self, policy=DEFAULT_POLICY):
        return self.arith.root_sum(
            (self.arith.divide(mag2(f.normal.triple), 4) for f in self.faces),
            policy)

    @property
    def centroid(self):
        pos = add(add(self.p.position, self.q.position),
                  add(self.r.position, self.s.position))
        return Point.of(tuple(self.arith.divide(c, 4) for c in pos),
                        self.arith)

    def _make_envelope(self):
        from v3d.envelope import Envelope
        return Envelope.of(*self.points)

    def contains(self, point) -> bool:
        """``True`` if ``point`` lies in the closed solid"""
        arith = arith_of(self, point)
        x = point.position
        for (a, b, c), apex in self._faces_with_apex():
            n = cross(sub(b.position, a.position), sub(c.position, a.position))
            side = arith.sign(dot(n, sub(x, a.position)))
            if side != 0 and side != arith.sign(
                    dot(n, sub(apex.position, a.position))):
                return False
        return True

    def equals(self, other) -> bool:
        if not isinstance(other, Tetrahedron):
            return False
        return all(any(a.equals(b) for b in other.points) for a in self.points)

    def intersection(self, other):
        if isinstance(other, Point):
            return other if self.contains(other) else None
        if isinstance(other, Line):
            return self._intersect_line(other)
        if isinstance(other, (LineSegment, Ray)):
            chord = self._intersect_line(other.line)
            if chord is None:
                return None
            if isinstance(chord, Point):
                return chord if other.contains(chord) else None
            return chord.intersection(other)
        return self._delegate(other)

    def _intersect_line(self, line):
        """the chord of ``line`` through the solid: the span of its hits
        on the faces"""
        hits = []
        for f in self.faces:
            h = f.intersection(line)
            if isinstance(h, LineSegment):
                hits.extend(h.points)
            elif h is not None:
                hits.append(h)
        result = span(hits)
        logger.debug('line %r meets tetrahedron in %r', line, result)
        return result

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        return Tetrahedron(*(v.rotate(axis, theta, policy)
                             for v in self.points))


__all__ = [
    'Tetrahedron',
]
