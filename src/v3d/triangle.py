## triangles for v3d
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


"""triangles in 3-space"""

from v3d.arith import arith_of
from v3d.collinear import span
from v3d.geometry import DegenerateGeometryError, Geometry
from v3d.line import Line
from v3d.plane import Plane
from v3d.point import Point
from v3d.precision import DEFAULT_POLICY
from v3d.ray import Ray
from v3d.segment import LineSegment
from v3d.vector import Vector, add, cross, dot, iszero, mag2, sub


class Triangle(Geometry):
    """the closed triangle ``p``, ``q``, ``r``"""

    rank = 6

    def __init__(self, p, q, r, offset=None):
        arith = arith_of(p, q, r)
        n = cross(sub(q.position, p.position), sub(r.position, p.position))
        if iszero(arith, n):
            raise DegenerateGeometryError(
                'triangle vertices {!r}, {!r}, {!r} are collinear'.format(
                    p, q, r))
        super().__init__(arith, offset)
        self.p = p.rebased(self.offset)
        self.q = q.rebased(self.offset)
        self.r = r.rebased(self.offset)
        self.plane = Plane(self.p, Vector.of(n, arith), offset=self.offset)

    def __repr__(self):
        return 'Triangle({!r}, {!r}, {!r})'.format(self.p, self.q, self.r)

    @property
    def points(self):
        return (self.p, self.q, self.r)

    @property
    def normal(self):
        """``(q - p) x (r - p)``, not normalized"""
        return self.plane.normal

    @property
    def edges(self):
        return (LineSegment(self.p, self.q, offset=self.offset),
                LineSegment(self.q, self.r, offset=self.offset),
                LineSegment(self.r, self.p, offset=self.offset))

    def area(self, policy=DEFAULT_POLICY):
        return self.arith.root(
            self.arith.divide(mag2(self.normal.triple), 4), policy)

    def perimeter(self, policy=DEFAULT_POLICY):
        return self.arith.root_sum((e.length_squared() for e in self.edges),
                                   policy)

    @property
    def centroid(self):
        pos = add(add(self.p.position, self.q.position), self.r.position)
        return Point.of(tuple(self.arith.divide(c, 3) for c in pos),
                        self.arith)

    def _make_envelope(self):
        from v3d.envelope import Envelope
        return Envelope.of(self.p, self.q, self.r)

    def contains(self, point) -> bool:
        """``True`` if ``point`` lies on the closed triangle"""
        arith = arith_of(self, point)
        if not self.plane.contains(point):
            return False
        n = self.normal.triple
        x = point.position
        for a, b in ((self.p, self.q), (self.q, self.r), (self.r, self.p)):
            e = sub(b.position, a.position)
            if arith.sign(dot(cross(e, sub(x, a.position)), n)) < 0:
                return False
        return True

    def equals(self, other) -> bool:
        if not isinstance(other, Triangle):
            return False
        return all(any(a.equals(b) for b in other.points) for a in self.points)

    def intersection(self, other):
        if isinstance(other, Point):
            return other if self.contains(other) else None
        if isinstance(other, Line):
            return self._intersect_line(other)
        if isinstance(other, (LineSegment, Ray)):
            hit = self._intersect_line(other.line)
            if hit is None:
                return None
            return hit.intersection(other)
        return self._delegate(other)

    def _intersect_line(self, line):
        arith_of(self, line)
        if not self.plane.is_on_plane(line):
            hit = self.plane.intersection(line)
            if hit is None or not self.contains(hit):
                return None
            return hit
        ## the line lies in the plane: clip it against the edges
        hits = [e.intersection(line) for e in self.edges]
        for h in hits:
            if isinstance(h, LineSegment):
                return LineSegment(h.p, h.q)
        return span([h for h in hits if h is not None])

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        return Triangle(self.p.rotate(axis, theta, policy),
                        self.q.rotate(axis, theta, policy),
                        self.r.rotate(axis, theta, policy))


__all__ = [
    'Triangle',
]
