## rectangles for v3d
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


"""planar rectangles

A ``Rectangle`` has corners ``p``, ``q``, ``r``, ``s`` in order around
its boundary, with ``q - p`` orthogonal to ``r - q`` and
``s = p + (r - q)``.  It is the union of the triangles ``pqr`` and
``rsp``, which share its offset, and its intersections are the joins
of theirs.
"""

from v3d.arith import arith_of
from v3d.collinear import span
from v3d.geometry import DegenerateGeometryError, Geometry
from v3d.line import Line
from v3d.point import Point
from v3d.precision import DEFAULT_POLICY
from v3d.ray import Ray
from v3d.segment import LineSegment
from v3d.triangle import Triangle
from v3d.vector import add, dot, iszero, mag2, same, sub


class Rectangle(Geometry):
    """the closed rectangle ``p``, ``q``, ``r``, ``s``"""

    rank = 7

    def __init__(self, p, q, r, s, offset=None):
        arith = arith_of(p, q, r, s)
        pq = sub(q.position, p.position)
        qr = sub(r.position, q.position)
        if iszero(arith, pq) or iszero(arith, qr):
            raise DegenerateGeometryError(
                'rectangle {!r}, {!r}, {!r}, {!r} has no area'.format(
                    p, q, r, s))
        if not (arith.is_zero(dot(pq, qr))
                and same(arith, s.position, add(p.position, qr))):
            raise DegenerateGeometryError(
                '{!r}, {!r}, {!r}, {!r} do not form a rectangle'.format(
                    p, q, r, s))
        self._setup(arith, p, q, r, s, offset)

    def _setup(self, arith, p, q, r, s, offset):
        super().__init__(arith, offset)
        self.p = p.rebased(self.offset)
        self.q = q.rebased(self.offset)
        self.r = r.rebased(self.offset)
        self.s = s.rebased(self.offset)
        self.pqr = Triangle(self.p, self.q, self.r, offset=self.offset)
        self.rsp = Triangle(self.r, self.s, self.p, offset=self.offset)
        self.plane = self.pqr.plane

    def __repr__(self):
        return 'Rectangle({!r}, {!r}, {!r}, {!r})'.format(
            self.p, self.q, self.r, self.s)

    @property
    def points(self):
        return (self.p, self.q, self.r, self.s)

    @property
    def triangles(self):
        return (self.pqr, self.rsp)

    @property
    def normal(self):
        """``(q - p) x (r - q)``, not normalized"""
        return self.plane.normal

    @property
    def edges(self):
        return (LineSegment(self.p, self.q, offset=self.offset),
                LineSegment(self.q, self.r, offset=self.offset),
                LineSegment(self.r, self.s, offset=self.offset),
                LineSegment(self.s, self.p, offset=self.offset))

    def _sides_squared(self):
        return (mag2(sub(self.q.position, self.p.position)),
                mag2(sub(self.r.position, self.q.position)))

    def area(self, policy=DEFAULT_POLICY):
        a, b = self._sides_squared()
        return self.arith.root(a * b, policy)

    def perimeter(self, policy=DEFAULT_POLICY):
        a, b = self._sides_squared()
        return self.arith.root_sum((a, b, a, b), policy)

    @property
    def centroid(self):
        pos = add(self.p.position, self.r.position)
        return Point.of(tuple(self.arith.divide(c, 2) for c in pos),
                        self.arith)

    def _make_envelope(self):
        from v3d.envelope import Envelope
        return Envelope.of(*self.points)

    def contains(self, point) -> bool:
        """``True`` if ``point`` lies on the closed rectangle"""
        return self.pqr.contains(point) or self.rsp.contains(point)

    def equals(self, other) -> bool:
        if not isinstance(other, Rectangle):
            return False
        return (all(any(a.equals(b) for b in other.points)
                    for a in self.points)
                and all(any(b.equals(a) for a in self.points)
                        for b in other.points))

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
        """the join of the line's intersections with both triangles"""
        arith_of(self, line)
        hits = []
        for t in self.triangles:
            h = t.intersection(line)
            if isinstance(h, LineSegment):
                hits.extend(h.points)
            elif h is not None:
                hits.append(h)
        return span(hits)

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        """a new rectangle, rotated by ``theta`` radians about line
        ``axis``.  In rational mode the corners are rounded, so the result
        is orthogonal only to within the policy's precision; ``s`` is kept
        exactly at ``p + (r - q)``."""
        p, q, r = (v.rotate(axis, theta, policy) for v in (self.p, self.q,
                                                          self.r))
        s = Point.of(add(p.position, sub(r.position, q.position)), self.arith)
        rect = Rectangle.__new__(Rectangle)
        rect._setup(self.arith, p, q, r, s, None)
        return rect


__all__ = [
    'Rectangle',
]
