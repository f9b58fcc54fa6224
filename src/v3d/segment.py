## line segments for v3d
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


"""bounded line segments

A ``LineSegment`` has two distinct endpoints ``p`` and ``q`` and an
underlying ``Line`` through ``p`` with direction ``q - p``.  The
endpoints and the line share the segment's offset.  Direction carries
no meaning for equality: ``p-q`` equals ``q-p``.
"""

from v3d.arith import arith_of
from v3d.geometry import DegenerateGeometryError, Geometry
from v3d.line import Line
from v3d.point import Point
from v3d.precision import DEFAULT_POLICY
from v3d.ray import Ray
from v3d.vector import Vector, sub


class LineSegment(Geometry):
    """the closed segment from ``p`` to ``q``"""

    rank = 3

    def __init__(self, p, q, offset=None):
        arith = arith_of(p, q)
        if p.equals(q):
            raise DegenerateGeometryError(
                'segment endpoints coincide at {!r}'.format(p))
        super().__init__(arith, offset)
        self.p = p.rebased(self.offset)
        self.q = q.rebased(self.offset)
        self.line = Line(self.p, self.direction, offset=self.offset)

    def __repr__(self):
        return 'LineSegment({!r}, {!r})'.format(self.p, self.q)

    @property
    def points(self):
        return (self.p, self.q)

    @property
    def direction(self):
        """the vector from ``p`` to ``q``"""
        return Vector.of(sub(self.q.position, self.p.position), self.arith)

    def length_squared(self):
        return self.direction.magnitude_squared()

    def length(self, policy=DEFAULT_POLICY):
        return self.arith.root(self.length_squared(), policy)

    def reverse(self):
        return LineSegment(self.q, self.p)

    def contains(self, point) -> bool:
        """``True`` if ``point`` lies on the closed segment"""
        return point.is_between(self.p, self.q)

    def equals(self, other) -> bool:
        if not isinstance(other, LineSegment):
            return False
        return ((self.p.equals(other.p) and self.q.equals(other.q))
                or (self.p.equals(other.q) and self.q.equals(other.p)))

    def is_collinear(self, other) -> bool:
        """``True`` if ``other`` (a line or a segment) lies on this
        segment's line"""
        line = other if isinstance(other, Line) else other.line
        return self.line.is_collinear(line)

    def parameter(self, point):
        """parameter of ``point``'s projection, 0 at ``p`` and 1 at ``q``"""
        return self.line.parameter(point)

    def _make_envelope(self):
        from v3d.envelope import Envelope
        return Envelope.of(self.p, self.q)

    def intersection(self, other):
        if isinstance(other, Point):
            return other if self.contains(other) else None
        if isinstance(other, Line):
            return self._intersect_line(other)
        if isinstance(other, Ray):
            return self._intersect_ray(other)
        if isinstance(other, LineSegment):
            return self._intersect_segment(other)
        return self._delegate(other)

    def _intersect_line(self, line):
        if self.line.is_collinear(line):
            return self
        hit = self.line.intersection(line)
        if hit is None or not self.contains(hit):
            return None
        return hit

    def _intersect_ray(self, ray):
        arith_of(self, ray)
        if self.line.is_collinear(ray.line):
            from v3d.collinear import span
            inside = [pt for pt in self.points if ray.contains(pt)]
            if self.contains(ray.point):
                inside.append(ray.point)
            return span(inside)
        hit = self.line.intersection(ray.line)
        if hit is None or not (self.contains(hit) and ray.contains(hit)):
            return None
        return hit

    def _intersect_segment(self, other):
        if self.line.is_collinear(other.line):
            from v3d.collinear import collinear_intersection
            return collinear_intersection(self, other)
        hit = self.line.intersection(other.line)
        if hit is None:
            return None
        if self.contains(hit) and other.contains(hit):
            return hit
        return None

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        """a new segment, rotated by ``theta`` radians about line ``axis``"""
        return LineSegment(self.p.rotate(axis, theta, policy),
                           self.q.rotate(axis, theta, policy))


__all__ = [
    'LineSegment',
]
