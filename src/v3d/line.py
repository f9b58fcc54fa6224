## infinite lines for v3d
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


"""infinite lines, given by a point and a non-zero direction"""

from v3d.arith import arith_of
from v3d.geometry import DegenerateGeometryError, Geometry
from v3d.point import Point
from v3d.precision import DEFAULT_POLICY
from v3d.vector import Vector, add, cross, dot, iszero, same, scale, sub


class Line(Geometry):
    """the infinite line through ``point`` with direction ``direction``"""

    rank = 1

    def __init__(self, point, direction, offset=None):
        arith = arith_of(point, direction)
        if direction.is_zero():
            raise DegenerateGeometryError('line direction must be non-zero')
        super().__init__(arith, offset)
        self.point = point.rebased(self.offset)
        self.direction = direction

    @classmethod
    def through(cls, p, q):
        """the line through points ``p`` and ``q``"""
        arith = arith_of(p, q)
        if p.equals(q):
            raise DegenerateGeometryError('a line needs two distinct points')
        return cls(p, Vector.of(sub(q.position, p.position), arith))

    def __repr__(self):
        return 'Line({!r}, {!r})'.format(self.point, self.direction)

    def contains(self, point) -> bool:
        arith = arith_of(self, point)
        v = sub(point.position, self.point.position)
        return iszero(arith, cross(self.direction.triple, v))

    def is_parallel(self, line) -> bool:
        return self.direction.is_scalar_multiple(line.direction)

    def is_collinear(self, line) -> bool:
        return self.is_parallel(line) and self.contains(line.point)

    def equals(self, other) -> bool:
        return isinstance(other, Line) and self.is_collinear(other)

    def parameter(self, point):
        """the parameter ``t`` of the projection of ``point`` onto this
        line, ``point = self.point + t * self.direction``"""
        d = self.direction.triple
        v = sub(point.position, self.point.position)
        return self.arith.divide(dot(v, d), dot(d, d))

    def at(self, t):
        """the point at parameter ``t``"""
        return Point.of(add(self.point.position,
                            scale(self.direction.triple, t)), self.arith)

    def nearest_point(self, point):
        """the point of this line closest to ``point``"""
        arith_of(self, point)
        return self.at(self.parameter(point))

    def intersection(self, other):
        if isinstance(other, Point):
            return other if self.contains(other) else None
        if isinstance(other, Line):
            return self._intersect_line(other)
        return self._delegate(other)

    def _intersect_line(self, other):
        arith = arith_of(self, other)
        d1 = self.direction.triple
        d2 = other.direction.triple
        n = cross(d1, d2)
        if iszero(arith, n):
            return self if self.contains(other.point) else None
        o1 = self.point.position
        o2 = other.point.position
        w = sub(o2, o1)
        nn = dot(n, n)
        t = arith.divide(dot(cross(w, d2), n), nn)
        s = arith.divide(dot(cross(w, d1), n), nn)
        c1 = add(o1, scale(d1, t))
        c2 = add(o2, scale(d2, s))
        ## skew lines have distinct closest points
        if not same(arith, c1, c2):
            return None
        return Point.of(c1, arith)

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        """a new line, rotated by ``theta`` radians about line ``axis``"""
        return Line(self.point.rotate(axis, theta, policy),
                    self.direction.rotate(axis.direction, theta, policy))


__all__ = [
    'Line',
]
