## planes for v3d
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


"""infinite planes, given by a point and a normal vector"""

from v3d.arith import arith_of
from v3d.geometry import DegenerateGeometryError, Geometry
from v3d.line import Line
from v3d.point import Point
from v3d.precision import DEFAULT_POLICY
from v3d.ray import Ray
from v3d.segment import LineSegment
from v3d.vector import Vector, add, cross, dot, iszero, scale, sub


class Plane(Geometry):
    """the plane through ``point`` perpendicular to ``normal``"""

    rank = 5

    def __init__(self, point, normal, offset=None):
        arith = arith_of(point, normal)
        if normal.is_zero():
            raise DegenerateGeometryError('plane normal must be non-zero')
        super().__init__(arith, offset)
        self.point = point.rebased(self.offset)
        self.normal = normal

    @classmethod
    def from_points(cls, p, q, r):
        """the plane through three non-collinear points"""
        arith = arith_of(p, q, r)
        n = cross(sub(q.position, p.position), sub(r.position, p.position))
        if iszero(arith, n):
            raise DegenerateGeometryError(
                'points {!r}, {!r}, {!r} are collinear'.format(p, q, r))
        return cls(p, Vector.of(n, arith))

    def __repr__(self):
        return 'Plane({!r}, {!r})'.format(self.point, self.normal)

    def equation(self):
        """coefficients ``(a, b, c, d)`` of ``a*x + b*y + c*z + d = 0``"""
        n = self.normal.triple
        return n + (-dot(n, self.point.position),)

    def side(self, point):
        """``n . (point - self.point)``: positive above, negative below"""
        arith_of(self, point)
        return dot(self.normal.triple, sub(point.position,
                                           self.point.position))

    def contains(self, point) -> bool:
        return self.arith.is_zero(self.side(point))

    def is_parallel(self, line) -> bool:
        """``True`` if ``line`` is parallel to (or lies in) this plane"""
        return self.normal.is_orthogonal(line.direction)

    def is_on_plane(self, line) -> bool:
        return self.is_parallel(line) and self.contains(line.point)

    def equals(self, other) -> bool:
        if not isinstance(other, Plane):
            return False
        return (self.normal.is_scalar_multiple(other.normal)
                and self.contains(other.point))

    def intersection(self, other):
        if isinstance(other, Point):
            return other if self.contains(other) else None
        if isinstance(other, Line):
            return self._intersect_line(other)
        if isinstance(other, (LineSegment, Ray)):
            if self.is_on_plane(other.line):
                return other
            hit = self._intersect_line(other.line)
            if hit is None or not other.contains(hit):
                return None
            return hit
        return self._delegate(other)

    def _intersect_line(self, line):
        arith = arith_of(self, line)
        if self.is_parallel(line):
            return line if self.contains(line.point) else None
        n = self.normal.triple
        o = line.point.position
        d = line.direction.triple
        t = arith.divide(dot(n, sub(self.point.position, o)), dot(n, d))
        return Point.of(add(o, scale(d, t)), arith)

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        return Plane(self.point.rotate(axis, theta, policy),
                     self.normal.rotate(axis.direction, theta, policy))


__all__ = [
    'Plane',
]
