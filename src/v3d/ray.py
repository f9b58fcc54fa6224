## rays for v3d
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


"""rays (half-lines)

A ``Ray`` starts at ``point`` and runs in the sense of ``direction``:
the points ``point + t * direction`` for ``t >= 0``.  Its underlying
``Line`` shares the ray's offset.
"""

from v3d.arith import arith_of
from v3d.geometry import DegenerateGeometryError, Geometry
from v3d.line import Line
from v3d.point import Point
from v3d.precision import DEFAULT_POLICY
from v3d.vector import Vector, dot, sub


class Ray(Geometry):
    """the half-line from ``point`` in the sense of ``direction``"""

    rank = 2

    def __init__(self, point, direction, offset=None):
        arith = arith_of(point, direction)
        if direction.is_zero():
            raise DegenerateGeometryError('ray direction must be non-zero')
        super().__init__(arith, offset)
        self.point = point.rebased(self.offset)
        self.direction = direction
        self.line = Line(self.point, direction, offset=self.offset)

    @classmethod
    def through(cls, p, q):
        """the ray from ``p`` through ``q``"""
        arith = arith_of(p, q)
        if p.equals(q):
            raise DegenerateGeometryError('a ray needs two distinct points')
        return cls(p, Vector.of(sub(q.position, p.position), arith))

    def __repr__(self):
        return 'Ray({!r}, {!r})'.format(self.point, self.direction)

    def parameter(self, point):
        return self.line.parameter(point)

    def at(self, t):
        return self.line.at(t)

    def _ahead(self, point) -> bool:
        """``True`` if the projection of ``point`` is not behind the
        start of the ray"""
        v = sub(point.position, self.point.position)
        return self.arith.le(0, dot(v, self.direction.triple))

    def contains(self, point) -> bool:
        return self.line.contains(point) and self._ahead(point)

    def is_same_sense(self, other) -> bool:
        """``True`` if ``other`` (a ray or line) is parallel to this ray
        and points the same way"""
        return (self.direction.is_scalar_multiple(other.direction)
                and self.arith.sign(dot(self.direction.triple,
                                        other.direction.triple)) > 0)

    def equals(self, other) -> bool:
        if not isinstance(other, Ray):
            return False
        return self.point.equals(other.point) and self.is_same_sense(other)

    def intersection(self, other):
        if isinstance(other, Point):
            return other if self.contains(other) else None
        if isinstance(other, Line):
            return self._intersect_line(other)
        if isinstance(other, Ray):
            return self._intersect_ray(other)
        return self._delegate(other)

    def _intersect_line(self, line):
        arith_of(self, line)
        if self.line.is_collinear(line):
            return self
        hit = self.line.intersection(line)
        if hit is None or not self._ahead(hit):
            return None
        return hit

    def _intersect_ray(self, other):
        arith_of(self, other)
        if not self.line.is_collinear(other.line):
            hit = self.line.intersection(other.line)
            if hit is None or not (self._ahead(hit) and other._ahead(hit)):
                return None
            return hit
        if self.is_same_sense(other):
            ## the ray that starts further along lies within the other
            return other if self.contains(other.point) else self
        if not self.contains(other.point):
            return None
        if self.point.equals(other.point):
            return self.point.copy()
        from v3d.segment import LineSegment
        return LineSegment(self.point, other.point)

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        """a new ray, rotated by ``theta`` radians about line ``axis``"""
        return Ray(self.point.rotate(axis, theta, policy),
                   self.direction.rotate(axis.direction, theta, policy))


__all__ = [
    'Ray',
]
