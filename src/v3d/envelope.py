## axis-aligned envelopes for v3d
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


"""axis-aligned bounding boxes

An ``Envelope`` is six bounds ``xmin <= xmax``, ``ymin <= ymax``,
``zmin <= zmax``.  It may be degenerate, collapsing to a rectangle, a
line or a single point.  Envelopes are immutable values: they have no
offset, and ``translate()`` returns a moved copy.

Lines, rays and segments are clipped against the three slabs of the
box.  On an axis where the direction has no component the line either
lies inside the slab or misses the box entirely, which is decided by an
inclusive bound check rather than by division.
"""

import logging

from v3d.arith import RATIONAL, arith_of
from v3d.geometry import DegenerateGeometryError, Geometry
from v3d.line import Line
from v3d.point import Point
from v3d.ray import Ray
from v3d.segment import LineSegment
from v3d.vector import Vector, add, same, scale, sub

logger = logging.getLogger(__name__)


class Envelope(Geometry):
    """the box ``[xmin, xmax] x [ymin, ymax] x [zmin, zmax]``"""

    rank = 4

    def __init__(self, xmin, xmax, ymin, ymax, zmin, zmax, arith=RATIONAL):
        lo = (arith.coerce(xmin), arith.coerce(ymin), arith.coerce(zmin))
        hi = (arith.coerce(xmax), arith.coerce(ymax), arith.coerce(zmax))
        for a, b in zip(lo, hi):
            if a > b:
                raise DegenerateGeometryError(
                    'envelope bound {} exceeds {}'.format(a, b))
        self.arith = arith
        self.offset = None
        self.min = lo
        self.max = hi

    @classmethod
    def of(cls, *points):
        """the smallest envelope containing ``points``"""
        if not points:
            raise DegenerateGeometryError('an envelope needs a point')
        arith = arith_of(*points)
        pos = [p.position for p in points]
        lo = [min(c[i] for c in pos) for i in range(3)]
        hi = [max(c[i] for c in pos) for i in range(3)]
        return cls(lo[0], hi[0], lo[1], hi[1], lo[2], hi[2], arith=arith)

    @classmethod
    def _bounds(cls, lo, hi, arith):
        return cls(lo[0], hi[0], lo[1], hi[1], lo[2], hi[2], arith=arith)

    def __repr__(self):
        return 'Envelope({}, {}, {}, {}, {}, {})'.format(
            self.xmin, self.xmax, self.ymin, self.ymax, self.zmin, self.zmax)

    xmin = property(lambda self: self.min[0])
    ymin = property(lambda self: self.min[1])
    zmin = property(lambda self: self.min[2])
    xmax = property(lambda self: self.max[0])
    ymax = property(lambda self: self.max[1])
    zmax = property(lambda self: self.max[2])

    @property
    def envelope(self):
        return self

    def translate(self, v):
        """a copy of this envelope moved by vector ``v``"""
        if not isinstance(v, Vector):
            raise TypeError('translate requires a Vector, got {!r}'.format(v))
        arith = arith_of(self, v)
        return Envelope._bounds(add(self.min, v.triple),
                                add(self.max, v.triple), arith)

    def equals(self, other) -> bool:
        if not isinstance(other, Envelope):
            return False
        arith = arith_of(self, other)
        return same(arith, self.min, other.min) and \
            same(arith, self.max, other.max)

    def _extent(self):
        return sub(self.max, self.min)

    def is_point(self) -> bool:
        return all(self.arith.is_zero(e) for e in self._extent())

    def is_line(self) -> bool:
        """``True`` if exactly two dimensions have zero extent"""
        return sum(1 for e in self._extent() if self.arith.is_zero(e)) == 2

    @property
    def corners(self):
        """the eight corner points, possibly repeated when degenerate"""
        return tuple(Point(x, y, z, arith=self.arith)
                     for x in (self.xmin, self.xmax)
                     for y in (self.ymin, self.ymax)
                     for z in (self.zmin, self.zmax))

    def union(self, other):
        arith = arith_of(self, other)
        return Envelope._bounds(
            [min(a, b) for a, b in zip(self.min, other.min)],
            [max(a, b) for a, b in zip(self.max, other.max)], arith)

    def contains(self, other) -> bool:
        """``True`` if envelope ``other`` lies within this one"""
        arith = arith_of(self, other)
        return all(arith.le(self.min[i], other.min[i])
                   and arith.le(other.max[i], self.max[i]) for i in range(3))

    def is_contained_by(self, other) -> bool:
        return other.contains(self)

    def contains_point(self, point) -> bool:
        arith = arith_of(self, point)
        pos = point.position
        return all(arith.le(self.min[i], pos[i]) and arith.le(pos[i], self.max[i])
                   for i in range(3))

    def intersection(self, other):
        if isinstance(other, Envelope):
            return self._intersect_envelope(other)
        if isinstance(other, Point):
            return other if self.contains_point(other) else None
        if isinstance(other, LineSegment):
            arith_of(self, other)
            return self._clip(other.p.position, other.direction.triple,
                              0, 1)
        if isinstance(other, Ray):
            arith_of(self, other)
            return self._clip(other.point.position, other.direction.triple,
                              0, None)
        if isinstance(other, Line):
            arith_of(self, other)
            return self._clip(other.point.position, other.direction.triple,
                              None, None)
        return self._delegate(other)

    def _intersect_envelope(self, other):
        arith = arith_of(self, other)
        lo = [max(a, b) for a, b in zip(self.min, other.min)]
        hi = [min(a, b) for a, b in zip(self.max, other.max)]
        for a, b in zip(lo, hi):
            if arith.lt(b, a):
                return None
        ## within tolerance the bounds may cross by less than epsilon
        hi = [max(a, b) for a, b in zip(lo, hi)]
        return Envelope._bounds(lo, hi, arith)

    def _clip(self, origin, d, lo, hi):
        """slab clipping of ``origin + t * d`` for ``lo <= t <= hi``;
        ``None`` leaves that end of the parameter range open"""
        arith = self.arith
        if lo is not None:
            lo = arith.coerce(lo)
        if hi is not None:
            hi = arith.coerce(hi)
        for i in range(3):
            if arith.is_zero(d[i]):
                if not (arith.le(self.min[i], origin[i])
                        and arith.le(origin[i], self.max[i])):
                    logger.debug('clip: parallel to slab %d and outside', i)
                    return None
                continue
            t1 = arith.divide(self.min[i] - origin[i], d[i])
            t2 = arith.divide(self.max[i] - origin[i], d[i])
            if t1 > t2:
                t1, t2 = t2, t1
            lo = t1 if lo is None else max(lo, t1)
            hi = t2 if hi is None else min(hi, t2)
            if arith.lt(hi, lo):
                logger.debug('clip: empty on slab %d', i)
                return None
        ## open ends remain only for a direction within tolerance of zero
        if lo is None:
            lo = arith.coerce(0)
        if hi is None:
            hi = lo
        a = add(origin, scale(d, lo))
        b = add(origin, scale(d, hi))
        if same(arith, a, b):
            return Point.of(a, arith)
        return LineSegment(Point.of(a, arith), Point.of(b, arith))


__all__ = [
    'Envelope',
]
