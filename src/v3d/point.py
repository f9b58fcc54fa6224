## points for v3d
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


"""points in 3-space

A ``Point`` is an ``Offset`` plus a relative position.  Points created
directly own a fresh offset; points that belong to a compound geometry
are rebased onto the compound's offset, so translating the compound
moves all of them at once.
"""

from v3d.arith import RATIONAL, arith_of
from v3d.geometry import Geometry
from v3d.precision import DEFAULT_POLICY
from v3d.vector import Vector, add, cross, dot, iszero, same, sub


class Point(Geometry):
    """a point ``(x, y, z)``"""

    rank = 0

    def __init__(self, x=0, y=0, z=0, arith=RATIONAL):
        super().__init__(arith)
        self.rel = (arith.coerce(x), arith.coerce(y), arith.coerce(z))

    @classmethod
    def at(cls, offset, rel, arith=None):
        """a point at ``offset + rel``, sharing ``offset``.  ``rel`` is a
        triple already in the arithmetic's number type."""
        if arith is None:
            arith = offset.arith
        pt = cls.__new__(cls)
        Geometry.__init__(pt, arith, offset)
        pt.rel = tuple(rel)
        return pt

    @classmethod
    def of(cls, position, arith=RATIONAL):
        """a point with its own offset at triple ``position``"""
        return cls(*position, arith=arith)

    def rebased(self, offset):
        """this point expressed relative to ``offset``; ``self`` when it
        already shares it"""
        if offset is self.offset:
            return self
        arith_of(self, offset)
        return Point.at(offset, sub(self.position, offset.vector.triple),
                        self.arith)

    def copy(self):
        return Point.of(self.position, self.arith)

    def __repr__(self):
        return 'Point({}, {}, {})'.format(*self.position)

    @property
    def position(self):
        return add(self.offset.vector.triple, self.rel)

    @property
    def x(self):
        return self.offset.vector.dx + self.rel[0]

    @property
    def y(self):
        return self.offset.vector.dy + self.rel[1]

    @property
    def z(self):
        return self.offset.vector.dz + self.rel[2]

    def __iter__(self):
        return iter(self.position)

    def __sub__(self, other):
        """the vector from ``other`` to ``self``"""
        arith = arith_of(self, other)
        return Vector.of(sub(self.position, other.position), arith)

    def __add__(self, v):
        """a new point displaced by vector ``v``"""
        arith = arith_of(self, v)
        return Point.of(add(self.position, v.triple), arith)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def equals(self, other) -> bool:
        if not isinstance(other, Point):
            return False
        arith = arith_of(self, other)
        return same(arith, self.position, other.position)

    def is_origin(self) -> bool:
        return all(self.arith.is_zero(c) for c in self.position)

    def is_between(self, a, b) -> bool:
        """``True`` if this point lies on the closed segment from ``a`` to
        ``b`` (``a`` and ``b`` may coincide)"""
        arith = arith_of(self, a, b)
        d = sub(b.position, a.position)
        if iszero(arith, d):
            return self.equals(a)
        v = sub(self.position, a.position)
        if not iszero(arith, cross(d, v)):
            return False
        t = dot(v, d)
        return arith.le(0, t) and arith.le(t, dot(d, d))

    def _make_envelope(self):
        from v3d.envelope import Envelope
        return Envelope.of(self)

    def intersection(self, other):
        if isinstance(other, Point):
            return self if self.equals(other) else None
        return self._delegate(other)

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        """a new point, this one rotated by ``theta`` radians about the
        ``Line`` ``axis``"""
        arith = arith_of(self, axis)
        origin = axis.point.position
        return Point.of(arith.rotate(sub(self.position, origin), origin,
                                     axis.direction.triple, theta, policy),
                        arith)


def unique(points):
    """the distinct points of ``points``, in first-seen order"""
    result = []
    for p in points:
        if not any(p.equals(r) for r in result):
            result.append(p)
    return result


__all__ = [
    'Point',
    'unique',
]
