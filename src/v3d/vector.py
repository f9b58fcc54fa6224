## vectors and shared offsets for v3d
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


"""vectors, coordinate triple helpers and shared offsets

The functions ``add``, ``sub``, ``scale``, ``dot``, ``cross`` and
``mag2`` operate on plain ``(x, y, z)`` tuples and are used by the
algorithms of the other modules.  ``Vector`` is the immutable
displacement type of the public interface, and ``Offset`` is the
mutable handle shared by the points of a compound geometry.
"""

from v3d.arith import RATIONAL, arith_of
from v3d.precision import DEFAULT_POLICY

## operations on coordinate triples
## --------------------------------

def add(a, b):
    """ triple `a + b`"""
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])

def sub(a, b):
    """ triple `a - b`"""
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])

def scale(a, c):
    """ triple ``a`` times scalar ``c``"""
    return (a[0] * c, a[1] * c, a[2] * c)

def dot(a, b):
    """ triple ``a`` dot ``b`` """
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

def cross(a, b):
    """ triple ``a`` cross ``b`` """
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])

def mag2(a):
    """ squared magnitude of triple ``a``"""
    return dot(a, a)

def iszero(arith, a):
    """ is every component of triple ``a`` zero under ``arith``"""
    return arith.is_zero(a[0]) and arith.is_zero(a[1]) and arith.is_zero(a[2])

def same(arith, a, b):
    """ are triples ``a`` and ``b`` equal under ``arith``"""
    return arith.eq(a[0], b[0]) and arith.eq(a[1], b[1]) and arith.eq(a[2], b[2])


class Vector:
    """an immutable displacement ``(dx, dy, dz)`` in 3-space"""

    __slots__ = ('dx', 'dy', 'dz', 'arith')

    def __init__(self, dx=0, dy=0, dz=0, arith=RATIONAL):
        self.arith = arith
        self.dx = arith.coerce(dx)
        self.dy = arith.coerce(dy)
        self.dz = arith.coerce(dz)

    @classmethod
    def of(cls, triple, arith=RATIONAL):
        """make a vector from a triple already in ``arith``'s number type"""
        v = cls.__new__(cls)
        v.arith = arith
        v.dx, v.dy, v.dz = triple
        return v

    def __repr__(self):
        return 'Vector({}, {}, {})'.format(self.dx, self.dy, self.dz)

    @property
    def triple(self):
        return (self.dx, self.dy, self.dz)

    def __iter__(self):
        return iter(self.triple)

    def __add__(self, v):
        arith = arith_of(self, v)
        return Vector.of(add(self.triple, v.triple), arith)

    def __sub__(self, v):
        arith = arith_of(self, v)
        return Vector.of(sub(self.triple, v.triple), arith)

    def __neg__(self):
        return Vector.of((-self.dx, -self.dy, -self.dz), self.arith)

    def __mul__(self, c):
        return Vector.of(scale(self.triple, self.arith.coerce(c)), self.arith)

    __rmul__ = __mul__

    def __truediv__(self, c):
        c = self.arith.coerce(c)
        if self.arith.is_zero(c):
            raise ZeroDivisionError('vector divided by zero')
        return Vector.of(tuple(self.arith.divide(x, c) for x in self.triple),
                         self.arith)

    def __eq__(self, v):
        if not isinstance(v, Vector):
            return NotImplemented
        return self.equals(v)

    __hash__ = None

    def equals(self, v) -> bool:
        arith = arith_of(self, v)
        return same(arith, self.triple, v.triple)

    def reverse(self):
        return -self

    def is_zero(self) -> bool:
        return iszero(self.arith, self.triple)

    def dot(self, v):
        arith_of(self, v)
        return dot(self.triple, v.triple)

    def cross(self, v):
        arith = arith_of(self, v)
        return Vector.of(cross(self.triple, v.triple), arith)

    def magnitude_squared(self):
        return mag2(self.triple)

    def magnitude(self, policy=DEFAULT_POLICY):
        return self.arith.sqrt(self.magnitude_squared(), policy)

    def unit(self, policy=DEFAULT_POLICY):
        """the unit vector in the direction of this one.  In rational
        mode each component is rounded once under ``policy``."""
        m2 = self.magnitude_squared()
        if self.arith.is_zero(m2):
            raise ZeroDivisionError('zero vector has no direction')
        return Vector.of(tuple(
            self.arith.signed_sqrt_ratio(c * c, m2, c < 0, policy)
            for c in self.triple), self.arith)

    def is_scalar_multiple(self, v) -> bool:
        """``True`` if ``self`` and ``v`` are parallel (or either is zero)"""
        arith = arith_of(self, v)
        return iszero(arith, cross(self.triple, v.triple))

    def is_orthogonal(self, v) -> bool:
        arith = arith_of(self, v)
        return arith.is_zero(dot(self.triple, v.triple))

    def is_reverse(self, v) -> bool:
        return self.equals(-v)

    def angle(self, v, policy=DEFAULT_POLICY):
        """the angle in radians between ``self`` and ``v``"""
        arith = arith_of(self, v)
        den2 = self.magnitude_squared() * v.magnitude_squared()
        if arith.is_zero(den2):
            raise ZeroDivisionError('angle with a zero vector is undefined')
        return arith.acos_ratio(self.dot(v), den2, policy)

    def rotate(self, axis, theta, policy=DEFAULT_POLICY):
        """rotate by ``theta`` radians about ``axis`` (a vector through
        the origin), right handed.  Returns a new vector."""
        arith = arith_of(self, axis)
        if axis.is_zero():
            from v3d.geometry import DegenerateGeometryError
            raise DegenerateGeometryError('zero vector is not a rotation axis')
        zero = (arith.coerce(0),) * 3
        return Vector.of(arith.rotate(self.triple, zero, axis.triple,
                                      theta, policy), arith)


class Offset:
    """a shared, mutable translation handle.  Every point of a compound
    geometry references its owner's ``Offset``, so translating the whole
    compound is a single ``shift()``."""

    __slots__ = ('vector', 'version')

    def __init__(self, vector):
        self.vector = vector
        self.version = 0

    def __repr__(self):
        return 'Offset({!r})'.format(self.vector)

    @property
    def arith(self):
        return self.vector.arith

    def shift(self, v):
        self.vector = self.vector + v
        self.version += 1

    def copy(self):
        return Offset(self.vector)


__all__ = [
    'Offset',
    'Vector',
    'add',
    'cross',
    'dot',
    'iszero',
    'mag2',
    'same',
    'scale',
    'sub',
]
