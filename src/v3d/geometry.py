## geometry base class for v3d
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


"""the ``Geometry`` base class of **v3d**

Every primitive carries its arithmetic (``RATIONAL`` or ``FLOATING``)
and an ``Offset``, the shared mutable translation handle.  A compound
geometry owns one offset and its constituent points reference it, so
``translate()`` is a single update of the handle no matter how many
points the geometry has.

Derived properties such as the envelope are computed lazily and
cached.  The cache remembers the version of the offset it was computed
against, so a translation through any geometry sharing the handle
invalidates it.

Intersection is dispatched by ``rank``, distinct for every class: each
class handles the lower ranked classes it knows about (and its own)
and hands higher ranked operands back to them, so every pair is
implemented in exactly one place.  A pair its owner does not support
raises ``NotImplementedError``.
"""

from v3d.arith import RATIONAL, arith_of
from v3d.precision import DEFAULT_POLICY
from v3d.vector import Offset, Vector


class DegenerateGeometryError(ValueError):
    """Raised when a geometry would be constructed from degenerate input,
    such as coincident segment endpoints or a zero direction vector."""


class Geometry:
    """base class for all **v3d** primitives"""

    rank = 0

    def __init__(self, arith=RATIONAL, offset=None):
        self.arith = arith
        if offset is None:
            offset = Offset(Vector(arith=arith))
        elif not arith.compatible(offset.arith):
            raise TypeError('offset arithmetic does not match geometry')
        self.offset = offset
        self.__envelope = None
        self.__envelope_version = None

    ## envelope cache
    ## --------------

    @property
    def envelope(self):
        """axis-aligned bounding box, computed on first use"""
        if (self.__envelope is None
                or self.__envelope_version != self.offset.version):
            self.__envelope = self._make_envelope()
            self.__envelope_version = self.offset.version
        return self.__envelope

    def _make_envelope(self):
        raise NotImplementedError(
            '{} has no finite envelope'.format(type(self).__name__))

    def _invalidate(self):
        self.__envelope = None
        self.__envelope_version = None

    ## mutation
    ## --------

    def translate(self, v):
        """move this geometry (and everything sharing its offset) by
        vector ``v``, in place.  Returns ``self``."""
        if not isinstance(v, Vector):
            raise TypeError('translate requires a Vector, got {!r}'.format(v))
        arith_of(self, v)
        self.offset.shift(v)
        self._invalidate()
        return self

    ## intersection and distance
    ## -------------------------

    def intersection(self, other):
        return self._delegate(other)

    def _delegate(self, other):
        """hand ``other`` of higher rank the job of intersecting with
        ``self``"""
        if not isinstance(other, Geometry):
            raise TypeError('cannot intersect {} with {!r}'.format(
                type(self).__name__, other))
        arith_of(self, other)
        if other.rank > self.rank:
            return other.intersection(self)
        raise NotImplementedError('intersection of {} with {}'.format(
            type(self).__name__, type(other).__name__))

    def intersects(self, other) -> bool:
        return self.intersection(other) is not None

    def distance_squared(self, other):
        """exact (rational mode) squared minimum distance to ``other``"""
        from v3d.distance import distance_squared
        return distance_squared(self, other)

    def distance(self, other, policy=DEFAULT_POLICY):
        """minimum distance to ``other``; in rational mode a ``Decimal``
        rounded once under ``policy``"""
        return self.arith.root(self.distance_squared(other), policy)


__all__ = [
    'DegenerateGeometryError',
    'Geometry',
]
