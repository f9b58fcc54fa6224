## exact (rational) convenience constructors for v3d
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


"""lower-case constructors for exact geometry

These functions build **v3d** primitives in rational arithmetic from
plain coordinate triples (or existing points and vectors).
Coordinates may be ``int``, ``Fraction``, ``Decimal``, ``str`` or
``float`` (taken at its exact binary value)::

    >>> from v3d.rational import segment
    >>> s = segment((0, 0, 0), ('1/3', 0, 0))

The ``v3d.floating`` module offers the same functions in floating
point arithmetic.
"""

from v3d.arith import RATIONAL
from v3d.collinear import LineSegmentsCollinear
from v3d.envelope import Envelope
from v3d.line import Line
from v3d.plane import Plane
from v3d.point import Point
from v3d.ray import Ray
from v3d.rectangle import Rectangle
from v3d.segment import LineSegment
from v3d.tetrahedron import Tetrahedron
from v3d.triangle import Triangle
from v3d.vector import Vector


def vector(dx, dy, dz, *, arith=RATIONAL):
    return Vector(dx, dy, dz, arith=arith)


def point(x, y, z, *, arith=RATIONAL):
    return Point(x, y, z, arith=arith)


def _point(p, arith):
    if isinstance(p, Point):
        return p
    return Point(*p, arith=arith)


def _vector(v, arith):
    if isinstance(v, Vector):
        return v
    return Vector(*v, arith=arith)


def line(p, direction, *, arith=RATIONAL):
    """the line through ``p`` with ``direction``"""
    return Line(_point(p, arith), _vector(direction, arith))


def ray(p, direction, *, arith=RATIONAL):
    """the ray from ``p`` in the sense of ``direction``"""
    return Ray(_point(p, arith), _vector(direction, arith))


def segment(p, q, *, arith=RATIONAL):
    return LineSegment(_point(p, arith), _point(q, arith))


def plane(p, normal, *, arith=RATIONAL):
    return Plane(_point(p, arith), _vector(normal, arith))


def triangle(p, q, r, *, arith=RATIONAL):
    return Triangle(*(_point(v, arith) for v in (p, q, r)))


def rectangle(p, q, r, s, *, arith=RATIONAL):
    """the rectangle with corners ``p``, ``q``, ``r``, ``s`` in order"""
    return Rectangle(*(_point(v, arith) for v in (p, q, r, s)))


def tetrahedron(p, q, r, s, *, arith=RATIONAL):
    return Tetrahedron(*(_point(v, arith) for v in (p, q, r, s)))


def envelope(lo, hi, *, arith=RATIONAL):
    """the envelope with corners ``lo`` and ``hi``"""
    return Envelope(lo[0], hi[0], lo[1], hi[1], lo[2], hi[2], arith=arith)


def collinear(*pairs, arith=RATIONAL):
    """an aggregate of the segments given as ``(p, q)`` pairs"""
    return LineSegmentsCollinear(*(s if isinstance(s, LineSegment)
                                   else segment(*s, arith=arith)
                                   for s in pairs))


__all__ = [
    'collinear',
    'envelope',
    'line',
    'plane',
    'point',
    'ray',
    'rectangle',
    'segment',
    'tetrahedron',
    'triangle',
    'vector',
]
