## minimum distances for v3d
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


"""minimum distances between primitives

Every function here returns a **squared** distance.  In rational mode
squared distances are exact, so no rounding happens until a caller
asks for the distance itself, when ``distance()`` takes the root once
under a ``PrecisionPolicy``.

The low level functions work on coordinate triples and take the
arithmetic as their first argument:

  ``point_point(arith, a, b)``
  ``point_line(arith, x, o, d)``          line ``o + t d``
  ``point_segment(arith, x, p, q)``       closed segment ``p-q``
  ``point_ray(arith, x, o, d)``           ray ``o + t d``, ``t >= 0``
  ``line_line(arith, o1, d1, o2, d2)``
  ``line_segment(arith, o, d, p, q)``
  ``line_ray(arith, o, d, p, e)``
  ``ray_ray(arith, o1, d1, o2, d2)``
  ``ray_segment(arith, o, d, p, q)``
  ``segment_segment(arith, p1, q1, p2, q2)``

``distance_squared(a, b)`` dispatches over pairs of geometry objects
and is symmetric.  Pairs of two planar or solid geometries (and
envelopes with anything but points) are not supported and raise
``NotImplementedError``.
"""

from v3d.arith import arith_of
from v3d.collinear import LineSegmentsCollinear
from v3d.envelope import Envelope
from v3d.geometry import Geometry
from v3d.line import Line
from v3d.plane import Plane
from v3d.point import Point
from v3d.precision import DEFAULT_POLICY
from v3d.ray import Ray
from v3d.rectangle import Rectangle
from v3d.segment import LineSegment
from v3d.tetrahedron import Tetrahedron
from v3d.triangle import Triangle
from v3d.vector import add, cross, dot, iszero, mag2, scale, sub


## squared distances on coordinate triples
## ---------------------------------------

def point_point(arith, a, b):
    return mag2(sub(a, b))


def point_line(arith, x, o, d):
    """``|d x (x - o)|^2 / |d|^2``"""
    return arith.divide(mag2(cross(d, sub(x, o))), mag2(d))


def _clamp(arith, t):
    if t < 0:
        return arith.coerce(0)
    if t > 1:
        return arith.coerce(1)
    return t


def point_segment(arith, x, p, q):
    d = sub(q, p)
    v = sub(x, p)
    t = dot(v, d)
    if t <= 0:
        return mag2(v)
    if t >= mag2(d):
        return point_point(arith, x, q)
    return point_line(arith, x, p, d)


def point_ray(arith, x, o, d):
    v = sub(x, o)
    if dot(v, d) <= 0:
        return mag2(v)
    return point_line(arith, x, o, d)


def line_line(arith, o1, d1, o2, d2):
    n = cross(d1, d2)
    if iszero(arith, n):
        return point_line(arith, o2, o1, d1)
    w = dot(sub(o2, o1), n)
    return arith.divide(w * w, mag2(n))


def _closest(arith, o1, d1, o2, d2):
    """parameters ``(s, t)`` of the closest points ``o1 + s d1`` and
    ``o2 + t d2`` of two non-parallel lines"""
    w = sub(o1, o2)
    a = dot(d1, d1)
    b = dot(d1, d2)
    c = dot(d2, d2)
    e = dot(d1, w)
    f = dot(d2, w)
    denom = a * c - b * b
    return (arith.divide(b * f - c * e, denom),
            arith.divide(a * f - b * e, denom))


def line_segment(arith, o, d, p, q):
    """the segment parameter minimizing the distance to the line is the
    skew closest point parameter clamped to ``[0, 1]``"""
    e = sub(q, p)
    if iszero(arith, cross(d, e)):
        return point_line(arith, p, o, d)
    s = _clamp(arith, _closest(arith, p, e, o, d)[0])
    return point_line(arith, add(p, scale(e, s)), o, d)


def line_ray(arith, o, d, p, e):
    """line ``o + t d`` and ray ``p + s e``, ``s >= 0``"""
    if iszero(arith, cross(d, e)):
        return point_line(arith, p, o, d)
    s = _closest(arith, p, e, o, d)[0]
    if s < 0:
        s = arith.coerce(0)
    return point_line(arith, add(p, scale(e, s)), o, d)


def ray_ray(arith, o1, d1, o2, d2):
    """when the closest points of the two lines are not on both rays the
    minimum is taken at the start of one of them"""
    if not iszero(arith, cross(d1, d2)):
        s, t = _closest(arith, o1, d1, o2, d2)
        if arith.le(0, s) and arith.le(0, t):
            return line_line(arith, o1, d1, o2, d2)
    return min(point_ray(arith, o1, o2, d2), point_ray(arith, o2, o1, d1))


def ray_segment(arith, o, d, p, q):
    """as ``ray_ray``: interior closest points, or else an endpoint of
    either against the other"""
    e = sub(q, p)
    if not iszero(arith, cross(d, e)):
        s, t = _closest(arith, o, d, p, e)
        if arith.le(0, s) and arith.le(0, t) and arith.le(t, 1):
            return line_line(arith, o, d, p, e)
    return min(point_ray(arith, p, o, d), point_ray(arith, q, o, d),
               point_segment(arith, o, p, q))


def segment_segment(arith, p1, q1, p2, q2):
    """closest points of two segments, after Ericson, *Real-Time
    Collision Detection*, 5.1.9"""
    d1 = sub(q1, p1)
    d2 = sub(q2, p2)
    r = sub(p1, p2)
    a = dot(d1, d1)
    e = dot(d2, d2)
    f = dot(d2, r)
    c = dot(d1, r)
    b = dot(d1, d2)
    denom = a * e - b * b
    if arith.is_zero(denom):
        s = arith.coerce(0)
    else:
        s = _clamp(arith, arith.divide(b * f - c * e, denom))
    t = arith.divide(b * s + f, e)
    if t < 0:
        t = arith.coerce(0)
        s = _clamp(arith, arith.divide(-c, a))
    elif t > 1:
        t = arith.coerce(1)
        s = _clamp(arith, arith.divide(b - c, a))
    c1 = add(p1, scale(d1, s))
    c2 = add(p2, scale(d2, t))
    return point_point(arith, c1, c2)


def point_plane(arith, x, a, n):
    w = dot(n, sub(x, a))
    return arith.divide(w * w, mag2(n))


def point_envelope(arith, x, lo, hi):
    total = arith.coerce(0)
    for i in range(3):
        if x[i] < lo[i]:
            total += (lo[i] - x[i]) ** 2
        elif x[i] > hi[i]:
            total += (x[i] - hi[i]) ** 2
    return total


def point_triangle(arith, x, p, q, r):
    n = cross(sub(q, p), sub(r, p))
    w = dot(n, sub(x, p))
    proj = sub(x, scale(n, arith.divide(w, mag2(n))))
    inside = True
    for a, b in ((p, q), (q, r), (r, p)):
        if arith.sign(dot(cross(sub(b, a), sub(proj, a)), n)) < 0:
            inside = False
            break
    if inside:
        return arith.divide(w * w, mag2(n))
    return min(point_segment(arith, x, p, q),
               point_segment(arith, x, q, r),
               point_segment(arith, x, r, p))


## geometry pairs
## --------------

def _point_point(a, b):
    return point_point(a.arith, a.position, b.position)


def _point_line(x, line):
    return point_line(x.arith, x.position, line.point.position,
                      line.direction.triple)


def _point_segment(x, seg):
    return point_segment(x.arith, x.position, seg.p.position, seg.q.position)


def _point_envelope(x, env):
    return point_envelope(x.arith, x.position, env.min, env.max)


def _point_plane(x, plane):
    return point_plane(x.arith, x.position, plane.point.position,
                       plane.normal.triple)


def _point_triangle(x, tri):
    return point_triangle(x.arith, x.position,
                          *(v.position for v in tri.points))


def _point_tetrahedron(x, tet):
    if tet.contains(x):
        return x.arith.coerce(0)
    return min(_point_triangle(x, f) for f in tet.faces)


def _line_line(l1, l2):
    return line_line(l1.arith, l1.point.position, l1.direction.triple,
                     l2.point.position, l2.direction.triple)


def _line_segment(line, seg):
    return line_segment(line.arith, line.point.position,
                        line.direction.triple, seg.p.position,
                        seg.q.position)


def _line_plane(line, plane):
    if plane.is_parallel(line):
        return _point_plane(line.point, plane)
    return line.arith.coerce(0)


def _line_triangle(line, tri):
    if tri.intersects(line):
        return line.arith.coerce(0)
    return min(_line_segment(line, e) for e in tri.edges)


def _line_tetrahedron(line, tet):
    if tet.intersects(line):
        return line.arith.coerce(0)
    return min(_line_triangle(line, f) for f in tet.faces)


def _point_ray(x, ray):
    return point_ray(x.arith, x.position, ray.point.position,
                     ray.direction.triple)


def _line_ray(line, ray):
    return line_ray(line.arith, line.point.position, line.direction.triple,
                    ray.point.position, ray.direction.triple)


def _ray_ray(r1, r2):
    return ray_ray(r1.arith, r1.point.position, r1.direction.triple,
                   r2.point.position, r2.direction.triple)


def _ray_segment(ray, seg):
    return ray_segment(ray.arith, ray.point.position, ray.direction.triple,
                       seg.p.position, seg.q.position)


def _ray_plane(ray, plane):
    arith = ray.arith
    side = arith.sign(plane.side(ray.point))
    heading = arith.sign(dot(plane.normal.triple, ray.direction.triple))
    if side == 0 or side * heading < 0:
        return arith.coerce(0)
    return _point_plane(ray.point, plane)


def _ray_triangle(ray, tri):
    if tri.intersects(ray):
        return ray.arith.coerce(0)
    return min([_ray_segment(ray, e) for e in tri.edges]
               + [_point_triangle(ray.point, tri)])


def _ray_tetrahedron(ray, tet):
    if tet.intersects(ray):
        return ray.arith.coerce(0)
    return min(_ray_triangle(ray, f) for f in tet.faces)


def _segment_segment(s1, s2):
    return segment_segment(s1.arith, s1.p.position, s1.q.position,
                           s2.p.position, s2.q.position)


def _segment_plane(seg, plane):
    arith = seg.arith
    sp = arith.sign(plane.side(seg.p))
    sq = arith.sign(plane.side(seg.q))
    if sp * sq <= 0:
        return arith.coerce(0)
    return min(_point_plane(seg.p, plane), _point_plane(seg.q, plane))


def _segment_triangle(seg, tri):
    if tri.intersects(seg):
        return seg.arith.coerce(0)
    return min([_segment_segment(seg, e) for e in tri.edges]
               + [_point_triangle(seg.p, tri), _point_triangle(seg.q, tri)])


def _segment_tetrahedron(seg, tet):
    if tet.intersects(seg):
        return seg.arith.coerce(0)
    return min(_segment_triangle(seg, f) for f in tet.faces)


def _rectangle(pair):
    """a rectangle is the union of its two triangles"""
    def fn(g, rect):
        return min(pair(g, t) for t in rect.triangles)
    return fn


_PAIRS = {
    (Point, Point): _point_point,
    (Point, Line): _point_line,
    (Point, LineSegment): _point_segment,
    (Point, Envelope): _point_envelope,
    (Point, Plane): _point_plane,
    (Point, Triangle): _point_triangle,
    (Point, Ray): _point_ray,
    (Point, Rectangle): _rectangle(_point_triangle),
    (Point, Tetrahedron): _point_tetrahedron,
    (Line, Line): _line_line,
    (Line, LineSegment): _line_segment,
    (Line, Plane): _line_plane,
    (Line, Triangle): _line_triangle,
    (Line, Ray): _line_ray,
    (Line, Rectangle): _rectangle(_line_triangle),
    (Line, Tetrahedron): _line_tetrahedron,
    (Ray, Ray): _ray_ray,
    (Ray, LineSegment): _ray_segment,
    (Ray, Plane): _ray_plane,
    (Ray, Triangle): _ray_triangle,
    (Ray, Rectangle): _rectangle(_ray_triangle),
    (Ray, Tetrahedron): _ray_tetrahedron,
    (LineSegment, LineSegment): _segment_segment,
    (LineSegment, Plane): _segment_plane,
    (LineSegment, Triangle): _segment_triangle,
    (LineSegment, Rectangle): _rectangle(_segment_triangle),
    (LineSegment, Tetrahedron): _segment_tetrahedron,
}


def _aggregate(agg, other):
    """zero when ``other`` meets the aggregate, else the least member
    distance"""
    if agg.intersects(other):
        return agg.arith.coerce(0)
    return min(distance_squared(s, other) for s in agg.segments)


def distance_squared(a, b):
    """squared minimum distance between geometries ``a`` and ``b``"""
    for g in (a, b):
        if not isinstance(g, Geometry):
            raise TypeError('no distance to {!r}'.format(g))
    arith_of(a, b)
    if isinstance(a, LineSegmentsCollinear):
        return _aggregate(a, b)
    if isinstance(b, LineSegmentsCollinear):
        return _aggregate(b, a)
    fn = _PAIRS.get((type(a), type(b)))
    if fn is not None:
        return fn(a, b)
    fn = _PAIRS.get((type(b), type(a)))
    if fn is not None:
        return fn(b, a)
    raise NotImplementedError('distance between {} and {}'.format(
        type(a).__name__, type(b).__name__))


def distance(a, b, policy=DEFAULT_POLICY):
    """minimum distance between ``a`` and ``b``: a ``Decimal`` rounded
    once under ``policy`` in rational mode, a ``float`` otherwise"""
    return a.arith.root(distance_squared(a, b), policy)


__all__ = [
    'distance',
    'distance_squared',
    'line_line',
    'line_ray',
    'line_segment',
    'point_line',
    'point_plane',
    'point_ray',
    'point_point',
    'point_segment',
    'point_triangle',
    'ray_ray',
    'ray_segment',
    'segment_segment',
]
