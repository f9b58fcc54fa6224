## rational and floating arithmetic strategies for v3d
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


"""arithmetic strategies shared by every **v3d** geometry

Each geometry carries an ``Arithmetic`` instance, either ``RATIONAL``
(exact ``Fraction`` coordinates, rounding only under an explicit
``PrecisionPolicy``) or ``FLOATING`` (native ``float`` coordinates and
an absolute tolerance ``epsilon`` for equality and zero tests).  All
geometric algorithms are written once against this interface.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import mpmath as mpm

from v3d.precision import (DEFAULT_POLICY, PrecisionPolicy, mpf_to_fraction,
                           to_mpf)

## default absolute tolerance of the floating arithmetic.  Redefine at
## your peril.
EPSILON = 1e-9


def _check_number(x):
    if isinstance(x, bool):
        raise TypeError('booleans are not coordinates: {}'.format(x))
    return x


def _rodrigues(v, axis, c, s, sqrt):
    """rotate triple ``v`` about (non-unit) ``axis`` given cos ``c`` and
    sin ``s`` of the angle"""
    norm = sqrt(axis[0] * axis[0] + axis[1] * axis[1] + axis[2] * axis[2])
    k = [axis[0] / norm, axis[1] / norm, axis[2] / norm]
    kv = k[0] * v[0] + k[1] * v[1] + k[2] * v[2]
    kxv = [k[1] * v[2] - k[2] * v[1],
           k[2] * v[0] - k[0] * v[2],
           k[0] * v[1] - k[1] * v[0]]
    return [v[i] * c + kxv[i] * s + k[i] * kv * (1 - c) for i in range(3)]


class Arithmetic:
    """base class for the number system of a geometry"""

    exact = False
    name = 'arithmetic'

    def __repr__(self):
        return self.name.upper()

    def coerce(self, x):
        raise NotImplementedError

    def is_zero(self, x) -> bool:
        raise NotImplementedError

    def eq(self, a, b) -> bool:
        return self.is_zero(a - b)

    def sign(self, x) -> int:
        if self.is_zero(x):
            return 0
        return 1 if x > 0 else -1

    def le(self, a, b) -> bool:
        """``a <= b`` (within tolerance for inexact arithmetic)"""
        return a <= b or self.eq(a, b)

    def lt(self, a, b) -> bool:
        """``a < b`` strictly (beyond tolerance for inexact arithmetic)"""
        return a < b and not self.eq(a, b)

    def divide(self, a, b):
        return a / b

    def sqrt(self, x, policy: PrecisionPolicy = DEFAULT_POLICY):
        raise NotImplementedError

    def root(self, x2, policy: PrecisionPolicy = DEFAULT_POLICY):
        """square root of a squared distance, taken at the boundary of
        the computation"""
        raise NotImplementedError

    def root_sum(self, squares, policy: PrecisionPolicy = DEFAULT_POLICY):
        """``sum(sqrt(x) for x in squares)``, rounded once, with the same
        result type as ``root``"""
        raise NotImplementedError

    def signed_sqrt_ratio(self, num, den, negative, policy=DEFAULT_POLICY):
        """``+/- sqrt(num / den)``, used for unit vector components"""
        raise NotImplementedError

    def rotate(self, v, origin, axis, theta, policy=DEFAULT_POLICY):
        """rotate triple ``v`` by ``theta`` radians about the line through
        ``origin`` (already subtracted from ``v``) with direction
        ``axis``; returns ``origin + R v``"""
        raise NotImplementedError

    def acos_ratio(self, num, den2, policy=DEFAULT_POLICY):
        """``acos(num / sqrt(den2))``"""
        raise NotImplementedError

    def compatible(self, other: "Arithmetic") -> bool:
        return self.exact == other.exact


class Rational(Arithmetic):
    """exact arithmetic on ``fractions.Fraction``"""

    exact = True
    name = 'rational'

    def coerce(self, x):
        x = _check_number(x)
        if isinstance(x, Fraction):
            return x
        if isinstance(x, (int, float, Decimal, str)):
            return Fraction(x)
        return mpf_to_fraction(x)

    def is_zero(self, x) -> bool:
        return x == 0

    def eq(self, a, b) -> bool:
        return a == b

    def le(self, a, b) -> bool:
        return a <= b

    def lt(self, a, b) -> bool:
        return a < b

    def divide(self, a, b):
        return Fraction(a) / b

    def sqrt(self, x, policy=DEFAULT_POLICY):
        return policy.sqrt(x)

    def root(self, x2, policy=DEFAULT_POLICY) -> Decimal:
        return policy.to_decimal(policy.sqrt(x2))

    def root_sum(self, squares, policy=DEFAULT_POLICY):
        squares = list(squares)
        with mpm.workdps(policy.workdps(max(squares, default=1))):
            total = mpm.fsum(mpm.sqrt(to_mpf(x)) for x in squares)
            return policy.to_decimal(mpf_to_fraction(total))

    def signed_sqrt_ratio(self, num, den, negative, policy=DEFAULT_POLICY):
        return policy.signed_sqrt(Fraction(num) / den, negative)

    def rotate(self, v, origin, axis, theta, policy=DEFAULT_POLICY):
        scale = max(abs(c) for c in list(v) + list(origin)) or 1
        with mpm.workdps(policy.workdps(scale)):
            th = to_mpf(theta)
            r = _rodrigues([to_mpf(c) for c in v],
                           [to_mpf(c) for c in axis],
                           mpm.cos(th), mpm.sin(th), mpm.sqrt)
            return tuple(policy.round_mpf(to_mpf(origin[i]) + r[i])
                         for i in range(3))

    def acos_ratio(self, num, den2, policy=DEFAULT_POLICY):
        with mpm.workdps(policy.workdps()):
            c = to_mpf(num) / mpm.sqrt(to_mpf(den2))
            c = max(mpm.mpf(-1), min(mpm.mpf(1), c))
            return policy.round_mpf(mpm.acos(c))


class Floating(Arithmetic):
    """finite precision arithmetic on ``float`` with an absolute
    tolerance for equality"""

    exact = False
    name = 'floating'

    def __init__(self, epsilon: float = EPSILON):
        self.epsilon = epsilon

    def coerce(self, x):
        x = _check_number(x)
        return float(x)

    def is_zero(self, x) -> bool:
        return abs(x) <= self.epsilon

    def sqrt(self, x, policy=DEFAULT_POLICY):
        return math.sqrt(max(x, 0.0))

    def root(self, x2, policy=DEFAULT_POLICY) -> float:
        return math.sqrt(max(x2, 0.0))

    def root_sum(self, squares, policy=DEFAULT_POLICY):
        return math.fsum(math.sqrt(max(x, 0.0)) for x in squares)

    def signed_sqrt_ratio(self, num, den, negative, policy=DEFAULT_POLICY):
        r = math.sqrt(max(num / den, 0.0))
        return -r if negative else r

    def rotate(self, v, origin, axis, theta, policy=DEFAULT_POLICY):
        th = float(theta)
        r = _rodrigues(v, axis, math.cos(th), math.sin(th), math.sqrt)
        return tuple(origin[i] + r[i] for i in range(3))

    def acos_ratio(self, num, den2, policy=DEFAULT_POLICY):
        c = num / math.sqrt(den2)
        return math.acos(max(-1.0, min(1.0, c)))


RATIONAL = Rational()
FLOATING = Floating()


def arith_of(*geoms) -> Arithmetic:
    """the common arithmetic of ``geoms``; mixing exact and inexact
    geometry is a ``TypeError``"""
    arith = geoms[0].arith
    for g in geoms[1:]:
        if not arith.compatible(g.arith):
            raise TypeError('cannot mix {} and {} geometry'.format(
                arith.name, g.arith.name))
    return arith


__all__ = [
    'Arithmetic',
    'EPSILON',
    'FLOATING',
    'Floating',
    'RATIONAL',
    'Rational',
    'arith_of',
]
