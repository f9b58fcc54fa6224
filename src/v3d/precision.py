## precision policy for exact (rational) v3d arithmetic
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


"""precision policy for exact (rational) arithmetic in **v3d**

In rational mode every coordinate is a ``fractions.Fraction``, and
sums, differences, products, dot and cross products, collinearity
tests and squared distances are all exact.  Only a few operations
leave the field of rationals: square roots (distances, lengths, unit
vectors, areas) and trigonometric functions (rotation, angles).  Such
values are rounded exactly once, where the irrational value arises,
under a ``PrecisionPolicy``:

  ``oom``       the order of magnitude of the result, i.e. results are
                multiples of ``10**oom``
  ``rounding``  the rule used to pick the multiple, one of the
                ``Rounding`` values (the same rules as the ``decimal``
                module)

The default policy rounds half up to three decimal places.  Rounding
to a coarse order of magnitude never fails; it simply yields the best
multiple available, which may be zero.

Square roots are computed with integer arithmetic and are correctly
rounded for every rule.  Transcendental values are evaluated with
``mpmath`` at a working precision derived from the policy and then
rounded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import (Decimal, ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR,
                     ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP,
                     ROUND_UP)
from enum import Enum
from fractions import Fraction
from math import isqrt

import mpmath as mpm

logger = logging.getLogger(__name__)

## constants
DEFAULT_OOM = -3
GUARD_DIGITS = 10
MIN_WORKDPS = 15

_HALF = Fraction(1, 2)


class Rounding(Enum):
    """rounding rules, mirroring those of the ``decimal`` module"""

    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN

    def mirrored(self) -> "Rounding":
        """the rule to apply to ``-x`` so that the result, negated, is
        the rounding of ``x``"""
        if self is Rounding.CEILING:
            return Rounding.FLOOR
        if self is Rounding.FLOOR:
            return Rounding.CEILING
        return self


DEFAULT_ROUNDING = Rounding.HALF_UP


def round_to_integer(n: Fraction, rounding: Rounding) -> int:
    """round rational ``n`` to an integer under ``rounding``"""
    floor = n.numerator // n.denominator
    rem = n - floor
    if rem == 0:
        return floor
    if rounding is Rounding.FLOOR:
        return floor
    if rounding is Rounding.CEILING:
        return floor + 1
    if rounding is Rounding.DOWN:
        return floor if n > 0 else floor + 1
    if rounding is Rounding.UP:
        return floor + 1 if n > 0 else floor
    if rem > _HALF:
        return floor + 1
    if rem < _HALF:
        return floor
    ## exactly half way
    if rounding is Rounding.HALF_UP:
        return floor + 1 if n > 0 else floor
    if rounding is Rounding.HALF_DOWN:
        return floor if n > 0 else floor + 1
    return floor if floor % 2 == 0 else floor + 1


def to_mpf(x):
    """convert a rational-like value (or an ``mpmath`` value) to an
    ``mpf`` at the current working precision"""
    if isinstance(x, (int, Fraction, Decimal, str)):
        x = Fraction(x)
        return mpm.mpf(x.numerator) / x.denominator
    return mpm.mpf(x)


def mpf_to_fraction(value) -> Fraction:
    """exact rational value of a finite ``mpf``"""
    value = mpm.mpf(value)
    if not mpm.isfinite(value):
        raise ValueError('cannot convert {} to a rational'.format(value))
    m, e = mpm.frexp(value)
    if not m:
        return Fraction(0)
    bits = mpm.mp.prec + 64
    man = int(mpm.ldexp(m, bits))
    return Fraction(man) * Fraction(2) ** (e - bits)


@dataclass(frozen=True)
class PrecisionPolicy:
    """order of magnitude and rounding rule for irrational results"""

    oom: int = DEFAULT_OOM
    rounding: Rounding = DEFAULT_ROUNDING

    @property
    def quantum(self) -> Fraction:
        return Fraction(10) ** self.oom

    def mirrored(self) -> "PrecisionPolicy":
        return replace(self, rounding=self.rounding.mirrored())

    def round(self, x) -> Fraction:
        """round ``x`` to a multiple of ``10**oom``"""
        q = self.quantum
        return round_to_integer(Fraction(x) / q, self.rounding) * q

    def to_decimal(self, x) -> Decimal:
        """round ``x`` and return it as a ``Decimal`` with exponent ``oom``"""
        k = round_to_integer(Fraction(x) / self.quantum, self.rounding)
        return Decimal('{}E{}'.format(k, self.oom))

    def sqrt(self, x) -> Fraction:
        """square root of rational ``x``: exact when ``x`` is the square
        of a rational, otherwise correctly rounded to ``10**oom``"""
        x = Fraction(x)
        if x < 0:
            raise ValueError('square root of negative value {}'.format(x))
        rn = isqrt(x.numerator)
        rd = isqrt(x.denominator)
        if rn * rn == x.numerator and rd * rd == x.denominator:
            return Fraction(rn, rd)
        q = self.quantum
        y = x / (q * q)
        f = isqrt(y.numerator // y.denominator)
        lo = f * q
        hi = (f + 1) * q
        r = self.rounding
        if r in (Rounding.DOWN, Rounding.FLOOR):
            result = lo
        elif r in (Rounding.UP, Rounding.CEILING):
            result = hi
        else:
            mid = (f + _HALF) * q
            ## an irrational root can not sit exactly on the mid point
            result = hi if x > mid * mid else lo
        logger.debug('sqrt(%s) rounded to %s at oom %d', x, result, self.oom)
        return result

    def signed_sqrt(self, x, negative: bool) -> Fraction:
        """``-sqrt(x)`` if ``negative`` else ``sqrt(x)``, rounded once
        under this policy"""
        if negative:
            return -self.mirrored().sqrt(x)
        return self.sqrt(x)

    def workdps(self, scale=1) -> int:
        """decimal digits of working precision for ``mpmath`` evaluation
        of values up to magnitude ``scale``"""
        digits = len(str(int(abs(Fraction(scale))))) if scale else 1
        return max(MIN_WORKDPS, GUARD_DIGITS + digits - self.oom)

    def round_mpf(self, value) -> Fraction:
        """round an ``mpmath`` value once under this policy"""
        return self.round(mpf_to_fraction(value))


DEFAULT_POLICY = PrecisionPolicy()


__all__ = [
    'DEFAULT_OOM',
    'DEFAULT_POLICY',
    'DEFAULT_ROUNDING',
    'PrecisionPolicy',
    'Rounding',
    'mpf_to_fraction',
    'round_to_integer',
    'to_mpf',
]
