import math
from decimal import Decimal
from fractions import Fraction

import mpmath as mpm
import pytest

from v3d.arith import EPSILON, FLOATING, RATIONAL, Floating, arith_of
from v3d.point import Point
from v3d.precision import PrecisionPolicy, Rounding


class TestRational:

    def test_coerce(self):
        assert RATIONAL.coerce(3) == Fraction(3)
        assert RATIONAL.coerce('1/3') == Fraction(1, 3)
        assert RATIONAL.coerce(Decimal('0.1')) == Fraction(1, 10)
        assert RATIONAL.coerce(0.5) == Fraction(1, 2)
        assert RATIONAL.coerce(mpm.mpf(0.25)) == Fraction(1, 4)
        assert isinstance(RATIONAL.coerce(3), Fraction)

    def test_booleans_rejected(self):
        with pytest.raises(TypeError):
            RATIONAL.coerce(True)
        with pytest.raises(TypeError):
            FLOATING.coerce(False)

    def test_exact_comparisons(self):
        tiny = Fraction(1, 10 ** 30)
        assert not RATIONAL.is_zero(tiny)
        assert not RATIONAL.eq(1, 1 + tiny)
        assert RATIONAL.lt(1, 1 + tiny)
        assert RATIONAL.sign(-tiny) == -1

    def test_divide_is_exact(self):
        assert RATIONAL.divide(1, 3) == Fraction(1, 3)

    def test_root(self):
        assert RATIONAL.root(Fraction(2)) == Decimal('1.414')
        assert RATIONAL.root(Fraction(25, 4)) == Decimal('2.5')
        assert RATIONAL.root(2, PrecisionPolicy(-5, Rounding.UP)) == \
            Decimal('1.41422')

    def test_root_sum_rounds_once(self):
        ## 1.4142 + 1.4142 + 1.4142 would round to 4.242 term by term
        assert RATIONAL.root_sum([2, 2, 2]) == Decimal('4.243')
        assert RATIONAL.root_sum([1, 4, 9]) == 6

    def test_acos(self):
        assert RATIONAL.acos_ratio(0, 1) == Fraction(1571, 1000)


class TestFloating:

    def test_tolerant_equality(self):
        assert FLOATING.eq(0.1 + 0.2, 0.3)
        assert FLOATING.is_zero(EPSILON / 2)
        assert not FLOATING.is_zero(EPSILON * 2)
        assert FLOATING.le(1.0 + EPSILON / 2, 1.0)
        assert not FLOATING.lt(1.0, 1.0 + EPSILON / 2)

    def test_custom_epsilon(self):
        loose = Floating(epsilon=1e-3)
        assert loose.is_zero(5e-4)
        assert loose.compatible(FLOATING)

    def test_root(self):
        assert math.isclose(FLOATING.root(2.0), math.sqrt(2))
        assert math.isclose(FLOATING.root_sum([2.0, 2.0, 2.0]),
                            3 * math.sqrt(2))


def test_arith_of_rejects_mixed_geometry():
    exact = Point(0, 0, 0)
    inexact = Point(0, 0, 0, arith=FLOATING)
    assert arith_of(exact, Point(1, 1, 1)) is RATIONAL
    with pytest.raises(TypeError):
        arith_of(exact, inexact)
