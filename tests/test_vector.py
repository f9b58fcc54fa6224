import math
from fractions import Fraction

import pytest

from v3d.arith import FLOATING
from v3d.geometry import DegenerateGeometryError
from v3d.vector import Offset, Vector, cross, dot


def fvec(*c):
    return Vector(*c, arith=FLOATING)


class TestVector:

    def test_arithmetic(self):
        a = Vector(1, 2, 3)
        b = Vector(1, 1, 1)
        assert a + b == Vector(2, 3, 4)
        assert a - b == Vector(0, 1, 2)
        assert -a == Vector(-1, -2, -3)
        assert a * 2 == Vector(2, 4, 6)
        assert 2 * a == Vector(2, 4, 6)
        assert a / 3 == Vector(Fraction(1, 3), Fraction(2, 3), 1)

    def test_divide_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Vector(1, 0, 0) / 0

    def test_products(self):
        x = Vector(1, 0, 0)
        y = Vector(0, 1, 0)
        assert x.cross(y) == Vector(0, 0, 1)
        assert x.dot(y) == 0
        assert Vector(1, 2, 3).dot(Vector(4, 5, 6)) == 32
        assert cross((1, 0, 0), (0, 1, 0)) == (0, 0, 1)
        assert dot((1, 2, 3), (1, 2, 3)) == 14

    def test_magnitude(self):
        v = Vector(3, 4, 0)
        assert v.magnitude_squared() == 25
        assert v.magnitude() == 5
        assert Vector(1, 1, 0).magnitude() == Fraction(1414, 1000)

    def test_unit(self):
        assert Vector(3, -4, 0).unit() == Vector(Fraction(3, 5),
                                                 Fraction(-4, 5), 0)
        u = Vector(1, 1, 0).unit()
        assert u == Vector(Fraction(707, 1000), Fraction(707, 1000), 0)
        with pytest.raises(ZeroDivisionError):
            Vector(0, 0, 0).unit()

    def test_predicates(self):
        v = Vector(1, 2, 3)
        assert v.is_scalar_multiple(Vector(-2, -4, -6))
        assert not v.is_scalar_multiple(Vector(1, 2, 4))
        assert v.is_orthogonal(Vector(3, 0, -1))
        assert v.is_reverse(Vector(-1, -2, -3))
        assert Vector(0, 0, 0).is_zero()
        assert not v.is_zero()

    def test_angle(self):
        assert Vector(1, 0, 0).angle(Vector(0, 1, 0)) == Fraction(1571, 1000)
        assert math.isclose(fvec(1, 0, 0).angle(fvec(1, 1, 0)), math.pi / 4)

    def test_equality_is_arithmetic_aware(self):
        assert fvec(0.1 + 0.2, 0, 0) == fvec(0.3, 0, 0)
        assert Vector(0.1 + 0.2, 0, 0) != Vector(0.3, 0, 0)

    def test_mixing_rejected(self):
        with pytest.raises(TypeError):
            Vector(1, 0, 0) + fvec(1, 0, 0)


class TestRotate:

    def test_quarter_turn_is_exact_after_rounding(self):
        v = Vector(1, 0, 0).rotate(Vector(0, 0, 1), math.pi / 2)
        assert v == Vector(0, 1, 0)

    def test_round_trip_floating(self):
        v = fvec(1, 2, 3)
        axis = fvec(1, 1, 0)
        back = v.rotate(axis, 0.7).rotate(axis, -0.7)
        assert back.equals(v)
        assert not v.rotate(axis, 0.7).equals(v)

    def test_zero_axis_rejected(self):
        with pytest.raises(DegenerateGeometryError):
            Vector(1, 0, 0).rotate(Vector(0, 0, 0), 1)


def test_offset_shift():
    off = Offset(Vector(1, 1, 1))
    assert off.version == 0
    off.shift(Vector(1, 0, 0))
    assert off.vector == Vector(2, 1, 1)
    assert off.version == 1
    assert off.copy().vector == off.vector
