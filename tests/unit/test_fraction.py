"""Тесты для Fraction и gcd.

Coverage:
- Несократимая форма и знак в числителе
- Арифметика с дробью и целым
- invert() сохраняет знак в числителе
- Нулевой знаменатель → DomainError
"""

import pytest

from exprstep.core.errors import DomainError
from exprstep.core.math.fraction import Fraction, gcd


class TestGcd:
    """Тесты алгоритма Евклида."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (12, 18, 6),
            (18, 12, 6),
            (7, 0, 7),
            (0, 7, 7),
            (0, 0, 0),
            (-4, 6, 2),
            (17, 5, 1),
        ],
    )
    def test_gcd(self, a, b, expected):
        assert gcd(a, b) == expected


class TestFractionNormalization:
    """Каждая дробь хранится в несократимой форме."""

    def test_reduced_on_construction(self):
        fraction = Fraction(6, 8)
        assert fraction.numerator == 3
        assert fraction.denominator == 4

    def test_sign_moves_to_numerator(self):
        """2 / -4 → -1/2."""
        fraction = Fraction(2, -4)
        assert fraction.numerator == -1
        assert fraction.denominator == 2

    def test_double_negative_is_positive(self):
        fraction = Fraction(-3, -9)
        assert fraction.numerator == 1
        assert fraction.denominator == 3

    def test_zero_numerator(self):
        fraction = Fraction(0, 5)
        assert fraction.numerator == 0
        assert fraction.denominator == 1
        assert fraction.is_zero()

    def test_default_denominator(self):
        assert Fraction(7) == Fraction(7, 1)

    def test_zero_denominator_rejected(self):
        with pytest.raises(DomainError) as exc_info:
            Fraction(1, 0)

        assert exc_info.value.relation == "different from"
        assert exc_info.value.expected == 0

    @pytest.mark.parametrize("numerator, denominator", [(10, 4), (-15, 35), (144, -12), (1, 1)])
    def test_invariants(self, numerator, denominator):
        fraction = Fraction(numerator, denominator)
        assert fraction.denominator > 0
        assert gcd(fraction.numerator, fraction.denominator) == 1


class TestFractionArithmetic:
    """Тесты операций над дробями."""

    def test_add_fraction(self):
        """1/2 + 1/3 = 5/6."""
        assert Fraction(1, 2).add(Fraction(1, 3)) == Fraction(5, 6)

    def test_add_integer(self):
        """1/2 + 1 = 3/2."""
        assert Fraction(1, 2).add(1) == Fraction(3, 2)

    def test_add_reduces(self):
        """1/6 + 1/3 = 1/2."""
        result = Fraction(1, 6).add(Fraction(1, 3))
        assert result.numerator == 1
        assert result.denominator == 2

    def test_multiply_fraction(self):
        """2/3 * 3/4 = 1/2."""
        assert Fraction(2, 3).multiply(Fraction(3, 4)) == Fraction(1, 2)

    def test_multiply_integer(self):
        """5/6 * 3 = 5/2."""
        assert Fraction(5, 6).multiply(3) == Fraction(5, 2)

    def test_negate(self):
        assert Fraction(1, 3).negate() == Fraction(-1, 3)
        assert Fraction(-1, 3).negate() == Fraction(1, 3)

    def test_invert_positive(self):
        assert Fraction(2, 3).invert() == Fraction(3, 2)

    def test_invert_keeps_sign_in_numerator(self):
        """-2/3 → -3/2, знаменатель остаётся положительным."""
        inverted = Fraction(-2, 3).invert()
        assert inverted.numerator == -3
        assert inverted.denominator == 2

    def test_operations_return_new_instances(self):
        original = Fraction(1, 2)
        original.add(Fraction(1, 2))
        original.multiply(4)
        original.negate()
        assert original == Fraction(1, 2)


class TestFractionValueSemantics:
    """Равенство, хеш и строковое представление."""

    def test_equal_after_reduction(self):
        assert Fraction(2, 4) == Fraction(1, 2)
        assert hash(Fraction(2, 4)) == hash(Fraction(1, 2))

    def test_not_equal(self):
        assert Fraction(1, 2) != Fraction(1, 3)

    def test_str(self):
        assert str(Fraction(1, 3)) == "1/3"
        assert str(Fraction(-1, 3)) == "-1/3"
        assert str(Fraction(4, 2)) == "2/1"

    def test_constants(self):
        assert Fraction.ZERO == Fraction(0, 1)
        assert Fraction.ONE == Fraction(1, 1)
