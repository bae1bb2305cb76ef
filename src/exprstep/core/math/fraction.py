"""
Fraction — точная рациональная дробь

Неизменяемая дробь произвольной точности в несократимой форме:
- знак хранится в числителе
- знаменатель всегда строго положительный
- gcd(|numerator|, denominator) == 1 после каждой операции

Нулевой знаменатель → DomainError.
"""

from typing import Union

from exprstep.core.errors import DomainError


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по алгоритму Евклида.

    gcd(x, 0) == |x|, gcd(0, 0) == 0.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 0)
        4
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


class Fraction:
    """
    Рациональное число numerator / denominator в несократимой форме.

    Raises:
        DomainError: Если denominator == 0
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise DomainError(denominator, "different from", 0)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = gcd(numerator, denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @classmethod
    def _unchecked(cls, numerator: int, denominator: int) -> "Fraction":
        # Аргументы уже несократимы и denominator > 0
        fraction = cls.__new__(cls)
        fraction._numerator = numerator
        fraction._denominator = denominator
        return fraction

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def negate(self) -> "Fraction":
        return Fraction._unchecked(-self._numerator, self._denominator)

    def add(self, other: Union["Fraction", int]) -> "Fraction":
        """Сумма с дробью или целым числом."""
        if isinstance(other, Fraction):
            return Fraction(
                self._numerator * other._denominator + self._denominator * other._numerator,
                self._denominator * other._denominator,
            )
        return Fraction(self._numerator + self._denominator * other, self._denominator)

    def multiply(self, other: Union["Fraction", int]) -> "Fraction":
        """Произведение с дробью или целым числом."""
        if isinstance(other, Fraction):
            return Fraction(
                self._numerator * other._numerator,
                self._denominator * other._denominator,
            )
        return Fraction(self._numerator * other, self._denominator)

    def invert(self) -> "Fraction":
        """
        Обратная дробь denominator / numerator.

        Знак остаётся в числителе. Проверка на ноль — ответственность
        вызывающего кода (см. NumericValue.divide).
        """
        if self._numerator < 0:
            return Fraction._unchecked(-self._denominator, -self._numerator)
        return Fraction._unchecked(self._denominator, self._numerator)

    def is_zero(self) -> bool:
        return self._numerator == 0

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def __copy__(self) -> "Fraction":
        return self

    def __deepcopy__(self, memo: dict) -> "Fraction":
        return self

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._numerator < 0:
            return f"-{-self._numerator}/{self._denominator}"
        return f"{self._numerator}/{self._denominator}"


Fraction.ZERO = Fraction(0, 1)
Fraction.ONE = Fraction(1, 1)
