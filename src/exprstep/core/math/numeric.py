"""
Numeric Tower — Integer, Rational, Real

Закрытое множество из трёх вариантов числового значения:
- Integer(int)       — точное целое произвольной точности
- Rational(Fraction) — точная несократимая дробь
- Real(Decimal)      — inexact-число, всегда SCALE=15 дробных цифр, ROUND_HALF_UP

Варианты — это данные; вся арифметика реализована функциями этого модуля с
исчерпывающей диспетчеризацией по варианту. Методы значений лишь делегируют.

ПРАВИЛА ПРОДВИЖЕНИЯ (+ - * /, симметричны):
1. Integer ⊕ Integer → Integer (деление → Rational, если не делится нацело)
2. Хотя бы один Real → вычисление в Real, затем понижение до Integer
3. Иначе (Integer/Rational) → вычисление в Rational, затем понижение

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат, точно представимый целым, всегда возвращается как Integer
2. Деление на ноль (любой вариант) → DomainError до выполнения деления
3. ln/log/exp/expt требуют строго положительных операндов; операнд логарифма
   должен оставаться положительным и после округления до SCALE
4. Равенство учитывает вариант: Real(0.5) != Rational(1/2)
"""

from decimal import Decimal
from typing import Optional, Union

from exprstep.core.errors import DomainError
from exprstep.core.math.fraction import Fraction
from exprstep.core.math.logarithm import (
    log_with_base,
    natural_exp,
    natural_log,
    power,
)
from exprstep.core.math.precision import (
    divide_at_scale,
    exact_add,
    exact_multiply,
    exact_subtract,
    fraction_to_decimal,
    is_integral,
    quantize,
    sqrt_at_scale,
    strip_trailing_zeros,
    to_integer,
)

GREATER_THAN = "greater than"
GREATER_THAN_OR_EQUAL = "greater than or equal to"
DIFFERENT_FROM = "different from"


# =============================================================================
# ВАРИАНТЫ
# =============================================================================


class _Number:
    """Общий протокол вариантов: значение, конверсии и делегирование."""

    __slots__ = ("_value",)

    # -- Конверсии ---------------------------------------------------------

    def to_integer(self) -> int:
        return _to_integer(self)

    def to_rational(self) -> Fraction:
        return _to_rational(self)

    def to_real(self) -> Decimal:
        return _to_real(self)

    def is_zero(self) -> bool:
        return _is_zero(self)

    def is_positive(self) -> bool:
        return _is_positive(self)

    # -- Арифметика --------------------------------------------------------

    def negate(self) -> "NumericValue":
        return _negate(self)

    def add(self, other: "NumericValue") -> "NumericValue":
        return _add(self, other)

    def subtract(self, other: "NumericValue") -> "NumericValue":
        return _subtract(self, other)

    def multiply(self, other: "NumericValue") -> "NumericValue":
        return _multiply(self, other)

    def divide(self, other: Optional["NumericValue"] = None) -> "NumericValue":
        """this / other; без аргумента — обратное значение 1 / this."""
        if other is None:
            return _reciprocal(self)
        return _divide(self, other)

    # -- Трансцендентные функции -------------------------------------------

    def sqrt(self) -> "NumericValue":
        return _sqrt(self)

    def expt(self, exponent: "NumericValue") -> "NumericValue":
        return _expt(self, exponent)

    def exp(self) -> "NumericValue":
        return _exp(self)

    def ln(self) -> "NumericValue":
        return _ln(self)

    def log(self, base: "NumericValue") -> "NumericValue":
        return _log(self, base)

    # -- Операторы Python --------------------------------------------------

    def __neg__(self) -> "NumericValue":
        return _negate(self)

    def __add__(self, other: object) -> "NumericValue":
        if not isinstance(other, _Number):
            return NotImplemented
        return _add(self, other)

    def __sub__(self, other: object) -> "NumericValue":
        if not isinstance(other, _Number):
            return NotImplemented
        return _subtract(self, other)

    def __mul__(self, other: object) -> "NumericValue":
        if not isinstance(other, _Number):
            return NotImplemented
        return _multiply(self, other)

    def __truediv__(self, other: object) -> "NumericValue":
        if not isinstance(other, _Number):
            return NotImplemented
        return _divide(self, other)

    # -- Семантика значения ------------------------------------------------

    @property
    def value(self):
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Number):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo: dict):
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class Integer(_Number):
    """Точное целое произвольной точности."""

    __slots__ = ()

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Integer requires int, got {type(value).__name__}")
        self._value = value

    def __str__(self) -> str:
        return str(self._value)


class Rational(_Number):
    """Точная дробь; знак в числителе, знаменатель > 0."""

    __slots__ = ()

    def __init__(self, value: Fraction):
        if not isinstance(value, Fraction):
            raise TypeError(f"Rational requires Fraction, got {type(value).__name__}")
        self._value = value

    @classmethod
    def of(cls, numerator: int, denominator: int) -> "Rational":
        return cls(Fraction(numerator, denominator))

    def __str__(self) -> str:
        return str(self._value)


class Real(_Number):
    """Inexact-число с фиксированным масштабом SCALE (ROUND_HALF_UP)."""

    __slots__ = ()

    def __init__(self, value: Union[Decimal, int, str]):
        self._value = quantize(Decimal(value))

    def __str__(self) -> str:
        return strip_trailing_zeros(self._value)


NumericValue = Union[Integer, Rational, Real]

Integer.ZERO = Integer(0)
Integer.ONE = Integer(1)
Rational.ZERO = Rational(Fraction.ZERO)
Rational.ONE = Rational(Fraction.ONE)
Real.ZERO = Real(0)
Real.ONE = Real(1)


def _unknown_variant(value: object) -> TypeError:
    return TypeError(f"Unknown numeric variant: {type(value).__name__}")


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_real(value: Decimal) -> NumericValue:
    """
    Real, приведённый к SCALE, или Integer, если дробных цифр не осталось.

    Examples:
        >>> normalize_real(Decimal("2.0000000000000001"))
        Integer(2)
        >>> normalize_real(Decimal("1.5"))
        Real(1.5)
    """
    scaled = quantize(value)
    if is_integral(scaled):
        return Integer(to_integer(scaled))
    return Real(scaled)


def normalize_rational(value: Fraction) -> NumericValue:
    """Rational или Integer, если знаменатель равен 1."""
    if value.denominator == 1:
        return Integer(value.numerator)
    return Rational(value)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def _to_integer(number: NumericValue) -> int:
    if isinstance(number, Integer):
        return number.value
    if isinstance(number, Rational):
        fraction = number.value
        quotient = abs(fraction.numerator) // fraction.denominator
        return -quotient if fraction.numerator < 0 else quotient
    if isinstance(number, Real):
        return to_integer(number.value)
    raise _unknown_variant(number)


def _to_rational(number: NumericValue) -> Fraction:
    if isinstance(number, Integer):
        return Fraction(number.value, 1)
    if isinstance(number, Rational):
        return number.value
    if isinstance(number, Real):
        # value * 10^SCALE / 10^SCALE, сокращается конструктором Fraction
        return Fraction(*number.value.as_integer_ratio())
    raise _unknown_variant(number)


def _to_real(number: NumericValue) -> Decimal:
    if isinstance(number, Integer):
        return quantize(number.value)
    if isinstance(number, Rational):
        return fraction_to_decimal(number.value.numerator, number.value.denominator)
    if isinstance(number, Real):
        return number.value
    raise _unknown_variant(number)


def _is_zero(number: NumericValue) -> bool:
    if isinstance(number, Integer):
        return number.value == 0
    if isinstance(number, Rational):
        return number.value.is_zero()
    if isinstance(number, Real):
        return number.value.is_zero()
    raise _unknown_variant(number)


def _is_positive(number: NumericValue) -> bool:
    """Строгая положительность по правилу варианта."""
    if isinstance(number, Integer):
        return number.value > 0
    if isinstance(number, Rational):
        return not number.value.is_zero() and number.value.numerator > 0
    if isinstance(number, Real):
        return number.value > 0
    raise _unknown_variant(number)


# =============================================================================
# ПРОВЕРКИ ОПЕРАНДОВ
# =============================================================================


def require_non_zero(number: NumericValue) -> None:
    """
    Raises:
        DomainError: Если number равно нулю
    """
    if _is_zero(number):
        raise DomainError(number, DIFFERENT_FROM, 0)


def require_positive(number: NumericValue) -> None:
    """
    Raises:
        DomainError: Если number <= 0
    """
    if not _is_positive(number):
        raise DomainError(number, GREATER_THAN, 0)


def require_positive_at_scale(number: NumericValue) -> Decimal:
    """
    Значение number в Real-пространстве, строго положительное после
    округления до SCALE.

    Raises:
        DomainError: Если number <= 0 или округляется до нуля
    """
    require_positive(number)
    value = _to_real(number)
    if value.is_zero():
        raise DomainError(number, GREATER_THAN, 0)
    return value


def _is_real_space(left: NumericValue, right: NumericValue) -> bool:
    return isinstance(left, Real) or isinstance(right, Real)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def _negate(number: NumericValue) -> NumericValue:
    if isinstance(number, Integer):
        return Integer(-number.value)
    if isinstance(number, Rational):
        return Rational(number.value.negate())
    if isinstance(number, Real):
        return Real(-number.value)
    raise _unknown_variant(number)


def _add(left: NumericValue, right: NumericValue) -> NumericValue:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return Integer(left.value + right.value)
    if _is_real_space(left, right):
        return normalize_real(exact_add(_to_real(left), _to_real(right)))
    return normalize_rational(_to_rational(left).add(_to_rational(right)))


def _subtract(left: NumericValue, right: NumericValue) -> NumericValue:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return Integer(left.value - right.value)
    if _is_real_space(left, right):
        return normalize_real(exact_subtract(_to_real(left), _to_real(right)))
    return normalize_rational(_to_rational(left).add(_to_rational(right).negate()))


def _multiply(left: NumericValue, right: NumericValue) -> NumericValue:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return Integer(left.value * right.value)
    if _is_real_space(left, right):
        return normalize_real(exact_multiply(_to_real(left), _to_real(right)))
    return normalize_rational(_to_rational(left).multiply(_to_rational(right)))


def _divide(left: NumericValue, right: NumericValue) -> NumericValue:
    require_non_zero(right)
    if isinstance(left, Integer) and isinstance(right, Integer):
        return normalize_rational(Fraction(left.value, right.value))
    if _is_real_space(left, right):
        return normalize_real(divide_at_scale(_to_real(left), _to_real(right)))
    return normalize_rational(_to_rational(left).multiply(_to_rational(right).invert()))


def _reciprocal(number: NumericValue) -> NumericValue:
    require_non_zero(number)
    if isinstance(number, Real):
        return normalize_real(divide_at_scale(1, number.value))
    return normalize_rational(_to_rational(number).invert())


# =============================================================================
# ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
# =============================================================================


def _sqrt(number: NumericValue) -> NumericValue:
    if _to_real(number) < 0:
        raise DomainError(number, GREATER_THAN_OR_EQUAL, 0)
    return normalize_real(sqrt_at_scale(_to_real(number)))


def _expt(base: NumericValue, exponent: NumericValue) -> NumericValue:
    """
    base^exponent, base > 0 и exponent > 0.

    Integer^Integer — точно; Rational^Integer — n^k / d^k с округлением до
    SCALE; остальные комбинации — через log/anti-log.
    """
    require_positive(base)
    require_positive(exponent)
    if isinstance(exponent, Integer):
        if isinstance(base, Integer):
            return Integer(base.value ** exponent.value)
        if isinstance(base, Rational):
            return normalize_real(
                fraction_to_decimal(
                    base.value.numerator ** exponent.value,
                    base.value.denominator ** exponent.value,
                )
            )
    return normalize_real(power(require_positive_at_scale(base), _to_real(exponent)))


def _exp(number: NumericValue) -> NumericValue:
    require_positive(number)
    return normalize_real(natural_exp(_to_real(number)))


def _ln(number: NumericValue) -> NumericValue:
    return normalize_real(natural_log(require_positive_at_scale(number)))


def _log(number: NumericValue, base: NumericValue) -> NumericValue:
    """Логарифм number по основанию base; оба > 0, base != 1."""
    value = require_positive_at_scale(number)
    base_value = require_positive_at_scale(base)
    if base_value == 1:
        raise DomainError(base, DIFFERENT_FROM, 1)
    return normalize_real(log_with_base(value, base_value))
