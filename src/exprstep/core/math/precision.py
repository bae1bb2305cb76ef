"""
Precision — примитивы десятичной арифметики с фиксированным масштабом

Модуль задаёт единые для всего процесса параметры inexact-чисел (Real):
- SCALE = 15 дробных цифр
- ROUNDING = ROUND_HALF_UP

и предоставляет точные операции над Decimal, не зависящие от текущего
decimal-контекста потока.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сложение, вычитание и умножение выполняются без округления
2. Деление округляется ровно один раз до SCALE (ROUND_HALF_UP)
3. Результат quantize() всегда имеет ровно SCALE дробных цифр
4. Все операции детерминированы и воспроизводимы
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
)
from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ INEXACT-ЧИСЕЛ
# =============================================================================

# Число дробных цифр у каждого Real
SCALE: Final[int] = 15

# Режим округления при приведении к SCALE
ROUNDING: Final[str] = ROUND_HALF_UP

# Число значащих цифр промежуточного квадратного корня (decimal128)
SQRT_PRECISION: Final[int] = 34

# Шаг квантования 10^-SCALE
QUANTUM: Final[Decimal] = Decimal((0, (1,), -SCALE))

TEN: Final[Decimal] = Decimal(10)
ONE: Final[Decimal] = Decimal(1)

# Контекст без потери точности для +, -, *
_EXACT: Final[Context] = Context(
    prec=MAX_PREC, rounding=ROUNDING, Emax=MAX_EMAX, Emin=MIN_EMIN
)

# Контекст квадратного корня (34 цифры, HALF_EVEN)
_SQRT: Final[Context] = Context(
    prec=SQRT_PRECISION, rounding=ROUND_HALF_EVEN, Emax=MAX_EMAX, Emin=MIN_EMIN
)

DecimalLike = Union[Decimal, int]


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def quantize(value: DecimalLike) -> Decimal:
    """
    Приведение значения к SCALE дробных цифр с ROUND_HALF_UP.

    Examples:
        >>> quantize(Decimal("0.1234567890123456"))
        Decimal('0.123456789012346')
        >>> quantize(2)
        Decimal('2.000000000000000')
    """
    return Decimal(value).quantize(QUANTUM, context=_EXACT)


def fraction_to_decimal(numerator: int, denominator: int) -> Decimal:
    """
    Деление двух целых с округлением до SCALE (ROUND_HALF_UP).

    Выполняется в целых числах, поэтому точность не ограничена.

    Raises:
        ZeroDivisionError: Если denominator == 0 (вызывающий код обязан
            проверить делитель заранее)
    """
    negative = (numerator < 0) != (denominator < 0)
    divisor = abs(denominator)
    quotient, remainder = divmod(abs(numerator) * 10**SCALE, divisor)
    if 2 * remainder >= divisor:
        quotient += 1
    if negative:
        quotient = -quotient
    return Decimal(quotient).scaleb(-SCALE, context=_EXACT)


def decimal_from_float(value: float) -> Decimal:
    """Decimal из кратчайшего десятичного представления float."""
    return Decimal(repr(value))


def to_integer(value: Decimal) -> int:
    """Целая часть с отбрасыванием дробной (к нулю), знак сохраняется."""
    return int(value)


def is_integral(value: Decimal) -> bool:
    """True если после удаления хвостовых нулей дробных цифр не осталось."""
    return value == value.to_integral_value(context=_EXACT)


def strip_trailing_zeros(value: Decimal) -> str:
    """
    Строковое представление без хвостовых нулей и без экспоненты.

    Целое значение сохраняет одну дробную цифру ("10.0"), чтобы при повторном
    разборе токен снова стал Real.

    Examples:
        >>> strip_trailing_zeros(Decimal("2.500000000000000"))
        '2.5'
        >>> strip_trailing_zeros(Decimal("10.000000000000000"))
        '10.0'
    """
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text += "0"
    else:
        text += ".0"
    if text == "-0.0":
        text = "0.0"
    return text


# =============================================================================
# ТОЧНЫЕ ОПЕРАЦИИ
# =============================================================================


def exact_add(left: DecimalLike, right: DecimalLike) -> Decimal:
    return _EXACT.add(Decimal(left), Decimal(right))


def exact_subtract(left: DecimalLike, right: DecimalLike) -> Decimal:
    return _EXACT.subtract(Decimal(left), Decimal(right))


def exact_multiply(left: DecimalLike, right: DecimalLike) -> Decimal:
    return _EXACT.multiply(Decimal(left), Decimal(right))


def divide_at_scale(dividend: DecimalLike, divisor: DecimalLike) -> Decimal:
    """
    Деление Decimal с округлением до SCALE.

    Raises:
        ZeroDivisionError: Если divisor == 0
    """
    dividend_num, dividend_den = Decimal(dividend).as_integer_ratio()
    divisor_num, divisor_den = Decimal(divisor).as_integer_ratio()
    return fraction_to_decimal(dividend_num * divisor_den, dividend_den * divisor_num)


def power_of_ten(exponent: int) -> Decimal:
    """Точное 10^exponent (exponent может быть отрицательным)."""
    return ONE.scaleb(exponent, context=_EXACT)


def sqrt_at_scale(value: Decimal) -> Decimal:
    """
    Квадратный корень: SQRT_PRECISION значащих цифр, затем SCALE.

    Вызывающий код обязан гарантировать value >= 0.
    """
    return quantize(_SQRT.sqrt(value))

