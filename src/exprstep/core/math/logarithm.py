"""
Logarithm — ручной log / anti-log для чисел с фиксированным масштабом

Общая машинерия для ln, log, expt и exp. Нативные float-функции применяются
только к мантиссе из диапазона [1, 10], поэтому погрешность float ограничена
одной десятичной цифрой независимо от величины исходного числа.

АЛГОРИТМ log10(i), i > 0:
    counter = 0
    пока i > 10: i = i / 10, counter += 1
    пока i < 1:  i = i * 10, counter -= 1
    log10(i) = counter + log10_float(mantissa)

    ln(i)     = log10(i) / log10(e)
    log_b(i)  = log10(i) / log10_float(b)

АЛГОРИТМ anti-log (expt, exp):
    x = log10(base) * exponent
    m = trunc(x)                       (целая часть, к нулю)
    base^exponent = 10^m * 10^(x - m)  (дробная степень через float)

Разложение 10^m * 10^frac сохраняет представимость очень больших и очень
малых величин при фиксированном масштабе без переполнения.

Вызывающий код (numeric.py) обязан проверить положительность операндов до
вызова функций этого модуля.
"""

import math
from decimal import Decimal
from typing import Final

from exprstep.core.errors import DomainError
from exprstep.core.math.precision import (
    ONE,
    TEN,
    decimal_from_float,
    divide_at_scale,
    exact_multiply,
    exact_subtract,
    power_of_ten,
    quantize,
    to_integer,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# log10(e) как float
LOG10_E: Final[float] = math.log10(math.e)


# =============================================================================
# LOG
# =============================================================================


def decomposed_log10(value: Decimal) -> float:
    """
    log10(value) через сдвиг порядка и float-логарифм мантиссы.

    Args:
        value: Строго положительное значение

    Returns:
        counter + log10(mantissa), mantissa ∈ [1, 10]

    Raises:
        DomainError: Если value <= 0

    Examples:
        >>> decomposed_log10(Decimal(1000))
        3.0
        >>> decomposed_log10(Decimal("0.01"))
        -2.0
    """
    if value <= 0:
        raise DomainError(value, "greater than", 0)

    mantissa = value
    counter = 0.0

    if mantissa > TEN:
        while mantissa > TEN:
            mantissa = divide_at_scale(mantissa, TEN)
            counter += 1
    elif mantissa < ONE:
        while mantissa < ONE:
            mantissa = exact_multiply(mantissa, TEN)
            counter -= 1

    return counter + math.log10(float(mantissa))


def log10_at_scale(value: Decimal) -> Decimal:
    """Десятичный логарифм, приведённый к SCALE."""
    return quantize(decimal_from_float(decomposed_log10(value)))


def natural_log(value: Decimal) -> Decimal:
    """ln(value) = log10(value) / log10(e), округление до SCALE."""
    return divide_at_scale(
        decimal_from_float(decomposed_log10(value)),
        decimal_from_float(LOG10_E),
    )


def log_with_base(value: Decimal, base: Decimal) -> Decimal:
    """
    log_base(value) = log10(value) / log10(base).

    Значение и основание проходят одинаковый сдвиг порядка.

    Raises:
        ZeroDivisionError: Если base == 1 (вызывающий код проверяет заранее)
    """
    return divide_at_scale(
        decimal_from_float(decomposed_log10(value)),
        decimal_from_float(decomposed_log10(base)),
    )


# =============================================================================
# ANTI-LOG
# =============================================================================


def antilog10(x: Decimal) -> Decimal:
    """
    10^x как 10^m * 10^(x - m), m = trunc(x).

    Результат не округлён: нормализация выполняется вызывающим кодом.
    """
    m = to_integer(x)
    fractional = float(exact_subtract(x, m))
    return exact_multiply(power_of_ten(m), decimal_from_float(math.pow(10, fractional)))


def power(base: Decimal, exponent: Decimal) -> Decimal:
    """base^exponent через log10(base) * exponent и anti-log."""
    return antilog10(exact_multiply(log10_at_scale(base), exponent))


def natural_exp(value: Decimal) -> Decimal:
    """e^value через log10(e) * value и anti-log."""
    return antilog10(exact_multiply(decimal_from_float(LOG10_E), value))
