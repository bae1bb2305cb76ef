"""
Core math modules для exprstep

Числовая башня (Integer / Rational / Real) и примитивы фиксированной точности.
"""

# Precision primitives
from exprstep.core.math.precision import (
    QUANTUM,
    ROUNDING,
    SCALE,
    SQRT_PRECISION,
    quantize,
)

# Fraction
from exprstep.core.math.fraction import Fraction, gcd

# Manual log / anti-log
from exprstep.core.math.logarithm import (
    LOG10_E,
    decomposed_log10,
    natural_log,
)

# Numeric tower
from exprstep.core.math.numeric import (
    Integer,
    NumericValue,
    Rational,
    Real,
    normalize_rational,
    normalize_real,
)

__all__ = [
    # Precision
    "SCALE",
    "ROUNDING",
    "SQRT_PRECISION",
    "QUANTUM",
    "quantize",
    # Fraction
    "Fraction",
    "gcd",
    # Logarithm
    "LOG10_E",
    "decomposed_log10",
    "natural_log",
    # Numeric tower
    "Integer",
    "Rational",
    "Real",
    "NumericValue",
    "normalize_real",
    "normalize_rational",
]
