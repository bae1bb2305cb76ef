"""
exprstep — вычисление арифметических выражений в префиксной записи.

Поток данных: токены → дерево (builder) → значение (evaluator)
или последовательность шагов редукции (stepper).
"""

from exprstep.core.domain import Constant, Operator, resolve_constants
from exprstep.core.errors import (
    ArityMismatchError,
    DomainError,
    ExpressionError,
    InvalidIdentifierError,
    MalformedExpressionError,
    ReservedIdentifierError,
    StepLimitExceededError,
    UnbalancedParenthesesError,
    UndefinedIdentifierError,
    UnknownOperatorError,
)
from exprstep.core.math import Fraction, Integer, NumericValue, Rational, Real
from exprstep.stepper import Stepper, StepperConfig, StepperState
from exprstep.tree import (
    build_iteratively,
    build_recursively,
    evaluate,
    reconstruct,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    # Numeric tower
    "Fraction",
    "Integer",
    "Rational",
    "Real",
    "NumericValue",
    # Domain
    "Operator",
    "Constant",
    "resolve_constants",
    # Tree
    "tokenize",
    "build_recursively",
    "build_iteratively",
    "reconstruct",
    "evaluate",
    # Stepper
    "Stepper",
    "StepperConfig",
    "StepperState",
    # Errors
    "ExpressionError",
    "MalformedExpressionError",
    "UnbalancedParenthesesError",
    "UnknownOperatorError",
    "ArityMismatchError",
    "InvalidIdentifierError",
    "UndefinedIdentifierError",
    "ReservedIdentifierError",
    "DomainError",
    "StepLimitExceededError",
]
