"""
Operator — закрытое перечисление операторов выражения

Каждый оператор несёт символ для отображения и arity class:
- VARIADIC_FROM_0: +, *        (0..∞ операндов)
- VARIADIC_FROM_1: -, /        (1..∞ операндов)
- EXACTLY_1:       ln, exp, sqrt
- EXACTLY_2:       expt, log
"""

from enum import Enum
from typing import Optional

from exprstep.core.errors import ArityMismatchError, UnknownOperatorError


# =============================================================================
# ARITY
# =============================================================================


class ArityClass(Enum):
    """Допустимый диапазон числа операндов (maximum=None — без ограничения)."""

    VARIADIC_FROM_0 = (0, None)
    VARIADIC_FROM_1 = (1, None)
    EXACTLY_1 = (1, 1)
    EXACTLY_2 = (2, 2)

    @property
    def minimum(self) -> int:
        return self.value[0]

    @property
    def maximum(self) -> Optional[int]:
        return self.value[1]

    def accepts(self, count: int) -> bool:
        if count < self.minimum:
            return False
        return self.maximum is None or count <= self.maximum

    def check(self, count: int) -> None:
        """
        Raises:
            ArityMismatchError: Если count вне диапазона
        """
        if not self.accepts(count):
            raise ArityMismatchError(count, self.minimum, self.maximum)


# =============================================================================
# OPERATOR
# =============================================================================


class Operator(str, Enum):
    """Оператор префиксного выражения; значение — символ."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EXP = "exp"
    EXPT = "expt"
    LN = "ln"
    LOG = "log"
    SQRT = "sqrt"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def arity(self) -> ArityClass:
        return _ARITY[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """
        Raises:
            UnknownOperatorError: Если символ не распознан
        """
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperatorError(symbol) from None

    def __str__(self) -> str:
        return self.value


_ARITY = {
    Operator.ADD: ArityClass.VARIADIC_FROM_0,
    Operator.MUL: ArityClass.VARIADIC_FROM_0,
    Operator.SUB: ArityClass.VARIADIC_FROM_1,
    Operator.DIV: ArityClass.VARIADIC_FROM_1,
    Operator.LN: ArityClass.EXACTLY_1,
    Operator.EXP: ArityClass.EXACTLY_1,
    Operator.SQRT: ArityClass.EXACTLY_1,
    Operator.EXPT: ArityClass.EXACTLY_2,
    Operator.LOG: ArityClass.EXACTLY_2,
}
