"""
Predefined identifiers — константы e и pi

Имена констант зарезервированы: их нельзя передавать через binding map,
вычислитель отклоняет такие обращения (ReservedIdentifierError). Константы
подставляются в поток токенов как литералы до построения дерева.
"""

import math
from enum import Enum
from typing import Final, Iterable

from exprstep.core.math.numeric import Real
from exprstep.core.math.precision import decimal_from_float


class Constant(Enum):
    """Предопределённая константа: (имя, значение Real)."""

    E = ("e", Real(decimal_from_float(math.e)))
    PI = ("pi", Real(decimal_from_float(math.pi)))

    @property
    def identifier(self) -> str:
        return self.value[0]

    @property
    def number(self) -> Real:
        return self.value[1]


RESERVED_NAMES: Final[frozenset] = frozenset(c.identifier for c in Constant)


def is_reserved(name: str) -> bool:
    return name in RESERVED_NAMES


def resolve_constants(tokens: Iterable[str]) -> list[str]:
    """
    Замена токенов-констант на их литералы.

    Examples:
        >>> resolve_constants(["(", "*", "2", "pi", ")"])
        ['(', '*', '2', '3.141592653589793', ')']
    """
    literals = {c.identifier: str(c.number) for c in Constant}
    return [literals.get(token, token) for token in tokens]
