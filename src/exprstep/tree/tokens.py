"""
Tokens — поток токенов и разбор операндов

- tokenize(): разбиение строки выражения на токены (скобки и слова)
- TokenCursor: последовательное чтение токенов; чтение за концом потока
  означает несбалансированные скобки
- parse_literal() / parse_operand(): литерал (integer → real → rational)
  или идентификатор
"""

import re
from decimal import Decimal
from typing import Final, Iterable, Optional, Union

from exprstep.core.domain.nodes import IdentifierNode, LiteralNode, is_valid_identifier
from exprstep.core.errors import InvalidIdentifierError, UnbalancedParenthesesError
from exprstep.core.math.fraction import Fraction
from exprstep.core.math.numeric import Integer, NumericValue, Rational, Real

OPEN: Final[str] = "("
CLOSE: Final[str] = ")"

_TOKEN_RE: Final = re.compile(r"[()]|[^\s()]+")

# Порядок разбора литерала: integer, decimal real, integer/integer
_INTEGER_RE: Final = re.compile(r"[+-]?[0-9]+")
_REAL_RE: Final = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RATIONAL_RE: Final = re.compile(r"(-?[0-9]+)/([0-9]+)")


def tokenize(expression: str) -> list[str]:
    """
    Разбиение строки на токены; пробелы — разделители, скобки — отдельные токены.

    Examples:
        >>> tokenize("(+ x (* 2 3))")
        ['(', '+', 'x', '(', '*', '2', '3', ')', ')']
    """
    return _TOKEN_RE.findall(expression)


# =============================================================================
# TOKEN CURSOR
# =============================================================================


class TokenCursor:
    """Курсор по последовательности токенов."""

    def __init__(self, tokens: Iterable[str]):
        self._tokens = list(tokens)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._tokens)

    def next(self) -> str:
        """
        Raises:
            UnbalancedParenthesesError: Если токены закончились
        """
        self.expect_more()
        token = self._tokens[self._position]
        self._position += 1
        return token

    def expect_more(self) -> None:
        """
        Raises:
            UnbalancedParenthesesError: Если токены закончились
        """
        if not self.has_next():
            raise UnbalancedParenthesesError()


# =============================================================================
# OPERANDS
# =============================================================================


def parse_literal(token: str) -> Optional[NumericValue]:
    """
    Числовой литерал или None.

    Examples:
        >>> parse_literal("-12")
        Integer(-12)
        >>> parse_literal("2.50")
        Real(2.5)
        >>> parse_literal("-1/3")
        Rational(-1/3)
        >>> parse_literal("x") is None
        True
    """
    if _INTEGER_RE.fullmatch(token):
        return Integer(int(token))
    if _REAL_RE.fullmatch(token):
        return Real(Decimal(token))
    match = _RATIONAL_RE.fullmatch(token)
    if match:
        return Rational(Fraction(int(match.group(1)), int(match.group(2))))
    return None


def parse_number(token: str) -> NumericValue:
    """
    Raises:
        InvalidIdentifierError: Если токен не является числовым литералом
    """
    number = parse_literal(token)
    if number is None:
        raise InvalidIdentifierError(token)
    return number


def parse_operand(token: str) -> Union[LiteralNode, IdentifierNode]:
    """
    Литерал или идентификатор.

    Raises:
        InvalidIdentifierError: Если токен не литерал и не идентификатор
    """
    number = parse_literal(token)
    if number is not None:
        return LiteralNode(value=number)
    if is_valid_identifier(token):
        return IdentifierNode(name=token)
    raise InvalidIdentifierError(token)
