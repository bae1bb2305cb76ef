"""
Errors — иерархия исключений exprstep

Все ошибки наследуются от ExpressionError (а не от ValueError), поэтому
pydantic-валидаторы моделей дерева пробрасывают их без обёртки в
ValidationError.

Ошибки построения дерева (builder):
- MalformedExpressionError — пустой поток токенов / лишние токены в конце
- UnbalancedParenthesesError — токены закончились посреди выражения
- UnknownOperatorError — неизвестный символ оператора
- ArityMismatchError — число операндов вне arity class оператора
- InvalidIdentifierError — токен не литерал и не идентификатор

Ошибки вычисления:
- UndefinedIdentifierError — идентификатор отсутствует в bindings
- ReservedIdentifierError — обращение к константе (e, pi) через bindings
- DomainError — нарушение ограничения на операнд (деление на ноль, log/expt)

Все ошибки терминальны для операции, которая их вызвала.
"""

from typing import Any, Optional


class ExpressionError(Exception):
    """Базовое исключение для всех ошибок exprstep."""
    pass


# =============================================================================
# BUILD-TIME ERRORS
# =============================================================================


class MalformedExpressionError(ExpressionError):
    """
    Некорректная операция: нет выражения или лишний токен после выражения.

    Attributes:
        token: Неожиданный токен (или описание, если токена нет)
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Bad operation: {token}")


class UnbalancedParenthesesError(ExpressionError):
    """Поток токенов исчерпан до закрытия всех скобок."""

    def __init__(self):
        super().__init__("Mismatched parentheses")


class UnknownOperatorError(ExpressionError):
    """Символ оператора не распознан."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Undefined operator: {symbol}")


class ArityMismatchError(ExpressionError):
    """
    Число операндов не соответствует arity class оператора.

    Attributes:
        actual: Фактическое число операндов
        minimum: Минимально допустимое число
        maximum: Максимально допустимое число (None = не ограничено)
    """

    def __init__(self, actual: int, minimum: int, maximum: Optional[int]):
        self.actual = actual
        self.minimum = minimum
        self.maximum = maximum
        upper = "unbounded" if maximum is None else str(maximum)
        super().__init__(
            f"Wrong number of operands: got {actual}, expected [{minimum}, {upper}]"
        )


class InvalidIdentifierError(ExpressionError):
    """Токен не является ни литералом, ни допустимым идентификатором."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Illegal identifier: {token}")


# =============================================================================
# EVALUATION-TIME ERRORS
# =============================================================================


class UndefinedIdentifierError(ExpressionError):
    """Идентификатор отсутствует в binding map."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined identifier: {name}")


class ReservedIdentifierError(ExpressionError):
    """
    Обращение к предопределённой константе (e, pi) через binding map.

    Константы подставляются как литералы, а не как переменные.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Illegal identifier: {name} is a reserved constant")


class DomainError(ExpressionError):
    """
    Нарушение ограничения на операнд.

    Attributes:
        operand: Операнд, нарушивший ограничение
        relation: Ожидаемое отношение ("greater than", "different from", ...)
        expected: Значение, с которым сравнивается операнд
    """

    def __init__(self, operand: Any, relation: str, expected: Any):
        self.operand = operand
        self.relation = relation
        self.expected = expected
        super().__init__(
            f"Wrong operand: expected a number {relation} {expected}, but got {operand}"
        )


# =============================================================================
# STEPPER ERRORS
# =============================================================================


class StepLimitExceededError(ExpressionError):
    """Stepper не достиг терминального состояния за max_steps шагов."""

    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"Stepper did not terminate within {max_steps} steps")
