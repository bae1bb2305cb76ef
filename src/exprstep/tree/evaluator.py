"""
Evaluator — полное вычисление дерева выражения

evaluate(tree, bindings) → NumericValue

Операнды вычисляются слева направо:
- "+" / "*": правая свёртка (без операндов: 0 / 1)
- "-" / "/": один операнд → отрицание / обратное значение;
             иначе первый - (сумма остальных) / первый / (произведение остальных)
- ln, exp, sqrt: унарные
- expt, log: бинарные, первый операнд — получатель

Поиск идентификатора: зарезервированное имя (e, pi) → ReservedIdentifierError,
отсутствие в bindings → UndefinedIdentifierError.
"""

from typing import Mapping

from exprstep.core.domain.constants import is_reserved
from exprstep.core.domain.nodes import ExpressionNode, IdentifierNode, LiteralNode, OperationNode
from exprstep.core.domain.operator import Operator
from exprstep.core.errors import ReservedIdentifierError, UndefinedIdentifierError
from exprstep.core.math.numeric import Integer, NumericValue

Bindings = Mapping[str, NumericValue]


def lookup_identifier(name: str, bindings: Bindings) -> NumericValue:
    """
    Значение идентификатора из binding map.

    Raises:
        ReservedIdentifierError: Если name — имя предопределённой константы
        UndefinedIdentifierError: Если name отсутствует в bindings
    """
    if is_reserved(name):
        raise ReservedIdentifierError(name)
    if name not in bindings:
        raise UndefinedIdentifierError(name)
    return bindings[name]


def evaluate(tree: ExpressionNode, bindings: Bindings) -> NumericValue:
    """
    Вычисление значения дерева.

    Args:
        tree: Корень дерева выражения
        bindings: Значения идентификаторов (не изменяется)

    Returns:
        Значение в простейшем точном представлении башни

    Raises:
        ReservedIdentifierError, UndefinedIdentifierError: Ошибки поиска имени
        DomainError: Нарушение ограничения на операнд
    """
    if isinstance(tree, LiteralNode):
        return tree.value
    if isinstance(tree, IdentifierNode):
        return lookup_identifier(tree.name, bindings)
    if isinstance(tree, OperationNode):
        values = [evaluate(operand, bindings) for operand in tree.operands]
        return apply_operator(tree.operator, values)
    raise TypeError(f"Unknown expression node: {type(tree).__name__}")


def apply_operator(operator: Operator, values: list[NumericValue]) -> NumericValue:
    """Применение оператора к уже вычисленным операндам."""
    if operator is Operator.ADD:
        return _sum(values)
    if operator is Operator.MUL:
        return _product(values)

    first, rest = values[0], values[1:]
    if operator is Operator.SUB:
        return first.negate() if not rest else first.subtract(_sum(rest))
    if operator is Operator.DIV:
        return first.divide() if not rest else first.divide(_product(rest))
    if operator is Operator.EXP:
        return first.exp()
    if operator is Operator.LN:
        return first.ln()
    if operator is Operator.SQRT:
        return first.sqrt()
    if operator is Operator.EXPT:
        return first.expt(rest[0])
    if operator is Operator.LOG:
        return first.log(rest[0])
    raise TypeError(f"Unknown operator: {operator!r}")


def _sum(values: list[NumericValue]) -> NumericValue:
    if not values:
        return Integer.ZERO
    total = values[-1]
    for value in reversed(values[:-1]):
        total = value.add(total)
    return total


def _product(values: list[NumericValue]) -> NumericValue:
    if not values:
        return Integer.ONE
    total = values[-1]
    for value in reversed(values[:-1]):
        total = value.multiply(total)
    return total
