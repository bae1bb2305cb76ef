"""
Builder — построение дерева выражения из потока токенов

Грамматика:
    expression := LITERAL | IDENTIFIER | "(" SYMBOL expression* ")"

Две алгоритмически разные, но эквивалентные формы:
- build_recursively(): рекурсивный спуск по вложенным операциям
- build_iteratively(): явный стек незакрытых операций

Обе формы принимают один и тот же язык, выбрасывают одинаковые ошибки для
одинаковых некорректных входов и строят равные деревья.

ПОРЯДОК ПРОВЕРОК (на каждом шаге):
1. Исчерпание потока токенов → UnbalancedParenthesesError (проверяется первым)
2. Символ оператора → UnknownOperatorError
3. Для внешней ")" — лишний токен после выражения → MalformedExpressionError
4. Число операндов → ArityMismatchError (при создании OperationNode)

reconstruct() — обратное преобразование дерева в поток токенов.
"""

import logging
from typing import Iterable

from exprstep.core.domain.nodes import ExpressionNode, OperationNode
from exprstep.core.domain.operator import Operator
from exprstep.core.errors import MalformedExpressionError
from exprstep.tree.tokens import CLOSE, OPEN, TokenCursor, parse_operand

logger = logging.getLogger(__name__)


# =============================================================================
# ОБЩИЕ ШАГИ
# =============================================================================


def _start(cursor: TokenCursor) -> str:
    if not cursor.has_next():
        raise MalformedExpressionError("No expression")
    return cursor.next()


def _single_operand(cursor: TokenCursor, token: str) -> ExpressionNode:
    if cursor.has_next():
        raise MalformedExpressionError(cursor.next())
    return parse_operand(token)


def _read_operator(cursor: TokenCursor) -> Operator:
    """Символ оператора после "("; за ним обязан следовать ещё токен."""
    symbol = cursor.next()
    cursor.expect_more()
    return Operator.from_symbol(symbol)


def _close(cursor: TokenCursor, operator: Operator, operands: list, outermost: bool) -> OperationNode:
    if outermost and cursor.has_next():
        raise MalformedExpressionError(cursor.next())
    return OperationNode(operator=operator, operands=tuple(operands))


# =============================================================================
# RECURSIVE FORM
# =============================================================================


def build_recursively(tokens: Iterable[str]) -> ExpressionNode:
    """
    Рекурсивное построение дерева.

    Args:
        tokens: Последовательность токенов

    Returns:
        Корень дерева выражения

    Raises:
        MalformedExpressionError: Пустой поток или лишний токен в конце
        UnbalancedParenthesesError: Токены закончились посреди выражения
        UnknownOperatorError: Неизвестный оператор
        ArityMismatchError: Неверное число операндов
        InvalidIdentifierError: Токен не литерал и не идентификатор
    """
    cursor = TokenCursor(tokens)
    token = _start(cursor)
    if token != OPEN:
        return _single_operand(cursor, token)
    cursor.expect_more()
    root = _build_operation(cursor, outermost=True)
    logger.debug("Built tree recursively: %s", root)
    return root


def _build_operation(cursor: TokenCursor, outermost: bool) -> OperationNode:
    operator = _read_operator(cursor)
    operands: list = []
    while True:
        token = cursor.next()
        if token == CLOSE:
            return _close(cursor, operator, operands, outermost)
        if token == OPEN:
            operands.append(_build_operation(cursor, outermost=False))
        else:
            operands.append(parse_operand(token))
        cursor.expect_more()


# =============================================================================
# ITERATIVE FORM
# =============================================================================


def build_iteratively(tokens: Iterable[str]) -> ExpressionNode:
    """
    Построение дерева с явным стеком незакрытых операций.

    Каждый элемент стека — (оператор, накопленные операнды). ")" закрывает
    вершину стека и добавляет готовый узел в операнды предыдущего уровня.

    Raises:
        См. build_recursively — набор ошибок и их порядок совпадают.
    """
    cursor = TokenCursor(tokens)
    token = _start(cursor)
    if token != OPEN:
        return _single_operand(cursor, token)
    cursor.expect_more()

    stack: list[tuple[Operator, list]] = [(_read_operator(cursor), [])]
    while True:
        token = cursor.next()
        if token == CLOSE:
            operator, operands = stack.pop()
            if not stack:
                root = _close(cursor, operator, operands, outermost=True)
                logger.debug("Built tree iteratively: %s", root)
                return root
            stack[-1][1].append(_close(cursor, operator, operands, outermost=False))
            cursor.expect_more()
        elif token == OPEN:
            stack.append((_read_operator(cursor), []))
        else:
            stack[-1][1].append(parse_operand(token))
            cursor.expect_more()


# =============================================================================
# RECONSTRUCTION
# =============================================================================


def reconstruct(root: ExpressionNode) -> list[str]:
    """
    Поток токенов дерева: операция → "(" SYMBOL операнды... ")".

    Examples:
        >>> reconstruct(build_recursively(["(", "+", "1", "2", ")"]))
        ['(', '+', '1', '2', ')']
    """
    tokens: list[str] = []
    _append_tokens(tokens, root)
    return tokens


def _append_tokens(tokens: list[str], node: ExpressionNode) -> None:
    if isinstance(node, OperationNode):
        tokens.append(OPEN)
        tokens.append(node.operator.symbol)
        for operand in node.operands:
            _append_tokens(tokens, operand)
        tokens.append(CLOSE)
    else:
        tokens.append(str(node))
