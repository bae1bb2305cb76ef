"""Тесты для Operator, констант и узлов дерева.

Coverage:
- Символы и arity class операторов
- Константы e / pi и зарезервированные имена
- Грамматика идентификаторов (включая ä ö ü ß)
- Инварианты узлов проверяются при создании
- Immutability и clone()
"""

import pytest
from pydantic import ValidationError

from exprstep.core.domain import (
    RESERVED_NAMES,
    ArityClass,
    Constant,
    IdentifierNode,
    LiteralNode,
    OperationNode,
    Operator,
    is_reserved,
    is_valid_identifier,
    resolve_constants,
)
from exprstep.core.errors import (
    ArityMismatchError,
    InvalidIdentifierError,
    UnknownOperatorError,
)
from exprstep.core.math.numeric import Integer, Rational, Real


# =============================================================================
# OPERATOR
# =============================================================================


class TestOperator:
    """Тесты перечисления операторов."""

    @pytest.mark.parametrize(
        "symbol, operator",
        [
            ("+", Operator.ADD),
            ("-", Operator.SUB),
            ("*", Operator.MUL),
            ("/", Operator.DIV),
            ("exp", Operator.EXP),
            ("expt", Operator.EXPT),
            ("ln", Operator.LN),
            ("log", Operator.LOG),
            ("sqrt", Operator.SQRT),
        ],
    )
    def test_from_symbol(self, symbol, operator):
        assert Operator.from_symbol(symbol) is operator
        assert operator.symbol == symbol
        assert str(operator) == symbol

    def test_unknown_symbol(self):
        with pytest.raises(UnknownOperatorError) as exc_info:
            Operator.from_symbol("foo")

        assert exc_info.value.symbol == "foo"

    def test_symbols_are_case_sensitive(self):
        with pytest.raises(UnknownOperatorError):
            Operator.from_symbol("LN")

    @pytest.mark.parametrize(
        "operator, arity",
        [
            (Operator.ADD, ArityClass.VARIADIC_FROM_0),
            (Operator.MUL, ArityClass.VARIADIC_FROM_0),
            (Operator.SUB, ArityClass.VARIADIC_FROM_1),
            (Operator.DIV, ArityClass.VARIADIC_FROM_1),
            (Operator.LN, ArityClass.EXACTLY_1),
            (Operator.EXP, ArityClass.EXACTLY_1),
            (Operator.SQRT, ArityClass.EXACTLY_1),
            (Operator.EXPT, ArityClass.EXACTLY_2),
            (Operator.LOG, ArityClass.EXACTLY_2),
        ],
    )
    def test_arity(self, operator, arity):
        assert operator.arity is arity


class TestArityClass:
    """Диапазоны числа операндов."""

    def test_variadic_from_zero(self):
        assert ArityClass.VARIADIC_FROM_0.accepts(0)
        assert ArityClass.VARIADIC_FROM_0.accepts(100)

    def test_variadic_from_one(self):
        assert not ArityClass.VARIADIC_FROM_1.accepts(0)
        assert ArityClass.VARIADIC_FROM_1.accepts(1)
        assert ArityClass.VARIADIC_FROM_1.maximum is None

    def test_exactly_two(self):
        assert not ArityClass.EXACTLY_2.accepts(1)
        assert ArityClass.EXACTLY_2.accepts(2)
        assert not ArityClass.EXACTLY_2.accepts(3)

    def test_check_carries_bounds(self):
        with pytest.raises(ArityMismatchError) as exc_info:
            ArityClass.EXACTLY_1.check(2)

        error = exc_info.value
        assert (error.actual, error.minimum, error.maximum) == (2, 1, 1)


# =============================================================================
# CONSTANTS
# =============================================================================


class TestConstants:
    """Предопределённые константы."""

    def test_identifiers(self):
        assert Constant.E.identifier == "e"
        assert Constant.PI.identifier == "pi"
        assert RESERVED_NAMES == frozenset({"e", "pi"})

    def test_values(self):
        assert Constant.E.number == Real("2.718281828459045")
        assert str(Constant.PI.number) == "3.141592653589793"

    def test_is_reserved_is_case_sensitive(self):
        assert is_reserved("pi")
        assert not is_reserved("PI")
        assert not is_reserved("x")

    def test_resolve_constants(self):
        tokens = ["(", "*", "2", "pi", "e", "x", ")"]
        assert resolve_constants(tokens) == [
            "(", "*", "2", "3.141592653589793", "2.718281828459045", "x", ")",
        ]


# =============================================================================
# NODES
# =============================================================================


class TestIdentifierGrammar:
    """Буквы и дефисы, минимум одна буква."""

    @pytest.mark.parametrize("name", ["x", "rate", "x-wert", "größe", "Äpfel", "-a-"])
    def test_valid(self, name):
        assert is_valid_identifier(name)

    @pytest.mark.parametrize("name", ["", "-", "--", "x1", "a_b", "1/2", "(", "a.b"])
    def test_invalid(self, name):
        assert not is_valid_identifier(name)

    def test_node_rejects_invalid_name(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            IdentifierNode(name="x1")

        assert exc_info.value.token == "x1"


class TestNodes:
    """Инварианты и поведение узлов дерева."""

    def test_operation_arity_checked_on_creation(self):
        """(ln 1 2) — два операнда при EXACTLY_1."""
        with pytest.raises(ArityMismatchError):
            OperationNode(
                operator=Operator.LN,
                operands=(LiteralNode(value=Integer(1)), LiteralNode(value=Integer(2))),
            )

    def test_empty_subtraction_rejected(self):
        with pytest.raises(ArityMismatchError) as exc_info:
            OperationNode(operator=Operator.SUB)

        assert exc_info.value.minimum == 1
        assert exc_info.value.maximum is None

    def test_empty_addition_allowed(self):
        node = OperationNode(operator=Operator.ADD)
        assert node.operands == ()
        assert str(node) == "(+)"

    def test_literal_requires_numeric_value(self):
        with pytest.raises(ValidationError):
            LiteralNode(value=5)

    def test_nodes_are_frozen(self):
        node = LiteralNode(value=Integer(1))
        with pytest.raises(ValidationError):
            node.value = Integer(2)

    def test_is_leaf_operation(self):
        inner = OperationNode(
            operator=Operator.MUL,
            operands=(LiteralNode(value=Integer(2)), IdentifierNode(name="x")),
        )
        outer = OperationNode(operator=Operator.ADD, operands=(LiteralNode(value=Integer(1)), inner))

        assert inner.is_leaf_operation()
        assert not outer.is_leaf_operation()

    def test_str(self):
        node = OperationNode(
            operator=Operator.ADD,
            operands=(
                IdentifierNode(name="x"),
                LiteralNode(value=Rational.of(-1, 3)),
                LiteralNode(value=Real("2.50")),
            ),
        )
        assert str(node) == "(+ x -1/3 2.5)"

    def test_clone_is_equal_and_distinct(self):
        node = OperationNode(
            operator=Operator.SQRT,
            operands=(LiteralNode(value=Integer(4)),),
        )
        copy = node.clone()

        assert copy == node
        assert copy is not node

    def test_structural_equality(self):
        first = OperationNode(operator=Operator.ADD, operands=(LiteralNode(value=Integer(1)),))
        second = OperationNode(operator=Operator.ADD, operands=(LiteralNode(value=Integer(1)),))
        different = OperationNode(operator=Operator.ADD, operands=(LiteralNode(value=Real(1)),))

        assert first == second
        assert first != different

    def test_model_dump_json(self):
        node = OperationNode(
            operator=Operator.ADD,
            operands=(IdentifierNode(name="x"), LiteralNode(value=Rational.of(1, 2))),
        )

        assert node.model_dump(mode="json") == {
            "kind": "operation",
            "operator": "+",
            "operands": [
                {"kind": "identifier", "name": "x"},
                {"kind": "literal", "value": "1/2"},
            ],
        }
