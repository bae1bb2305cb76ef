"""
Expression nodes — узлы дерева арифметического выражения

Immutable Pydantic модели (frozen=True), закрытое множество вариантов:
- LiteralNode(value: NumericValue)
- IdentifierNode(name: str)
- OperationNode(operator: Operator, operands: tuple[ExpressionNode, ...])

Union ExpressionNode различается по полю kind. Инварианты проверяются при
создании узла, а не при вычислении:
- имя идентификатора: буквы (любой алфавит, включая ä ö ü ß) и дефисы,
  минимум одна буква
- число операндов соответствует arity class оператора

Все изменения дерева создают новые экземпляры.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from exprstep.core.domain.operator import Operator
from exprstep.core.errors import InvalidIdentifierError
from exprstep.core.math.numeric import NumericValue


def is_valid_identifier(name: str) -> bool:
    """
    Проверка грамматики идентификатора.

    Examples:
        >>> is_valid_identifier("x-wert")
        True
        >>> is_valid_identifier("größe")
        True
        >>> is_valid_identifier("-")
        False
        >>> is_valid_identifier("x1")
        False
    """
    has_letter = False
    for char in name:
        if char == "-":
            continue
        if not char.isalpha():
            return False
        has_letter = True
    return has_letter


# =============================================================================
# NODES
# =============================================================================


class LiteralNode(BaseModel):
    """Литерал — числовое значение башни."""

    kind: Literal["literal"] = "literal"
    value: NumericValue

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_serializer("value")
    def _serialize_value(self, value: NumericValue) -> str:
        return str(value)

    def clone(self) -> "LiteralNode":
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        return str(self.value)


class IdentifierNode(BaseModel):
    """Идентификатор — имя переменной из binding map."""

    kind: Literal["identifier"] = "identifier"
    name: str

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """
        Raises:
            InvalidIdentifierError: Если имя не соответствует грамматике
        """
        if not is_valid_identifier(v):
            raise InvalidIdentifierError(v)
        return v

    def clone(self) -> "IdentifierNode":
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        return self.name


class OperationNode(BaseModel):
    """Операция — оператор и упорядоченная последовательность операндов."""

    kind: Literal["operation"] = "operation"
    operator: Operator
    operands: tuple["ExpressionNode", ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_arity(self) -> "OperationNode":
        """
        Raises:
            ArityMismatchError: Если число операндов вне arity class
        """
        self.operator.arity.check(len(self.operands))
        return self

    def is_leaf_operation(self) -> bool:
        """True если ни один операнд не является операцией."""
        return not any(isinstance(operand, OperationNode) for operand in self.operands)

    def clone(self) -> "OperationNode":
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        parts = [self.operator.symbol] + [str(operand) for operand in self.operands]
        return "(" + " ".join(parts) + ")"


ExpressionNode = Annotated[
    Union[LiteralNode, IdentifierNode, OperationNode],
    Field(discriminator="kind"),
]

OperationNode.model_rebuild()
