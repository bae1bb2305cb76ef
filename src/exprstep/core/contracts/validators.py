"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы (поставляются в пакете, contracts/schema/):
- evaluation_request.json — поток токенов и значения идентификаторов
- expression_tree.json — сериализованное дерево (model_dump(mode="json"))
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from exprstep.core.domain.constants import is_reserved
from exprstep.core.domain.nodes import (
    ExpressionNode,
    IdentifierNode,
    LiteralNode,
    OperationNode,
    is_valid_identifier,
)
from exprstep.core.domain.operator import Operator
from exprstep.core.errors import InvalidIdentifierError, ReservedIdentifierError
from exprstep.core.math.numeric import NumericValue
from exprstep.tree.tokens import parse_number

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'expression_tree')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class EvaluationRequestValidator(ContractValidator):
    """Валидатор для evaluation_request контракта."""

    def __init__(self):
        super().__init__("evaluation_request")


class ExpressionTreeValidator(ContractValidator):
    """Валидатор для expression_tree контракта."""

    def __init__(self):
        super().__init__("expression_tree")


_EVALUATION_REQUEST_VALIDATOR = EvaluationRequestValidator()
_EXPRESSION_TREE_VALIDATOR = ExpressionTreeValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_evaluation_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _EVALUATION_REQUEST_VALIDATOR.validate(data)


def validate_expression_tree(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _EXPRESSION_TREE_VALIDATOR.validate(data)


def load_evaluation_request(data: Dict[str, Any]) -> tuple[list[str], Dict[str, NumericValue]]:
    """
    Валидация запроса и разбор значений идентификаторов.

    Args:
        data: {"tokens": [...], "bindings": {name: literal}}

    Returns:
        (tokens, bindings) — bindings с разобранными числовыми значениями

    Raises:
        ValidationError: Если данные не соответствуют схеме
        ReservedIdentifierError: Если имя в bindings — предопределённая константа
        InvalidIdentifierError: Если имя в bindings не является идентификатором

    Examples:
        >>> tokens, bindings = load_evaluation_request(
        ...     {"tokens": ["(", "+", "x", "1", ")"], "bindings": {"x": "1/2"}}
        ... )
        >>> bindings["x"]
        Rational(1/2)
    """
    validate_evaluation_request(data)

    bindings: Dict[str, NumericValue] = {}
    for name, literal in data["bindings"].items():
        if is_reserved(name):
            raise ReservedIdentifierError(name)
        if not is_valid_identifier(name):
            raise InvalidIdentifierError(name)
        bindings[name] = parse_number(literal)

    logger.debug("Loaded evaluation request: %d tokens, %d bindings", len(data["tokens"]), len(bindings))
    return list(data["tokens"]), bindings


def load_expression_tree(data: Dict[str, Any]) -> ExpressionNode:
    """
    Валидация и восстановление дерева из JSON-представления.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        InvalidIdentifierError, ArityMismatchError: Инварианты узлов
    """
    validate_expression_tree(data)
    return _node_from_json(data)


def _node_from_json(data: Dict[str, Any]) -> ExpressionNode:
    kind = data["kind"]
    if kind == "literal":
        return LiteralNode(value=parse_number(data["value"]))
    if kind == "identifier":
        return IdentifierNode(name=data["name"])
    return OperationNode(
        operator=Operator.from_symbol(data["operator"]),
        operands=tuple(_node_from_json(operand) for operand in data["operands"]),
    )
