"""
Contract Validation Module

Валидация JSON контрактов внешнего интерфейса exprstep.
"""

from .validators import (
    ContractValidator,
    EvaluationRequestValidator,
    ExpressionTreeValidator,
    SchemaLoader,
    load_evaluation_request,
    load_expression_tree,
    validate_evaluation_request,
    validate_expression_tree,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EvaluationRequestValidator",
    "ExpressionTreeValidator",
    # Functions
    "validate_evaluation_request",
    "validate_expression_tree",
    "load_evaluation_request",
    "load_expression_tree",
]
