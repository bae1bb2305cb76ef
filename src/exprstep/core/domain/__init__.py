"""
Domain models and value objects.

Operator, predefined constants and the expression tree nodes.
"""

from exprstep.core.domain.constants import (
    RESERVED_NAMES,
    Constant,
    is_reserved,
    resolve_constants,
)
from exprstep.core.domain.nodes import (
    ExpressionNode,
    IdentifierNode,
    LiteralNode,
    OperationNode,
    is_valid_identifier,
)
from exprstep.core.domain.operator import ArityClass, Operator

__all__ = [
    # Operator
    "Operator",
    "ArityClass",
    # Constants
    "Constant",
    "RESERVED_NAMES",
    "is_reserved",
    "resolve_constants",
    # Nodes
    "ExpressionNode",
    "LiteralNode",
    "IdentifierNode",
    "OperationNode",
    "is_valid_identifier",
]
