"""
Expression tree — построение, реконструкция и вычисление.
"""

from exprstep.tree.builder import build_iteratively, build_recursively, reconstruct
from exprstep.tree.evaluator import Bindings, apply_operator, evaluate, lookup_identifier
from exprstep.tree.tokens import TokenCursor, parse_literal, parse_number, parse_operand, tokenize

__all__ = [
    # Tokens
    "tokenize",
    "TokenCursor",
    "parse_literal",
    "parse_number",
    "parse_operand",
    # Builder
    "build_recursively",
    "build_iteratively",
    "reconstruct",
    # Evaluator
    "Bindings",
    "evaluate",
    "apply_operator",
    "lookup_identifier",
]
