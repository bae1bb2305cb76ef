"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks that are independent
of any caller: the numeric tower, the expression tree nodes, the error
hierarchy and the JSON contracts of the external interface.
"""
