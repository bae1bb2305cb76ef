"""
Stepper — пошаговая редукция дерева выражения.
"""

from exprstep.stepper.state_machine import (
    StepResult,
    Stepper,
    StepperConfig,
    StepperState,
    fold_leaf_operations,
    initial_state,
    step,
    substitute_identifiers,
)

__all__ = [
    "StepperState",
    "StepperConfig",
    "StepResult",
    "Stepper",
    "initial_state",
    "step",
    "substitute_identifiers",
    "fold_leaf_operations",
]
