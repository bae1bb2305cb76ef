"""Stepper State Machine — пошаговая редукция дерева выражения.

Состояния:
- NEEDS_SUBSTITUTION: в дереве есть идентификаторы
- REDUCING: дерево из литералов и операций, каждый шаг сворачивает листовые операции
- TERMINAL: корень — литерал, шаги идемпотентны

Переходы:
- NEEDS_SUBSTITUTION → REDUCING | TERMINAL: все идентификаторы заменяются
  литералами за один шаг, операции не сворачиваются
- REDUCING → REDUCING | TERMINAL: каждая листовая операция (без вложенных
  операций среди операндов) заменяется вычисленным литералом в том же шаге;
  родитель не сворачивается, пока его дочерние операции не стали литералами
- TERMINAL → TERMINAL: без изменений

step() — чистая функция перехода; Stepper хранит текущее состояние и
собственную копию дерева.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from exprstep.core.domain.nodes import ExpressionNode, IdentifierNode, LiteralNode, OperationNode
from exprstep.core.errors import StepLimitExceededError
from exprstep.tree.builder import reconstruct
from exprstep.tree.evaluator import Bindings, evaluate, lookup_identifier

logger = logging.getLogger(__name__)


class StepperState(str, Enum):
    """Состояние пошаговой редукции."""

    NEEDS_SUBSTITUTION = "NEEDS_SUBSTITUTION"
    REDUCING = "REDUCING"
    TERMINAL = "TERMINAL"


@dataclass(frozen=True)
class StepperConfig:
    """Конфигурация Stepper.

    max_steps — предел числа шагов для run()
    """
    max_steps: int = 10_000


@dataclass(frozen=True)
class StepResult:
    """Результат одного шага редукции."""

    new_state: StepperState
    tree: ExpressionNode
    tokens: tuple[str, ...]

    # Диагностика
    previous_state: StepperState
    transition_occurred: bool
    transition_reason: str
    folded_operations: int

    # Для отладки
    details: str


# =============================================================================
# АНАЛИЗ ДЕРЕВА
# =============================================================================


def contains_identifier(tree: ExpressionNode) -> bool:
    if isinstance(tree, IdentifierNode):
        return True
    if isinstance(tree, OperationNode):
        return any(contains_identifier(operand) for operand in tree.operands)
    return False


def initial_state(tree: ExpressionNode) -> StepperState:
    """Начальное состояние для дерева."""
    if isinstance(tree, LiteralNode):
        return StepperState.TERMINAL
    if contains_identifier(tree):
        return StepperState.NEEDS_SUBSTITUTION
    return StepperState.REDUCING


def _state_after(tree: ExpressionNode) -> StepperState:
    if isinstance(tree, LiteralNode):
        return StepperState.TERMINAL
    return StepperState.REDUCING


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def substitute_identifiers(tree: ExpressionNode, bindings: Bindings) -> ExpressionNode:
    """Новое дерево, в котором каждый идентификатор заменён литералом."""
    if isinstance(tree, IdentifierNode):
        return LiteralNode(value=lookup_identifier(tree.name, bindings))
    if isinstance(tree, OperationNode):
        return OperationNode(
            operator=tree.operator,
            operands=tuple(substitute_identifiers(operand, bindings) for operand in tree.operands),
        )
    return tree


def fold_leaf_operations(tree: ExpressionNode, bindings: Bindings) -> tuple[ExpressionNode, int]:
    """
    Новое дерево, в котором каждая листовая операция заменена своим значением.

    Returns:
        (новое дерево, число свёрнутых операций)
    """
    if not isinstance(tree, OperationNode):
        return tree, 0
    if tree.is_leaf_operation():
        return LiteralNode(value=evaluate(tree, bindings)), 1

    operands = []
    folded = 0
    for operand in tree.operands:
        new_operand, count = fold_leaf_operations(operand, bindings)
        operands.append(new_operand)
        folded += count
    return OperationNode(operator=tree.operator, operands=tuple(operands)), folded


# =============================================================================
# ПЕРЕХОД
# =============================================================================


def step(state: StepperState, tree: ExpressionNode, bindings: Bindings) -> StepResult:
    """Один шаг редукции.

    Args:
        state: текущее состояние
        tree: текущее дерево (не изменяется)
        bindings: значения идентификаторов

    Returns:
        StepResult с новым состоянием, новым деревом и его токенами

    Raises:
        ReservedIdentifierError, UndefinedIdentifierError: при подстановке
        DomainError: при свёртке операции
    """
    # 1. TERMINAL — без изменений
    if state == StepperState.TERMINAL:
        return StepResult(
            new_state=state,
            tree=tree,
            tokens=tuple(reconstruct(tree)),
            previous_state=state,
            transition_occurred=False,
            transition_reason="terminal",
            folded_operations=0,
            details=f"Value: {tree}",
        )

    # 2. Подстановка идентификаторов (ровно один раз)
    if state == StepperState.NEEDS_SUBSTITUTION:
        new_tree = substitute_identifiers(tree, bindings)
        new_state = _state_after(new_tree)
        return StepResult(
            new_state=new_state,
            tree=new_tree,
            tokens=tuple(reconstruct(new_tree)),
            previous_state=state,
            transition_occurred=True,
            transition_reason="identifiers_substituted",
            folded_operations=0,
            details=f"Substituted identifiers: {tree} → {new_tree}",
        )

    # 3. Свёртка листовых операций
    new_tree, folded = fold_leaf_operations(tree, bindings)
    new_state = _state_after(new_tree)
    return StepResult(
        new_state=new_state,
        tree=new_tree,
        tokens=tuple(reconstruct(new_tree)),
        previous_state=state,
        transition_occurred=new_state != state,
        transition_reason="reduced_to_value" if new_state == StepperState.TERMINAL else "leaf_operations_folded",
        folded_operations=folded,
        details=f"Folded {folded} operation(s): {tree} → {new_tree}",
    )


# =============================================================================
# STEPPER
# =============================================================================


class Stepper:
    """Пошаговый вычислитель с собственной копией дерева.

    Каждый вызов next_step() выполняет ровно одну редукцию и возвращает
    токены нового дерева. Дерево вызывающего кода не изменяется.
    """

    def __init__(
        self,
        root: ExpressionNode,
        bindings: Bindings,
        config: Optional[StepperConfig] = None
    ):
        """
        Args:
            root: корень дерева (копируется)
            bindings: значения идентификаторов (не изменяется)
            config: конфигурация Stepper
        """
        self.config = config or StepperConfig()
        self._root = root.clone()
        self._bindings = bindings
        self._state = initial_state(self._root)

    @property
    def root(self) -> ExpressionNode:
        return self._root

    @property
    def state(self) -> StepperState:
        return self._state

    @property
    def bindings(self) -> Bindings:
        return self._bindings

    def next_step(self) -> list[str]:
        """Одна редукция; возвращает токены нового дерева."""
        result = step(self._state, self._root, self._bindings)
        self._root = result.tree
        self._state = result.new_state
        if result.transition_occurred or result.folded_operations:
            logger.debug(
                "Stepper %s → %s (%s): %s",
                result.previous_state.value,
                result.new_state.value,
                result.transition_reason,
                result.details,
            )
        return list(result.tokens)

    def run(self) -> list[list[str]]:
        """Шаги до терминального состояния; токены каждого шага.

        Raises:
            StepLimitExceededError: если за config.max_steps шагов не достигнут TERMINAL
        """
        trace: list[list[str]] = []
        while self._state != StepperState.TERMINAL:
            if len(trace) >= self.config.max_steps:
                raise StepLimitExceededError(self.config.max_steps)
            trace.append(self.next_step())
        return trace
