"""
Discontinuable Iterative Deepening Search

Iterative deepening bounded by a node budget. Every leaf evaluation
consumes one unit of a budget shared by the whole search. Once the budget
is spent, passes deeper than `minimum_depth` stop visiting further
siblings and no deeper pass is started, so the search degrades to
whatever it has explored instead of running unbounded.

Pass Schedule:
    1. A depth-1 pass always runs, so at least one legal decision is
       evaluated even with a budget of 1
    2. Passes 2..maximum_depth follow; after each pass at a depth of at
       least minimum_depth the budget is checked and deepening stops if
       it is exhausted

Budget:
    The budget is a NodeBudget object threaded through the recursion. A
    caller may supply one to find out how much of it was used.
"""

import logging
from typing import Any, Optional

from gametree.search.iterative import iddfs_pass
from gametree.state.base import GameState
from gametree.tree.node import GameTreeNode

logger = logging.getLogger(__name__)


class NodeBudget:
    """
    Mutable count of leaf evaluations still allowed.

    Attributes:
        initial: Budget the search started with
        remaining: Evaluations left (may go negative)
    """

    def __init__(self, count: int):
        self.initial = count
        self.remaining = count

    def consume(self, amount: int = 1) -> None:
        self.remaining -= amount

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    @property
    def used(self) -> int:
        return self.initial - self.remaining

    def __repr__(self) -> str:
        return f"NodeBudget(remaining={self.remaining}, initial={self.initial})"


def discontinuable_tree(
    root_state: GameState,
    minimum_depth: int,
    maximum_depth: int,
    discontinue_node_count: int,
    budget: Optional[NodeBudget] = None,
) -> Optional[GameTreeNode]:
    """
    Run budget-bounded iterative deepening and return the persistent tree.

    Args:
        root_state: Position to search (the maximizing side moves)
        minimum_depth: Depth that is always completed (must be > 1)
        maximum_depth: Depth of the deepest possible pass (must exceed
            minimum_depth)
        discontinue_node_count: Leaf evaluations allowed (must be positive)
        budget: Optional budget object to use instead of a fresh one; it
            is reset to discontinue_node_count

    Returns:
        The root node with children ordered best first, or None if the
        parameters are invalid or the root is terminal
    """
    if (
        maximum_depth <= minimum_depth
        or minimum_depth <= 1
        or discontinue_node_count <= 0
        or root_state.is_terminal()
    ):
        return None

    if budget is None:
        budget = NodeBudget(discontinue_node_count)
    else:
        budget.initial = budget.remaining = discontinue_node_count

    root = GameTreeNode(root_state)

    iddfs_pass(root, 0, 1, True, -float("inf"), float("inf"), budget, minimum_depth)

    for limit_depth in range(2, maximum_depth + 1):
        score = iddfs_pass(
            root, 0, limit_depth, True, -float("inf"), float("inf"), budget, minimum_depth
        )
        logger.debug(
            f"Discontinuable pass {limit_depth}: score={score}, "
            f"decision={root.best_decision}, remaining={budget.remaining}"
        )

        if limit_depth >= minimum_depth and budget.exhausted:
            if limit_depth < maximum_depth:
                logger.info(
                    f"Node budget of {budget.initial} exhausted, "
                    f"stopping at depth {limit_depth} of {maximum_depth}"
                )
            break

    return root


def discontinuable_search(
    root_state: GameState,
    minimum_depth: int,
    maximum_depth: int,
    discontinue_node_count: int,
    pass_decision: Any,
    budget: Optional[NodeBudget] = None,
) -> Any:
    """
    Select a decision with budget-bounded iterative deepening.

    Args:
        root_state: Position to search
        minimum_depth: Depth that is always completed
        maximum_depth: Depth of the deepest possible pass
        discontinue_node_count: Leaf evaluations allowed
        pass_decision: Returned when no decision can be chosen
        budget: Optional budget object (see discontinuable_tree())

    Returns:
        The chosen decision, or pass_decision
    """
    root = discontinuable_tree(
        root_state, minimum_depth, maximum_depth, discontinue_node_count, budget
    )
    if root is None or not root.children:
        return pass_decision
    return root.children[0].decision
