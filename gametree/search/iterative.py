"""
Iterative Deepening Search

This module runs depth-limited alpha-beta passes of increasing depth
(1, 2, ..., max_depth) over ONE persistent tree.

Key Concepts:
    - Tree reuse: legal decisions are enumerated once per node; later passes
      only invalidate the children's cached evaluations
    - Move ordering: after each pass every visited node sorts its children
      (best first for the side to move), so the next, deeper pass searches
      the previously best decisions first and prunes more
    - Nothing is truncated: children skipped by a cutoff stay in the tree,
      unevaluated, and sort behind the evaluated ones

References:
    - Iterative Deepening: https://www.chessprogramming.org/Iterative_Deepening
    - Move Ordering: https://www.chessprogramming.org/Move_Ordering
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from gametree.state.base import GameState
from gametree.tree.node import GameTreeNode

if TYPE_CHECKING:
    from gametree.search.discontinuable import NodeBudget

logger = logging.getLogger(__name__)


def iddfs_pass(
    node: GameTreeNode,
    depth: int,
    limit_depth: int,
    maximizing_player: bool,
    alpha: float,
    beta: float,
    budget: Optional["NodeBudget"] = None,
    minimum_depth: int = 0,
) -> float:
    """
    One depth-limited alpha-beta pass over a persistent tree.

    Args:
        node: Node to search
        depth: Distance from the root
        limit_depth: Depth at which static evaluation is used in this pass
        maximizing_player: True if the side to move wants the highest score
        alpha: Lower bound for the maximizing side
        beta: Upper bound for the minimizing side
        budget: Optional node budget, consumed once per leaf evaluation
        minimum_depth: With a budget, sibling loops only stop early on
            passes deeper than this

    Returns:
        float: Value of the node, clamped to the (alpha, beta) window
    """
    if depth >= limit_depth or node.is_end_node:
        if budget is not None:
            budget.consume()
        return node.evaluation
    elif not node.children:
        node.expand_all()
    else:
        for child in node.children:
            child.invalidate()

    stop_early = budget is not None and limit_depth > minimum_depth

    if maximizing_player:
        for child in node.children:
            eval_score = iddfs_pass(
                child, depth + 1, limit_depth, False, alpha, beta, budget, minimum_depth
            )

            if alpha < eval_score:
                alpha = eval_score

            if stop_early and budget.exhausted:
                break

            if alpha >= beta:
                node.sort_descending(use_live_evaluation=False)
                node.evaluation = node.first_child_evaluation_or_self
                return beta

        node.sort_descending(use_live_evaluation=False)
        node.evaluation = node.first_child_evaluation_or_self
        return alpha

    else:
        for child in node.children:
            eval_score = iddfs_pass(
                child, depth + 1, limit_depth, True, alpha, beta, budget, minimum_depth
            )

            if beta > eval_score:
                beta = eval_score

            if stop_early and budget.exhausted:
                break

            if alpha >= beta:
                node.sort_ascending(use_live_evaluation=False)
                node.evaluation = node.first_child_evaluation_or_self
                return alpha

        node.sort_ascending(use_live_evaluation=False)
        node.evaluation = node.first_child_evaluation_or_self
        return beta


def iterative_deepening_tree(root_state: GameState, max_depth: int) -> Optional[GameTreeNode]:
    """
    Run iterative deepening and return the persistent tree.

    Args:
        root_state: Position to search (the maximizing side moves)
        max_depth: Depth of the final pass (must be positive)

    Returns:
        The root node with children ordered best first, or None if
        max_depth is not positive or the root is terminal
    """
    if max_depth <= 0 or root_state.is_terminal():
        return None

    root = GameTreeNode(root_state)

    for limit_depth in range(1, max_depth + 1):
        score = iddfs_pass(root, 0, limit_depth, True, -float("inf"), float("inf"))
        logger.debug(f"Iterative deepening pass {limit_depth}: score={score}, decision={root.best_decision}")

    return root


def iterative_deepening_search(root_state: GameState, max_depth: int, pass_decision: Any) -> Any:
    """
    Select a decision with iterative deepening alpha-beta.

    Args:
        root_state: Position to search
        max_depth: Depth of the final pass
        pass_decision: Returned when no decision can be chosen

    Returns:
        The chosen decision, or pass_decision
    """
    root = iterative_deepening_tree(root_state, max_depth)
    if root is None or not root.children:
        return pass_decision
    return root.children[0].decision
