"""
Minimax Search with Alpha-Beta Pruning

This module implements fixed-depth minimax with alpha-beta pruning.
Alpha-beta visits a subset of the nodes minimax visits and selects the
same decision.

Key Concepts:
    - Alpha: Best score the maximizing side is already guaranteed
    - Beta: Best score the minimizing side is already guaranteed
    - Cutoff: Once alpha >= beta the remaining siblings cannot matter;
      the node returns the bound that caused the cutoff
    - Children are produced lazily, so pruned siblings are never created

Algorithm Complexity:
    - Worst case O(b^d), best case O(b^(d/2)) with perfect move ordering

References:
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from typing import Any, Optional

from gametree.state.base import GameState
from gametree.tree.node import GameTreeNode

logger = logging.getLogger(__name__)


def _alphabeta(
    node: GameTreeNode,
    depth: int,
    max_depth: int,
    maximizing_player: bool,
    alpha: float,
    beta: float,
) -> float:
    """
    Alpha-beta recursion over a lazily expanded node.

    Args:
        node: Node to search
        depth: Distance from the root
        max_depth: Depth at which static evaluation is used
        maximizing_player: True if the side to move wants the highest score
        alpha: Lower bound for the maximizing side
        beta: Upper bound for the minimizing side

    Returns:
        float: Value of the node, clamped to the (alpha, beta) window
    """
    if depth >= max_depth or node.is_end_node:
        return node.evaluation

    if maximizing_player:
        best_node = None
        best_eval = -float("inf")

        for child in node.produce_children():
            eval_score = _alphabeta(child, depth + 1, max_depth, False, alpha, beta)

            if best_eval < eval_score:
                best_node = child
                best_eval = eval_score

            if alpha < eval_score:
                alpha = eval_score

            # Beta cutoff: minimizing side won't allow this branch
            if alpha >= beta:
                node.keep_only(best_node)
                return beta

        node.keep_only(best_node)
        return alpha

    else:
        best_node = None
        best_eval = float("inf")

        for child in node.produce_children():
            eval_score = _alphabeta(child, depth + 1, max_depth, True, alpha, beta)

            if best_eval > eval_score:
                best_node = child
                best_eval = eval_score

            if beta > eval_score:
                beta = eval_score

            # Alpha cutoff: maximizing side won't allow this branch
            if alpha >= beta:
                node.keep_only(best_node)
                return alpha

        node.keep_only(best_node)
        return beta


def alphabeta_tree(root_state: GameState, max_depth: int) -> Optional[GameTreeNode]:
    """
    Run alpha-beta search and return the searched tree.

    Args:
        root_state: Position to search (the maximizing side moves)
        max_depth: Search depth in plies (must be positive)

    Returns:
        The root node with its principal variation attached, or None if
        max_depth is not positive or the root is terminal
    """
    if max_depth <= 0 or root_state.is_terminal():
        return None

    root = GameTreeNode(root_state)
    score = _alphabeta(root, 0, max_depth, True, -float("inf"), float("inf"))
    logger.debug(f"Alpha-beta depth {max_depth}: score={score}, decision={root.best_decision}")
    return root


def alphabeta_search(root_state: GameState, max_depth: int, pass_decision: Any) -> Any:
    """
    Select a decision with alpha-beta pruned minimax.

    Args:
        root_state: Position to search
        max_depth: Search depth in plies
        pass_decision: Returned when no decision can be chosen

    Returns:
        The chosen decision, or pass_decision
    """
    root = alphabeta_tree(root_state, max_depth)
    if root is None or not root.children:
        return pass_decision
    return root.children[0].decision
