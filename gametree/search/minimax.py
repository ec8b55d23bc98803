"""
Minimax Search

This module implements plain fixed-depth minimax. Every reachable node
within the depth limit is visited; nothing is pruned.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Tie-breaking: The FIRST child with the strictly best score wins
    - Principal Variation (PV): Each visited node keeps only its best child,
      so the tree that remains after the search is the expected line of play

Algorithm Complexity:
    - O(b^d) where b=branching factor, d=depth

References:
    - Minimax: https://www.chessprogramming.org/Minimax
"""

import logging
from typing import Any, Optional

from gametree.state.base import GameState
from gametree.tree.node import GameTreeNode

logger = logging.getLogger(__name__)


def _minimax(
    node: GameTreeNode,
    depth: int,
    max_depth: int,
    maximizing_player: bool,
) -> float:
    """
    Minimax recursion over a lazily expanded node.

    Args:
        node: Node to search
        depth: Distance from the root
        max_depth: Depth at which static evaluation is used
        maximizing_player: True if the side to move wants the highest score

    Returns:
        float: Minimax value of the node
    """
    if depth >= max_depth or node.is_end_node:
        return node.evaluation

    if maximizing_player:
        best_node = None
        best_eval = -float("inf")

        for child in node.produce_children():
            eval_score = _minimax(child, depth + 1, max_depth, False)

            if best_eval < eval_score:
                best_node = child
                best_eval = eval_score

        node.keep_only(best_node)
        return best_eval

    else:
        best_node = None
        best_eval = float("inf")

        for child in node.produce_children():
            eval_score = _minimax(child, depth + 1, max_depth, True)

            if best_eval > eval_score:
                best_node = child
                best_eval = eval_score

        node.keep_only(best_node)
        return best_eval


def minimax_tree(root_state: GameState, max_depth: int) -> Optional[GameTreeNode]:
    """
    Run minimax and return the searched tree.

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
    score = _minimax(root, 0, max_depth, True)
    logger.debug(f"Minimax depth {max_depth}: score={score}, decision={root.best_decision}")
    return root


def minimax_search(root_state: GameState, max_depth: int, pass_decision: Any) -> Any:
    """
    Select a decision with full-width minimax.

    Args:
        root_state: Position to search
        max_depth: Search depth in plies
        pass_decision: Returned when no decision can be chosen

    Returns:
        The chosen decision, or pass_decision
    """
    root = minimax_tree(root_state, max_depth)
    if root is None or not root.children:
        return pass_decision
    return root.children[0].decision
