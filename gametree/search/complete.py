"""
Complete Search

Alpha-beta pruning without a depth limit: the recursion only stops at
positions where the game has ended. Use it for games (or endgames) small
enough to solve exactly from the given position.

Tie-breaking:
    The maximizing side keeps the first strictly best child. The
    minimizing side additionally re-selects the current child whenever it
    tightens beta. Since beta never exceeds the running minimum, that
    re-selection only fires when the child is already the new strict
    minimum, so both rules pick the same child for finite scores. The
    behaviour is controlled by `reassign_min_on_beta` so callers can opt
    into the strict rule explicitly.
"""

import logging
from typing import Any, Optional

from gametree.state.base import GameState
from gametree.tree.node import GameTreeNode

logger = logging.getLogger(__name__)


def _complete(
    node: GameTreeNode,
    maximizing_player: bool,
    alpha: float,
    beta: float,
    reassign_min_on_beta: bool,
) -> float:
    if node.is_end_node:
        return node.evaluation

    if maximizing_player:
        best_node = None
        best_eval = -float("inf")

        for child in node.produce_children():
            eval_score = _complete(child, False, alpha, beta, reassign_min_on_beta)

            if best_eval < eval_score:
                best_node = child
                best_eval = eval_score

            if alpha < eval_score:
                alpha = eval_score

            if alpha >= beta:
                node.keep_only(best_node)
                return beta

        node.keep_only(best_node)
        return alpha

    else:
        best_node = None
        best_eval = float("inf")

        for child in node.produce_children():
            eval_score = _complete(child, True, alpha, beta, reassign_min_on_beta)

            if best_eval > eval_score:
                best_node = child
                best_eval = eval_score

            if beta > eval_score:
                beta = eval_score
                if reassign_min_on_beta:
                    best_node = child

            if alpha >= beta:
                node.keep_only(best_node)
                return alpha

        node.keep_only(best_node)
        return beta


def complete_tree(
    root_state: GameState,
    reassign_min_on_beta: bool = True,
) -> Optional[GameTreeNode]:
    """
    Solve the game from root_state and return the searched tree.

    Args:
        root_state: Position to solve (the maximizing side moves)
        reassign_min_on_beta: Re-select the minimizing side's best child
            whenever beta tightens

    Returns:
        The root node, or None if the root is terminal
    """
    if root_state.is_terminal():
        return None

    root = GameTreeNode(root_state)
    score = _complete(root, True, -float("inf"), float("inf"), reassign_min_on_beta)
    logger.debug(f"Complete search: score={score}, decision={root.best_decision}")
    return root


def complete_search(
    root_state: GameState,
    pass_decision: Any,
    reassign_min_on_beta: bool = True,
) -> Any:
    """
    Select a decision by searching to the end of the game.

    Args:
        root_state: Position to solve
        pass_decision: Returned when no decision can be chosen
        reassign_min_on_beta: See complete_tree()

    Returns:
        The chosen decision, or pass_decision
    """
    root = complete_tree(root_state, reassign_min_on_beta)
    if root is None or not root.children:
        return pass_decision
    return root.children[0].decision
