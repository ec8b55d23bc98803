"""
Search Module

This module implements the game tree search algorithms. All of them take
a root GameState, treat its side to move as the maximizing side, and
return a single decision (or the caller's pass decision when no decision
can be chosen).

Key Components:
    - minimax_search: Full-width fixed-depth minimax
    - alphabeta_search: Fixed-depth minimax with alpha-beta pruning
    - complete_search: Alpha-beta searched to the end of the game
    - iterative_deepening_search: Alpha-beta passes of increasing depth
      reusing one tree and its move ordering
    - discontinuable_search: Iterative deepening bounded by a NodeBudget
    - SearchConfig / run_search: Select an algorithm from plain data

Each algorithm also has a *_tree() variant returning the searched root
node, e.g. to read the principal variation.
"""

from gametree.search.alphabeta import alphabeta_search, alphabeta_tree
from gametree.search.complete import complete_search, complete_tree
from gametree.search.config import Algorithm, SearchConfig, run_search
from gametree.search.discontinuable import (
    NodeBudget,
    discontinuable_search,
    discontinuable_tree,
)
from gametree.search.iterative import iterative_deepening_search, iterative_deepening_tree
from gametree.search.minimax import minimax_search, minimax_tree

__all__ = [
    'minimax_search',
    'minimax_tree',
    'alphabeta_search',
    'alphabeta_tree',
    'complete_search',
    'complete_tree',
    'iterative_deepening_search',
    'iterative_deepening_tree',
    'discontinuable_search',
    'discontinuable_tree',
    'NodeBudget',
    'Algorithm',
    'SearchConfig',
    'run_search',
]
