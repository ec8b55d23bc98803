"""
Explicit Game Trees

A game whose whole tree is written out as nested Python data. This is the
easiest way to pin down exactly what a search should do, and random
trees make good property-test inputs.

Tree Format:
    - int / float: terminal position scored with that value
    - list: non-terminal position; each element is a child, reached by
      the decision equal to its index; heuristic score 0.0
    - (heuristic, list): non-terminal position with a heuristic score used
      when the search is cut off by depth

    An empty list (or a tuple with an empty list) is a non-terminal
    position without legal decisions.

Example:
    >>> state = ExplicitTreeState([3, 7, 2])
    >>> list(state.legal_decisions())
    [0, 1, 2]
    >>> state.apply(1).static_evaluation()
    7.0
"""

from numbers import Real
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from gametree.state.base import GameState

TreeData = Union[float, int, list, Tuple[float, list]]


def _split(node: TreeData) -> Tuple[Optional[float], Optional[list]]:
    """Return (heuristic, children) for inner nodes, (value, None) for leaves."""
    if isinstance(node, bool):
        raise ValueError(f"Invalid tree node: {node!r}")
    if isinstance(node, Real):
        return float(node), None
    if isinstance(node, list):
        return 0.0, node
    if (
        isinstance(node, tuple)
        and len(node) == 2
        and isinstance(node[0], Real)
        and isinstance(node[1], list)
    ):
        return float(node[0]), node[1]
    raise ValueError(f"Invalid tree node: {node!r}")


class ExplicitTreeState(GameState):
    """
    Position inside an explicitly written game tree.

    Attributes:
        tree: Sub-tree rooted at this position
        path: Decisions that led here from the first root
    """

    def __init__(self, tree: TreeData, path: Tuple[int, ...] = ()):
        self.tree = tree
        self.path = path
        self._score, self._children = _split(tree)

    def is_terminal(self) -> bool:
        return self._children is None

    def static_evaluation(self) -> float:
        return self._score

    def legal_decisions(self) -> Iterator[int]:
        if self._children is None:
            return iter(())
        return iter(range(len(self._children)))

    def apply(self, decision: int) -> "ExplicitTreeState":
        if self._children is None or not 0 <= decision < len(self._children):
            raise ValueError(f"Illegal decision {decision!r} at path {self.path}")
        return ExplicitTreeState(self._children[decision], self.path + (decision,))

    def __repr__(self) -> str:
        return f"ExplicitTreeState(path={self.path})"


def tree_depth(tree: TreeData) -> int:
    """Length of the longest line of play in a tree."""
    _, children = _split(tree)
    if not children:
        return 0
    return 1 + max(tree_depth(child) for child in children)


def random_tree(
    depth: int,
    branching: Union[int, Sequence[int]] = 3,
    seed: Optional[int] = None,
    terminal_probability: float = 0.0,
) -> TreeData:
    """
    Generate a random game tree with distinct terminal scores.

    Every non-terminal position has at least one child, and every terminal
    score is unique, so the best decision is never a tie.

    Args:
        depth: Maximum number of plies
        branching: Fixed branching factor, or (low, high) inclusive range
        seed: Seed for numpy's random generator
        terminal_probability: Chance that a position above the last ply is
            terminal anyway (the root never is)

    Returns:
        Nested tree data (see module docstring)
    """
    rng = np.random.default_rng(seed)

    if isinstance(branching, int):
        low = high = branching
    else:
        low, high = branching
    if low < 1 or high < low:
        raise ValueError(f"Invalid branching range: {branching!r}")

    leaf_values = iter(rng.permutation(high ** depth + 1) - (high ** depth) // 2)

    def build(level: int) -> TreeData:
        if level == depth or (level > 0 and rng.random() < terminal_probability):
            return float(next(leaf_values))

        width = int(rng.integers(low, high + 1))
        children: List[TreeData] = [build(level + 1) for _ in range(width)]
        heuristic = float(rng.uniform(-10.0, 10.0))
        return (heuristic, children)

    return build(0)
