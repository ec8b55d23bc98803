"""
Game Tree Node

This module implements the node type shared by all search algorithms. A
node wraps one game state, remembers the decision that produced it, and
owns an ordered list of child nodes that is filled in on demand.

Node Lifecycle:
    1. Created once per (parent, decision) pair, either lazily while a
       search walks produce_children(), or eagerly by expand_all()
    2. Evaluated on first read of `evaluation` (cached afterwards)
    3. Possibly truncated to its single best child (minimax, alpha-beta)
       or re-sorted and invalidated between passes (iterative deepening)
    4. Discarded together with the whole tree when the search returns

Evaluation Cache:
    `None` means "not evaluated". Any float, including infinities, is a
    real score. Assigning `None` invalidates the cache so the next read
    asks the state again.
"""

from typing import Any, Generic, Iterator, List, Optional, TypeVar

from gametree.state.base import GameState

S = TypeVar("S", bound=GameState)


class _RootDecision:
    """Placeholder decision held by root nodes."""

    def __repr__(self) -> str:
        return "ROOT_DECISION"


ROOT_DECISION = _RootDecision()


class GameTreeNode(Generic[S]):
    """
    Node of a lazily expanded game tree.

    Attributes:
        state: Game state at this node
        decision: Decision that led here from the parent (ROOT_DECISION at the root)
        parent: Parent node (None at the root)
        children: Child nodes in insertion (or sorted) order
    """

    def __init__(
        self,
        state: S,
        decision: Any = ROOT_DECISION,
        parent: Optional["GameTreeNode[S]"] = None,
    ):
        self.state = state
        self.decision = decision
        self.parent = parent
        self.children: List["GameTreeNode[S]"] = []
        self._evaluation: Optional[float] = None

    # ------------------------------------------------------------------
    # Evaluation cache
    # ------------------------------------------------------------------

    @property
    def evaluation(self) -> float:
        """Cached evaluation, computed from the state on first read."""
        if self._evaluation is None:
            self._evaluation = self.state.static_evaluation()
        return self._evaluation

    @evaluation.setter
    def evaluation(self, value: Optional[float]) -> None:
        self._evaluation = value

    @property
    def cached_evaluation(self) -> Optional[float]:
        """Evaluation if already known, without computing it."""
        return self._evaluation

    @property
    def is_evaluated(self) -> bool:
        return self._evaluation is not None

    def invalidate(self) -> None:
        """Forget the cached evaluation."""
        self._evaluation = None

    def mark_evaluated(self) -> float:
        """Force a fresh static evaluation into the cache."""
        self._evaluation = self.state.static_evaluation()
        return self._evaluation

    @property
    def first_child_evaluation_or_self(self) -> Optional[float]:
        """
        Cached evaluation of the first child, or of this node if childless.

        Used after sorting to carry the best child's score upward. Never
        triggers an evaluation.
        """
        if self.children:
            return self.children[0].cached_evaluation
        return self._evaluation

    # ------------------------------------------------------------------
    # Expansion
    # ------------------------------------------------------------------

    def expand_one(self, decision: Any) -> "GameTreeNode[S]":
        """
        Create and append the child reached by a single decision.

        Args:
            decision: Legal decision from this node's state

        Returns:
            The newly appended child
        """
        child = GameTreeNode(self.state.apply(decision), decision, self)
        self.children.append(child)
        return child

    def produce_children(self) -> Iterator["GameTreeNode[S]"]:
        """
        Lazily create children, one per legal decision.

        Each child is appended to `children` before it is yielded, so a
        caller that stops iterating early leaves a partial child list.
        """
        for decision in self.state.legal_decisions():
            yield self.expand_one(decision)

    def expand_all(self) -> None:
        """Create children for every legal decision at once."""
        for decision in self.state.legal_decisions():
            self.expand_one(decision)

    def keep_only(self, child: Optional["GameTreeNode[S]"]) -> None:
        """
        Truncate the child list to the given child (or to nothing).

        This is how minimax and alpha-beta remember the chosen move.
        """
        self.children.clear()
        if child is not None:
            self.children.append(child)

    # ------------------------------------------------------------------
    # Move ordering
    # ------------------------------------------------------------------

    def sort_ascending(self, use_live_evaluation: bool) -> None:
        """
        Reorder children from lowest to highest evaluation.

        Args:
            use_live_evaluation: If True, evaluate every child as needed and
                order strictly by score. If False, evaluated children come
                first (ordered by cached score) and unevaluated children keep
                their relative order at the end.
        """
        if len(self.children) <= 1:
            return

        if use_live_evaluation:
            self.children.sort(key=lambda child: child.evaluation)
        else:
            self.children.sort(key=_cached_key)

    def sort_descending(self, use_live_evaluation: bool) -> None:
        """
        Reorder children from highest to lowest evaluation.

        Args:
            use_live_evaluation: See sort_ascending()
        """
        if len(self.children) <= 1:
            return

        if use_live_evaluation:
            self.children.sort(key=lambda child: child.evaluation, reverse=True)
        else:
            self.children.sort(key=lambda child: _cached_key(child, descending=True))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_end_node(self) -> bool:
        """
        True for a childless node whose state is terminal.

        A node whose children were expanded is never an end node, even if
        its state would report terminal.
        """
        return not self.children and self.state.is_terminal()

    @property
    def best_decision(self) -> Any:
        """Decision of the first child, or None if there are no children."""
        if self.children:
            return self.children[0].decision
        return None

    def principal_variation(self, max_length: Optional[int] = None) -> List[Any]:
        """
        Follow first children down the tree.

        After minimax or alpha-beta every visited node keeps only its chosen
        child, so this chain is the line of play the search expects.

        Args:
            max_length: Stop after this many decisions (None = no limit)

        Returns:
            List of decisions starting from this node's first child
        """
        line = []
        node = self
        while node.children and (max_length is None or len(line) < max_length):
            node = node.children[0]
            line.append(node.decision)
        return line

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["GameTreeNode[S]"]:
        return iter(self.children)

    def __repr__(self) -> str:
        if self._evaluation is None:
            return "UnEvaluated"
        return f"EV = {self._evaluation}"


def _cached_key(node: GameTreeNode, descending: bool = False):
    """Sort key placing evaluated nodes first, by cached score."""
    if node.cached_evaluation is None:
        return (1, 0.0)
    score = node.cached_evaluation
    return (0, -score if descending else score)
