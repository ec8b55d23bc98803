"""
Search instrumentation.

InstrumentedState wraps any GameState and counts how often the search
calls each part of the state contract. All states derived from one root
share the same SearchStats, so after a search the stats describe the
whole tree walk.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from gametree.state.base import GameState


@dataclass
class SearchStats:
    """Call counts collected during one search."""

    evaluations: int = 0
    applications: int = 0
    expansions: int = 0
    terminal_checks: int = 0

    @property
    def nodes(self) -> int:
        """Nodes created below the root (one per apply() call)."""
        return self.applications

    def reset(self) -> None:
        self.evaluations = 0
        self.applications = 0
        self.expansions = 0
        self.terminal_checks = 0


class InstrumentedState(GameState):
    """
    GameState wrapper that records calls in a shared SearchStats.

    Attributes:
        inner: Wrapped state
        stats: Counters shared with every state reached from this one
    """

    def __init__(self, inner: GameState, stats: Optional[SearchStats] = None):
        self.inner = inner
        self.stats = stats if stats is not None else SearchStats()

    def is_terminal(self) -> bool:
        self.stats.terminal_checks += 1
        return self.inner.is_terminal()

    def static_evaluation(self) -> float:
        self.stats.evaluations += 1
        return self.inner.static_evaluation()

    def legal_decisions(self) -> Iterator[Any]:
        self.stats.expansions += 1
        return iter(self.inner.legal_decisions())

    def apply(self, decision: Any) -> "InstrumentedState":
        self.stats.applications += 1
        return InstrumentedState(self.inner.apply(decision), self.stats)

    def __repr__(self) -> str:
        return f"InstrumentedState({self.inner!r})"
