"""
Search configuration and dispatch.

A SearchConfig names one of the five algorithms together with its
parameters, so tools and benchmarks can select an algorithm from plain
data (command line arguments, dictionaries) and run it through
run_search().
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping

from gametree.search.alphabeta import alphabeta_search
from gametree.search.complete import complete_search
from gametree.search.discontinuable import discontinuable_search
from gametree.search.iterative import iterative_deepening_search
from gametree.search.minimax import minimax_search
from gametree.state.base import GameState

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Available search algorithms."""
    MINIMAX = "minimax"
    ALPHABETA = "alphabeta"
    COMPLETE = "complete"
    IDDFS = "iddfs"
    DISCONTINUABLE = "discontinuable"


@dataclass
class SearchConfig:
    """Configuration for a single search.

    Depth and budget values that make the chosen algorithm return the pass
    decision are accepted (the algorithms define that behaviour); they
    only produce a warning.
    """

    algorithm: Algorithm = Algorithm.ALPHABETA
    """Which search algorithm to run"""

    max_depth: int = 4
    """Search depth (maximum depth for the discontinuable search)"""

    minimum_depth: int = 2
    """Depth always completed by the discontinuable search"""

    discontinue_node_count: int = 100_000
    """Leaf evaluation budget of the discontinuable search"""

    reassign_min_on_beta: bool = True
    """Minimizing-side tie-break used by the complete search"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.algorithm, Algorithm):
            try:
                self.algorithm = Algorithm(str(self.algorithm).lower())
            except ValueError:
                choices = ", ".join(a.value for a in Algorithm)
                raise ValueError(
                    f"Unknown algorithm {self.algorithm!r}, expected one of: {choices}"
                ) from None

        for name in ("max_depth", "minimum_depth", "discontinue_node_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")

        if self.algorithm is Algorithm.DISCONTINUABLE:
            if (
                self.max_depth <= self.minimum_depth
                or self.minimum_depth <= 1
                or self.discontinue_node_count <= 0
            ):
                logger.warning(
                    f"Discontinuable search parameters (minimum_depth={self.minimum_depth}, "
                    f"max_depth={self.max_depth}, "
                    f"discontinue_node_count={self.discontinue_node_count}) "
                    f"will always return the pass decision"
                )
        elif self.algorithm is not Algorithm.COMPLETE and self.max_depth <= 0:
            logger.warning(
                f"max_depth={self.max_depth} will always return the pass decision"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchConfig":
        """
        Build a config from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of field names to values

        Returns:
            SearchConfig
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown search config keys: {sorted(unknown)}")
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm.value,
            "max_depth": self.max_depth,
            "minimum_depth": self.minimum_depth,
            "discontinue_node_count": self.discontinue_node_count,
            "reassign_min_on_beta": self.reassign_min_on_beta,
        }

    def __repr__(self) -> str:
        """String representation of config."""
        if self.algorithm is Algorithm.DISCONTINUABLE:
            return (
                f"SearchConfig(discontinuable, depth {self.minimum_depth}..{self.max_depth}, "
                f"budget={self.discontinue_node_count})"
            )
        if self.algorithm is Algorithm.COMPLETE:
            return f"SearchConfig(complete, reassign_min_on_beta={self.reassign_min_on_beta})"
        return f"SearchConfig({self.algorithm.value}, depth={self.max_depth})"


def run_search(root_state: GameState, config: SearchConfig, pass_decision: Any) -> Any:
    """
    Run the algorithm selected by a config.

    Args:
        root_state: Position to search (the maximizing side moves)
        config: Algorithm and parameters
        pass_decision: Returned when no decision can be chosen

    Returns:
        The chosen decision, or pass_decision
    """
    algorithm = config.algorithm

    if algorithm is Algorithm.MINIMAX:
        return minimax_search(root_state, config.max_depth, pass_decision)
    if algorithm is Algorithm.ALPHABETA:
        return alphabeta_search(root_state, config.max_depth, pass_decision)
    if algorithm is Algorithm.COMPLETE:
        return complete_search(root_state, pass_decision, config.reassign_min_on_beta)
    if algorithm is Algorithm.IDDFS:
        return iterative_deepening_search(root_state, config.max_depth, pass_decision)
    return discontinuable_search(
        root_state,
        config.minimum_depth,
        config.max_depth,
        config.discontinue_node_count,
        pass_decision,
    )
