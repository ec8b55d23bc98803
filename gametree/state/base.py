"""
Abstract Game State Interface

This module defines the abstract base class every game must implement to be
searched. The search algorithms never look inside a state: they only ask
whether the game is over, how good the position is, which decisions are
legal, and what position a decision leads to.

Key Principles:
    1. States are immutable from the search's point of view
    2. apply() returns a NEW state, the receiver is left untouched
    3. static_evaluation() scores from the maximizing side's perspective
    4. Higher = better for the side that moves at the search root

Convention:
    - legal_decisions() may be a generator; it is called again every time
      the search needs the decisions, so it must be restartable per call
    - legal_decisions() is empty exactly when the position has no moves
    - static_evaluation() must return a finite float wherever it is called
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable


class GameState(ABC):
    """
    Abstract base class for game positions.

    All games searched by gametree must inherit from this class and
    implement the four abstract methods below. Decisions may be any
    Python object; the search only passes them back to apply().

    Methods:
        is_terminal(): True when the game has concluded
        static_evaluation(): Score of the position
        legal_decisions(): Decisions available from this position
        apply(decision): Position reached after playing a decision
    """

    @abstractmethod
    def is_terminal(self) -> bool:
        """
        Check whether the game has concluded in this position.

        Returns:
            bool: True if no further play is possible
        """
        pass

    @abstractmethod
    def static_evaluation(self) -> float:
        """
        Evaluate the position without searching.

        Only called on terminal positions or positions cut off by a depth
        limit.

        Returns:
            float: Score from the maximizing side's perspective
        """
        pass

    @abstractmethod
    def legal_decisions(self) -> Iterable[Any]:
        """
        Enumerate the decisions available from this position.

        Returns:
            Iterable of decisions (finite, possibly lazy)
        """
        pass

    @abstractmethod
    def apply(self, decision: Any) -> "GameState":
        """
        Produce the position reached by playing a decision.

        Args:
            decision: One of the values yielded by legal_decisions()

        Returns:
            GameState: The resulting position
        """
        pass

    def has_legal_decisions(self) -> bool:
        """Return True if at least one decision is available."""
        for _ in self.legal_decisions():
            return True
        return False

    def __repr__(self) -> str:
        """String representation of state."""
        return f"{self.__class__.__name__}()"
