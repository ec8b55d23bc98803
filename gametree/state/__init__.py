"""
State Module

This module defines the contract between a concrete game and the search
algorithms. The key design principle is that games are SWAPPABLE - every
algorithm works with any state that implements the base interface.

Key Components:
    - GameState (ABC): Abstract base class defining the state interface

Data Flow:
    GameState → legal_decisions() → apply(decision) → GameState
              → static_evaluation() → float (maximizing side's perspective)
"""

from gametree.state.base import GameState

__all__ = ['GameState']
