"""
Utilities Module

This module provides instrumentation and benchmarking helpers for the
search algorithms.

Key Components:
    - InstrumentedState / SearchStats: Count state contract calls
    - Benchmark suites: Tic-tac-toe and chess positions with known answers
    - run_suite: Run one SearchConfig over a list of positions
"""

from gametree.utils.instrument import InstrumentedState, SearchStats
from gametree.utils.testing import (
    CHESS_POSITIONS,
    SUITES,
    TICTACTOE_POSITIONS,
    BenchmarkPosition,
    BenchmarkResult,
    evaluate_position,
    run_suite,
)

__all__ = [
    'InstrumentedState',
    'SearchStats',
    'BenchmarkPosition',
    'BenchmarkResult',
    'CHESS_POSITIONS',
    'TICTACTOE_POSITIONS',
    'SUITES',
    'evaluate_position',
    'run_suite',
]
