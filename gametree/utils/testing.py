"""
Search Testing and Benchmarking

This module provides benchmark positions with known best decisions and
helpers to run any configured search algorithm over them.

Test Suites:
    1. Tic-tac-toe: immediate wins and forced blocks
       - Small enough for every algorithm, including complete search
    2. Chess: mate in one and winning captures
       - Shallow tactics that depth 1-2 searches must find

Evaluation Metrics:
    - Correct Decisions: Positions where the search found a best decision
    - Time per Position: Wall-clock search time
    - Evaluations / Nodes: Counted through InstrumentedState
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import chess
from tqdm import tqdm

from gametree.games.chess_board import ChessState
from gametree.games.tictactoe import TicTacToeState
from gametree.search.config import SearchConfig, run_search
from gametree.state.base import GameState
from gametree.utils.instrument import InstrumentedState, SearchStats

logger = logging.getLogger(__name__)

GAMES = ("tictactoe", "chess")


@dataclass
class BenchmarkPosition:
    """
    A position with known best decision(s).

    Attributes:
        id: Position identifier (e.g., "TTT.01")
        game: "tictactoe" or "chess"
        setup: Board string (tic-tac-toe) or FEN (chess)
        best_decisions: Acceptable decisions, as strings (square number or UCI)
        description: Human-readable description of the position
    """
    id: str
    game: str
    setup: str
    best_decisions: List[str]
    description: str = ""

    def build_state(self) -> GameState:
        """Create the root state, from the side to move's perspective."""
        if self.game == "tictactoe":
            return TicTacToeState.from_string(self.setup)
        if self.game == "chess":
            return ChessState.from_fen(self.setup)
        raise ValueError(f"Unknown game {self.game!r}, expected one of {GAMES}")


@dataclass
class BenchmarkResult:
    """
    Result of searching a single position.

    Attributes:
        position: The benchmark position
        found_decision: Decision the search returned, as a string ("" if none)
        correct: Whether it is one of the best decisions
        time_taken: Time spent searching (seconds)
        stats: State contract call counts
        error: Error message if the search raised
    """
    position: BenchmarkPosition
    found_decision: str
    correct: bool
    time_taken: float
    stats: SearchStats = field(default_factory=SearchStats)
    error: Optional[str] = None


def decision_to_str(decision: Any) -> str:
    """Render a decision the way best_decisions are written."""
    if decision is None:
        return ""
    if isinstance(decision, chess.Move):
        return decision.uci()
    return str(decision)


# ============================================================================
# Tic-Tac-Toe Positions
# ============================================================================

TICTACTOE_POSITIONS = [
    BenchmarkPosition(
        id="TTT.01",
        game="tictactoe",
        setup="XX./OO./...",
        best_decisions=["2"],
        description="X completes the top row",
    ),
    BenchmarkPosition(
        id="TTT.02",
        game="tictactoe",
        setup="OO./X.X/...",
        best_decisions=["2", "4"],
        description="X wins at once on the middle row, or forces a win on the right column",
    ),
    BenchmarkPosition(
        id="TTT.03",
        game="tictactoe",
        setup="OO./.X./..X",
        best_decisions=["2"],
        description="X must block the top row",
    ),
]


# ============================================================================
# Chess Positions
# ============================================================================

CHESS_POSITIONS = [
    BenchmarkPosition(
        id="CH.01",
        game="chess",
        setup="6k1/5ppp/8/8/8/8/8/R6K w - - 0 1",
        best_decisions=["a1a8"],
        description="Back rank mate with Ra8#",
    ),
    BenchmarkPosition(
        id="CH.02",
        game="chess",
        setup="rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2",
        best_decisions=["d8h4"],
        description="Fool's mate with Qh4#",
    ),
    BenchmarkPosition(
        id="CH.03",
        game="chess",
        setup="rnb1kbnr/pppp1ppp/8/4p3/3qP3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 0 1",
        best_decisions=["f3d4"],
        description="White wins the queen with Nxd4",
    ),
]

SUITES = {
    "tictactoe": TICTACTOE_POSITIONS,
    "chess": CHESS_POSITIONS,
}


def evaluate_position(position: BenchmarkPosition, config: SearchConfig) -> BenchmarkResult:
    """
    Search a single benchmark position.

    Args:
        position: Position to search
        config: Algorithm and parameters

    Returns:
        BenchmarkResult with the decision found and whether it was correct
    """
    stats = SearchStats()
    start_time = time.time()

    try:
        state = InstrumentedState(position.build_state(), stats)
        decision = run_search(state, config, pass_decision=None)
    except Exception as e:
        logger.error(f"Error evaluating position {position.id}: {e}")
        return BenchmarkResult(
            position=position,
            found_decision="",
            correct=False,
            time_taken=time.time() - start_time,
            stats=stats,
            error=str(e),
        )

    time_taken = time.time() - start_time
    found = decision_to_str(decision)
    correct = found in position.best_decisions

    logger.debug(
        f"{position.id}: found {found or '(pass)'}, expected {position.best_decisions}, "
        f"{stats.evaluations} evaluations, {stats.nodes} nodes, {time_taken:.3f}s"
    )

    return BenchmarkResult(
        position=position,
        found_decision=found,
        correct=correct,
        time_taken=time_taken,
        stats=stats,
    )


def run_suite(
    positions: Sequence[BenchmarkPosition],
    config: SearchConfig,
    progress: bool = False,
) -> Dict[str, Any]:
    """
    Run a search configuration over a list of positions.

    Args:
        positions: Positions to search
        config: Algorithm and parameters
        progress: If True, show a tqdm progress bar

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of BenchmarkResult objects
            - avg_time: Average time per position
            - total_time: Total search time
            - evaluations: Total static evaluations
            - nodes: Total nodes created
    """
    results = []
    for position in tqdm(positions, desc=config.algorithm.value, disable=not progress):
        results.append(evaluate_position(position, config))

    total = len(results)
    correct_count = sum(1 for r in results if r.correct)
    total_time = sum(r.time_taken for r in results)

    return {
        'score': correct_count,
        'total': total,
        'percentage': (correct_count / total * 100) if total else 0,
        'results': results,
        'avg_time': total_time / total if total else 0,
        'total_time': total_time,
        'evaluations': sum(r.stats.evaluations for r in results),
        'nodes': sum(r.stats.nodes for r in results),
    }
