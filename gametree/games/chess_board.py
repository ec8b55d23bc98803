"""
Chess Position Adapter

Wraps a python-chess Board so the generic search algorithms can play
chess. Decisions are chess.Move objects.

Evaluation Components:
    - Material: P=100, N=320, B=330, R=500, Q=900, K=0
    - Centralization: knights, bishops and queens gain up to 30 centipawns
      on the central squares; pawns gain 5 centipawns per rank advanced
    - Checkmate: ±MATE_SCORE, draws: 0

Scores are centipawns from the perspective of a fixed color (by default
the side to move in the root position), so the maximizing side of the
search is always that color.

Reference:
    Simplified Evaluation Function
    https://www.chessprogramming.org/Simplified_Evaluation_Function
"""

from typing import Iterator, Optional

import chess
import numpy as np

from gametree.state.base import GameState

MATE_SCORE = 50000

PIECE_VALUES = {
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 0,
}

CENTRALIZED_PIECES = (chess.KNIGHT, chess.BISHOP, chess.QUEEN)


def _centralization_table(max_bonus: float = 30.0) -> np.ndarray:
    """
    Bonus per square, indexed by python-chess square number.

    The bonus falls off linearly with the Chebyshev distance from the
    four central squares.
    """
    ranks, files = np.indices((8, 8))
    distance = np.maximum(np.abs(ranks - 3.5), np.abs(files - 3.5)) - 0.5
    return (max_bonus * (1.0 - distance / 3.0)).astype(np.float32).reshape(64)


CENTER_TABLE = _centralization_table()


def material_score(board: chess.Board) -> float:
    """
    Material plus placement bonus in centipawns, from White's perspective.

    Args:
        board: Position to score

    Returns:
        float: Positive = White advantage
    """
    score = 0.0
    for square, piece in board.piece_map().items():
        value = float(PIECE_VALUES[piece.piece_type])

        if piece.piece_type in CENTRALIZED_PIECES:
            value += float(CENTER_TABLE[square])
        elif piece.piece_type == chess.PAWN:
            rank = chess.square_rank(square)
            advanced = rank - 1 if piece.color == chess.WHITE else 6 - rank
            value += 5.0 * advanced

        score += value if piece.color == chess.WHITE else -value
    return score


class ChessState(GameState):
    """
    Chess position backed by a python-chess Board.

    Attributes:
        board: The wrapped board (never mutated by the search)
        perspective: Color whose advantage scores positive
    """

    def __init__(self, board: Optional[chess.Board] = None, perspective: Optional[chess.Color] = None):
        self.board = board if board is not None else chess.Board()
        self.perspective = self.board.turn if perspective is None else perspective

    @classmethod
    def from_fen(cls, fen: str, perspective: Optional[chess.Color] = None) -> "ChessState":
        """
        Build a state from a FEN string.

        Raises:
            ValueError: If the FEN is malformed
        """
        return cls(chess.Board(fen), perspective)

    def is_terminal(self) -> bool:
        return self.board.is_game_over()

    def static_evaluation(self) -> float:
        if self.board.is_checkmate():
            # The side to move has been mated
            if self.board.turn == self.perspective:
                return -float(MATE_SCORE)
            return float(MATE_SCORE)

        if self.board.is_game_over():
            return 0.0

        score = material_score(self.board)
        return score if self.perspective == chess.WHITE else -score

    def legal_decisions(self) -> Iterator[chess.Move]:
        return iter(self.board.legal_moves)

    def apply(self, decision: chess.Move) -> "ChessState":
        if not self.board.is_legal(decision):
            raise ValueError(f"Illegal move {decision} in {self.board.fen()}")

        board = self.board.copy()
        board.push(decision)
        return ChessState(board, self.perspective)

    def __repr__(self) -> str:
        color = "white" if self.perspective == chess.WHITE else "black"
        return f"ChessState({self.board.fen()!r}, perspective={color})"
