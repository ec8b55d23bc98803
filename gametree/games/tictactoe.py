"""
Tic-Tac-Toe

A 3x3 tic-tac-toe position. Small enough to solve exactly with
complete_search() from most mid-game positions.

Board Layout:
    Squares are numbered 0-8 row by row:

        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8

    The board string uses "X", "O" and "." (empty), e.g. "X.O.X...."
    X always moves first, so the side to move follows from the counts.

Evaluation:
    +1 if the maximizing side has three in a row, -1 if the other side
    does, 0 otherwise. The maximizing side defaults to the side to move.
"""

from typing import Iterator, Optional, Tuple

from gametree.state.base import GameState

X = "X"
O = "O"
EMPTY = "."

WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class TicTacToeState(GameState):
    """
    Tic-tac-toe position.

    Attributes:
        board: Tuple of 9 cells ("X", "O" or ".")
        perspective: Side whose wins score +1
    """

    def __init__(self, board: Tuple[str, ...] = (EMPTY,) * 9, perspective: Optional[str] = None):
        if len(board) != 9 or any(cell not in (X, O, EMPTY) for cell in board):
            raise ValueError(f"Invalid tic-tac-toe board: {board!r}")

        x_count = board.count(X)
        o_count = board.count(O)
        if not 0 <= x_count - o_count <= 1:
            raise ValueError(f"Impossible move counts: {x_count} X, {o_count} O")

        self.board = tuple(board)
        self.perspective = perspective or self.to_move
        if self.perspective not in (X, O):
            raise ValueError(f"Invalid perspective: {perspective!r}")

    @classmethod
    def from_string(cls, text: str, perspective: Optional[str] = None) -> "TicTacToeState":
        """
        Parse a board string such as "X.O.X....".

        Whitespace and "|" separators are ignored.
        """
        cells = [c for c in text.upper() if c not in " |\n/"]
        return cls(tuple(cells), perspective)

    @property
    def to_move(self) -> str:
        return X if self.board.count(X) == self.board.count(O) else O

    def winner(self) -> Optional[str]:
        """Return "X" or "O" if that side has three in a row."""
        for a, b, c in WIN_LINES:
            if self.board[a] != EMPTY and self.board[a] == self.board[b] == self.board[c]:
                return self.board[a]
        return None

    def is_terminal(self) -> bool:
        return self.winner() is not None or EMPTY not in self.board

    def static_evaluation(self) -> float:
        winner = self.winner()
        if winner is None:
            return 0.0
        return 1.0 if winner == self.perspective else -1.0

    def legal_decisions(self) -> Iterator[int]:
        if self.winner() is not None:
            return
        for square, cell in enumerate(self.board):
            if cell == EMPTY:
                yield square

    def apply(self, decision: int) -> "TicTacToeState":
        if not 0 <= decision < 9 or self.board[decision] != EMPTY:
            raise ValueError(f"Illegal move: square {decision!r}")
        if self.winner() is not None:
            raise ValueError("Game is already over")

        board = list(self.board)
        board[decision] = self.to_move
        return TicTacToeState(tuple(board), self.perspective)

    def __str__(self) -> str:
        rows = ["".join(self.board[i:i + 3]) for i in range(0, 9, 3)]
        return "/".join(rows)

    def __repr__(self) -> str:
        return f"TicTacToeState({str(self)!r}, perspective={self.perspective!r})"
