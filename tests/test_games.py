"""
Unit Tests for Example Games

Tests for the GameState implementations used to exercise the search:
explicit trees, tic-tac-toe and the python-chess adapter.
"""

import chess
import numpy as np
import pytest

from gametree.games import (
    MATE_SCORE,
    ChessState,
    ExplicitTreeState,
    TicTacToeState,
    random_tree,
    tree_depth,
)
from gametree.games.chess_board import CENTER_TABLE, material_score
from gametree.games.explicit import _split
from gametree.search import (
    alphabeta_search,
    complete_search,
    iterative_deepening_search,
    minimax_search,
)


def leaf_values(tree):
    _, children = _split(tree)
    if children is None:
        return [float(tree)]
    return [value for child in children for value in leaf_values(child)]


class TestExplicitTree:
    """Tests for ExplicitTreeState and random_tree."""

    def test_leaf_is_terminal(self):
        state = ExplicitTreeState(4)

        assert state.is_terminal()
        assert state.static_evaluation() == 4.0
        assert list(state.legal_decisions()) == []
        assert not state.has_legal_decisions()

    def test_inner_node(self):
        state = ExplicitTreeState((2.5, [1, [3, 4]]))

        assert not state.is_terminal()
        assert state.static_evaluation() == 2.5
        assert list(state.legal_decisions()) == [0, 1]

        child = state.apply(1)
        assert child.path == (1,)
        assert child.static_evaluation() == 0.0
        assert child.apply(0).path == (1, 0)

    def test_empty_list_has_no_moves(self):
        state = ExplicitTreeState([])

        assert not state.is_terminal()
        assert not state.has_legal_decisions()

    def test_illegal_decision_raises(self):
        with pytest.raises(ValueError):
            ExplicitTreeState([1, 2]).apply(2)
        with pytest.raises(ValueError):
            ExplicitTreeState(1).apply(0)

    @pytest.mark.parametrize("node", ["a", None, (1, 2), True])
    def test_invalid_node_raises(self, node):
        with pytest.raises(ValueError):
            ExplicitTreeState(node)

    def test_tree_depth(self):
        assert tree_depth(3) == 0
        assert tree_depth([1, [2, [3]]]) == 3

    def test_random_tree_is_reproducible(self):
        assert random_tree(3, 3, seed=1) == random_tree(3, 3, seed=1)

    def test_random_tree_shape(self):
        tree = random_tree(4, (2, 3), seed=2)
        values = leaf_values(tree)

        assert tree_depth(tree) == 4
        assert len(values) == len(set(values))
        assert 2 ** 4 <= len(values) <= 3 ** 4

    def test_random_tree_terminal_probability(self):
        tree = random_tree(4, 2, seed=4, terminal_probability=1.0)
        assert tree_depth(tree) == 1

    def test_random_tree_invalid_branching(self):
        with pytest.raises(ValueError):
            random_tree(2, (3, 1))


class TestTicTacToe:
    """Tests for TicTacToeState."""

    def test_empty_board(self):
        state = TicTacToeState()

        assert state.to_move == "X"
        assert state.perspective == "X"
        assert not state.is_terminal()
        assert list(state.legal_decisions()) == list(range(9))

    def test_from_string(self):
        state = TicTacToeState.from_string("X.O/.X./...")

        assert state.board == ("X", ".", "O", ".", "X", ".", ".", ".", ".")
        assert state.to_move == "O"
        assert str(state) == "X.O/.X./..."

    def test_apply_does_not_mutate(self):
        state = TicTacToeState()
        child = state.apply(4)

        assert state.board[4] == "."
        assert child.board[4] == "X"
        assert child.to_move == "O"
        assert child.perspective == "X"

    def test_win_scores_for_perspective(self):
        x_wins = TicTacToeState.from_string("XXX/OO./...", perspective="X")
        o_view = TicTacToeState.from_string("XXX/OO./...", perspective="O")

        assert x_wins.is_terminal()
        assert x_wins.winner() == "X"
        assert x_wins.static_evaluation() == 1.0
        assert o_view.static_evaluation() == -1.0
        assert list(x_wins.legal_decisions()) == []

    def test_draw(self):
        state = TicTacToeState.from_string("XOX/XOO/OXX")

        assert state.is_terminal()
        assert state.winner() is None
        assert state.static_evaluation() == 0.0

    @pytest.mark.parametrize("board", ["XXXXXXXXX", "OO.......", "X" * 8])
    def test_invalid_board_raises(self, board):
        with pytest.raises(ValueError):
            TicTacToeState.from_string(board)

    def test_illegal_move_raises(self):
        state = TicTacToeState.from_string("X../.../...")
        with pytest.raises(ValueError):
            state.apply(0)
        with pytest.raises(ValueError):
            state.apply(9)

    def test_perfect_play_is_a_draw(self):
        """Both sides solving every move from a drawn position draw."""
        state = TicTacToeState.from_string("X../.O./...")

        while not state.is_terminal():
            mover = TicTacToeState(state.board)
            state = state.apply(complete_search(mover, None))

        assert state.winner() is None


class TestChessState:
    """Tests for the python-chess adapter."""

    def test_starting_position(self):
        state = ChessState()

        assert not state.is_terminal()
        assert len(list(state.legal_decisions())) == 20
        assert state.static_evaluation() == 0.0
        assert state.perspective == chess.WHITE

    def test_apply_does_not_mutate(self):
        state = ChessState()
        child = state.apply(chess.Move.from_uci("e2e4"))

        assert state.board.fen() == chess.STARTING_FEN
        assert child.board.turn == chess.BLACK
        assert child.perspective == chess.WHITE

    def test_illegal_move_raises(self):
        with pytest.raises(ValueError):
            ChessState().apply(chess.Move.from_uci("e2e5"))

    def test_invalid_fen_raises(self):
        with pytest.raises(ValueError):
            ChessState.from_fen("not a fen")

    def test_material_advantage(self):
        """White is missing the h1 rook."""
        board = chess.Board("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN1 w Qkq - 0 1")

        assert material_score(board) < -400
        assert ChessState(board).static_evaluation() < -400
        assert ChessState(board, chess.BLACK).static_evaluation() > 400

    def test_center_table(self):
        assert CENTER_TABLE.shape == (64,)
        assert CENTER_TABLE[chess.E4] == pytest.approx(30.0)
        assert CENTER_TABLE[chess.A1] == pytest.approx(0.0)
        assert np.allclose(CENTER_TABLE.reshape(8, 8), CENTER_TABLE.reshape(8, 8)[::-1])

    def test_checkmate_scores(self):
        state = ChessState.from_fen(
            "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2"
        )
        mated = state.apply(chess.Move.from_uci("d8h4"))

        assert state.perspective == chess.BLACK
        assert mated.is_terminal()
        assert mated.static_evaluation() == MATE_SCORE
        assert ChessState(mated.board, chess.WHITE).static_evaluation() == -MATE_SCORE

    def test_stalemate_is_draw(self):
        state = ChessState.from_fen("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")

        assert state.is_terminal()
        assert state.static_evaluation() == 0.0

    @pytest.mark.parametrize("search", [minimax_search, alphabeta_search, iterative_deepening_search])
    def test_finds_mate_in_one(self, search):
        state = ChessState.from_fen("6k1/5ppp/8/8/8/8/8/R6K w - - 0 1")
        move = search(state, 2, None)

        assert move == chess.Move.from_uci("a1a8")
        assert state.apply(move).board.is_checkmate()

    def test_wins_hanging_queen(self):
        state = ChessState.from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/3qP3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 0 1"
        )
        assert alphabeta_search(state, 2, None) == chess.Move.from_uci("f3d4")
