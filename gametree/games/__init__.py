"""
Games Module

Concrete GameState implementations. None of them is needed by the search
algorithms; they exist to exercise and benchmark them.

Key Components:
    - ExplicitTreeState: Game tree written out as nested data
    - random_tree: Seeded random explicit trees with distinct scores
    - TicTacToeState: 3x3 tic-tac-toe, solvable exactly
    - ChessState: python-chess Board adapter with a material evaluation
"""

from gametree.games.chess_board import ChessState, MATE_SCORE
from gametree.games.explicit import ExplicitTreeState, random_tree, tree_depth
from gametree.games.tictactoe import TicTacToeState

__all__ = [
    'ChessState',
    'MATE_SCORE',
    'ExplicitTreeState',
    'random_tree',
    'tree_depth',
    'TicTacToeState',
]
