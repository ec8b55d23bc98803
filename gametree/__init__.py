"""
gametree

Adversarial game tree search for two-player, zero-sum, perfect-information
games with alternating turns. The algorithms are generic over the game:
any position type implementing the GameState interface can be searched.

## Architecture

The library is organized into several modules:

1. **state**: The GameState contract
   - is_terminal(), static_evaluation(), legal_decisions(), apply()

2. **tree**: Game tree representation
   - GameTreeNode with lazy expansion and a cached evaluation
   - Move ordering by cached or live evaluation

3. **search**: Search algorithms
   - Minimax
   - Alpha-beta pruning
   - Complete search (alpha-beta to the end of the game)
   - Iterative deepening with move ordering reuse
   - Discontinuable iterative deepening bounded by a node budget

4. **games**: Example games
   - Explicit trees, tic-tac-toe, chess (python-chess)

5. **utils**: Instrumentation and benchmarking

## Quick Start

```python
from gametree.games import TicTacToeState
from gametree.search import alphabeta_search, SearchConfig, run_search

state = TicTacToeState.from_string("XX./OO./...")
move = alphabeta_search(state, max_depth=3, pass_decision=None)
print(f"Best move: square {move}")

config = SearchConfig(algorithm="discontinuable", minimum_depth=2,
                      max_depth=6, discontinue_node_count=500)
move = run_search(state, config, pass_decision=None)
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from gametree.search import (
    alphabeta_search,
    complete_search,
    discontinuable_search,
    iterative_deepening_search,
    minimax_search,
    run_search,
    NodeBudget,
    SearchConfig,
)
from gametree.state import GameState
from gametree.tree import GameTreeNode

__all__ = [
    'GameState',
    'GameTreeNode',
    'minimax_search',
    'alphabeta_search',
    'complete_search',
    'iterative_deepening_search',
    'discontinuable_search',
    'run_search',
    'NodeBudget',
    'SearchConfig',
]
