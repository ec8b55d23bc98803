"""
Unit Tests for Search Configuration

Tests for SearchConfig validation and run_search dispatch.
"""

import logging

import pytest

from gametree.games.explicit import ExplicitTreeState
from gametree.search import Algorithm, SearchConfig, run_search


class TestSearchConfig:
    """Tests for SearchConfig."""

    def test_defaults(self):
        config = SearchConfig()

        assert config.algorithm is Algorithm.ALPHABETA
        assert config.max_depth == 4
        assert repr(config) == "SearchConfig(alphabeta, depth=4)"

    @pytest.mark.parametrize("name", ["iddfs", "IDDFS", "Iddfs"])
    def test_algorithm_from_string(self, name):
        assert SearchConfig(algorithm=name).algorithm is Algorithm.IDDFS

    def test_unknown_algorithm_raises(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            SearchConfig(algorithm="negamax")

    @pytest.mark.parametrize("field", ["max_depth", "minimum_depth", "discontinue_node_count"])
    @pytest.mark.parametrize("value", [2.5, "3", True])
    def test_non_integer_values_raise(self, field, value):
        with pytest.raises(ValueError, match=field):
            SearchConfig(**{field: value})

    def test_pass_yielding_depth_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gametree.search.config"):
            SearchConfig(algorithm="minimax", max_depth=0)

        assert "pass decision" in caplog.text

    def test_pass_yielding_budget_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gametree.search.config"):
            SearchConfig(
                algorithm="discontinuable", minimum_depth=2, max_depth=4, discontinue_node_count=0
            )

        assert "pass decision" in caplog.text

    def test_complete_search_ignores_depth(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gametree.search.config"):
            SearchConfig(algorithm="complete", max_depth=0)

        assert caplog.text == ""

    def test_from_dict(self):
        config = SearchConfig.from_dict({"algorithm": "minimax", "max_depth": 2})

        assert config.algorithm is Algorithm.MINIMAX
        assert config.max_depth == 2

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="depth"):
            SearchConfig.from_dict({"algorithm": "minimax", "depth": 2})

    def test_to_dict(self):
        config = SearchConfig(algorithm="discontinuable", max_depth=5, discontinue_node_count=50)
        data = config.to_dict()

        assert data["algorithm"] == "discontinuable"
        assert SearchConfig.from_dict(data) == config

    def test_repr(self):
        assert repr(SearchConfig(algorithm="complete")) == (
            "SearchConfig(complete, reassign_min_on_beta=True)"
        )
        assert repr(
            SearchConfig(algorithm="discontinuable", minimum_depth=2, max_depth=3, discontinue_node_count=10)
        ) == "SearchConfig(discontinuable, depth 2..3, budget=10)"


class TestRunSearch:
    """Tests for run_search dispatch."""

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_every_algorithm_selects_best(self, algorithm):
        config = SearchConfig(algorithm=algorithm, minimum_depth=2, max_depth=3)
        assert run_search(ExplicitTreeState([3, 7, 2]), config, "pass") == 1

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_every_algorithm_passes_on_terminal_root(self, algorithm):
        config = SearchConfig(algorithm=algorithm, minimum_depth=2, max_depth=3)
        assert run_search(ExplicitTreeState(1.0), config, "pass") == "pass"

    def test_depth_is_forwarded(self):
        """Depth 1 trusts the heuristic, depth 2 sees through it."""
        tree = [(1.0, [100]), (2.0, [-100])]

        shallow = SearchConfig(algorithm="alphabeta", max_depth=1)
        deep = SearchConfig(algorithm="alphabeta", max_depth=2)

        assert run_search(ExplicitTreeState(tree), shallow, None) == 1
        assert run_search(ExplicitTreeState(tree), deep, None) == 0
