"""
Unit Tests for gametree

This package contains unit tests for the tree, the search algorithms and
the example games.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_iterative.py

    # Run with coverage
    pytest tests/ --cov=gametree --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestAlphaBeta::test_prunes_siblings

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
