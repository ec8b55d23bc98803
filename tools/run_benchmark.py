#!/usr/bin/env python3
"""
Search Benchmark Runner

Runs the built-in benchmark positions with several search algorithms and
compares correctness, evaluation counts and time.

Usage:
    python tools/run_benchmark.py [--game tictactoe] [--algorithms minimax,alphabeta]
                                  [--depth 3] [--budget 2000] [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from gametree.search.config import Algorithm, SearchConfig
from gametree.utils.testing import SUITES, run_suite


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(
    game: str,
    algorithms: list[Algorithm],
    depth: int,
    minimum_depth: int,
    budget: int,
    progress: bool = False,
):
    """
    Run one benchmark suite with each algorithm.

    Args:
        game: Suite name ("tictactoe" or "chess")
        algorithms: Algorithms to compare
        depth: Search depth (maximum depth for the discontinuable search)
        minimum_depth: Minimum depth for the discontinuable search
        budget: Node budget for the discontinuable search
        progress: Show progress bars
    """
    logger = logging.getLogger(__name__)
    positions = SUITES[game]

    logger.info("=" * 80)
    logger.info(f"SEARCH BENCHMARK - {game} ({len(positions)} positions)")
    logger.info("=" * 80)

    all_results = []

    for algorithm in algorithms:
        config = SearchConfig(
            algorithm=algorithm,
            max_depth=depth,
            minimum_depth=minimum_depth,
            discontinue_node_count=budget,
        )
        logger.info(f"Running {config}")

        result = run_suite(positions, config, progress=progress)
        all_results.append((config, result))

        for r in result['results']:
            if not r.correct:
                logger.info(
                    f"  {r.position.id}: expected {r.position.best_decisions}, "
                    f"got {r.found_decision or '(pass)'}"
                )

    logger.info("=" * 80)
    logger.info(f"{'Algorithm':<16} {'Correct':<10} {'%':<8} {'Avg Time':<12} {'Evals':>10} {'Nodes':>10}")
    logger.info("-" * 80)
    for config, r in all_results:
        logger.info(
            f"{config.algorithm.value:<16} {r['score']}/{r['total']:<8} {r['percentage']:<7.1f}% "
            f"{format_time(r['avg_time']):<12} {r['evaluations']:>10,} {r['nodes']:>10,}"
        )
    logger.info("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Compare search algorithms on benchmark positions",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--game",
        choices=sorted(SUITES),
        default="tictactoe",
        help="Benchmark suite to run",
    )
    parser.add_argument(
        "--algorithms",
        type=str,
        default="minimax,alphabeta,iddfs,discontinuable",
        help="Comma-separated list of algorithms",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=3,
        help="Search depth",
    )
    parser.add_argument(
        "--minimum-depth",
        type=int,
        default=2,
        help="Minimum depth of the discontinuable search",
    )
    parser.add_argument(
        "--budget",
        type=int,
        default=2000,
        help="Node budget of the discontinuable search",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show progress bars",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        algorithms = [Algorithm(name.strip().lower()) for name in args.algorithms.split(",")]
    except ValueError as e:
        logger.error(f"Invalid algorithm list: {e}")
        sys.exit(1)

    if args.game == "chess" and Algorithm.COMPLETE in algorithms:
        logger.error("Complete search cannot solve chess positions")
        sys.exit(1)

    try:
        run_benchmark(
            args.game,
            algorithms,
            args.depth,
            args.minimum_depth,
            args.budget,
            progress=args.progress,
        )
    except KeyboardInterrupt:
        logger.warning("Benchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
