#!/usr/bin/env python3
"""
Board Puzzle Solver

Finds a shortest solution for a Hoppers or Traffic Jam puzzle file using a
breadth-first search over board positions.
"""

import argparse
import sys

from puzzles.bfs_solver import BFSSolver
from puzzles.common.errors import PuzzleFormatError
from puzzles.common.logger import configure, logger
from puzzles.common.settings import Settings
from puzzles.hoppers import HoppersConfig
from puzzles.jam import JamConfig

PUZZLES = {
    "hoppers": HoppersConfig,
    "jam": JamConfig,
}


def render(config, labeled: bool) -> str:
    return config.labeled() if labeled else str(config)


def run_solver(kind: str, filename: str, settings: Settings, labeled: bool = False) -> int:
    """Solve one puzzle file and print the path; returns the exit code."""
    log = logger.bind(component="cli")
    try:
        start = PUZZLES[kind].from_file(filename)
    except (PuzzleFormatError, OSError) as e:
        log.error(f"Could not load {filename}: {e}")
        return 2

    print(f"File: {filename}")
    print(render(start, labeled))

    solver = BFSSolver(settings)
    result = solver.solve(start)

    print(f"Total configs: {result.total_configs}")
    print(f"Unique configs: {result.unique_configs}")

    if not result.success:
        print("No solution")
        return 1

    for step, config in enumerate(result.path):
        print(f"Step {step}:")
        print(render(config, labeled))
        print()
    log.info(f"Solved in {result.solution_length} moves ({result.time_taken_ms:.1f}ms)")
    return 0


def main():
    """Main entry point."""
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(
        description="Board Puzzle Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py hoppers data/hoppers/hoppers-3.txt
  python main.py jam data/jam/jam-1.txt --labeled
  python main.py jam data/jam/jam-3.txt --log-level DEBUG
        """,
    )

    parser.add_argument("puzzle", choices=sorted(PUZZLES), help="Puzzle family")
    parser.add_argument("filename", help="Puzzle description file")
    parser.add_argument(
        "--labeled", action="store_true", help="Print boards with row/column labels"
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, help="Loguru level for diagnostics"
    )

    args = parser.parse_args()

    try:
        settings = Settings(
            data_dir=settings.data_dir,
            log_level=args.log_level,
            progress_interval=settings.progress_interval,
        )
    except ValueError as e:
        parser.error(str(e))
    configure(settings.log_level)

    sys.exit(run_solver(args.puzzle, args.filename, settings, labeled=args.labeled))


if __name__ == "__main__":
    main()
