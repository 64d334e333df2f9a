#!/usr/bin/env python3
"""
Debug script for BFS solver - runs in verbose mode with detailed logging.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import puzzles modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from puzzles.bfs_solver.solver import BFSSolver
from puzzles.common.errors import PuzzleFormatError
from puzzles.common.logger import configure, logger
from puzzles.common.settings import Settings
from puzzles.hoppers import HoppersConfig
from puzzles.jam import JamConfig


class VerboseBFSSolver(BFSSolver):
    """BFS solver with verbose logging for debugging."""

    def __init__(self, settings=None, max_printed: int = 50):
        super().__init__(settings)
        self.max_printed = max_printed

    def find_path(self, start):
        """Search with a printout of every expansion up to max_printed."""
        print("=== BFS Solver Debug Session ===")
        print("Initial board state:")
        print(start)
        print(f"Solved already: {start.is_solution()}")
        print()

        path = super().find_path(start)

        if path is None:
            print("\n❌ No solution found")
        else:
            print(f"\n🎉 SOLUTION FOUND in {len(path) - 1} moves 🎉")
        return path

    def on_expand(self, expanded, current, generated, added, queued):
        if expanded <= self.max_printed:
            print(f"--- Node {expanded} ---")
            print(current)
            print(
                f"  {generated} neighbors, {added} new, "
                f"{generated - added} duplicates, queue {queued}"
            )
        elif expanded == self.max_printed + 1:
            print("... further expansions not printed")


def main():
    """Run debug BFS solver."""
    parser = argparse.ArgumentParser(description="Debug BFS solver with verbose output")
    parser.add_argument("puzzle", choices=["hoppers", "jam"], help="Puzzle family")
    parser.add_argument("filename", help="Puzzle description file")
    parser.add_argument(
        "--max-printed", type=int, default=50, help="Expansions to print in full"
    )

    args = parser.parse_args()

    settings = Settings.from_env()
    configure(settings.log_level)

    config_cls = HoppersConfig if args.puzzle == "hoppers" else JamConfig
    try:
        start = config_cls.from_file(args.filename)
    except (PuzzleFormatError, OSError) as e:
        logger.bind(component="cli").error(f"Could not load {args.filename}: {e}")
        return 2

    solver = VerboseBFSSolver(settings, max_printed=args.max_printed)
    result = solver.solve(start)

    print("\n=== Final Result ===")
    print(f"Success: {result.success}")
    print(f"Length: {result.solution_length}")
    print(f"Time: {result.time_taken_ms:.1f}ms")
    print(f"Total configs: {result.total_configs}")
    print(f"Unique configs: {result.unique_configs}")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
