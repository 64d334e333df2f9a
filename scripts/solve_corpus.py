#!/usr/bin/env python3
"""
Solve every puzzle file in a data directory and write a CSV summary.

Expects DIR/hoppers/*.txt and DIR/jam/*.txt.
"""

import argparse
import csv
import sys
from pathlib import Path
from typing import Dict, List, Optional

from tqdm import tqdm

# Add parent directory to path to import puzzles modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from puzzles.bfs_solver import BFSSolver, DifficultyScorer
from puzzles.common.errors import PuzzleFormatError
from puzzles.common.logger import configure, logger
from puzzles.common.settings import Settings
from puzzles.hoppers import HoppersConfig
from puzzles.jam import JamConfig

PUZZLES = {
    "hoppers": HoppersConfig,
    "jam": JamConfig,
}

FIELDNAMES = [
    "puzzle",
    "kind",
    "solved",
    "moves",
    "total_configs",
    "unique_configs",
    "score",
    "label",
]


def solve_puzzle_row(kind: str, path: Path, solver: BFSSolver) -> Optional[Dict]:
    """Solve a single puzzle file into a CSV row."""
    try:
        start = PUZZLES[kind].from_file(path)
    except PuzzleFormatError as e:
        logger.bind(component="cli").warning(f"Skipping {path}: {e}")
        return None

    result = solver.solve(start)
    score, label = ("", "")
    if result.success:
        score, label = DifficultyScorer.score_and_label(result)
        score = f"{score:.2f}"
        label = label.value

    return {
        "puzzle": path.name,
        "kind": kind,
        "solved": result.success,
        "moves": result.solution_length if result.success else "",
        "total_configs": result.total_configs,
        "unique_configs": result.unique_configs,
        "score": score,
        "label": label,
    }


def collect_puzzles(data_dir: Path) -> List[tuple]:
    puzzles = []
    for kind in PUZZLES:
        for path in sorted((data_dir / kind).glob("*.txt")):
            puzzles.append((kind, path))
    return puzzles


def main():
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Solve a directory of puzzle files")
    parser.add_argument(
        "data_dir", nargs="?", default=settings.data_dir, help="Puzzle data directory"
    )
    parser.add_argument(
        "--output", default="corpus_summary.csv", help="CSV file to write"
    )
    args = parser.parse_args()

    configure(settings.log_level)
    puzzles = collect_puzzles(Path(args.data_dir))
    if not puzzles:
        print(f"No puzzle files found under {args.data_dir}")
        return 1

    solver = BFSSolver(settings)
    rows = []
    with tqdm(total=len(puzzles), desc="Solving", unit="puzzle", ncols=100) as pbar:
        for kind, path in puzzles:
            row = solve_puzzle_row(kind, path, solver)
            if row is not None:
                rows.append(row)
            pbar.update(1)

    with open(args.output, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)

    solved = sum(1 for row in rows if row["solved"])
    print(f"Solved {solved}/{len(rows)} puzzles, summary written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
