"""
Difficulty scoring for solved puzzles.
"""

import math
from enum import Enum
from typing import Tuple

from .solver import BFSResult


class DifficultyLabel(Enum):
    """Difficulty labels for puzzles."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    BRUTAL = "Brutal"


class DifficultyScorer:
    """Scores puzzle difficulty from the solution length and search size."""

    @staticmethod
    def score_puzzle(result: BFSResult) -> float:
        """Calculate difficulty score for a solved puzzle.

        Args:
            result: BFS result for the puzzle's start position

        Returns:
            Difficulty score
        """
        if not result.success:
            raise ValueError("cannot score an unsolved puzzle")

        return 1.0 * result.solution_length + 0.5 * math.log2(
            max(result.unique_configs, 1)
        )

    @staticmethod
    def get_difficulty_label(score: float) -> DifficultyLabel:
        """Get difficulty label from score.

        Args:
            score: Difficulty score

        Returns:
            Difficulty label
        """
        if score <= 8:
            return DifficultyLabel.EASY
        elif score <= 16:
            return DifficultyLabel.MEDIUM
        elif score <= 28:
            return DifficultyLabel.HARD
        else:
            return DifficultyLabel.BRUTAL

    @staticmethod
    def score_and_label(result: BFSResult) -> Tuple[float, DifficultyLabel]:
        """Calculate both score and label.

        Args:
            result: BFS result for the puzzle's start position

        Returns:
            (score, label) tuple
        """
        score = DifficultyScorer.score_puzzle(result)
        label = DifficultyScorer.get_difficulty_label(score)
        return score, label
