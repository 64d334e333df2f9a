"""
BFS solver for board puzzles.

Finds shortest move sequences through any Configuration space.
"""

from .difficulty import DifficultyLabel, DifficultyScorer
from .solver import BFSResult, BFSSolver

__all__ = ["BFSSolver", "BFSResult", "DifficultyScorer", "DifficultyLabel"]
