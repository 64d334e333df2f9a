"""
Shared building blocks for every puzzle family.

The controller-facing model lives in ``puzzles.common.model`` and is not
re-exported here, since it depends on the solver package which in turn
depends on this one.
"""

from .configuration import Cell, Configuration, Direction, GridConfig
from .errors import PuzzleFormatError
from .outcomes import HintResult, HintStatus, MoveOutcome, MoveResult
from .settings import Settings

__all__ = [
    "Cell",
    "Configuration",
    "Direction",
    "GridConfig",
    "PuzzleFormatError",
    "HintResult",
    "HintStatus",
    "MoveOutcome",
    "MoveResult",
    "Settings",
]
