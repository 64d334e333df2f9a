"""
Hoppers model: frog and jump messages for the shared two-click flow.
"""

from ..common.configuration import Cell
from ..common.model import PuzzleModel
from ..common.outcomes import MoveOutcome
from .board import HoppersConfig


class HoppersModel(PuzzleModel):
    """Model for regulating a Hoppers game."""

    config_cls = HoppersConfig

    def empty_selection_message(self, row: int, col: int) -> str:
        return f"No frog at ({row}, {col})."

    def move_message(self, origin: Cell, dest: Cell, outcome: MoveOutcome) -> str:
        jump = f"from ({origin[0]}, {origin[1]}) to ({dest[0]}, {dest[1]})"
        if outcome == MoveOutcome.VALID:
            return f"Jumped {jump}."
        if outcome == MoveOutcome.BLOCKED:
            return f"Can't jump {jump}! Spot is blocked by another frog!"
        if outcome == MoveOutcome.OUT_OF_BOUNDS:
            return "This spot is not on the board!"
        return f"Can't jump {jump}!"
