"""
Traffic Jam model: car and move messages for the shared two-click flow.
"""

from ..common.configuration import Cell
from ..common.model import PuzzleModel
from ..common.outcomes import MoveOutcome
from .board import JamConfig


class JamModel(PuzzleModel):
    """Model for a Traffic Jam game."""

    config_cls = JamConfig

    def empty_selection_message(self, row: int, col: int) -> str:
        return f"No car at ({row}, {col})!"

    def move_message(self, origin: Cell, dest: Cell, outcome: MoveOutcome) -> str:
        if outcome == MoveOutcome.VALID:
            return (
                f"Moved from ({origin[0]}, {origin[1]}) to ({dest[0]}, {dest[1]})."
            )
        if outcome == MoveOutcome.BLOCKED:
            return f"Not a legal move: ({dest[0]}, {dest[1]}) is occupied"
        if outcome == MoveOutcome.OUT_OF_BOUNDS:
            return f"Not a legal move: ({dest[0]}, {dest[1]}) is off the board"
        return "Not a legal move"
