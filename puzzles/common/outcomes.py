"""
Structured results handed back to whatever drives a puzzle.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .configuration import Configuration


class MoveOutcome(Enum):
    VALID = "valid"
    BLOCKED = "blocked"  # destination holds another piece
    ILLEGAL = "illegal"  # wrong geometry or nothing to move
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one interactive move; config is set only when it is valid."""

    outcome: MoveOutcome
    config: Optional[Configuration] = None

    @property
    def is_valid(self) -> bool:
        return self.outcome == MoveOutcome.VALID


class HintStatus(Enum):
    ALREADY_SOLVED = "already_solved"
    NO_SOLUTION = "no_solution"
    NEXT_STEP = "next_step"


@dataclass(frozen=True)
class HintResult:
    status: HintStatus
    config: Optional[Configuration] = None
