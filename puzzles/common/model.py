"""
Controller-facing puzzle model.

A model owns the start and current positions of one loaded puzzle and turns
load/reset/hint/select requests into ModelUpdate values. Rendering the update
message is left to the caller.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Type, Union

from ..bfs_solver.solver import BFSSolver
from .configuration import Cell, GridConfig
from .errors import PuzzleFormatError
from .logger import logger
from .outcomes import HintResult, HintStatus, MoveOutcome, MoveResult


class UpdateKind(Enum):
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"
    RESET = "reset"
    HINT = "hint"
    SELECTED = "selected"
    MOVED = "moved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ModelUpdate:
    """What changed after a model request, plus the text to show for it."""

    kind: UpdateKind
    message: str
    config: Optional[GridConfig]
    outcome: Optional[MoveOutcome] = None
    hint: Optional[HintStatus] = None


def load_config(config_cls: Type[GridConfig], filename: Union[str, Path]) -> GridConfig:
    """Parse a puzzle file into its initial position."""
    return config_cls.from_file(filename)


def request_hint(current: GridConfig, solver: BFSSolver) -> HintResult:
    """Next position on a shortest path from current, if there is one."""
    if current.is_solution():
        return HintResult(HintStatus.ALREADY_SOLVED)
    path = solver.find_path(current)
    if path is None:
        return HintResult(HintStatus.NO_SOLUTION)
    return HintResult(HintStatus.NEXT_STEP, path[1])


def validate_and_apply_move(current: GridConfig, origin: Cell, dest: Cell) -> MoveResult:
    """Classify a move and build the resulting position when it is valid."""
    return current.move(origin, dest)


class PuzzleModel(ABC):
    """Shared load/reset/hint/select flow for a single puzzle family."""

    config_cls: Type[GridConfig]

    def __init__(self, solver: Optional[BFSSolver] = None):
        self.solver = solver or BFSSolver()
        self.start_config: Optional[GridConfig] = None
        self.current_config: Optional[GridConfig] = None
        self.selected: Optional[Cell] = None
        self.logger = logger.bind(component="model")

    def _require_loaded(self) -> GridConfig:
        if self.current_config is None:
            raise RuntimeError("no puzzle loaded")
        return self.current_config

    def load(self, filename: Union[str, Path]) -> ModelUpdate:
        """Load a puzzle file; a failed load leaves the previous puzzle in place."""
        name = Path(filename).name
        try:
            config = load_config(self.config_cls, filename)
        except (PuzzleFormatError, OSError) as e:
            self.logger.error(f"Failed to load {filename}: {e}")
            return ModelUpdate(
                UpdateKind.LOAD_FAILED, f"Failed to load {name}: {e}", self.current_config
            )

        self.start_config = config
        self.current_config = config
        self.selected = None
        self.logger.debug(f"Loaded {filename} ({config.rows}x{config.cols})")
        return ModelUpdate(UpdateKind.LOADED, f"Loaded: {name}\n{config.labeled()}", config)

    def reset(self) -> ModelUpdate:
        self._require_loaded()
        self.current_config = self.start_config
        self.selected = None
        return ModelUpdate(
            UpdateKind.RESET,
            f"Puzzle reset:\n{self.start_config.labeled()}",
            self.current_config,
        )

    def hint(self) -> ModelUpdate:
        """Advance the current position one step along a shortest solution."""
        current = self._require_loaded()
        result = request_hint(current, self.solver)

        if result.status == HintStatus.ALREADY_SOLVED:
            message = "Already solved!"
        elif result.status == HintStatus.NO_SOLUTION:
            message = "No solution found."
        else:
            self.current_config = result.config
            self.selected = None
            message = f"Next step:\n{result.config.labeled()}"

        return ModelUpdate(UpdateKind.HINT, message, self.current_config, hint=result.status)

    def select(self, row: int, col: int) -> ModelUpdate:
        """First call picks a piece, second call tries to move it to (row, col)."""
        current = self._require_loaded()

        if self.selected is None:
            outcome = current.validate_selection(row, col)
            if outcome == MoveOutcome.VALID:
                self.selected = (row, col)
                return ModelUpdate(
                    UpdateKind.SELECTED,
                    f"Selected ({row}, {col})\n{current.labeled()}",
                    current,
                    outcome,
                )
            if outcome == MoveOutcome.OUT_OF_BOUNDS:
                message = "This is not a legal selection."
            else:
                message = f"{self.empty_selection_message(row, col)}\n{current.labeled()}"
            return ModelUpdate(UpdateKind.REJECTED, message, current, outcome)

        origin, dest = self.selected, (row, col)
        self.selected = None
        result = validate_and_apply_move(current, origin, dest)
        if result.is_valid:
            self.current_config = result.config
            kind = UpdateKind.MOVED
        else:
            kind = UpdateKind.REJECTED

        message = self.move_message(origin, dest, result.outcome)
        return ModelUpdate(
            kind,
            f"{message}\n{self.current_config.labeled()}",
            self.current_config,
            result.outcome,
        )

    @abstractmethod
    def empty_selection_message(self, row: int, col: int) -> str:
        """Message for a first click on a cell with nothing to move."""

    @abstractmethod
    def move_message(self, origin: Cell, dest: Cell, outcome: MoveOutcome) -> str:
        """Message describing the outcome of a second click."""
