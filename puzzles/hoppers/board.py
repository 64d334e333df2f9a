"""
Hoppers board positions and the frog jumping rules.

Frogs jump over a green frog and land on an open cell beyond it: four cells
along a row or column (the jumped frog sits two cells away), or two cells
diagonally (the jumped frog is the diagonal neighbour). The jumped green frog
is removed. The puzzle is solved when only the red frog is left.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from ..common.configuration import Cell, Direction, GridConfig, parse_dimensions, read_description, read_lines
from ..common.errors import PuzzleFormatError
from ..common.logger import logger
from ..common.outcomes import MoveOutcome, MoveResult

log = logger.bind(component="hoppers")


class CellType(Enum):
    OPEN = "."
    BLOCKED = "*"
    GREEN = "G"
    RED = "R"


FROGS = (CellType.GREEN.value, CellType.RED.value)

# Landing distance per axis; the jumped frog sits halfway.
ORTHOGONAL_JUMP = 4
DIAGONAL_JUMP = 2


def jump_distance(direction: Direction) -> int:
    return DIAGONAL_JUMP if direction.is_diagonal else ORTHOGONAL_JUMP


class HoppersConfig(GridConfig):
    """A single legal Hoppers board position."""

    EMPTY = CellType.OPEN.value

    @classmethod
    def from_text(cls, text: str) -> "HoppersConfig":
        """Parse a ``<rows> <cols>`` header followed by one line per row."""
        lines = read_lines(text)
        rows, cols = parse_dimensions(lines)
        body = lines[1:]
        if len(body) != rows:
            raise PuzzleFormatError(f"expected {rows} board rows, got {len(body)}")

        allowed = {cell.value for cell in CellType}
        grid = []
        for number, line in enumerate(body, start=2):
            tokens = line.split()
            if len(tokens) != cols:
                raise PuzzleFormatError(
                    f"expected {cols} cells, got {len(tokens)}", number
                )
            for token in tokens:
                if token not in allowed:
                    raise PuzzleFormatError(f"unknown cell symbol {token!r}", number)
            grid.append(tokens)

        config = cls(grid)
        log.debug(
            f"Parsed {rows}x{cols} board with {config.count(CellType.GREEN.value)} green frogs"
        )
        return config

    @classmethod
    def from_file(cls, filename: Union[str, Path]) -> "HoppersConfig":
        return cls.from_text(read_description(filename))

    def to_text(self) -> str:
        return f"{self.rows} {self.cols}\n{self}\n"

    def is_frog(self, row: int, col: int) -> bool:
        return self.cell(row, col) in FROGS

    def is_solution(self) -> bool:
        return self.count(CellType.RED.value) == 1 and self.count(CellType.GREEN.value) == 0

    def get_neighbors(self) -> List["HoppersConfig"]:
        neighbors = []
        for row in range(self.rows):
            for col in range(self.cols):
                if not self.is_frog(row, col):
                    continue
                for direction in Direction:
                    neighbor = self._jump_towards((row, col), direction)
                    if neighbor is not None:
                        neighbors.append(neighbor)
        return neighbors

    def _jump_towards(self, origin: Cell, direction: Direction) -> Optional["HoppersConfig"]:
        distance = jump_distance(direction)
        half = distance // 2
        row, col = origin
        over = (row + direction.dr * half, col + direction.dc * half)
        landing = (row + direction.dr * distance, col + direction.dc * distance)

        if not self.is_valid_position(*landing):
            return None
        if self.cell(*over) != CellType.GREEN.value:
            return None
        if not self.is_empty(*landing):
            return None
        return self._jump(origin, over, landing)

    def _jump(self, origin: Cell, over: Cell, landing: Cell) -> "HoppersConfig":
        frog = self.cell(*origin)
        grid = self._updated_grid(
            {origin: self.EMPTY, over: self.EMPTY, landing: frog}
        )
        return HoppersConfig(grid)

    def validate_selection(self, row: int, col: int) -> MoveOutcome:
        """Can the piece at (row, col) be picked up?"""
        if not self.is_valid_position(row, col):
            return MoveOutcome.OUT_OF_BOUNDS
        if self.is_frog(row, col):
            return MoveOutcome.VALID
        return MoveOutcome.ILLEGAL

    def validate_move(self, origin: Cell, dest: Cell) -> MoveOutcome:
        """Classify a jump from origin to dest without applying it."""
        r1, c1 = origin
        r2, c2 = dest
        if not self.is_valid_position(r2, c2):
            return MoveOutcome.OUT_OF_BOUNDS
        if not self.is_frog(r1, c1):
            return MoveOutcome.ILLEGAL

        dr, dc = r2 - r1, c2 - c1
        if dr == 0 and dc == 0:
            pass  # no-op: the destination is the frog itself
        elif dr == 0:
            if abs(dc) != ORTHOGONAL_JUMP:
                return MoveOutcome.ILLEGAL
        elif dc == 0:
            if abs(dr) != ORTHOGONAL_JUMP:
                return MoveOutcome.ILLEGAL
        elif abs(dr) != DIAGONAL_JUMP or abs(dc) != DIAGONAL_JUMP:
            return MoveOutcome.ILLEGAL

        target = self.cell(r2, c2)
        if target == CellType.BLOCKED.value:
            return MoveOutcome.ILLEGAL
        if target in FROGS:
            return MoveOutcome.BLOCKED

        if self.cell(*self._midpoint(origin, dest)) != CellType.GREEN.value:
            return MoveOutcome.ILLEGAL
        return MoveOutcome.VALID

    def move(self, origin: Cell, dest: Cell) -> MoveResult:
        """Validate a jump and build the resulting position if it is legal."""
        outcome = self.validate_move(origin, dest)
        if outcome != MoveOutcome.VALID:
            return MoveResult(outcome)
        return MoveResult(outcome, self._jump(origin, self._midpoint(origin, dest), dest))

    @staticmethod
    def _midpoint(origin: Cell, dest: Cell) -> Cell:
        return ((origin[0] + dest[0]) // 2, (origin[1] + dest[1]) // 2)
