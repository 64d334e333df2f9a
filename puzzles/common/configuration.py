"""
Board position contract shared by every puzzle family.

The BFS solver only ever talks to a puzzle through ``Configuration``.
``GridConfig`` is the immutable grid-backed implementation used by both
Hoppers and Traffic Jam.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import PuzzleFormatError

Cell = Tuple[int, int]


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    @property
    def is_diagonal(self) -> bool:
        return self.dr != 0 and self.dc != 0

    @classmethod
    def from_delta(cls, dr: int, dc: int) -> Optional["Direction"]:
        """Direction pointing along (dr, dc), or None for a zero delta."""
        if dr == 0 and dc == 0:
            return None
        return cls(((dr > 0) - (dr < 0), (dc > 0) - (dc < 0)))


class Configuration(ABC):
    """A single puzzle position that the solver can search from."""

    @abstractmethod
    def is_solution(self) -> bool:
        """Is this position a solved puzzle?"""

    @abstractmethod
    def get_neighbors(self) -> List["Configuration"]:
        """Every position reachable with exactly one legal move."""

    @abstractmethod
    def __eq__(self, other) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass


class GridConfig(Configuration):
    """Immutable rectangular grid of single-character cell symbols.

    Equality and hashing are derived purely from the cell contents, so two
    independently built positions with the same cells are interchangeable as
    dict keys.
    """

    EMPTY = "."

    def __init__(self, grid):
        grid = np.array(grid, dtype="<U1")
        if grid.ndim != 2:
            raise ValueError(f"grid must be two dimensional, got shape {grid.shape}")
        grid.setflags(write=False)
        self.grid = grid
        self._hash = hash((grid.shape, grid.tobytes()))

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def cols(self) -> int:
        return self.grid.shape[1]

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Optional[str]:
        if not self.is_valid_position(row, col):
            return None
        return str(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell(row, col) == self.EMPTY

    def count(self, symbol: str) -> int:
        return int(np.count_nonzero(self.grid == symbol))

    def find_cells(self, symbol: str) -> List[Cell]:
        return [(int(r), int(c)) for r, c in zip(*np.nonzero(self.grid == symbol))]

    def _updated_grid(self, updates: Dict[Cell, str]) -> np.ndarray:
        """Copy of the grid with the given cells overwritten."""
        grid = self.grid.copy()
        for (row, col), symbol in updates.items():
            grid[row, col] = symbol
        return grid

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return False
        return self._hash == other._hash and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.grid.tolist())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows}x{self.cols})"

    def labeled(self) -> str:
        """Board text with row and column index labels."""
        header = "   " + "".join(f"{c} " for c in range(self.cols))
        rule = "  " + "--" * self.cols
        lines = [header, rule]
        for r, row in enumerate(self.grid.tolist()):
            lines.append(f"{r}|" + "".join(f" {symbol}" for symbol in row))
        return "\n".join(lines) + "\n"


def read_description(filename: Union[str, Path]) -> str:
    """Read a puzzle file as text; undecodable bytes count as a format error."""
    try:
        return Path(filename).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PuzzleFormatError(f"not a text file: {e}") from e


def read_lines(source: str) -> List[str]:
    """Split a description into lines, dropping trailing blank lines."""
    lines = source.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def parse_ints(tokens: Sequence[str], expected: int, what: str, line: int) -> List[int]:
    if len(tokens) != expected:
        raise PuzzleFormatError(
            f"expected {expected} values for {what}, got {len(tokens)}", line
        )
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise PuzzleFormatError(f"non-integer value in {what}: {' '.join(tokens)}", line) from None


def parse_dimensions(lines: Iterable[str]) -> Tuple[int, int]:
    """Parse the leading ``<rows> <cols>`` line of a puzzle description."""
    lines = list(lines)
    if not lines:
        raise PuzzleFormatError("empty puzzle description")
    rows, cols = parse_ints(lines[0].split(), 2, "dimensions", 1)
    if rows <= 0 or cols <= 0:
        raise PuzzleFormatError(f"dimensions must be positive, got {rows}x{cols}", 1)
    return rows, cols
