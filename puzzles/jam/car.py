"""
Traffic Jam cars: a straight run of cells that slides along its own axis.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple

from ..common.configuration import Cell, Direction


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def directions(self) -> Tuple[Direction, Direction]:
        """Forward then backward direction along this axis."""
        if self == Axis.VERTICAL:
            return Direction.DOWN, Direction.UP
        return Direction.RIGHT, Direction.LEFT


@dataclass(frozen=True)
class Car:
    """A car occupying the straight run of cells from start to end inclusive.

    start is always the lowest (row, col) extreme. Use Car.create to build one
    from two extremes given in any order.
    """

    symbol: str
    start: Cell
    end: Cell

    @classmethod
    def create(cls, symbol: str, r1: int, c1: int, r2: int, c2: int) -> "Car":
        if r1 != r2 and c1 != c2:
            raise ValueError(
                f"car {symbol!r} must lie in one row or column, "
                f"got ({r1}, {c1}) to ({r2}, {c2})"
            )
        return cls(symbol, (min(r1, r2), min(c1, c2)), (max(r1, r2), max(c1, c2)))

    @property
    def axis(self) -> Axis:
        # Single-cell cars count as horizontal.
        if self.start[0] == self.end[0]:
            return Axis.HORIZONTAL
        return Axis.VERTICAL

    @property
    def length(self) -> int:
        return max(self.end[0] - self.start[0], self.end[1] - self.start[1]) + 1

    @property
    def cells(self) -> List[Cell]:
        if self.axis == Axis.HORIZONTAL:
            return [(self.start[0], col) for col in range(self.start[1], self.end[1] + 1)]
        return [(row, self.start[1]) for row in range(self.start[0], self.end[0] + 1)]

    def front(self, direction: Direction) -> Cell:
        """The cell just beyond this car when it moves in direction."""
        row, col = self.end if direction.dr + direction.dc > 0 else self.start
        return row + direction.dr, col + direction.dc

    def shifted(self, direction: Direction) -> "Car":
        """This car moved one cell in direction."""
        if direction not in self.axis.directions:
            raise ValueError(f"car {self.symbol!r} cannot move {direction.name}")
        return replace(
            self,
            start=(self.start[0] + direction.dr, self.start[1] + direction.dc),
            end=(self.end[0] + direction.dr, self.end[1] + direction.dc),
        )

    def __str__(self) -> str:
        return f"{self.symbol} {self.start[0]} {self.start[1]} {self.end[0]} {self.end[1]}"
