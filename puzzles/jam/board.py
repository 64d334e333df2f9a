"""
Traffic Jam board positions and the car sliding rules.

The grid is always rebuilt from the car list; a car moves one cell at a time
along its own axis into an empty cell. The puzzle is solved once the goal car
touches the right edge of the board.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..common.configuration import Cell, Direction, GridConfig, parse_dimensions, parse_ints, read_description, read_lines
from ..common.errors import PuzzleFormatError
from ..common.logger import logger
from ..common.outcomes import MoveOutcome, MoveResult
from .car import Car

log = logger.bind(component="jam")


class JamConfig(GridConfig):
    """A single Traffic Jam position made of non-overlapping cars."""

    GOAL_CAR = "X"

    def __init__(self, rows: int, cols: int, cars: Sequence[Car]):
        self.cars: Tuple[Car, ...] = tuple(cars)
        super().__init__(self._make_board(rows, cols, self.cars))

    @classmethod
    def _make_board(cls, rows: int, cols: int, cars: Sequence[Car]) -> np.ndarray:
        board = np.full((rows, cols), cls.EMPTY, dtype="<U1")
        seen = set()
        for car in cars:
            if len(car.symbol) != 1 or car.symbol == cls.EMPTY or car.symbol.isspace():
                raise PuzzleFormatError(f"invalid car symbol {car.symbol!r}")
            if car.symbol in seen:
                raise PuzzleFormatError(f"duplicate car symbol {car.symbol!r}")
            seen.add(car.symbol)

            for row, col in car.cells:
                if not (0 <= row < rows and 0 <= col < cols):
                    raise PuzzleFormatError(
                        f"car {car.symbol!r} leaves the {rows}x{cols} board at ({row}, {col})"
                    )
                if board[row, col] != cls.EMPTY:
                    raise PuzzleFormatError(
                        f"car {car.symbol!r} overlaps car {str(board[row, col])!r} at ({row}, {col})"
                    )
                board[row, col] = car.symbol
        return board

    @classmethod
    def from_text(cls, text: str) -> "JamConfig":
        """Parse dimensions, a car count, then one ``<symbol> r1 c1 r2 c2`` per car."""
        lines = read_lines(text)
        rows, cols = parse_dimensions(lines)
        if len(lines) < 2:
            raise PuzzleFormatError("missing car count", 2)
        (count,) = parse_ints(lines[1].split(), 1, "car count", 2)
        car_lines = lines[2:]
        if len(car_lines) != count:
            raise PuzzleFormatError(f"expected {count} cars, got {len(car_lines)}")

        cars = []
        for number, line in enumerate(car_lines, start=3):
            tokens = line.split()
            if not tokens:
                raise PuzzleFormatError("blank car line", number)
            symbol = tokens[0]
            if len(symbol) != 1:
                raise PuzzleFormatError(f"car symbol must be one character, got {symbol!r}", number)
            r1, c1, r2, c2 = parse_ints(tokens[1:], 4, f"car {symbol!r}", number)
            try:
                cars.append(Car.create(symbol, r1, c1, r2, c2))
            except ValueError as e:
                raise PuzzleFormatError(str(e), number) from e

        log.debug(f"Parsed {rows}x{cols} board with {len(cars)} cars")
        return cls(rows, cols, cars)

    @classmethod
    def from_file(cls, filename: Union[str, Path]) -> "JamConfig":
        return cls.from_text(read_description(filename))

    def to_text(self) -> str:
        lines = [f"{self.rows} {self.cols}", str(len(self.cars))]
        lines.extend(str(car) for car in self.cars)
        return "\n".join(lines) + "\n"

    def car_at(self, row: int, col: int) -> Optional[Car]:
        symbol = self.cell(row, col)
        if symbol is None or symbol == self.EMPTY:
            return None
        return next(car for car in self.cars if car.symbol == symbol)

    def goal_car(self) -> Optional[Car]:
        return next((car for car in self.cars if car.symbol == self.GOAL_CAR), None)

    def is_solution(self) -> bool:
        goal = self.goal_car()
        return goal is not None and goal.end[1] == self.cols - 1

    def get_neighbors(self) -> List["JamConfig"]:
        neighbors = []
        for index, car in enumerate(self.cars):
            for direction in car.axis.directions:
                if self.is_empty(*car.front(direction)):
                    neighbors.append(self._with_car(index, car.shifted(direction)))
        return neighbors

    def _with_car(self, index: int, car: Car) -> "JamConfig":
        cars = list(self.cars)
        cars[index] = car
        return JamConfig(self.rows, self.cols, cars)

    def validate_selection(self, row: int, col: int) -> MoveOutcome:
        """Is there a car at (row, col) to pick up?"""
        if not self.is_valid_position(row, col):
            return MoveOutcome.OUT_OF_BOUNDS
        if self.is_empty(row, col):
            return MoveOutcome.ILLEGAL
        return MoveOutcome.VALID

    def _classify(self, origin: Cell, dest: Cell) -> Tuple[MoveOutcome, Optional[Car], Optional[Direction]]:
        r1, c1 = origin
        r2, c2 = dest
        if not self.is_valid_position(r2, c2):
            return MoveOutcome.OUT_OF_BOUNDS, None, None
        car = self.car_at(r1, c1)
        if car is None:
            return MoveOutcome.ILLEGAL, None, None
        if not self.is_empty(r2, c2):
            return MoveOutcome.BLOCKED, car, None

        direction = Direction.from_delta(r2 - r1, c2 - c1)
        if direction not in car.axis.directions:
            return MoveOutcome.ILLEGAL, car, None
        # Only a single cell slide is accepted interactively.
        if car.front(direction) != (r2, c2):
            return MoveOutcome.ILLEGAL, car, direction
        return MoveOutcome.VALID, car, direction

    def validate_move(self, origin: Cell, dest: Cell) -> MoveOutcome:
        """Classify sliding the car at origin so that it reaches dest."""
        outcome, _, _ = self._classify(origin, dest)
        return outcome

    def move(self, origin: Cell, dest: Cell) -> MoveResult:
        """Validate a slide and build the resulting position if it is legal."""
        outcome, car, direction = self._classify(origin, dest)
        if outcome != MoveOutcome.VALID:
            return MoveResult(outcome)
        return MoveResult(outcome, self._with_car(self.cars.index(car), car.shifted(direction)))
