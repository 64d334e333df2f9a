from pathlib import Path

import pytest

from puzzles.common.configuration import Direction
from puzzles.common.errors import PuzzleFormatError
from puzzles.common.outcomes import MoveOutcome
from puzzles.hoppers.board import CellType, HoppersConfig, jump_distance

DATA_DIR = Path(__file__).resolve().parents[2] / "data" / "hoppers"

THREE_GREEN = """5 5
. * . * .
* G * . *
R * G * .
* . * G *
. * . * .
"""


@pytest.fixture
def board():
    return HoppersConfig.from_text(THREE_GREEN)


class TestHoppersParsing:
    def test_parse_board(self, board):
        assert board.rows == 5
        assert board.cols == 5
        assert board.cell(2, 0) == CellType.RED.value
        assert board.cell(1, 1) == CellType.GREEN.value
        assert board.cell(0, 1) == CellType.BLOCKED.value
        assert board.count("G") == 3

    def test_to_text_round_trip(self, board):
        assert board.to_text() == THREE_GREEN
        assert HoppersConfig.from_text(board.to_text()) == board

    def test_str_has_one_line_per_row(self, board):
        lines = str(board).split("\n")
        assert len(lines) == 5
        assert lines[2] == "R * G * ."

    def test_trailing_blank_lines_ignored(self):
        config = HoppersConfig.from_text("1 3\nR . G\n\n\n")
        assert config.cols == 3

    def test_from_file(self):
        config = HoppersConfig.from_file(DATA_DIR / "hoppers-1.txt")
        assert config.find_cells("R") == [(0, 0)]
        assert config.find_cells("G") == [(0, 2)]

    def test_wrong_row_count(self):
        with pytest.raises(PuzzleFormatError, match="expected 3 board rows"):
            HoppersConfig.from_text("3 3\n. . .\n. . .\n")

    def test_wrong_cell_count(self):
        with pytest.raises(PuzzleFormatError) as excinfo:
            HoppersConfig.from_text("2 2\n. .\n. . .\n")
        assert excinfo.value.line == 3

    def test_unknown_symbol(self):
        with pytest.raises(PuzzleFormatError) as excinfo:
            HoppersConfig.from_text("2 2\n. X\n. .\n")
        assert excinfo.value.line == 2
        assert "'X'" in str(excinfo.value)

    @pytest.mark.parametrize("text", ["", "a b\n. .\n", "0 3\n", "3\n. . .\n"])
    def test_bad_header(self, text):
        with pytest.raises(PuzzleFormatError):
            HoppersConfig.from_text(text)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            HoppersConfig.from_text("")


class TestHoppersIdentity:
    def test_equal_boards_hash_equal(self, board):
        other = HoppersConfig.from_text(THREE_GREEN)

        assert board == other
        assert hash(board) == hash(other)
        assert len({board, other}) == 1

    def test_different_boards_not_equal(self, board):
        other = HoppersConfig.from_file(DATA_DIR / "hoppers-2.txt")
        assert board != other

    def test_not_equal_to_other_types(self, board):
        assert board != str(board)

    def test_grid_is_read_only(self, board):
        assert not board.grid.flags.writeable
        with pytest.raises(ValueError):
            board.grid[0, 0] = "G"


class TestHoppersNeighbors:
    def test_single_jump_scenario(self):
        start = HoppersConfig.from_text("1 5\nR . G . .\n")

        neighbors = start.get_neighbors()

        assert len(neighbors) == 1
        assert str(neighbors[0]) == ". . . . R"
        assert neighbors[0].is_solution()

    def test_jumping_frog_keeps_its_colour(self):
        start = HoppersConfig.from_text("1 5\nG . G . .\n")

        (neighbor,) = start.get_neighbors()

        assert str(neighbor) == ". . . . G"
        assert not neighbor.is_solution()

    def test_each_jump_removes_one_green_frog(self, board):
        greens = board.count("G")
        neighbors = board.get_neighbors()

        assert neighbors
        for neighbor in neighbors:
            assert neighbor.count("G") == greens - 1
            assert neighbor.count("R") == 1

    def test_neighbors_leave_board_untouched(self, board):
        before = str(board)
        board.get_neighbors()
        assert str(board) == before

    def test_red_frog_is_never_jumped(self):
        start = HoppersConfig.from_text("1 5\nG . R . .\n")
        assert start.get_neighbors() == []

    def test_diagonal_and_orthogonal_jumps(self, board):
        neighbors = board.get_neighbors()
        red_cells = {tuple(n.find_cells("R")[0]) for n in neighbors if n.count("G") == 2}

        # over (1, 1) diagonally and over (2, 2) along the row
        assert (0, 2) in red_cells
        assert (2, 4) in red_cells

    def test_jump_distances(self):
        assert jump_distance(Direction.UP) == 4
        assert jump_distance(Direction.DOWN_LEFT) == 2


class TestHoppersSolution:
    def test_single_red_frog_is_solution(self):
        assert HoppersConfig.from_text("1 3\n. R .\n").is_solution()

    def test_green_frog_left_is_not_solution(self):
        assert not HoppersConfig.from_text("1 3\nG R .\n").is_solution()

    def test_no_red_frog_is_not_solution(self):
        assert not HoppersConfig.from_text("1 3\n. . .\n").is_solution()


class TestHoppersMoves:
    def test_selection(self, board):
        assert board.validate_selection(2, 0) == MoveOutcome.VALID
        assert board.validate_selection(1, 1) == MoveOutcome.VALID
        assert board.validate_selection(0, 0) == MoveOutcome.ILLEGAL
        assert board.validate_selection(0, 1) == MoveOutcome.ILLEGAL
        assert board.validate_selection(5, 0) == MoveOutcome.OUT_OF_BOUNDS

    def test_valid_diagonal_move(self, board):
        assert board.validate_move((2, 0), (0, 2)) == MoveOutcome.VALID

    def test_valid_orthogonal_move(self, board):
        assert board.validate_move((2, 0), (2, 4)) == MoveOutcome.VALID

    def test_destination_off_board(self, board):
        assert board.validate_move((2, 0), (2, 5)) == MoveOutcome.OUT_OF_BOUNDS
        assert board.validate_move((0, 0), (-1, 0)) == MoveOutcome.OUT_OF_BOUNDS

    def test_no_frog_at_origin(self, board):
        assert board.validate_move((0, 0), (2, 2)) == MoveOutcome.ILLEGAL

    def test_bad_geometry(self, board):
        assert board.validate_move((2, 0), (2, 1)) == MoveOutcome.ILLEGAL
        assert board.validate_move((2, 0), (2, 2)) == MoveOutcome.ILLEGAL
        assert board.validate_move((2, 0), (4, 3)) == MoveOutcome.ILLEGAL

    def test_destination_blocked_by_frog(self, board):
        assert board.validate_move((1, 1), (3, 3)) == MoveOutcome.BLOCKED

    def test_destination_is_blocked_cell(self):
        config = HoppersConfig.from_text("1 5\nR . G . *\n")
        assert config.validate_move((0, 0), (0, 4)) == MoveOutcome.ILLEGAL

    def test_nothing_to_jump_over(self, board):
        assert board.validate_move((2, 0), (4, 2)) == MoveOutcome.ILLEGAL

    def test_cannot_jump_red_frog(self):
        config = HoppersConfig.from_text("1 5\nG . R . .\n")
        assert config.validate_move((0, 0), (0, 4)) == MoveOutcome.ILLEGAL

    def test_same_cell_is_blocked(self, board):
        assert board.validate_move((2, 0), (2, 0)) == MoveOutcome.BLOCKED

    def test_move_applies_jump(self, board):
        result = board.move((2, 0), (0, 2))

        assert result.is_valid
        assert result.config.cell(0, 2) == "R"
        assert result.config.cell(1, 1) == "."
        assert result.config.cell(2, 0) == "."
        assert result.config in board.get_neighbors()
        # the source position is unchanged
        assert board.cell(2, 0) == "R"
        assert board.cell(1, 1) == "G"

    def test_rejected_move_has_no_config(self, board):
        result = board.move((2, 0), (2, 1))

        assert not result.is_valid
        assert result.outcome == MoveOutcome.ILLEGAL
        assert result.config is None
