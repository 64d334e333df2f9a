from pathlib import Path

import pytest

from puzzles.bfs_solver import BFSSolver
from puzzles.common.model import UpdateKind
from puzzles.common.outcomes import HintStatus, MoveOutcome
from puzzles.jam.model import JamModel

DATA_DIR = Path(__file__).resolve().parents[2] / "data" / "jam"


@pytest.fixture
def model():
    model = JamModel()
    model.load(DATA_DIR / "jam-1.txt")
    return model


class TestJamModel:
    def test_load(self, model):
        assert model.current_config.goal_car().start == (2, 0)
        assert model.selected is None

    def test_load_overlapping_cars(self, model, tmp_path):
        bad = tmp_path / "overlap.txt"
        bad.write_text("4 4\n2\nX 1 0 1 1\nA 0 1 2 1\n")
        previous = model.current_config

        update = model.load(bad)

        assert update.kind == UpdateKind.LOAD_FAILED
        assert "overlaps" in update.message
        assert model.current_config is previous

    def test_select_and_slide(self, model):
        model.select(2, 2)
        update = model.select(3, 2)

        assert update.kind == UpdateKind.MOVED
        assert update.message.startswith("Moved from (2, 2) to (3, 2).\n")
        assert model.current_config.car_at(3, 2).symbol == "A"

    def test_select_empty_cell(self, model):
        update = model.select(0, 0)

        assert update.kind == UpdateKind.REJECTED
        assert update.outcome == MoveOutcome.ILLEGAL
        assert update.message.startswith("No car at (0, 0)!\n")

    def test_slide_into_occupied_cell(self, model):
        model.select(2, 1)
        update = model.select(2, 2)

        assert update.outcome == MoveOutcome.BLOCKED
        assert update.message.startswith("Not a legal move: (2, 2) is occupied\n")

    def test_slide_off_board(self, model):
        model.select(2, 0)
        update = model.select(2, -1)

        assert update.outcome == MoveOutcome.OUT_OF_BOUNDS
        assert update.message.startswith("Not a legal move: (2, -1) is off the board\n")

    def test_slide_too_far(self, model):
        model.select(2, 2)
        update = model.select(5, 2)

        assert update.outcome == MoveOutcome.ILLEGAL
        assert update.message.startswith("Not a legal move\n")
        assert model.current_config == model.start_config

    def test_hint_on_single_move_puzzle(self):
        model = JamModel(BFSSolver())
        model.load(DATA_DIR / "jam-4.txt")

        update = model.hint()

        assert update.hint == HintStatus.NEXT_STEP
        assert model.current_config.is_solution()
        assert model.hint().hint == HintStatus.ALREADY_SOLVED

    def test_hint_without_solution(self):
        model = JamModel()
        model.load(DATA_DIR / "jam-2.txt")

        assert model.hint().message == "No solution found."

    def test_hints_follow_shortest_path(self, model):
        steps = 0
        while not model.current_config.is_solution():
            assert model.hint().hint == HintStatus.NEXT_STEP
            steps += 1
        assert steps == 7

    def test_reset(self, model):
        model.select(2, 2)
        model.select(3, 2)

        model.reset()

        assert model.current_config == model.start_config
        assert model.selected is None
