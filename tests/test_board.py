import numpy as np
import pytest

from board import Board, NoEmptyCellsError, EMPTY, SNAKE, FOOD


def empty_from_grid(board):
    rows, cols = np.nonzero(board.grid == EMPTY)
    return {(int(r), int(c)) for r, c in zip(rows, cols)}


def test_new_board_is_all_empty():
    board = Board(10)
    assert board.grid.shape == (10, 10)
    assert board.empty_count == 100
    assert board.empty_cells() == {(r, c) for r in range(10) for c in range(10)}


def test_default_size_comes_from_config():
    assert Board().size == 10


def test_set_state_removes_and_restores_empty_cell():
    board = Board(5)
    board.set_cell_state((2, 3), SNAKE)
    assert board.state((2, 3)) == SNAKE
    assert (2, 3) not in board.empty_cells()
    assert board.empty_count == 24

    board.set_cell_state((2, 3), EMPTY)
    assert board.state((2, 3)) == EMPTY
    assert (2, 3) in board.empty_cells()
    assert board.empty_count == 25


def test_repeated_updates_do_not_duplicate_empty_cells():
    board = Board(4)
    board.set_cell_state((0, 0), EMPTY)
    board.set_cell_state((0, 0), EMPTY)
    board.set_cell_state((1, 1), FOOD)
    board.set_cell_state((1, 1), SNAKE)
    assert board.empty_count == 15
    assert board.empty_cells() == empty_from_grid(board)


def test_empty_cells_stay_consistent_with_grid():
    board = Board(6, rng=np.random.default_rng(7))
    rng = np.random.default_rng(99)
    for _ in range(500):
        cell = (int(rng.integers(6)), int(rng.integers(6)))
        board.set_cell_state(cell, int(rng.choice([EMPTY, SNAKE, FOOD])))
        assert board.empty_cells() == empty_from_grid(board)
        assert board.empty_count == len(empty_from_grid(board))


@pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (10, 0), (0, 10), (10, 10)])
def test_out_of_range_cell_fails_fast(cell):
    board = Board(10)
    with pytest.raises(IndexError):
        board.set_cell_state(cell, SNAKE)
    with pytest.raises(IndexError):
        board.state(cell)
    assert board.empty_count == 100


def test_unknown_state_is_rejected():
    board = Board(3)
    with pytest.raises(ValueError):
        board.set_cell_state((0, 0), 7)


def test_pick_random_empty_cell_returns_empty_cell():
    board = Board(5, rng=np.random.default_rng(0))
    for cell in [(0, 0), (0, 1), (4, 4)]:
        board.set_cell_state(cell, SNAKE)
    for _ in range(50):
        cell = board.pick_random_empty_cell()
        assert board.state(cell) == EMPTY


def test_pick_random_empty_cell_with_single_candidate():
    board = Board(3)
    for r in range(3):
        for c in range(3):
            board.set_cell_state((r, c), SNAKE)
    board.set_cell_state((1, 2), EMPTY)
    assert board.pick_random_empty_cell() == (1, 2)


def test_pick_random_empty_cell_covers_all_cells():
    board = Board(3, rng=np.random.default_rng(5))
    seen = {board.pick_random_empty_cell() for _ in range(500)}
    assert seen == board.empty_cells()


def test_full_board_raises_no_empty_cells():
    board = Board(2)
    for cell in [(0, 0), (0, 1), (1, 0), (1, 1)]:
        board.set_cell_state(cell, SNAKE)
    with pytest.raises(NoEmptyCellsError):
        board.pick_random_empty_cell()


def test_food_cells():
    board = Board(4)
    assert board.food_cells() == []
    board.set_cell_state((3, 1), FOOD)
    assert board.food_cells() == [(3, 1)]


def test_initialize_resets_board():
    board = Board(4)
    board.set_cell_state((0, 0), SNAKE)
    board.initialize(6)
    assert board.size == 6
    assert board.empty_count == 36
    assert not board.grid.any()
