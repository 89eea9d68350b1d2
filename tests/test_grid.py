import numpy as np

from falling_blocks.game import GameGrid, Position


def test_dimensions():
    grid = GameGrid(10, 20)
    assert grid.cells_wide() == 10
    assert grid.cells_high() == 20
    assert grid.grid.shape == (20, 10)


def test_is_occupied_distinguishes_out_of_range():
    grid = GameGrid(10, 20)
    grid.grid[5, 3] = 2
    assert grid.is_occupied(5, 3) is True
    assert grid.is_occupied(5, 4) is False
    assert grid.is_occupied(-1, 0) is None
    assert grid.is_occupied(20, 0) is None
    assert grid.is_occupied(0, 10) is None


def test_merge_writes_value_and_keeps_no_reference():
    grid = GameGrid(10, 20)
    shape = np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8)
    grid.merge(shape, Position(18, 2), 3)
    assert grid.grid[18, 2:5].tolist() == [3, 3, 3]
    assert grid.grid[19, 2:5].tolist() == [0, 3, 0]
    shape[:] = 0
    assert int(np.count_nonzero(grid.grid)) == 4


def test_clear_completed_rows_shifts_remaining_rows_down():
    grid = GameGrid(4, 6)
    grid.grid[5] = [1, 1, 1, 1]
    grid.grid[4] = [2, 0, 0, 0]
    grid.grid[3] = [3, 3, 3, 3]
    grid.grid[2] = [0, 0, 4, 0]

    assert grid.clear_completed_rows() == 2

    assert grid.grid.shape == (6, 4)
    assert grid.grid[5].tolist() == [2, 0, 0, 0]
    assert grid.grid[4].tolist() == [0, 0, 4, 0]
    assert not grid.grid[:4].any()
    assert not np.all(grid.grid != 0, axis=1).any()


def test_clear_completed_rows_without_full_rows():
    grid = GameGrid(4, 4)
    grid.grid[3] = [1, 1, 0, 1]
    before = grid.clone_state()
    assert grid.clear_completed_rows() == 0
    assert np.array_equal(grid.grid, before)


def test_height_and_holes():
    grid = GameGrid(3, 4)
    grid.grid[2, 1] = 1
    grid.grid[3, 0] = 1
    assert grid.get_max_height() == 2
    assert grid.count_holes() == 1
    assert GameGrid(3, 4).get_max_height() == 0


def test_copy_is_independent():
    grid = GameGrid(3, 3)
    clone = grid.copy()
    clone.grid[0, 0] = 5
    assert grid.grid[0, 0] == 0
