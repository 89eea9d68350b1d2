import numpy as np
import pytest

from falling_blocks.game import GameGrid, Position, all_shapes, collides, occupied_cells, rotate_clockwise

T_SHAPE = np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8)


def test_empty_board_in_bounds():
    board = GameGrid(10, 20)
    assert not collides(board, T_SHAPE, Position(0, 0))
    assert not collides(board, T_SHAPE, Position(18, 7))


@pytest.mark.parametrize("position", [
    Position(-1, 4),   # above the top
    Position(19, 4),   # lower row hangs below the floor
    Position(5, -1),   # left wall
    Position(5, 8),    # right wall
    Position(100, 100),
])
def test_out_of_bounds_always_collides(position):
    assert collides(GameGrid(10, 20), T_SHAPE, position)


def test_overlap_with_settled_cell():
    board = GameGrid(10, 20)
    board.grid[11, 5] = 1
    assert collides(board, T_SHAPE, Position(10, 4))
    # Only occupied sub-cells count; (11, 4) is an empty corner of the T
    board.grid[11, 5] = 0
    board.grid[11, 4] = 1
    assert not collides(board, T_SHAPE, Position(10, 4))


def test_empty_rows_may_hang_outside_the_board():
    shape = np.array([[0, 0], [1, 1]], dtype=np.int8)
    assert not collides(GameGrid(4, 4), shape, Position(-1, 0))


def test_occupied_cells():
    assert sorted(occupied_cells(T_SHAPE, Position(2, 3))) == [(2, 3), (2, 4), (2, 5), (3, 4)]


def test_every_piece_and_rotation_fits_at_spawn():
    board = GameGrid(10, 20)
    spawn = Position(0, 10 // 2 - 1)
    for shape in all_shapes():
        for _ in range(4):
            assert not collides(board, shape, spawn)
            shape = rotate_clockwise(shape)
