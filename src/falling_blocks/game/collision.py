from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from .grid import GameGrid
from .pieces import Shape
from .transform import Position


def occupied_cells(shape: Shape, position: Position) -> Iterator[Tuple[int, int]]:
    """Yield the board ``(row, col)`` covered by each occupied sub-cell."""
    for r, c in zip(*np.nonzero(shape)):
        yield position.row + int(r), position.col + int(c)


def collides(board: GameGrid, shape: Shape, position: Position) -> bool:
    """True if `shape` at `position` leaves the board or overlaps a settled cell.

    Shared by spawn, movement, rotation and landing checks: a piece has
    landed when moving it down one row collides.
    """
    for row, col in occupied_cells(shape, position):
        occupied = board.is_occupied(row, col)
        # None means out of range, which blocks just like a filled cell
        if occupied is None or occupied:
            return True
    return False
