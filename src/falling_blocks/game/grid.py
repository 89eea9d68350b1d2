from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from .pieces import Shape


logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class GameGrid:
    """Fixed-size 2D board of settled cells.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values correspond to tetromino indices for optional coloring.
    Cells are addressed as ``(row, col)`` with row 0 at the top.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def cells_wide(self) -> int:
        return self.width

    def cells_high(self) -> int:
        return self.height

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_occupied(self, row: int, col: int) -> Optional[bool]:
        """Occupancy of an in-bounds cell, or ``None`` when out of range."""
        if not self.is_inside(row, col):
            return None
        return bool(self.grid[row, col] != 0)

    def merge(self, shape: Shape, position: Coordinate, value: int) -> None:
        """Write `value` under every occupied sub-cell of `shape`.

        No bounds or collision check is done here; callers validate the
        placement with ``collides`` first.
        """
        origin_row, origin_col = position
        rows, cols = np.nonzero(shape)
        self.grid[rows + origin_row, cols + origin_col] = value

    def clear_completed_rows(self) -> int:
        full = np.all(self.grid != 0, axis=1)
        num = int(full.sum())
        if num == 0:
            return 0
        # Keep the survivors in order and pad the top with empty rows
        kept = self.grid[~full]
        new_rows = np.zeros((num, self.width), dtype=self.grid.dtype)
        self.grid = np.vstack((new_rows, kept))
        logger.debug("Cleared %d row(s)", num)
        return num

    def get_max_height(self) -> int:
        # row 0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.height - int(non_empty_rows[0])

    def count_holes(self) -> int:
        holes = 0
        for col in range(self.width):
            seen_block = False
            for cell in self.grid[:, col]:
                if cell != 0:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def copy(self) -> "GameGrid":
        new_grid = GameGrid(self.width, self.height)
        new_grid.grid = self.grid.copy()
        return new_grid
