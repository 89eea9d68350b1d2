from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .pieces import Shape


class Position(NamedTuple):
    """Board coordinate of a shape's top-left corner. Never clamped."""

    row: int
    col: int


def rotate_clockwise(shape: Shape) -> Shape:
    # result[c][N-1-r] = shape[r][c]: transpose, then reverse each row
    return np.rot90(shape, 1, axes=(1, 0)).copy()


def translate(position: Position, d_row: int, d_col: int) -> Position:
    return Position(position.row + d_row, position.col + d_col)
