from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

import numpy as np

from .grid import GameGrid
from .pieces import Piece, Shape
from .transform import Position


@dataclass
class GameState:
    """Every mutable field of a game in one place.

    The engine never edits a live state: a transition works on ``copy()``
    and the result replaces the previous state once it is complete.
    """

    board: GameGrid
    piece: Optional[Piece]
    position: Position
    next_piece: Piece
    score: int = 0
    level: int = 1
    rows_cleared_total: int = 0
    game_over: bool = False
    paused: bool = False

    def copy(self) -> "GameState":
        # Pieces are immutable values; only the board needs a deep copy
        return replace(self, board=self.board.copy())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "board": self.board.grid.tolist(),
            "piece": None if self.piece is None else {
                "kind": self.piece.kind.name,
                "shape": self.piece.shape.tolist(),
            },
            "position": list(self.position),
            "next_piece": {
                "kind": self.next_piece.kind.name,
                "shape": self.next_piece.shape.tolist(),
            },
            "score": self.score,
            "level": self.level,
            "rows_cleared_total": self.rows_cleared_total,
            "game_over": self.game_over,
            "paused": self.paused,
        }


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to renderers after each transition."""

    board: np.ndarray
    piece_shape: Optional[Shape]
    piece_value: int
    position: Position
    next_shape: Shape
    next_value: int
    score: int
    level: int
    rows_cleared_total: int
    game_over: bool
    paused: bool

    @classmethod
    def of(cls, state: GameState) -> "Snapshot":
        board = state.board.clone_state()
        board.flags.writeable = False
        piece_shape = None if state.piece is None else state.piece.shape.copy()
        return cls(
            board=board,
            piece_shape=piece_shape,
            piece_value=0 if state.piece is None else state.piece.value,
            position=state.position,
            next_shape=state.next_piece.shape.copy(),
            next_value=state.next_piece.value,
            score=state.score,
            level=state.level,
            rows_cleared_total=state.rows_cleared_total,
            game_over=state.game_over,
            paused=state.paused,
        )

    def composite(self) -> np.ndarray:
        """Board with the falling piece overlaid as negative cell values."""
        out = self.board.copy()
        if self.piece_shape is None or self.game_over:
            return out
        h, w = out.shape
        for r, c in zip(*np.nonzero(self.piece_shape)):
            row, col = self.position.row + int(r), self.position.col + int(c)
            if 0 <= row < h and 0 <= col < w:
                out[row, col] = -self.piece_value
        return out
