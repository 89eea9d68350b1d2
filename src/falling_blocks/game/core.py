from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, List, Optional

from .collision import collides
from .grid import GameGrid
from .pieces import Piece, PieceCatalog
from .rules import ScoringRules
from .state import GameState, Snapshot
from .transform import Position, rotate_clockwise, translate


logger = logging.getLogger(__name__)

GameOverListener = Callable[[int], None]


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    SOFT_DROP = 2
    ROTATE = 3
    NONE = 4
    TOGGLE_PAUSE = 5
    RESET = 6


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_row: int = 0

    def __post_init__(self) -> None:
        if self.width < 2:
            raise ValueError(f"board width must be at least 2, got {self.width}")
        if self.height < 1:
            raise ValueError(f"board height must be positive, got {self.height}")
        if not 0 <= self.spawn_row < self.height:
            raise ValueError(f"spawn row {self.spawn_row} is outside the board")

    @property
    def spawn_position(self) -> Position:
        return Position(self.spawn_row, self.width // 2 - 1)


class FallingBlocksGame:
    """Falling-block game state machine.

    Owns a single ``GameState``. Every command builds the next state from
    the current one and swaps it in when done, so a snapshot taken between
    calls never shows a half-applied landing. Commands issued while paused
    or after game over are ignored.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 catalog: Optional[PieceCatalog] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.catalog = catalog or PieceCatalog(rng=random.Random(self.config.random_seed))
        self._game_over_listeners: List[GameOverListener] = []
        self._check_catalog_fits()
        self.state: GameState
        self.reset()

    def _check_catalog_fits(self) -> None:
        empty = GameGrid(self.config.width, self.config.height)
        spawn = self.config.spawn_position
        for kind in self.catalog.kinds():
            if collides(empty, self.catalog.shape_of(kind), spawn):
                raise ValueError(
                    f"piece {kind.name} does not fit a {self.config.width}x{self.config.height} "
                    f"board at spawn position {tuple(spawn)}"
                )

    # --- read access -------------------------------------------------

    @property
    def grid(self) -> GameGrid:
        return self.state.board

    @property
    def current_piece(self) -> Optional[Piece]:
        return self.state.piece

    @property
    def position(self) -> Position:
        return self.state.position

    @property
    def next_piece(self) -> Piece:
        return self.state.next_piece

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def paused(self) -> bool:
        return self.state.paused

    @property
    def tick_period_ms(self) -> float:
        return self.rules.tick_period_ms(self.state.level)

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self.state)

    def add_game_over_listener(self, listener: GameOverListener) -> None:
        """Register `listener` to receive the final score when a game ends."""
        self._game_over_listeners.append(listener)

    # --- lifecycle ---------------------------------------------------

    def _initial_state(self) -> GameState:
        return GameState(
            board=GameGrid(self.config.width, self.config.height),
            piece=None,
            position=self.config.spawn_position,
            next_piece=self.catalog.random_piece(),
            score=0,
            level=self.rules.level_for_score(0),
        )

    def reset(self) -> None:
        state = self._initial_state()
        self._spawn_into(state)
        self.state = state
        logger.info("New game started (%dx%d)", self.config.width, self.config.height)

    start = reset

    def spawn(self) -> None:
        if self.state.game_over:
            return
        state = self.state.copy()
        self._spawn_into(state)
        self._commit(state)

    def _spawn_into(self, state: GameState) -> None:
        piece = state.next_piece
        position = self.config.spawn_position
        state.next_piece = self.catalog.random_piece()
        if collides(state.board, piece.shape, position):
            # The blocked piece is discarded; the board stays as the final picture
            state.piece = None
            state.game_over = True
            return
        state.piece = piece
        state.position = position
        logger.debug("Spawned %s at %s", piece.kind.name, tuple(position))

    def _commit(self, state: GameState) -> None:
        was_over = self.state.game_over
        self.state = state
        self._notify_if_over(was_over)

    def _notify_if_over(self, was_over: bool) -> None:
        if was_over or not self.state.game_over:
            return
        logger.info("Game over with score %d (level %d)", self.state.score, self.state.level)
        for listener in list(self._game_over_listeners):
            listener(self.state.score)

    # --- commands ----------------------------------------------------

    def _accepts_commands(self) -> bool:
        return not (self.state.paused or self.state.game_over) and self.state.piece is not None

    def _try_move(self, d_row: int, d_col: int) -> bool:
        if not self._accepts_commands():
            return False
        target = translate(self.state.position, d_row, d_col)
        if collides(self.state.board, self.state.piece.shape, target):
            return False
        self._commit(replace(self.state, position=target))
        return True

    def move_left(self) -> bool:
        return self._try_move(0, -1)

    def move_right(self) -> bool:
        return self._try_move(0, 1)

    def rotate(self) -> bool:
        if not self._accepts_commands():
            return False
        piece = self.state.piece
        rotated = rotate_clockwise(piece.shape)
        # No wall kicks: a blocked rotation is simply rejected
        if collides(self.state.board, rotated, self.state.position):
            return False
        self._commit(replace(self.state, piece=piece.with_shape(rotated)))
        return True

    def tick(self) -> bool:
        """One gravity step. Returns True if the piece landed."""
        if not self._accepts_commands():
            return False
        if self._try_move(1, 0):
            return False
        state = self.state.copy()
        self._land(state)
        self._commit(state)
        return True

    def soft_drop(self) -> bool:
        return self.tick()

    def _land(self, state: GameState) -> int:
        piece = state.piece
        state.board.merge(piece.shape, state.position, piece.value)
        state.piece = None
        rows = state.board.clear_completed_rows()
        logger.debug("Landed %s at %s", piece.kind.name, tuple(state.position))
        if rows:
            state.score += self.rules.score_for_rows(rows)
            state.rows_cleared_total += rows
            level = self.rules.level_for_score(state.score)
            logger.info("Cleared %d row(s), score %d", rows, state.score)
            if level != state.level:
                logger.info("Level up: %d -> %d", state.level, level)
            state.level = level
        self._spawn_into(state)
        return rows

    def toggle_pause(self) -> bool:
        """Flip the paused flag. Has no effect once the game is over."""
        if self.state.game_over:
            return False
        self._commit(replace(self.state, paused=not self.state.paused))
        logger.info("Game %s", "paused" if self.state.paused else "resumed")
        return True

    def step(self, action: Action) -> Snapshot:
        action = Action(action)
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.TOGGLE_PAUSE:
            self.toggle_pause()
        elif action == Action.RESET:
            self.reset()
        return self.snapshot()
