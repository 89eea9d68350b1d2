from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import FallingBlocksGame


class GravityClock:
    """Turns elapsed wall time into ``tick()`` calls.

    The front end owns the real timer and reports elapsed milliseconds via
    ``advance``. While the game is paused or over the clock is disabled:
    elapsed time is dropped rather than banked, and counting restarts from
    zero once the game is running again.
    """

    def __init__(self, game: "FallingBlocksGame") -> None:
        self.game = game
        self._elapsed_ms = 0.0

    @property
    def enabled(self) -> bool:
        return not (self.game.paused or self.game.game_over)

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    def reset(self) -> None:
        self._elapsed_ms = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Account for `elapsed_ms` and return how many ticks were fired."""
        if not self.enabled:
            self._elapsed_ms = 0.0
            return 0
        self._elapsed_ms += elapsed_ms
        ticks = 0
        # The period is re-read each time since a landing can raise the level
        while self.enabled and self._elapsed_ms >= self.game.tick_period_ms:
            self._elapsed_ms -= self.game.tick_period_ms
            self.game.tick()
            ticks += 1
        if not self.enabled:
            self._elapsed_ms = 0.0
        return ticks
