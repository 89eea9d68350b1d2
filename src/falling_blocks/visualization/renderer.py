from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import pygame

from falling_blocks.game import Snapshot


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (240, 240, 0),  # O
        3: (160, 0, 240),  # T
        4: (0, 240, 0),    # S
        5: (240, 0, 0),    # Z
        6: (0, 0, 240),    # J
        7: (240, 160, 0),  # L
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    """Draws a game snapshot: board, next piece preview and side panel."""

    def __init__(self, cell_size: int = 30, margin: int = 20, panel_cells: int = 7) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_cells = panel_cells
        self._font = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        board_w = width * self.cell_size
        board_h = height * self.cell_size
        return board_w + self.panel_cells * self.cell_size + self.margin * 3, board_h + self.margin * 2

    def _font_obj(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 26)
        return self._font

    def _cells_surface(self, cells: np.ndarray, cell_size: int) -> pygame.Surface:
        h, w = cells.shape
        surf = pygame.Surface((w * cell_size, h * cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(x * cell_size, y * cell_size, cell_size - 1, cell_size - 1)
                pygame.draw.rect(surf, _color_for_value(int(cells[y, x])), rect)
        return surf

    def _text(self, screen: pygame.Surface, text: str, pos: Tuple[int, int],
              color: Tuple[int, int, int] = (230, 230, 230)) -> None:
        screen.blit(self._font_obj().render(text, True, color), pos)

    def draw(self, screen: pygame.Surface, snap: Snapshot, high_scores: Sequence[int] = (),
             hints: Sequence[str] = ()) -> None:
        screen.fill((10, 10, 14))
        board_surf = self._cells_surface(snap.composite(), self.cell_size)
        screen.blit(board_surf, (self.margin, self.margin))

        x0 = self.margin * 2 + board_surf.get_width()
        y = self.margin
        self._text(screen, "Next", (x0, y))
        y += 24
        preview = np.where(snap.next_shape != 0, snap.next_value, 0)
        preview_surf = self._cells_surface(preview, self.cell_size // 2 + 4)
        screen.blit(preview_surf, (x0, y))
        y += preview_surf.get_height() + 20

        for line in (f"Score: {snap.score}", f"Level: {snap.level}", f"Rows: {snap.rows_cleared_total}"):
            self._text(screen, line, (x0, y))
            y += 24
        y += 12
        self._text(screen, "High Scores", (x0, y))
        y += 24
        for rank, value in enumerate(high_scores, start=1):
            self._text(screen, f"{rank}. {value}", (x0, y))
            y += 22
        y += 12
        for hint in hints:
            self._text(screen, hint, (x0, y), (150, 150, 160))
            y += 22

        if snap.game_over:
            self._text(screen, "Game Over", (self.margin + 4, 2), (255, 100, 100))
        elif snap.paused:
            self._text(screen, "Paused", (self.margin + 4, 2), (240, 240, 120))
        pygame.display.flip()
