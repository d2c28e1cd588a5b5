from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
import pygame

from blocktris.game import BlockTrisGame
from .palette import color_for_value


def panel_lines(game: BlockTrisGame) -> List[str]:
    return [
        f"Score: {game.score}",
        f"Lines sent: {game.nb_lines}",
        f"Level: {game.current_level}",
    ]


class Renderer:
    def __init__(self, cell_size: int = 40, margin: int = 20, panel_width: int = 180) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, game: BlockTrisGame) -> Tuple[int, int]:
        board_w = game.grid.width * self.cell_size
        board_h = game.grid.height * self.cell_size
        return board_w + self.panel_width + self.margin * 3, board_h + self.margin * 2

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((0, 0, 0))
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                if v == 0:
                    continue
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(v), rect)
        return surf

    def _draw_panel(self, screen: pygame.Surface, game: BlockTrisGame, x: int) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 30)
        for i, text in enumerate(panel_lines(game)):
            txt = self._font.render(text, True, (255, 255, 255))
            screen.blit(txt, (x, self.margin + 70 + i * 35))

    def draw(self, screen: pygame.Surface, game: BlockTrisGame) -> None:
        grid_surf = self._grid_surface(game.get_state())
        screen.fill((255, 0, 0))
        border = pygame.Rect(
            self.margin - 10,
            self.margin - 10,
            grid_surf.get_width() + 20,
            grid_surf.get_height() + 20,
        )
        pygame.draw.rect(screen, (255, 255, 255), border)
        screen.blit(grid_surf, (self.margin, self.margin))
        self._draw_panel(screen, game, self.margin * 2 + grid_surf.get_width())
        pygame.display.flip()
