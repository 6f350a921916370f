

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame


def color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (160, 0, 240),  # T
        2: (240, 160, 0),  # L
        3: (0, 0, 240),    # J
        4: (240, 0, 0),    # Z
        5: (0, 240, 0),    # S
        6: (0, 240, 240),  # I
        7: (240, 240, 0),  # O
    }
    color = palette.get(abs(v), (200, 200, 200))
    if v < 0:
        # Falling piece is drawn slightly brighter than settled blocks
        color = tuple(min(255, c + 15) for c in color)
    return color


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, status_height: int = 28) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.status_height = status_height
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        return (
            width * self.cell_size + self.margin * 2,
            height * self.cell_size + self.margin * 2 + self.status_height,
        )

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(int(state[y, x])), rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray, status: str = "") -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state), (self.margin, self.margin + self.status_height))
        if status:
            text = self._font.render(status, True, (230, 230, 230))
            screen.blit(text, (self.margin, self.margin // 2))
        pygame.display.flip()
