# viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional
import numpy as np
import pygame as pg
from config import AppConfig
from core.interfaces import Snapshot
from viz.board import BODY, FOOD, HEAD, board_grid, game_over_lines, playing_title
import viz.renderer_colors as theme

_CELL_COLORS = {HEAD: theme.HEAD, BODY: theme.BODY, FOOD: theme.FOOD}

class PygameRenderer:
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self._auto_flip = True
        self._font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.grid_w * self.cell, cfg.grid_h * self.cell))
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into a caller-owned surface (no window, no flip)."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)
        grid = board_grid(s)
        for y, x in np.argwhere(grid != 0):
            col = _CELL_COLORS[int(grid[y, x])]
            pg.draw.rect(surf, col, pg.Rect(int(x) * c, int(y) * c, c, c))

        if self.cfg.render_show_hud:
            txt = self._text(playing_title(s).strip(), theme.TEXT)
            surf.blit(txt, (6, 4))

        if s.game_over:
            self._draw_game_over(s)

        if self._auto_flip:
            pg.display.flip()

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self._font = None

    # internals
    def _text(self, text: str, color) -> pg.Surface:
        if self._font is None:
            self._font = pg.font.SysFont(None, 22)
        return self._font.render(text, True, color)

    def _draw_game_over(self, s: Snapshot) -> None:
        surf = self.surf
        shade = pg.Surface(surf.get_size(), pg.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        surf.blit(shade, (0, 0))
        lines = game_over_lines(s)
        colors = [theme.TEXT, theme.FOOD, theme.TEXT, theme.DIM, theme.TEXT, theme.TEXT, theme.DIM]
        line_h = 22
        top = (surf.get_height() - line_h * len(lines)) // 2
        for i, (line, col) in enumerate(zip(lines, colors)):
            if not line:
                continue
            txt = self._text(line, col)
            r = txt.get_rect()
            r.midtop = (surf.get_width() // 2, top + i * line_h)
            surf.blit(txt, r)
