# viz/renderer_terminal.py
from __future__ import annotations
import curses
from typing import Optional
from config import AppConfig
from core.interfaces import Snapshot
from viz.board import (
    BODY, EMPTY, FOOD, HEAD,
    CONTROLS_HINT, GAME_OVER_BOX, GAME_OVER_TITLE,
    board_grid, board_rows, centered_rect, game_over_lines, playing_title,
)
import viz.renderer_colors as theme

class CursesRenderer:
    """Draws snapshots onto a curses window. Setup/teardown belongs to curses.wrapper."""

    def __init__(self, stdscr, cfg: AppConfig):
        self.stdscr = stdscr
        self.cfg = cfg
        self._attrs = {}
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal can't hide the cursor
        self._init_colors()

    def _init_colors(self) -> None:
        plain = curses.A_NORMAL
        self._attrs = {
            HEAD: curses.A_BOLD, BODY: plain, FOOD: curses.A_BOLD,
            "dim": curses.A_DIM, "alert": curses.A_BOLD, "text": plain,
        }
        if not curses.has_colors():
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            bg = -1
        except curses.error:
            bg = curses.COLOR_BLACK
        curses.init_pair(theme.PAIR_HEAD, curses.COLOR_GREEN, bg)
        curses.init_pair(theme.PAIR_BODY, curses.COLOR_GREEN, bg)
        curses.init_pair(theme.PAIR_FOOD, curses.COLOR_RED, bg)
        curses.init_pair(theme.PAIR_DIM, curses.COLOR_WHITE, bg)
        curses.init_pair(theme.PAIR_ALERT, curses.COLOR_RED, bg)
        self._attrs = {
            HEAD: curses.color_pair(theme.PAIR_HEAD),
            BODY: curses.color_pair(theme.PAIR_BODY) | curses.A_BOLD,   # reads as light green
            FOOD: curses.color_pair(theme.PAIR_FOOD),
            "dim": curses.color_pair(theme.PAIR_DIM) | curses.A_DIM,
            "alert": curses.color_pair(theme.PAIR_ALERT) | curses.A_BOLD,
            "text": plain,
        }

    def draw(self, s: Snapshot) -> None:
        self.stdscr.erase()
        if s.game_over:
            self._draw_game_over(s)
        else:
            self._draw_board(s)
        self.stdscr.refresh()

    def close(self) -> None:
        # curses.wrapper restores the terminal
        pass

    # internals
    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        h, w = self.stdscr.getmaxyx()
        if y < 0 or y >= h or x >= w or not text:
            return
        if x < 0:
            text, x = text[-x:], 0
        text = text[: w - x]
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass  # writing the bottom-right cell moves the cursor off-screen

    def _box(self, x: int, y: int, w: int, h: int, title: Optional[str] = None) -> None:
        if w < 2 or h < 2:
            return
        top = "┌" + "─" * (w - 2) + "┐"
        if title and len(title) <= w - 2:
            start = (w - len(title)) // 2
            top = top[:start] + title + top[start + len(title):]
        self._put(y, x, top)
        for row in range(y + 1, y + h - 1):
            self._put(row, x, "│")
            self._put(row, x + w - 1, "│")
        self._put(y + h - 1, x, "└" + "─" * (w - 2) + "┘")

    def _draw_board(self, s: Snapshot) -> None:
        area_h, area_w = self.stdscr.getmaxyx()
        x, y, w, h = centered_rect(s.grid_w * 2 + 2, s.grid_h + 2, area_w, area_h)
        self._box(x, y, w, h, playing_title(s))

        # text comes from board_rows, the grid codes only pick the color
        grid = board_grid(s)
        text_rows = board_rows(s, self.cfg.snake_glyph, self.cfg.food_glyph)
        rows = min(s.grid_h, h - 2)
        cols = min(s.grid_w, (w - 2) // 2)
        for gy in range(rows):
            for gx in range(cols):
                code = int(grid[gy, gx])
                if code != EMPTY:
                    cell = text_rows[gy][gx * 2: gx * 2 + 2]
                    self._put(y + 1 + gy, x + 1 + gx * 2, cell.rstrip(), self._attrs[code])

        hint_y = y + h
        if hint_y < area_h:
            hx = max(0, (area_w - len(CONTROLS_HINT)) // 2)
            self._put(hint_y, hx, CONTROLS_HINT, self._attrs["dim"])

    def _draw_game_over(self, s: Snapshot) -> None:
        area_h, area_w = self.stdscr.getmaxyx()
        x, y, w, h = centered_rect(*GAME_OVER_BOX, area_w, area_h)
        self._box(x, y, w, h, GAME_OVER_TITLE)

        styles = ["text", "alert", "text", "dim", "text", "text", "dim"]
        for i, (line, style) in enumerate(zip(game_over_lines(s), styles)):
            if i >= h - 2:
                break
            lx = x + max(1, (w - len(line)) // 2)
            self._put(y + 1 + i, lx, line[: max(0, w - 2)], self._attrs[style])
