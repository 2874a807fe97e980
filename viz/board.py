# viz/board.py  (render-from-state helpers shared by every frontend)
from __future__ import annotations
from typing import List, Tuple
import numpy as np
from core.interfaces import Snapshot

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3

CONTROLS_HINT = "WASD/arrows: Move | ESC: Quit"
GAME_OVER_TITLE = " Game Over "
GAME_OVER_BOX = (36, 11)   # w, h including border

def board_grid(s: Snapshot) -> np.ndarray:
    """(grid_h, grid_w) int8 cell codes. Snake drawn over food, head over body."""
    grid = np.zeros((s.grid_h, s.grid_w), dtype=np.int8)
    if s.food is not None:
        fx, fy = s.food
        grid[fy, fx] = FOOD
    for (x, y) in s.snake[1:]:
        grid[y, x] = BODY
    hx, hy = s.snake[0]
    grid[hy, hx] = HEAD
    return grid

def board_rows(s: Snapshot, snake_glyph: str = "●", food_glyph: str = "●") -> List[str]:
    # two columns per cell keeps the board roughly square in a terminal
    cells = {
        EMPTY: "  ",
        BODY: snake_glyph + " ",
        HEAD: snake_glyph + " ",
        FOOD: food_glyph + " ",
    }
    return ["".join(cells[int(c)] for c in row) for row in board_grid(s)]

def playing_title(s: Snapshot) -> str:
    return f" Snake - Score: {s.score} "

def game_over_lines(s: Snapshot) -> List[str]:
    return [
        "",
        "GAME OVER",
        "",
        f"Highest Score: {s.high_score}",
        f"Your Score: {s.score}",
        "",
        "Press R to restart | ESC to quit",
    ]

def centered_rect(width: int, height: int, area_w: int, area_h: int) -> Tuple[int, int, int, int]:
    """(x, y, w, h) of a width x height box centered in the area, clamped to fit."""
    w = min(width, area_w)
    h = min(height, area_h)
    return (area_w - w) // 2, (area_h - h) // 2, w, h
