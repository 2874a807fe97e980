# core/snake_rules.py  (pure rules, no curses/pygame)
from __future__ import annotations
from typing import List, Optional
import random
from .interfaces import Cell, Direction, Phase, Snapshot
from config import AppConfig

def check_config(cfg: AppConfig) -> None:
    """Raise if cfg is not usable for a game (class passed, board too small for the snake)."""
    if isinstance(cfg, type):
        raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
    if cfg.start_len < 1 or cfg.grid_w // 2 - (cfg.start_len - 1) < 0 or cfg.grid_h < 1:
        raise ValueError(
            f"grid {cfg.grid_w}x{cfg.grid_h} cannot hold a starting snake of length {cfg.start_len}"
        )

class Rules:
    def __init__(self, cfg: AppConfig, high_score: int = 0):
        check_config(cfg)
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self.high_score = high_score
        self._reset_state()

    def _reset_state(self):
        cx, cy = self.cfg.grid_w // 2, self.cfg.grid_h // 2
        self.snake: List[Cell] = [(cx - i, cy) for i in range(self.cfg.start_len)]
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.score = 0
        self.tick_count = 0
        self.phase = Phase.PLAYING
        self.reason: Optional[str] = None
        self.food: Optional[Cell] = None
        self.spawn_food()

    def restart(self) -> Snapshot:
        """Fresh board; the high score carries over."""
        self._reset_state()
        return self.snapshot()

    def spawn_food(self) -> None:
        occ = set(self.snake)
        free = [(x, y) for y in range(self.cfg.grid_h) for x in range(self.cfg.grid_w) if (x, y) not in occ]
        if not free:
            self.food = None
            self.end_game("full")
            return
        self.food = self.rng.choice(free)

    def change_direction(self, direction: Direction) -> None:
        # compared against the applied direction, so two quick turns can't reverse
        if direction is not self.direction.opposite():
            self.next_direction = direction

    def tick(self) -> Snapshot:
        if self.phase is not Phase.PLAYING:
            return self.snapshot()

        self.direction = self.next_direction
        hx, hy = self.snake[0]
        dx, dy = self.direction.delta
        new_head = (hx + dx, hy + dy)
        self.tick_count += 1

        # collisions
        if not (0 <= new_head[0] < self.cfg.grid_w and 0 <= new_head[1] < self.cfg.grid_h):
            self.end_game("wall")
            return self.snapshot()
        if new_head in self.snake:
            self.end_game("self")
            return self.snapshot()

        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += 1
            self.spawn_food()
        else:
            self.snake.pop()
        return self.snapshot()

    def end_game(self, reason: str) -> None:
        if self.score > self.high_score:
            self.high_score = self.score
        self.phase = Phase.GAME_OVER
        self.reason = reason

    def is_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def tick_interval(self) -> float:
        """Seconds between ticks at the current score."""
        step = max(0, self.cfg.base_tick_ms - self.score * self.cfg.speed_step_ms)
        return max(step, self.cfg.min_tick_ms) / 1000.0

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            next_direction=self.next_direction,
            score=self.score,
            high_score=self.high_score,
            phase=self.phase,
            reason=self.reason,
            tick_count=self.tick_count,
            grid_w=self.cfg.grid_w,
            grid_h=self.cfg.grid_h,
        )
