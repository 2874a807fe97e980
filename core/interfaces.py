# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional, Protocol, Union

Cell = Tuple[int, int]

class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Cell:
        return self.value

    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Optional[Cell]
    direction: Direction
    next_direction: Direction
    score: int
    high_score: int
    phase: Phase
    reason: str | None        # "wall" | "self" | "full"
    tick_count: int
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

# what an InputSource hands back: a direction, "quit", "restart" or None
Command = Union[Direction, str, None]

class Renderer(Protocol):
    def draw(self, snap: Snapshot) -> None: ...
    def close(self) -> None: ...

class InputSource(Protocol):
    def poll(self, timeout_s: float) -> Command: ...
