# config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_w: int = 20
    grid_h: int = 20
    start_len: int = 3
    seed: Optional[int] = None

    # speed: interval shrinks by speed_step_ms per food, floored at min_tick_ms
    base_tick_ms: int = 200
    min_tick_ms: int = 50
    speed_step_ms: int = 5

    # persistence
    high_score_path: Optional[str] = "highestscore.txt"
    log_path: Optional[str] = None      # CSV, one row per finished game

    # frontend
    ui: Literal["terminal", "window"] = "terminal"
    snake_glyph: str = "●"
    food_glyph: str = "●"

    # window render
    render_cell: int = 24
    render_title: str = "Snake"
    render_show_hud: bool = True

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
