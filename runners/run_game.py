# runners/run_game.py
from __future__ import annotations
import curses, locale, os, time
from dataclasses import dataclass
from typing import Callable, Optional

from config import AppConfig
from core.game_log import CSVLogger, GAME_KEYS, make_game_logger
from core.highscore import load_high_score, save_high_score
from core.interfaces import Direction, InputSource, Renderer, Snapshot
from core.snake_rules import Rules
from viz.keyboard import CursesKeyboard, PygameKeyboard
from viz.renderer_pygame import PygameRenderer
from viz.renderer_terminal import CursesRenderer

@dataclass
class SessionSummary:
    games: int = 0
    best: int = 0
    save_error: Optional[str] = None

class GameLoop:
    """Fixed-interval tick loop: render, wait for input up to the next tick, tick."""

    def __init__(
        self,
        rules: Rules,
        renderer: Renderer,
        keyboard: InputSource,
        high_score_path: Optional[str] = None,
        on_game_over: Optional[Callable[[int, Snapshot], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.rules = rules
        self.renderer = renderer
        self.keyboard = keyboard
        self.high_score_path = high_score_path
        self.on_game_over = on_game_over
        self.clock = clock
        self.summary = SessionSummary(best=rules.high_score)

    def run(self) -> SessionSummary:
        last_tick = self.clock()
        was_playing = True
        while True:
            snap = self.rules.snapshot()
            self.renderer.draw(snap)

            if was_playing and snap.game_over:
                self._finish_game(snap)
                was_playing = False

            interval = self.rules.tick_interval()
            timeout = max(0.0, interval - (self.clock() - last_tick))

            try:
                cmd = self.keyboard.poll(timeout)
            except KeyboardInterrupt:
                # Ctrl-C is a quit key, not a crash
                cmd = "quit"
            if cmd == "quit":
                break
            if cmd == "restart":
                if self.rules.is_game_over():
                    self.rules.restart()
                    last_tick = self.clock()
                    was_playing = True
            elif isinstance(cmd, Direction):
                self.rules.change_direction(cmd)

            if self.clock() - last_tick >= interval:
                self.rules.tick()
                last_tick = self.clock()
        return self.summary

    def _finish_game(self, snap: Snapshot) -> None:
        self.summary.games += 1
        self.summary.best = max(self.summary.best, snap.high_score)
        if self.high_score_path:
            try:
                save_high_score(self.high_score_path, snap.high_score)
            except OSError as e:
                # can't print while curses owns the screen; reported on exit
                self.summary.save_error = f"{self.high_score_path}: {e}"
        if self.on_game_over is not None:
            self.on_game_over(self.summary.games, snap)


def _build_rules(cfg: AppConfig) -> Rules:
    high = load_high_score(cfg.high_score_path) if cfg.high_score_path else 0
    return Rules(cfg, high_score=high)

def _run(
    cfg: AppConfig,
    renderer: Renderer,
    keyboard: InputSource,
    clock: Callable[[], float] = time.monotonic,
) -> SessionSummary:
    logger = CSVLogger(cfg.log_path, fieldnames=GAME_KEYS) if cfg.log_path else None
    try:
        loop = GameLoop(
            _build_rules(cfg), renderer, keyboard,
            high_score_path=cfg.high_score_path,
            on_game_over=make_game_logger(logger) if logger else None,
            clock=clock,
        )
        return loop.run()
    finally:
        renderer.close()
        if logger:
            logger.close()

def run_terminal(cfg: AppConfig) -> SessionSummary:
    locale.setlocale(locale.LC_ALL, "")
    os.environ.setdefault("ESCDELAY", "25")   # otherwise ESC waits a full second
    # curses.wrapper handles cbreak mode, the alternate screen and teardown on error
    return curses.wrapper(lambda stdscr: _run(cfg, CursesRenderer(stdscr, cfg), CursesKeyboard(stdscr)))

def run_window(cfg: AppConfig) -> SessionSummary:
    rend = PygameRenderer()
    rend.open(cfg)
    return _run(cfg, rend, PygameKeyboard())

def main(cfg: AppConfig) -> SessionSummary:
    if cfg.ui == "window":
        return run_window(cfg)
    return run_terminal(cfg)
