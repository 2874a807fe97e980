# viz/keyboard.py
from __future__ import annotations
import curses
from typing import Union
import pygame as pg
from core.interfaces import Command, Direction

ESC = 27

_CHAR_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "r": "restart",
}

_CURSES_KEYS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    ESC: "quit",
}

_PYGAME_KEYS = {
    pg.K_UP: Direction.UP,
    pg.K_DOWN: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT,
    pg.K_ESCAPE: "quit",
}

def map_key(key: Union[int, str]) -> Command:
    """Translate a curses key code (or a 1-char string) into a game command."""
    if isinstance(key, str):
        return _CHAR_KEYS.get(key.lower()) if len(key) == 1 else None
    if key in _CURSES_KEYS:
        return _CURSES_KEYS[key]
    if 0 <= key < 256:
        return _CHAR_KEYS.get(chr(key).lower())
    return None


class CursesKeyboard:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.stdscr.keypad(True)

    def poll(self, timeout_s: float) -> Command:
        # getch blocks at most timeout ms and returns -1 when nothing was pressed
        self.stdscr.timeout(max(0, int(timeout_s * 1000)))
        key = self.stdscr.getch()
        if key == -1:
            return None
        return map_key(key)


class PygameKeyboard:
    def poll(self, timeout_s: float) -> Command:
        ms = int(timeout_s * 1000)
        # wait(0) would block forever
        e = pg.event.wait(ms) if ms > 0 else pg.event.poll()
        if e.type == pg.QUIT:
            return "quit"
        if e.type == pg.KEYDOWN:
            if e.key in _PYGAME_KEYS:
                return _PYGAME_KEYS[e.key]
            return map_key(e.unicode) if e.unicode else None
        return None
