# viz/renderer_headless.py
from __future__ import annotations
from typing import List
from core.interfaces import Snapshot

class HeadlessRenderer:
    """Keeps every drawn snapshot; no output."""
    def __init__(self):
        self.frames: List[Snapshot] = []
        self.closed = False
    def draw(self, snap: Snapshot) -> None:
        self.frames.append(snap)
    def close(self) -> None:
        self.closed = True
