from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

from .interfaces import Snapshot

GAME_KEYS = ["game", "score", "high_score", "reason", "ticks", "length"]

class Logger(Protocol):
    def log(self, row: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, row: Dict[str, Any]) -> None:
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(row.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # don't crash on unseen keys
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(row)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def make_game_logger(logger: Logger) -> Callable[[int, Snapshot], None]:
    """
    Returns a function(game_idx, snap) -> None that writes one row for a
    finished game and flushes, so a crash mid-session keeps earlier games.
    """
    def _on_game_over(game_idx: int, snap: Snapshot) -> None:
        logger.log({
            "game": game_idx,
            "score": snap.score,
            "high_score": snap.high_score,
            "reason": snap.reason or "",
            "ticks": snap.tick_count,
            "length": len(snap.snake),
        })
        logger.flush()
    return _on_game_over
