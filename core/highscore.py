from __future__ import annotations
import os
from typing import Union

PathLike = Union[str, os.PathLike]

def load_high_score(path: PathLike) -> int:
    """Read the stored best score. Missing, unreadable or malformed files count as 0."""
    try:
        with open(path, "r") as f:
            raw = f.read().strip()
    except (OSError, UnicodeDecodeError):
        return 0
    try:
        value = int(raw)
    except ValueError:
        return 0
    return value if value >= 0 else 0

def save_high_score(path: PathLike, score: int) -> None:
    parent = os.path.dirname(os.fspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w") as f:
        f.write(str(int(score)))
