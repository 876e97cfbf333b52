"""Current score, best score, and the file the best score is kept in."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

_RECORD = struct.Struct("<i")


def load_high_score(path: PathLike) -> int:
    """Read the saved best score; a missing or unreadable file counts as 0."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return 0
    if len(data) < _RECORD.size:
        return 0
    (value,) = _RECORD.unpack_from(data)
    return value


def save_high_score(path: PathLike, value: int) -> None:
    """Write ``value`` as the saved best score, replacing any earlier one."""
    Path(path).write_bytes(_RECORD.pack(value))


class Scoreboard:
    """Coins collected this run and the best run so far.

    With ``path`` set to ``None`` the best score lives in memory only.
    """

    def __init__(self, path: Optional[PathLike] = None) -> None:
        self.path = path
        self.score = 0
        self.best = load_high_score(path) if path is not None else 0

    def add(self, amount: int) -> None:
        """Add to the current score, raising the best score if it is beaten."""
        self.score += amount
        if self.score > self.best:
            self.best = self.score

    def reset(self) -> None:
        """Start a new run and store the best score."""
        self.score = 0
        if self.path is not None:
            save_high_score(self.path, self.best)

    def score_text(self) -> str:
        """The current score padded to three digits."""
        if self.score < 10:
            return f"00{self.score}"
        if self.score < 100:
            return f"0{self.score}"
        return str(self.score)

    def best_text(self) -> str:
        """The label shown for the best score."""
        return f"BEST: {self.best}"