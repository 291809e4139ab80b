"""High score storage behind a two-method port."""

from __future__ import annotations

import json
import os
from typing import Protocol

from .constants import HIGHSCORE_KEY


class HighScoreStore(Protocol):
    def get_high_score(self) -> int: ...

    def set_high_score(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process only."""

    def __init__(self, value: int = 0) -> None:
        self.value = int(value)

    def get_high_score(self) -> int:
        return self.value

    def set_high_score(self, value: int) -> None:
        self.value = int(value)


class JsonHighScoreStore:
    """
    Persists the high score as a single key in a JSON file.

    Missing or corrupt files read as 0; write failures are reported and
    swallowed so a read-only disk never stops the game.
    """

    def __init__(self, path: str, key: str = HIGHSCORE_KEY) -> None:
        self.path = path
        self.key = key

    def get_high_score(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            value = int(data.get(self.key, 0))
        except Exception as e:
            print(f"Failed to read high score from {self.path}: {e}")
            return 0
        return max(0, value)

    def set_high_score(self, value: int) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({self.key: int(value)}, f)
        except Exception as e:
            print(f"Failed to save high score to {self.path}: {e}")
