from __future__ import annotations

import json
import logging
import os
from typing import List, Optional


logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 5


class HighScoreTable:
    """Best scores, highest first, stored as a JSON list in `path`.

    A missing or unreadable file yields an empty table.
    """

    def __init__(self, path: Optional[str] = None, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.path = path
        self.capacity = int(capacity)
        self._scores: List[int] = []
        if path is not None:
            self.load()

    @property
    def scores(self) -> List[int]:
        return list(self._scores)

    def load(self) -> List[int]:
        self._scores = []
        if self.path is None or not os.path.exists(self.path):
            return self.scores
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON list, got {type(data).__name__}")
            self._scores = self._normalise(int(v) for v in data)
        except (OSError, ValueError, TypeError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
        return self.scores

    def save(self) -> None:
        if self.path is None:
            return
        directory = os.path.dirname(self.path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as fh:
                json.dump(self._scores, fh)
        except OSError as exc:
            # Scores stay in memory; a game must not end on a disk error
            logger.warning("Could not write high score file %s: %s", self.path, exc)

    def add(self, score: int) -> Optional[int]:
        """Record `score`, persist, and return its 1-based rank or None."""
        score = int(score)
        self._scores = self._normalise(self._scores + [score])
        self.save()
        if score in self._scores:
            return self._scores.index(score) + 1
        return None

    def _normalise(self, scores) -> List[int]:
        return sorted(scores, reverse=True)[: self.capacity]
