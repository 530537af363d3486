"""High score persistence across game sessions."""

import json
import logging
import os
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class HighScoreEntry:
    """A single finished game."""
    score: int
    date: str
    level_reached: int
    nukes_destroyed: int


class HighScoreManager:
    """Keeps the best scores in a JSON file."""

    MAX_SCORES = 10

    def __init__(self, filepath: str = "high_scores.json"):
        self.filepath = filepath
        self.scores: List[HighScoreEntry] = []
        self._load_scores()

    def _load_scores(self):
        if not os.path.exists(self.filepath):
            self.scores = []
            return
        try:
            with open(self.filepath, 'r') as f:
                data = json.load(f)
            self.scores = [HighScoreEntry(**entry) for entry in data]
        except (json.JSONDecodeError, OSError, TypeError) as e:
            logger.warning("Could not load high scores from %s: %s", self.filepath, e)
            self.scores = []

    def _save_scores(self):
        try:
            with open(self.filepath, 'w') as f:
                json.dump([asdict(entry) for entry in self.scores], f, indent=2)
        except OSError as e:
            logger.error("Could not save high scores to %s: %s", self.filepath, e)

    def add_score(self, score: int, level_reached: int, nukes_destroyed: int = 0) -> Optional[int]:
        """
        Record a finished game.

        Args:
            score: Final score
            level_reached: Level the game ended on
            nukes_destroyed: Enemy missiles destroyed over the whole game

        Returns:
            Rank (1-based) if the score made the table, None otherwise
        """
        entry = HighScoreEntry(
            score=score,
            date=datetime.now().strftime("%Y-%m-%d %H:%M"),
            level_reached=level_reached,
            nukes_destroyed=nukes_destroyed,
        )

        # Ties keep the older entry ahead
        position = len(self.scores)
        for i, existing in enumerate(self.scores):
            if score > existing.score:
                position = i
                break

        if position >= self.MAX_SCORES:
            return None

        self.scores.insert(position, entry)
        self.scores = self.scores[:self.MAX_SCORES]
        self._save_scores()
        return position + 1

    def get_high_scores(self) -> List[HighScoreEntry]:
        return list(self.scores)

    def get_top_score(self) -> Optional[int]:
        return self.scores[0].score if self.scores else None

    def is_high_score(self, score: int) -> bool:
        """Whether a finished game with this score would make the table."""
        if len(self.scores) < self.MAX_SCORES:
            return True
        return score > self.scores[-1].score
