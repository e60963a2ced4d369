"""
High-score store
Keeps the best (lowest) winning attempt count per difficulty, in memory and
in a flat text file with one "<ID> <tries>" line per level.

The file is best-effort: a missing file just means no scores yet, and read
or write failures are logged as warnings instead of stopping the game.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .catalog import is_known_id
from .engine import parse_int
from .schemas import RecordOutcome
from .types import HighScores

logger = logging.getLogger(__name__)

DEFAULT_PATH = "highscores.txt"

def parse_scores(text: str) -> HighScores:
    """
    Turn file contents into a mapping, skipping anything malformed.
    Example:
      "EASY 4\\nMEDIUM seven\\nNOPE 3\\n" -> {"EASY": 4}
    """
    scores: HighScores = {}
    for line in text.splitlines():
        parts = line.split(" ")
        # exactly "<ID> <int>", single space
        if len(parts) != 2:
            continue
        difficulty_id, raw_tries = parts
        if not is_known_id(difficulty_id):
            continue
        tries = parse_int(raw_tries)
        if tries is None or tries < 1:
            continue
        # duplicate lines: keep the lowest
        previous = scores.get(difficulty_id)
        scores[difficulty_id] = tries if previous is None else min(previous, tries)
    return scores

def format_scores(scores: HighScores) -> str:
    lines = [f"{difficulty_id} {tries}\n" for difficulty_id, tries in scores.items()]
    return "".join(lines)


class HighScoreStore:
    def __init__(self, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self.scores: HighScores = {}

    def load(self) -> HighScores:
        """Replace the in-memory scores with whatever the file holds."""
        if not self.path.exists():
            logger.debug("No high-score file at %s yet", self.path)
            self.scores = {}
            return self.scores

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as error:
            logger.warning("Could not read high scores from %s: %s", self.path, error)
            self.scores = {}
            return self.scores

        self.scores = parse_scores(text)
        logger.debug("Loaded %d high score(s) from %s", len(self.scores), self.path)
        return self.scores

    def save(self, scores: Optional[HighScores] = None) -> bool:
        """
        Overwrite the file. Returns False (and logs) if the write failed.
        The new contents go to a sibling temp file that replaces the old one
        only once fully written, so a failed save keeps the previous scores.
        """
        if scores is None:
            scores = self.scores
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as handle:
                handle.write(format_scores(scores))
            os.replace(temp_path, self.path)
        except OSError as error:
            logger.warning("Could not save high scores to %s: %s", self.path, error)
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove %s", temp_path)
            return False
        logger.debug("Saved %d high score(s) to %s", len(scores), self.path)
        return True

    def get_best(self, difficulty_id: str) -> Optional[int]:
        return self.scores.get(difficulty_id)

    def record_if_best(self, difficulty_id: str, tries: int) -> RecordOutcome:
        """
        Only runtime write path. A lower tries count (or a first win) becomes
        the new best and is flushed to disk; anything else leaves the store and
        the file untouched. Invalid input raises ValueError before anything changes.
        """
        if not is_known_id(difficulty_id):
            raise ValueError(f"Unknown difficulty: {difficulty_id!r}")
        if tries < 1:
            raise ValueError(f"tries must be positive, got {tries}")

        previous_best = self.scores.get(difficulty_id)

        if previous_best is not None and tries >= previous_best:
            return RecordOutcome(
                difficulty=difficulty_id,
                tries=tries,
                is_new_record=False,
                previous_best=previous_best,
            )

        self.scores[difficulty_id] = tries
        saved = self.save()
        return RecordOutcome(
            difficulty=difficulty_id,
            tries=tries,
            is_new_record=True,
            previous_best=previous_best,
            saved=saved,
        )
