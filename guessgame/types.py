"""
Labels for clarity.
"""

from typing import Dict, Literal

DifficultyId = Literal["EASY", "MEDIUM", "HARD", "IMPOSSIBLE"]
RoundStatus = Literal["in_progress", "won", "lost"]
Feedback = Literal["correct", "close_low", "low", "close_high", "high"]
HighScores = Dict[DifficultyId, int]  # fewest tries used to win, per level
