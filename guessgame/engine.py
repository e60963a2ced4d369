"""
Pure game logic (no console, no storage).
For each guess we work out one piece of feedback:
- correct: the guess is the secret
- close_low / close_high: off by at most CLOSE_THRESHOLD
- low / high: further away than that

Equality is checked first, so a winning guess never gets a close hint.
"""

import re
from typing import Optional

from .types import Feedback

CLOSE_THRESHOLD = 5

FEEDBACK_MESSAGES = {
    "close_low": "CLOSE! But too low!",
    "low": "Too low!",
    "close_high": "CLOSE! But too high!",
    "high": "Too high!",
}

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

def parse_int(text: str) -> Optional[int]:
    """
    Plain decimal integers only, surrounding whitespace ignored.
    Example:
      " 42 " -> 42, "-3" -> -3
      "4.5", "1_0", "" -> None
    """
    text = text.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)

def is_close(secret: int, guess: int) -> bool:
    distance = abs(guess - secret)
    return 0 < distance <= CLOSE_THRESHOLD

def evaluate_guess(secret: int, guess: int) -> Feedback:
    """
    Example:
      secret = 50
      guess 45 -> "close_low"  (5 below)
      guess 20 -> "low"
      guess 52 -> "close_high" (2 above)
      guess 50 -> "correct"
    """
    if guess == secret:
        return "correct"
    if guess < secret:
        return "close_low" if is_close(secret, guess) else "low"
    return "close_high" if is_close(secret, guess) else "high"

def feedback_message(feedback: Feedback) -> str:
    if feedback == "correct":
        return "Correct!"
    return FEEDBACK_MESSAGES[feedback]

def tries_phrase(tries: int) -> str:
    # "1 try", "2 tries"
    if tries == 1:
        return "1 try"
    return f"{tries} tries"

def attempts_phrase(attempts: int) -> str:
    if attempts == 1:
        return "1 attempt"
    return f"{attempts} attempts"

def range_percentage(secret: int, upper_bound: int) -> str:
    """Where the secret sits in 1..upper_bound, as a percentage with one decimal."""
    if upper_bound < 1:
        raise ValueError("upper_bound must be positive.")
    return f"{secret / upper_bound * 100:.1f}"
