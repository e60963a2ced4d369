"""
One round of the game.
- GuessSession holds the round state and applies guesses (no I/O).
- play_round drives a GuessSession from the console.

States: in_progress -> won | lost. Only parsable integers reach submit(),
so a typo never costs the player an attempt.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .console import Console
from .engine import (
    attempts_phrase,
    evaluate_guess,
    feedback_message,
    range_percentage,
    tries_phrase,
)
from .random_client import draw_secret
from .schemas import DifficultyLevel
from .types import Feedback, RoundStatus

LAST_ATTEMPT_WARNING = "** THIS IS YOUR LAST ATTEMPT! GUESS WISELY! **"
INVALID_NUMBER_MESSAGE = "Error: Please enter a valid integer."


class RoundOverError(RuntimeError):
    """Raised when a guess is submitted after the round has ended."""


@dataclass
class GuessEntry:
    attempt: int
    guess: int
    feedback: Feedback
    message: str


@dataclass
class GuessSession:
    level: DifficultyLevel
    secret: int
    tries_used: int = 0
    status: RoundStatus = "in_progress"
    history: List[GuessEntry] = field(default_factory=list)

    @classmethod
    def start(
        cls,
        level: DifficultyLevel,
        draw: Callable[[int], int] = draw_secret,
    ) -> "GuessSession":
        return cls(level=level, secret=draw(level.upper_bound))

    @property
    def attempts_left(self) -> int:
        return self.level.max_tries - self.tries_used

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"

    @property
    def is_last_attempt(self) -> bool:
        # look-ahead: true while waiting for the final allowed guess
        return not self.is_over and self.attempts_left == 1

    @property
    def result(self) -> Optional[int]:
        """Attempts used on a win, None otherwise."""
        if self.status == "won":
            return self.tries_used
        return None

    def submit(self, guess: int) -> GuessEntry:
        if self.is_over:
            raise RoundOverError(f"Round already {self.status}. No more guesses allowed.")

        self.tries_used += 1
        feedback = evaluate_guess(self.secret, guess)

        if feedback == "correct":
            self.status = "won"
            message = (
                "Congratulations! You've guessed the correct number in "
                f"{tries_phrase(self.tries_used)}."
            )
        else:
            message = feedback_message(feedback)
            if self.tries_used >= self.level.max_tries:
                self.status = "lost"

        entry = GuessEntry(
            attempt=self.tries_used,
            guess=guess,
            feedback=feedback,
            message=message,
        )
        self.history.append(entry)
        return entry

    def loss_summary(self) -> List[str]:
        percent = range_percentage(self.secret, self.level.upper_bound)
        return [
            f"Better luck next time. The correct number was {self.secret} :-(",
            f"{self.secret} was {percent}% of the way through the range "
            f"1-{self.level.upper_bound}.",
        ]


def play_round(
    level: DifficultyLevel,
    console: Console,
    draw: Callable[[int], int] = draw_secret,
) -> Optional[int]:
    """Run one interactive round. Returns the attempt count on a win, None on a loss."""
    session = GuessSession.start(level, draw)

    console.say(f"I'm thinking of a number between 1 and {level.upper_bound}.")
    console.say(f"You have {attempts_phrase(level.max_tries)}.")

    while not session.is_over:
        if session.is_last_attempt:
            console.say(LAST_ATTEMPT_WARNING)

        attempt = session.tries_used + 1
        guess = console.read_int(f"(Attempt {attempt}) Enter your guess: ")
        if guess is None:
            # retry without penalty
            console.say(INVALID_NUMBER_MESSAGE)
            continue

        entry = session.submit(guess)
        if session.is_over:
            console.say(f"\t(Attempt {entry.attempt}): {entry.message}")
        else:
            console.say(
                f"\t(Attempt {entry.attempt}): {entry.message} Try again. "
                f"({attempts_phrase(session.attempts_left)} left)"
            )

    if session.status == "lost":
        for line in session.loss_summary():
            console.say(line)

    return session.result
