"""
Game controller
Menu -> round -> high-score update -> "play again?".

The high-score store is loaded once by the caller and passed in, so the
controller never touches a global and tests can hand it a temp-file store.
"""

from typing import Callable, Optional

from .catalog import exit_choice, list_levels, level_for_choice
from .console import Console
from .engine import tries_phrase
from .random_client import draw_secret
from .schemas import DifficultyLevel, RecordOutcome
from .session import INVALID_NUMBER_MESSAGE, play_round
from .store import HighScoreStore

WELCOME_MESSAGE = "Welcome to the Guess the Number Game!"
FAREWELL_MESSAGE = "Thanks for playing! Goodbye."
INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."


class GameController:
    def __init__(
        self,
        store: HighScoreStore,
        console: Console,
        draw: Callable[[int], int] = draw_secret,
    ) -> None:
        self.store = store
        self.console = console
        self.draw = draw

    # --- Menu ---

    def show_menu(self) -> None:
        self.console.say("===== Pick your difficulty level =====")
        for index, level in enumerate(list_levels(), start=1):
            best = self.store.get_best(level.id)
            best_note = f" (best: {tries_phrase(best)})" if best is not None else ""
            self.console.say(
                f"{index}. {level.id.capitalize()} "
                f"(1-{level.upper_bound}, {level.max_tries} tries){best_note}"
            )
        self.console.say(f"{exit_choice()}. Exit")

    def select_difficulty(self) -> Optional[DifficultyLevel]:
        """Keeps asking until we get a level, or None when the player picks Exit."""
        while True:
            self.show_menu()
            choice = self.console.read_int("Enter your choice: ")

            if choice is None:
                self.console.say(INVALID_NUMBER_MESSAGE)
                self.console.say()
                continue

            if choice == exit_choice():
                return None

            level = level_for_choice(choice)
            if level is None:
                self.console.say(INVALID_CHOICE_MESSAGE)
                continue

            self.console.say(level.flavour_text)
            return level

    # --- Round ---

    def run_round(self, level: DifficultyLevel) -> Optional[int]:
        return play_round(level, self.console, self.draw)

    def report_score(self, level: DifficultyLevel, tries: int) -> RecordOutcome:
        outcome = self.store.record_if_best(level.id, tries)

        if outcome.is_new_record and outcome.previous_best is None:
            self.console.say(f"New record for {level.id}: {tries_phrase(tries)}!")
        elif outcome.is_new_record:
            self.console.say(
                f"New record for {level.id}: {tries_phrase(tries)} "
                f"(previous best {tries_phrase(outcome.previous_best)})!"
            )
        else:
            self.console.say(f"Your best for {level.id} is {tries_phrase(outcome.best)}.")

        if not outcome.saved:
            self.console.say("(Couldn't save your high score this time.)")
        return outcome

    # --- Replay ---

    def ask_play_again(self) -> bool:
        answer = self.console.ask("Play again? (y/n): ")
        return answer.strip().lower().startswith("y")

    def run(self) -> None:
        self.console.say(WELCOME_MESSAGE)

        while True:
            level = self.select_difficulty()
            if level is None:
                break

            tries = self.run_round(level)
            if tries is not None:
                self.report_score(level, tries)

            if not self.ask_play_again():
                break

        self.console.say(FAREWELL_MESSAGE)
