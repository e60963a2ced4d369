"""
- Provide a store fixture backed by a temp file (never the real highscores.txt)
- Provide a scripted console: feeds canned input lines and records everything printed
- Provide a helper that pins the secret number so rounds are predictable
"""
from typing import List

import pytest

from guessgame.console import Console
from guessgame.store import HighScoreStore


class ScriptedConsole(Console):
    """Console that answers prompts from a list and keeps every line it printed."""

    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []
        super().__init__(read=self._next_line, write=self.output.append)

    def _next_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            # same as the real input() when stdin runs out
            raise EOFError
        return self.lines.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def make_fixed_draw(secret: int):
    """Returns a draw function that ignores randomness and always gives `secret`."""
    def fake_draw(upper_bound: int) -> int:
        return secret
    return fake_draw


@pytest.fixture
def fixed_draw():
    return make_fixed_draw


@pytest.fixture
def scores_path(tmp_path):
    return tmp_path / "highscores.txt"


@pytest.fixture
def store(scores_path) -> HighScoreStore:
    store = HighScoreStore(scores_path)
    store.load()
    return store


@pytest.fixture
def make_console():
    def _make(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(list(lines))
    return _make
