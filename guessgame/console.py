"""
Terminal I/O in one place.
Input is read a line at a time, so a bad entry is thrown away as a whole and
never leaks into the next prompt. Tests pass their own read/write functions.
"""

from typing import Callable, Optional

from .engine import parse_int

class Console:
    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read = read
        self._write = write

    def say(self, message: str = "") -> None:
        self._write(message)

    def ask(self, prompt: str) -> str:
        # EOFError / KeyboardInterrupt are left to the entry point
        return self._read(prompt)

    def read_int(self, prompt: str) -> Optional[int]:
        """Returns None instead of raising when the line isn't an integer."""
        return parse_int(self.ask(prompt))
