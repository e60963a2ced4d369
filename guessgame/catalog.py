"""
Difficulty catalog.
Fixed table of levels, in menu order. Menu choices are 1-based and the
choice right after the last level means "Exit".
"""

from typing import List, Optional

from .schemas import DifficultyLevel

DIFFICULTY_LEVELS = (
    DifficultyLevel(
        id="EASY",
        upper_bound=50,
        max_tries=10,
        flavour_text="Easy! Well, chickens are yellow!",
    ),
    DifficultyLevel(
        id="MEDIUM",
        upper_bound=100,
        max_tries=7,
        flavour_text="Medium difficulty. A wise choice I think!",
    ),
    DifficultyLevel(
        id="HARD",
        upper_bound=500,
        max_tries=9,
        flavour_text="Hard mode! Ok, let's play!",
    ),
    DifficultyLevel(
        id="IMPOSSIBLE",
        upper_bound=1000,
        max_tries=10,
        flavour_text="Impossible mode. Brave choice... or stupid choice!",
    ),
)

_BY_ID = {level.id: level for level in DIFFICULTY_LEVELS}

def list_levels() -> List[DifficultyLevel]:
    return list(DIFFICULTY_LEVELS)

def exit_choice() -> int:
    return len(DIFFICULTY_LEVELS) + 1

def level_for_choice(choice: int) -> Optional[DifficultyLevel]:
    """
    Example:
      level_for_choice(1) -> EASY
      level_for_choice(4) -> IMPOSSIBLE
      level_for_choice(5) -> None (that's the Exit entry, not a level)
    """
    if choice < 1 or choice > len(DIFFICULTY_LEVELS):
        return None
    return DIFFICULTY_LEVELS[choice - 1]

def get_level(difficulty_id: str) -> DifficultyLevel:
    return _BY_ID[difficulty_id]

def is_known_id(difficulty_id: str) -> bool:
    return difficulty_id in _BY_ID
