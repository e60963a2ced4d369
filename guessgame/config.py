"""
Single place to:
- Read settings from env, or from a .env in the current directory
- Validate them into a Settings model

Variables:
  GUESSGAME_HIGHSCORES_PATH  high-score file (default highscores.txt)
  GUESSGAME_LOG_LEVEL        DEBUG / INFO / WARNING / ERROR (default WARNING)
  GUESSGAME_USE_RANDOM_ORG   1 to draw secrets from random.org (default 0)
"""

import logging
import os

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field, field_validator

from .store import DEFAULT_PATH

TRUTHY = ("1", "true", "yes", "on")

class Settings(BaseModel):
    highscores_path: str = Field(DEFAULT_PATH, description="Where high scores are kept")
    log_level: str = Field("WARNING", description="Root logging level")
    use_random_org: bool = Field(False, description="Draw secrets from random.org")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, level: str) -> str:
        level = level.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {level}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

def load_settings() -> Settings:
    # .env in the directory the game is started from; a shell export wins over it
    dotenv_path = find_dotenv(usecwd=True)
    file_values = dotenv_values(dotenv_path) if dotenv_path else {}
    env = {**file_values, **os.environ}

    def get(name: str, default: str) -> str:
        value = env.get(name)
        return default if value is None else value

    return Settings(
        highscores_path=get("GUESSGAME_HIGHSCORES_PATH", DEFAULT_PATH),
        log_level=get("GUESSGAME_LOG_LEVEL", "WARNING"),
        use_random_org=get("GUESSGAME_USE_RANDOM_ORG", "0").strip().lower() in TRUTHY,
    )
