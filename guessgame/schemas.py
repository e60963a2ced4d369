"""
Explicit validation & Pydantic models
- DifficultyLevel is the immutable record behind each menu entry.
- RecordOutcome is what the high-score store hands back to the controller
  after a win, so the controller can pick the right message.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import DifficultyId

# 1. One entry of the difficulty catalog (never mutated)
class DifficultyLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: DifficultyId = Field(..., description="Identifier used in the menu and the high-score file")
    upper_bound: int = Field(..., description="Secret is drawn from 1..upper_bound inclusive")
    max_tries: int = Field(..., description="How many guesses the player gets")
    flavour_text: str = Field(..., description="Shown when the level is picked")

    @field_validator("upper_bound", "max_tries")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("upper_bound and max_tries must be positive.")
        return value

# 2. Result of checking a win against the stored best
class RecordOutcome(BaseModel):
    difficulty: DifficultyId = Field(..., description="Level the round was played on")
    tries: int = Field(..., ge=1, description="Attempts used in the winning round")
    is_new_record: bool = Field(..., description="True if tries beat (or set) the best score")
    previous_best: Optional[int] = Field(
        None, description="Best before this round; None means this is the first win"
    )
    saved: bool = Field(True, description="False when the new record could not be written to disk")

    @property
    def best(self) -> int:
        """Best score after this round."""
        if self.is_new_record or self.previous_best is None:
            return self.tries
        return self.previous_best
