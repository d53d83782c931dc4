"""
Explicit validation & Pydantic models
- What the UI collaborator sends in (a guess) and gets back
  (enablement flags, the clue board, the round view).
- The code itself is never part of a view.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .types import CODE_LENGTH, DIGITS

# 1. Validates the player's guess input (empty fields allowed; the store rejects incomplete guesses)
class GuessRequest(BaseModel):
    guess: List[Optional[str]] = Field(
        ..., description="Exactly 4 fields, each a digit 0-9 or empty."
    )

    @field_validator("guess", mode="before")
    @classmethod
    def split_string(cls, value):
        # Accept "3841" as shorthand for ["3", "8", "4", "1"]
        if isinstance(value, str):
            return list(value)
        return value

    @field_validator("guess")
    @classmethod
    def validate_digits(cls, guess_list: List[Optional[str]]) -> List[Optional[str]]:
        if len(guess_list) != CODE_LENGTH:
            raise ValueError(f"Guess must have exactly {CODE_LENGTH} fields.")
        cleaned: List[Optional[str]] = []
        for field in guess_list:
            if field is None or field == "":
                cleaned.append(None)
                continue
            if len(field) != 1 or field not in DIGITS:
                raise ValueError("Each digit must be between 0 and 9 inclusive.")
            cleaned.append(field)
        return cleaned

    @property
    def is_complete(self) -> bool:
        return all(self.guess)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": ["3", "8", "4", "1"]},
                {"guess": ["3", None, "4", None]},
            ]
        }
    }

# 2. Enablement flags returned after every markup action
class FlagsOut(BaseModel):
    markup_actions_enabled: bool = Field(..., description="A digit is selected")
    mark_all_wrong_enabled: bool = Field(..., description="'Nothing is correct' clue not fully marked wrong")
    reset_enabled: bool = Field(..., description="At least one digit carries markup")

# 3. One digit of a clue
class ClueNumberOut(BaseModel):
    value: str = Field(..., description="The digit")
    position: int = Field(..., description="Index inside its clue (0-3)")
    state: Literal["default", "correct", "misplaced", "wrong"] = Field(..., description="Player markup")
    selected: bool = Field(..., description="Currently selected digit")

# 4. One clue
class ClueOut(BaseModel):
    position: int = Field(..., description="Display order (0-4)")
    label: str = Field(..., description="Text description of the clue's score")
    numbers: List[ClueNumberOut] = Field(..., description="The 4 digits of the guess")

# 5. Everything the UI needs to draw a round
class RoundOut(BaseModel):
    clues: List[ClueOut] = Field(..., description="Clues in display order")
    flags: FlagsOut = Field(..., description="Button enablement")
    guess_input: List[Optional[str]] = Field(..., description="The 4 guess fields")
    check_enabled: bool = Field(..., description="All 4 guess fields are filled")
    solved: bool = Field(False, description="The code was guessed this round")
