"""
In-memory shapes for one round.

- ClueProfile: target (correct, misplaced) score plus its text
- ClueNumber: one digit slot of a clue, with the player's markup state
- Clue: a labelled 4-digit guess
- Round: the code and its 5 clues, created and replaced together
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .types import Code, Digit, NumberState

_COUNT_WORDS = {1: "One", 2: "Two", 3: "Three", 4: "Four"}


def _count(n: int) -> str:
    return f"{_COUNT_WORDS[n]} number is" if n == 1 else f"{_COUNT_WORDS[n]} numbers are"


def describe_profile(correct: int, misplaced: int) -> str:
    """Text shown above a clue, e.g. (0, 2) -> 'Two numbers are correct but wrongly placed'."""
    if correct < 0 or misplaced < 0 or correct + misplaced > 4:
        raise ValueError(f"Impossible score ({correct}, {misplaced}).")
    if correct == 0 and misplaced == 0:
        return "Nothing is correct"
    if misplaced == 0:
        return f"{_count(correct)} correct and correctly placed"
    if correct == 0:
        return f"{_count(misplaced)} correct but wrongly placed"
    verb = "is" if misplaced == 1 else "are"
    return (
        f"{_count(correct)} correct and correctly placed, "
        f"{_COUNT_WORDS[misplaced].lower()} more {verb} correct but wrongly placed"
    )


@dataclass(frozen=True)
class ClueProfile:
    correct: int
    misplaced: int

    @property
    def label(self) -> str:
        return describe_profile(self.correct, self.misplaced)

    def as_score(self) -> Tuple[int, int]:
        return (self.correct, self.misplaced)


# Fixed display order of the clues in every round
DEFAULT_PROFILES: Tuple[ClueProfile, ...] = (
    ClueProfile(0, 1),
    ClueProfile(0, 2),
    ClueProfile(1, 0),
    ClueProfile(0, 0),
    ClueProfile(2, 0),
)

NOTHING_CORRECT = ClueProfile(0, 0)


@dataclass
class ClueNumber:
    value: Digit
    position: int  # 0..3 inside its own clue
    state: NumberState = "default"
    selected: bool = False


@dataclass
class Clue:
    profile: ClueProfile
    numbers: List[ClueNumber]
    position: int  # 0..4 among the clues
    # Set when the coverage pass overwrote one of this clue's digits
    patched: bool = False

    @property
    def label(self) -> str:
        return self.profile.label

    @property
    def guess(self) -> Code:
        return "".join(n.value for n in self.numbers)


@dataclass
class Round:
    code: Code
    clues: List[Clue] = field(default_factory=list)
