"""
Clue generation: pick a secret code, then synthesize one guess per profile
by rejection sampling against it.

Steps for a round:
1. Draw the code (or validate the one we were given).
2. For each profile, in order, draw random 4-distinct-digit guesses until one
   scores exactly (correct, misplaced) and does not clash with earlier clues.
3. Coverage pass: every code digit must appear in at least one clue, so a
   missing digit overwrites the first slot holding a digit that is not in the code.
"""

from __future__ import annotations

import logging
from secrets import SystemRandom
from typing import List, Optional, Sequence, Set

from .config import get_settings
from .engine import draw_code, score_guess, validate_code
from .errors import GenerationFailed
from .models import DEFAULT_PROFILES, Clue, ClueNumber, ClueProfile, Round
from .types import CODE_LENGTH, Code

logger = logging.getLogger(__name__)


def _check_profile(profile: ClueProfile) -> None:
    total = profile.correct + profile.misplaced
    if profile.correct < 0 or profile.misplaced < 0 or total > CODE_LENGTH:
        raise ValueError(f"Impossible profile {profile.as_score()}.")
    # With distinct digits, 3 in place and the 4th in the code means it is in place too
    if profile.correct == CODE_LENGTH - 1 and profile.misplaced == 1:
        raise ValueError(f"Impossible profile {profile.as_score()}.")


class ClueConstraints:
    """
    Running set of facts the accepted clues already show about the code.

    A code digit shown correctly placed in one clue must not be shown
    correctly placed again: marking it correct turns every other occurrence
    into "misplaced", which would contradict the second clue.
    """

    def __init__(self, code: Code):
        self.code = code
        self.guesses: Set[str] = set()
        self.placed: Set[str] = set()

    def allows(self, guess: Code) -> bool:
        if guess in self.guesses:
            return False
        for i, digit in enumerate(guess):
            if digit == self.code[i] and digit in self.placed:
                return False
        return True

    def record(self, guess: Code) -> None:
        self.guesses.add(guess)
        for i, digit in enumerate(guess):
            if digit == self.code[i]:
                self.placed.add(digit)


class ClueGenerator:
    def __init__(
        self,
        rng=None,
        max_attempts: Optional[int] = None,
        relabel_patched: Optional[bool] = None,
    ) -> None:
        settings = get_settings()
        self.rng = rng if rng is not None else SystemRandom()
        self.max_attempts = max_attempts if max_attempts is not None else settings.max_attempts
        self.relabel_patched = (
            relabel_patched if relabel_patched is not None else settings.relabel_patched
        )

    def generate(
        self,
        profiles: Sequence[ClueProfile] = DEFAULT_PROFILES,
        code: Optional[Code] = None,
    ) -> Round:
        if not profiles:
            raise ValueError("At least one clue profile is required.")
        for profile in profiles:
            _check_profile(profile)

        code = validate_code(code) if code is not None else draw_code(self.rng)
        constraints = ClueConstraints(code)

        clues: List[Clue] = []
        for index, profile in enumerate(profiles):
            guess = self._sample_guess(code, profile, constraints)
            constraints.record(guess)
            numbers = [ClueNumber(value=digit, position=i) for i, digit in enumerate(guess)]
            clues.append(Clue(profile=profile, numbers=numbers, position=index))

        self._cover_code(code, clues)

        logger.debug(
            "Generated round code=%s clues=%s",
            code,
            [(c.guess, c.profile.as_score()) for c in clues],
        )
        return Round(code=code, clues=clues)

    def _sample_guess(self, code: Code, profile: ClueProfile, constraints: ClueConstraints) -> Code:
        target = profile.as_score()
        for _ in range(self.max_attempts):
            candidate = draw_code(self.rng)
            if score_guess(code, candidate) == target and constraints.allows(candidate):
                return candidate
        logger.warning("Retry budget of %d exhausted for profile %s", self.max_attempts, target)
        raise GenerationFailed(profile, self.max_attempts)

    def _cover_code(self, code: Code, clues: List[Clue]) -> None:
        """
        Make sure every code digit shows up in some clue.
        The patched clue is not re-checked against its profile unless
        relabel_patched is on, in which case it takes the profile it now scores.
        """
        seen = {n.value for clue in clues for n in clue.numbers}
        for missing in code:
            if missing in seen:
                continue
            slot = self._first_foreign_slot(code, clues)
            if slot is None:
                # Every slot already holds a code digit, so nothing can be missing
                break
            clue, number = slot
            logger.warning(
                "Code digit %s missing from clues; overwriting %s at clue %d position %d",
                missing, number.value, clue.position, number.position,
            )
            number.value = missing
            clue.patched = True
            seen.add(missing)
            if self.relabel_patched:
                clue.profile = ClueProfile(*score_guess(code, clue.guess))

    @staticmethod
    def _first_foreign_slot(code: Code, clues: List[Clue]):
        for clue in clues:
            for number in clue.numbers:
                if number.value not in code:
                    return clue, number
        return None


def generate(
    profiles: Sequence[ClueProfile] = DEFAULT_PROFILES,
    code: Optional[Code] = None,
    rng=None,
) -> Round:
    """One-shot helper: generate a round with settings from the environment."""
    return ClueGenerator(rng=rng).generate(profiles, code=code)
