"""
- Keep settings isolated per test (env is read once and cached)
- Provide seeded randomness so generated rounds are reproducible
- Provide a hand-built board for code "6824" so markup tests know every digit
"""
import random

import pytest

from codebreaker.annotations import AnnotationBoard
from codebreaker.config import get_settings
from codebreaker.generator import ClueGenerator
from codebreaker.models import DEFAULT_PROFILES, Clue, ClueNumber

# One guess per default profile, all scored against "6824":
#   "4013" (0,1)  "2650" (0,2)  "6079" (1,0)  "1357" (0,0)  "5814" (2,0)
FIXED_CODE = "6824"
FIXED_GUESSES = ["4013", "2650", "6079", "1357", "5814"]


def make_clues(guesses, profiles=DEFAULT_PROFILES):
    return [
        Clue(
            profile=profile,
            numbers=[ClueNumber(value=d, position=i) for i, d in enumerate(guess)],
            position=index,
        )
        for index, (profile, guess) in enumerate(zip(profiles, guesses))
    ]


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def generator(rng):
    return ClueGenerator(rng=rng, max_attempts=10_000, relabel_patched=False)


@pytest.fixture
def clues():
    return make_clues(FIXED_GUESSES)


@pytest.fixture
def board(clues):
    return AnnotationBoard(clues)
