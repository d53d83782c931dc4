"""
Testing clue generation.
- Seeded randomness so every round is reproducible.
- The coverage patch can leave a clue scoring differently from its label;
  those tests pin that behaviour down rather than hide it.
"""

import itertools
import random

import pytest

from codebreaker.engine import score_guess
from codebreaker.errors import GenerationFailed
from codebreaker.generator import ClueConstraints, ClueGenerator, generate
from codebreaker.models import DEFAULT_PROFILES, ClueProfile

from conftest import FIXED_CODE, make_clues


class CyclingRandom:
    """Always produces the same digits, so only one guess is ever drawn."""

    def __init__(self, digits):
        self._digits = itertools.cycle(digits)

    def randrange(self, stop):
        return next(self._digits)


def test_round_shape_over_many_seeds():
    for seed in range(100):
        round_ = ClueGenerator(rng=random.Random(seed)).generate()
        code = round_.code

        assert len(code) == 4 and len(set(code)) == 4
        assert len(round_.clues) == 5
        assert [c.profile for c in round_.clues] == list(DEFAULT_PROFILES)
        assert [c.position for c in round_.clues] == [0, 1, 2, 3, 4]

        for clue in round_.clues:
            assert len(set(clue.guess)) == 4
            assert [n.position for n in clue.numbers] == [0, 1, 2, 3]
            assert all(n.state == "default" and not n.selected for n in clue.numbers)
            if not clue.patched:
                assert score_guess(code, clue.guess) == clue.profile.as_score()

        # Solvability: every code digit shows up somewhere
        seen = {n.value for clue in round_.clues for n in clue.numbers}
        assert set(code) <= seen


def test_fixed_code_scenario():
    for seed in range(30):
        round_ = ClueGenerator(rng=random.Random(seed)).generate(code=FIXED_CODE)
        assert round_.code == FIXED_CODE

        nothing = round_.clues[3]
        assert nothing.label == "Nothing is correct"
        assert not nothing.patched
        assert not set(nothing.guess) & set(FIXED_CODE)

        two_placed = round_.clues[4]
        assert two_placed.label == "Two numbers are correct and correctly placed"
        assert not two_placed.patched
        in_place = [i for i, d in enumerate(two_placed.guess) if d == FIXED_CODE[i]]
        assert len(in_place) == 2
        others = [d for i, d in enumerate(two_placed.guess) if i not in in_place]
        assert not set(others) & set(FIXED_CODE)


def test_no_digit_shown_in_place_twice_and_no_repeated_guess():
    for seed in range(100):
        round_ = ClueGenerator(rng=random.Random(seed)).generate()
        placed = []
        for clue in round_.clues:
            placed.extend(d for i, d in enumerate(clue.guess) if d == round_.code[i])
        assert len(placed) == len(set(placed))
        guesses = [c.guess for c in round_.clues]
        assert len(guesses) == len(set(guesses))


def test_constraints_reject_second_correct_placement():
    constraints = ClueConstraints(FIXED_CODE)
    constraints.record("6079")
    assert constraints.allows("6079") is False  # same guess again
    assert constraints.allows("6814") is False  # 6 in place again
    assert constraints.allows("5814") is True


def test_generation_failed_when_budget_runs_out():
    # Every draw is "0123", which never scores (2, 0) against 6824
    gen = ClueGenerator(rng=CyclingRandom([0, 1, 2, 3]), max_attempts=5)
    with pytest.raises(GenerationFailed) as excinfo:
        gen.generate([ClueProfile(2, 0)], code=FIXED_CODE)
    assert excinfo.value.attempts == 5
    assert excinfo.value.profile == ClueProfile(2, 0)


@pytest.mark.parametrize("profile", [ClueProfile(3, 1), ClueProfile(4, 1), ClueProfile(-1, 0)])
def test_impossible_profiles_are_rejected(profile, generator):
    with pytest.raises(ValueError):
        generator.generate([profile])


def test_bad_fixed_code_is_rejected(generator):
    with pytest.raises(ValueError):
        generator.generate(code="6624")


def test_coverage_patch_keeps_label_by_default():
    # None of these guesses contains the 2 of 6824
    clues = make_clues(["4013", "6850", "6079", "1357", "5814"])
    ClueGenerator(rng=random.Random(0), relabel_patched=False)._cover_code(FIXED_CODE, clues)

    first = clues[0]
    assert first.patched
    assert first.guess == "4213"
    # Known gap: the clue now scores (0, 2) but still claims (0, 1)
    assert score_guess(FIXED_CODE, first.guess) == (0, 2)
    assert first.label == "One number is correct but wrongly placed"
    assert not any(c.patched for c in clues[1:])


def test_coverage_patch_relabels_when_enabled():
    clues = make_clues(["4013", "6850", "6079", "1357", "5814"])
    ClueGenerator(rng=random.Random(0), relabel_patched=True)._cover_code(FIXED_CODE, clues)

    first = clues[0]
    assert first.patched
    assert first.profile == ClueProfile(0, 2)
    assert first.label == "Two numbers are correct but wrongly placed"


def test_relabelled_rounds_always_match_their_labels():
    for seed in range(100):
        round_ = ClueGenerator(rng=random.Random(seed), relabel_patched=True).generate()
        for clue in round_.clues:
            assert score_guess(round_.code, clue.guess) == clue.profile.as_score()


def test_module_generate_reads_retry_cap_from_env(monkeypatch):
    monkeypatch.setenv("CODEBREAKER_MAX_ATTEMPTS", "3")
    with pytest.raises(GenerationFailed) as excinfo:
        generate([ClueProfile(2, 0)], code=FIXED_CODE, rng=CyclingRandom([0, 1, 2, 3]))
    assert excinfo.value.attempts == 3


def test_module_generate_with_seed():
    round_ = generate(rng=random.Random(5))
    assert len(round_.clues) == 5
