"""
Player markup on the clue digits.

The board owns:
- the clues of the current round (states are only changed here)
- the single selected digit, if any
- an index from digit value to every slot holding that digit
- the 4 guess-input fields, auto-filled when a digit is marked correct

Every mutating action returns the derived Flags so the UI can enable or
disable its buttons without looking at the clues itself.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import InvalidSelection
from .models import NOTHING_CORRECT, Clue, ClueNumber
from .types import CODE_LENGTH, DIGITS, Code, Digit, NumberState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Flags:
    markup_actions_enabled: bool
    mark_all_wrong_enabled: bool
    reset_enabled: bool


class AnnotationBoard:
    def __init__(self, clues: List[Clue]) -> None:
        self.clues = clues
        self.selection: Optional[ClueNumber] = None
        self.guess_input: List[Optional[Digit]] = [None] * CODE_LENGTH

        self._by_digit: Dict[Digit, List[ClueNumber]] = defaultdict(list)
        for clue in clues:
            for number in clue.numbers:
                number.selected = False
                self._by_digit[number.value].append(number)

        # The clue that "mark all as wrong" applies to
        self.nothing_correct: Optional[Clue] = next(
            (c for c in clues if c.profile == NOTHING_CORRECT), None
        )

    # --- Derived state ---

    def flags(self) -> Flags:
        return Flags(
            markup_actions_enabled=self.selection is not None,
            mark_all_wrong_enabled=(
                self.nothing_correct is not None
                and not all(n.state == "wrong" for n in self.nothing_correct.numbers)
            ),
            reset_enabled=any(n.state != "default" for c in self.clues for n in c.numbers),
        )

    @property
    def check_enabled(self) -> bool:
        return all(self.guess_input)

    @property
    def guess(self) -> Optional[Code]:
        """The 4 input fields as one string, or None while any is empty."""
        if not self.check_enabled:
            return None
        return "".join(self.guess_input)

    def occurrences(self, digit: Digit) -> List[ClueNumber]:
        return list(self._by_digit.get(digit, []))

    # --- Selection ---

    def select(self, clue: Clue, number: ClueNumber) -> Flags:
        if not any(n is number for n in clue.numbers):
            raise InvalidSelection(f"Digit at position {number.position} is not part of clue {clue.position}.")

        if self.selection is number:
            number.selected = False
            self.selection = None
        else:
            if self.selection is not None:
                self.selection.selected = False
            number.selected = True
            self.selection = number
        return self.flags()

    def _require_selection(self) -> ClueNumber:
        if self.selection is None:
            raise InvalidSelection("Select a digit first.")
        return self.selection

    # --- Markup ---

    def _set_state(self, number: ClueNumber, state: NumberState) -> None:
        # Leaving "correct" takes back the digit it filled in
        if number.state == "correct" and state != "correct":
            if self.guess_input[number.position] == number.value:
                self.guess_input[number.position] = None
        number.state = state
        if state == "correct":
            self.guess_input[number.position] = number.value

    def mark_correct(self) -> Flags:
        number = self._require_selection()
        others = [n for n in self._by_digit[number.value] if n is not number]

        if number.state == "correct":
            self._uncorrect(number)
        else:
            # A field holds one digit: another digit marked correct here is taken back
            for clue in self.clues:
                rival = clue.numbers[number.position]
                if rival.state == "correct" and rival.value != number.value:
                    self._uncorrect(rival)
            # Correct here means misplaced everywhere else
            for other in others:
                self._set_state(other, "misplaced")
            self._set_state(number, "correct")
        return self.flags()

    def _uncorrect(self, number: ClueNumber) -> None:
        self._set_state(number, "default")
        for other in self._by_digit[number.value]:
            if other is not number:
                self._set_state(other, "default")

    def mark_misplaced(self) -> Flags:
        number = self._require_selection()
        self._set_state(number, "default" if number.state == "misplaced" else "misplaced")
        return self.flags()

    def mark_wrong(self) -> Flags:
        number = self._require_selection()
        state: NumberState = "default" if number.state == "wrong" else "wrong"
        for occurrence in self._by_digit[number.value]:
            self._set_state(occurrence, state)
        return self.flags()

    def mark_entire_clue_wrong(self, clue: Clue) -> Flags:
        for number in clue.numbers:
            for occurrence in self._by_digit[number.value]:
                self._set_state(occurrence, "wrong")
        return self.flags()

    def reset_all(self) -> Flags:
        for clue in self.clues:
            for number in clue.numbers:
                number.state = "default"
                number.selected = False
        self.selection = None
        self.guess_input = [None] * CODE_LENGTH
        return self.flags()

    # --- Guess input ---

    def set_digit(self, slot: int, value: Optional[Digit]) -> None:
        """Fill (or clear, with None / '') one of the 4 guess-input fields."""
        if slot < 0 or slot >= CODE_LENGTH:
            raise ValueError(f"Input slot must be between 0 and {CODE_LENGTH - 1}.")
        if value in (None, ""):
            self.guess_input[slot] = None
            return
        if len(value) != 1 or value not in DIGITS:
            raise ValueError("Each input must be a single digit 0-9.")
        self.guess_input[slot] = value
        logger.debug("Input slot %d set to %s", slot, value)
