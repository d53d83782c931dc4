"""
In-memory store
Holds the one round in play and routes UI gestures to the generator,
the annotation board and the answer checker.

Public methods:
- new_game(code=None) -> RoundOut
- get() -> RoundOut
- select(clue_id, number_id) -> FlagsOut
- mark_correct() / mark_misplaced() / mark_wrong() -> FlagsOut
- mark_entire_clue_wrong(clue_id) -> FlagsOut
- reset_all() -> FlagsOut
- set_digit(slot, value) -> RoundOut
- check_answer(guess=None) -> bool
- get_code() -> str | None  (only once solved)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple, Union

from .annotations import AnnotationBoard, Flags
from .engine import check_answer
from .errors import CodebreakerError, IncompleteGuess, InvalidSelection
from .generator import ClueGenerator
from .models import DEFAULT_PROFILES, Clue, ClueNumber, ClueProfile, Round
from .schemas import ClueNumberOut, ClueOut, FlagsOut, GuessRequest, RoundOut
from .types import Code

logger = logging.getLogger(__name__)

# --- Small DTO builders so the UI never touches the live objects ---

def _to_flags_out(flags: Flags) -> FlagsOut:
    return FlagsOut(
        markup_actions_enabled=flags.markup_actions_enabled,
        mark_all_wrong_enabled=flags.mark_all_wrong_enabled,
        reset_enabled=flags.reset_enabled,
    )

def _to_clue_out(clue: Clue) -> ClueOut:
    return ClueOut(
        position=clue.position,
        label=clue.label,
        numbers=[
            ClueNumberOut(value=n.value, position=n.position, state=n.state, selected=n.selected)
            for n in clue.numbers
        ],
    )


class RoundStore:
    def __init__(
        self,
        generator: Optional[ClueGenerator] = None,
        profiles: Sequence[ClueProfile] = DEFAULT_PROFILES,
    ) -> None:
        self._generator = generator or ClueGenerator()
        self._profiles = tuple(profiles)
        self._round: Optional[Round] = None
        self._board: Optional[AnnotationBoard] = None
        self.solved = False

    # --- Round lifecycle ---

    def new_game(self, code: Optional[Code] = None) -> RoundOut:
        """Throw away the current round (if any) and generate a fresh one."""
        self._round = self._generator.generate(self._profiles, code=code)
        self._board = AnnotationBoard(self._round.clues)
        self.solved = False
        logger.info("New round started with %d clues", len(self._round.clues))
        return self.get()

    def get(self) -> RoundOut:
        board = self._require_board()
        return RoundOut(
            clues=[_to_clue_out(c) for c in board.clues],
            flags=_to_flags_out(board.flags()),
            guess_input=list(board.guess_input),
            check_enabled=board.check_enabled,
            solved=self.solved,
        )

    def _require_board(self) -> AnnotationBoard:
        if self._board is None:
            raise CodebreakerError("No round in progress. Start a new game first.")
        return self._board

    def _lookup(self, clue_id: int, number_id: Optional[int] = None) -> Tuple[Clue, Optional[ClueNumber]]:
        board = self._require_board()
        if clue_id < 0 or clue_id >= len(board.clues):
            raise InvalidSelection(f"No clue with id {clue_id}.")
        clue = board.clues[clue_id]
        if number_id is None:
            return clue, None
        if number_id < 0 or number_id >= len(clue.numbers):
            raise InvalidSelection(f"No digit with id {number_id} in clue {clue_id}.")
        return clue, clue.numbers[number_id]

    # --- Markup ---

    def select(self, clue_id: int, number_id: int) -> FlagsOut:
        clue, number = self._lookup(clue_id, number_id)
        return _to_flags_out(self._require_board().select(clue, number))

    def mark_correct(self) -> FlagsOut:
        return _to_flags_out(self._require_board().mark_correct())

    def mark_misplaced(self) -> FlagsOut:
        return _to_flags_out(self._require_board().mark_misplaced())

    def mark_wrong(self) -> FlagsOut:
        return _to_flags_out(self._require_board().mark_wrong())

    def mark_entire_clue_wrong(self, clue_id: int) -> FlagsOut:
        clue, _ = self._lookup(clue_id)
        return _to_flags_out(self._require_board().mark_entire_clue_wrong(clue))

    def reset_all(self) -> FlagsOut:
        return _to_flags_out(self._require_board().reset_all())

    # --- Guess input & answer ---

    def set_digit(self, slot: int, value: Optional[str]) -> RoundOut:
        self._require_board().set_digit(slot, value)
        return self.get()

    def check_answer(self, guess: Union[str, Sequence[Optional[str]], None] = None) -> bool:
        """
        Compare a guess (or, when omitted, the 4 input fields) with the code.
        Raises IncompleteGuess unless all 4 positions are filled.
        """
        board = self._require_board()
        request = GuessRequest(guess=board.guess_input if guess is None else guess)
        if not request.is_complete:
            raise IncompleteGuess("Fill in all 4 digits before checking.")

        matched = check_answer("".join(request.guess), self._round.code)
        if matched:
            self.solved = True
        logger.info("Guess %s checked: %s", "".join(request.guess), "match" if matched else "no match")
        return matched

    def get_code(self) -> Optional[Code]:
        """Return the code ONLY for a solved round; else None."""
        if self._round is None or not self.solved:
            return None
        return self._round.code
