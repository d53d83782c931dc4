"""
Errors the core raises back to its UI collaborator.
None of them are fatal: the caller re-prompts or starts a new round.
"""


class CodebreakerError(Exception):
    """Base class for everything the core raises on purpose."""


class GenerationFailed(CodebreakerError, RuntimeError):
    """A clue profile could not be matched within the retry budget."""

    def __init__(self, profile, attempts: int):
        self.profile = profile
        self.attempts = attempts
        super().__init__(
            f"No guess matching {profile.label!r} after {attempts} attempts."
        )


class InvalidSelection(CodebreakerError, ValueError):
    """A markup action needs a selected digit, or the ids point nowhere."""


class IncompleteGuess(CodebreakerError, ValueError):
    """A guess was submitted with fewer than 4 filled positions."""
