"""
Pure game logic (no UI, no storage).
We compute two feedback numbers for each guess:
- correct: how many indices are exactly correct (right digit, right place)
- misplaced: how many digits appear in the code but at a different index

Codes and guesses never repeat a digit, so a digit counts towards at most
one of the two numbers.
"""

from typing import Tuple

from .types import CODE_LENGTH, DIGITS, Code


def validate_code(code: Code) -> Code:
    """Return the code unchanged, or raise ValueError if it is not 4 distinct digits."""
    if len(code) != CODE_LENGTH:
        raise ValueError(f"Code must have exactly {CODE_LENGTH} digits, got {code!r}.")
    for digit in code:
        if digit not in DIGITS:
            raise ValueError(f"Code may only contain digits 0-9, got {code!r}.")
    if len(set(code)) != CODE_LENGTH:
        raise ValueError(f"Code digits must be distinct, got {code!r}.")
    return code


def draw_code(rng) -> Code:
    """
    Keep sampling a digit 0..9 and append it unless we already have it,
    until 4 distinct digits are collected. Used for the secret and for
    every candidate guess.
    """
    code = ""
    while len(code) < CODE_LENGTH:
        digit = str(rng.randrange(10))
        if digit not in code:
            code += digit
    return code


def score_guess(code: Code, guess: Code) -> Tuple[int, int]:
    """
    Example:
      code  = "6824"
      guess = "6401"
      correct   = 1  (the 6 is in place)
      misplaced = 1  (the 4 is in the code, but at index 3)
      Returns a tuple: (correct, misplaced)
    """

    # 0. Validate lengths match
    n = len(code)
    if n == 0 or len(guess) != n:
        raise ValueError("Code and guess must be the same non-zero length.")

    correct = 0
    misplaced = 0
    i = 0
    while i < n:
        if guess[i] == code[i]:
            correct += 1
        elif guess[i] in code:
            misplaced += 1
        i += 1

    return (correct, misplaced)


def is_win(code: Code, guess: Code) -> bool:
    """
    Win = all digits match in order.
    """
    n = len(code)
    if n == 0 or len(guess) != n:
        return False
    return all(code[i] == guess[i] for i in range(n))


def check_answer(guess: Code, code: Code) -> bool:
    """Order-sensitive comparison of the player's 4 digits with the code."""
    return is_win(code, guess)
