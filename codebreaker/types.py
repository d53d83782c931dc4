"""
Labels for clarity.
"""

from typing import Literal

Digit = str  # '0' -> '9'
Code = str  # 4 distinct digits, e.g. "6824"
NumberState = Literal["default", "correct", "misplaced", "wrong"]

CODE_LENGTH = 4
DIGITS = "0123456789"
