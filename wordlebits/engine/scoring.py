"""
Wordle-style feedback pattern for a single (guess, secret) pair.

Conventions:
  - 'c' : correct   = right letter in the right position   (green)
  - 'm' : misplaced = letter is in the secret elsewhere     (yellow)
  - 'w' : wrong     = letter absent (or guessed more times than it occurs)

A pattern is a plain 5-character string over those symbols, e.g. "mwwwc".
There are 3**5 = 243 possible patterns; `pattern_index` maps each one to a
stable integer in 0..242 so patterns can be bucketed with array arithmetic.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all correct positions and counts the secret letters
     that were NOT matched there.
  2) Second pass, left to right, marks misplaced only while that letter
     still has a remaining count; every other position is wrong.
"""

from collections import Counter
from itertools import product
from typing import List

from .errors import InvalidInput

WORD_LENGTH = 5

CORRECT = "c"
MISPLACED = "m"
WRONG = "w"

SYMBOLS = (CORRECT, MISPLACED, WRONG)
SOLVED_PATTERN = CORRECT * WORD_LENGTH
NUM_PATTERNS = len(SYMBOLS) ** WORD_LENGTH

_DIGIT = {CORRECT: 2, MISPLACED: 1, WRONG: 0}


def encode(guess: str, secret: str) -> str:
    """
    Compute the feedback pattern for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret)

    Examples:
      encode("event", "depot") -> "mwwwc"
      encode("sleep", "abide") -> "wwmww"
    """
    if len(guess) != len(secret):
        raise ValueError(f"guess and secret must be the same length: '{guess}' vs '{secret}'")

    pattern = [WRONG] * len(guess)

    # Pass 1: correct positions; everything else in the secret stays available.
    remaining = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            pattern[i] = CORRECT
        else:
            remaining[s] += 1

    # Pass 2: misplaced only while the letter still has unconsumed occurrences.
    for i, g in enumerate(guess):
        if pattern[i] == CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = MISPLACED
            remaining[g] -= 1

    return "".join(pattern)


def pattern_index(pattern: str) -> int:
    """Base-3 integer for a pattern ('c'=2, 'm'=1, 'w'=0), first letter most significant."""
    idx = 0
    for ch in pattern:
        idx = idx * 3 + _DIGIT[ch]
    return idx


def all_patterns() -> List[str]:
    """Every possible pattern (243 of them), ordered by `pattern_index`."""
    return ["".join(p) for p in product((WRONG, MISPLACED, CORRECT), repeat=WORD_LENGTH)]


def is_solved(pattern: str) -> bool:
    return pattern == SOLVED_PATTERN


def parse_pattern(text: str) -> str:
    """
    Validate user-typed feedback and return it in canonical (lowercase) form.

    Raises InvalidInput when the text is not exactly 5 of 'c', 'm', 'w'.
    """
    p = text.strip().lower()
    if len(p) != WORD_LENGTH:
        raise InvalidInput(f"pattern must be {WORD_LENGTH} characters, got {len(p)}: '{text}'")
    bad = sorted({ch for ch in p if ch not in _DIGIT})
    if bad:
        raise InvalidInput(f"pattern may only contain c, m, w; found {', '.join(repr(c) for c in bad)}")
    return p
