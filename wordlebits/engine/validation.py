"""
Input validation for the interactive loop.

This module answers two questions:
  - "Is this guess acceptable?"      -> validate_guess / parse_guess
  - "What did the user just type?"   -> parse_feedback_line

A guess is a string of exactly 5 letters a–z (case-insensitive). Membership
in the corpus is NOT required: the feedback for any well-formed word can be
used to filter candidates.
"""

from __future__ import annotations

from typing import Iterable, Set, Tuple

from .errors import InvalidInput
from .scoring import WORD_LENGTH, parse_pattern


def validate_guess(word: str, allowed: Iterable[str] | None = None, N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a well-formed guess (and, when `allowed` is
    given, a member of it).

    Notes:
      - The `allowed` parameter can be a large list; we build a local set
        here for O(1) membership checks. Pass a set if you call this in a
        tight loop.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    # Shape/characters check
    if len(w) != N or not (w.isascii() and w.isalpha()):
        return False

    if allowed is None:
        return True
    allowed_set: Set[str] = allowed if isinstance(allowed, set) else {a.strip().lower() for a in allowed}
    return w in allowed_set


def parse_guess(word: str) -> str:
    """Canonical lowercase guess, or InvalidInput describing what is wrong."""
    if not validate_guess(word):
        raise InvalidInput(f"guess must be {WORD_LENGTH} letters a-z, got '{word.strip()}'")
    return word.strip().lower()


def parse_feedback_line(line: str) -> Tuple[str, str]:
    """
    Parse one turn of input: "<guess> <pattern>", e.g. "tares wmwwc".

    Returns (guess, pattern) in canonical lowercase form.
    Raises InvalidInput for anything else.
    """
    parts = line.split()
    if len(parts) != 2:
        raise InvalidInput(f"expected '<guess> <pattern>' (e.g. 'tares wmwwc'), got '{line.strip()}'")
    guess, patt = parts
    return parse_guess(guess), parse_pattern(patt)
