"""
Candidate filtering given game feedback.

Given:
  - the current candidate set
  - one (guess, pattern) pair

Return:
  - the candidates that would have produced exactly the observed pattern.

This is the core step that turns feedback into a shrinking candidate set.
Order is always preserved, so filtering never reshuffles ties downstream.
"""

import logging

from .corpus import CandidateSet
from .errors import InvalidFeedback
from .scoring import encode

log = logging.getLogger(__name__)


def prune(candidates: CandidateSet, guess: str, pattern: str) -> CandidateSet:
    """
    Keep exactly the members w with encode(guess, w) == pattern.

    Raises InvalidFeedback (and leaves `candidates` untouched) if nothing
    would survive: the pattern cannot come from any remaining word.
    """
    kept = tuple((w, c) for w, c in candidates if encode(guess, w) == pattern)
    if not kept:
        raise InvalidFeedback(guess, pattern, len(candidates))

    log.debug("prune %s/%s: %d -> %d candidates", guess, pattern, len(candidates), len(kept))
    if len(kept) == len(candidates):
        return candidates
    return CandidateSet(kept)

