"""
Entropy Solver (expected information gain).

Main idea:
  - For each word g in the guess pool, partition CURRENT candidates by the
    pattern they would produce; bucket probabilities follow the candidates'
    frequency weights.
  - Compute Shannon entropy H over those buckets; pick g with max H.
Tie-break:
  - alphabetically smallest word (rank_all is fully deterministic).

Shortcuts:
  - Turn 1 with an untouched candidate set plays the configured opener
    instead of ranking the whole corpus against itself.
  - One candidate left: play it.
"""

from __future__ import annotations
import logging
from typing import List

from .base import BaseSolver, register
from wordlebits.engine import CandidateSet, Ranked, rank_all
from wordlebits.engine.errors import Exhausted

log = logging.getLogger(__name__)


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.0.0"

    # Multiply H by the guess' own probability of being the answer
    use_prior = False

    def _opening(self, state: dict) -> str | None:
        opener = self.config.opening_guess
        if state.get("history") or opener is None:
            return None
        candidates: CandidateSet = state["candidates"]
        if len(candidates) != len(self.corpus) or opener not in candidates:
            return None
        return opener

    def rank(self, candidates: CandidateSet) -> List[Ranked]:
        """Full ranking of the guess pool against `candidates`, best first."""
        return rank_all(
            candidates,
            self.guess_pool(candidates),
            use_prior=self.use_prior,
            workers=self.config.workers,
            parallel_threshold=self.config.parallel_threshold,
        )

    def next_guess(self, state: dict) -> str:
        """Pick the guess with the best score for the current candidates."""
        candidates: CandidateSet = state["candidates"]
        if len(candidates) == 0:
            raise Exhausted("no candidates left to guess from")

        only = candidates.only()
        if only is not None:
            return only

        opener = self._opening(state)
        if opener is not None:
            return opener

        ranked = self.rank(candidates)
        best = ranked[0]
        log.debug("%s: best %s (score=%.4f, H=%.3f bits) of %d guesses over %d candidates",
                  self.id, best.word, best.score, best.entropy, len(ranked), len(candidates))
        return best.word
