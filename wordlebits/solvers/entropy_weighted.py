"""
Weighted Entropy.

Idea:
  Like entropy, but the guess is also rewarded for being a LIKELY answer:
      score(g) = P(g) * H(g),   P(g) = w(g) / sum_{a in candidates} w(a)
  where w is the word's frequency count from the corpus. Common words are
  far more likely to be the secret, so this wins in fewer turns than pure
  information gain.

A guess that is no longer a candidate has P(g) = 0, so with
guess_pool="corpus" such words only ever win the entropy tie-break.
"""

from __future__ import annotations

from .base import register
from .entropy import EntropySolver


@register
class WeightedEntropySolver(EntropySolver):
    id = "weighted"
    name = "Entropy (Frequency Weighted)"
    version = "2.0.0"

    use_prior = True
