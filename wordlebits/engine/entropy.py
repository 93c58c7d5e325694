"""
Expected information gain of a guess over the current candidate set.

For a guess g, every candidate is treated as a possible secret and lands in
the bucket of the pattern it would produce. Bucket probabilities use the
candidates' frequency weights:

    p(bucket) = sum_{a in bucket} w(a) / sum_{a in candidates} w(a)
    H(g)      = -sum_buckets p * log2(p)             (bits, >= 0)

The guess score additionally multiplies by the guess' own chance of being
the secret, P(g) = w(g) / sum(w) (0 if g is no longer a candidate):

    score(g)  = P(g) * H(g)

Ranking is deterministic: higher score, then higher entropy, then the
alphabetically smallest word. With workers > 1 the pool of guesses is split
into chunks scored by a multiprocessing.Pool; since every guess is scored by
the same code and the final sort applies the same key, the result does not
depend on which worker finishes first.
"""

from __future__ import annotations

import logging
from multiprocessing import Pool
from typing import List, NamedTuple, Sequence, Tuple

import numpy as np

from .corpus import CandidateSet, Entry
from .scoring import NUM_PATTERNS, encode, pattern_index

log = logging.getLogger(__name__)

# Below this many guesses the process pool costs more than it saves.
PARALLEL_THRESHOLD = 256


class Ranked(NamedTuple):
    word: str
    score: float
    entropy: float


def entropy_from_weights(hist: np.ndarray) -> float:
    """Shannon entropy (bits) of a weight histogram; empty buckets contribute 0."""
    total = hist.sum()
    if total <= 0:
        return 0.0
    probs = hist[hist > 0] / total
    # + 0.0 turns a single-bucket -0.0 into 0.0
    return float(-np.sum(probs * np.log2(probs))) + 0.0


def bucket_weights(candidates: CandidateSet, guess: str) -> np.ndarray:
    """Total candidate weight per pattern (length-243 array indexed by pattern_index)."""
    if len(candidates) == 0:
        return np.zeros(NUM_PATTERNS)
    idx = np.fromiter(
        (pattern_index(encode(guess, w)) for w, _ in candidates),
        dtype=np.int64,
        count=len(candidates),
    )
    weights = np.asarray(candidates.weights(), dtype=np.float64)
    return np.bincount(idx, weights=weights, minlength=NUM_PATTERNS)


def entropy(candidates: CandidateSet, guess: str) -> float:
    """Expected information (bits) revealed by guessing `guess`."""
    return entropy_from_weights(bucket_weights(candidates, guess))


def score(candidates: CandidateSet, guess: str) -> float:
    """P(guess) * H(guess); zero for guesses that are no longer candidates."""
    p_word = candidates.probability(guess)
    if p_word == 0.0:
        return 0.0
    return p_word * entropy(candidates, guess)


def _rank_key(r: Ranked) -> Tuple[float, float, str]:
    return -r.score, -r.entropy, r.word


def _score_guesses(candidates: CandidateSet, guesses: Sequence[str], use_prior: bool) -> List[Ranked]:
    out: List[Ranked] = []
    for g in guesses:
        H = entropy(candidates, g)
        s = candidates.probability(g) * H if use_prior else H
        out.append(Ranked(g, s, H))
    return out


# ---- worker side (one copy of the candidate set per process) ----
_WORKER_CANDIDATES: CandidateSet | None = None
_WORKER_USE_PRIOR = True


def _init_worker(entries: Tuple[Entry, ...], use_prior: bool) -> None:
    global _WORKER_CANDIDATES, _WORKER_USE_PRIOR
    _WORKER_CANDIDATES = CandidateSet(entries)
    _WORKER_USE_PRIOR = use_prior


def _score_chunk(guesses: Sequence[str]) -> List[Ranked]:
    return _score_guesses(_WORKER_CANDIDATES, guesses, _WORKER_USE_PRIOR)


def _chunks(items: Sequence[str], n: int) -> List[Sequence[str]]:
    size = max(1, -(-len(items) // n))
    return [items[i:i + size] for i in range(0, len(items), size)]


def rank_all(
        candidates: CandidateSet,
        pool: Sequence[str] | None = None,
        *,
        use_prior: bool = True,
        workers: int = 1,
        parallel_threshold: int = PARALLEL_THRESHOLD,
) -> List[Ranked]:
    """
    Score every word in `pool` against the distribution of `candidates`.

    Args:
      candidates        : live candidate set (defines the pattern distribution)
      pool              : guesses to consider (default: the candidates themselves)
      use_prior         : score = P(g) * H(g) if True, plain H(g) otherwise
      workers           : processes to fan out over; 1 keeps everything in-process
      parallel_threshold: minimum pool size before a process pool is used

    Returns:
      List of Ranked(word, score, entropy), best first.
    """
    guesses = list(pool) if pool is not None else candidates.words()

    if workers > 1 and len(guesses) >= parallel_threshold:
        log.debug("ranking %d guesses over %d candidates with %d workers",
                  len(guesses), len(candidates), workers)
        entries = tuple(candidates.entries)
        with Pool(processes=workers, initializer=_init_worker, initargs=(entries, use_prior)) as p:
            parts = p.map(_score_chunk, _chunks(guesses, workers * 4))
        ranked = [r for part in parts for r in part]
    else:
        ranked = _score_guesses(candidates, guesses, use_prior)

    ranked.sort(key=_rank_key)
    return ranked
