"""
Word tables with frequency weights.

- Corpus:       the immutable (word, weight) table loaded once at startup.
- CandidateSet: the words still consistent with the feedback seen so far.

A CandidateSet built from a Corpus shares the corpus' entry tuple (no copy);
pruning always produces a new, smaller set and never touches the corpus.
Word probabilities are relative to the set they are asked of:
    P(w) = weight(w) / sum(weights in this set)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

Entry = Tuple[str, float]  # (word, frequency weight)


def _index(entries: Sequence[Entry]) -> Dict[str, float]:
    return {w: c for w, c in entries}


@dataclass(frozen=True)
class Corpus:
    """Immutable, ordered table of (word, weight) pairs."""
    entries: Tuple[Entry, ...]
    _weights: Dict[str, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        for w, c in self.entries:
            if not math.isfinite(c) or c < 0:
                raise ValueError(f"weight for '{w}' must be finite and non-negative, got {c}")
        object.__setattr__(self, "_weights", _index(self.entries))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, float]]) -> "Corpus":
        """Build a corpus, keeping the first occurrence of any repeated word."""
        seen = set()
        out: List[Entry] = []
        for w, c in pairs:
            if w in seen:
                continue
            seen.add(w)
            out.append((w, float(c)))
        return cls(tuple(out))

    @classmethod
    def uniform(cls, words: Iterable[str]) -> "Corpus":
        return cls.from_pairs((w, 1.0) for w in words)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __contains__(self, word: object) -> bool:
        return word in self._weights

    def words(self) -> List[str]:
        return [w for w, _ in self.entries]

    def weight(self, word: str) -> float:
        return self._weights.get(word, 0.0)


class CandidateSet:
    """The live hypothesis space for the secret word."""

    __slots__ = ("_entries", "_weights", "_total")

    def __init__(self, entries: Sequence[Entry]):
        self._entries = entries
        self._weights: Dict[str, float] | None = None
        self._total: float | None = None

    @classmethod
    def from_corpus(cls, corpus: Corpus) -> "CandidateSet":
        return cls(corpus.entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup()

    def __repr__(self) -> str:
        preview = ", ".join(w for w, _ in self._entries[:5])
        more = ", ..." if len(self._entries) > 5 else ""
        return f"CandidateSet({len(self._entries)}: {preview}{more})"

    def _lookup(self) -> Dict[str, float]:
        if self._weights is None:
            self._weights = _index(self._entries)
        return self._weights

    @property
    def entries(self) -> Sequence[Entry]:
        return self._entries

    def words(self) -> List[str]:
        return [w for w, _ in self._entries]

    def weights(self) -> List[float]:
        return [c for _, c in self._entries]

    def total_weight(self) -> float:
        if self._total is None:
            self._total = float(sum(c for _, c in self._entries))
        return self._total

    def weight(self, word: str) -> float:
        return self._lookup().get(word, 0.0)

    def probability(self, word: str) -> float:
        """P(word is the secret) within this set; 0 for non-members."""
        total = self.total_weight()
        if total <= 0:
            return 0.0
        return self.weight(word) / total

    def only(self) -> str | None:
        """The single remaining word, or None when 0 or 2+ remain."""
        return self._entries[0][0] if len(self._entries) == 1 else None
