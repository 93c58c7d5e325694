from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Literal, Type

from wordlebits.engine import CandidateSet, Corpus
from wordlebits.engine.entropy import PARALLEL_THRESHOLD

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


@dataclass
class SolverConfig:
    """
    Knobs shared by every solver.

    opening_guess     : fixed first guess (skips the most expensive ranking);
                        ignored if it is not in the corpus or set to None
    guess_pool        : "candidates" ranks only words still possible,
                        "corpus" ranks every corpus word against the candidates
    workers           : processes used by rank_all (1 = in-process)
    parallel_threshold: pool size at which ranking fans out to workers
    """
    opening_guess: str | None = "tares"
    guess_pool: Literal["candidates", "corpus"] = "candidates"
    workers: int = 1
    parallel_threshold: int = PARALLEL_THRESHOLD

    def __post_init__(self):
        if self.guess_pool not in ("candidates", "corpus"):
            raise ValueError(f"guess_pool must be 'candidates' or 'corpus', got '{self.guess_pool}'")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, config: SolverConfig | None = None):
        self.config = config or SolverConfig()
        self.corpus: Corpus = Corpus(())

    def reset(self, *, corpus: Corpus) -> None:
        self.corpus = corpus

    def guess_pool(self, candidates: CandidateSet) -> List[str]:
        if self.config.guess_pool == "corpus":
            return self.corpus.words()
        return candidates.words()

    def next_guess(self, state: dict) -> str:
        """
        state keys:
          turn       : 1-based turn number
          history    : list of (guess, pattern) so far
          candidates : CandidateSet consistent with the history
        """
        raise NotImplementedError("Override in subclass")
