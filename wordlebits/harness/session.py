"""
Interactive solving session (the turn-by-turn driver).

One SolverSession = one puzzle whose secret lives outside the program. The
caller alternates between:
  - recommend()      -> the word the solver suggests playing next
  - submit(line)     -> "<guess> <pattern>" as reported by the real game

State machine:

    INITIALIZING -> AWAITING_GUESS_SELECTION -> AWAITING_FEEDBACK -> FILTERING
                          ^                                            |
                          +-------------------- (narrowed) ------------+
                                                                       |
                                              SOLVED / EXHAUSTED <-----+

Nothing in here raises on bad input: every submission returns a TurnResult.
Rejected input (INVALID_INPUT, INVALID_FEEDBACK) leaves the candidate set and
the history exactly as they were, so the same turn can simply be retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from wordlebits.engine import CandidateSet, Corpus, is_solved, parse_feedback_line, prune
from wordlebits.engine.errors import Exhausted, InvalidFeedback, InvalidInput
from wordlebits.engine.validation import parse_guess
from wordlebits.engine.scoring import parse_pattern
from wordlebits.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)


class SessionState(Enum):
    INITIALIZING = "initializing"
    AWAITING_GUESS_SELECTION = "awaiting_guess_selection"
    AWAITING_FEEDBACK = "awaiting_feedback"
    FILTERING = "filtering"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class TurnStatus(Enum):
    CONTINUE = "continue"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    INVALID_INPUT = "invalid_input"
    INVALID_FEEDBACK = "invalid_feedback"


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one submitted (guess, pattern) pair."""
    status: TurnStatus
    remaining: int
    message: str = ""
    answer: str | None = None  # set when SOLVED

    @property
    def accepted(self) -> bool:
        return self.status not in (TurnStatus.INVALID_INPUT, TurnStatus.INVALID_FEEDBACK)

    @property
    def terminal(self) -> bool:
        return self.status in (TurnStatus.SOLVED, TurnStatus.EXHAUSTED)


class SolverSession:
    """
    Owns the candidate set and guess record for one game.

    The corpus is shared and never modified; the candidate set starts as a
    view of it and is replaced by a smaller one after each accepted turn.
    """

    def __init__(self, corpus: Corpus, solver: BaseSolver | None = None):
        self.state = SessionState.INITIALIZING
        self.corpus = corpus
        self.solver = solver or create_solver()
        self.solver.reset(corpus=corpus)

        self._candidates = CandidateSet.from_corpus(corpus)
        self._history: List[Tuple[str, str]] = []
        self._pending: str | None = None
        self.answer: str | None = None

        if len(self._candidates) == 0:
            log.warning("session started with an empty corpus")
            self.state = SessionState.EXHAUSTED
        elif len(self._candidates) == 1:
            self.answer = self._candidates.only()
            self.state = SessionState.SOLVED
        else:
            self.state = SessionState.AWAITING_GUESS_SELECTION

    # ---- read-only views ----
    @property
    def candidates(self) -> CandidateSet:
        return self._candidates

    @property
    def history(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._history)

    @property
    def turn(self) -> int:
        return len(self._history) + 1

    @property
    def is_over(self) -> bool:
        return self.state in (SessionState.SOLVED, SessionState.EXHAUSTED)

    # ---- transitions ----
    def recommend(self) -> str | None:
        """
        The next word to play. Repeated calls before feedback return the same
        word. Once solved this is the answer; once exhausted it is None.
        """
        if self.state is SessionState.SOLVED:
            return self.answer
        if self.state is SessionState.EXHAUSTED:
            return None
        if self.state is SessionState.AWAITING_FEEDBACK and self._pending is not None:
            return self._pending

        state = {
            "turn": self.turn,
            "history": list(self._history),
            "candidates": self._candidates,
        }
        try:
            guess = self.solver.next_guess(state)
        except Exhausted:
            self.state = SessionState.EXHAUSTED
            return None

        self._pending = guess
        self.state = SessionState.AWAITING_FEEDBACK
        return guess

    def submit(self, line: str) -> TurnResult:
        """Parse a raw "<guess> <pattern>" line and apply it."""
        try:
            guess, pattern = parse_feedback_line(line)
        except InvalidInput as e:
            return self._reject(TurnStatus.INVALID_INPUT, str(e))
        return self._apply(guess, pattern)

    def submit_feedback(self, guess: str, pattern: str) -> TurnResult:
        """Apply an already split (guess, pattern) pair."""
        try:
            guess, pattern = parse_guess(guess), parse_pattern(pattern)
        except InvalidInput as e:
            return self._reject(TurnStatus.INVALID_INPUT, str(e))
        return self._apply(guess, pattern)

    def _reject(self, status: TurnStatus, message: str) -> TurnResult:
        level = logging.WARNING if status is TurnStatus.INVALID_FEEDBACK else logging.INFO
        log.log(level, "turn %d rejected (%s): %s", self.turn, status.value, message)
        return TurnResult(status, len(self._candidates), message)

    def _apply(self, guess: str, pattern: str) -> TurnResult:
        if self.is_over:
            return self._reject(TurnStatus.INVALID_INPUT, f"session is already {self.state.value}")

        resume = self.state
        self.state = SessionState.FILTERING

        if is_solved(pattern):
            self._history.append((guess, pattern))
            self._pending = None
            self.answer = guess
            self.state = SessionState.SOLVED
            return TurnResult(TurnStatus.SOLVED, len(self._candidates), f"solved: {guess}", guess)

        try:
            narrowed = prune(self._candidates, guess, pattern)
        except InvalidFeedback as e:
            self.state = resume
            return self._reject(TurnStatus.INVALID_FEEDBACK, str(e))

        self._history.append((guess, pattern))
        self._candidates = narrowed
        self._pending = None

        if len(narrowed) == 0:
            self.state = SessionState.EXHAUSTED
            log.warning("no candidates left after %s/%s", guess, pattern)
            return TurnResult(TurnStatus.EXHAUSTED, 0, "no candidate words remain")

        only = narrowed.only()
        if only is not None:
            self.answer = only
            self.state = SessionState.SOLVED
            return TurnResult(TurnStatus.SOLVED, 1, f"the answer must be {only}", only)

        self.state = SessionState.AWAITING_GUESS_SELECTION
        return TurnResult(TurnStatus.CONTINUE, len(narrowed), f"{len(narrowed)} candidates remain")
