"""
Offline benchmark primitives.

- run_case:  play one puzzle (known answer) through a SolverSession, with the
             engine itself producing the feedback a real game would give.
- run_batch: run many puzzles in sequence (optionally only the first `max`).

Games are not cut off at Wordle's 6 turns: the turn budget is generous so the
distribution of guess counts is not truncated; `success` still reports
whether the answer was found within WORDLE_MAX_TURNS.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Dict, Iterable, List

from wordlebits.engine import Corpus, encode
from wordlebits.solvers import BaseSolver
from .session import SolverSession

log = logging.getLogger(__name__)

# Official Wordle turn budget.
WORDLE_MAX_TURNS = 6

# Hard stop for a single simulated game.
TURN_LIMIT = 32


def run_case(
        solver: BaseSolver,
        answer: str,
        *,
        corpus: Corpus,
        turn_limit: int = TURN_LIMIT,
) -> Dict:
    """
    Execute one game until the solver finds `answer` or `turn_limit` runs out.

    Returns:
        dict with keys:
            answer, success (bool), guesses (int), time_ms (float),
            history (list of (guess, pattern)), status (final session state)
    """
    if answer not in corpus:
        raise ValueError(f"answer '{answer}' is not in the corpus")

    session = SolverSession(corpus, solver)
    history: List = []

    t0 = time.perf_counter()
    while not session.is_over and len(history) < turn_limit:
        guess = session.recommend()
        if guess is None:
            break
        patt = encode(guess, answer)
        history.append((guess, patt))
        result = session.submit_feedback(guess, patt)
        if not result.accepted:
            # Truthful feedback should never be rejected; stop rather than spin.
            log.error("feedback for '%s' rejected: %s", answer, result.message)
            break

    # A session can be solved by elimination before the answer was typed in.
    if session.answer == answer and (not history or history[-1][0] != answer):
        history.append((answer, encode(answer, answer)))

    dt = (time.perf_counter() - t0) * 1000.0
    found = session.answer == answer
    return {
        "answer": answer,
        "success": found and len(history) <= WORDLE_MAX_TURNS,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "status": session.state.value,
    }


def playable_answers(answers: Iterable[str], corpus: Corpus, limit: int | None = None) -> List[str]:
    """
    Answers present in the corpus, in order, cut to the first `limit`.
    Missing answers are skipped with a warning since no corpus-bound solver
    could ever find them.
    """
    answers = list(answers)
    pool = [a for a in answers if a in corpus]
    if len(pool) < len(answers):
        log.warning("skipping %d answer(s) not present in the corpus", len(answers) - len(pool))
    if limit is not None:
        pool = pool[:limit]
    return pool


def run_batch(
        solver: BaseSolver,
        answers: Iterable[str],
        *,
        corpus: Corpus,
        limit: int | None = None,
        on_result: Callable[[Dict], None] | None = None,
) -> List[Dict]:
    """Run many cases back-to-back over `playable_answers(answers, corpus, limit)`."""
    out: List[Dict] = []
    for ans in playable_answers(answers, corpus, limit):
        r = run_case(solver, ans, corpus=corpus)
        r["solver_id"] = solver.id
        out.append(r)
        if on_result is not None:
            on_result(r)
    return out


def average_guesses(results: List[Dict]) -> float:
    """Mean number of guesses over the games that found their answer."""
    solved = [r["guesses"] for r in results if r["history"] and r["history"][-1][0] == r["answer"]]
    return sum(solved) / len(solved) if solved else 0.0
