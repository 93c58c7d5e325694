# apps/cli/play.py
"""
Interactive helper for a real Wordle game.

This script:
  1) Loads the word/frequency dictionary into a Corpus.
  2) Suggests a guess, then waits for what the game showed you:
         <guess> <pattern>       e.g.  tares wmwwc
     pattern letters: c = correct (green), m = misplaced (yellow), w = wrong (gray)
  3) Narrows the candidates and suggests again, until solved.

Bad input or feedback that matches no remaining word is reported and the
same turn is asked again; nothing is lost.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordlebits.datasets import load_corpus
from wordlebits.harness import SolverSession, TurnStatus
from wordlebits.solvers import DEFAULT_SOLVER, SolverConfig, create_solver, get_solver_ids

PREVIEW = 10  # how many remaining candidates to list


def _show_candidates(session: SolverSession, out=print) -> None:
    words = session.candidates.words()
    if len(words) <= PREVIEW:
        out(f"  candidates: {', '.join(words)}")
    else:
        out(f"  candidates: {len(words)} (e.g. {', '.join(words[:PREVIEW])}, ...)")


def play(session: SolverSession, lines=None, out=print) -> int:
    """
    Drive one session from an iterator of input lines (stdin by default).
    Returns a process exit code: 0 solved, 1 exhausted/aborted.
    """
    lines = iter(sys.stdin.readline, "") if lines is None else iter(lines)

    while not session.is_over:
        out(f"[turn {session.turn}] try: {session.recommend()}")
        line = next(lines, None)
        if line is None:
            out("no more input; stopping.")
            return 1
        if not line.strip():
            continue
        if line.strip().lower() in ("q", "quit", "exit"):
            return 1

        result = session.submit(line)
        if result.status is TurnStatus.INVALID_INPUT:
            out(f"  invalid input: {result.message}")
        elif result.status is TurnStatus.INVALID_FEEDBACK:
            out(f"  that feedback matches none of the {result.remaining} remaining words; "
                f"check it and try again")
        elif result.status is TurnStatus.CONTINUE:
            out(f"  {result.message}")
            _show_candidates(session, out)

    if session.answer is not None:
        out(f"solved: {session.answer} (in {len(session.history)} reported guesses)")
        return 0
    out("no candidate words remain; the feedback or the dictionary is off.")
    return 1


def main():
    ap = argparse.ArgumentParser(description="wordlebits — suggest the next Wordle guess")
    ap.add_argument("--dictionary", default="data/dictionary.txt",
                    help="path to 'word count' dictionary (the corpus)")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--opener", default="tares",
                    help="fixed first guess ('' to rank the full corpus on turn 1)")
    ap.add_argument("--guess-pool", choices=["candidates", "corpus"], default="candidates",
                    help="rank only remaining candidates, or every corpus word")
    ap.add_argument("--workers", type=int, default=1, help="processes used for ranking")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        corpus = load_corpus(args.dictionary)
        config = SolverConfig(opening_guess=args.opener or None, guess_pool=args.guess_pool,
                              workers=args.workers)
        solver = create_solver(args.solver, config)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    print(f"Loaded {len(corpus)} words. Enter '<guess> <pattern>' (c/m/w), or 'q' to quit.")
    sys.exit(play(SolverSession(corpus, solver)))


if __name__ == "__main__":
    main()
