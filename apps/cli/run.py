# apps/cli/run.py
"""
CLI entry point for benchmarking solvers against past answers.

This script:
  1) Validates the data files (prints counts + SHA, checks answers ⊆ dictionary).
  2) Loads the corpus and the past answers and instantiates the requested solver(s).
  3) Plays every answer (or the first --max) with simulated feedback, printing
     "guessed '<answer>' in <n>" per game or a progress bar, then the average.
  4) Writes, per solver:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dataset hashes, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from wordlebits.datasets import validate_wordlists, pretty_summary, load_corpus, load_answers
from wordlebits.harness import run_batch, playable_answers, average_guesses
from wordlebits.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlebits.solvers import DEFAULT_SOLVER, SolverConfig, create_solver, get_solver_ids


def main():
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlebits — benchmark solvers on past answers")
    ap.add_argument("--solver", nargs="+", default=[DEFAULT_SOLVER],
                    help=f"solver id(s) (any of: {solver_choices})")
    ap.add_argument("--dictionary", default="data/dictionary.txt",
                    help="path to 'word count' dictionary (the corpus)")
    ap.add_argument("--answers", default="data/answers.txt",
                    help="path to past answers (one per line)")
    ap.add_argument("--max", type=int, help="play only the first MAX answers")
    ap.add_argument("--opener", default="tares",
                    help="fixed first guess ('' to rank the full corpus on turn 1)")
    ap.add_argument("--guess-pool", choices=["candidates", "corpus"], default="candidates")
    ap.add_argument("--workers", type=int, default=1, help="processes used for ranking")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "games", "off"], default="games",
                    help="tqdm bar, one line per game, or nothing")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate data files and print a one-liner summary
    rep = validate_wordlists(args.dictionary, args.answers)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}", file=sys.stderr)

    # 2) Load
    try:
        corpus = load_corpus(args.dictionary)
        answers = load_answers(args.answers)
        config = SolverConfig(opening_guess=args.opener or None, guess_pool=args.guess_pool,
                              workers=args.workers)
        solvers = [create_solver(sid, config) for sid in args.solver]
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    run_id = timestamp_id()
    outdir = Path(args.outdir)

    games = playable_answers(answers, corpus, args.max)
    for solver in solvers:
        bar = tqdm(total=len(games), ncols=80, desc=solver.id, unit="game", disable=args.progress != "bar")

        def on_result(r):
            bar.update(1)
            if args.progress == "games":
                if r["history"] and r["history"][-1][0] == r["answer"]:
                    print(f"guessed '{r['answer']}' in {r['guesses']}")
                else:
                    print(f"failed to guess '{r['answer']}'", file=sys.stderr)

        results = run_batch(solver, games, corpus=corpus, on_result=on_result)
        bar.close()

        avg = average_guesses(results)
        won = sum(1 for r in results if r["success"])
        print(f"[{solver.id}] average score {avg:.2f} | solved in <=6: {won}/{len(results)}")

        # 3) Write outputs (CSV + manifest)
        sdir = outdir / solver.id
        csv_path = sdir / f"run_{run_id}.csv"
        manifest_path = sdir / f"run_{run_id}_manifest.json"
        write_csv(results, str(csv_path))
        write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlists": rep,
            "num_cases": len(results),
            "average_guesses": avg,
            "solver_id": solver.id,
        }, str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
