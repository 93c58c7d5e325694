import pytest
from wordlebits.engine import CandidateSet, Corpus
from wordlebits.solvers import SolverConfig, create_solver, get_solver_ids
from wordlebits.harness import run_case

ANSWERS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone"]
CORPUS = Corpus.from_pairs([(w, 10 * (i + 1)) for i, w in enumerate(ANSWERS + ["slate", "salet", "roate"])])


def test_registry():
    assert get_solver_ids() == ["entropy", "weighted"]
    with pytest.raises(ValueError):
        create_solver("nope")
    with pytest.raises(ValueError):
        SolverConfig(guess_pool="everything")


@pytest.mark.parametrize("solver_id", ["entropy", "weighted"])
@pytest.mark.parametrize("pool", ["candidates", "corpus"])
def test_entropy_smoke(solver_id, pool):
    solver = create_solver(solver_id, SolverConfig(guess_pool=pool))
    r = run_case(solver, "crane", corpus=CORPUS)
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "ccccc")


def test_opener_skipped_when_not_in_corpus():
    solver = create_solver("weighted", SolverConfig(opening_guess="tares"))
    solver.reset(corpus=CORPUS)
    state = {"turn": 1, "history": [], "candidates": CandidateSet.from_corpus(CORPUS)}
    assert solver.next_guess(state) in CORPUS
    assert solver.next_guess(state) != "tares"
