from wordlebits.engine import Corpus
from wordlebits.harness import SessionState, SolverSession, TurnStatus
from wordlebits.solvers import SolverConfig, create_solver

DOC_WORDS = ["depot", "least", "tares", "event"]


def _session(words, **cfg):
    return SolverSession(Corpus.uniform(words), create_solver("weighted", SolverConfig(**cfg)))


def test_documented_scenario_removes_inconsistent_words():
    s = _session(DOC_WORDS, opening_guess=None)
    assert s.state is SessionState.AWAITING_GUESS_SELECTION
    s.recommend()
    assert s.state is SessionState.AWAITING_FEEDBACK

    r = s.submit("event mwwwc")
    assert r.status is TurnStatus.CONTINUE
    assert s.candidates.words() == ["depot", "least"]
    assert s.history == (("event", "mwwwc"),)
    assert s.state is SessionState.AWAITING_GUESS_SELECTION


def test_invalid_input_does_not_touch_state():
    s = _session(DOC_WORDS)
    first = s.recommend()
    for bad in ["", "event", "event mwwxc", "evnt mwwwc", "event mwwwc now"]:
        r = s.submit(bad)
        assert r.status is TurnStatus.INVALID_INPUT
        assert r.message
        assert not r.accepted
    assert len(s.candidates) == 4 and s.history == ()
    assert s.state is SessionState.AWAITING_FEEDBACK
    assert s.recommend() == first


def test_invalid_feedback_keeps_candidates_and_allows_retry():
    s = _session(DOC_WORDS)
    s.recommend()
    before = s.candidates
    r = s.submit("event wwwww")
    assert r.status is TurnStatus.INVALID_FEEDBACK
    assert r.remaining == 4
    assert s.candidates is before and s.history == ()
    assert s.state is SessionState.AWAITING_FEEDBACK

    assert s.submit("event mwwwc").status is TurnStatus.CONTINUE


def test_single_remaining_candidate_is_solved():
    s = _session(DOC_WORDS)
    s.recommend()
    r = s.submit("depot wmwwc")
    assert r.status is TurnStatus.SOLVED
    assert r.answer == "event" and r.terminal
    assert s.state is SessionState.SOLVED
    assert s.recommend() == "event"
    assert s.submit("event ccccc").status is TurnStatus.INVALID_INPUT


def test_all_correct_pattern_is_solved():
    s = _session(DOC_WORDS)
    r = s.submit_feedback("least", "CCCCC")
    assert r.status is TurnStatus.SOLVED and s.answer == "least"


def test_opening_guess_used_on_first_turn_only():
    s = _session(DOC_WORDS, opening_guess="tares")
    assert s.recommend() == "tares"
    s.submit("event mwwwc")
    assert s.recommend() in ("depot", "least")


def test_recommendation_is_best_ranked_word():
    corpus = Corpus.from_pairs([("depot", 1), ("least", 9), ("tares", 1), ("event", 1)])
    s = SolverSession(corpus, create_solver("weighted", SolverConfig(opening_guess=None)))
    assert s.recommend() == "least"


def test_empty_and_singleton_corpus():
    empty = SolverSession(Corpus(()))
    assert empty.state is SessionState.EXHAUSTED and empty.recommend() is None
    assert empty.submit("tares wwwww").status is TurnStatus.INVALID_INPUT

    one = SolverSession(Corpus.uniform(["depot"]))
    assert one.state is SessionState.SOLVED and one.recommend() == "depot"
