from apps.cli.play import play
from wordlebits.engine import Corpus
from wordlebits.harness import SolverSession
from wordlebits.solvers import SolverConfig, create_solver


def _session():
    corpus = Corpus.uniform(["depot", "least", "tares", "event"])
    return SolverSession(corpus, create_solver("weighted", SolverConfig(opening_guess="tares")))


def test_play_reprompts_and_solves():
    out = []
    code = play(_session(), ["garbage\n", "event wwwww\n", "event mwwwc\n", "depot wcwwc\n"], out.append)
    assert code == 0
    assert out[0] == "[turn 1] try: tares"
    assert any("invalid input" in line for line in out)
    assert any("matches none" in line for line in out)
    assert out[-1].startswith("solved: least")


def test_play_stops_when_input_ends():
    out = []
    assert play(_session(), [], out.append) == 1
    assert out[-1] == "no more input; stopping."
