from .session import SolverSession, SessionState, TurnResult, TurnStatus
from .core import run_case, run_batch, playable_answers, average_guesses
from .io import write_csv, write_manifest

__all__ = [
    "SolverSession", "SessionState", "TurnResult", "TurnStatus",
    "run_case", "run_batch", "playable_answers", "average_guesses",
    "write_csv", "write_manifest",
]
