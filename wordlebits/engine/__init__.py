from .scoring import encode, parse_pattern, pattern_index, all_patterns, is_solved
from .corpus import Corpus, CandidateSet
from .constraints import prune
from .entropy import entropy, score, rank_all, Ranked
from .validation import validate_guess, parse_feedback_line
from .errors import WordleError, InvalidInput, InvalidFeedback, Exhausted

__all__ = [
    "encode", "parse_pattern", "pattern_index", "all_patterns", "is_solved",
    "Corpus", "CandidateSet",
    "prune",
    "entropy", "score", "rank_all", "Ranked",
    "validate_guess", "parse_feedback_line",
    "WordleError", "InvalidInput", "InvalidFeedback", "Exhausted",
]
