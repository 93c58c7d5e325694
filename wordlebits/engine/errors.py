"""
Error kinds raised by the engine.

  - InvalidInput    : malformed guess / pattern text (re-prompt, nothing changes)
  - InvalidFeedback : well-formed pattern that no remaining candidate can produce
  - Exhausted       : the candidate set is empty; the session cannot continue

The session driver catches these and turns them into TurnResult values, so
none of them escape an interactive loop.
"""


class WordleError(Exception):
    """Base class for all engine errors."""


class InvalidInput(WordleError, ValueError):
    """Raised when a guess or pattern string is malformed."""


class InvalidFeedback(WordleError):
    """Raised when feedback is inconsistent with every remaining candidate."""

    def __init__(self, guess: str, pattern: str, remaining: int):
        self.guess = guess
        self.pattern = pattern
        self.remaining = remaining
        super().__init__(
            f"no remaining candidate ({remaining} left) produces pattern "
            f"'{pattern}' for guess '{guess}' (check the feedback for typos)"
        )


class Exhausted(WordleError):
    """Raised when there are no candidates left to recommend from."""
