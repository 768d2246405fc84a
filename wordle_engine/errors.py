"""
errors.py

Exceptions raised by the analysis engine.
"""


class WordleEngineError(Exception):
    """Base class for engine errors."""


class MalformedInput(WordleEngineError, ValueError):
    """A guess or feedback string is the wrong length or uses unknown symbols."""


class InconsistentHistory(WordleEngineError):
    """No solution word satisfies every supplied (guess, feedback) record."""

    def __init__(self, history=None) -> None:
        self.history = list(history or [])
        n = len(self.history)
        super().__init__(f"no candidates remain after applying {n} guess record(s)")
