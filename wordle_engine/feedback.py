"""
Feedback patterns for the analyzer.

A pattern is a tuple of WORD_LENGTH ints, one per letter position:
- 0 = MISS    (letter does not occur in the solution)
- 1 = PRESENT (letter occurs in the solution, but not at this position)
- 2 = HIT     (letter matches the solution at this position)

On the command line patterns are written with one symbol per position:
``=`` for HIT, ``+`` for PRESENT and ``-`` for MISS, e.g. ``"=+--="``.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Tuple

from wordle_engine.errors import MalformedInput
from wordle_engine.vocab import WORD_LENGTH, is_valid_word

MISS = 0
PRESENT = 1
HIT = 2

SYMBOLS = {"=": HIT, "+": PRESENT, "-": MISS}
_SYMBOL_OF = {v: k for k, v in SYMBOLS.items()}

FeedbackPattern = Tuple[int, ...]


class GuessRecord(NamedTuple):
    guess: str
    pattern: FeedbackPattern

    def __str__(self) -> str:
        return f"{self.guess} {format_pattern(self.pattern)}"


def validate_guess(guess: object, word_len: int = WORD_LENGTH) -> str:
    """Return `guess` unchanged, or raise MalformedInput."""
    if not isinstance(guess, str):
        raise MalformedInput("guess must be a string")
    if len(guess) != word_len:
        raise MalformedInput(f"guess {guess!r} must have length {word_len}")
    if not is_valid_word(guess, word_len):
        raise MalformedInput(f"guess {guess!r} must be lowercase a-z")
    return guess


def parse_pattern(text: str, word_len: int = WORD_LENGTH) -> FeedbackPattern:
    """
    Parse a feedback string such as ``"=+--="`` into a pattern tuple.

    Raises MalformedInput on the wrong length or on any symbol other than
    ``=``, ``+`` and ``-``. Nothing is truncated or padded.
    """
    if not isinstance(text, str):
        raise MalformedInput("feedback must be a string")
    if len(text) != word_len:
        raise MalformedInput(f"feedback {text!r} must have length {word_len}")
    try:
        return tuple(SYMBOLS[ch] for ch in text)
    except KeyError as e:
        raise MalformedInput(f"feedback {text!r} may only use '=', '+' and '-' (got {e.args[0]!r})") from None


def format_pattern(pattern: Iterable[int]) -> str:
    return "".join(_SYMBOL_OF[p] for p in pattern)


def make_record(guess: str, feedback, word_len: int = WORD_LENGTH) -> GuessRecord:
    """Build a validated GuessRecord from a guess and a feedback string or pattern."""
    guess = validate_guess(guess, word_len)
    if isinstance(feedback, str):
        pattern = parse_pattern(feedback, word_len)
    else:
        pattern = tuple(feedback)
        if len(pattern) != len(guess):
            raise MalformedInput(f"pattern for {guess!r} must have length {len(guess)}")
        if any(p not in (MISS, PRESENT, HIT) for p in pattern):
            raise MalformedInput("pattern elements must be in {0,1,2}")
    return GuessRecord(guess, pattern)


def parse_history(args: List[str]) -> List[GuessRecord]:
    """Turn ``[guess, feedback, guess, feedback, ...]`` into GuessRecords."""
    if len(args) % 2:
        raise MalformedInput(f"guess {args[-1]!r} has no feedback string")
    return [make_record(args[i], args[i + 1]) for i in range(0, len(args), 2)]


def derive_pattern(guess: str, solution: str) -> FeedbackPattern:
    """
    Feedback `guess` receives if `solution` is the secret word.

    Each position is judged on its own: HIT if the letters match, else
    PRESENT if the letter occurs anywhere in `solution`, else MISS. Repeated
    letters are not counted off against the solution, so "eerie" against
    "crane" is PRESENT at both leading e's. The engine's filtering tables use
    the same per-letter rule, which keeps derived patterns consistent with
    `constraints.apply`.
    """
    out: List[int] = []
    for g, s in zip(guess, solution):
        if g == s:
            out.append(HIT)
        elif g in solution:
            out.append(PRESENT)
        else:
            out.append(MISS)
    return tuple(out)


def pattern_to_int(pattern: Iterable[int]) -> int:
    """
    Encode a pattern into a single integer in [0, 3**len - 1] (base-3, first
    position most significant). All-HIT for five letters is 242.
    """
    value = 0
    for p in pattern:
        if p not in (MISS, PRESENT, HIT):
            raise ValueError("pattern elements must be integers in {0,1,2}")
        value = value * 3 + p
    return value


def int_to_pattern(code: int, word_len: int = WORD_LENGTH) -> FeedbackPattern:
    if not 0 <= code < 3 ** word_len:
        raise ValueError(f"pattern code out of range: {code}")
    digits = []
    for _ in range(word_len):
        digits.append(code % 3)
        code //= 3
    return tuple(reversed(digits))


def hits_consistent(word: str, history: Iterable[GuessRecord]) -> bool:
    """True iff `word` keeps every known HIT letter in its position."""
    for guess, pattern in history:
        for g, p, w in zip(guess, pattern, word):
            if p == HIT and g != w:
                return False
    return True


def count_matching_hits(word: str, history: Iterable[GuessRecord]) -> int:
    """How many known HIT positions (across all records) `word` reproduces."""
    n = 0
    for guess, pattern in history:
        n += sum(1 for g, p, w in zip(guess, pattern, word) if p == HIT and g == w)
    return n
