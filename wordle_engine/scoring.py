"""
scoring.py

Expected number of solutions left after a guess.

For each still-possible solution s, the guess would receive
derive_pattern(guess, s); filtering the candidates with that pattern leaves
some number of words. The score of a guess is the mean of that number over
every possible s (each solution equally likely). Lower is better.
"""

from __future__ import annotations

import numpy as np

from wordle_engine.constraints import apply
from wordle_engine.errors import InconsistentHistory
from wordle_engine.feedback import HIT, MISS, PRESENT, int_to_pattern, validate_guess
from wordle_engine.index import CandidateSet, IndexTables, letter_codes, population


def derive_codes(tables: IndexTables, guess: str, rows: np.ndarray) -> np.ndarray:
    """
    Pattern codes (see feedback.pattern_to_int) of `guess` against each
    solution in `rows`, computed in one pass. Same per-letter rule as
    feedback.derive_pattern.
    """
    g = letter_codes([guess])[0]
    hit = tables.codes[rows] == g
    present = tables.contains[rows][:, g]
    trits = np.where(hit, HIT, np.where(present, PRESENT, MISS))
    weights = 3 ** np.arange(tables.word_len - 1, -1, -1)
    return trits @ weights


def score(tables: IndexTables, guess: str, candidates: CandidateSet) -> float:
    """
    Mean remaining candidates after guessing `guess`, in [1, population].

    Solutions that produce the same pattern filter to the same set, so each
    distinct pattern is applied once and weighted by how many solutions
    produce it.
    """
    validate_guess(guess, tables.word_len)
    total = population(candidates)
    if total == 0:
        raise InconsistentHistory()

    rows = np.flatnonzero(candidates)
    codes, counts = np.unique(derive_codes(tables, guess, rows), return_counts=True)

    remaining = 0
    for code, count in zip(codes, counts):
        pattern = int_to_pattern(int(code), tables.word_len)
        remaining += int(count) * population(apply(tables, candidates, guess, pattern))
    return remaining / total
