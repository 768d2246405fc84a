"""
constraints.py

Narrows candidate sets with (guess, feedback) records.
"""

from __future__ import annotations

import logging
from typing import Iterable

from wordle_engine.feedback import HIT, MISS, PRESENT, FeedbackPattern, GuessRecord, format_pattern
from wordle_engine.index import CandidateSet, IndexTables, population

log = logging.getLogger(__name__)


def apply(tables: IndexTables, base: CandidateSet, guess: str, pattern: FeedbackPattern) -> CandidateSet:
    """
    Return the subset of `base` consistent with `guess` having received `pattern`.

    - HIT at j:     solution has the letter at j
    - PRESENT at j: solution has the letter, but not at j
    - MISS at j:    solution does not have the letter at all

    `base` is left untouched; the per-position constraints are ANDed, so the
    order they are applied in does not matter.
    """
    result = base.copy()
    for j, (ch, p) in enumerate(zip(guess, pattern)):
        c = ord(ch) - 97
        if p == HIT:
            result &= tables.position_index[j, c]
        elif p == PRESENT:
            result &= tables.presence_index[c] & ~tables.position_index[j, c]
        elif p == MISS:
            result &= ~tables.presence_index[c]
        else:
            raise ValueError(f"pattern elements must be in {{0,1,2}}, got {p!r}")
    return result


def fold_history(tables: IndexTables, history: Iterable[GuessRecord]) -> CandidateSet:
    """
    Apply every record, in order, starting from "all solutions possible".

    An empty history returns the full set. The caller decides what a result
    of population 0 or 1 means.
    """
    candidates = tables.all_candidates()
    for guess, pattern in history:
        candidates = apply(tables, candidates, guess, pattern)
        log.debug("after %s %s: %d candidates", guess, format_pattern(pattern), population(candidates))
    return candidates

