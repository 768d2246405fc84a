"""
session.py

One round of analysis: fold the known history, then either report the
unique solution, reject an inconsistent history, or score and rank every
guess.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, List, NamedTuple, Optional, Sequence

from wordle_engine.constraints import fold_history
from wordle_engine.dispatcher import ScoreEntry, analyze_all
from wordle_engine.errors import InconsistentHistory, MalformedInput
from wordle_engine.feedback import GuessRecord, hits_consistent, make_record
from wordle_engine.index import CandidateSet, IndexTables, population
from wordle_engine.vocab import WordVocab

log = logging.getLogger(__name__)

SOLVED = "solved"
RANKED = "ranked"


class RankedGuess(NamedTuple):
    guess: str
    score: float
    possible: bool  # guess is itself still a possible solution


class RoundResult(NamedTuple):
    status: str                      # SOLVED or RANKED
    remaining: int                   # candidates left after the history
    candidates: List[str]
    solution: Optional[str] = None   # set when status == SOLVED
    ranking: Sequence[RankedGuess] = ()  # best first; empty when SOLVED
    elapsed: float = 0.0             # seconds spent scoring


def rank(entries: Iterable[ScoreEntry], tables: IndexTables, candidates: CandidateSet) -> List[RankedGuess]:
    """
    Sort by score ascending. Equal scores put guesses that are still possible
    solutions (bit set in `candidates`) first, then fall back to alphabetical
    order so the ranking is the same on every run.
    """
    ranked = [RankedGuess(e.guess, e.score, tables.is_possible_solution(e.guess, candidates)) for e in entries]
    ranked.sort(key=lambda r: (r.score, not r.possible, r.guess))
    return ranked


def best(ranking: Sequence[RankedGuess], k: int = 10) -> List[RankedGuess]:
    return list(ranking[:k]) if k > 0 else []


def worst(ranking: Sequence[RankedGuess], k: int = 10) -> List[RankedGuess]:
    """The k highest-scoring guesses, worst first."""
    return list(reversed(ranking[-k:])) if k > 0 else []


class AnalysisSession:
    """
    Holds the vocabularies and index tables for one process.

    Parameters
    ----------
    guesses : WordVocab
        Every legal guess; these are the words that get scored.
    solutions : WordVocab
        Every possible secret word; candidate sets index into this.
    workers : int | None
        Thread pool size for scoring (None = executor default).
    progress : bool
        Show a progress bar while scoring.
    hard_mode : bool
        Only score guesses that keep every known HIT letter in place.
    """

    def __init__(
        self,
        guesses: WordVocab,
        solutions: WordVocab,
        *,
        workers: Optional[int] = None,
        progress: bool = False,
        hard_mode: bool = False,
    ) -> None:
        if not isinstance(guesses, WordVocab) or not isinstance(solutions, WordVocab):
            raise TypeError("guesses and solutions must be WordVocab instances")
        if guesses.word_len != solutions.word_len:
            raise ValueError("guess and solution words must have the same length")

        self.guesses = guesses
        self.solutions = solutions
        self.workers = workers
        self.progress = bool(progress)
        self.hard_mode = bool(hard_mode)

        t0 = time.perf_counter()
        self.tables = IndexTables(solutions)
        log.debug("index tables ready in %.3fs", time.perf_counter() - t0)

    def validate(self, history: Iterable) -> List[GuessRecord]:
        """Turn (guess, feedback) pairs into checked GuessRecords; raises MalformedInput."""
        records = []
        for item in history:
            try:
                guess, feedback = item
            except (TypeError, ValueError):
                raise MalformedInput(f"history items must be (guess, feedback) pairs, got {item!r}") from None
            records.append(make_record(guess, feedback, self.tables.word_len))
        return records

    def scored_guesses(self, history: Sequence[GuessRecord]) -> List[str]:
        if not self.hard_mode:
            return self.guesses.words()
        return [w for w in self.guesses if hits_consistent(w, history)]

    def run(self, history: Iterable = ()) -> RoundResult:
        """
        Analyze one round.

        Raises MalformedInput before any filtering if a record is malformed,
        and InconsistentHistory if no solution fits the history. One remaining
        candidate is returned as SOLVED without scoring anything.
        """
        records = self.validate(history)
        candidates = fold_history(self.tables, records)
        remaining = population(candidates)
        log.info("remaining possible solutions: %d", remaining)

        if remaining == 0:
            raise InconsistentHistory(records)

        words = self.tables.candidate_words(candidates)
        if remaining == 1:
            return RoundResult(SOLVED, 1, words, solution=words[0])

        t0 = time.perf_counter()
        entries = analyze_all(
            self.tables,
            self.scored_guesses(records),
            candidates,
            workers=self.workers,
            progress=self.progress,
        )
        elapsed = time.perf_counter() - t0
        return RoundResult(RANKED, remaining, words, ranking=rank(entries, self.tables, candidates), elapsed=elapsed)
