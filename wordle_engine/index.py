"""
index.py

Precomputed letter tables over the solution vocabulary.

Every table row is a numpy bool array with one entry per solution word, so
filtering a candidate set is a handful of vectorized AND / AND-NOT / NOT
operations. Tables are built once and never written afterwards; worker
threads share them without locking.
"""

from __future__ import annotations

import logging

import numpy as np

from wordle_engine.vocab import ALPHABET_SIZE, WordVocab

log = logging.getLogger(__name__)

CandidateSet = np.ndarray  # 1-D bool, bit i <=> solution word i still possible


def letter_codes(words) -> np.ndarray:
    """Words -> (n_words, word_len) uint8 array of letter codes 0..25."""
    words = list(words)
    if not words:
        return np.zeros((0, 0), dtype=np.uint8)
    arr = np.frombuffer("".join(words).encode("ascii"), dtype=np.uint8)
    return (arr.reshape(len(words), len(words[0])) - ord("a")).astype(np.uint8)


def population(candidates: CandidateSet) -> int:
    """Number of set bits, i.e. solutions still possible."""
    return int(np.count_nonzero(candidates))


class IndexTables:
    """
    position_index[j, c, i] -- solution i has letter c at position j
    presence_index[c, i]    -- solution i contains letter c anywhere

    `codes` (n, L) and `contains` (n, 26) are the same facts laid out per
    word, used by the scoring engine to derive patterns for all candidates
    at once.
    """

    def __init__(self, solutions: WordVocab) -> None:
        if not isinstance(solutions, WordVocab):
            raise TypeError("solutions must be a WordVocab")

        self.solutions = solutions
        self.word_len = solutions.word_len
        n = len(solutions)

        self.codes = letter_codes(solutions)
        rows = np.arange(n)

        position = np.zeros((self.word_len, ALPHABET_SIZE, n), dtype=bool)
        for j in range(self.word_len):
            position[j, self.codes[:, j], rows] = True
        presence = position.any(axis=0)

        contains = np.zeros((n, ALPHABET_SIZE), dtype=bool)
        for j in range(self.word_len):
            contains[rows, self.codes[:, j]] = True

        for arr in (position, presence, contains, self.codes):
            arr.flags.writeable = False
        self.position_index = position
        self.presence_index = presence
        self.contains = contains
        log.debug("built index tables for %d solution words", n)

    def __len__(self) -> int:
        return len(self.solutions)

    def all_candidates(self) -> CandidateSet:
        """A fresh candidate set with every solution possible."""
        return np.ones(len(self.solutions), dtype=bool)

    def candidate_words(self, candidates: CandidateSet) -> list[str]:
        return self.solutions.to_words(np.flatnonzero(candidates))

    def is_possible_solution(self, word: str, candidates: CandidateSet) -> bool:
        """True iff `word` is a solution word whose bit is set in `candidates`."""
        if word not in self.solutions:
            return False
        return bool(candidates[self.solutions.index_of(word)])
