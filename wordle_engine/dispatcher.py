"""
dispatcher.py

Scores a whole guess vocabulary against one candidate set on a thread pool.

One task per guess word. The index tables and the candidate set are shared
read-only by every task; each task returns its own ScoreEntry and the
dispatching thread gathers them as they complete, so nothing is written
concurrently. The optional progress bar is fed from the gathering loop only
and never touches the results.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, List, NamedTuple, Optional

from tqdm import tqdm

from wordle_engine.errors import InconsistentHistory
from wordle_engine.index import CandidateSet, IndexTables, population
from wordle_engine.scoring import score

log = logging.getLogger(__name__)


class ScoreEntry(NamedTuple):
    guess: str
    score: float


def _score_task(tables: IndexTables, guess: str, candidates: CandidateSet) -> ScoreEntry:
    return ScoreEntry(guess, score(tables, guess, candidates))


def analyze_all(
    tables: IndexTables,
    guesses: Iterable[str],
    candidates: CandidateSet,
    *,
    workers: Optional[int] = None,
    progress: bool = False,
) -> List[ScoreEntry]:
    """
    Score every guess against `candidates`.

    Returns one ScoreEntry per guess, in completion order (unordered; rank
    the result before comparing or displaying). Blocks until every task has
    finished. `workers=None` lets the executor pick its default pool size.
    """
    if population(candidates) == 0:
        raise InconsistentHistory()
    if workers is not None and workers < 1:
        raise ValueError("workers must be a positive integer")

    words = list(guesses)
    shared = candidates.copy()
    shared.flags.writeable = False

    results: List[ScoreEntry] = []
    t0 = time.perf_counter()
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_score_task, tables, w, shared) for w in words]
        with tqdm(total=len(futures), desc="Analyzing guesses", unit="word", disable=not progress) as pbar:
            for future in as_completed(futures):
                results.append(future.result())
                pbar.update(1)
    dt = time.perf_counter() - t0

    rate = len(results) / dt if dt > 0 else float("inf")
    log.info(
        "scored %d guesses against %d candidates in %.2fs (%.1f words/s)",
        len(results), population(shared), dt, rate,
    )
    return results
