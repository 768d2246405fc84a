"""
starting_word/eval.py

Score every legal first guess against the full solution set and write the
whole ranking to CSV.

Columns:
- guess: the guess word
- exp_remaining: expected solutions left after its feedback (lower is better)
- possible: 1 if the guess is itself a possible solution

Usage:
  python -m starting_word.eval
  python -m starting_word.eval --csv word_list.csv --out starting_word_results.csv --top 20 --limit-guesses 500
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional

import pandas as pd

from wordle_engine.data_utils import load_vocabularies
from wordle_engine.dispatcher import analyze_all
from wordle_engine.index import IndexTables
from wordle_engine.session import RankedGuess, rank
from wordle_engine.vocab import WordVocab


def evaluate_first_guesses(
    answers: WordVocab,
    guesses: List[str],
    *,
    workers: Optional[int] = None,
    progress: bool = False,
) -> List[RankedGuess]:
    """Rank `guesses` against every word of `answers` (best first)."""
    tables = IndexTables(answers)
    candidates = tables.all_candidates()
    entries = analyze_all(tables, guesses, candidates, workers=workers, progress=progress)
    return rank(entries, tables, candidates)


def to_frame(results: List[RankedGuess]) -> pd.DataFrame:
    df = pd.DataFrame(results, columns=["guess", "exp_remaining", "possible"])
    df["possible"] = df["possible"].astype(int)
    return df


def _print_top(df: pd.DataFrame, k: int = 20) -> None:
    print(f"\nTop {k} starting words by expected remaining:")
    print(f"{'rank':>4}  {'guess':<8}  {'exp_rem':>8}")
    for idx, r in enumerate(df.head(k).itertuples(index=False), start=1):
        mark = " *" if r.possible else ""
        print(f"{idx:>4}  {r.guess:<8}  {r.exp_remaining:>8.2f}{mark}")


def main():
    ap = argparse.ArgumentParser(description="Rank every first guess by expected remaining solutions.")
    ap.add_argument("--csv", default="word_list.csv", help="Path to word_list.csv")
    ap.add_argument("--guesses", default=None, help="guess list overriding --csv")
    ap.add_argument("--answers", default=None, help="answer list overriding --csv")
    ap.add_argument("--out", default="starting_word_results.csv", help="Output CSV filename")
    ap.add_argument("--top", type=int, default=20, help="How many top rows to print")
    ap.add_argument("--workers", type=int, default=None, help="scoring threads")
    ap.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show progress during evaluation (use --no-progress to disable)",
    )
    ap.add_argument("--limit-guesses", type=int, default=None, help="Evaluate only the first K guesses (for speed)")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    guess_vocab, answers = load_vocabularies(args.csv, guesses_path=args.guesses, answers_path=args.answers)
    words = guess_vocab.words()
    if args.limit_guesses is not None:
        words = words[: args.limit_guesses]

    print(f"Scoring {len(words)} guesses against {len(answers)} answers...", flush=True)
    t0 = time.perf_counter()
    df = to_frame(evaluate_first_guesses(answers, words, workers=args.workers, progress=args.progress))
    dt = time.perf_counter() - t0
    print(f"Done in {dt:.2f}s", flush=True)

    _print_top(df, k=args.top)
    df.to_csv(args.out, index=False)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
