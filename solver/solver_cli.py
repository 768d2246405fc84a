"""
solver/solver_cli.py

One round of Wordle guess analysis:
- Pass the guesses you have made so far, each followed by the feedback you saw.
- Feedback is one symbol per letter: '=' right letter, right place;
  '+' letter is in the word, elsewhere; '-' letter is not in the word.
- Every legal guess is scored by the expected number of solutions it leaves.
  The 10 best and 10 worst guesses are printed; '*' marks guesses that could
  still be the solution.

Run:
  python -m solver.solver_cli crane -+--= --csv word_list.csv
  python -m solver.solver_cli --guesses allowed.txt --answers answers.txt

Exit status: 0 on success, 1 for malformed input or unreadable word lists,
2 for a usage error, 3 when no word fits the feedback.
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
import time
from typing import List, Optional, Sequence

from wordle_engine.data_utils import load_vocabularies
from wordle_engine.errors import InconsistentHistory, MalformedInput
from wordle_engine.feedback import GuessRecord, count_matching_hits, parse_history
from wordle_engine.session import RANKED, AnalysisSession, RankedGuess, best, worst

EXIT_MALFORMED = 1
EXIT_INCONSISTENT = 3  # 2 is argparse's usage error

_FEEDBACK_TOKEN = re.compile(r"^[=+\-]+$")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Rank Wordle guesses by expected remaining solutions")
    ap.add_argument("guesses_made", nargs="*", metavar="GUESS",
                    help="known guesses, each followed by its feedback (e.g. crane -+--=)")
    ap.add_argument("--csv", default="word_list.csv",
                    help="word_list.csv with a 'word' column and a 'day' column marking answers")
    ap.add_argument("--guesses", default=None, help="guess list (.csv or one word per line); overrides --csv")
    ap.add_argument("--answers", default=None, help="answer list (.csv or one word per line); overrides --csv")
    ap.add_argument("--top", type=int, default=10, help="how many best/worst guesses to print")
    ap.add_argument("--workers", type=int, default=None, help="scoring threads (default: executor default)")
    ap.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show progress during scoring (use --no-progress to disable)",
    )
    ap.add_argument("--hard-mode", action="store_true",
                    help="only score guesses that keep every known '=' letter in place")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def split_feedback(argv: List[str]) -> tuple[List[str], List[str]]:
    """
    Pull feedback strings out of argv before argparse sees them; feedback such
    as "-+--=" would otherwise be read as an option.
    """
    rest: List[str] = []
    feedback: List[str] = []
    for tok in argv:
        if tok != "--" and _FEEDBACK_TOKEN.match(tok):
            feedback.append(tok)
        else:
            rest.append(tok)
    return rest, feedback


def pair_history(guesses: List[str], feedback: List[str]) -> List[GuessRecord]:
    if len(guesses) != len(feedback):
        raise MalformedInput(f"got {len(guesses)} guess(es) but {len(feedback)} feedback string(s)")
    flat: List[str] = []
    for g, f in zip(guesses, feedback):
        flat += [g, f]
    return parse_history(flat)


def _print_block(title: str, rows: List[RankedGuess], history: Sequence[GuessRecord], hard_mode: bool) -> None:
    print(title)
    for r in rows:
        line = f"{r.guess}: {r.score:.2f}"
        if r.possible:
            line += " *"
        if hard_mode:
            line += f"  (hits kept: {count_matching_hits(r.guess, history)})"
        print(line)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    rest, feedback = split_feedback(sys.argv[1:] if argv is None else list(argv))
    args = ap.parse_intermixed_args(rest)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    t0 = time.perf_counter()

    try:
        if args.top < 1:
            raise MalformedInput(f"--top must be a positive integer, got {args.top}")
        if args.workers is not None and args.workers < 1:
            raise MalformedInput(f"--workers must be a positive integer, got {args.workers}")
        history = pair_history(args.guesses_made, feedback)
        guesses, answers = load_vocabularies(args.csv, guesses_path=args.guesses, answers_path=args.answers)
    except (MalformedInput, OSError, KeyError, ValueError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return EXIT_MALFORMED

    session = AnalysisSession(
        guesses,
        answers,
        workers=args.workers,
        progress=args.progress,
        hard_mode=args.hard_mode,
    )

    try:
        result = session.run(history)
    except InconsistentHistory:
        print("No possible solutions remain. Check your feedback inputs.")
        return EXIT_INCONSISTENT

    print(f"Remaining possible solutions: {result.remaining}")
    if result.status == RANKED:
        print(f"Time taken to analyze all guesses: {result.elapsed * 1000:.0f} ms\n")
        _print_block(f"Top {args.top} best guesses:", best(result.ranking, args.top), history, args.hard_mode)
        print()
        _print_block(f"Top {args.top} worst guesses:", worst(result.ranking, args.top), history, args.hard_mode)
    else:
        print(f"The solution is: {result.solution}")

    print(f"\nTotal time taken: {(time.perf_counter() - t0) * 1000:.0f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
