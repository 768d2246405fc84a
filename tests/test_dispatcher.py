import numpy as np
import pytest

from wordle_engine.constraints import fold_history
from wordle_engine.dispatcher import ScoreEntry, analyze_all
from wordle_engine.errors import InconsistentHistory
from wordle_engine.feedback import make_record
from wordle_engine.scoring import score


def test_analyze_all_scores_every_guess_once(tables, guesses):
    cands = fold_history(tables, [make_record("crane", "-----")])
    results = analyze_all(tables, guesses, cands, workers=4)

    assert len(results) == len(guesses)
    assert all(isinstance(r, ScoreEntry) for r in results)
    assert sorted(r.guess for r in results) == sorted(guesses)
    for r in results:
        assert r.score == score(tables, r.guess, cands)


def test_worker_count_does_not_change_results(tables, guesses):
    cands = tables.all_candidates()
    one = sorted(analyze_all(tables, guesses, cands, workers=1))
    many = sorted(analyze_all(tables, guesses, cands, workers=8))
    assert one == many


def test_progress_bar_does_not_affect_results(tables, guesses):
    cands = tables.all_candidates()
    quiet = sorted(analyze_all(tables, guesses, cands, progress=False))
    loud = sorted(analyze_all(tables, guesses, cands, progress=True))
    assert quiet == loud


def test_candidates_left_writable_and_unchanged(tables, guesses):
    cands = tables.all_candidates()
    analyze_all(tables, guesses, cands, workers=2)
    assert cands.flags.writeable
    assert cands.all()


def test_empty_guess_list(tables):
    assert analyze_all(tables, [], tables.all_candidates()) == []


def test_no_candidates_is_rejected(tables, guesses):
    with pytest.raises(InconsistentHistory):
        analyze_all(tables, guesses, np.zeros(len(tables), dtype=bool))


def test_bad_worker_count(tables, guesses):
    with pytest.raises(ValueError):
        analyze_all(tables, guesses, tables.all_candidates(), workers=0)
