import numpy as np
import pytest

from wordle_engine.constraints import apply, fold_history
from wordle_engine.errors import InconsistentHistory
from wordle_engine.feedback import derive_pattern, make_record, pattern_to_int
from wordle_engine.index import IndexTables, population
from wordle_engine.scoring import derive_codes, score
from wordle_engine.vocab import WordVocab


def _score_one_by_one(tables, guess, candidates):
    total = 0
    for i in np.flatnonzero(candidates):
        solution = tables.solutions.word_at(int(i))
        total += population(apply(tables, candidates, guess, derive_pattern(guess, solution)))
    return total / population(candidates)


def test_derive_codes_match_derive_pattern(tables, guesses):
    rows = np.arange(len(tables))
    for guess in guesses:
        codes = derive_codes(tables, guess, rows)
        expected = [pattern_to_int(derive_pattern(guess, s)) for s in tables.solutions]
        assert codes.tolist() == expected


def test_score_matches_per_solution_average(tables, guesses):
    histories = [
        [],
        [make_record("crane", "-----")],
        [make_record("humph", "-----")],
        [make_record("stoal", derive_pattern("stoal", "total"))],
    ]
    for history in histories:
        cands = fold_history(tables, history)
        for guess in guesses:
            assert score(tables, guess, cands) == pytest.approx(_score_one_by_one(tables, guess, cands))


def test_score_bounds(tables, guesses):
    for history in ([], [make_record("crane", "-----")], [make_record("cigar", "=+---")]):
        cands = fold_history(tables, history)
        n = population(cands)
        for guess in guesses:
            s = score(tables, guess, cands)
            assert 1.0 <= s <= n


def test_hand_computed_scores():
    tables = IndexTables(WordVocab(["abcde", "fghij"]))
    cands = tables.all_candidates()
    # each feedback isolates one word
    assert score(tables, "abcde", cands) == 1.0
    # no shared letters: filtering changes nothing
    assert score(tables, "klmno", cands) == 2.0


def test_guess_sharing_no_letters_scores_population(tables):
    cands = fold_history(tables, [make_record("crane", "-----")])  # sissy, humph, blimp
    assert score(tables, "crane", cands) == population(cands) == 3


def test_score_does_not_touch_candidates(tables):
    cands = fold_history(tables, [make_record("crane", "-----")])
    before = cands.copy()
    score(tables, "blimp", cands)
    assert np.array_equal(cands, before)


def test_score_with_no_candidates_raises(tables):
    empty = np.zeros(len(tables), dtype=bool)
    with pytest.raises(InconsistentHistory):
        score(tables, "crane", empty)
