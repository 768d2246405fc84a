import pytest

from wordle_engine.errors import MalformedInput
from wordle_engine.feedback import (
    HIT, MISS, PRESENT,
    GuessRecord,
    count_matching_hits,
    derive_pattern,
    format_pattern,
    hits_consistent,
    int_to_pattern,
    make_record,
    parse_history,
    parse_pattern,
    pattern_to_int,
)


def test_parse_pattern_symbols():
    assert parse_pattern("=+--=") == (HIT, PRESENT, MISS, MISS, HIT)
    assert format_pattern((HIT, PRESENT, MISS, MISS, HIT)) == "=+--="


@pytest.mark.parametrize("text", ["=+-=", "=+--==", "", "=+x-=", "GYBBG", "21001"])
def test_parse_pattern_rejects_malformed(text):
    with pytest.raises(MalformedInput):
        parse_pattern(text)


@pytest.mark.parametrize("guess", ["cran", "cranes", "CRANE", "cr4ne", "crâne"])
def test_make_record_rejects_bad_guess(guess):
    with pytest.raises(MalformedInput):
        make_record(guess, "-----")


def test_malformed_input_is_a_value_error():
    # callers that only know about ValueError still catch it
    with pytest.raises(ValueError):
        parse_pattern("?????")


def test_parse_history_pairs_arguments():
    history = parse_history(["crane", "-+--=", "total", "====="])
    assert history == [
        GuessRecord("crane", (MISS, PRESENT, MISS, MISS, HIT)),
        GuessRecord("total", (HIT,) * 5),
    ]
    assert str(history[0]) == "crane -+--="


def test_parse_history_rejects_missing_feedback():
    with pytest.raises(MalformedInput):
        parse_history(["crane", "-----", "total"])


def test_make_record_accepts_int_patterns():
    assert make_record("crane", [2, 1, 0, 0, 0]).pattern == (HIT, PRESENT, MISS, MISS, MISS)
    with pytest.raises(MalformedInput):
        make_record("crane", [2, 1, 0, 0, 3])
    with pytest.raises(MalformedInput):
        make_record("crane", [2, 1, 0])


def test_derive_pattern_basic():
    assert derive_pattern("crane", "crane") == (HIT,) * 5
    assert derive_pattern("crane", "humph") == (MISS,) * 5
    assert derive_pattern("trace", "crane") == (MISS, HIT, HIT, PRESENT, HIT)


def test_derive_pattern_judges_each_position_alone():
    # Repeated letters are all credited PRESENT when the solution has the letter,
    # where the two-pass game rule would give (0, 0, 1, 0, 2) and [1, 1, 0, 1, 1].
    assert derive_pattern("eerie", "crane") == (PRESENT, PRESENT, PRESENT, MISS, HIT)
    assert derive_pattern("allot", "total") == (PRESENT,) * 5


def test_pattern_int_codes():
    assert pattern_to_int((HIT,) * 5) == 242
    assert pattern_to_int((MISS,) * 5) == 0
    assert pattern_to_int((MISS, MISS, MISS, MISS, PRESENT)) == 1
    assert int_to_pattern(242) == (HIT,) * 5
    for code in (0, 1, 17, 100, 241):
        assert pattern_to_int(int_to_pattern(code)) == code
    with pytest.raises(ValueError):
        int_to_pattern(243)


def test_hits_consistent_and_count():
    history = [make_record("crane", "=----"), make_record("chimp", "==---")]
    assert hits_consistent("chess", history)
    assert not hits_consistent("civic", history)
    assert count_matching_hits("chess", history) == 3
    assert count_matching_hits("civic", history) == 2
    assert hits_consistent("civic", [])
