import pytest

from wordle_engine.index import IndexTables
from wordle_engine.vocab import WordVocab

# Small controlled pool so the tests don't depend on word_list.csv
SOLUTIONS = [
    "crane", "trace", "adieu", "cigar", "rebut", "total", "stoal",
    "allot", "sissy", "humph", "blimp", "chimp", "civic",
]
EXTRA_GUESSES = ["fuzzy", "eerie", "lymph", "jumbo"]


@pytest.fixture
def solutions():
    return WordVocab(list(SOLUTIONS))


@pytest.fixture
def guesses():
    return WordVocab(SOLUTIONS + EXTRA_GUESSES)


@pytest.fixture
def tables(solutions):
    return IndexTables(solutions)
