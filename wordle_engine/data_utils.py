import logging
import os

from wordle_engine.vocab import WordVocab

log = logging.getLogger(__name__)


def _load(path: str, *, only_rows_with: str | None = None) -> WordVocab:
    if os.path.splitext(path)[1].lower() == ".csv":
        return WordVocab.from_csv(path, column="word", only_rows_with=only_rows_with)
    return WordVocab.from_txt(path)


def load_answer_vocab(csv_path: str) -> WordVocab:
    """
    Load only the official Wordle answers from the CSV.
    Keeps rows where 'day' is not null, and returns a WordVocab.
    A .txt path is read as a plain answer list instead.
    """
    vocab = _load(csv_path, only_rows_with="day")
    log.debug("loaded %d solution words from %s", len(vocab), csv_path)
    return vocab


def load_guess_vocab(csv_path: str) -> WordVocab:
    """Load every legal guess (all rows of the CSV, or every line of a .txt)."""
    vocab = _load(csv_path)
    log.debug("loaded %d guess words from %s", len(vocab), csv_path)
    return vocab


def load_vocabularies(
    csv_path: str | None = None,
    *,
    guesses_path: str | None = None,
    answers_path: str | None = None,
) -> tuple[WordVocab, WordVocab]:
    """
    Return (guess vocab, solution vocab).

    Explicit `guesses_path` / `answers_path` override the shared CSV; an explicit
    answers file is taken whole, without the `day` filter. At least
    one source must be given for each table.
    """
    g_src = guesses_path or csv_path
    a_src = answers_path or csv_path
    if g_src is None or a_src is None:
        raise ValueError("need a word_list.csv or both --guesses and --answers")
    guesses = load_guess_vocab(g_src)
    answers = load_answer_vocab(a_src) if answers_path is None else _load(answers_path)
    return guesses, answers
