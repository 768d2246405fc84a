from __future__ import annotations
from typing import Iterator, List
import pandas as pd

WORD_LENGTH = 5
ALPHABET_SIZE = 26


def is_valid_word(word: object, word_len: int = WORD_LENGTH) -> bool:
    """True iff `word` is a lowercase a-z string of length `word_len`."""
    return (
        isinstance(word, str)
        and len(word) == word_len
        and all("a" <= ch <= "z" for ch in word)
    )


class WordVocab:
    """
    Immutable, ordered list of fixed-length words with stable indices.

    Used for both the guess vocabulary (every legal guess) and the solution
    vocabulary (every possible secret word). Index `i` of a solution vocab is
    bit `i` of every candidate set built from it.
    """

    def __init__(self, words: List[str], *, word_len: int = WORD_LENGTH) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")
        bad = [w for w in words if not is_valid_word(w, word_len)]
        if bad:
            raise ValueError(f"words must be lowercase a-z of length {word_len}: {bad[0]!r}")

        # Dedupe is the loader's job; the table itself must already be unique
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self.word_len = word_len
        self._words: tuple[str, ...] = tuple(words)
        self._index = {w: i for i, w in enumerate(self._words)}

    # ---------- Construction helpers ----------

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        only_rows_with: str | None = None,
        word_len: int = WORD_LENGTH,
        lowercase: bool = True,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        only_rows_with : str | None
            If given, keep only rows where this column is non-empty
            (``"day"`` selects the solution words of ``word_list.csv``).
        word_len : int, default=5
            Required word length.
        lowercase : bool, default=True
            If True, lowercase words before validation.

        Rows that are not alphabetic words of `word_len` letters are dropped,
        as are later duplicates (first occurrence wins).

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        if only_rows_with is not None:
            if only_rows_with not in df.columns:
                raise KeyError(f"column '{only_rows_with}' not found in {path}")
            df = df[df[only_rows_with].notna()]

        series = df[column].dropna().astype(str).str.strip()
        if lowercase:
            series = series.str.lower()
        return cls._from_raw(series.tolist(), word_len=word_len, source=path)

    @classmethod
    def from_txt(cls, path: str, *, word_len: int = WORD_LENGTH) -> "WordVocab":
        """Load a one-word-per-line text file (blank lines ignored)."""
        with open(path, "r", encoding="utf-8") as f:
            raw = [line.strip().lower() for line in f if line.strip()]
        return cls._from_raw(raw, word_len=word_len, source=path)

    @classmethod
    def _from_raw(cls, raw: List[str], *, word_len: int, source: str) -> "WordVocab":
        clean: List[str] = []
        seen = set()
        for w in raw:
            if not is_valid_word(w, word_len) or w in seen:
                continue
            seen.add(w)
            clean.append(w)
        if not clean:
            raise ValueError(f"no valid words after filtering {source}")
        return cls(clean, word_len=word_len)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def words(self) -> List[str]:
        """Return a copy of the word list."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        """Return True iff `word` exists in the vocabulary (case-sensitive)."""
        return word in self._index

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]

    def to_words(self, indices) -> List[str]:
        """Convert indices (any int iterable, numpy arrays included) to words."""
        return [self.word_at(int(i)) for i in indices]
