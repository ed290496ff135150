"""Dictionary and answer-list loading.

Dictionary files hold one ``<word> <frequency>`` record per line, e.g.::

    which 3287
    their 2953

Answer files are plain whitespace-separated words.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Iterator

from wordle_env import InvalidWordError, validate_word


_DIR = Path(__file__).resolve().parent
DEFAULT_DICTIONARY = _DIR / "data" / "dictionary.txt"
DEFAULT_ANSWERS = _DIR / "data" / "answers.txt"

_COUNT = re.compile(r"[0-9]+")


class DictionaryFormatError(ValueError):
    """A dictionary file contains a malformed record."""


# ------------------------------------------------------------------
# Dictionary
# ------------------------------------------------------------------

class Dictionary(Mapping):
    """Read-only mapping of valid words to their frequency weights.

    Iteration follows insertion order.  The underlying dict is copied on
    construction and never exposed mutably, so one instance can be shared
    by any number of games and strategies.
    """

    def __init__(self, frequencies: Mapping[str, int]) -> None:
        data: dict[str, int] = {}
        for word, freq in frequencies.items():
            validate_word(word)
            if not isinstance(freq, int) or isinstance(freq, bool) or freq < 0:
                raise ValueError(
                    f"frequency for {word!r} must be a non-negative int, got {freq!r}"
                )
            data[word] = freq
        self._data = data

    @classmethod
    def uniform(cls, words) -> "Dictionary":
        """Every word gets frequency 1."""
        return cls({w: 1 for w in words})

    def __getitem__(self, word: str) -> int:
        return self._data[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, word: object) -> bool:
        return word in self._data

    def __repr__(self) -> str:
        return f"Dictionary({len(self)} words)"

    def total_frequency(self) -> int:
        return sum(self._data.values())


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def parse_dictionary(lines, source: str = "<string>") -> Dictionary:
    """Parse ``<word> <frequency>`` records; blank lines are skipped."""
    freqs: dict[str, int] = {}
    for lineno, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        parts = line.split(" ")
        if len(parts) != 2:
            raise DictionaryFormatError(
                f"{source}:{lineno}: expected '<word> <frequency>', got {line!r}"
            )
        word, count = parts
        try:
            validate_word(word)
        except InvalidWordError as exc:
            raise DictionaryFormatError(f"{source}:{lineno}: {exc}") from None
        if not _COUNT.fullmatch(count):
            raise DictionaryFormatError(
                f"{source}:{lineno}: frequency must be a non-negative integer, "
                f"got {count!r}"
            )
        if word in freqs:
            raise DictionaryFormatError(f"{source}:{lineno}: duplicate word {word!r}")
        freqs[word] = int(count)

    if not freqs:
        raise DictionaryFormatError(f"{source}: no words found")
    return Dictionary(freqs)


def load_dictionary(path: str | Path | None = None) -> Dictionary:
    """Load a dictionary file (default: the bundled ``data/dictionary.txt``)."""
    src = Path(path) if path is not None else DEFAULT_DICTIONARY
    if not src.exists():
        raise FileNotFoundError(f"Dictionary not found: {src}")
    with src.open("r", encoding="utf-8") as f:
        return parse_dictionary(f, source=str(src))


def load_answers(path: str | Path | None = None) -> list[str]:
    """Load a whitespace-separated list of secret words."""
    src = Path(path) if path is not None else DEFAULT_ANSWERS
    if not src.exists():
        raise FileNotFoundError(f"Answer list not found: {src}")
    return [validate_word(w) for w in src.read_text(encoding="utf-8").split()]
