"""Candidate-filtering strategies: keep every word still consistent with the
history and guess the best-scoring one."""

from __future__ import annotations

from typing import Mapping, Sequence

from strategies.scoring import Score, entropy_score, frequency_score
from wordle_env import Guess, NoCandidatesError


class NaiveStrategy:
    """Guess the highest-scoring word among the remaining candidates.

    Ties on score go to the more frequent word, then to the alphabetically
    first one, so the choice is fully deterministic.

    Parameters
    ----------
    dictionary : Mapping[str, int]
        Candidate universe (word -> frequency).  Copied, never mutated.
    score : callable
        ``score(candidate, remaining) -> float``; see ``strategies.scoring``.
    pool_size : int or None
        If set, only the ``pool_size`` most frequent candidates are scored
        (all candidates still count as possible answers).
    name : str
        Label used in reports.
    """

    def __init__(
        self,
        dictionary: Mapping[str, int],
        score: Score = frequency_score,
        pool_size: int | None = None,
        name: str = "Naive",
    ) -> None:
        if pool_size is not None and pool_size < 1:
            raise ValueError(f"pool_size must be >= 1, got {pool_size}")
        self.name = name
        self._dictionary = dictionary
        self._score = score
        self._pool_size = pool_size
        self._candidates: dict[str, int] = dict(dictionary)
        # History prefix already folded into _candidates
        self._applied: tuple[Guess, ...] = ()

    @property
    def candidates(self) -> Mapping[str, int]:
        return self._candidates

    def guess(self, history: Sequence[Guess]) -> str:
        seen = len(self._applied)
        if tuple(history[:seen]) != self._applied:
            # Not a continuation of the last game: start over
            self._candidates = dict(self._dictionary)
            self._applied = ()
            seen = 0

        for prior in history[seen:]:
            self._candidates = {
                w: f for w, f in self._candidates.items() if prior.matches(w)
            }
        self._applied = tuple(history)

        if not self._candidates:
            raise NoCandidatesError(
                f"no dictionary word is consistent with {len(history)} guess(es)"
            )
        if len(self._candidates) == 1:
            return next(iter(self._candidates))

        return min(self._pool(), key=self._rank)

    def _pool(self) -> list[str]:
        words = list(self._candidates)
        if self._pool_size is None or len(words) <= self._pool_size:
            return words
        words.sort(key=lambda w: (-self._candidates[w], w))
        return words[: self._pool_size]

    def _rank(self, word: str) -> tuple[float, int, str]:
        # min() over this key = best score, then highest frequency, then a-z
        return (-self._score(word, self._candidates), -self._candidates[word], word)


# Scoring is quadratic in the number of candidates
ENTROPY_POOL_SIZE = 200


def entropy_strategy(
    dictionary: Mapping[str, int],
    pool_size: int | None = ENTROPY_POOL_SIZE,
) -> NaiveStrategy:
    """Pick the candidate whose feedback is expected to be most informative."""
    return NaiveStrategy(
        dictionary, score=entropy_score, pool_size=pool_size, name="Entropy"
    )


STRATEGIES = {
    "naive": NaiveStrategy,
    "entropy": entropy_strategy,
}
