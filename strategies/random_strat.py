"""Random strategy: pick uniformly at random from remaining candidates."""

from __future__ import annotations

import random
from typing import Mapping, Sequence

from wordle_env import Guess, NoCandidatesError, filter_candidates


class RandomStrategy:
    """Guess a random word from the set of remaining candidates.

    The RNG is reseeded from ``(seed, len(history))`` on every call, so the
    same history always yields the same guess.
    """

    name = "Random"

    def __init__(self, dictionary: Mapping[str, int], seed: int = 42) -> None:
        self._vocab = sorted(dictionary)
        self._seed = seed

    def guess(self, history: Sequence[Guess]) -> str:
        # Re-filter from scratch (simple & correct)
        candidates = self._vocab
        for prior in history:
            candidates = filter_candidates(candidates, prior)
        if not candidates:
            raise NoCandidatesError(
                f"no dictionary word is consistent with {len(history)} guess(es)"
            )
        rng = random.Random(self._seed * 1_000_003 + len(history))
        return rng.choice(candidates)


STRATEGIES = {
    "random": RandomStrategy,
}
