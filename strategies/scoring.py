"""Scoring policies for candidate-filtering strategies.

A scoring function has the signature ``score(candidate, remaining) -> float``
where *remaining* maps every still-possible word to its frequency.  Higher
is better; the strategy breaks ties itself.
"""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Callable, Mapping

from wordle_env import compute_feedback

Score = Callable[[str, Mapping[str, int]], float]


def frequency_score(candidate: str, remaining: Mapping[str, int]) -> float:
    """Probability that *candidate* is the answer, weighting by frequency.

    Words of frequency 0 still count as possible; when every remaining word
    has frequency 0 they are all equally likely.
    """
    total = sum(remaining.values())
    if total == 0:
        return 1.0 / len(remaining)
    return remaining.get(candidate, 0) / total


def entropy_score(candidate: str, remaining: Mapping[str, int]) -> float:
    """Expected information (bits) gained by guessing *candidate*.

    Each remaining word is a possible answer with probability proportional
    to its frequency (uniform if all frequencies are 0).  Guessing
    *candidate* splits them by the feedback they would produce; the score
    is the Shannon entropy of that split.
    """
    total = sum(remaining.values())
    uniform = total == 0
    if uniform:
        total = len(remaining)

    partition: dict[tuple, float] = defaultdict(float)
    for word, freq in remaining.items():
        partition[compute_feedback(word, candidate)] += 1 if uniform else freq

    ent = 0.0
    for weight in partition.values():
        if weight > 0:
            p = weight / total
            ent -= p * math.log2(p)
    return ent
