"""The guessing-strategy interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Protocol, Sequence, runtime_checkable

from wordle_env import MAX_ROUNDS, Guess


@dataclass(frozen=True)
class GameConfig:
    """Everything needed to set up games against one dictionary.

    Attributes
    ----------
    dictionary : Mapping[str, int]
        Valid words and their frequency weights (read-only, shared).
    max_rounds : int
        Guesses allowed per game before it counts as unsolved.
    """

    dictionary: Mapping[str, int]
    max_rounds: int = MAX_ROUNDS


@runtime_checkable
class Strategy(Protocol):
    """Anything with a ``name`` and a ``guess(history)`` method.

    ``guess`` must be deterministic given the full history.  An
    implementation may cache state between calls, but it has to behave as
    if it recomputed everything from *history* each time.
    """

    name: str

    def guess(self, history: Sequence[Guess]) -> str:
        """Return the next word to play given the guesses made so far."""
        ...


class FunctionStrategy:
    """Wrap a plain ``fn(history) -> word`` callable as a Strategy."""

    def __init__(
        self,
        fn: Callable[[Sequence[Guess]], str],
        name: str | None = None,
    ) -> None:
        self._fn = fn
        self.name = name or getattr(fn, "__name__", "function")

    def guess(self, history: Sequence[Guess]) -> str:
        return self._fn(history)

    def __repr__(self) -> str:
        return f"FunctionStrategy({self.name!r})"
