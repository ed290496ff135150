"""Wordle rules: feedback, consistency checking and the referee loop."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable, Mapping, Sequence

if TYPE_CHECKING:
    from strategy import Strategy

WORD_LENGTH = 5
# Real Wordle allows six guesses. We allow many more so that weak strategies
# still produce a full score distribution instead of being cut off at 6.
MAX_ROUNDS = 32
ALPHABET = frozenset(string.ascii_lowercase)


class InvalidWordError(ValueError):
    """A word is not exactly WORD_LENGTH lowercase ASCII letters."""


class GuessNotInDictionaryError(RuntimeError):
    """A strategy guessed a word the dictionary does not contain."""


class NoCandidatesError(RuntimeError):
    """No dictionary word is consistent with the history."""


class Correctness(Enum):
    """Per-letter result of a guess."""

    CORRECT = "C"    # green
    MISPLACED = "M"  # yellow
    WRONG = "W"      # gray

    @property
    def emoji(self) -> str:
        return _EMOJI[self]


_EMOJI = {
    Correctness.CORRECT: "\U0001f7e9",
    Correctness.MISPLACED: "\U0001f7e8",
    Correctness.WRONG: "⬛",
}


def validate_word(word: str) -> str:
    """Return *word* unchanged, or raise InvalidWordError."""
    if not isinstance(word, str):
        raise InvalidWordError(f"word must be a str, got {type(word).__name__}")
    if len(word) != WORD_LENGTH:
        raise InvalidWordError(
            f"word {word!r} has length {len(word)}, expected {WORD_LENGTH}"
        )
    if not ALPHABET.issuperset(word):
        raise InvalidWordError(f"word {word!r} contains characters outside a-z")
    return word


def parse_feedback(codes: str) -> tuple[Correctness, ...]:
    """Build a feedback tuple from a string such as ``"CMWWC"``."""
    if len(codes) != WORD_LENGTH:
        raise ValueError(
            f"feedback {codes!r} has length {len(codes)}, expected {WORD_LENGTH}"
        )
    try:
        return tuple(Correctness(c) for c in codes.upper())
    except ValueError:
        raise ValueError(f"feedback {codes!r} may only contain C, M and W") from None


def format_feedback(mask: Sequence[Correctness], emoji: bool = False) -> str:
    if emoji:
        return "".join(c.emoji for c in mask)
    return "".join(c.value for c in mask)


def compute_feedback(secret: str, guess: str) -> tuple[Correctness, ...]:
    """Return the feedback *guess* receives when the answer is *secret*.

    Greens are credited first; each remaining guess letter is then matched
    left to right against the first secret letter not yet credited, so a
    letter repeated in the guess is only marked yellow as many times as it
    is still available in the secret.
    """
    validate_word(secret)
    validate_word(guess)

    result = [Correctness.WRONG] * WORD_LENGTH
    consumed = [False] * WORD_LENGTH

    # Pass 1 - greens
    for i, (s, g) in enumerate(zip(secret, guess)):
        if s == g:
            result[i] = Correctness.CORRECT
            consumed[i] = True

    # Pass 2 - yellows
    for i, g in enumerate(guess):
        if result[i] is Correctness.CORRECT:
            continue
        for j, s in enumerate(secret):
            if not consumed[j] and s == g:
                result[i] = Correctness.MISPLACED
                consumed[j] = True
                break

    return tuple(result)


@dataclass(frozen=True)
class Guess:
    """A guessed word together with the feedback it produced."""

    word: str
    mask: tuple[Correctness, ...]

    def __post_init__(self) -> None:
        validate_word(self.word)
        mask = tuple(self.mask)
        if len(mask) != WORD_LENGTH:
            raise ValueError(
                f"mask has length {len(mask)}, expected {WORD_LENGTH}"
            )
        if not all(isinstance(c, Correctness) for c in mask):
            raise ValueError(f"mask must contain Correctness values: {mask!r}")
        object.__setattr__(self, "mask", mask)

    def matches(self, candidate: str) -> bool:
        """Could *candidate* be the answer, given this guess and its mask?"""
        validate_word(candidate)

        # Candidate positions already credited to some letter of the guess
        used = [False] * WORD_LENGTH

        # Greens pin the candidate's letter
        for i, (g, m) in enumerate(zip(self.word, self.mask)):
            if m is Correctness.CORRECT:
                if candidate[i] != g:
                    return False
                used[i] = True

        for i, (g, m) in enumerate(zip(self.word, self.mask)):
            if m is Correctness.CORRECT:
                continue
            # Same letter in the same slot would have come back green
            if candidate[i] == g:
                return False

            if m is Correctness.MISPLACED:
                # Needs its own uncredited copy elsewhere in the candidate
                for j, c in enumerate(candidate):
                    if not used[j] and c == g:
                        used[j] = True
                        break
                else:
                    return False
            else:
                # Gray: every copy of g in the candidate is spoken for
                if any(not used[j] and c == g for j, c in enumerate(candidate)):
                    return False

        return True


def matches(prior: Guess, candidate: str) -> bool:
    """Module-level alias for :meth:`Guess.matches`."""
    return prior.matches(candidate)


def filter_candidates(candidates: Iterable[str], prior: Guess) -> list[str]:
    """Keep only candidates consistent with *prior*, preserving order."""
    return [w for w in candidates if prior.matches(w)]


class Wordle:
    """Referee for games played against a fixed dictionary.

    Parameters
    ----------
    dictionary : Mapping[str, int]
        Valid guesses (word -> frequency).  Never mutated.
    max_rounds : int
        Guesses allowed before ``play`` gives up and returns None.
    """

    def __init__(
        self,
        dictionary: Mapping[str, int],
        max_rounds: int = MAX_ROUNDS,
    ) -> None:
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1, got {max_rounds}")
        self._dictionary = dictionary
        self._max_rounds = max_rounds

    @property
    def dictionary(self) -> Mapping[str, int]:
        return self._dictionary

    @property
    def max_rounds(self) -> int:
        return self._max_rounds

    def play(
        self,
        secret: str,
        strategy: Strategy,
        on_guess: Callable[[int, Guess], None] | None = None,
    ) -> int | None:
        """Play one game and return the round the secret was found in.

        Returns None when the strategy has not found the secret after
        ``max_rounds`` guesses.

        Raises
        ------
        InvalidWordError
            If *secret* or a guess is not a valid word.
        GuessNotInDictionaryError
            If the strategy guesses a word outside the dictionary.
        """
        validate_word(secret)
        history: list[Guess] = []
        for i in range(1, self._max_rounds + 1):
            word = strategy.guess(history)
            if word == secret:
                if on_guess is not None:
                    on_guess(i, Guess(word, (Correctness.CORRECT,) * WORD_LENGTH))
                return i
            if word not in self._dictionary:
                raise GuessNotInDictionaryError(
                    f"round {i}: {word!r} is not in the dictionary"
                )
            guess = Guess(word, compute_feedback(secret, word))
            history.append(guess)
            if on_guess is not None:
                on_guess(i, guess)
        return None
