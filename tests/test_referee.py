import pytest

from strategy import FunctionStrategy
from wordle_env import (
    MAX_ROUNDS,
    Correctness,
    GuessNotInDictionaryError,
    InvalidWordError,
    Wordle,
)


def always(word):
    return FunctionStrategy(lambda history: word, name=f"always_{word}")


def right_on_round(n):
    """Guess "wrong" until *n* - 1 guesses are in the history."""
    return FunctionStrategy(
        lambda history: "right" if len(history) == n - 1 else "wrong"
    )


def test_first_try_match(dictionary):
    assert Wordle(dictionary).play("moved", always("moved")) == 1


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
def test_nth_try_match(dictionary, n):
    assert Wordle(dictionary).play("right", right_on_round(n)) == n


def test_no_match_found(dictionary):
    assert Wordle(dictionary).play("right", always("wrong")) is None


def test_round_cap_is_32_by_default(dictionary):
    calls = []

    def counting(history):
        calls.append(len(history))
        return "wrong"

    assert Wordle(dictionary).play("right", FunctionStrategy(counting)) is None
    assert len(calls) == MAX_ROUNDS == 32
    assert calls == list(range(32))


def test_custom_round_cap(dictionary):
    game = Wordle(dictionary, max_rounds=6)
    assert game.play("right", right_on_round(6)) == 6
    assert game.play("right", right_on_round(7)) is None


def test_invalid_round_cap(dictionary):
    with pytest.raises(ValueError):
        Wordle(dictionary, max_rounds=0)


def test_guess_outside_dictionary_is_fatal(dictionary):
    with pytest.raises(GuessNotInDictionaryError, match="zzzzz"):
        Wordle(dictionary).play("right", always("zzzzz"))


def test_correct_guess_need_not_be_in_dictionary(dictionary):
    assert Wordle(dictionary).play("zzzzz", always("zzzzz")) == 1


def test_malformed_secret_is_fatal(dictionary):
    with pytest.raises(InvalidWordError):
        Wordle(dictionary).play("rights", always("right"))


def test_history_records_feedback(dictionary):
    seen = []

    def guesser(history):
        seen.append(list(history))
        return ["crane", "night", "right"][len(history)]

    assert Wordle(dictionary).play("right", FunctionStrategy(guesser)) == 3
    final = seen[-1]
    assert [g.word for g in final] == ["crane", "night"]
    assert final[0].mask == (
        Correctness.WRONG, Correctness.MISPLACED, Correctness.WRONG,
        Correctness.WRONG, Correctness.WRONG,
    )
    assert final[1].mask == (Correctness.WRONG,) + (Correctness.CORRECT,) * 4


def test_on_guess_sees_every_round(dictionary):
    rounds = []
    Wordle(dictionary).play(
        "right", right_on_round(3), on_guess=lambda i, g: rounds.append((i, g.word))
    )
    assert rounds == [(1, "wrong"), (2, "wrong"), (3, "right")]
