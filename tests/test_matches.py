import pytest
from hypothesis import given, strategies as st

from wordle_env import (
    Correctness,
    Guess,
    InvalidWordError,
    compute_feedback,
    filter_candidates,
    matches,
    parse_feedback,
)

words = st.text(alphabet="abc", min_size=5, max_size=5)
masks = st.lists(st.sampled_from(list(Correctness)), min_size=5, max_size=5)


def check(prev, codes, candidate):
    return matches(Guess(prev, parse_feedback(codes)), candidate)


class TestBasicMatch:
    def test_all_correct_only_allows_itself(self):
        assert check("abcde", "CCCCC", "abcde")
        assert not check("abcdf", "CCCCC", "abcde")

    def test_all_wrong_allows_disjoint_word(self):
        assert check("abcde", "WWWWW", "fghij")

    def test_all_misplaced_allows_rotation(self):
        assert check("abcde", "MMMMM", "eabcd")

    def test_misplaced_backed_by_other_position(self):
        assert check("baaaa", "WCMWW", "aaccc")

    def test_misplaced_letter_cannot_stay_in_place(self):
        assert not check("baaaa", "WCMWW", "caacc")


class TestDuplicateLetterTraps:
    def test_extra_copy_beyond_wrong_mark(self):
        # one green a and one yellow a; the third a came back gray, so the
        # answer has exactly two a's
        assert not check("aaabb", "CMWWW", "accaa")

    def test_exact_copy_count_is_allowed(self):
        assert check("aaabb", "CMWWW", "accac")

    def test_rotation_against_all_wrong(self):
        assert not check("abcde", "WWWWW", "bcdea")

    def test_gray_after_green_forbids_more_copies(self):
        # guess "eerie" vs answer "crane": only the final e is in the answer
        assert check("eerie", "WWMWC", "crane")
        assert not check("eerie", "WWMWC", "creme")

    def test_misplaced_requires_the_letter(self):
        assert not check("abcde", "MWWWW", "fghij")

    def test_misplaced_twice_requires_two_copies(self):
        assert check("llxxx", "MMWWW", "yylll")
        assert not check("llxxx", "MMWWW", "yyyly")


@pytest.mark.parametrize("w2", ["moved", "moves", "mover", "dovem"])
def test_all_correct_mask_accepts_only_same_word(w2):
    prior = Guess("moved", (Correctness.CORRECT,) * 5)
    assert matches(prior, w2) == (w2 == "moved")


@given(words, words)
def test_secret_always_survives(secret, guess):
    prior = Guess(guess, compute_feedback(secret, guess))
    assert prior.matches(secret)


@given(words, masks, words)
def test_matches_iff_same_feedback(guess, mask, candidate):
    prior = Guess(guess, tuple(mask))
    assert prior.matches(candidate) == (compute_feedback(candidate, guess) == prior.mask)


@given(words, words, words)
def test_is_pure(guess, secret, candidate):
    prior = Guess(guess, compute_feedback(secret, guess))
    first = prior.matches(candidate)
    assert prior.matches(candidate) == first
    assert prior.matches(secret)


def test_filter_candidates_keeps_order():
    prior = Guess("allot", compute_feedback("total", "allot"))
    pool = ["total", "stoal", "allot", "tally", "alloy", "atoll"]
    assert filter_candidates(pool, prior) == ["total", "stoal"]


def test_guess_validates_inputs():
    with pytest.raises(InvalidWordError):
        Guess("abc", parse_feedback("CCCCC"))
    with pytest.raises(ValueError):
        Guess("abcde", (Correctness.CORRECT,) * 4)
    with pytest.raises(ValueError):
        Guess("abcde", ("C", "C", "C", "C", "C"))
    with pytest.raises(InvalidWordError):
        Guess("abcde", parse_feedback("CCCCC")).matches("abcdef")


def test_guess_is_immutable():
    prior = Guess("abcde", parse_feedback("CCCCC"))
    with pytest.raises(AttributeError):
        prior.word = "fghij"
