import pytest

from lexicon import Dictionary


WORDS = {
    "moved": 50,
    "right": 40,
    "wrong": 30,
    "might": 20,
    "night": 20,
    "sight": 10,
    "fight": 5,
    "crane": 60,
    "aabbc": 1,
    "ababw": 1,
}


@pytest.fixture
def dictionary():
    return Dictionary(WORDS)
