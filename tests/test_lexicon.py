import pytest

from lexicon import (
    DEFAULT_ANSWERS,
    Dictionary,
    DictionaryFormatError,
    load_answers,
    load_dictionary,
    parse_dictionary,
)
from wordle_env import InvalidWordError


def test_parse_dictionary():
    d = parse_dictionary(["which 3287\n", "\n", "their 2953\n", "zzzzz 0"])
    assert dict(d) == {"which": 3287, "their": 2953, "zzzzz": 0}
    assert list(d) == ["which", "their", "zzzzz"]
    assert d.total_frequency() == 6240


@pytest.mark.parametrize("line,message", [
    ("which", "expected"),
    ("which  3287", "expected"),
    ("which 3287 extra", "expected"),
    ("whic 12", "length"),
    ("Which 12", "outside a-z"),
    ("which -1", "non-negative"),
    ("which 1.5", "non-negative"),
    ("which lots", "non-negative"),
])
def test_malformed_records(line, message):
    with pytest.raises(DictionaryFormatError, match=message) as info:
        parse_dictionary(["about 1\n", line + "\n"], source="words.txt")
    assert "words.txt:2" in str(info.value)


def test_duplicate_word():
    with pytest.raises(DictionaryFormatError, match="duplicate"):
        parse_dictionary(["about 1", "about 2"])


def test_empty_dictionary():
    with pytest.raises(DictionaryFormatError, match="no words"):
        parse_dictionary(["", "  "])


def test_dictionary_is_read_only(dictionary):
    with pytest.raises(TypeError):
        dictionary["zzzzz"] = 1
    assert "zzzzz" not in dictionary
    assert dictionary["moved"] == 50


def test_dictionary_validates_entries():
    with pytest.raises(InvalidWordError):
        Dictionary({"toolong": 1})
    with pytest.raises(ValueError):
        Dictionary({"about": -3})


def test_uniform():
    assert dict(Dictionary.uniform(["about", "other"])) == {"about": 1, "other": 1}


def test_load_dictionary_from_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("moved 10\nright 5\n", encoding="utf-8")
    assert dict(load_dictionary(path)) == {"moved": 10, "right": 5}


def test_load_dictionary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nope.txt")


def test_load_answers(tmp_path):
    path = tmp_path / "answers.txt"
    path.write_text("moved right\nwrong\n", encoding="utf-8")
    assert load_answers(path) == ["moved", "right", "wrong"]

    path.write_text("moved rights\n", encoding="utf-8")
    with pytest.raises(InvalidWordError, match="rights"):
        load_answers(path)


def test_bundled_data_is_consistent():
    dictionary = load_dictionary()
    answers = load_answers()
    assert DEFAULT_ANSWERS.exists()
    assert answers
    assert all(a in dictionary for a in answers)
