import string

import pytest

from hillplayfair.ciphers.alphabet import fold_j, normalize


def test_normalize_drops_non_letters_and_uppercases():
    assert normalize("Hello, World! 42") == "HELLOWORLD"


def test_normalize_empty():
    assert normalize("") == ""
    assert normalize("1234 !?\n\t") == ""


def test_normalize_drops_non_ascii_letters():
    assert normalize("café déjà") == "CAFDJ"


@pytest.mark.parametrize(
    "text",
    [
        "The quick brown fox jumps over the lazy dog.",
        "a1b2c3",
        "  MiXeD\ncase\tTEXT  ",
        "Jack & Jill",
    ],
)
def test_normalize_properties(text):
    out = normalize(text)
    assert set(out) <= set(string.ascii_uppercase)
    assert len(out) == sum(ch in string.ascii_letters for ch in text)
    assert out == "".join(ch for ch in text if ch in string.ascii_letters).upper()


def test_fold_j():
    assert fold_j("JAJJ") == "IAII"
    assert fold_j("ABC") == "ABC"
