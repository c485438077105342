import pytest

from hillplayfair.ciphers.padding import pad_to_block
from hillplayfair.core.errors import DimensionMismatchError


def test_pad_hello_to_pairs():
    assert pad_to_block("HELLO", 2) == "HELLOX"


def test_aligned_buffer_unchanged():
    assert pad_to_block("HELP", 2) == "HELP"
    assert pad_to_block("ABCDEF", 3) == "ABCDEF"


@pytest.mark.parametrize("n", [1, 2, 5])
def test_empty_buffer_unchanged(n):
    assert pad_to_block("", n) == ""


def test_pads_multiple_fillers():
    assert pad_to_block("A", 3) == "AXX"
    assert pad_to_block("ABCDE", 4) == "ABCDEXXX"


def test_custom_filler():
    assert pad_to_block("A", 2, filler="Q") == "AQ"


@pytest.mark.parametrize("buffer", ["", "A", "AB", "HELLOWORLD", "ATTACKATDAWN"])
@pytest.mark.parametrize("n", [1, 2, 3, 4, 7])
def test_padding_properties(buffer, n):
    padded = pad_to_block(buffer, n)
    assert len(padded) % n == 0
    assert padded.startswith(buffer)
    assert len(padded) - len(buffer) < n
    assert pad_to_block(padded, n) == padded


@pytest.mark.parametrize("n", [0, -2])
def test_non_positive_block_size_rejected(n):
    with pytest.raises(DimensionMismatchError):
        pad_to_block("ABC", n)
