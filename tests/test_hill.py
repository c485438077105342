import pytest

from shared.math_utils import matrix_inverse_mod
from hillplayfair.ciphers.hill import HillCipher
from hillplayfair.ciphers.padding import pad_to_block
from hillplayfair.core.errors import DimensionMismatchError
from hillplayfair.core.models import KeyMatrix

WIKI_KEY = KeyMatrix(rows=[[6, 24, 1], [13, 16, 10], [20, 17, 15]])


def test_textbook_2x2(help_key):
    assert HillCipher(help_key).encrypt("HELP") == "HIAT"


def test_textbook_3x3():
    assert HillCipher(WIKI_KEY).encrypt("ACT") == "POH"


def test_blocks_are_independent_and_ordered(help_key):
    cipher = HillCipher(help_key)
    assert cipher.encrypt("HELPHELP") == "HIATHIAT"
    assert cipher.encrypt("LPHE") == "ATHI"


def test_one_by_one_key_is_multiplicative_shift():
    assert HillCipher(KeyMatrix(rows=[[3]])).encrypt("ABC") == "ADG"


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_identity_leaves_text_unchanged(n):
    text = pad_to_block("HELLOWORLD", n)
    assert HillCipher(KeyMatrix.identity(n)).encrypt(text) == text


def test_hello_identity():
    assert HillCipher(KeyMatrix.identity(2)).encrypt("HELLOX") == "HELLOX"


def test_negative_entries_use_non_negative_modulo():
    assert HillCipher(KeyMatrix(rows=[[-1, 0], [0, 1]])).encrypt("BA") == "ZA"


def test_negative_entries_match_their_residues():
    negative = HillCipher(KeyMatrix(rows=[[-3, 7], [-25, -1]]))
    residues = HillCipher(KeyMatrix(rows=[[23, 7], [1, 25]]))
    for text in ("HELP", "ZZYX", "ABCDEF"):
        assert negative.encrypt(text) == residues.encrypt(text)


def test_large_entries():
    big = HillCipher(KeyMatrix(rows=[[26 * 10**15 + 3, 3], [2, 5 - 26 * 10**12]]))
    assert big.encrypt("HELP") == "HIAT"


def test_empty_buffer(help_key):
    assert HillCipher(help_key).encrypt("") == ""


def test_length_not_multiple_of_block_size(help_key):
    with pytest.raises(DimensionMismatchError):
        HillCipher(help_key).encrypt("HEL")


def test_output_length_and_determinism():
    cipher = HillCipher(WIKI_KEY)
    text = pad_to_block("THEQUICKBROWNFOX", 3)
    first = cipher.encrypt(text)
    assert len(first) == len(text)
    assert cipher.encrypt(text) == first


@pytest.mark.parametrize("key", [KeyMatrix(rows=[[3, 3], [2, 5]]), WIKI_KEY])
def test_inverse_key_recovers_padded_plaintext(key):
    padded = pad_to_block("ATTACKATDAWN", key.dimension)
    ciphertext = HillCipher(key).encrypt(padded)
    inverse = KeyMatrix(rows=matrix_inverse_mod(key.rows))
    assert HillCipher(inverse).encrypt(ciphertext) == padded
