import pytest

from shared.math_utils import (
    codes_to_letters,
    integer_determinant,
    is_invertible_mod,
    letters_to_codes,
    matrix_adjugate,
    matrix_inverse_mod,
    mod_inverse,
)


@pytest.mark.parametrize(
    "a, expected",
    [(1, 1), (3, 9), (9, 3), (25, 25), (-1, 25), (13, None), (2, None), (0, None)],
)
def test_mod_inverse(a, expected):
    assert mod_inverse(a) == expected


def test_integer_determinant():
    assert integer_determinant([[3, 3], [2, 5]]) == 9
    assert integer_determinant([[6, 24, 1], [13, 16, 10], [20, 17, 15]]) == 441
    assert integer_determinant([[7]]) == 7


def test_integer_determinant_with_zero_pivot():
    assert integer_determinant([[0, 1], [1, 0]]) == -1
    assert integer_determinant([[0, 2, 1], [1, 0, 0], [0, 0, 3]]) == -6


def test_integer_determinant_singular():
    assert integer_determinant([[2, 4], [1, 2]]) == 0
    assert integer_determinant([[0, 0], [0, 5]]) == 0


def test_adjugate():
    assert matrix_adjugate([[3, 3], [2, 5]]) == [[5, -3], [-2, 3]]
    assert matrix_adjugate([[5]]) == [[1]]


def test_matrix_inverse_mod():
    assert matrix_inverse_mod([[3, 3], [2, 5]]) == [[15, 17], [20, 9]]
    assert matrix_inverse_mod([[3]]) == [[9]]
    assert matrix_inverse_mod([[2, 4], [1, 2]]) is None


def test_inverse_times_matrix_is_identity():
    key = [[6, 24, 1], [13, 16, 10], [20, 17, 15]]
    inverse = matrix_inverse_mod(key)
    product = [
        [sum(key[i][k] * inverse[k][j] for k in range(3)) % 26 for j in range(3)]
        for i in range(3)
    ]
    assert product == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_is_invertible_mod():
    assert is_invertible_mod([[3, 3], [2, 5]])
    assert not is_invertible_mod([[2, 0], [0, 1]])
    assert not is_invertible_mod([[13, 0], [0, 1]])


def test_letter_code_conversions():
    codes = letters_to_codes("AZB")
    assert codes.tolist() == [0, 25, 1]
    assert codes_to_letters(codes) == "AZB"
    assert letters_to_codes("").size == 0
    assert codes_to_letters(letters_to_codes("")) == ""
