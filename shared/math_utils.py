"""
Modular Arithmetic Utilities
=============================

Integer and matrix arithmetic over Z_m used by the Hill cipher stage and
its key diagnostics: modular inverses, exact integer determinants,
adjugates, and matrix inverses modulo *m*.

All routines work on plain ``list[list[int]]`` matrices with exact Python
integers so that large or negative key entries never overflow. The
letter-block conversions use NumPy byte arrays.

References:
    [1] Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
        The American Mathematical Monthly, 36(6), 306-312.
    [2] Bareiss, E. H. (1968). Sylvester's Identity and Multistep
        Integer-Preserving Gaussian Elimination. Mathematics of
        Computation, 22(103), 565-578.
    [3] Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2:
        Seminumerical Algorithms (3rd ed.). Addison-Wesley. Sec. 4.5.2.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
#  Type aliases for readability
# ---------------------------------------------------------------------------
IntMatrix = list[list[int]]
IntArray = NDArray[np.int64]

ALPHABET_SIZE: int = 26
_ORD_A: int = ord("A")


# ========================== Letter Codes ===================================


def letters_to_codes(text: str) -> IntArray:
    """Map an uppercase A-Z string to an int64 array of values 0-25.

    Args:
        text: String made only of the characters ``A``-``Z``.

    Returns:
        1-D int64 array with ``A=0, B=1, ..., Z=25``.
    """
    if not text:
        return np.zeros(0, dtype=np.int64)
    raw = np.frombuffer(text.encode("ascii"), dtype=np.uint8)
    return raw.astype(np.int64) - _ORD_A


def codes_to_letters(codes: IntArray) -> str:
    """Inverse of :func:`letters_to_codes` for values already in 0-25."""
    if codes.size == 0:
        return ""
    return (codes.astype(np.uint8) + _ORD_A).tobytes().decode("ascii")


# ========================== Scalar Arithmetic ==============================


def mod_inverse(a: int, m: int = ALPHABET_SIZE) -> int | None:
    """Multiplicative inverse of *a* modulo *m*.

    Uses the extended Euclidean algorithm (Knuth, Vol. 2, 4.5.2).

    Returns:
        The unique ``x`` in ``[0, m)`` with ``a*x = 1 (mod m)``, or ``None``
        when ``gcd(a, m) != 1``.
    """
    a %= m
    if math.gcd(a, m) != 1:
        return None
    old_r, r = a, m
    old_s, s = 1, 0
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
    return old_s % m


# ========================== Matrix Arithmetic ==============================


def integer_determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Exact determinant of a square integer matrix.

    Fraction-free Gaussian elimination (Bareiss, 1968): every intermediate
    division is exact, so the result is computed with integers only.

    Args:
        matrix: Square matrix of integers. An empty matrix has determinant 1.

    Returns:
        The determinant as a Python ``int``.
    """
    work = [list(map(int, row)) for row in matrix]
    n = len(work)
    if n == 0:
        return 1

    sign = 1
    prev_pivot = 1
    for k in range(n - 1):
        if work[k][k] == 0:
            swap = next((i for i in range(k + 1, n) if work[i][k] != 0), None)
            if swap is None:
                return 0
            work[k], work[swap] = work[swap], work[k]
            sign = -sign
        pivot = work[k][k]
        for i in range(k + 1, n):
            for j in range(k + 1, n):
                work[i][j] = (work[i][j] * pivot - work[i][k] * work[k][j]) // prev_pivot
        prev_pivot = pivot
    return sign * work[n - 1][n - 1]


def _minor(matrix: Sequence[Sequence[int]], row: int, col: int) -> IntMatrix:
    return [
        [v for j, v in enumerate(r) if j != col]
        for i, r in enumerate(matrix)
        if i != row
    ]


def matrix_adjugate(matrix: Sequence[Sequence[int]]) -> IntMatrix:
    """Adjugate (transposed cofactor matrix) of a square integer matrix."""
    n = len(matrix)
    if n == 1:
        return [[1]]
    adj = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            cofactor = integer_determinant(_minor(matrix, i, j))
            adj[j][i] = -cofactor if (i + j) % 2 else cofactor
    return adj


def is_invertible_mod(matrix: Sequence[Sequence[int]], m: int = ALPHABET_SIZE) -> bool:
    """Whether *matrix* has an inverse over Z_m (``gcd(det, m) == 1``)."""
    return math.gcd(integer_determinant(matrix) % m, m) == 1


def matrix_inverse_mod(
    matrix: Sequence[Sequence[int]],
    m: int = ALPHABET_SIZE,
) -> IntMatrix | None:
    """Inverse of a square integer matrix modulo *m*.

    Computed as ``det^-1 * adj(K) mod m``.

    Returns:
        The inverse with entries in ``[0, m)``, or ``None`` if the matrix is
        singular over Z_m.
    """
    det_inv = mod_inverse(integer_determinant(matrix), m)
    if det_inv is None:
        return None
    return [[(det_inv * v) % m for v in row] for row in matrix_adjugate(matrix)]


def reduce_matrix(matrix: Sequence[Sequence[int]], m: int = ALPHABET_SIZE) -> IntArray:
    """Reduce every entry into ``[0, m)`` and return an int64 array.

    Python's ``%`` is Euclidean for a positive modulus, so negative entries
    map to their non-negative residue before they reach NumPy.
    """
    return np.array([[v % m for v in row] for row in matrix], dtype=np.int64)
