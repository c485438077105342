"""
Hill Cipher
============

Polygraphic substitution over Z_26. The plaintext is cut into blocks of
n letters; each block is treated as a column vector p and replaced by

    c = K p  (mod 26)

where K is the n x n key matrix. Blocks are independent and keep their
order.

The key is reduced into [0, 26) before multiplication. Python's ``%`` is
Euclidean, so negative key entries give the same result as reducing the
full row sum with a non-negative remainder, and the NumPy products stay
far from int64 overflow.

References:
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
      The American Mathematical Monthly, 36(6), 306-312.
    - Stinson, D. R. (2006). Cryptography: Theory and Practice (3rd ed.).
      Chapman & Hall/CRC. Sec. 1.1.6.
"""

from __future__ import annotations

from shared.math_utils import (
    ALPHABET_SIZE,
    codes_to_letters,
    letters_to_codes,
    reduce_matrix,
)
from hillplayfair.core.errors import DimensionMismatchError
from hillplayfair.core.models import KeyMatrix


class HillCipher:
    """Encrypts letter buffers block-by-block with a fixed key matrix.

    Usage::

        cipher = HillCipher(KeyMatrix(rows=[[3, 3], [2, 5]]))
        cipher.encrypt("HELP")   # 'HIAT'
    """

    def __init__(self, key: KeyMatrix) -> None:
        self.key = key
        self._reduced = reduce_matrix(key.rows, ALPHABET_SIZE)

    @property
    def block_size(self) -> int:
        return self.key.dimension

    def encrypt(self, buffer: str) -> str:
        """Encrypt an A-Z buffer whose length is a multiple of the block size.

        Args:
            buffer: Uppercase letters only, already padded.

        Returns:
            Ciphertext of the same length.

        Raises:
            DimensionMismatchError: If ``len(buffer)`` is not a multiple of n.
        """
        n = self.block_size
        if len(buffer) % n:
            raise DimensionMismatchError(
                f"Buffer length {len(buffer)} is not a multiple of block size {n}"
            )

        # One block per row; (blocks @ K^T)[b] == K @ blocks[b]
        blocks = letters_to_codes(buffer).reshape(-1, n)
        encrypted = (blocks @ self._reduced.T) % ALPHABET_SIZE
        return codes_to_letters(encrypted.reshape(-1))
