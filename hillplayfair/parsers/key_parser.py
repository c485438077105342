"""
Key Parser
===========

Parses the textual Hill key format into a :class:`KeyMatrix`.

Format: whitespace-separated integers. The first is the dimension n, the
next n*n are the matrix entries in row-major order. Line breaks carry no
meaning and anything after the n*n entries is ignored::

    2
    3 3
    2 5
"""

from __future__ import annotations

from pathlib import Path

from hillplayfair.core.errors import DimensionMismatchError, MalformedKeyError
from hillplayfair.core.models import KeyMatrix


class KeyParser:
    """Reads Hill key matrices from strings and files.

    Usage::

        parser = KeyParser(max_dimension=32)
        key = parser.parse_file(Path("key.txt"))
        key = parser.parse_string("2  3 3  2 5")
    """

    def __init__(self, max_dimension: int = 32) -> None:
        """Initialise the parser.

        Args:
            max_dimension: Largest accepted block size n.
        """
        self.max_dimension = max_dimension

    def parse_file(self, filepath: Path) -> KeyMatrix:
        """Parse the key file at *filepath*.

        Raises:
            FileNotFoundError: If the file does not exist.
            PermissionError: If the file cannot be read.
            MalformedKeyError: If the contents are not a valid key.
            DimensionMismatchError: If n is out of range.
        """
        with open(filepath, "r", encoding="utf-8", errors="replace") as f:
            return self.parse_string(f.read())

    def parse_string(self, text: str) -> KeyMatrix:
        """Parse key text into a :class:`KeyMatrix`.

        Raises:
            MalformedKeyError: Missing dimension, a non-integer token, or
                fewer than n*n entries.
            DimensionMismatchError: n <= 0 or n > ``max_dimension``.
        """
        tokens = text.split()
        if not tokens:
            raise MalformedKeyError("Key is empty: expected a dimension")

        n = self._to_int(tokens[0], "dimension")
        if n <= 0:
            raise DimensionMismatchError(f"Key dimension must be positive, got {n}")
        if n > self.max_dimension:
            raise DimensionMismatchError(
                f"Key dimension {n} exceeds the maximum of {self.max_dimension}"
            )

        needed = n * n
        entries = tokens[1:1 + needed]
        if len(entries) < needed:
            raise MalformedKeyError(
                f"Key of dimension {n} needs {needed} entries, found {len(entries)}"
            )

        values = [self._to_int(tok, f"entry {i + 1}") for i, tok in enumerate(entries)]
        return KeyMatrix(rows=[values[r * n:(r + 1) * n] for r in range(n)])

    @staticmethod
    def _to_int(token: str, what: str) -> int:
        try:
            return int(token)
        except ValueError:
            raise MalformedKeyError(f"Key {what} is not an integer: {token!r}") from None
