"""
Pipeline Data Models
=====================

Pydantic models for the Hill -> Playfair pipeline: the Hill key matrix,
the 5x5 Playfair table, digraphs, and the :class:`PipelineTrace` that
records every intermediate artifact of a run.

All models are serialisable to JSON and are consumed by both the console
output layer and the report generator.

References:
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
      The American Mathematical Monthly, 36(6), 306-312.
    - Wheatstone, C. (1854). Playfair cipher, as described in Kahn, D.
      (1996). The Codebreakers. Scribner.
"""

from __future__ import annotations

import enum
import string
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from shared.models import Diagnostic

TABLE_SIZE: int = 5

#: The 25-letter Playfair alphabet (I and J merged into I).
PLAYFAIR_ALPHABET: str = string.ascii_uppercase.replace("J", "")


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class DigraphRule(str, enum.Enum):
    """Which Playfair substitution rule a digraph falls under."""

    SAME_ROW = "same_row"
    SAME_COLUMN = "same_column"
    RECTANGLE = "rectangle"


# ===================================================================== #
#  Hill Key
# ===================================================================== #


class KeyMatrix(BaseModel):
    """An n x n integer Hill cipher key, immutable once loaded.

    Invertibility is not checked here; see
    :func:`shared.math_utils.is_invertible_mod`.

    Attributes:
        rows: The matrix in row-major order.
    """

    model_config = ConfigDict(frozen=True)

    rows: list[list[int]] = Field(..., min_length=1)

    @field_validator("rows")
    @classmethod
    def _check_square(cls, v: list[list[int]]) -> list[list[int]]:
        n = len(v)
        for idx, row in enumerate(v):
            if len(row) != n:
                raise ValueError(
                    f"Key matrix row {idx} has {len(row)} entries, expected {n}"
                )
        return v

    @property
    def dimension(self) -> int:
        """Block size n."""
        return len(self.rows)

    @property
    def has_negative_entries(self) -> bool:
        return any(v < 0 for row in self.rows for v in row)

    @classmethod
    def identity(cls, n: int) -> KeyMatrix:
        """The n x n identity key (encryption leaves text unchanged)."""
        return cls(rows=[[int(i == j) for j in range(n)] for i in range(n)])


# ===================================================================== #
#  Playfair Table
# ===================================================================== #


class Digraph(NamedTuple):
    """A pair of letters encrypted together by the Playfair stage."""

    first: str
    second: str

    def __str__(self) -> str:
        return self.first + self.second


class PlayfairTable(BaseModel):
    """A 5x5 Playfair table holding each letter of A-Z (minus J) once.

    A letter -> (row, col) map is built at construction time so lookups
    are O(1).

    Attributes:
        rows: Five strings of five letters each, top to bottom.
    """

    model_config = ConfigDict(frozen=True)

    rows: list[str]

    _positions: dict[str, tuple[int, int]] = PrivateAttr(default_factory=dict)

    @field_validator("rows")
    @classmethod
    def _check_bijection(cls, v: list[str]) -> list[str]:
        if len(v) != TABLE_SIZE or any(len(row) != TABLE_SIZE for row in v):
            raise ValueError("Playfair table must be 5 rows of 5 letters")
        letters = "".join(v)
        if sorted(letters) != sorted(PLAYFAIR_ALPHABET):
            raise ValueError(
                "Playfair table must contain every letter A-Z except J exactly once"
            )
        return v

    def model_post_init(self, context: Any) -> None:
        self._positions = {
            letter: (r, c)
            for r, row in enumerate(self.rows)
            for c, letter in enumerate(row)
        }

    @classmethod
    def from_letters(cls, letters: str) -> PlayfairTable:
        """Build a table from 25 letters in row-major order."""
        return cls(
            rows=[letters[i:i + TABLE_SIZE] for i in range(0, len(letters), TABLE_SIZE)]
        )

    def position(self, letter: str) -> tuple[int, int]:
        """Return the ``(row, col)`` of *letter*.

        Raises:
            KeyError: If *letter* is not in the table (e.g. ``J``).
        """
        return self._positions[letter]

    def cell(self, row: int, col: int) -> str:
        """Letter at ``(row, col)``, with both indices taken modulo 5."""
        return self.rows[row % TABLE_SIZE][col % TABLE_SIZE]

    @property
    def letters(self) -> str:
        """All 25 letters in row-major order."""
        return "".join(self.rows)

    def __contains__(self, letter: object) -> bool:
        return letter in self._positions


# ===================================================================== #
#  Pipeline Trace
# ===================================================================== #


class PipelineTrace(BaseModel):
    """Every intermediate artifact of one Hill -> Playfair run, in order.

    Attributes:
        mode: Pipeline direction; only encryption is supported.
        original_plaintext: Plaintext exactly as supplied.
        normalized_plaintext: Uppercase A-Z letters only.
        key: Hill key matrix as loaded.
        padded_plaintext: Normalized plaintext padded to a whole block.
        hill_ciphertext: Output of the Hill stage.
        sanitized_keyword: Keyword after uppercasing, J->I, deduplication.
        table: Playfair table built from the keyword.
        digraphs: Hill ciphertext split into Playfair digraphs.
        rule_counts: How many digraphs each substitution rule handled.
        playfair_ciphertext: Final output.
        diagnostics: Observations about the inputs.
    """

    mode: str = "encryption"
    original_plaintext: str = ""
    normalized_plaintext: str = ""
    key: KeyMatrix
    padded_plaintext: str = ""
    hill_ciphertext: str = ""
    sanitized_keyword: str = ""
    table: PlayfairTable
    digraphs: list[str] = Field(default_factory=list)
    rule_counts: dict[str, int] = Field(default_factory=dict)
    playfair_ciphertext: str = ""
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def key_dimension(self) -> int:
        return self.key.dimension
