"""
Block Padding
==============

Extends a letter buffer to a whole number of Hill blocks by appending a
filler letter.
"""

from __future__ import annotations

from hillplayfair.core.errors import DimensionMismatchError

DEFAULT_FILLER: str = "X"


def pad_to_block(buffer: str, block_size: int, filler: str = DEFAULT_FILLER) -> str:
    """Append *filler* until ``len(buffer)`` is a multiple of *block_size*.

    An already aligned buffer (including ``""``) is returned unchanged, so
    padding is idempotent.

    Raises:
        DimensionMismatchError: If *block_size* is not positive.
    """
    if block_size <= 0:
        raise DimensionMismatchError(f"Block size must be positive, got {block_size}")
    shortfall = -len(buffer) % block_size
    return buffer + filler * shortfall
