"""
Playfair Table Builder
=======================

Builds the 5x5 Playfair key square from a keyword.

The keyword is sanitized first (uppercase, letters only, J folded into I,
repeated letters dropped after their first occurrence). Its letters fill
the table row by row, followed by the unused letters of the alphabet in
ascending order. J never appears in the table.
"""

from __future__ import annotations

from hillplayfair.ciphers.alphabet import fold_j, normalize
from hillplayfair.core.models import PLAYFAIR_ALPHABET, PlayfairTable


def sanitize_keyword(raw: str) -> str:
    """Reduce a raw keyword to its distinct Playfair letters, in order.

    >>> sanitize_keyword("Jolly jumper")
    'IOLYUMPER'
    """
    seen: set[str] = set()
    letters: list[str] = []
    for ch in fold_j(normalize(raw)):
        if ch not in seen:
            seen.add(ch)
            letters.append(ch)
    return "".join(letters)


def build_table(keyword: str) -> PlayfairTable:
    """Build the Playfair table for *keyword*.

    *keyword* may be raw or already sanitized; sanitizing twice is a no-op.
    An empty keyword gives the plain ``ABCDE / FGHIK / ...`` square.
    """
    head = sanitize_keyword(keyword)
    tail = "".join(ch for ch in PLAYFAIR_ALPHABET if ch not in head)
    return PlayfairTable.from_letters(head + tail)
