"""
Alphabet Normalizer
====================

Reduces arbitrary text to the A-Z letter buffer both cipher stages work
on. Only ASCII letters survive; everything else (digits, punctuation,
whitespace, accented letters) is dropped rather than replaced.
"""

from __future__ import annotations

import string

_ASCII_LETTERS = frozenset(string.ascii_letters)


def normalize(text: str) -> str:
    """Uppercase the ASCII letters of *text*, in order, dropping the rest.

    >>> normalize("Hello, World! 42")
    'HELLOWORLD'
    """
    return "".join(ch.upper() for ch in text if ch in _ASCII_LETTERS)


def fold_j(text: str) -> str:
    """Collapse J into I, as the 25-letter Playfair alphabet requires."""
    return text.replace("J", "I")
