"""
Playfair Digraph Engine
========================

Splits a letter buffer into digraphs and substitutes each one through a
5x5 Playfair table.

Splitting scans left to right. A doubled letter is broken with the filler
and the second copy starts the next pair; a final unpaired letter is
completed with the filler. No input letter is ever dropped, so the output
is the input with fillers inserted, and its length is even.

Substitution rules for a digraph (a, b):

    same row     each letter -> the letter to its right (wrapping)
    same column  each letter -> the letter below it (wrapping)
    rectangle    each letter -> its own row, the other letter's column

References:
    - Kahn, D. (1996). The Codebreakers (rev. ed.). Scribner. pp. 198-202.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America. Ch. 5.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from hillplayfair.ciphers.alphabet import fold_j
from hillplayfair.ciphers.padding import DEFAULT_FILLER
from hillplayfair.core.models import Digraph, DigraphRule, PlayfairTable


def split_digraphs(buffer: str, filler: str = DEFAULT_FILLER) -> list[Digraph]:
    """Split an A-Z buffer into Playfair digraphs.

    >>> [str(d) for d in split_digraphs("BALLOON")]
    ['BA', 'LX', 'LO', 'ON']
    """
    text = fold_j(buffer)
    digraphs: list[Digraph] = []
    i = 0
    while i < len(text):
        a = text[i]
        b = text[i + 1] if i + 1 < len(text) else None
        if b is None or a == b:
            digraphs.append(Digraph(a, filler))
            i += 1
        else:
            digraphs.append(Digraph(a, b))
            i += 2
    return digraphs


class PlayfairCipher:
    """Substitutes digraphs through a fixed :class:`PlayfairTable`.

    Usage::

        cipher = PlayfairCipher(build_table("MONARCHY"))
        cipher.encrypt("HIAT")   # 'BFRS'
    """

    def __init__(self, table: PlayfairTable, filler: str = DEFAULT_FILLER) -> None:
        self.table = table
        self.filler = filler
        self.rule_counts: Counter[DigraphRule] = Counter()

    def classify(self, digraph: Digraph) -> DigraphRule:
        """Which substitution rule applies to *digraph*."""
        r1, c1 = self.table.position(digraph.first)
        r2, c2 = self.table.position(digraph.second)
        if r1 == r2:
            return DigraphRule.SAME_ROW
        if c1 == c2:
            return DigraphRule.SAME_COLUMN
        return DigraphRule.RECTANGLE

    def encrypt_digraph(self, digraph: Digraph) -> Digraph:
        """Substitute a single digraph."""
        r1, c1 = self.table.position(digraph.first)
        r2, c2 = self.table.position(digraph.second)
        rule = self.classify(digraph)
        self.rule_counts[rule] += 1

        if rule is DigraphRule.SAME_ROW:
            return Digraph(self.table.cell(r1, c1 + 1), self.table.cell(r2, c2 + 1))
        if rule is DigraphRule.SAME_COLUMN:
            return Digraph(self.table.cell(r1 + 1, c1), self.table.cell(r2 + 1, c2))
        return Digraph(self.table.cell(r1, c2), self.table.cell(r2, c1))

    def encrypt_digraphs(self, digraphs: Iterable[Digraph]) -> str:
        """Encrypt *digraphs* in order; ``rule_counts`` then covers this call only."""
        self.rule_counts = Counter()
        return "".join(str(self.encrypt_digraph(d)) for d in digraphs)

    def encrypt(self, buffer: str) -> str:
        """Split *buffer* into digraphs and encrypt them in order."""
        return self.encrypt_digraphs(split_digraphs(buffer, self.filler))
