"""
Cipher Stages
==============

The individual pipeline stages: alphabet normalization, block padding,
the Hill cipher, and the Playfair table builder and digraph engine.
"""

from hillplayfair.ciphers.alphabet import fold_j, normalize
from hillplayfair.ciphers.hill import HillCipher
from hillplayfair.ciphers.padding import pad_to_block
from hillplayfair.ciphers.playfair import PlayfairCipher, split_digraphs
from hillplayfair.ciphers.playfair_table import build_table, sanitize_keyword

__all__ = [
    "HillCipher",
    "PlayfairCipher",
    "build_table",
    "fold_j",
    "normalize",
    "pad_to_block",
    "sanitize_keyword",
    "split_digraphs",
]
