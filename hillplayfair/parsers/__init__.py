"""
Parsers
========

Input parsing utilities. Converts the textual Hill key format into a
:class:`~hillplayfair.core.models.KeyMatrix`.
"""

from hillplayfair.parsers.key_parser import KeyParser

__all__ = [
    "KeyParser",
]
