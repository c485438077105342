"""
Pipeline Exceptions
====================

Exception hierarchy for precondition violations. Every operation in the
pipeline is a pure transform, so nothing here is retried or recovered:
the error is raised to the caller immediately.
"""

from __future__ import annotations


class HillPlayfairError(Exception):
    """Base class for all hillplayfair errors."""

    pass


class MalformedKeyError(HillPlayfairError):
    """The Hill key text could not be parsed into an n x n integer matrix."""

    pass


class DimensionMismatchError(HillPlayfairError):
    """Invalid block size, or a buffer that does not fit the block size."""

    pass
