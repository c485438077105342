"""
Core Module
============

Data models and the exception hierarchy for the Hill -> Playfair
pipeline. The orchestrator lives in :mod:`hillplayfair.core.engine`.
"""

from hillplayfair.core.errors import (
    DimensionMismatchError,
    HillPlayfairError,
    MalformedKeyError,
)
from hillplayfair.core.models import (
    Digraph,
    DigraphRule,
    KeyMatrix,
    PipelineTrace,
    PlayfairTable,
)

__all__ = [
    "Digraph",
    "DigraphRule",
    "DimensionMismatchError",
    "HillPlayfairError",
    "KeyMatrix",
    "MalformedKeyError",
    "PipelineTrace",
    "PlayfairTable",
]
