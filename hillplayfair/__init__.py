"""
hillplayfair -- Hill + Playfair Classical Cipher Pipeline
==========================================================

Encrypts text with a Hill cipher (n x n key matrix over Z_26) and then a
Playfair cipher (5x5 keyword table), exposing every intermediate artifact
of the run for display.

Modules:
    - hillplayfair.core.engine: Pipeline orchestrator
    - hillplayfair.core.models: Pydantic data models
    - hillplayfair.ciphers: Individual cipher stages
    - hillplayfair.parsers: Key file parsing
    - hillplayfair.output: Console and report output
    - hillplayfair.cli: Click-based command-line interface

This is an educational classical cipher; it offers no security.
"""

__version__ = "1.0.0"
__tool_name__ = "hillplayfair"
