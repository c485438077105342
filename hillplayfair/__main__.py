"""
Module Entry Point
===================

Allows running the CLI via: python -m hillplayfair
"""

from hillplayfair.cli import main

if __name__ == "__main__":
    main()
