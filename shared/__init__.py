"""
Shared Module
=============

Common utilities, models, and configuration management shared across
the hillplayfair tool layers.
"""

from shared.config import ToolConfig

__all__ = ["ToolConfig"]
