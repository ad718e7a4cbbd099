"""
Utility helpers: text offsets and logging setup.
"""

from .text import OffsetMap, encoded_length

__all__ = ["OffsetMap", "encoded_length"]
