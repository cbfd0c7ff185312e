"""
Text module for attributed text buffers.
"""

from .buffer import AttributedText, TextBuffer

__all__ = [
    "AttributedText",
    "TextBuffer",
]
