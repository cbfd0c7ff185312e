"""
Models module for text attribute values.

This module contains the immutable value types shared by styles,
converters and text buffers.
"""

from .attribute_set import (
    ATTRIBUTE_FIELDS,
    FONT_FIELDS,
    AttributeSet,
    FontDescription,
    ParagraphFormat,
    TextColor,
    TextRange,
    parse_traits,
)

__all__ = [
    "ATTRIBUTE_FIELDS",
    "FONT_FIELDS",
    "AttributeSet",
    "FontDescription",
    "ParagraphFormat",
    "TextColor",
    "TextRange",
    "parse_traits",
]
