"""Common enumerations used across the drawstyle models."""

from __future__ import annotations

from enum import Enum, IntEnum


class TextAlignment(str, Enum):
    """Paragraph alignment modes for styled text."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFIED = "justified"
    NATURAL = "natural"


class FontTrait(str, Enum):
    """Font traits that can be combined in a font description."""

    BOLD = "bold"
    ITALIC = "italic"
    CONDENSED = "condensed"
    EXPANDED = "expanded"
    SMALL_CAPS = "small_caps"
    MONOSPACE = "monospace"


class UnderlineStyle(IntEnum):
    """Named underline levels. Any non-negative integer is a valid level."""

    NONE = 0
    SINGLE = 1
    DOUBLE = 2


class TextAttribute(str, Enum):
    """Identifiers of the text attributes a style can change one at a time."""

    FONT = "font"
    FONT_SIZE = "font_size"
    COLOR = "color"
    UNDERLINE = "underline"
    ALIGNMENT = "alignment"
    PARAGRAPH_STYLE = "paragraph_style"
    STRIKETHROUGH = "strikethrough"
    BASELINE_OFFSET = "baseline_offset"
    KERN = "kern"
