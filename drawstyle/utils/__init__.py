"""
Utils module for drawstyle helpers.
"""

from .color_utils import hex_to_rgba, parse_color, rgba_to_hex
from .enums import FontTrait, TextAlignment, TextAttribute, UnderlineStyle
from .logger import configure_logging, get_logger

__all__ = [
    "hex_to_rgba",
    "parse_color",
    "rgba_to_hex",
    "FontTrait",
    "TextAlignment",
    "TextAttribute",
    "UnderlineStyle",
    "configure_logging",
    "get_logger",
]
