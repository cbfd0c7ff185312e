"""
drawstyle - Text attributes for drawing styles.

This package adds text formatting to a drawing style: font, size, color,
alignment, underline and paragraph formatting, with conversion between a
style and the attributes of a run of formatted text.

Main Components:
- AttributeSet: immutable set of text attributes
- StyleTextFacet: the text attributes owned by one style
- Converter: facet <-> attribute set, applying to and adopting from text
- Action names: undo labels for single-attribute changes
- Factory: default and font-named text styles
"""

__version__ = "0.1.0"

from .exceptions import (
    DrawStyleError,
    InvalidArgumentError,
    StyleLockedError,
    TypeMismatchError,
    UnknownAttributeError,
)
from .config import DEFAULT_CONFIG, FONT_SIZE_LIMIT, TextStyleConfig
from .models import AttributeSet, FontDescription, ParagraphFormat, TextColor, TextRange
from .utils.enums import FontTrait, TextAlignment, TextAttribute, UnderlineStyle
from .styles import (
    GENERIC_ACTION_NAME,
    StyleRecord,
    StyleTextFacet,
    action_name_for,
    action_name_or_default,
    adopt_from_text,
    apply_to_range,
    apply_to_text,
    default_text_style,
    from_attribute_set,
    style_from_text_attributes,
    style_name_for_font,
    text_style_with_font,
    to_attribute_set,
)
from .text import AttributedText, TextBuffer

__all__ = [
    "__version__",
    "DrawStyleError",
    "InvalidArgumentError",
    "StyleLockedError",
    "TypeMismatchError",
    "UnknownAttributeError",
    "DEFAULT_CONFIG",
    "FONT_SIZE_LIMIT",
    "TextStyleConfig",
    "AttributeSet",
    "FontDescription",
    "ParagraphFormat",
    "TextColor",
    "TextRange",
    "FontTrait",
    "TextAlignment",
    "TextAttribute",
    "UnderlineStyle",
    "GENERIC_ACTION_NAME",
    "StyleRecord",
    "StyleTextFacet",
    "action_name_for",
    "action_name_or_default",
    "adopt_from_text",
    "apply_to_range",
    "apply_to_text",
    "default_text_style",
    "from_attribute_set",
    "style_from_text_attributes",
    "style_name_for_font",
    "text_style_with_font",
    "to_attribute_set",
    "AttributedText",
    "TextBuffer",
]
