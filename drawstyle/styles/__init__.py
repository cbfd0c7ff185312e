"""
Styles module for text attributes of drawing styles.

This module contains the text facet owned by a style record, the
conversions between facets and attribute sets, action naming for changes,
and the style constructors.
"""

from .action_names import (
    ACTION_NAMES,
    GENERIC_ACTION_NAME,
    action_name_for,
    action_name_or_default,
)
from .text_facet import StyleTextFacet
from .style_record import (
    StyleRecord,
    default_text_style,
    style_name_for_font,
    text_style_with_font,
)
from .converter import (
    adopt_from_text,
    apply_to_range,
    apply_to_text,
    from_attribute_set,
    style_from_text_attributes,
    to_attribute_set,
)

__all__ = [
    "ACTION_NAMES",
    "GENERIC_ACTION_NAME",
    "action_name_for",
    "action_name_or_default",
    "StyleTextFacet",
    "StyleRecord",
    "default_text_style",
    "style_name_for_font",
    "text_style_with_font",
    "adopt_from_text",
    "apply_to_range",
    "apply_to_text",
    "from_attribute_set",
    "style_from_text_attributes",
    "to_attribute_set",
]
