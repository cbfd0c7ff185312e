"""
Action names for text attribute changes.

Maps a text attribute identifier to the short label an undo manager shows
for a change of that attribute.
"""

import logging
from typing import Any, Dict

from ..exceptions import UnknownAttributeError
from ..utils.enums import TextAttribute

logger = logging.getLogger(__name__)

GENERIC_ACTION_NAME = "Change Formatting"

ACTION_NAMES: Dict[TextAttribute, str] = {
    TextAttribute.FONT: "Change Font",
    TextAttribute.FONT_SIZE: "Change Font Size",
    TextAttribute.COLOR: "Change Text Colour",
    TextAttribute.UNDERLINE: "Change Underline",
    TextAttribute.ALIGNMENT: "Change Text Alignment",
    TextAttribute.PARAGRAPH_STYLE: "Change Paragraph Style",
    TextAttribute.STRIKETHROUGH: "Change Strikethrough",
    TextAttribute.BASELINE_OFFSET: "Change Baseline",
    TextAttribute.KERN: "Change Kerning",
}


def resolve_attribute(attribute: Any) -> TextAttribute:
    """
    Resolve an attribute identifier.

    Args:
        attribute: TextAttribute member or its string value

    Returns:
        Matching TextAttribute
    """
    if isinstance(attribute, TextAttribute):
        return attribute
    if isinstance(attribute, str):
        try:
            return TextAttribute(attribute)
        except ValueError:
            pass
    raise UnknownAttributeError("Unknown text attribute", repr(attribute))


def action_name_for(attribute: Any) -> str:
    """
    Get the action name for a change of one text attribute.

    Args:
        attribute: TextAttribute member or its string value

    Returns:
        Human-readable action name, e.g. "Change Font"
    """
    return ACTION_NAMES[resolve_attribute(attribute)]


def action_name_or_default(attribute: Any) -> str:
    """Get the action name, falling back to the generic label for unknown attributes."""
    try:
        return action_name_for(attribute)
    except UnknownAttributeError:
        logger.debug(f"No action name for {attribute!r}, using generic label")
        return GENERIC_ACTION_NAME
