"""
Conversion between text facets and attribute sets.

Handles producing the attributes that reproduce a style on a run of text,
and adopting the attributes observed on edited text back into a style.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Union

from ..config import TextStyleConfig
from ..models.attribute_set import FONT_FIELDS, AttributeSet, FontDescription, TextRange
from ..text.buffer import TextBuffer
from ..utils.enums import TextAttribute
from .style_record import StyleRecord, style_name_for_font
from .text_facet import StyleTextFacet

logger = logging.getLogger(__name__)

# Attributes adopted one field at a time; font fields are handled together.
_ADOPTED_FIELDS = (
    (TextAttribute.COLOR, 'color'),
    (TextAttribute.ALIGNMENT, 'alignment'),
    (TextAttribute.UNDERLINE, 'underline'),
    (TextAttribute.STRIKETHROUGH, 'strikethrough'),
    (TextAttribute.BASELINE_OFFSET, 'baseline_offset'),
    (TextAttribute.KERN, 'kern'),
)


def to_attribute_set(facet: StyleTextFacet) -> AttributeSet:
    """
    Get the attributes that reproduce a facet on text.

    Args:
        facet: Text facet

    Returns:
        Attribute set with every field present
    """
    return replace(facet.attributes, paragraph_format=facet.get_paragraph_format())


def from_attribute_set(
    facet: StyleTextFacet, attributes: Union[AttributeSet, Mapping[str, Any]]
) -> StyleTextFacet:
    """
    Adopt the present fields of an attribute set into a facet.

    Fields absent from ``attributes`` keep their current value. A mapping is
    decoded first, ignoring keys it does not recognise.

    Args:
        facet: Facet to update in place
        attributes: Attribute set or its mapping form

    Returns:
        The updated facet
    """
    if not isinstance(attributes, AttributeSet):
        attributes = AttributeSet.from_mapping(attributes)

    changed = 0
    if any(getattr(attributes, name) is not None for name in FONT_FIELDS):
        current = facet.get_font()
        # compare against the size the facet would actually store
        font = FontDescription(
            attributes.font_family if attributes.font_family is not None else current.family,
            attributes.font_traits if attributes.font_traits is not None else current.traits,
            facet.clamp_font_size(attributes.font_size) if attributes.font_size is not None else current.size,
        )
        if font.family != current.family or font.traits != current.traits:
            facet.change_attribute(TextAttribute.FONT, font)
            changed += 1
        elif font.size != current.size:
            facet.change_attribute(TextAttribute.FONT_SIZE, font.size)
            changed += 1

    for attribute_id, name in _ADOPTED_FIELDS:
        value = getattr(attributes, name)
        if value is not None and value != getattr(facet.attributes, name):
            facet.change_attribute(attribute_id, value)
            changed += 1

    if attributes.paragraph_format is not None and attributes.paragraph_format != facet.get_paragraph_format():
        facet.change_attribute(TextAttribute.PARAGRAPH_STYLE, attributes.paragraph_format)
        changed += 1

    logger.debug(f"Adopted {changed} attribute change(s) from {attributes.present_fields()}")
    return facet


def apply_to_range(facet: StyleTextFacet, buffer: TextBuffer, text_range: TextRange) -> None:
    """
    Replace the attributes of a text range with the facet's attributes.

    An empty range, or a range on empty text, is left alone.

    Args:
        facet: Text facet
        buffer: Text buffer owning the range
        text_range: Range to format
    """
    if text_range.is_empty() or len(buffer) == 0:
        logger.debug("Empty text range, nothing to apply")
        return
    buffer.set_attributes(text_range, to_attribute_set(facet))


def apply_to_text(facet: StyleTextFacet, buffer: TextBuffer) -> None:
    """Apply the facet's attributes to the whole of a text buffer."""
    apply_to_range(facet, buffer, TextRange.whole(len(buffer)))


def adopt_from_text(
    facet: StyleTextFacet, buffer: TextBuffer, text_range: Optional[TextRange] = None
) -> StyleTextFacet:
    """
    Adopt the formatting found at the start of a text range.

    Args:
        facet: Facet to update in place
        buffer: Text buffer to read from
        text_range: Range to read, the whole buffer when omitted

    Returns:
        The updated facet
    """
    if text_range is None:
        text_range = TextRange.whole(len(buffer))
    if text_range.is_empty():
        logger.debug("Empty text range, nothing to adopt")
        return facet
    return from_attribute_set(facet, buffer.attributes_at(text_range.location))


def style_from_text_attributes(
    attributes: Union[AttributeSet, Mapping[str, Any]],
    name: Optional[str] = None,
    config: Optional[TextStyleConfig] = None,
) -> StyleRecord:
    """
    Create a style record matching a set of text attributes.

    Args:
        attributes: Attribute set or its mapping form
        name: Style name, derived from the resulting font when omitted
        config: Defaults for attributes missing from ``attributes``

    Returns:
        New unlocked style record
    """
    facet = from_attribute_set(StyleTextFacet(config), attributes)
    facet.last_changed_attribute = None
    return StyleRecord(
        name=name if name is not None else style_name_for_font(facet.get_font()),
        text=facet,
        config=config,
    )
