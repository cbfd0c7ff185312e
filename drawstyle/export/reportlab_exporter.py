"""
ReportLab export for text styles.

Turns a style's text facet into a ReportLab ``ParagraphStyle`` and paragraph
markup, so a host rendering with ReportLab draws text the way the style
describes it.
"""

from __future__ import annotations

import logging
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph

from ..models.attribute_set import FontDescription
from ..styles.style_record import style_name_for_font
from ..styles.text_facet import StyleTextFacet
from ..utils.enums import FontTrait, TextAlignment

logger = logging.getLogger(__name__)

# Leading as a multiple of font size for a single-spaced paragraph.
LEADING_FACTOR = 1.2

ALIGNMENT_MAP = {
    TextAlignment.LEFT: TA_LEFT,
    TextAlignment.RIGHT: TA_RIGHT,
    TextAlignment.CENTER: TA_CENTER,
    TextAlignment.JUSTIFIED: TA_JUSTIFY,
    TextAlignment.NATURAL: TA_LEFT,
}

# Standard-14 face names indexed by (bold, italic) -> 0..3.
STANDARD_FONTS = {
    "helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "times": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "times-roman": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "times new roman": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "courier": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
}

_FACE_SUFFIXES = ("", "-Bold", "-Italic", "-BoldItalic")


def reportlab_font_name(font: FontDescription) -> str:
    """
    Get the ReportLab face name for a font.

    Args:
        font: Font description

    Returns:
        Face name such as "Helvetica-BoldOblique"
    """
    index = (1 if FontTrait.BOLD in font.traits else 0) + (2 if FontTrait.ITALIC in font.traits else 0)
    standard = STANDARD_FONTS.get(font.family.lower())
    if standard:
        return standard[index]
    return font.family.replace(" ", "") + _FACE_SUFFIXES[index]


def export_paragraph_style(facet: StyleTextFacet, name: Optional[str] = None) -> ParagraphStyle:
    """
    Build a ReportLab paragraph style from a text facet.

    Underline, strikethrough and baseline offset are character-level in
    ReportLab and are expressed through ``paragraph_markup`` instead.

    Args:
        facet: Text facet
        name: Style name, derived from the font when omitted

    Returns:
        ReportLab ParagraphStyle
    """
    font = facet.get_font()
    paragraph = facet.get_paragraph_format()
    style = ParagraphStyle(
        name or style_name_for_font(font),
        fontName=reportlab_font_name(font),
        fontSize=font.size,
        leading=font.size * LEADING_FACTOR * paragraph.line_spacing,
        alignment=ALIGNMENT_MAP[facet.get_alignment()],
        textColor=facet.get_text_color().to_reportlab(),
        spaceBefore=paragraph.space_before,
        spaceAfter=paragraph.space_after,
        firstLineIndent=paragraph.first_line_indent,
        leftIndent=paragraph.left_indent,
        rightIndent=paragraph.right_indent,
    )
    logger.debug(f"Exported ParagraphStyle {style.name}: {style.fontName} {style.fontSize}pt")
    return style


def paragraph_markup(facet: StyleTextFacet, text: str) -> str:
    """
    Wrap text in the ReportLab markup for the facet's character attributes.

    Any non-zero underline or strikethrough level is drawn as a single line.

    Args:
        facet: Text facet
        text: Plain text

    Returns:
        Escaped paragraph markup
    """
    markup = escape(text)
    if facet.get_underline_level():
        markup = f"<u>{markup}</u>"
    if facet.get_strikethrough_level():
        markup = f"<strike>{markup}</strike>"
    offset = facet.get_baseline_offset()
    if offset > 0:
        markup = f'<super rise="{offset:g}">{markup}</super>'
    elif offset < 0:
        markup = f'<sub rise="{-offset:g}">{markup}</sub>'
    return markup


def build_paragraph(facet: StyleTextFacet, text: str, name: Optional[str] = None) -> Paragraph:
    """Build a ReportLab Paragraph of ``text`` styled by the facet."""
    return Paragraph(paragraph_markup(facet, text), export_paragraph_style(facet, name))
