"""
Tests for the ReportLab style export.
"""

import pytest
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph

from drawstyle.export.reportlab_exporter import (
    LEADING_FACTOR,
    build_paragraph,
    export_paragraph_style,
    paragraph_markup,
    reportlab_font_name,
)
from drawstyle.models.attribute_set import FontDescription
from drawstyle.utils.enums import FontTrait


class TestReportLabFontName:
    """Test cases for reportlab_font_name."""

    @pytest.mark.parametrize("family, traits, expected", [
        ("Helvetica", set(), "Helvetica"),
        ("Helvetica", {FontTrait.BOLD}, "Helvetica-Bold"),
        ("Helvetica", {FontTrait.BOLD, FontTrait.ITALIC}, "Helvetica-BoldOblique"),
        ("Times", set(), "Times-Roman"),
        ("Times New Roman", {FontTrait.ITALIC}, "Times-Italic"),
        ("Courier", {FontTrait.ITALIC}, "Courier-Oblique"),
        ("Open Sans", {FontTrait.BOLD}, "OpenSans-Bold"),
        ("Gill Sans", {FontTrait.MONOSPACE}, "GillSans"),
    ])
    def test_font_name(self, family, traits, expected):
        """Test face names for standard and other families."""
        assert reportlab_font_name(FontDescription(family, frozenset(traits), 12)) == expected


class TestExportParagraphStyle:
    """Test cases for export_paragraph_style."""

    def test_default_facet(self, facet):
        """Test exporting a default facet."""
        style = export_paragraph_style(facet)

        assert isinstance(style, ParagraphStyle)
        assert style.name == "Helvetica 12pt"
        assert style.fontName == "Helvetica"
        assert style.fontSize == 12.0
        assert style.leading == pytest.approx(12.0 * LEADING_FACTOR)
        assert style.alignment == TA_LEFT

    def test_formatted_facet(self, formatted_facet):
        """Test exporting a facet with paragraph formatting."""
        style = export_paragraph_style(formatted_facet, name="Heading")

        assert style.name == "Heading"
        assert style.fontName == "Times-BoldItalic"
        assert style.leading == pytest.approx(18.5 * LEADING_FACTOR * 1.5)
        assert style.alignment == TA_CENTER
        assert style.textColor.red == pytest.approx(0.2)
        assert style.textColor.alpha == pytest.approx(0.8)
        assert style.spaceBefore == 6
        assert style.spaceAfter == 12
        assert style.firstLineIndent == 18
        assert style.leftIndent == 4


class TestParagraphMarkup:
    """Test cases for paragraph_markup."""

    def test_plain(self, facet):
        """Test that plain text is only escaped."""
        assert paragraph_markup(facet, "a < b & c") == "a &lt; b &amp; c"

    def test_underline(self, facet):
        """Test underline markup."""
        facet.set_underline_level(2)

        assert paragraph_markup(facet, "text") == "<u>text</u>"

    def test_all_character_attributes(self, formatted_facet):
        """Test nesting of underline, strikethrough and superscript."""
        assert paragraph_markup(formatted_facet, "x") == '<super rise="3"><strike><u>x</u></strike></super>'

    def test_subscript(self, facet):
        """Test negative baseline offsets."""
        facet.set_baseline_offset(-2)

        assert paragraph_markup(facet, "2") == '<sub rise="2">2</sub>'


class TestBuildParagraph:
    """Test cases for build_paragraph."""

    def test_build(self, facet):
        """Test building a ReportLab paragraph."""
        facet.toggle_underline()

        paragraph = build_paragraph(facet, "Hello", name="Body")

        assert isinstance(paragraph, Paragraph)
        assert paragraph.style.name == "Body"
        assert paragraph.style.fontName == "Helvetica"
