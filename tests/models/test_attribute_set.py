"""
Tests for the attribute set value types.

This module contains unit tests for AttributeSet, FontDescription,
TextColor, ParagraphFormat and TextRange.
"""

import pytest
from reportlab.lib import colors

from drawstyle.exceptions import InvalidArgumentError, TypeMismatchError
from drawstyle.models.attribute_set import (
    ATTRIBUTE_FIELDS,
    AttributeSet,
    FontDescription,
    ParagraphFormat,
    TextColor,
    TextRange,
)
from drawstyle.utils.enums import FontTrait, TextAlignment


class TestAttributeSet:
    """Test cases for AttributeSet class."""

    def test_empty(self):
        """Test that a default AttributeSet has no fields present."""
        attributes = AttributeSet()

        assert attributes.is_empty()
        assert attributes.present_fields() == ()

    def test_present_fields(self):
        """Test listing present fields in declaration order."""
        attributes = AttributeSet(underline=1, font_family="Helvetica")

        assert attributes.present_fields() == ("font_family", "underline")
        assert not attributes.is_empty()

    @pytest.mark.parametrize("size", [0, -3, -0.5])
    def test_non_positive_font_size(self, size):
        """Test that non-positive font sizes are rejected."""
        with pytest.raises(InvalidArgumentError):
            AttributeSet(font_size=size)

    def test_font_size_stored_as_float(self):
        """Test that integer font sizes are stored as floats."""
        assert AttributeSet(font_size=9).font_size == 9.0

    def test_negative_underline(self):
        """Test that negative underline levels are rejected."""
        with pytest.raises(InvalidArgumentError):
            AttributeSet(underline=-1)

    def test_boolean_underline(self):
        """Test that underline must be an integer level, not a flag."""
        with pytest.raises(TypeMismatchError):
            AttributeSet(underline=True)

    def test_color_type_checked(self):
        """Test that color must be a TextColor."""
        with pytest.raises(TypeMismatchError):
            AttributeSet(color="#ff0000")

    def test_traits_coerced(self):
        """Test that trait names are coerced to FontTrait members."""
        attributes = AttributeSet(font_traits=["bold", FontTrait.ITALIC])

        assert attributes.font_traits == frozenset({FontTrait.BOLD, FontTrait.ITALIC})

    def test_equality_field_by_field(self):
        """Test that equal fields make equal sets."""
        first = AttributeSet(font_family="Arial", color=TextColor(1.0, 0.0, 0.0))
        second = AttributeSet(font_family="Arial", color=TextColor(1.0, 0.0, 0.0))

        assert first == second
        assert first != AttributeSet(font_family="Arial")

    def test_merged_over(self):
        """Test that present fields win and the rest come from the base."""
        base = AttributeSet(color=TextColor.black(), alignment=TextAlignment.CENTER)
        top = AttributeSet(color=TextColor(1.0, 0.0, 0.0))

        merged = top.merged_over(base)

        assert merged.color == TextColor(1.0, 0.0, 0.0)
        assert merged.alignment == TextAlignment.CENTER

    def test_without(self):
        """Test removing fields."""
        attributes = AttributeSet(font_family="Arial", color=TextColor.black())

        result = attributes.without("color")

        assert result.color is None
        assert result.font_family == "Arial"

    def test_without_unknown_field(self):
        """Test removing a field that does not exist."""
        with pytest.raises(InvalidArgumentError):
            AttributeSet().without("shadow")

    def test_font_complete(self):
        """Test building a font description from complete font fields."""
        attributes = AttributeSet(font_family="Helvetica", font_traits=frozenset({FontTrait.BOLD}), font_size=18)

        assert attributes.font() == FontDescription("Helvetica", frozenset({FontTrait.BOLD}), 18)

    def test_font_partial(self):
        """Test that partial font fields give no font description."""
        assert AttributeSet(font_family="Helvetica", font_size=18).font() is None

    def test_from_font(self):
        """Test building a set from a font description."""
        font = FontDescription("Times", frozenset({FontTrait.ITALIC}), 10)

        attributes = AttributeSet.from_font(font, underline=1)

        assert attributes.font() == font
        assert attributes.underline == 1

    def test_to_mapping(self):
        """Test encoding present fields with primitive values."""
        attributes = AttributeSet(
            font_traits=frozenset({FontTrait.ITALIC, FontTrait.BOLD}),
            color=TextColor(1.0, 0.0, 0.0),
            alignment=TextAlignment.CENTER,
            paragraph_format=ParagraphFormat(line_spacing=2.0),
        )

        mapping = attributes.to_mapping()

        assert mapping["font_traits"] == ["bold", "italic"]
        assert mapping["color"] == [1.0, 0.0, 0.0, 1.0]
        assert mapping["alignment"] == "center"
        assert mapping["paragraph_format"]["line_spacing"] == 2.0
        assert set(mapping) == {"font_traits", "color", "alignment", "paragraph_format"}

    def test_from_mapping_ignores_unknown_keys(self):
        """Test that unknown keys are skipped during decode."""
        attributes = AttributeSet.from_mapping({"color": "#00ff00", "shadow": 3, "ligature": 1})

        assert attributes.present_fields() == ("color",)
        assert attributes.color == TextColor(0.0, 1.0, 0.0)

    def test_from_mapping_ignores_unknown_traits(self):
        """Test that unknown trait names are skipped during decode."""
        attributes = AttributeSet.from_mapping({"font_traits": ["bold", "wavy"]})

        assert attributes.font_traits == frozenset({FontTrait.BOLD})

    def test_from_mapping_decodes_primitives(self):
        """Test decoding alignment names and paragraph dictionaries."""
        attributes = AttributeSet.from_mapping({
            "alignment": "justified",
            "paragraph_format": {"space_after": 6, "tab_stops": []},
            "underline": 2,
        })

        assert attributes.alignment == TextAlignment.JUSTIFIED
        assert attributes.paragraph_format == ParagraphFormat(space_after=6)
        assert attributes.underline == 2

    def test_from_mapping_invalid_alignment(self):
        """Test that a recognised key with a bad value is an error."""
        with pytest.raises(InvalidArgumentError):
            AttributeSet.from_mapping({"alignment": "diagonal"})

    def test_from_mapping_round_trip(self):
        """Test that the mapping form decodes to the same set."""
        attributes = AttributeSet(
            font_family="Arial",
            font_traits=frozenset({FontTrait.BOLD}),
            font_size=12.5,
            color=TextColor(1.0, 0.0, 0.0, 1.0),
            alignment=TextAlignment.RIGHT,
            kern=1.5,
        )

        assert AttributeSet.from_mapping(attributes.to_mapping()) == attributes

    def test_from_mapping_keeps_color_precision(self):
        """Test that colors between 8-bit steps survive the mapping form."""
        attributes = AttributeSet(color=TextColor(0.1, 0.3, 0.7, 0.55))

        decoded = AttributeSet.from_mapping(attributes.to_mapping())

        assert decoded.color == TextColor(0.1, 0.3, 0.7, 0.55)

    def test_attribute_fields(self):
        """Test the list of attribute fields."""
        assert ATTRIBUTE_FIELDS[:3] == ("font_family", "font_traits", "font_size")
        assert "paragraph_format" in ATTRIBUTE_FIELDS


class TestFontDescription:
    """Test cases for FontDescription class."""

    def test_init(self):
        """Test FontDescription initialization."""
        font = FontDescription("Helvetica", ["bold"], 18)

        assert font.family == "Helvetica"
        assert font.traits == frozenset({FontTrait.BOLD})
        assert font.size == 18.0

    def test_empty_family(self):
        """Test that an empty family is rejected."""
        with pytest.raises(InvalidArgumentError):
            FontDescription("", frozenset(), 12)

    def test_unknown_trait(self):
        """Test that unknown trait names are rejected on construction."""
        with pytest.raises(InvalidArgumentError):
            FontDescription("Helvetica", ["wavy"], 12)

    def test_invalid_size(self):
        """Test that a non-positive size is rejected."""
        with pytest.raises(InvalidArgumentError):
            FontDescription("Helvetica", frozenset(), 0)

    def test_with_size(self):
        """Test replacing the size."""
        font = FontDescription("Helvetica", frozenset({FontTrait.BOLD}), 12)

        bigger = font.with_size(24)

        assert bigger.size == 24.0
        assert bigger.traits == font.traits
        assert font.size == 12.0

    def test_has_trait(self):
        """Test trait lookup."""
        font = FontDescription("Helvetica").with_traits(["italic"])

        assert font.has_trait(FontTrait.ITALIC)
        assert not font.has_trait(FontTrait.BOLD)


class TestTextColor:
    """Test cases for TextColor class."""

    def test_default_is_black(self):
        """Test that the default color is opaque black."""
        assert TextColor() == TextColor.black()
        assert TextColor().alpha == 1.0

    def test_component_range(self):
        """Test that components outside 0-1 are rejected."""
        with pytest.raises(InvalidArgumentError):
            TextColor(1.5, 0.0, 0.0)

    def test_from_hex(self):
        """Test building a color from a hex string."""
        assert TextColor.from_value("#ff0000") == TextColor(1.0, 0.0, 0.0, 1.0)

    def test_from_name(self):
        """Test building a color from a color name."""
        assert TextColor.from_value("red") == TextColor(1.0, 0.0, 0.0, 1.0)

    def test_from_byte_tuple(self):
        """Test building a color from 0-255 components."""
        color = TextColor.from_value((255, 0, 0))

        assert color == TextColor(1.0, 0.0, 0.0, 1.0)

    def test_from_reportlab(self):
        """Test building a color from a ReportLab color."""
        assert TextColor.from_value(colors.Color(0, 0, 1, alpha=0.5)) == TextColor(0.0, 0.0, 1.0, 0.5)

    def test_to_hex(self):
        """Test hex encoding."""
        assert TextColor(1.0, 0.0, 0.0).to_hex() == "#ff0000"
        assert TextColor(1.0, 0.0, 0.0, 0.0).to_hex(include_alpha=True) == "#ff000000"

    def test_to_reportlab(self):
        """Test conversion to a ReportLab color."""
        color = TextColor(0.0, 1.0, 0.0, 0.25).to_reportlab()

        assert isinstance(color, colors.Color)
        assert color.green == 1.0
        assert color.alpha == 0.25


class TestParagraphFormat:
    """Test cases for ParagraphFormat class."""

    def test_defaults(self):
        """Test the single-spaced default."""
        paragraph = ParagraphFormat()

        assert paragraph.line_spacing == 1.0
        assert paragraph.space_before == 0.0
        assert paragraph.left_indent == 0.0

    def test_invalid_line_spacing(self):
        """Test that line spacing must be positive."""
        with pytest.raises(InvalidArgumentError):
            ParagraphFormat(line_spacing=0)

    def test_negative_spacing(self):
        """Test that paragraph spacing must be non-negative."""
        with pytest.raises(InvalidArgumentError):
            ParagraphFormat(space_before=-1)

    def test_negative_first_line_indent(self):
        """Test that a hanging first-line indent is allowed."""
        assert ParagraphFormat(first_line_indent=-12).first_line_indent == -12.0

    def test_non_numeric(self):
        """Test that spacing values must be numbers."""
        with pytest.raises(TypeMismatchError):
            ParagraphFormat(space_after="6pt")

    def test_from_dict_ignores_unknown(self):
        """Test that unknown keys are skipped."""
        paragraph = ParagraphFormat.from_dict({"space_before": 4, "widow_control": True})

        assert paragraph == ParagraphFormat(space_before=4)


class TestTextRange:
    """Test cases for TextRange class."""

    def test_end(self):
        """Test the range end."""
        assert TextRange(2, 3).end == 5

    def test_is_empty(self):
        """Test empty ranges."""
        assert TextRange(4, 0).is_empty()
        assert not TextRange(0, 1).is_empty()

    def test_whole(self):
        """Test a range covering a whole text."""
        assert TextRange.whole(7) == TextRange(0, 7)

    def test_negative(self):
        """Test that negative values are rejected."""
        with pytest.raises(InvalidArgumentError):
            TextRange(-1, 2)
