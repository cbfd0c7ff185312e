"""
Text facet of a drawing style.

Handles the text-specific state of a style record: font, size, color,
alignment, underline and strikethrough levels, baseline and kerning, plus the
separately tracked paragraph format. Every mutation goes through
``change_attribute`` so validation and action naming happen in one place.
"""

from typing import Any, Dict, Iterable, Optional
import logging

from reportlab.lib import colors

from ..config import DEFAULT_CONFIG, TextStyleConfig
from ..exceptions import InvalidArgumentError, StyleLockedError, TypeMismatchError
from ..models.attribute_set import AttributeSet, FontDescription, ParagraphFormat, TextColor, parse_traits
from ..utils.enums import TextAlignment, TextAttribute
from .action_names import GENERIC_ACTION_NAME, action_name_or_default, resolve_attribute

logger = logging.getLogger(__name__)

# Attributes stored in a single AttributeSet field.
_FIELD_FOR_ATTRIBUTE = {
    TextAttribute.FONT_SIZE: 'font_size',
    TextAttribute.COLOR: 'color',
    TextAttribute.ALIGNMENT: 'alignment',
    TextAttribute.UNDERLINE: 'underline',
    TextAttribute.STRIKETHROUGH: 'strikethrough',
    TextAttribute.BASELINE_OFFSET: 'baseline_offset',
    TextAttribute.KERN: 'kern',
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class StyleTextFacet:
    """
    Text attributes owned by one style record.

    A facet is never shared between records; use ``copy()`` to give another
    record the same formatting. A locked facet refuses every change, whether
    made through a setter, ``change_attribute`` or the converter.
    """

    def __init__(self, config: Optional[TextStyleConfig] = None):
        """
        Initialize text facet at the configured defaults.

        Args:
            config: Style defaults, ``DEFAULT_CONFIG`` when omitted
        """
        self.config = config or DEFAULT_CONFIG
        self._attributes = AttributeSet.from_font(
            self.config.default_font(),
            color=self.config.color,
            alignment=self.config.alignment,
            underline=0,
            strikethrough=0,
            baseline_offset=0.0,
            kern=0.0,
        )
        self._paragraph_format = self.config.paragraph_format
        self.last_changed_attribute: Optional[TextAttribute] = None
        self.locked = False

        logger.debug(f"StyleTextFacet initialized: {self.config.font_family} {self.config.font_size}pt")

    def change_attribute(self, attribute: Any, value: Any) -> TextAttribute:
        """
        Change one text attribute.

        The value is validated before anything is modified, so a failed call
        leaves the facet unchanged.

        Args:
            attribute: TextAttribute member or its string value
            value: New value of the type the attribute expects

        Returns:
            The attribute that changed, for looking up its action name

        Raises:
            UnknownAttributeError: attribute is not recognised
            TypeMismatchError: value has the wrong type for the attribute
            InvalidArgumentError: value is out of range
            StyleLockedError: the facet is locked
        """
        if self.locked:
            raise StyleLockedError("Text attributes are locked", repr(attribute))
        attribute_id = resolve_attribute(attribute)
        value = self._validate(attribute_id, value)

        if attribute_id is TextAttribute.FONT:
            self._attributes = AttributeSet.from_font(value).merged_over(self._attributes)
        elif attribute_id is TextAttribute.PARAGRAPH_STYLE:
            self._paragraph_format = value
        else:
            self._attributes = AttributeSet(**{_FIELD_FOR_ATTRIBUTE[attribute_id]: value}).merged_over(
                self._attributes
            )

        self.last_changed_attribute = attribute_id
        logger.debug(f"Text attribute changed: {attribute_id.value} = {value}")
        return attribute_id

    def _validate(self, attribute_id: TextAttribute, value: Any) -> Any:
        if attribute_id is TextAttribute.FONT:
            if not isinstance(value, FontDescription):
                raise TypeMismatchError("Font must be a FontDescription", repr(value))
            return value.with_size(self.clamp_font_size(value.size))

        if attribute_id is TextAttribute.FONT_SIZE:
            if not _is_number(value):
                raise TypeMismatchError("Font size must be a number", repr(value))
            if value <= 0:
                raise InvalidArgumentError("Font size must be a positive number", str(value))
            return self.clamp_font_size(float(value))

        if attribute_id is TextAttribute.COLOR:
            if isinstance(value, TextColor):
                return value
            if isinstance(value, colors.Color):
                return TextColor.from_value(value)
            raise TypeMismatchError("Text color must be a TextColor", repr(value))

        if attribute_id is TextAttribute.ALIGNMENT:
            if not isinstance(value, TextAlignment):
                raise TypeMismatchError("Alignment must be a TextAlignment", repr(value))
            return value

        if attribute_id in (TextAttribute.UNDERLINE, TextAttribute.STRIKETHROUGH):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeMismatchError(f"{attribute_id.value} level must be an integer", repr(value))
            if value < 0:
                raise InvalidArgumentError(f"{attribute_id.value} level must be non-negative", str(value))
            return int(value)

        if attribute_id is TextAttribute.PARAGRAPH_STYLE:
            if not isinstance(value, ParagraphFormat):
                raise TypeMismatchError("Paragraph style must be a ParagraphFormat", repr(value))
            return value

        # baseline offset and kern
        if not _is_number(value):
            raise TypeMismatchError(f"{attribute_id.value} must be a number", repr(value))
        return float(value)

    def clamp_font_size(self, size: float) -> float:
        """Clamp a point size to ``config.max_font_size``."""
        if size > self.config.max_font_size:
            logger.debug(f"Font size {size} clamped to {self.config.max_font_size}")
            return float(self.config.max_font_size)
        return size

    @property
    def attributes(self) -> AttributeSet:
        """Current attribute set, without the paragraph format."""
        return self._attributes

    def set_font(self, family: str, traits: Iterable[Any] = (), size: Optional[float] = None) -> None:
        """
        Set font family, traits and size together.

        Args:
            family: Font family name
            traits: Font traits (FontTrait members or names)
            size: Point size; the current size is kept when omitted
        """
        if size is None:
            size = self.get_font_size()
        self.change_attribute(TextAttribute.FONT, FontDescription(family, parse_traits(traits), size))

    def set_font_description(self, font: FontDescription) -> None:
        self.change_attribute(TextAttribute.FONT, font)

    def get_font(self) -> FontDescription:
        return self._attributes.font()

    def set_font_size(self, size: float) -> None:
        """
        Set font size.

        Sizes above ``config.max_font_size`` are clamped to it.

        Args:
            size: Point size, must be positive
        """
        self.change_attribute(TextAttribute.FONT_SIZE, size)

    def get_font_size(self) -> float:
        return self._attributes.font_size

    def set_text_color(self, color: TextColor) -> None:
        self.change_attribute(TextAttribute.COLOR, color)

    def get_text_color(self) -> TextColor:
        return self._attributes.color

    def set_alignment(self, alignment: TextAlignment) -> None:
        self.change_attribute(TextAttribute.ALIGNMENT, alignment)

    def get_alignment(self) -> TextAlignment:
        return self._attributes.alignment

    def set_underline_level(self, level: int) -> None:
        self.change_attribute(TextAttribute.UNDERLINE, level)

    def get_underline_level(self) -> int:
        return self._attributes.underline

    def is_underlined(self) -> bool:
        return self._attributes.underline > 0

    def toggle_underline(self) -> int:
        """
        Toggle underline on or off.

        Level 0 becomes 1; any other level becomes 0.

        Returns:
            The new underline level
        """
        level = 0 if self.get_underline_level() else 1
        self.set_underline_level(level)
        return level

    def set_strikethrough_level(self, level: int) -> None:
        self.change_attribute(TextAttribute.STRIKETHROUGH, level)

    def get_strikethrough_level(self) -> int:
        return self._attributes.strikethrough

    def toggle_strikethrough(self) -> int:
        """Toggle strikethrough, with the same on/off rule as ``toggle_underline``."""
        level = 0 if self.get_strikethrough_level() else 1
        self.set_strikethrough_level(level)
        return level

    def set_baseline_offset(self, offset: float) -> None:
        self.change_attribute(TextAttribute.BASELINE_OFFSET, offset)

    def get_baseline_offset(self) -> float:
        return self._attributes.baseline_offset

    def set_kern(self, kern: float) -> None:
        self.change_attribute(TextAttribute.KERN, kern)

    def get_kern(self) -> float:
        return self._attributes.kern

    def set_paragraph_format(self, paragraph_format: ParagraphFormat) -> None:
        self.change_attribute(TextAttribute.PARAGRAPH_STYLE, paragraph_format)

    def get_paragraph_format(self) -> ParagraphFormat:
        return self._paragraph_format

    def action_name(self) -> str:
        """Action name for the most recent change."""
        if self.last_changed_attribute is None:
            return GENERIC_ACTION_NAME
        return action_name_or_default(self.last_changed_attribute)

    def copy(self) -> "StyleTextFacet":
        """Return an independent, unlocked facet with the same formatting."""
        duplicate = StyleTextFacet(self.config)
        duplicate._attributes = self._attributes
        duplicate._paragraph_format = self._paragraph_format
        return duplicate

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert facet to dictionary.

        Returns:
            Dictionary representation for inspection and debugging
        """
        return {
            'attributes': self._attributes.to_mapping(),
            'paragraph_format': self._paragraph_format.to_dict(),
            'last_changed_attribute': self.last_changed_attribute.value if self.last_changed_attribute else None,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleTextFacet):
            return NotImplemented
        return self._attributes == other._attributes and self._paragraph_format == other._paragraph_format

    __hash__ = None

    def __repr__(self) -> str:
        font = self.get_font()
        return (
            f"StyleTextFacet(font={font.family!r}, traits={sorted(t.value for t in font.traits)}, "
            f"size={font.size}, color={self.get_text_color().to_hex()}, "
            f"alignment={self.get_alignment().value}, underline={self.get_underline_level()})"
        )
