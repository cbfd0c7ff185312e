"""
Style records with text attributes.

Handles the style record that owns a text facet, and the constructors for
the default text style and styles named after a font.
"""

from decimal import Decimal
from typing import Any, Optional
import logging

from ..config import DEFAULT_CONFIG, TextStyleConfig
from ..exceptions import StyleLockedError, TypeMismatchError
from ..models.attribute_set import FontDescription
from ..utils.enums import FontTrait
from .text_facet import StyleTextFacet

logger = logging.getLogger(__name__)

# Order in which trait labels appear in style names. Traits missing here
# have no label and are left out of the name.
TRAIT_LABELS = (
    (FontTrait.BOLD, "Bold"),
    (FontTrait.ITALIC, "Italic"),
    (FontTrait.CONDENSED, "Condensed"),
    (FontTrait.EXPANDED, "Expanded"),
    (FontTrait.SMALL_CAPS, "Small Caps"),
)


class StyleRecord:
    """
    Drawing style carrying text attributes.

    The record owns its text facet exclusively. Locking the record locks the
    facet, so a locked style refuses changes made through
    ``change_text_attribute``, the facet setters and the converter alike.
    """

    def __init__(
        self,
        name: str = "",
        text: Optional[StyleTextFacet] = None,
        locked: bool = False,
        config: Optional[TextStyleConfig] = None,
    ):
        self.name = name
        self.config = config or DEFAULT_CONFIG
        self.text: StyleTextFacet = text if text is not None else StyleTextFacet(self.config)
        self.locked = locked

        logger.debug(f"StyleRecord initialized: {name}")

    def change_text_attribute(self, attribute: Any, value: Any) -> str:
        """
        Change one text attribute of this style.

        Args:
            attribute: TextAttribute member or its string value
            value: New attribute value

        Returns:
            Action name describing the change, for the undo manager
        """
        if self.locked:
            raise StyleLockedError("Style is locked", self.name)
        self.text.change_attribute(attribute, value)
        return self.text.action_name()

    @property
    def locked(self) -> bool:
        return self.text.locked

    @locked.setter
    def locked(self, value: bool) -> None:
        self.text.locked = bool(value)

    def copy(self, name: Optional[str] = None) -> "StyleRecord":
        """Return an unlocked record with its own copy of the text facet."""
        return StyleRecord(
            name=self.name if name is None else name,
            text=self.text.copy(),
            locked=False,
            config=self.config,
        )

    def __repr__(self) -> str:
        return f"StyleRecord(name={self.name!r}, locked={self.locked}, text={self.text!r})"


def _format_size(size: float) -> str:
    if float(size).is_integer():
        return str(int(size))
    text = repr(float(size))
    if 'e' in text:
        text = format(Decimal(text), 'f')
    return text


def style_name_for_font(font: FontDescription) -> str:
    """
    Returns the name and size of the font in a form usable as a style name.

    Args:
        font: Font description

    Returns:
        Name such as "Helvetica Bold 18pt"
    """
    if not isinstance(font, FontDescription):
        raise TypeMismatchError("Font must be a FontDescription", repr(font))

    parts = [font.family]
    parts.extend(label for trait, label in TRAIT_LABELS if trait in font.traits)
    parts.append(f"{_format_size(font.size)}pt")
    return " ".join(parts)


def default_text_style(config: Optional[TextStyleConfig] = None) -> StyleRecord:
    """
    Create the default text style.

    The record is locked; copy it to get an editable style.
    """
    config = config or DEFAULT_CONFIG
    return StyleRecord(name=config.default_style_name, locked=True, config=config)


def text_style_with_font(font: FontDescription, config: Optional[TextStyleConfig] = None) -> StyleRecord:
    """
    Create a text style using the given font.

    Args:
        font: Font description for the style's text
        config: Defaults for the remaining attributes

    Returns:
        Unlocked style record named after the font
    """
    record = StyleRecord(name=style_name_for_font(font), config=config)
    record.text.set_font_description(font)
    record.text.last_changed_attribute = None
    return record
