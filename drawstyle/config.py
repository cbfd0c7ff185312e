"""Configuration for text style defaults."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import InvalidArgumentError
from .models.attribute_set import FontDescription, ParagraphFormat, TextColor
from .utils.enums import TextAlignment

# Largest point size any facet accepts. A config may lower the clamp but not
# raise it, so attributes taken from one facet always fit in another.
FONT_SIZE_LIMIT = 1638.0


@dataclass(frozen=True)
class TextStyleConfig:
    """
    Defaults used when a text facet or style record is created.

    Attributes:
        font_family: Family of the system UI font.
        font_size: Default point size.
        color: Default text color.
        alignment: Default paragraph alignment.
        paragraph_format: Default paragraph spacing and indents.
        max_font_size: Upper bound font sizes are clamped to, at most
            ``FONT_SIZE_LIMIT``.
        default_style_name: Name given to the default text style.
    """

    font_family: str = "Helvetica"
    font_size: float = 12.0
    color: TextColor = field(default_factory=TextColor.black)
    alignment: TextAlignment = TextAlignment.NATURAL
    paragraph_format: ParagraphFormat = field(default_factory=ParagraphFormat)
    max_font_size: float = FONT_SIZE_LIMIT
    default_style_name: str = "Default Text Style"

    def __post_init__(self):
        if isinstance(self.max_font_size, bool) or not isinstance(self.max_font_size, (int, float)):
            raise InvalidArgumentError("max_font_size must be a number", repr(self.max_font_size))
        if not 0 < self.max_font_size <= FONT_SIZE_LIMIT:
            raise InvalidArgumentError(
                f"max_font_size must be positive and at most {FONT_SIZE_LIMIT:g}", str(self.max_font_size)
            )

    def default_font(self) -> FontDescription:
        return FontDescription(self.font_family, frozenset(), min(self.font_size, self.max_font_size))


DEFAULT_CONFIG = TextStyleConfig()
