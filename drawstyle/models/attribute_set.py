"""
Attribute set for styled text.

Handles the closed vocabulary of text attributes shared by styles, converters
and text buffers: font description, color, alignment, underline level,
paragraph formatting and the value types they are built from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from reportlab.lib import colors

from ..exceptions import InvalidArgumentError, TypeMismatchError
from ..utils.color_utils import parse_color, rgba_to_hex
from ..utils.enums import FontTrait, TextAlignment

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_number(name: str, value: Any) -> float:
    if not _is_number(value):
        raise TypeMismatchError(f"{name} must be a number", repr(value))
    return float(value)


def _require_level(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(f"{name} must be an integer level", repr(value))
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative", str(value))
    return value


def parse_traits(values: Iterable[Any], strict: bool = True) -> FrozenSet[FontTrait]:
    """
    Coerce trait values to a frozenset of FontTrait.

    Args:
        values: Iterable of FontTrait members or their string values
        strict: Raise on unknown trait names instead of skipping them

    Returns:
        Frozenset of font traits
    """
    if isinstance(values, (str, FontTrait)):
        values = [values]

    traits = set()
    for value in values:
        if isinstance(value, FontTrait):
            traits.add(value)
            continue
        if not isinstance(value, str):
            raise TypeMismatchError("Font trait must be a string", repr(value))
        try:
            traits.add(FontTrait(value.strip().lower().replace(' ', '_')))
        except ValueError:
            if strict:
                raise InvalidArgumentError("Unknown font trait", value)
            logger.debug(f"Ignoring unknown font trait: {value}")
    return frozenset(traits)


@dataclass(frozen=True)
class TextColor:
    """RGBA text color with components in the 0-1 range."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    def __post_init__(self):
        for name in ('red', 'green', 'blue', 'alpha'):
            value = _require_number(f"Color {name}", getattr(self, name))
            if not 0.0 <= value <= 1.0:
                raise InvalidArgumentError(f"Color {name} must be between 0 and 1", str(value))
            object.__setattr__(self, name, value)

    @classmethod
    def from_value(cls, value: Any) -> "TextColor":
        """
        Build a color from a hex string, color name, RGB(A) sequence or
        ReportLab color.
        """
        if isinstance(value, cls):
            return value
        return cls(*parse_color(value))

    @classmethod
    def black(cls) -> "TextColor":
        return cls(0.0, 0.0, 0.0, 1.0)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)

    def to_hex(self, include_alpha: bool = False) -> str:
        return rgba_to_hex(self.to_tuple(), include_alpha=include_alpha)

    def to_reportlab(self) -> colors.Color:
        return colors.Color(self.red, self.green, self.blue, alpha=self.alpha)


@dataclass(frozen=True)
class FontDescription:
    """Font family, traits and point size, always changed together."""

    family: str
    traits: FrozenSet[FontTrait] = frozenset()
    size: float = 12.0

    def __post_init__(self):
        if not self.family or not isinstance(self.family, str):
            raise InvalidArgumentError("Font family must be a non-empty string")
        object.__setattr__(self, 'traits', parse_traits(self.traits))
        size = _require_number("Font size", self.size)
        if size <= 0:
            raise InvalidArgumentError("Font size must be a positive number", str(self.size))
        object.__setattr__(self, 'size', size)

    def has_trait(self, trait: FontTrait) -> bool:
        return trait in self.traits

    def with_size(self, size: float) -> "FontDescription":
        return replace(self, size=size)

    def with_traits(self, traits: Iterable[Any]) -> "FontDescription":
        return replace(self, traits=parse_traits(traits))


@dataclass(frozen=True)
class ParagraphFormat:
    """
    Paragraph spacing and indentation.

    All distances are in points. ``line_spacing`` is a multiple of the
    natural line height, so the default describes a single-spaced paragraph.
    """

    line_spacing: float = 1.0
    space_before: float = 0.0
    space_after: float = 0.0
    first_line_indent: float = 0.0
    left_indent: float = 0.0
    right_indent: float = 0.0

    def __post_init__(self):
        for item in fields(self):
            object.__setattr__(self, item.name, _require_number(item.name, getattr(self, item.name)))

        if self.line_spacing <= 0:
            raise InvalidArgumentError("Line spacing must be a positive number", str(self.line_spacing))
        for name in ('space_before', 'space_after', 'left_indent', 'right_indent'):
            if getattr(self, name) < 0:
                raise InvalidArgumentError(f"{name} must be non-negative", str(getattr(self, name)))

    def to_dict(self) -> Dict[str, float]:
        return {item.name: getattr(self, item.name) for item in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParagraphFormat":
        """Build a paragraph format from a mapping, ignoring unknown keys."""
        known = {item.name for item in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.debug(f"Ignoring unknown paragraph format keys: {sorted(unknown)}")
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass(frozen=True)
class TextRange:
    """Half-open character range ``[location, location + length)``."""

    location: int
    length: int

    def __post_init__(self):
        for name in ('location', 'length'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeMismatchError(f"Range {name} must be an integer", repr(value))
            if value < 0:
                raise InvalidArgumentError(f"Range {name} must be non-negative", str(value))

    @classmethod
    def whole(cls, length: int) -> "TextRange":
        return cls(0, length)

    @property
    def end(self) -> int:
        return self.location + self.length

    def is_empty(self) -> bool:
        return self.length == 0


@dataclass(frozen=True)
class AttributeSet:
    """
    Immutable set of text attributes.

    Every field is optional. ``None`` marks the attribute as absent, which is
    what lets a set be applied to text partially: only present fields are
    written, everything else on the target is left alone.
    """

    font_family: Optional[str] = None
    font_traits: Optional[FrozenSet[FontTrait]] = None
    font_size: Optional[float] = None
    color: Optional[TextColor] = None
    alignment: Optional[TextAlignment] = None
    underline: Optional[int] = None
    paragraph_format: Optional[ParagraphFormat] = None
    strikethrough: Optional[int] = None
    baseline_offset: Optional[float] = None
    kern: Optional[float] = None

    def __post_init__(self):
        if self.font_family is not None and (not isinstance(self.font_family, str) or not self.font_family):
            raise InvalidArgumentError("Font family must be a non-empty string")
        if self.font_traits is not None:
            object.__setattr__(self, 'font_traits', parse_traits(self.font_traits))
        if self.font_size is not None:
            size = _require_number("Font size", self.font_size)
            if size <= 0:
                raise InvalidArgumentError("Font size must be a positive number", str(self.font_size))
            object.__setattr__(self, 'font_size', size)
        if self.color is not None and not isinstance(self.color, TextColor):
            raise TypeMismatchError("Color must be a TextColor", repr(self.color))
        if self.alignment is not None and not isinstance(self.alignment, TextAlignment):
            raise TypeMismatchError("Alignment must be a TextAlignment", repr(self.alignment))
        if self.underline is not None:
            _require_level("Underline", self.underline)
        if self.strikethrough is not None:
            _require_level("Strikethrough", self.strikethrough)
        if self.paragraph_format is not None and not isinstance(self.paragraph_format, ParagraphFormat):
            raise TypeMismatchError("Paragraph format must be a ParagraphFormat", repr(self.paragraph_format))
        for name in ('baseline_offset', 'kern'):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _require_number(name, value))

    @classmethod
    def from_font(cls, font: FontDescription, **kwargs: Any) -> "AttributeSet":
        """Build a set carrying the font fields of ``font`` plus any extra fields."""
        return cls(font_family=font.family, font_traits=font.traits, font_size=font.size, **kwargs)

    def font(self) -> Optional[FontDescription]:
        """Return the font description when family, traits and size are all present."""
        if self.font_family is None or self.font_traits is None or self.font_size is None:
            return None
        return FontDescription(self.font_family, self.font_traits, self.font_size)

    def present_fields(self) -> Tuple[str, ...]:
        return tuple(item.name for item in fields(self) if getattr(self, item.name) is not None)

    def is_empty(self) -> bool:
        return not self.present_fields()

    def merged_over(self, other: "AttributeSet") -> "AttributeSet":
        """
        Layer this set on top of ``other``.

        Args:
            other: Base attribute set

        Returns:
            New set with this set's present fields and ``other``'s remaining ones
        """
        return replace(other, **{name: getattr(self, name) for name in self.present_fields()})

    def without(self, *names: str) -> "AttributeSet":
        """Return a copy with the named fields removed."""
        for name in names:
            if name not in ATTRIBUTE_FIELDS:
                raise InvalidArgumentError("Unknown attribute field", name)
        return replace(self, **{name: None for name in names})

    def to_mapping(self) -> Dict[str, Any]:
        """
        Encode present fields with primitive values.

        Color is written as an ``[r, g, b, a]`` list of 0-1 floats so that
        decoding gives back exactly the same color.

        Returns:
            Dictionary keyed by field name, suitable for external text buffers
        """
        encoded: Dict[str, Any] = {}
        for name in self.present_fields():
            value = getattr(self, name)
            if name == 'font_traits':
                value = sorted(trait.value for trait in value)
            elif name == 'color':
                # components as floats; hex would quantize to 8 bits
                value = list(value.to_tuple())
            elif name == 'alignment':
                value = value.value
            elif name == 'paragraph_format':
                value = value.to_dict()
            encoded[name] = value
        return encoded

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "AttributeSet":
        """
        Decode an attribute set from a string-keyed mapping.

        Unknown keys, and unknown font trait names, are ignored so that
        buffers carrying newer attributes still decode.

        Args:
            mapping: Mapping produced by ``to_mapping`` or an external buffer

        Returns:
            Decoded attribute set
        """
        if isinstance(mapping, AttributeSet):
            return mapping

        values: Dict[str, Any] = {}
        for key, value in mapping.items():
            if key not in ATTRIBUTE_FIELDS:
                logger.debug(f"Ignoring unknown text attribute key: {key}")
                continue
            if value is None:
                continue
            if key == 'font_traits':
                value = parse_traits(value, strict=False)
            elif key == 'color':
                value = TextColor.from_value(value)
            elif key == 'alignment' and not isinstance(value, TextAlignment):
                try:
                    value = TextAlignment(value)
                except ValueError as exc:
                    raise InvalidArgumentError("Unknown alignment", str(value)) from exc
            elif key == 'paragraph_format' and isinstance(value, Mapping):
                value = ParagraphFormat.from_dict(value)
            values[key] = value
        return cls(**values)


ATTRIBUTE_FIELDS: Tuple[str, ...] = tuple(item.name for item in fields(AttributeSet))
FONT_FIELDS: Tuple[str, ...] = ('font_family', 'font_traits', 'font_size')
