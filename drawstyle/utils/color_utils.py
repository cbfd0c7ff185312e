"""Color utilities for text styles."""

import logging
from typing import Any, Optional, Tuple

from reportlab.lib import colors

from ..exceptions import InvalidArgumentError, TypeMismatchError

logger = logging.getLogger(__name__)

RGBA = Tuple[float, float, float, float]


def hex_to_rgba(hex_color: str) -> Optional[RGBA]:
    """
    Convert hex color to RGBA components in the 0-1 range.

    Accepts ``#RGB``, ``#RRGGBB`` and ``#RRGGBBAA`` forms, with or without
    the leading hash.

    Args:
        hex_color: Hex color string

    Returns:
        RGBA tuple or None if the string is not a hex color
    """
    if not hex_color or not isinstance(hex_color, str):
        return None

    hex_color = hex_color.strip().lstrip('#')
    if len(hex_color) == 3:
        hex_color = ''.join([c * 2 for c in hex_color])
    if len(hex_color) == 6:
        hex_color += 'ff'
    if len(hex_color) != 8:
        return None

    try:
        r, g, b, a = (int(hex_color[i:i + 2], 16) for i in (0, 2, 4, 6))
    except ValueError:
        return None
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def rgba_to_hex(rgba: RGBA, include_alpha: bool = False) -> str:
    """Convert RGBA components in the 0-1 range to a hex string."""
    r, g, b, a = (int(round(c * 255)) for c in rgba)
    if include_alpha:
        return f"#{r:02x}{g:02x}{b:02x}{a:02x}"
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_components(components: Any) -> RGBA:
    """
    Normalize an RGB or RGBA sequence.

    Components are taken as 0-255 integers when any of them exceeds 1,
    otherwise as 0-1 floats. A missing alpha means fully opaque.

    Args:
        components: Sequence of 3 or 4 numbers

    Returns:
        RGBA tuple in the 0-1 range
    """
    if len(components) not in (3, 4):
        raise InvalidArgumentError("Color must have 3 or 4 components", str(tuple(components)))

    values = []
    for component in components:
        if isinstance(component, bool) or not isinstance(component, (int, float)):
            raise TypeMismatchError("Color components must be numbers", repr(component))
        values.append(float(component))

    if any(v > 1.0 for v in values[:3]):
        values = [v / 255.0 for v in values[:3]] + values[3:]
    if len(values) == 3:
        values.append(1.0)

    if not all(0.0 <= v <= 1.0 for v in values):
        raise InvalidArgumentError("Color components out of range", str(tuple(components)))

    return (values[0], values[1], values[2], values[3])


def parse_color(color_value: Any) -> RGBA:
    """
    Parse any supported color value into RGBA components.

    Supported values are ReportLab ``Color`` objects, hex strings, CSS and
    ReportLab named colors (``"red"``, ``"aliceblue"``), ``rgb()``/``rgba()``
    strings and RGB(A) sequences.

    Args:
        color_value: Color value

    Returns:
        RGBA tuple in the 0-1 range
    """
    if isinstance(color_value, colors.Color):
        return (color_value.red, color_value.green, color_value.blue, color_value.alpha)

    if isinstance(color_value, str):
        if color_value.strip().startswith('#'):
            rgba = hex_to_rgba(color_value)
            if rgba is None:
                raise InvalidArgumentError("Invalid hex color", color_value)
            return rgba
        try:
            parsed = colors.toColor(color_value.strip().lower())
        except ValueError as exc:
            raise InvalidArgumentError("Unknown color", color_value) from exc
        logger.debug(f"Color parsed by name: {color_value}")
        return (parsed.red, parsed.green, parsed.blue, parsed.alpha)

    if isinstance(color_value, (tuple, list)):
        return normalize_components(color_value)

    raise TypeMismatchError("Unsupported color value", type(color_value).__name__)
