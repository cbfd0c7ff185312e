"""
Pytest configuration for drawstyle
"""

import logging
import sys

import pytest

from drawstyle.models.attribute_set import FontDescription, ParagraphFormat, TextColor
from drawstyle.styles.text_facet import StyleTextFacet
from drawstyle.utils.enums import FontTrait, TextAlignment


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to every test that has no other marker."""
    for item in items:
        if "integration" not in item.keywords and "unit" not in item.keywords:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid leaking handlers between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def facet():
    """Create a StyleTextFacet at defaults."""
    return StyleTextFacet()


@pytest.fixture
def formatted_facet():
    """Create a StyleTextFacet with every attribute moved off its default."""
    facet = StyleTextFacet()
    facet.set_font_description(FontDescription("Times", frozenset({FontTrait.BOLD, FontTrait.ITALIC}), 18.5))
    facet.set_text_color(TextColor(0.2, 0.4, 0.6, 0.8))
    facet.set_alignment(TextAlignment.CENTER)
    facet.set_underline_level(2)
    facet.set_strikethrough_level(1)
    facet.set_baseline_offset(3.0)
    facet.set_kern(0.5)
    facet.set_paragraph_format(
        ParagraphFormat(line_spacing=1.5, space_before=6, space_after=12, first_line_indent=18, left_indent=4)
    )
    return facet
