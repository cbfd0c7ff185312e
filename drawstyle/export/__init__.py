"""
Export module for handing text styles to rendering libraries.
"""

from .reportlab_exporter import (
    build_paragraph,
    export_paragraph_style,
    paragraph_markup,
    reportlab_font_name,
)

__all__ = [
    "build_paragraph",
    "export_paragraph_style",
    "paragraph_markup",
    "reportlab_font_name",
]
