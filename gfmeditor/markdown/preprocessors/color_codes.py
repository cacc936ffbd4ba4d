"""
Preprocessor that adds a color preview in front of inline color codes.

Converts:
    `#ff0000`         → <span class="color-preview" style="background-color: #ff0000"></span>`#ff0000`
    `rgb(0, 128, 0)`  → <span class="color-preview" style="background-color: rgb(0, 128, 0)"></span>`rgb(0, 128, 0)`

Only code spans whose whole content is a color literal are touched.
"""

from ..patterns import is_color_literal
from .utils import map_inline_code

SWATCH_MARKUP = '<span class="color-preview" style="background-color: {color}"></span>'


def _mark_color_span(span: str) -> str:
    color = span[1:-1]
    if not is_color_literal(color):
        return span
    return SWATCH_MARKUP.format(color=color) + span


def color_code_marker(text: str, context) -> str:
    """
    Prefix inline color literals with a color-preview marker.

    Args:
        text: Markdown source
        context: RenderContext for the current run (unused)

    Returns:
        Markdown with color-preview markers inserted
    """
    return map_inline_code(text, _mark_color_span)
