# gfmeditor/markdown/postprocessors/color_swatch.py
"""
Postprocessor that puts a color swatch in front of inline color codes.

    <code>#0969da</code>

becomes

    <span class="color-preview" style="background-color: #0969da"></span><code>#0969da</code>

Only inline code (not code blocks) whose whole text is a color literal
(#rgb, #rrggbb, rgb(...), hsl(...)) gets a swatch. A code tag already
preceded by a swatch of the same color (inserted by the color_codes
preprocessor) is left alone.
"""

from bs4 import BeautifulSoup, Tag

from ..patterns import is_color_literal
from .utils import has_ancestor

SWATCH_CLASS = "color-preview"


def _swatch_style(color: str) -> str:
    return f"background-color: {color}"


def _has_swatch(code: Tag, color: str) -> bool:
    previous = code.previous_sibling
    return (
        isinstance(previous, Tag)
        and previous.name == "span"
        and SWATCH_CLASS in previous.get("class", [])
        and previous.get("style", "").strip().rstrip(";") == _swatch_style(color)
    )


def color_swatch_injector(soup: BeautifulSoup, context) -> BeautifulSoup:
    """
    Insert a swatch span before every inline color code.

    Args:
        soup: Rendered presentation tree (mutated in place)
        context: RenderContext for the current run (unused)

    Returns:
        The same tree
    """
    for code in soup.find_all("code"):
        if has_ancestor(code, ("pre",)):
            continue

        color = code.get_text()
        if not is_color_literal(color) or _has_swatch(code, color):
            continue

        swatch = soup.new_tag("span")
        swatch["class"] = [SWATCH_CLASS]
        swatch["style"] = _swatch_style(color)
        code.insert_before(swatch)

    return soup
