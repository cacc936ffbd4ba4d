# gfmeditor/markdown/postprocessors/alert.py
"""
Postprocessor that converts GitHub alert blockquotes into alert blocks.

Expected markdown input:
    > [!WARNING]
    > Be careful

Rendered HTML:
    <blockquote>
    <p>[!WARNING]
    Be careful</p>
    </blockquote>

This postprocessor transforms it to:
    <div class="alert alert-warning">
        <div class="alert-header">
            <span class="alert-icon">⚠️</span>
            <strong class="alert-title">WARNING</strong>
        </div>
        <div class="alert-content">Be careful</div>
    </div>

Supported types: NOTE, TIP, IMPORTANT, WARNING, CAUTION (upper case only).
Blockquotes nested inside another blockquote are not converted.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from ..patterns import ALERT_MARKER_PATTERN
from .utils import has_ancestor, text_nodes


@dataclass(frozen=True)
class AlertDescriptor:
    keyword: str
    icon: str
    title: str

    @property
    def css_class(self) -> str:
        return f"alert-{self.keyword.lower()}"


ALERT_TYPES: Dict[str, AlertDescriptor] = {
    "NOTE": AlertDescriptor("NOTE", "📝", "NOTE"),
    "TIP": AlertDescriptor("TIP", "💡", "TIP"),
    "IMPORTANT": AlertDescriptor("IMPORTANT", "❗", "IMPORTANT"),
    "WARNING": AlertDescriptor("WARNING", "⚠️", "WARNING"),
    "CAUTION": AlertDescriptor("CAUTION", "🚨", "CAUTION"),
}


def match_alert(blockquote: Tag) -> Optional[AlertDescriptor]:
    """Descriptor for the alert marker opening ``blockquote``, if any."""
    match = ALERT_MARKER_PATTERN.match(blockquote.get_text().strip())
    if not match:
        return None
    return ALERT_TYPES[match.group(1)]


def _strip_marker(blockquote: Tag, keyword: str) -> None:
    """Remove the marker and the line break that follows it."""
    marker = re.compile(r"\s*\[!" + keyword + r"\][ \t]*(\n)?")

    for node in text_nodes(blockquote):
        if not node.strip():
            continue

        match = marker.match(str(node))
        if match is None:
            break

        remainder = str(node)[match.end():]
        following = node.next_sibling
        if remainder:
            node.replace_with(NavigableString(remainder))
        else:
            node.extract()

        # "[!NOTE]<br/>" - the break belongs to the marker line
        if match.group(1) is None and not remainder.strip():
            if isinstance(following, Tag) and following.name == "br":
                following.decompose()
        break


def _is_empty(tag: Tag) -> bool:
    return not tag.get_text().strip() and not tag.find(True)


def _body_nodes(blockquote: Tag) -> list:
    for p in blockquote.find_all("p"):
        if _is_empty(p):
            p.decompose()

    children = [
        child
        for child in blockquote.contents
        if not (isinstance(child, NavigableString) and not child.strip())
    ]

    # A single wrapping paragraph is unwrapped, its content becomes the body
    if len(children) == 1 and isinstance(children[0], Tag) and children[0].name == "p":
        paragraph = children[0]
        first = paragraph.contents[0] if paragraph.contents else None
        if isinstance(first, NavigableString):
            first.replace_with(NavigableString(first.lstrip()))
        children = list(paragraph.contents)

    return [child.extract() for child in children]


def build_alert(soup: BeautifulSoup, descriptor: AlertDescriptor, body: list) -> Tag:
    alert = soup.new_tag("div")
    alert["class"] = ["alert", descriptor.css_class]

    header = soup.new_tag("div")
    header["class"] = ["alert-header"]

    icon = soup.new_tag("span")
    icon["class"] = ["alert-icon"]
    icon.string = descriptor.icon

    title = soup.new_tag("strong")
    title["class"] = ["alert-title"]
    title.string = descriptor.title

    header.append(icon)
    header.append(title)

    content = soup.new_tag("div")
    content["class"] = ["alert-content"]
    for node in body:
        content.append(node)

    alert.append(header)
    alert.append(content)
    return alert


def alert_block_converter(soup: BeautifulSoup, context) -> BeautifulSoup:
    """
    Replace top-level blockquotes opening with ``[!KEYWORD]`` by alert blocks.

    Args:
        soup: Rendered presentation tree (mutated in place)
        context: RenderContext for the current run (unused)

    Returns:
        The same tree
    """
    # Top-level quotes only, collected before the tree changes
    targets = [
        blockquote
        for blockquote in soup.find_all("blockquote")
        if not has_ancestor(blockquote, ("blockquote",))
    ]

    for blockquote in targets:
        descriptor = match_alert(blockquote)
        if descriptor is None:
            continue

        _strip_marker(blockquote, descriptor.keyword)
        alert = build_alert(soup, descriptor, _body_nodes(blockquote))
        blockquote.replace_with(alert)

    return soup
