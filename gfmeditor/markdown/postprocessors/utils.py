"""Utilities shared by the tree postprocessors."""

from __future__ import annotations

from typing import Iterable, List

from bs4 import BeautifulSoup, NavigableString, Tag

CODE_TAGS = ("code", "pre", "kbd", "samp")


def has_ancestor(node, names: Iterable[str], stop: Tag | None = None) -> bool:
    """True if ``node`` sits inside one of the ``names`` tags (below ``stop``)."""
    names = tuple(names)
    parent = node.parent
    while parent is not None and parent is not stop:
        if isinstance(parent, Tag) and parent.name in names:
            return True
        parent = parent.parent
    return False


def is_inside_code(node) -> bool:
    return has_ancestor(node, CODE_TAGS)


def add_class(tag: Tag, *classes: str) -> None:
    """Append classes to a tag, keeping the existing ones and their order."""
    existing = tag.get("class", [])
    if isinstance(existing, str):
        existing = existing.split()
    merged = list(existing)
    for cls in classes:
        if cls not in merged:
            merged.append(cls)
    tag["class"] = merged


def parse_fragment(markup: str) -> List:
    """Parse an HTML fragment and return its detached top level nodes."""
    fragment = BeautifulSoup(markup, "html.parser")
    return [node.extract() for node in list(fragment.contents)]


def text_nodes(root: Tag) -> List[NavigableString]:
    """Plain text nodes under ``root`` (comments, doctypes and CDATA excluded)."""
    return [
        node
        for node in root.find_all(string=True)
        if type(node) is NavigableString
    ]
