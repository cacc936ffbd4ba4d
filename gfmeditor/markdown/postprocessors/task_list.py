# gfmeditor/markdown/postprocessors/task_list.py
"""
Postprocessor that turns [ ] / [x] tokens in list items into checkboxes.

    <li>[ ] write docs</li>
    <li>[x] write code</li>

becomes

    <li class="task-list-item"><input disabled="" type="checkbox"/> write docs</li>
    <li class="task-list-item"><input checked="" disabled="" type="checkbox"/> write code</li>

The tokens are replaced wherever they occur in the item's own text. Text
that belongs to a nested list item, or sits inside code, is not touched.
"""

from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag

from ..patterns import TASK_TOKEN_PATTERN
from .utils import add_class, has_ancestor, text_nodes

TASK_ITEM_CLASS = "task-list-item"


def _own_text_nodes(li: Tag) -> List[NavigableString]:
    """Text nodes whose closest list item is ``li``, outside of code."""
    nodes = []
    for node in text_nodes(li):
        if has_ancestor(node, ("li",), stop=li):
            continue
        if has_ancestor(node, ("code", "pre"), stop=li):
            continue
        nodes.append(node)
    return nodes


def _checkbox(soup: BeautifulSoup, checked: bool, disabled: bool) -> Tag:
    checkbox = soup.new_tag("input", type="checkbox")
    if checked:
        checkbox["checked"] = ""
    if disabled:
        checkbox["disabled"] = ""
    return checkbox


def _replace_tokens(soup: BeautifulSoup, node: NavigableString, disabled: bool) -> None:
    text = str(node)
    pieces = []
    position = 0
    for match in TASK_TOKEN_PATTERN.finditer(text):
        if match.start() > position:
            pieces.append(NavigableString(text[position:match.start()]))
        pieces.append(_checkbox(soup, match.group(1) == "x", disabled))
        position = match.end()
    if position < len(text):
        pieces.append(NavigableString(text[position:]))

    for piece in pieces:
        node.insert_before(piece)
    node.extract()


def task_list_converter(
    soup: BeautifulSoup, context, disabled: bool = True
) -> BeautifulSoup:
    """
    Convert task tokens inside list items into checkbox inputs.

    Args:
        soup: Rendered presentation tree (mutated in place)
        context: RenderContext for the current run (unused)
        disabled: Render the checkboxes read-only (default: True)

    Returns:
        The same tree
    """
    for li in soup.find_all("li"):
        matching = [
            node for node in _own_text_nodes(li) if TASK_TOKEN_PATTERN.search(str(node))
        ]
        if not matching:
            continue

        add_class(li, TASK_ITEM_CLASS)
        for node in matching:
            _replace_tokens(soup, node, disabled)

    return soup


def task_list_converter_default(soup: BeautifulSoup, context) -> BeautifulSoup:
    """
    Default configuration for task_list_converter.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return task_list_converter(soup, context, disabled=True)
