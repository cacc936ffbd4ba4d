# gfmeditor/markdown/postprocessors/footnote.py
"""
Postprocessor that resolves GitHub style footnotes.

Expected markdown input:
    Ref[^1] and again[^1]

    [^1]: Footnote text

Rendered HTML (the definition is still plain text, in a paragraph, a tight
list item or an alert body):
    <p>Ref[^1] and again[^1]</p>
    <p>[^1]: Footnote text</p>

This postprocessor:
- Removes definition lines (``[^id]: text``) and records them in the
  footnote table of the render context. Only single line definitions are
  supported, the first definition of an identifier wins.
- Replaces each ``[^id]`` with a superscript link to ``#footnote-id``.
  Repeated references share the number given on first appearance.
  References to undefined footnotes are left as literal text.
- Appends the footnotes section listing every referenced footnote once:

    <p>Ref<sup class="footnote-ref"><a href="#footnote-1" id="footnote-ref-1">1</a></sup> and
    again<sup class="footnote-ref"><a href="#footnote-1" id="footnote-ref-1-2">1</a></sup></p>
    <div class="footnotes">
        <hr/>
        <p id="footnote-1">1. Footnote text</p>
    </div>

Definitions that are never referenced are dropped.
"""

import logging
import re
from html import escape, unescape

from bs4 import BeautifulSoup, NavigableString, Tag

from ..context import FootnoteReference
from ..patterns import FOOTNOTE_DEFINITION_PATTERN, FOOTNOTE_REFERENCE_PATTERN
from .utils import is_inside_code, parse_fragment, text_nodes

logger = logging.getLogger(__name__)

TRAILING_BREAK_PATTERN = re.compile(r"(?:\s*<br\s*/?>)+\s*$")

# Blocks whose inline content may hold definition lines
TEXT_BLOCK_TAGS = ["p", "li", "td", "th", "dd", "dt", "div", "h1", "h2", "h3", "h4", "h5", "h6"]
# Blocks removed when a definition was their only content
REMOVABLE_TAGS = ("p", "li", "dd", "dt")
BLOCK_TAGS = frozenset(
    TEXT_BLOCK_TAGS
    + ["blockquote", "pre", "ul", "ol", "dl", "table", "thead", "tbody", "tfoot", "tr", "hr",
       "section", "figure", "details", "summary"]
)


def _serialize(node) -> str:
    if isinstance(node, Tag):
        return str(node)
    return escape(str(node), quote=False)


def _inline_runs(block: Tag) -> list:
    """Consecutive direct children of ``block`` that are not block level tags."""
    runs = [[]]
    for child in block.contents:
        if isinstance(child, Tag) and child.name in BLOCK_TAGS:
            runs.append([])
        elif type(child) is NavigableString or isinstance(child, Tag):
            runs[-1].append(child)
    return [run for run in runs if run]


def _extract_from_run(run: list, context) -> bool:
    markup = "".join(_serialize(node) for node in run)
    if "[^" not in markup:
        return False

    kept = []
    found = False
    for line in markup.split("\n"):
        match = FOOTNOTE_DEFINITION_PATTERN.match(line)
        if match is None:
            kept.append(line)
            continue
        found = True
        identifier, text = unescape(match.group(1)), match.group(2)
        if identifier in context.footnotes:
            logger.debug("Duplicate definition for footnote %r ignored", identifier)
            continue
        context.footnotes[identifier] = text

    if not found:
        return False

    remaining = TRAILING_BREAK_PATTERN.sub("", "\n".join(kept)).strip()
    if remaining:
        for node in parse_fragment(remaining):
            run[0].insert_before(node)
    for node in run:
        node.extract()
    return True


def _is_blank(tag: Tag) -> bool:
    return not tag.get_text().strip() and not tag.find(True)


def extract_definitions(soup: BeautifulSoup, context) -> None:
    """
    Move ``[^id]: text`` lines out of the rendered tree into ``context.footnotes``.

    Every text bearing block is scanned (paragraphs, tight list items, alert
    bodies, table cells, headings), one run of inline content at a time.
    Paragraphs and list items left empty are removed.
    """
    for block in soup.find_all(TEXT_BLOCK_TAGS):
        if block.parent is None or is_inside_code(block):
            continue

        changed = False
        for run in _inline_runs(block):
            changed = _extract_from_run(run, context) or changed

        if changed and block.name in REMOVABLE_TAGS and _is_blank(block):
            block.decompose()


def _reference_tag(soup: BeautifulSoup, reference: FootnoteReference) -> Tag:
    anchor_id = f"footnote-ref-{reference.identifier}"
    if reference.occurrences > 1:
        anchor_id = f"{anchor_id}-{reference.occurrences}"

    link = soup.new_tag("a", href=f"#footnote-{reference.identifier}")
    link["id"] = anchor_id
    link.string = str(reference.number)

    sup = soup.new_tag("sup")
    sup["class"] = ["footnote-ref"]
    sup.append(link)
    return sup


def _register_reference(context, identifier: str) -> FootnoteReference:
    reference = context.reference_for(identifier)
    if reference is not None:
        reference.occurrences += 1
        return reference

    reference = FootnoteReference(
        identifier=identifier,
        text=context.footnotes[identifier],
        number=len(context.references) + 1,
    )
    context.references.append(reference)
    return reference


def substitute_references(soup: BeautifulSoup, context) -> None:
    """Replace ``[^id]`` tokens for defined footnotes with superscript links."""
    for node in text_nodes(soup):
        if is_inside_code(node):
            continue

        text = str(node)
        pieces = []
        position = 0
        for match in FOOTNOTE_REFERENCE_PATTERN.finditer(text):
            identifier = match.group(1)
            if identifier not in context.footnotes:
                continue
            pieces.append(NavigableString(text[position:match.start()]))
            pieces.append(_reference_tag(soup, _register_reference(context, identifier)))
            position = match.end()

        if not pieces:
            continue

        pieces.append(NavigableString(text[position:]))
        for piece in pieces:
            if isinstance(piece, NavigableString) and not piece:
                continue
            node.insert_before(piece)
        node.extract()


def build_footnotes_section(soup: BeautifulSoup, context) -> Tag:
    section = soup.new_tag("div")
    section["class"] = ["footnotes"]
    section.append(soup.new_tag("hr"))

    for reference in context.references:
        entry = soup.new_tag("p")
        entry["id"] = f"footnote-{reference.identifier}"
        entry.append(NavigableString(f"{reference.number}. "))
        for node in parse_fragment(reference.text):
            entry.append(node)
        section.append(entry)

    return section


def footnote_resolver(soup: BeautifulSoup, context) -> BeautifulSoup:
    """
    Resolve footnote definitions and references and emit the footnotes section.

    Args:
        soup: Rendered presentation tree (mutated in place)
        context: RenderContext for the current run; its footnote table and
            reference list are filled in

    Returns:
        The same tree
    """
    extract_definitions(soup, context)
    if not context.footnotes:
        return soup

    substitute_references(soup, context)
    if context.references:
        soup.append(NavigableString("\n"))
        soup.append(build_footnotes_section(soup, context))

    return soup
