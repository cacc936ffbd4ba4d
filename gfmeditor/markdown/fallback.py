# gfmeditor/markdown/fallback.py
"""
Minimal Markdown renderer used when pandoc is not available.

Every construct is an independent, line oriented pattern substitution.
There is no nesting: a list inside a blockquote stays literal text, a
blockquote ends at the first line that does not start with ``>``.

Supported:
    - ATX headings (# .. ######)
    - ***bold italic***, **bold**, *italic*, ~~strikethrough~~
    - fenced code blocks (``` or ~~~, optional language)
    - `inline code`
    - [links](url) and ![images](url)
    - > blockquotes (consecutive lines form one block)
    - bullet (-, *, +) and numbered (1. / 1)) list items
    - backslash escapes of ASCII punctuation
"""

import html
import re
from typing import List

FENCED_CODE_PATTERN = re.compile(
    r"^[ \t]*(```|~~~)[ \t]*([\w+#.-]+)?[^\n]*\n(.*?)^[ \t]*\1[ \t]*$",
    re.DOTALL | re.MULTILINE,
)
INLINE_CODE_PATTERN = re.compile(r"`([^`\n]+)`")
ESCAPE_PATTERN = re.compile(r"\\([!-/:-@\[-`{-~])")
PLACEHOLDER_PATTERN = re.compile("\x00(\\d+)\x00")
BLOCK_PLACEHOLDER_PATTERN = re.compile("^\x00(\\d+)\x00$")

HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(.*?)[ \t#]*$")
QUOTE_PATTERN = re.compile(r"^[ \t]{0,3}>[ ]?(.*)$")
BULLET_PATTERN = re.compile(r"^\s*[-*+][ \t]+(.*)$")
NUMBERED_PATTERN = re.compile(r"^\s*\d+[.)][ \t]+(.*)$")

INLINE_SUBSTITUTIONS = [
    (re.compile(r"!\[([^\]]*)\]\(([^)\s]+)\)"), r'<img src="\2" alt="\1">'),
    (re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)"), r'<a href="\2">\1</a>'),
    (re.compile(r"\*\*\*(.+?)\*\*\*"), r"<strong><em>\1</em></strong>"),
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"~~(.+?)~~"), r"<del>\1</del>"),
]


def render_inline(text: str) -> str:
    for pattern, replacement in INLINE_SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text


class FallbackRenderer:
    """Best-effort renderer; never raises on malformed input."""

    name = "fallback"

    def render(self, text: str) -> str:
        placeholders: List[str] = []
        block_placeholders = set()

        def stash(markup: str, block: bool = False) -> str:
            placeholders.append(markup)
            if block:
                block_placeholders.add(len(placeholders) - 1)
            return f"\x00{len(placeholders) - 1}\x00"

        def fenced(match):
            language = match.group(2) or "plaintext"
            code = html.escape(match.group(3).rstrip("\n"), quote=False)
            return stash(
                f'<pre><code class="language-{language}">{code}</code></pre>',
                block=True,
            )

        text = text.replace("\r\n", "\n")
        text = FENCED_CODE_PATTERN.sub(fenced, text)
        text = INLINE_CODE_PATTERN.sub(
            lambda m: stash(f"<code>{html.escape(m.group(1), quote=False)}</code>"),
            text,
        )
        text = ESCAPE_PATTERN.sub(lambda m: stash(html.escape(m.group(1))), text)

        blocks = self._render_blocks(text.split("\n"), block_placeholders)
        rendered = "\n".join(blocks)

        return PLACEHOLDER_PATTERN.sub(lambda m: placeholders[int(m.group(1))], rendered)

    def _render_blocks(self, lines: List[str], block_placeholders) -> List[str]:
        blocks: List[str] = []
        kind = None
        buffer: List[str] = []

        def flush():
            nonlocal kind, buffer
            if kind == "p":
                blocks.append(f"<p>{render_inline(chr(10).join(buffer))}</p>")
            elif kind == "quote":
                blocks.append(self._render_blockquote(buffer))
            elif kind in ("ul", "ol"):
                items = "\n".join(f"<li>{render_inline(item)}</li>" for item in buffer)
                blocks.append(f"<{kind}>\n{items}\n</{kind}>")
            kind = None
            buffer = []

        for line in lines:
            placeholder = BLOCK_PLACEHOLDER_PATTERN.match(line.strip())
            if placeholder and int(placeholder.group(1)) in block_placeholders:
                flush()
                blocks.append(line.strip())
                continue

            heading = HEADING_PATTERN.match(line)
            if heading:
                flush()
                level = len(heading.group(1))
                blocks.append(f"<h{level}>{render_inline(heading.group(2))}</h{level}>")
                continue

            if not line.strip():
                flush()
                continue

            for block_kind, pattern in (
                ("quote", QUOTE_PATTERN),
                ("ul", BULLET_PATTERN),
                ("ol", NUMBERED_PATTERN),
            ):
                match = pattern.match(line)
                if match:
                    if kind != block_kind:
                        flush()
                        kind = block_kind
                    buffer.append(match.group(1))
                    break
            else:
                if kind != "p":
                    flush()
                    kind = "p"
                buffer.append(line.strip())

        flush()
        return blocks

    @staticmethod
    def _render_blockquote(lines: List[str]) -> str:
        paragraphs: List[List[str]] = [[]]
        for line in lines:
            if line.strip():
                paragraphs[-1].append(line.strip())
            elif paragraphs[-1]:
                paragraphs.append([])

        inner = "\n".join(
            f"<p>{render_inline(chr(10).join(paragraph))}</p>"
            for paragraph in paragraphs
            if paragraph
        )
        return f"<blockquote>\n{inner}\n</blockquote>"
