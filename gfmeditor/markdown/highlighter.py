# gfmeditor/markdown/highlighter.py
"""
Syntax highlighting for fenced code blocks with Pygments.

The highlighter works on a single ``<code>`` tag from the rendered tree:

    <pre class="python"><code>print(1)</code></pre>                 (pandoc)
    <pre><code class="language-python">print(1)</code></pre>        (fallback)

becomes

    <pre class="python highlight"><code class="language-python"><span class="nb">print</span>...</code></pre>

Code blocks without a known language are left as they are.
"""

import logging
from typing import Optional, Protocol

from bs4 import BeautifulSoup, Tag
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


class Highlighter(Protocol):
    def highlight(self, code: Tag) -> None:
        ...


def _detect_language(code: Tag) -> Optional[str]:
    """Language named by a ``language-x`` class on code, or a class on pre."""
    for cls in code.get("class", []):
        if cls.startswith("language-"):
            return cls[len("language-"):]

    pre = code.parent
    if isinstance(pre, Tag) and pre.name == "pre":
        for cls in pre.get("class", []):
            if cls not in ("highlight", "sourceCode"):
                return cls

    return None


class PygmentsHighlighter:
    """Highlight ``pre > code`` tags in place using Pygments token spans."""

    def __init__(self, css_class: str = "highlight"):
        self.css_class = css_class

    def highlight(self, code: Tag) -> None:
        language = _detect_language(code)
        if not language or language == "plaintext":
            return

        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            logger.debug("No Pygments lexer for %r, leaving code block as is", language)
            return

        markup = pygments_highlight(code.get_text(), lexer, HtmlFormatter(nowrap=True))
        fragment = BeautifulSoup(markup.rstrip("\n"), "html.parser")

        code.clear()
        for node in list(fragment.contents):
            code.append(node.extract())

        classes = code.get("class", [])
        if f"language-{language}" not in classes:
            code["class"] = classes + [f"language-{language}"]

        pre = code.parent
        if isinstance(pre, Tag) and pre.name == "pre":
            pre_classes = pre.get("class", [])
            if self.css_class not in pre_classes:
                pre["class"] = pre_classes + [self.css_class]
