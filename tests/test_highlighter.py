"""
Pygments highlighter
"""

import pytest
from bs4 import BeautifulSoup

from gfmeditor.markdown.highlighter import PygmentsHighlighter


def highlight(html):
    soup = BeautifulSoup(html, "html.parser")
    code = soup.find("code")
    PygmentsHighlighter().highlight(code)
    return soup


class TestPygmentsHighlighter:
    def test_language_class_on_code(self):
        soup = highlight('<pre><code class="language-python">print(1)</code></pre>')
        code = soup.find("code")
        assert code.find("span") is not None
        assert code.get_text() == "print(1)"
        assert "highlight" in soup.find("pre")["class"]

    def test_language_class_on_pre(self):
        soup = highlight('<pre class="python"><code>x = 1</code></pre>')
        code = soup.find("code")
        assert code.find("span") is not None
        assert code["class"] == ["language-python"]
        assert soup.find("pre")["class"] == ["python", "highlight"]

    def test_escaped_code_survives(self):
        soup = highlight('<pre><code class="language-python">a &lt; b</code></pre>')
        assert soup.find("code").get_text() == "a < b"

    @pytest.mark.parametrize(
        "html",
        [
            '<pre><code class="language-notalanguage">x</code></pre>',
            '<pre><code class="language-plaintext">x</code></pre>',
            "<pre><code>x</code></pre>",
        ],
    )
    def test_unknown_or_missing_language_untouched(self, html):
        assert str(highlight(html)) == html
