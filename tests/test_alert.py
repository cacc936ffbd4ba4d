"""
Alert block postprocessor
"""

import pytest
from bs4 import BeautifulSoup

from gfmeditor.markdown.patterns import ALERT_KEYWORDS
from gfmeditor.markdown.postprocessors.alert import ALERT_TYPES, alert_block_converter


def convert(html, context):
    return alert_block_converter(BeautifulSoup(html, "html.parser"), context)


class TestAlertDescriptors:
    def test_every_keyword_has_a_descriptor(self):
        assert set(ALERT_TYPES) == set(ALERT_KEYWORDS)

    @pytest.mark.parametrize(
        "keyword, icon",
        [("NOTE", "📝"), ("TIP", "💡"), ("IMPORTANT", "❗"), ("WARNING", "⚠️"), ("CAUTION", "🚨")],
    )
    def test_icons(self, keyword, icon):
        assert ALERT_TYPES[keyword].icon == icon
        assert ALERT_TYPES[keyword].title == keyword


class TestAlertConversion:
    @pytest.mark.parametrize("keyword", ALERT_KEYWORDS)
    def test_keyword_converts(self, keyword, context):
        soup = convert(f"<blockquote>\n<p>[!{keyword}]\nBody text</p>\n</blockquote>", context)

        assert soup.find("blockquote") is None
        alert = soup.find("div", class_="alert")
        assert alert["class"] == ["alert", f"alert-{keyword.lower()}"]
        assert alert.find(class_="alert-title").get_text() == keyword
        assert alert.find(class_="alert-icon").get_text() == ALERT_TYPES[keyword].icon
        assert alert.find(class_="alert-content").get_text() == "Body text"

    @pytest.mark.parametrize("marker", ["[!UNKNOWN]", "[!note]", "Note [!NOTE]"])
    def test_non_alerts_untouched(self, marker, context):
        html = f"<blockquote>\n<p>{marker}\ntext</p>\n</blockquote>"
        soup = convert(html, context)
        assert str(soup) == html

    def test_marker_followed_by_line_break_tag(self, context):
        soup = convert("<blockquote><p>[!TIP]<br/>Use it</p></blockquote>", context)
        content = soup.find(class_="alert-content")
        assert content.get_text() == "Use it"
        assert content.find("br") is None

    def test_multiple_paragraphs_kept(self, context):
        soup = convert(
            "<blockquote>\n<p>[!NOTE]</p>\n<p>First</p>\n<p>Second</p>\n</blockquote>", context
        )
        paragraphs = soup.find(class_="alert-content").find_all("p")
        assert [p.get_text() for p in paragraphs] == ["First", "Second"]

    def test_marker_only(self, context):
        soup = convert("<blockquote><p>[!CAUTION]</p></blockquote>", context)
        assert soup.find(class_="alert-content").get_text() == ""

    def test_inline_markup_in_body(self, context):
        soup = convert("<blockquote><p>[!IMPORTANT]\nRead <strong>this</strong></p></blockquote>", context)
        content = soup.find(class_="alert-content")
        assert content.find("strong").get_text() == "this"
        assert content.get_text() == "Read this"

    def test_nested_blockquote_not_converted(self, context):
        html = "<blockquote><p>Outer</p><blockquote><p>[!NOTE] inner</p></blockquote></blockquote>"
        soup = convert(html, context)
        assert soup.find(class_="alert") is None
        assert len(soup.find_all("blockquote")) == 2

    def test_alert_nested_in_alert_stays_blockquote(self, context):
        html = (
            "<blockquote><p>[!NOTE]\nouter</p>"
            "<blockquote><p>[!TIP]\ninner</p></blockquote></blockquote>"
        )
        soup = convert(html, context)

        alerts = soup.find_all(class_="alert")
        assert len(alerts) == 1
        assert "alert-note" in alerts[0]["class"]
        nested = soup.find(class_="alert-content").find("blockquote")
        assert nested.get_text() == "[!TIP]\ninner"

    def test_document_order_and_position(self, context):
        soup = convert(
            "<p>before</p><blockquote><p>[!TIP]\nA</p></blockquote>"
            "<blockquote><p>plain</p></blockquote><p>after</p>",
            context,
        )
        names = [child.name for child in soup.contents]
        assert names == ["p", "div", "blockquote", "p"]
