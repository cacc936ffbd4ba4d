"""
Task list postprocessor
"""

from bs4 import BeautifulSoup

from gfmeditor.markdown.postprocessors.task_list import (
    task_list_converter,
    task_list_converter_default,
)


def convert(html, context):
    return task_list_converter_default(BeautifulSoup(html, "html.parser"), context)


class TestTaskList:
    def test_checked_and_unchecked_items(self, context):
        soup = convert("<ul><li>[ ] item</li><li>[x] done</li><li>plain</li></ul>", context)

        items = soup.find_all("li", class_="task-list-item")
        assert len(items) == 2

        todo, done = (item.find("input") for item in items)
        assert todo["type"] == "checkbox"
        assert not todo.has_attr("checked")
        assert done.has_attr("checked")
        assert todo.has_attr("disabled") and done.has_attr("disabled")

        assert items[0].get_text() == " item"
        assert "[ ]" not in str(soup) and "[x]" not in str(soup)

    def test_plain_item_untouched(self, context):
        soup = convert("<ul><li>plain</li></ul>", context)
        assert soup.find("li").get("class") is None

    def test_only_nested_item_is_marked(self, context):
        soup = convert("<ul><li>parent<ul><li>[ ] child</li></ul></li></ul>", context)
        parent, child = soup.find_all("li")
        assert parent.get("class") is None
        assert "task-list-item" in child["class"]

    def test_token_inside_code_is_kept(self, context):
        soup = convert("<ul><li><code>[ ]</code> literal</li></ul>", context)
        assert soup.find("input") is None
        assert soup.find("code").get_text() == "[ ]"

    def test_token_anywhere_in_item(self, context):
        soup = convert("<ul><li>todo [x] later</li></ul>", context)
        li = soup.find("li")
        assert "task-list-item" in li["class"]
        assert li.find("input").has_attr("checked")

    def test_existing_classes_kept(self, context):
        soup = convert('<ul><li class="in-list">[ ] item</li></ul>', context)
        assert soup.find("li")["class"] == ["in-list", "task-list-item"]

    def test_enabled_checkboxes(self, context):
        soup = task_list_converter(
            BeautifulSoup("<ul><li>[ ] item</li></ul>", "html.parser"), context, disabled=False
        )
        assert not soup.find("input").has_attr("disabled")
