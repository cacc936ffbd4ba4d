"""
Configuration from Django settings and the template filter
"""

import pypandoc
import pytest
from django.template import Context, Engine
from django.test import override_settings
from django.utils.safestring import SafeString

from gfmeditor.markdown.config import (
    get_editor_config,
    get_pandoc_config,
    highlighting_off_flag,
)
from gfmeditor.markdown.pipeline import build_pipeline
from gfmeditor.templatetags.markdown_tags import gfm_filter


def pandoc_version(version):
    def get_pandoc_version():
        return version

    return get_pandoc_version


def pandoc_missing():
    raise OSError("No pandoc was found")


class TestConfig:
    def test_defaults(self):
        config = get_editor_config()
        assert config["USE_PANDOC"] is True
        assert config["HIGHLIGHT_CODE"] is True
        assert config["PANDOC_FORMAT"] == "gfm"

    def test_settings_override(self):
        with override_settings(GFM_EDITOR={"USE_PANDOC": False, "HIGHLIGHT_CODE": False}):
            config = get_editor_config()
            pipeline = build_pipeline()

        assert config["USE_PANDOC"] is False
        assert config["PANDOC_FORMAT"] == "gfm"
        assert pipeline.renderer is pipeline.fallback
        assert pipeline.highlighter is None

    def test_pandoc_config(self, monkeypatch):
        monkeypatch.setattr(pypandoc, "get_pandoc_version", pandoc_version("3.1.11.1"))
        with override_settings(GFM_EDITOR={"PANDOC_EXTRA_ARGS": ["--strip-comments"]}):
            config = get_pandoc_config()

        assert config["format"] == "gfm"
        assert config["to"] == "html5"
        assert config["extra_args"] == ["--wrap=preserve", "--no-highlight", "--strip-comments"]


class TestHighlightingFlag:
    """Pandoc's own highlighting is turned off with the option its version knows"""

    @pytest.mark.parametrize(
        "version, flag",
        [
            ("2.19.2", "--no-highlight"),
            ("3.7.0.2", "--no-highlight"),
            ("3.8", "--syntax-highlighting=none"),
            ("3.9.0.1", "--syntax-highlighting=none"),
            ("4.0", "--syntax-highlighting=none"),
        ],
    )
    def test_flag_by_version(self, monkeypatch, version, flag):
        monkeypatch.setattr(pypandoc, "get_pandoc_version", pandoc_version(version))
        assert highlighting_off_flag() == flag

    def test_flag_without_pandoc(self, monkeypatch):
        monkeypatch.setattr(pypandoc, "get_pandoc_version", pandoc_missing)
        assert highlighting_off_flag() == "--no-highlight"

    def test_new_flag_in_pandoc_config(self, monkeypatch):
        monkeypatch.setattr(pypandoc, "get_pandoc_version", pandoc_version("3.9"))
        assert "--syntax-highlighting=none" in get_pandoc_config()["extra_args"]
        assert "--no-highlight" not in get_pandoc_config()["extra_args"]


class TestTemplateFilters:
    def test_gfm_filter_is_safe(self):
        html = gfm_filter("**bold**")
        assert isinstance(html, SafeString)
        assert "<strong>bold</strong>" in html

    def test_filter_in_template(self):
        engine = Engine(libraries={"markdown_tags": "gfmeditor.templatetags.markdown_tags"})
        template = engine.from_string("{% load markdown_tags %}{{ body|gfm }}")
        html = template.render(Context({"body": "> [!NOTE]\n> Hi"}))
        assert 'class="alert alert-note"' in html

    def test_task_list_in_template(self):
        engine = Engine(libraries={"markdown_tags": "gfmeditor.templatetags.markdown_tags"})
        template = engine.from_string("{% load markdown_tags %}{{ body|gfm }}")
        html = template.render(Context({"body": "- [x] done"}))
        assert "task-list-item" in html
