"""Pytest configuration and shared fixtures for the gfmeditor test suite."""

import django
import pytest
from django.conf import settings

if not settings.configured:
    settings.configure(
        INSTALLED_APPS=["gfmeditor"],
        GFM_EDITOR={},
        USE_TZ=True,
    )
    django.setup()

from gfmeditor.markdown.context import RenderContext  # noqa: E402
from gfmeditor.markdown.fallback import FallbackRenderer  # noqa: E402
from gfmeditor.markdown.pipeline import MarkdownPipeline  # noqa: E402
from gfmeditor.markdown.renderer import PandocRenderer  # noqa: E402


@pytest.fixture
def context():
    return RenderContext()


@pytest.fixture
def pipeline():
    """Pipeline with the built-in renderer and no highlighter (deterministic)."""
    return MarkdownPipeline(renderer=FallbackRenderer(), highlighter=None)


@pytest.fixture(scope="session")
def pandoc_available():
    return PandocRenderer.is_available()


@pytest.fixture
def pandoc_pipeline(pandoc_available):
    if not pandoc_available:
        pytest.skip("pandoc binary not available")
    return MarkdownPipeline(renderer=PandocRenderer(), highlighter=None)
