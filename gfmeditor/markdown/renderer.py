# gfmeditor/markdown/renderer.py

import logging
from functools import lru_cache
from typing import Optional, Protocol

import pypandoc

from .config import get_pandoc_config

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Generic Markdown renderer: Markdown text in, HTML markup out."""

    def render(self, text: str) -> str:
        ...


class PandocRenderer:
    """Render GitHub flavoured Markdown to HTML5 with pypandoc."""

    name = "pandoc"

    def __init__(self, pandoc_config: Optional[dict] = None):
        self.pandoc_config = pandoc_config or get_pandoc_config()

    def render(self, text: str) -> str:
        return pypandoc.convert_text(
            text,
            to=self.pandoc_config["to"],
            format=self.pandoc_config["format"],
            extra_args=self.pandoc_config["extra_args"],
        )

    @staticmethod
    def is_available() -> bool:
        """Check once whether the pandoc binary can be used."""
        try:
            version = pypandoc.get_pandoc_version()
        except OSError:
            logger.debug("pandoc binary not found - using fallback renderer")
            return False

        logger.debug("Using pandoc %s for markdown rendering", version)
        return True


@lru_cache(maxsize=1)
def get_default_pipeline():
    """Pipeline shared by the template filters, built once per process."""
    from .pipeline import build_pipeline

    return build_pipeline()


def render_gfm(text, context=None):
    """
    Main rendering function with pre/post processing pipeline

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data
    """
    result = get_default_pipeline().run(text or "", context or {})
    return result.html
