# gfmeditor/markdown/pipeline.py
"""
The augmentation pipeline.

    raw text → preprocessors → generic renderer → highlighter
             → color swatches → task lists → alerts → footnotes

Every run starts from the source text and builds a fresh tree; nothing is
carried over from a previous run. The renderer and highlighter are
resolved when the pipeline is built, not on every run.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from bs4 import BeautifulSoup

from .config import get_editor_config
from .context import RenderContext
from .fallback import FallbackRenderer
from .highlighter import Highlighter, PygmentsHighlighter
from .postprocessors import POSTPROCESSORS, apply_postprocessors
from .preprocessors import PREPROCESSORS, apply_preprocessors
from .renderer import PandocRenderer, Renderer

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Output of one pipeline run."""

    soup: BeautifulSoup
    context: RenderContext

    @property
    def html(self) -> str:
        return str(self.soup)


class MarkdownPipeline:
    """
    Run the full GitHub flavoured rendering pipeline over a Markdown buffer.

    Args:
        renderer: Generic renderer, or None to use the built-in fallback
        highlighter: Code highlighter, or None to skip highlighting
        preprocessors: Text passes (default: PREPROCESSORS)
        postprocessors: Tree passes (default: POSTPROCESSORS)
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        highlighter: Optional[Highlighter] = None,
        preprocessors: Optional[List[Callable]] = None,
        postprocessors: Optional[List[Callable]] = None,
    ):
        self.fallback = FallbackRenderer()
        self.renderer = renderer or self.fallback
        self.highlighter = highlighter
        self.preprocessors = list(PREPROCESSORS if preprocessors is None else preprocessors)
        self.postprocessors = list(POSTPROCESSORS if postprocessors is None else postprocessors)

    def render(self, text: str) -> str:
        """Generic render; a failing renderer falls back for this run."""
        if self.renderer is not self.fallback:
            try:
                return self.renderer.render(text)
            except Exception as e:
                logger.warning(
                    f"Renderer {type(self.renderer).__name__} failed, using fallback: {e}",
                    exc_info=True,
                )
        return self.fallback.render(text)

    def highlight(self, soup: BeautifulSoup) -> None:
        if self.highlighter is None:
            return

        for code in soup.select("pre > code"):
            try:
                self.highlighter.highlight(code)
            except Exception as e:
                logger.error(f"Code highlighting failed: {e}", exc_info=True)

    def run(self, text: str, extra: Optional[Dict[str, Any]] = None) -> RenderResult:
        """
        Render ``text`` from scratch.

        Args:
            text: Raw markdown source buffer
            extra: Optional data for processors that need it

        Returns:
            RenderResult holding the final tree and the run's context
        """
        context = RenderContext(source=text, extra=dict(extra or {}))

        # Pre-processing: Before markdown conversion
        transformed = apply_preprocessors(text, context, self.preprocessors)

        soup = BeautifulSoup(self.render(transformed), "html.parser")
        self.highlight(soup)

        # Post-processing: After markdown conversion
        soup = apply_postprocessors(soup, context, self.postprocessors)

        return RenderResult(soup=soup, context=context)


def build_pipeline(config: Optional[Dict[str, Any]] = None) -> MarkdownPipeline:
    """
    Build a pipeline with whichever collaborators are available.

    The pandoc binary is probed once here. Without it the pipeline uses
    the fallback renderer. HIGHLIGHT_CODE=False skips highlighting.
    """
    config = config or get_editor_config()

    renderer = None
    if config.get("USE_PANDOC", True) and PandocRenderer.is_available():
        renderer = PandocRenderer()

    highlighter = None
    if config.get("HIGHLIGHT_CODE", True):
        highlighter = PygmentsHighlighter()

    logger.debug(
        "Markdown pipeline: renderer=%s highlighter=%s",
        getattr(renderer, "name", "fallback"),
        type(highlighter).__name__ if highlighter else None,
    )
    return MarkdownPipeline(renderer=renderer, highlighter=highlighter)
