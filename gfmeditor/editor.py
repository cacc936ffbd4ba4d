# gfmeditor/editor.py
"""
Editing and display surfaces around the markdown pipeline.

An EditorSession owns the source buffer. Every change (set_text,
insert_at_cursor) triggers a full pipeline run and publishes the resulting
HTML to the display surface, then notifies change listeners.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .markdown.pipeline import MarkdownPipeline, RenderResult, build_pipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentStats:
    words: int
    characters: int
    lines: int


def document_stats(text: str) -> DocumentStats:
    """Word, character and line counts shown next to the editor."""
    stripped = text.strip()
    return DocumentStats(
        words=len(stripped.split()) if stripped else 0,
        characters=len(text),
        lines=len(text.split("\n")),
    )


class PreviewSurface:
    """Display surface keeping the last published HTML."""

    def __init__(self):
        self.html = ""
        self.updates = 0

    def replace(self, html: str) -> None:
        self.html = html
        self.updates += 1

    __call__ = replace


class EditorSession:
    """
    Source buffer plus selection, re-rendered on every change.

    Args:
        pipeline: Pipeline to run (default: build_pipeline())
        display: Callable receiving the rendered HTML (default: PreviewSurface)
        text: Initial source buffer
    """

    def __init__(
        self,
        pipeline: Optional[MarkdownPipeline] = None,
        display: Optional[Callable[[str], None]] = None,
        text: str = "",
    ):
        self.pipeline = pipeline or build_pipeline()
        self.display = display if display is not None else PreviewSurface()
        self._text = text
        self._selection = (len(text), len(text))
        self._listeners: List[Callable[["EditorSession", RenderResult], None]] = []
        self._running = False
        self._pending = False
        self.result: Optional[RenderResult] = None
        self.stats = document_stats(text)
        self.refresh()

    @property
    def text(self) -> str:
        return self._text

    @property
    def selection(self) -> Tuple[int, int]:
        return self._selection

    @property
    def selected_text(self) -> str:
        start, end = self._selection
        return self._text[start:end]

    def select(self, start: int, end: Optional[int] = None) -> None:
        end = start if end is None else end
        if not 0 <= start <= end <= len(self._text):
            raise ValueError(
                f"Selection ({start}, {end}) outside of buffer of length {len(self._text)}"
            )
        self._selection = (start, end)

    def on_change(self, listener: Callable[["EditorSession", RenderResult], None]) -> None:
        """Register ``listener(session, result)``, called after each publish."""
        self._listeners.append(listener)

    def set_text(self, text: str) -> None:
        self._text = text
        self._selection = (len(text), len(text))
        self.refresh()

    def insert_at_cursor(self, snippet: str) -> None:
        """Replace the selection with ``snippet`` and put the cursor after it."""
        start, end = self._selection
        self._text = self._text[:start] + snippet + self._text[end:]
        cursor = start + len(snippet)
        self._selection = (cursor, cursor)
        self.refresh()

    def refresh(self) -> None:
        """
        Run the pipeline on the current buffer and publish the result.

        Runs never overlap: a change made while a run is in progress (from a
        listener, for example) is picked up by one more run once the current
        one has finished.
        """
        if self._running:
            self._pending = True
            return

        self._running = True
        try:
            while True:
                self._pending = False
                self._publish(self.pipeline.run(self._text))
                if not self._pending:
                    break
        finally:
            self._running = False

    def _publish(self, result: RenderResult) -> None:
        logger.debug("Publishing preview for %d characters of markdown", len(self._text))
        self.result = result
        self.stats = document_stats(self._text)
        self.display(result.html)

        for listener in list(self._listeners):
            listener(self, result)
