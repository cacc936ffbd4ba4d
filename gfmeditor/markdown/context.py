# gfmeditor/markdown/context.py
"""Per-run state threaded through the preprocessors and postprocessors."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FootnoteReference:
    """A referenced footnote, numbered by first appearance."""

    identifier: str
    text: str
    number: int
    occurrences: int = 1


@dataclass
class RenderContext:
    """
    State owned by a single pipeline run.

    Created when the run starts and dropped when it ends, so nothing here
    survives between keystrokes.

    Attributes:
        source: The raw Markdown buffer the run started from
        footnotes: Footnote table, identifier -> definition markup (insertion ordered)
        references: Referenced footnotes in order of first appearance
        extra: Caller supplied data (template context, base_url, ...)
    """

    source: str = ""
    footnotes: Dict[str, str] = field(default_factory=dict)
    references: List[FootnoteReference] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.extra.get(key, default)

    def reference_for(self, identifier: str) -> Optional[FootnoteReference]:
        for reference in self.references:
            if reference.identifier == identifier:
                return reference
        return None
