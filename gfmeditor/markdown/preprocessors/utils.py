"""Helpers that keep text preprocessors out of code spans and fenced blocks."""

from __future__ import annotations

import re
from typing import Callable

# Fenced blocks first so their backticks are not taken for inline spans
CODE_SEGMENT_PATTERN = re.compile(
    r"(^[ \t]*(?:```|~~~)[^\n]*\n.*?(?:^[ \t]*(?:```|~~~)[ \t]*$|\Z)|`[^`\n]+`)",
    re.DOTALL | re.MULTILINE,
)


def map_prose(text: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` to every part of ``text`` that is not code."""
    parts = CODE_SEGMENT_PATTERN.split(text)
    # re.split with one group alternates prose, code, prose, ...
    for idx in range(0, len(parts), 2):
        parts[idx] = func(parts[idx])
    return "".join(parts)


def map_inline_code(text: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` to every inline code span (backticks included)."""
    parts = CODE_SEGMENT_PATTERN.split(text)
    for idx in range(1, len(parts), 2):
        if not parts[idx].lstrip(" \t").startswith(("```", "~~~")):
            parts[idx] = func(parts[idx])
    return "".join(parts)
