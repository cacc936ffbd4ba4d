"""
Preprocessor that hides GitHub extension tokens from the generic renderer.

Alert markers, footnote tokens and task checkboxes are handled by the
postprocessors. Renderers with their own support for these (or that read
``[^1]: text`` as a link reference definition) would otherwise consume
them, so the brackets are backslash-escaped and come out as literal text:

    > [!NOTE]      → > \\[!NOTE\\]
    Text[^1]       → Text\\[^1\\]
    [^1]: Note     → \\[^1\\]: Note
    - [x] Done     → - \\[x\\] Done

An upper case ``[X]`` is escaped too and stays literal text; only ``[ ]``
and ``[x]`` become checkboxes.
"""

import re

from ..patterns import ALERT_KEYWORDS
from .utils import map_prose

ALERT_TOKEN_PATTERN = re.compile(r"(?<!\\)\[!(" + "|".join(ALERT_KEYWORDS) + r")\]")
FOOTNOTE_TOKEN_PATTERN = re.compile(r"(?<!\\)\[\^([^\]\n]+)\](?!\()")
TASK_TOKEN_PATTERN = re.compile(r"(?<!\\)\[([ xX])\](?![(\[:])")


def _escape_tokens(prose: str) -> str:
    prose = ALERT_TOKEN_PATTERN.sub(r"\\[!\1\\]", prose)
    prose = FOOTNOTE_TOKEN_PATTERN.sub(r"\\[^\1\\]", prose)
    return TASK_TOKEN_PATTERN.sub(r"\\[\1\\]", prose)


def extension_marker_escapes(text: str, context) -> str:
    """Backslash-escape alert, footnote and task tokens outside of code."""
    return map_prose(text, _escape_tokens)
