"""
Preprocessor that closes alert blockquotes at the first unquoted line.

CommonMark lets a paragraph inside a blockquote continue on lines without
``>`` (lazy continuation). For alerts that would pull the next paragraph
into the alert body, so a blank line is inserted instead:

    > [!WARNING]          > [!WARNING]
    > Be careful     →    > Be careful
    Ref[^1]
                          Ref[^1]

Plain blockquotes keep the usual continuation rules. Fenced code blocks
are left alone.
"""

import re

from ..patterns import ALERT_KEYWORDS

ALERT_OPENING_PATTERN = re.compile(
    r"^[ ]{0,3}>[ \t]?\[!(?:" + "|".join(ALERT_KEYWORDS) + r")\]"
)
QUOTED_LINE_PATTERN = re.compile(r"^[ ]{0,3}>")
FENCE_PATTERN = re.compile(r"^[ \t]*(```|~~~)")


def alert_block_terminator(text: str, context) -> str:
    """Insert a blank line between an alert blockquote and a lazy continuation line."""
    lines = []
    fence = None
    in_alert = False

    for line in text.split("\n"):
        if fence is not None:
            if line.strip().startswith(fence):
                fence = None
            lines.append(line)
            continue

        fence_match = FENCE_PATTERN.match(line)
        if fence_match:
            fence = fence_match.group(1)
            in_alert = False
        elif not line.strip():
            in_alert = False
        elif ALERT_OPENING_PATTERN.match(line):
            in_alert = True
        elif in_alert and not QUOTED_LINE_PATTERN.match(line):
            lines.append("")
            in_alert = False

        lines.append(line)

    return "\n".join(lines)
