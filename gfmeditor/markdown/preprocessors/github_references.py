"""
Preprocessors for GitHub style mentions and issue references.

Converts:
    @octocat   → **@octocat**
    #123       → [#123](#issue-123)

Code spans and fenced code blocks are left alone. Tokens glued to a word
character, a slash, ``&`` or ``@`` are not references (e-mail addresses,
URL fragments, HTML entities). Link destinations such as ``[see](#12)`` are
left as written.
"""

import re

from .utils import map_prose

MENTION_PATTERN = re.compile(r"(?<![\w/&@])@([a-zA-Z0-9_-]+)")
ISSUE_PATTERN = re.compile(r"(?<![\w/&@#])(?<!\]\()#(\d+)\b")


def mention_emphasis(text: str, context) -> str:
    """Render ``@name`` tokens as strong text."""
    return map_prose(text, lambda prose: MENTION_PATTERN.sub(r"**@\1**", prose))


def issue_reference_links(text: str, context) -> str:
    """Link ``#123`` tokens to the local ``#issue-123`` anchor."""
    return map_prose(
        text, lambda prose: ISSUE_PATTERN.sub(r"[#\1](#issue-\1)", prose)
    )
