"""Token grammars shared by the preprocessors and postprocessors."""

import re

# #rgb, #rrggbb, rgb(...), hsl(...)
COLOR_LITERAL = r"#[0-9a-fA-F]{6}|#[0-9a-fA-F]{3}|rgb\([^)]+\)|hsl\([^)]+\)"
COLOR_LITERAL_PATTERN = re.compile(rf"(?:{COLOR_LITERAL})")

ALERT_KEYWORDS = ("NOTE", "TIP", "IMPORTANT", "WARNING", "CAUTION")
ALERT_MARKER_PATTERN = re.compile(r"^\[!(" + "|".join(ALERT_KEYWORDS) + r")\]")

FOOTNOTE_REFERENCE_PATTERN = re.compile(r"\[\^([^\]]+)\]")
FOOTNOTE_DEFINITION_PATTERN = re.compile(
    r"^[ \t]*\[\^([^\]\n]+)\]:[ \t]*(.+?)[ \t]*(?:<br\s*/?>)?[ \t]*$", re.MULTILINE
)

TASK_TOKEN_PATTERN = re.compile(r"\[([ x])\]")


def is_color_literal(text: str) -> bool:
    """True when ``text`` is exactly one color literal."""
    return COLOR_LITERAL_PATTERN.fullmatch(text) is not None
