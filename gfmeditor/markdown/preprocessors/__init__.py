# gfmeditor/markdown/preprocessors/__init__.py

from .alert_blocks import alert_block_terminator
from .color_codes import color_code_marker
from .extension_markers import extension_marker_escapes
from .github_references import issue_reference_links, mention_emphasis

PREPROCESSORS = [
    alert_block_terminator,  # Before escaping, it looks for the raw [!KEYWORD] marker
    extension_marker_escapes,  # Must run before anything that adds brackets
    mention_emphasis,  # @name → **@name**
    issue_reference_links,  # #123 → [#123](#issue-123)
    color_code_marker,  # Last, so the inserted style attributes are not rewritten
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context, preprocessors=None):
    """Apply all preprocessors in order"""
    if preprocessors is None:
        preprocessors = PREPROCESSORS
    for processor in preprocessors:
        text = processor(text, context)
    return text
