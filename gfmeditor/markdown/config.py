import re
from typing import Any, Dict

import pypandoc
from django.conf import settings

# Pandoc 3.8 replaced --no-highlight with --syntax-highlighting=none
SYNTAX_HIGHLIGHTING_VERSION = (3, 8)

DEFAULT_EDITOR_CONFIG: Dict[str, Any] = {
    # Use pandoc (through pypandoc) when the binary is available
    "USE_PANDOC": True,
    # Highlight fenced code blocks with Pygments when it is installed
    "HIGHLIGHT_CODE": True,
    "PANDOC_FORMAT": "gfm",
    "PANDOC_EXTRA_ARGS": [],
}


def get_editor_config() -> Dict[str, Any]:
    """
    Editor configuration, with overrides from the ``GFM_EDITOR`` Django setting.

    The Django settings are only consulted when they have been configured,
    so the editor can be used outside of a Django project.
    """
    config = dict(DEFAULT_EDITOR_CONFIG)
    if settings.configured:
        config.update(getattr(settings, "GFM_EDITOR", {}) or {})
    return config


def highlighting_off_flag() -> str:
    """Pandoc option that turns off its own code highlighting, by pandoc version."""
    try:
        version = pypandoc.get_pandoc_version()
    except OSError:
        return "--no-highlight"

    numbers = tuple(int(part) for part in re.findall(r"\d+", version)[:2])
    if numbers >= SYNTAX_HIGHLIGHTING_VERSION:
        return "--syntax-highlighting=none"
    return "--no-highlight"


def get_pandoc_config() -> Dict[str, Any]:
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    GitHub extensions (alerts, footnotes, task lists) are escaped before
    pandoc sees them and are handled by the postprocessors, so pandoc only
    has to produce plain GFM output. Pandoc's own highlighting is disabled
    in favour of the Pygments highlighter.
    """
    config = get_editor_config()

    return {
        "format": config["PANDOC_FORMAT"],
        "to": "html5",
        "extra_args": [
            # Keep soft line breaks as in the source; footnote definitions
            # are matched line by line
            "--wrap=preserve",
            # Code highlighting is done by the pipeline
            highlighting_off_flag(),
            *config["PANDOC_EXTRA_ARGS"],
        ],
    }
