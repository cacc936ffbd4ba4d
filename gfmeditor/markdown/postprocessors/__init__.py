# gfmeditor/markdown/postprocessors/__init__.py

from .alert import alert_block_converter
from .color_swatch import color_swatch_injector
from .footnote import footnote_resolver
from .task_list import task_list_converter_default

POSTPROCESSORS = [
    color_swatch_injector,  # Swatch in front of inline color codes
    task_list_converter_default,  # [ ] / [x] list items → checkboxes
    alert_block_converter,  # > [!NOTE] blockquotes → alert blocks
    footnote_resolver,  # Must run last, appends the footnotes section
    # Order matters - they run sequentially
]


def apply_postprocessors(soup, context, postprocessors=None):
    """Apply all postprocessors in order"""
    if postprocessors is None:
        postprocessors = POSTPROCESSORS
    for processor in postprocessors:
        soup = processor(soup, context)
    return soup
