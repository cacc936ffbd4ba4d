from .editor import DocumentStats, EditorSession, PreviewSurface, document_stats
from .markdown.pipeline import MarkdownPipeline, RenderResult, build_pipeline
from .markdown.renderer import render_gfm

__all__ = (
    "DocumentStats",
    "EditorSession",
    "MarkdownPipeline",
    "PreviewSurface",
    "RenderResult",
    "build_pipeline",
    "document_stats",
    "render_gfm",
)
