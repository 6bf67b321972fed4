"""Render pipeline entrypoints and result carriers."""

from wlpprint.pipeline.entrypoints import put_doc, render, run_render, show
from wlpprint.pipeline.results import RenderRunResult

__all__ = [
    "RenderRunResult",
    "put_doc",
    "render",
    "run_render",
    "show",
]
