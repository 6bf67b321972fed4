"""Wadler/Leijen pretty printer: document combinators and width-aware renderers."""

from wlpprint.doc import (
    Document,
    char,
    column,
    concat,
    empty,
    flatten,
    group,
    line,
    linebreak,
    nest,
    nesting,
    text,
)
from wlpprint.errors import DocumentError
from wlpprint.pipeline import RenderRunResult, put_doc, run_render, show
from wlpprint.render import (
    RenderMode,
    RenderOptions,
    SimpleDocument,
    display,
    display_string,
    render_compact,
    render_pretty,
)
from wlpprint.values import pretty, register_pretty

__all__ = [
    "Document",
    "DocumentError",
    "RenderMode",
    "RenderOptions",
    "RenderRunResult",
    "SimpleDocument",
    "char",
    "column",
    "concat",
    "display",
    "display_string",
    "empty",
    "flatten",
    "group",
    "line",
    "linebreak",
    "nest",
    "nesting",
    "pretty",
    "put_doc",
    "register_pretty",
    "render_compact",
    "render_pretty",
    "run_render",
    "show",
    "text",
]
