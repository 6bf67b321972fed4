"""Renderers (pretty + compact), simple documents and display."""

from wlpprint.render.compact import layout_compact, render_compact
from wlpprint.render.display import display, display_string, display_to
from wlpprint.render.fits import Pending, fits, fits_pending
from wlpprint.render.options import (
    DEFAULT_PAGE_WIDTH,
    DEFAULT_RIBBON_FRACTION,
    RenderMode,
    RenderOptions,
)
from wlpprint.render.pretty import layout_pretty, render_pretty, ribbon_width
from wlpprint.render.sdoc import SChar, SimpleDocument, SimpleToken, SLine, SText

__all__ = [
    "DEFAULT_PAGE_WIDTH",
    "DEFAULT_RIBBON_FRACTION",
    "Pending",
    "RenderMode",
    "RenderOptions",
    "SChar",
    "SLine",
    "SText",
    "SimpleDocument",
    "SimpleToken",
    "display",
    "display_string",
    "display_to",
    "fits",
    "fits_pending",
    "layout_compact",
    "layout_pretty",
    "render_compact",
    "render_pretty",
    "ribbon_width",
]
