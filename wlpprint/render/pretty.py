"""Width-aware layout engine (Wadler/Leijen "nicest" with ribbon control)."""

from __future__ import annotations

from collections.abc import Iterator

from wlpprint.doc.model import (
    Alternative,
    Char,
    Column,
    Concat,
    Document,
    Empty,
    Line,
    Nest,
    Nesting,
    Text,
)
from wlpprint.render.fits import Pending, fits_pending
from wlpprint.render.sdoc import SChar, SimpleDocument, SimpleToken, SLine, SText


def ribbon_width(ribbon_fraction: float, page_width: int) -> int:
    """Maximum non-indentation width of a line, clamped to `[0, page_width]`."""
    fraction = min(max(ribbon_fraction, 0.0), 1.0)
    return max(0, min(page_width, round(page_width * fraction)))


def layout_pretty(ribbon_fraction: float, page_width: int, doc: Document) -> Iterator[SimpleToken]:
    """Lazily lay out `doc`, yielding simple tokens in output order.

    The work list is a persistent chain of `Pending` cells; both branches of an
    alternative share its tail, so only the lookahead in `fits_pending` is
    spent on the branch that loses.
    """
    ribbon = ribbon_width(ribbon_fraction, page_width)
    line_indent = 0
    column = 0
    pending: Pending | None = Pending(0, doc)

    while pending is not None:
        indent, d, rest = pending.indent, pending.doc, pending.rest

        if isinstance(d, Empty):
            pending = rest
        elif isinstance(d, Char):
            yield SChar(d.char)
            column += 1
            pending = rest
        elif isinstance(d, Text):
            yield SText(d.length, d.text)
            column += d.length
            pending = rest
        elif isinstance(d, Line):
            yield SLine(indent)
            line_indent = column = indent
            pending = rest
        elif isinstance(d, Concat):
            pending = Pending(indent, d.left, Pending(indent, d.right, rest))
        elif isinstance(d, Nest):
            pending = Pending(indent + d.indent, d.doc, rest)
        elif isinstance(d, Alternative):
            wide = Pending(indent, d.wide, rest)
            available = min(page_width - column, ribbon - column + line_indent)
            pending = wide if fits_pending(available, column, wide) else Pending(indent, d.narrow, rest)
        elif isinstance(d, Column):
            pending = Pending(indent, d.fn(column), rest)
        elif isinstance(d, Nesting):
            pending = Pending(indent, d.fn(indent), rest)
        else:
            raise TypeError(f"Unknown document node: {d!r}")


def render_pretty(ribbon_fraction: float, page_width: int, doc: Document) -> SimpleDocument:
    """Render `doc` for a page of `page_width` columns.

    `ribbon_fraction` bounds the content of each line, excluding indentation,
    to that fraction of the page width.
    """
    return SimpleDocument.of(layout_pretty(ribbon_fraction, page_width, doc))


__all__ = ["layout_pretty", "render_pretty", "ribbon_width"]
