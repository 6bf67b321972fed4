"""Width-oblivious renderer: no indentation, no layout decisions."""

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
from wlpprint.render.sdoc import SChar, SimpleDocument, SimpleToken, SLine, SText


def layout_compact(doc: Document) -> Iterator[SimpleToken]:
    # Alternatives always take the narrow branch, i.e. the line breaks as
    # written. Column and Nesting callbacks always see 0.
    stack: list[Document] = [doc]
    while stack:
        d = stack.pop()

        if isinstance(d, Empty):
            continue
        if isinstance(d, Char):
            yield SChar(d.char)
        elif isinstance(d, Text):
            yield SText(d.length, d.text)
        elif isinstance(d, Line):
            yield SLine(0)
        elif isinstance(d, Concat):
            stack.append(d.right)
            stack.append(d.left)
        elif isinstance(d, Nest):
            stack.append(d.doc)
        elif isinstance(d, Alternative):
            stack.append(d.narrow)
        elif isinstance(d, (Column, Nesting)):
            stack.append(d.fn(0))
        else:
            raise TypeError(f"Unknown document node: {d!r}")


def render_compact(doc: Document) -> SimpleDocument:
    """Render `doc` without pretty printing; every line starts at column 0."""
    return SimpleDocument.of(layout_compact(doc))


__all__ = ["layout_compact", "render_compact"]
