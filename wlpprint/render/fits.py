"""Single-line lookahead used to choose between layout alternatives."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

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
from wlpprint.render.sdoc import SChar, SimpleToken, SLine, SText


@dataclass(frozen=True, slots=True)
class Pending:
    """Cons cell of the layout work list: `doc` at `indent`, then `rest`."""

    indent: int
    doc: Document
    rest: Pending | None = None


def fits(remaining_width: int, tokens: Iterable[SimpleToken]) -> bool:
    """Check whether the first line of `tokens` stays within `remaining_width`.

    Only the first line is consumed, so lazy token streams are forced no
    further than the first `SLine`.
    """
    remaining = remaining_width
    if remaining < 0:
        return False
    for tok in tokens:
        if isinstance(tok, SLine):
            return True
        remaining -= 1 if isinstance(tok, SChar) else tok.length
        if remaining < 0:
            return False
    return True


def fits_pending(remaining_width: int, column: int, pending: Pending | None) -> bool:
    """`fits` over the work list the layout engine would render next.

    Tokens are produced one at a time from `pending` without building a simple
    document. An alternative met on the way is resolved the way the engine
    resolves it: the wide branch first, with the narrow branch kept as a
    fallback for when the wide one overflows. Both share this line's limit,
    so the fallback search yields the engine's own first line.
    """
    remaining = remaining_width
    fallbacks: list[tuple[int, int, Pending | None]] = []

    while True:
        if remaining < 0:
            if not fallbacks:
                return False
            remaining, column, pending = fallbacks.pop()
            continue

        if pending is None:
            return True

        indent, d, rest = pending.indent, pending.doc, pending.rest

        if isinstance(d, Empty):
            pending = rest
        elif isinstance(d, Char):
            remaining -= 1
            column += 1
            pending = rest
        elif isinstance(d, Text):
            remaining -= d.length
            column += d.length
            pending = rest
        elif isinstance(d, Line):
            return True
        elif isinstance(d, Concat):
            pending = Pending(indent, d.left, Pending(indent, d.right, rest))
        elif isinstance(d, Nest):
            pending = Pending(indent + d.indent, d.doc, rest)
        elif isinstance(d, Alternative):
            fallbacks.append((remaining, column, Pending(indent, d.narrow, rest)))
            pending = Pending(indent, d.wide, rest)
        elif isinstance(d, Column):
            pending = Pending(indent, d.fn(column), rest)
        elif isinstance(d, Nesting):
            pending = Pending(indent, d.fn(indent), rest)
        else:
            raise TypeError(f"Unknown document node: {d!r}")


__all__ = ["Pending", "fits", "fits_pending"]
