"""Column-relative layout combinators built on `Column` and `Nesting`."""

from __future__ import annotations

from collections.abc import Callable

from wlpprint.combinators.basic import spaces
from wlpprint.doc.model import EMPTY, LINEBREAK, Document, column, concat, nest, nesting


def align(doc: Document) -> Document:
    """Indent line breaks in `doc` to the column where `doc` starts."""
    return column(lambda k: nesting(lambda i: nest(k - i, doc)))


def hang(indent: int, doc: Document) -> Document:
    """Hanging indentation: continuation lines sit `indent` past the start column."""
    return align(nest(indent, doc))


def indent(amount: int, doc: Document) -> Document:
    """Indent every line of `doc`, the first one included, by `amount` spaces."""
    return hang(amount, concat(spaces(amount), doc))


def width(doc: Document, fn: Callable[[int], Document]) -> Document:
    """Follow `doc` with `fn(w)`, where `w` is the number of columns `doc` used."""
    return column(lambda start: concat(doc, column(lambda end: fn(end - start))))


def fill(target: int, doc: Document) -> Document:
    """Pad `doc` with spaces up to `target` columns."""
    return width(doc, lambda w: EMPTY if w >= target else spaces(target - w))


def fill_break(target: int, doc: Document) -> Document:
    """Like `fill`, but break the line (nested by `target`) when `doc` is wider."""

    def after(w: int) -> Document:
        if w > target:
            return nest(target, LINEBREAK)
        return spaces(target - w)

    return width(doc, after)


__all__ = ["align", "fill", "fill_break", "hang", "indent", "width"]
