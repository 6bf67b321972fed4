"""Line helpers, binary combinators and folds over document sequences."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final

from wlpprint.doc.flatten import group
from wlpprint.doc.model import (
    EMPTY,
    LINE,
    LINEBREAK,
    SPACE,
    Document,
    concat,
    text,
)

SOFTLINE: Final[Document] = group(LINE)
SOFTBREAK: Final[Document] = group(LINEBREAK)


def softline() -> Document:
    """A space if the rest fits on the line, a newline otherwise."""
    return SOFTLINE


def softbreak() -> Document:
    """Nothing if the rest fits on the line, a newline otherwise."""
    return SOFTBREAK


def space() -> Document:
    return SPACE


def spaces(n: int) -> Document:
    if n <= 0:
        return EMPTY
    return text(" " * n)


def string(s: str) -> Document:
    """Text document where every `"\\n"` becomes a `line`."""
    pieces = [text(part) for part in s.split("\n")]
    docs: list[Document] = [pieces[0]]
    for piece in pieces[1:]:
        docs.append(LINE)
        docs.append(piece)
    return concat(*docs)


def bool_doc(value: bool) -> Document:
    return text("True" if value else "False")


def int_doc(value: int) -> Document:
    return text(str(value))


def float_doc(value: float) -> Document:
    return text(repr(value))


def beside(x: Document, y: Document) -> Document:
    return concat(x, y)


def space_beside(x: Document, y: Document) -> Document:
    return concat(x, SPACE, y)


def soft_beside(x: Document, y: Document) -> Document:
    return concat(x, SOFTLINE, y)


def soft_break_beside(x: Document, y: Document) -> Document:
    return concat(x, SOFTBREAK, y)


def line_beside(x: Document, y: Document) -> Document:
    return concat(x, LINE, y)


def break_beside(x: Document, y: Document) -> Document:
    return concat(x, LINEBREAK, y)


def fold(op: Callable[[Document, Document], Document], docs: Sequence[Document]) -> Document:
    """Right fold of `op` over `docs`; `EMPTY` for no documents."""
    if not docs:
        return EMPTY
    acc = docs[-1]
    for doc in reversed(docs[:-1]):
        acc = op(doc, acc)
    return acc


def hsep(docs: Sequence[Document]) -> Document:
    return fold(space_beside, docs)


def vsep(docs: Sequence[Document]) -> Document:
    return fold(line_beside, docs)


def fill_sep(docs: Sequence[Document]) -> Document:
    return fold(soft_beside, docs)


def sep(docs: Sequence[Document]) -> Document:
    """All documents on one line separated by spaces, or one per line."""
    return group(vsep(docs))


def hcat(docs: Sequence[Document]) -> Document:
    return fold(beside, docs)


def vcat(docs: Sequence[Document]) -> Document:
    return fold(break_beside, docs)


def fill_cat(docs: Sequence[Document]) -> Document:
    return fold(soft_break_beside, docs)


def cat(docs: Sequence[Document]) -> Document:
    return group(vcat(docs))


def punctuate(p: Document, docs: Sequence[Document]) -> list[Document]:
    """Append `p` to every document except the last."""
    if not docs:
        return []
    return [concat(doc, p) for doc in docs[:-1]] + [docs[-1]]


__all__ = [
    "SOFTBREAK",
    "SOFTLINE",
    "beside",
    "bool_doc",
    "break_beside",
    "cat",
    "fill_cat",
    "fill_sep",
    "float_doc",
    "fold",
    "hcat",
    "hsep",
    "int_doc",
    "line_beside",
    "punctuate",
    "sep",
    "soft_beside",
    "soft_break_beside",
    "softbreak",
    "softline",
    "space",
    "space_beside",
    "spaces",
    "string",
    "vcat",
    "vsep",
]
