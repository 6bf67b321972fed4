"""Document tree: the unrendered description of every possible layout."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, TypeAlias

from wlpprint.errors import (
    DOC_CHAR_IS_NEWLINE,
    DOC_CHAR_NOT_SINGLE,
    DOC_TEXT_CONTAINS_NEWLINE,
    DocumentError,
)


@dataclass(frozen=True, slots=True)
class Empty:
    """Zero-width, zero-height unit."""


@dataclass(frozen=True, slots=True)
class Char:
    """A single character other than a line feed."""

    char: str


@dataclass(frozen=True, slots=True)
class Text:
    """A literal run without line feeds.

    `length` is the display width of `text`. It is computed once by `text()`
    and trusted by the renderers afterwards.
    """

    length: int
    text: str


@dataclass(frozen=True, slots=True)
class Line:
    """A line break.

    Renders as a newline. When flattened by `group` it becomes a single space,
    or nothing if `collapses_to_nothing` is set.
    """

    collapses_to_nothing: bool = False


@dataclass(frozen=True, slots=True)
class Concat:
    left: Document
    right: Document


@dataclass(frozen=True, slots=True)
class Nest:
    """Shift the indentation of every line break inside `doc` by `indent`."""

    indent: int
    doc: Document


@dataclass(frozen=True, slots=True)
class Alternative:
    """Two renderings of the same content.

    Invariant: the first line of `wide` is never shorter than the first line
    of `narrow`. The layout engine picks `wide` whenever it fits.
    """

    wide: Document
    narrow: Document


@dataclass(frozen=True, slots=True)
class Column:
    """Build a document from the output column it starts at."""

    fn: Callable[[int], Document]


@dataclass(frozen=True, slots=True)
class Nesting:
    """Build a document from the indentation level in effect where it starts."""

    fn: Callable[[int], Document]


Document: TypeAlias = Empty | Char | Text | Line | Concat | Nest | Alternative | Column | Nesting


def display_width(s: str) -> int:
    # character count; wide glyphs are not measured
    return len(s)


EMPTY: Final[Document] = Empty()
LINE: Final[Document] = Line(collapses_to_nothing=False)
LINEBREAK: Final[Document] = Line(collapses_to_nothing=True)
SPACE: Final[Document] = Char(" ")


def empty() -> Document:
    return EMPTY


def char(c: str) -> Document:
    """Single-character document; `"\\n"` is rejected, use `line` instead."""
    if len(c) != 1:
        raise DocumentError(DOC_CHAR_NOT_SINGLE, c)
    if c == "\n":
        raise DocumentError(DOC_CHAR_IS_NEWLINE, c)
    return Char(c)


def text(s: str) -> Document:
    """Literal text document. The empty string becomes `EMPTY`."""
    if "\n" in s:
        raise DocumentError(DOC_TEXT_CONTAINS_NEWLINE, s)
    if not s:
        return EMPTY
    return Text(display_width(s), s)


def line() -> Document:
    """Line break that flattens to a space."""
    return LINE


def linebreak() -> Document:
    """Line break that flattens to nothing."""
    return LINEBREAK


def concat(*docs: Document) -> Document:
    """Left-to-right concatenation, skipping `Empty` operands."""
    result: Document | None = None
    for doc in reversed(docs):
        if isinstance(doc, Empty):
            continue
        result = doc if result is None else Concat(doc, result)
    return EMPTY if result is None else result


def nest(indent: int, doc: Document) -> Document:
    return Nest(indent, doc)


def union(wide: Document, narrow: Document) -> Document:
    """Raw alternative. Callers must uphold the first-line ordering of `Alternative`."""
    return Alternative(wide, narrow)


def column(fn: Callable[[int], Document]) -> Document:
    return Column(fn)


def nesting(fn: Callable[[int], Document]) -> Document:
    return Nesting(fn)
