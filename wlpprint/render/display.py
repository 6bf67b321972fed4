"""Turn a simple document into text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

from wlpprint.render.sdoc import SChar, SimpleToken, SText


def display(tokens: Iterable[SimpleToken]) -> Iterator[str]:
    """Yield the output pieces of a simple document, one per token.

    A line break yields `"\\n"` followed by its indentation.
    """
    for tok in tokens:
        if isinstance(tok, SChar):
            yield tok.char
        elif isinstance(tok, SText):
            yield tok.text
        else:
            yield "\n" + " " * tok.indent


def display_string(tokens: Iterable[SimpleToken]) -> str:
    return "".join(display(tokens))


def display_to(stream: TextIO, tokens: Iterable[SimpleToken]) -> None:
    """Write a simple document to a text sink without building the whole string."""
    for piece in display(tokens):
        stream.write(piece)


__all__ = ["display", "display_string", "display_to"]
