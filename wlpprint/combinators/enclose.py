"""Brackets, punctuation and separated enclosures."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from wlpprint.combinators.basic import cat
from wlpprint.combinators.layout import align
from wlpprint.doc.model import Char, Document, concat

LPAREN: Final[Document] = Char("(")
RPAREN: Final[Document] = Char(")")
LANGLE: Final[Document] = Char("<")
RANGLE: Final[Document] = Char(">")
LBRACE: Final[Document] = Char("{")
RBRACE: Final[Document] = Char("}")
LBRACKET: Final[Document] = Char("[")
RBRACKET: Final[Document] = Char("]")
SQUOTE: Final[Document] = Char("'")
DQUOTE: Final[Document] = Char('"')
SEMI: Final[Document] = Char(";")
COLON: Final[Document] = Char(":")
COMMA: Final[Document] = Char(",")
DOT: Final[Document] = Char(".")
BACKSLASH: Final[Document] = Char("\\")
EQUALS: Final[Document] = Char("=")


def enclose(left: Document, right: Document, doc: Document) -> Document:
    return concat(left, doc, right)


def parens(doc: Document) -> Document:
    return enclose(LPAREN, RPAREN, doc)


def angles(doc: Document) -> Document:
    return enclose(LANGLE, RANGLE, doc)


def braces(doc: Document) -> Document:
    return enclose(LBRACE, RBRACE, doc)


def brackets(doc: Document) -> Document:
    return enclose(LBRACKET, RBRACKET, doc)


def squotes(doc: Document) -> Document:
    return enclose(SQUOTE, SQUOTE, doc)


def dquotes(doc: Document) -> Document:
    return enclose(DQUOTE, DQUOTE, doc)


def enclose_sep(left: Document, right: Document, separator: Document, docs: Sequence[Document]) -> Document:
    """Enclose `docs` in `left`/`right`, separated by `separator`.

    Laid out horizontally when it fits, otherwise one element per line with
    the separators leading, aligned under `left`:

        [1, 2, 3]        [1
                         ,2
                         ,3]
    """
    if not docs:
        return concat(left, right)
    if len(docs) == 1:
        return concat(left, docs[0], right)
    leads = [left] + [separator] * (len(docs) - 1)
    return align(concat(cat([concat(lead, doc) for lead, doc in zip(leads, docs)]), right))


def list_doc(docs: Sequence[Document]) -> Document:
    return enclose_sep(LBRACKET, RBRACKET, COMMA, docs)


def tupled(docs: Sequence[Document]) -> Document:
    return enclose_sep(LPAREN, RPAREN, COMMA, docs)


def semi_braces(docs: Sequence[Document]) -> Document:
    return enclose_sep(LBRACE, RBRACE, SEMI, docs)


__all__ = [
    "BACKSLASH",
    "COLON",
    "COMMA",
    "DOT",
    "DQUOTE",
    "EQUALS",
    "LANGLE",
    "LBRACE",
    "LBRACKET",
    "LPAREN",
    "RANGLE",
    "RBRACE",
    "RBRACKET",
    "RPAREN",
    "SEMI",
    "SQUOTE",
    "angles",
    "braces",
    "brackets",
    "dquotes",
    "enclose",
    "enclose_sep",
    "list_doc",
    "parens",
    "semi_braces",
    "squotes",
    "tupled",
]
