"""Overloadable conversion of Python values into documents."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import singledispatch

from wlpprint.combinators import (
    COLON,
    COMMA,
    LBRACE,
    RBRACE,
    bool_doc,
    enclose_sep,
    float_doc,
    int_doc,
    list_doc,
    space_beside,
    string,
    tupled,
)
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
    concat,
    text,
)


@singledispatch
def pretty(value: object) -> Document:
    """Document for `value`; unregistered types fall back to `repr`."""
    return text(repr(value))


def register_pretty(cls: type) -> Callable[[Callable[..., Document]], Callable[..., Document]]:
    """Decorator registering `fn` as the `pretty` overload for `cls`."""

    def decorator(fn: Callable[..., Document]) -> Callable[..., Document]:
        pretty.register(cls, fn)
        return fn

    return decorator


def pretty_list(values: Iterable[object]) -> list[Document]:
    return [pretty(value) for value in values]


@pretty.register(Empty)
@pretty.register(Char)
@pretty.register(Text)
@pretty.register(Line)
@pretty.register(Concat)
@pretty.register(Nest)
@pretty.register(Alternative)
@pretty.register(Column)
@pretty.register(Nesting)
def _pretty_document(value: Document) -> Document:
    return value


@pretty.register(str)
def _pretty_str(value: str) -> Document:
    return string(value)


# bool subclasses int
@pretty.register(bool)
def _pretty_bool(value: bool) -> Document:
    return bool_doc(value)


@pretty.register(int)
def _pretty_int(value: int) -> Document:
    return int_doc(value)


@pretty.register(float)
def _pretty_float(value: float) -> Document:
    return float_doc(value)


@pretty.register(type(None))
def _pretty_none(value: None) -> Document:
    return text("None")


@pretty.register(list)
def _pretty_sequence(value: list[object]) -> Document:
    return list_doc(pretty_list(value))


@pretty.register(tuple)
def _pretty_tuple(value: tuple[object, ...]) -> Document:
    return tupled(pretty_list(value))


@pretty.register(dict)
def _pretty_dict(value: dict[object, object]) -> Document:
    entries = [space_beside(concat(pretty(key), COLON), pretty(item)) for key, item in value.items()]
    return enclose_sep(LBRACE, RBRACE, COMMA, entries)


__all__ = ["pretty", "pretty_list", "register_pretty"]
