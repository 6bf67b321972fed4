"""Single-line form of a document, used as the wide branch of `group`."""

from __future__ import annotations

from wlpprint.doc.model import (
    EMPTY,
    Alternative,
    Column,
    Concat,
    Document,
    Line,
    Nest,
    Nesting,
    Text,
)

_FLAT_SPACE = Text(1, " ")

# Post-order frames: (_VISIT, doc) or (_BUILD, doc). A build frame pops its
# flattened children off the result stack.
_VISIT = 0
_BUILD = 1


def flatten(doc: Document) -> Document:
    """Collapse every line break under `doc` into a space or nothing.

    Nested alternatives keep only their wide branch. `Column` and `Nesting`
    stay deferred and flatten whatever their callback produces.
    """
    frames: list[tuple[int, Document]] = [(_VISIT, doc)]
    results: list[Document] = []

    while frames:
        step, d = frames.pop()

        if step == _BUILD:
            if isinstance(d, Concat):
                right = results.pop()
                left = results.pop()
                results.append(Concat(left, right))
            elif isinstance(d, Nest):
                results.append(Nest(d.indent, results.pop()))
            continue

        if isinstance(d, Concat):
            frames.append((_BUILD, d))
            frames.append((_VISIT, d.right))
            frames.append((_VISIT, d.left))
            continue

        if isinstance(d, Nest):
            frames.append((_BUILD, d))
            frames.append((_VISIT, d.doc))
            continue

        if isinstance(d, Line):
            results.append(EMPTY if d.collapses_to_nothing else _FLAT_SPACE)
            continue

        if isinstance(d, Alternative):
            # the narrow branch is dropped; the wide one is flattened in place
            frames.append((_VISIT, d.wide))
            continue

        if isinstance(d, Column):
            results.append(Column(_flattened(d.fn)))
            continue

        if isinstance(d, Nesting):
            results.append(Nesting(_flattened(d.fn)))
            continue

        # Empty, Char, Text
        results.append(d)

    return results.pop()


def _flattened(fn):
    def build(value: int) -> Document:
        return flatten(fn(value))

    return build


def group(doc: Document) -> Document:
    """Offer the flattened layout of `doc`, falling back to `doc` itself."""
    return Alternative(flatten(doc), doc)


__all__ = ["flatten", "group"]
