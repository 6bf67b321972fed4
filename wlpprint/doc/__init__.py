"""Document algebra (tree constructors + group flattening)."""

from wlpprint.doc.flatten import flatten, group
from wlpprint.doc.model import (
    EMPTY,
    LINE,
    LINEBREAK,
    SPACE,
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
    char,
    column,
    concat,
    display_width,
    empty,
    line,
    linebreak,
    nest,
    nesting,
    text,
    union,
)

__all__ = [
    "EMPTY",
    "LINE",
    "LINEBREAK",
    "SPACE",
    "Alternative",
    "Char",
    "Column",
    "Concat",
    "Document",
    "Empty",
    "Line",
    "Nest",
    "Nesting",
    "Text",
    "char",
    "column",
    "concat",
    "display_width",
    "empty",
    "flatten",
    "group",
    "line",
    "linebreak",
    "nest",
    "nesting",
    "text",
    "union",
]
