"""Derived combinators composed purely from the document algebra."""

from wlpprint.combinators.basic import (
    SOFTBREAK,
    SOFTLINE,
    beside,
    bool_doc,
    break_beside,
    cat,
    fill_cat,
    fill_sep,
    float_doc,
    fold,
    hcat,
    hsep,
    int_doc,
    line_beside,
    punctuate,
    sep,
    soft_beside,
    soft_break_beside,
    softbreak,
    softline,
    space,
    space_beside,
    spaces,
    string,
    vcat,
    vsep,
)
from wlpprint.combinators.enclose import (
    BACKSLASH,
    COLON,
    COMMA,
    DOT,
    DQUOTE,
    EQUALS,
    LANGLE,
    LBRACE,
    LBRACKET,
    LPAREN,
    RANGLE,
    RBRACE,
    RBRACKET,
    RPAREN,
    SEMI,
    SQUOTE,
    angles,
    braces,
    brackets,
    dquotes,
    enclose,
    enclose_sep,
    list_doc,
    parens,
    semi_braces,
    squotes,
    tupled,
)
from wlpprint.combinators.layout import align, fill, fill_break, hang, indent, width

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
    "SOFTBREAK",
    "SOFTLINE",
    "SQUOTE",
    "align",
    "angles",
    "beside",
    "bool_doc",
    "braces",
    "brackets",
    "break_beside",
    "cat",
    "dquotes",
    "enclose",
    "enclose_sep",
    "fill",
    "fill_break",
    "fill_cat",
    "fill_sep",
    "float_doc",
    "fold",
    "hang",
    "hcat",
    "hsep",
    "indent",
    "int_doc",
    "line_beside",
    "list_doc",
    "parens",
    "punctuate",
    "semi_braces",
    "sep",
    "soft_beside",
    "soft_break_beside",
    "softbreak",
    "softline",
    "space",
    "space_beside",
    "spaces",
    "squotes",
    "string",
    "tupled",
    "vcat",
    "vsep",
    "width",
]
