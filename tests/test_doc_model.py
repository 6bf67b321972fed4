import pytest

from wlpprint.combinators import hcat, vsep
from wlpprint.doc import (
    EMPTY,
    LINE,
    LINEBREAK,
    Char,
    Concat,
    Empty,
    Line,
    Text,
    char,
    concat,
    display_width,
    empty,
    line,
    linebreak,
    nest,
    text,
)
from wlpprint.errors import (
    DOC_CHAR_IS_NEWLINE,
    DOC_CHAR_NOT_SINGLE,
    DOC_TEXT_CONTAINS_NEWLINE,
    DocumentError,
)


def test_text_precomputes_display_width() -> None:
    doc = text("hello")

    assert doc == Text(5, "hello")
    assert display_width("hello") == 5


def test_text_of_empty_string_is_empty_document() -> None:
    assert text("") is EMPTY
    assert empty() == Empty()


def test_text_rejects_embedded_newline() -> None:
    with pytest.raises(DocumentError) as excinfo:
        text("a\nb")

    assert excinfo.value.code == DOC_TEXT_CONTAINS_NEWLINE.code
    assert excinfo.value.value == "a\nb"
    assert isinstance(excinfo.value, ValueError)


def test_char_rejects_newline_and_multi_character_strings() -> None:
    with pytest.raises(DocumentError) as newline_error:
        char("\n")
    with pytest.raises(DocumentError) as long_error:
        char("ab")
    with pytest.raises(DocumentError):
        char("")

    assert newline_error.value.spec is DOC_CHAR_IS_NEWLINE
    assert long_error.value.spec is DOC_CHAR_NOT_SINGLE
    assert char("x") == Char("x")


def test_line_flavours_differ_only_in_flattening_flag() -> None:
    assert line() is LINE
    assert linebreak() is LINEBREAK
    assert LINE == Line(collapses_to_nothing=False)
    assert LINEBREAK == Line(collapses_to_nothing=True)


def test_concat_skips_empty_operands_and_nests_to_the_right() -> None:
    a, b, c = text("a"), text("b"), text("c")

    assert concat() is EMPTY
    assert concat(EMPTY, EMPTY) is EMPTY
    assert concat(EMPTY, a) is a
    assert concat(a, EMPTY, b, c) == Concat(a, Concat(b, c))


def test_documents_are_shared_values() -> None:
    shared = text("x")
    doc = concat(shared, nest(2, concat(line(), shared)))

    assert doc.left is shared
    assert doc.right.doc.right is shared


def test_long_folds_build_without_recursion() -> None:
    wide = hcat([char("x")] * 100_000)
    tall = vsep([text("row")] * 50_000)

    assert isinstance(wide, Concat)
    assert isinstance(tall, Concat)
