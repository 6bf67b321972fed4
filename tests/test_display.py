import io

from wlpprint.render import SChar, SimpleDocument, SLine, SText, display, display_string, display_to


def _sample() -> SimpleDocument:
    return SimpleDocument.of([SChar("{"), SLine(2), SText(5, "key=1"), SLine(0), SChar("}")])


def test_display_yields_one_piece_per_token() -> None:
    assert list(display(_sample())) == ["{", "\n  ", "key=1", "\n", "}"]


def test_display_string_joins_pieces() -> None:
    assert display_string(_sample()) == "{\n  key=1\n}"
    assert display_string(SimpleDocument()) == ""


def test_display_to_writes_into_text_sink() -> None:
    buffer = io.StringIO()

    display_to(buffer, _sample())

    assert buffer.getvalue() == "{\n  key=1\n}"


def test_simple_document_line_metrics() -> None:
    sdoc = _sample()

    assert len(sdoc) == 5
    assert sdoc.is_empty() is False
    assert sdoc.line_count() == 3
    assert sdoc.line_widths() == [1, 7, 1]
    assert SimpleDocument().line_count() == 1
