from collections.abc import Iterator

import pytest

from wlpprint.doc import column, concat, line, text, union
from wlpprint.render import Pending, SChar, SimpleDocument, SimpleToken, SLine, SText, fits, fits_pending


def _sdoc(*tokens: SimpleToken) -> SimpleDocument:
    return SimpleDocument.of(tokens)


def test_fits_counts_chars_and_text_runs() -> None:
    doc = _sdoc(SChar("("), SText(3, "abc"), SChar(")"))

    assert fits(5, doc) is True
    assert fits(4, doc) is False


def test_fits_only_inspects_first_line() -> None:
    doc = _sdoc(SText(2, "ab"), SLine(0), SText(50, "x" * 50))

    assert fits(2, doc) is True
    assert fits(1, doc) is False


def test_terminal_cases_require_non_negative_width() -> None:
    assert fits(0, SimpleDocument()) is True
    assert fits(-1, SimpleDocument()) is False
    assert fits(0, _sdoc(SLine(4))) is True
    assert fits(-1, _sdoc(SLine(4))) is False


@pytest.mark.parametrize(
    "tokens",
    [
        (SText(3, "abc"),),
        (SChar("a"), SLine(2), SText(8, "abcdefgh")),
        (SText(6, "abcdef"), SChar("g")),
        (),
    ],
)
def test_fits_is_monotone_in_width(tokens: tuple[SimpleToken, ...]) -> None:
    doc = SimpleDocument(tokens)
    results = [fits(width, doc) for width in range(-3, 12)]

    first_fit = results.index(True)
    assert all(results[first_fit:])


def test_fits_does_not_force_tokens_past_the_first_line() -> None:
    def stream() -> Iterator[SimpleToken]:
        yield SText(2, "ab")
        yield SLine(0)
        raise AssertionError("forced past the first line")

    assert fits(10, stream()) is True


def test_fits_pending_reads_documents_lazily() -> None:
    def boom(_: int):
        raise AssertionError("column callback forced")

    pending = Pending(0, concat(text("x" * 20), column(boom)))

    assert fits_pending(10, 0, pending) is False


def test_fits_pending_stops_at_line_break() -> None:
    pending = Pending(0, concat(text("abc"), line(), text("x" * 40)))

    assert fits_pending(3, 0, pending) is True
    assert fits_pending(2, 0, pending) is False


def test_fits_pending_falls_back_to_narrow_branch_of_nested_alternative() -> None:
    nested = union(text("wide-branch"), text("n"))
    pending = Pending(0, concat(text("ab"), nested), Pending(0, text("z")))

    assert fits_pending(14, 0, pending) is True
    assert fits_pending(4, 0, pending) is True
    assert fits_pending(3, 0, pending) is False


def test_fits_pending_supplies_running_column_to_callbacks() -> None:
    seen: list[int] = []

    def at(k: int):
        seen.append(k)
        return text("!")

    assert fits_pending(10, 5, Pending(0, concat(text("abc"), column(at)))) is True
    assert seen == [8]
