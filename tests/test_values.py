from dataclasses import dataclass

from wlpprint.combinators import angles, space_beside
from wlpprint.doc import line, text
from wlpprint.values import pretty, pretty_list, register_pretty
from wlpprint.render import display_string, render_pretty


def _show(value, page_width: int = 80) -> str:
    return display_string(render_pretty(1.0, page_width, pretty(value)))


def test_scalars() -> None:
    assert _show(42) == "42"
    assert _show(-7) == "-7"
    assert _show(1.5) == "1.5"
    assert _show(True) == "True"
    assert _show(False) == "False"
    assert _show(None) == "None"


def test_strings_keep_their_line_breaks() -> None:
    assert _show("plain") == "plain"
    assert _show("two\nlines") == "two\nlines"


def test_documents_pass_through() -> None:
    doc = text("already a doc")

    assert pretty(doc) is doc
    assert pretty(line()) is line()


def test_containers() -> None:
    assert _show([1, 2, 3]) == "[1,2,3]"
    assert _show((1, "a")) == "(1,a)"
    assert _show({"k": 1, "j": [True]}) == "{k: 1,j: [True]}"
    assert _show([]) == "[]"


def test_containers_break_when_too_wide() -> None:
    assert _show([100, 200, 300], 8) == "[100\n,200\n,300]"


def test_unregistered_values_fall_back_to_repr() -> None:
    class Opaque:
        def __repr__(self) -> str:
            return "<opaque>"

    assert _show(Opaque()) == "<opaque>"


def test_register_pretty_adds_overloads() -> None:
    @dataclass(frozen=True)
    class Point:
        x: int
        y: int

    @register_pretty(Point)
    def _point(value: Point):
        return angles(space_beside(pretty(value.x), pretty(value.y)))

    assert _show(Point(1, 2)) == "<1 2>"
    assert _show([Point(0, 0)]) == "[<0 0>]"


def test_pretty_list_maps_each_value() -> None:
    docs = pretty_list([1, "x"])

    assert docs == [text("1"), text("x")]
