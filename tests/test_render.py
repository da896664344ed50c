import pytest

from quotewords.core import KeepMode, Span, Word
from quotewords.render import render, unquote, unslash
from tests.helpers import word


@pytest.mark.parametrize(
    "s,expected",
    [
        ("", ""),
        ("foo", "foo"),
        (r"a\ b", "a b"),
        (r"\\", "\\"),
        ("a\\\nb", "a\nb"),
        # Single quotes keep their content verbatim
        ("'a b'", "a b"),
        (r"'a\b'", r"a\b"),
        # Double quotes collapse escapes
        ('"a b"', "a b"),
        (r'"a\"b"', 'a"b'),
        # Empty and malformed quotes collapse to nothing
        ("''", ""),
        ('""', ""),
        ("'", ""),
        ('"', ""),
    ],
)
def test_unquote(s, expected):
    assert unquote(s) == expected


def test_unslash():
    assert unslash(r"\a\b\\c\\") == r"ab\c" + "\\"
    assert unslash("no escapes") == "no escapes"


def test_render():
    line = 'x "y z":w'
    words = (
        word((0, 1), delimiter=(1, 2)),
        word((2, 7), delimiter=(7, 8)),
        word((8, 9)),
    )

    assert render(line, words, KeepMode.NOTHING) == ["x", "y z", "w"]
    assert render(line, words, KeepMode.QUOTES) == ["x", '"y z"', "w"]
    assert render(line, words, KeepMode.DELIMITERS) == [
        "x",
        " ",
        '"y z"',
        ":",
        "w",
    ]


def test_render_multi_span_word():
    line = "a'b c'd"
    words = (Word((Span(0, 1), Span(1, 6), Span(6, 7))),)

    assert render(line, words, KeepMode.NOTHING) == ["ab cd"]
    assert render(line, words, KeepMode.QUOTES) == ["a'b c'd"]


def test_render_empty_word():
    line = "a:"
    words = (word((0, 1), delimiter=(1, 2)), word((2, 2)))

    assert render(line, words, KeepMode.NOTHING) == ["a", ""]
    assert render(line, words, KeepMode.DELIMITERS) == ["a", ":", ""]
