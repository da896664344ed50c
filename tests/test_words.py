from quotewords.core import NULL_SPAN, QuotedRange, Span, Word
from quotewords.words import assemble, word_spans
from tests.helpers import spans, word


def test_assemble_without_delimiters():
    assert assemble("abc", (), ()) == (word((0, 3)),)
    assert assemble("", (), ()) == (word((0, 0)),)

    # Quoted ranges are not split out of a lone word
    assert assemble('"a b"', (), (QuotedRange(0, 5, '"'),)) == (word((0, 5)),)


def test_assemble_trailing_delimiter():
    # A delimiter at the very end yields a trailing empty word
    assert assemble("a:b:", (Span(1, 2), Span(3, 4)), ()) == (
        word((0, 1), delimiter=(1, 2)),
        word((2, 3), delimiter=(3, 4)),
        word((4, 4)),
    )

    assert assemble("a:b", (Span(1, 2),), ()) == (
        word((0, 1), delimiter=(1, 2)),
        word((2, 3)),
    )


def test_assemble_empty_words():
    assert assemble("a::b", (Span(1, 2), Span(2, 3)), ()) == (
        word((0, 1), delimiter=(1, 2)),
        Word((), Span(2, 3)),
        word((3, 4)),
    )

    assert assemble(":", (Span(0, 1),), ()) == (
        Word((), Span(0, 1)),
        word((1, 1)),
    )


def test_assemble_quoted():
    line = 'x"y z"w:v'
    quoted = (QuotedRange(1, 6, '"'),)

    assert assemble(line, (Span(7, 8),), quoted) == (
        word((0, 1), (1, 6), (6, 7), delimiter=(7, 8)),
        word((8, 9)),
    )


def test_assemble_quote_swallowed_by_delimiter():
    line = 'a "" b'
    quoted = (QuotedRange(2, 4, '"'),)

    assert assemble(line, (Span(1, 5),), quoted) == (
        word((0, 1), delimiter=(1, 5)),
        word((5, 6)),
    )


def test_word_spans():
    quoted = (QuotedRange(2, 4, '"'), QuotedRange(9, 11, "'"))

    assert word_spans(quoted, 0, 0, Span(5, 6)) == (spans((0, 2), (2, 4), (4, 5)), 1)
    assert word_spans(quoted, 1, 6, Span(11, 12)) == (spans((6, 9), (9, 11)), 2)

    # Stale ranges before the cursor are skipped
    assert word_spans(quoted, 0, 5, Span(7, 8)) == (spans((5, 7)), 1)

    # Nothing between cursor and delimiter
    assert word_spans(quoted, 0, 5, Span(5, 6)) == ((), 0)


def test_null_span():
    assert NULL_SPAN.is_null
    assert not Span(0, 0).is_null
    assert Span(1, 3).text("abcd") == "bc"
