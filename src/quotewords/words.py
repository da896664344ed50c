from typing import List, Sequence, Tuple

from .core import NULL_SPAN, QuotedRange, Span, Word


def word_spans(
    quoted: Sequence[QuotedRange], qi: int, pos: int, delimiter: Span
) -> Tuple[Tuple[Span, ...], int]:
    """
    Collect the spans between `pos` and `delimiter`.

    Whole quoted ranges become spans of their own, the text in between
    becomes literal spans.

    Returns:
        Tuple: The spans of the word and the index of the next unconsumed quoted range.
    """
    spans: List[Span] = []

    while pos < delimiter.start:
        # Skip ranges swallowed by a previous delimiter match
        while qi < len(quoted) and quoted[qi].start < pos:
            qi += 1

        if qi < len(quoted):
            quote = quoted[qi]
            if quote.start == pos:
                spans.append(quote.span)
                pos = quote.end
                qi += 1
                continue

            if quote.start < delimiter.start:
                spans.append(Span(pos, quote.start))
                pos = quote.start
                continue

        spans.append(Span(pos, delimiter.start))
        pos = delimiter.end

    return tuple(spans), qi


def assemble(
    line: str, delimiters: Sequence[Span], quoted: Sequence[QuotedRange]
) -> Tuple[Word, ...]:
    """
    Partition a line into words.

    Args:
        line (str): The text to partition.
        delimiters (Sequence[Span]): Valid delimiters in increasing order.
        quoted (Sequence[QuotedRange]): Quoted ranges in increasing order.

    Returns:
        Tuple[Word, ...]: One word per delimiter, followed by the trailing word.
            A line ending on a delimiter yields a trailing empty word.
    """
    length = len(line)

    if not delimiters:
        return (Word((Span(0, length),), NULL_SPAN),)

    words: List[Word] = []
    pos = 0
    qi = 0

    for delimiter in delimiters:
        spans, qi = word_spans(quoted, qi, pos, delimiter)
        words.append(Word(spans, delimiter))
        pos = delimiter.end

    if pos < length:
        words.append(Word((Span(pos, length),), NULL_SPAN))
    elif delimiters[-1].end == length:
        words.append(Word((Span(length, length),), NULL_SPAN))

    return tuple(words)
