from typing import Optional, Sequence

from quotewords.core import NULL_SPAN, Span, Word


def spans(*pairs) -> tuple:
    return tuple(Span(*p) for p in pairs)


def word(*pairs, delimiter: Optional[Sequence[int]] = None) -> Word:
    """
    Shorthand for a Word in expected values.
    """
    return Word(spans(*pairs), NULL_SPAN if delimiter is None else Span(*delimiter))


def strip_quotes(piece: str) -> str:
    """Content of a piece generated by `tests.hypotheses.piece`."""
    if piece[:1] in ("'", '"'):
        return piece[1:-1]
    return piece
