from typing import AbstractSet, Iterable, List, Optional, Pattern, Sequence, Tuple

from .core import QuotedRange, Span


def _quote_containing(
    quoted: Sequence[QuotedRange], qi: int, offset: int
) -> Tuple[Optional[QuotedRange], int]:
    """Find the quoted range containing `offset`, starting the search at `qi`."""
    # Ranges ending at or before offset cannot contain any later offset either
    while qi < len(quoted) and quoted[qi].end <= offset:
        qi += 1

    if qi < len(quoted) and quoted[qi].covers(offset):
        return quoted[qi], qi

    return None, qi


def check_delimiter(
    line: str,
    escaped: AbstractSet[int],
    pattern: Pattern[str],
    match: Span,
) -> Optional[Span]:
    """
    Apply the escape rule to a match that does not start inside a quote.

    An escaped first character is consumed as a literal. The remainder of the
    match only counts as a delimiter if the pattern matches it in full.
    """
    if match.start not in escaped:
        return match

    shifted = Span(match.start + 1, match.end)
    if shifted.start < shifted.end and pattern.fullmatch(shifted.text(line)):
        return shifted

    return None


def classify(
    line: str,
    quoted: Sequence[QuotedRange],
    escaped: AbstractSet[int],
    matches: Iterable[Span],
    pattern: Pattern[str],
) -> Tuple[Span, ...]:
    """
    Filter raw pattern matches down to the delimiters that split the line.

    Args:
        line (str): The text the matches were found in.
        quoted (Sequence[QuotedRange]): Quoted ranges in increasing order.
        escaped (AbstractSet[int]): Escaped positions.
        matches (Iterable[Span]): Non-overlapping matches in increasing order.
        pattern (re.Pattern): The pattern that produced the matches.

    Returns:
        Tuple[Span, ...]: The valid delimiters, in order.
    """
    delimiters: List[Span] = []
    qi = 0

    for match in matches:
        containing, qi = _quote_containing(quoted, qi, match.start)
        if containing is not None:
            continue

        delimiter = check_delimiter(line, escaped, pattern, match)
        if delimiter is not None:
            delimiters.append(delimiter)

    return tuple(delimiters)


def find_delimiters(
    line: str,
    quoted: Sequence[QuotedRange],
    escaped: AbstractSet[int],
    pattern: Pattern[str],
) -> Tuple[Span, ...]:
    """Match `pattern` against `line` and classify the matches."""
    matches = (Span(*m.span()) for m in pattern.finditer(line))
    return classify(line, quoted, escaped, matches, pattern)
