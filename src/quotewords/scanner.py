import enum
from typing import FrozenSet, List, Optional, Set, Tuple

from .core import QuotedRange, UnterminatedQuoteError

BACKSLASH = "\\"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'


class State(enum.Enum):
    UNQUOTED = 0
    IN_SINGLE_QUOTE = 1
    IN_DOUBLE_QUOTE = 2


class Transition(enum.Enum):
    NONE = 0
    OPEN = 1
    CLOSE = 2


def step(state: State, escape_active: bool, char: str) -> Tuple[State, bool, Transition]:
    """
    Advance the scanner by one character.

    Returns the next state, the next value of the escape flag and whether
    a quoted range was opened or closed by this character.
    """
    if char == BACKSLASH:
        return state, not escape_active, Transition.NONE

    if char == DOUBLE_QUOTE and not escape_active:
        if state == State.UNQUOTED:
            return State.IN_DOUBLE_QUOTE, False, Transition.OPEN
        if state == State.IN_DOUBLE_QUOTE:
            return State.UNQUOTED, False, Transition.CLOSE

    if char == SINGLE_QUOTE:
        if state == State.UNQUOTED and not escape_active:
            return State.IN_SINGLE_QUOTE, False, Transition.OPEN
        # Backslashes carry no meaning inside single quotes
        if state == State.IN_SINGLE_QUOTE:
            return State.UNQUOTED, False, Transition.CLOSE

    return state, False, Transition.NONE


_QUOTE_KINDS = {
    State.IN_SINGLE_QUOTE: "single",
    State.IN_DOUBLE_QUOTE: "double",
}


def scan(line: str) -> Tuple[Tuple[QuotedRange, ...], FrozenSet[int]]:
    """
    Find the quoted ranges and the escaped positions of a line.

    Args:
        line (str): The text to scan.

    Returns:
        Tuple: The quoted ranges in increasing order and the set of offsets
            whose character follows an unconsumed backslash outside single quotes.

    Raises:
        UnterminatedQuoteError: If a quote is still open at the end of the line.
    """
    quoted: List[QuotedRange] = []
    escaped: Set[int] = set()

    state = State.UNQUOTED
    escape_active = False
    quote_start: Optional[int] = None

    for i, char in enumerate(line):
        if escape_active and state != State.IN_SINGLE_QUOTE:
            escaped.add(i)

        state, escape_active, transition = step(state, escape_active, char)

        if transition == Transition.OPEN:
            quote_start = i
        elif transition == Transition.CLOSE:
            assert quote_start is not None
            quoted.append(QuotedRange(quote_start, i + 1, char))
            quote_start = None

    if state != State.UNQUOTED:
        assert quote_start is not None
        raise UnterminatedQuoteError(_QUOTE_KINDS[state], quote_start)

    return tuple(quoted), frozenset(escaped)
