import enum
from textwrap import dedent
from typing import Any, Callable, Mapping, NamedTuple, Tuple, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


def fill_in_doc(fields: Mapping[str, str]) -> Callable[[F], F]:
    fields = {k: dedent(v) for k, v in fields.items()}

    def decorator(decorated: F) -> F:
        if decorated.__doc__:
            decorated.__doc__ = dedent(decorated.__doc__).format_map(fields)

        return decorated

    return decorator


_doc_fields = {
    "delimiter_arg": """delimiter (str or re.Pattern): Regular expression matching the separator between words.""",
    "compiled_delimiter_arg": """delimiter (re.Pattern): Compiled regular expression matching the separator between words.""",
    "keep_arg": """keep (KeepMode): NOTHING strips quotes and backslashes, QUOTES keeps them, DELIMITERS additionally emits each delimiter as a token.""",
    "lines_arg": """*lines (str): The lines to split, each parsed on its own.""",
}


class KeepMode(enum.IntEnum):
    """Controls what the rendered tokens retain of the input."""

    NOTHING = 0
    QUOTES = 1
    DELIMITERS = 2


class ParseError(ValueError):
    """Base class for errors raised while splitting a line."""

    pass


class UnterminatedQuoteError(ParseError):
    """Exception raised when a quote is still open at the end of the line."""

    def __init__(self, kind: str, at: int) -> None:
        super().__init__(f"{kind} quote unclosed at {at}")
        self.kind = kind
        self.at = at


class InvalidDelimiterPatternError(ParseError):
    """Exception raised when the delimiter pattern does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid delimiter pattern {pattern!r}: {reason}")
        self.pattern = pattern


class Span(NamedTuple):
    """Half-open interval [start, end) of code point offsets into a line."""

    start: int
    end: int

    @property
    def is_null(self) -> bool:
        return self.start < 0

    def text(self, line: str) -> str:
        return line[self.start : self.end]


NULL_SPAN = Span(-1, -1)


class QuotedRange(NamedTuple):
    """A matched pair of quotes, both quote characters included."""

    start: int
    end: int
    quote: str

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)

    def covers(self, offset: int) -> bool:
        return self.start <= offset < self.end


class Word(NamedTuple):
    """
    The spans that make up one token, in input order, and the delimiter
    that follows them (NULL_SPAN for the last word of a line).
    """

    spans: Tuple[Span, ...]
    delimiter: Span = NULL_SPAN
