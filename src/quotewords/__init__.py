from .core import (
    InvalidDelimiterPatternError,
    KeepMode,
    ParseError,
    UnterminatedQuoteError,
)
from .parser import (
    DEFAULT_DELIMITER,
    join,
    nested_quote_words,
    nested_quote_words_precompiled,
    parse_line,
    parse_line_precompiled,
    quote,
    quote_words,
    quote_words_precompiled,
    shell_words,
)
from .render import unquote

__all__ = [
    "DEFAULT_DELIMITER",
    "InvalidDelimiterPatternError",
    "KeepMode",
    "ParseError",
    "UnterminatedQuoteError",
    "join",
    "nested_quote_words",
    "nested_quote_words_precompiled",
    "parse_line",
    "parse_line_precompiled",
    "quote",
    "quote_words",
    "quote_words_precompiled",
    "shell_words",
    "unquote",
]
