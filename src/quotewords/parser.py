import logging
import re
from typing import Iterable, List, Pattern, Union

from .core import (
    InvalidDelimiterPatternError,
    KeepMode,
    _doc_fields,
    fill_in_doc,
)
from .delimiters import find_delimiters
from .render import render
from .scanner import scan
from .words import assemble

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = re.compile(r"\s+")

_trim_left = re.compile(r"^\s+")
# Trailing whitespace is kept only if its first character is escaped, i.e. preceded
# by an odd number of backslashes
_trim_right = re.compile(r"(?<!\\)((?:\\\\)*(?:\\\s)?)\s+\Z")


def compile_delimiter(delimiter: Union[str, Pattern[str]]) -> Pattern[str]:
    """Compile `delimiter` unless it already is a compiled pattern."""
    if isinstance(delimiter, re.Pattern):
        return delimiter

    try:
        return re.compile(delimiter)
    except re.error as exc:
        raise InvalidDelimiterPatternError(delimiter, str(exc)) from exc


@fill_in_doc(_doc_fields)
def parse_line(
    delimiter: Union[str, Pattern[str]], keep: KeepMode, line: str
) -> List[str]:
    """
    Split a line into tokens, ignoring delimiters inside quotes or escaped by a backslash.

    Args:
        {delimiter_arg}
        {keep_arg}
        line (str): The line to split.

    Returns:
        List[str]: The tokens. A line ending on a delimiter yields a trailing empty token.

    Raises:
        InvalidDelimiterPatternError: If `delimiter` is not a valid regular expression.
        UnterminatedQuoteError: If a quote is not closed.
    """
    return parse_line_precompiled(compile_delimiter(delimiter), keep, line)


@fill_in_doc(_doc_fields)
def parse_line_precompiled(
    delimiter: Pattern[str], keep: KeepMode, line: str
) -> List[str]:
    """
    Split a line into tokens using an already compiled delimiter.

    Args:
        {compiled_delimiter_arg}
        {keep_arg}
        line (str): The line to split.

    Raises:
        UnterminatedQuoteError: If a quote is not closed.
    """
    keep = KeepMode(keep)

    quoted, escaped = scan(line)
    delimiters = find_delimiters(line, quoted, escaped, delimiter)

    logger.debug(
        "%d quoted ranges, %d escapes, %d delimiters in %r",
        len(quoted),
        len(escaped),
        len(delimiters),
        line,
    )

    return render(line, assemble(line, delimiters, quoted), keep)


def _parse_batch_line(delimiter: Pattern[str], keep: KeepMode, line: str) -> List[str]:
    words = parse_line_precompiled(delimiter, keep, line)

    if words and words[-1] == "":
        words.pop()

    return words


@fill_in_doc(_doc_fields)
def quote_words(
    delimiter: Union[str, Pattern[str]], keep: KeepMode, *lines: str
) -> List[str]:
    """
    Split several lines and concatenate their tokens.

    One trailing empty token is dropped from each line. If a non-empty line
    yields no tokens at all, the result is empty.

    Args:
        {delimiter_arg}
        {keep_arg}
        {lines_arg}
    """
    return quote_words_precompiled(compile_delimiter(delimiter), keep, *lines)


@fill_in_doc(_doc_fields)
def quote_words_precompiled(
    delimiter: Pattern[str], keep: KeepMode, *lines: str
) -> List[str]:
    """
    Like `quote_words`, using an already compiled delimiter.

    Args:
        {compiled_delimiter_arg}
        {keep_arg}
        {lines_arg}
    """
    all_words: List[str] = []

    for words in nested_quote_words_precompiled(delimiter, keep, *lines):
        all_words.extend(words)

    return all_words


@fill_in_doc(_doc_fields)
def nested_quote_words(
    delimiter: Union[str, Pattern[str]], keep: KeepMode, *lines: str
) -> List[List[str]]:
    """
    Split several lines, returning one list of tokens per line.

    One trailing empty token is dropped from each line. If a non-empty line
    yields no tokens at all, the result is empty.

    Args:
        {delimiter_arg}
        {keep_arg}
        {lines_arg}
    """
    return nested_quote_words_precompiled(compile_delimiter(delimiter), keep, *lines)


@fill_in_doc(_doc_fields)
def nested_quote_words_precompiled(
    delimiter: Pattern[str], keep: KeepMode, *lines: str
) -> List[List[str]]:
    """
    Like `nested_quote_words`, using an already compiled delimiter.

    Args:
        {compiled_delimiter_arg}
        {keep_arg}
        {lines_arg}
    """
    all_words: List[List[str]] = []

    for i, line in enumerate(lines):
        words = _parse_batch_line(delimiter, keep, line)

        # TODO: Report the offending line instead of discarding the whole batch
        if not words and line:
            logger.debug("Line %d (%r) yields no tokens, discarding batch", i, line)
            return []

        all_words.append(words)

    return all_words


def shell_words(*lines: str) -> List[str]:
    """
    Split text into words the way a Unix shell does.

    The lines are concatenated and stripped of surrounding whitespace (except
    for a trailing escaped whitespace character) before splitting on runs of
    whitespace. Quotes and backslashes are removed from the tokens.
    """
    whole_line = _trim_right.sub(r"\1", _trim_left.sub("", "".join(lines)))

    if not whole_line:
        return []

    return parse_line_precompiled(DEFAULT_DELIMITER, KeepMode.NOTHING, whole_line)


_find_unsafe = re.compile(r"[^\w@%+=:,./-]", re.ASCII).search
_escape_double_quoted = re.compile(r'(["\\])')


def quote(s: str, quote_chars="'\""):
    """
    Quote a token so that `shell_words` reads it back unchanged.

    Tokens consisting only of safe characters are returned as they are.
    Otherwise the first quote character in `quote_chars` that does not occur in
    the token is used. Double quotes are used if the token contains all of them.
    """
    unsupported = set(quote_chars) - {"'", '"'}
    if unsupported:
        raise ValueError(f"Unsupported quote chars: {''.join(sorted(unsupported))!r}")

    if s == "":
        return "''"

    if _find_unsafe(s) is None:
        return s

    quote = next((c for c in quote_chars if c not in s), '"')

    if quote == '"':
        s = _escape_double_quoted.sub(r"\\\1", s)

    return quote + s + quote


def join(seq_of_str: Iterable[str]):
    """Join tokens into a line that `shell_words` splits back into the same tokens."""
    return " ".join(quote(arg) for arg in seq_of_str)
