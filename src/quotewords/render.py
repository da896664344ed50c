import re
from typing import Iterable, List

from .core import KeepMode, Word

_unslash = re.compile(r"\\(.)", re.DOTALL)


def unslash(s: str) -> str:
    """Replace every backslash-escaped character by the character itself."""
    return _unslash.sub(r"\1", s)


def unquote(s: str) -> str:
    """
    Remove the quotes and backslash escapes from the text of a span.

    Single-quoted text is returned verbatim without its quotes. Double-quoted
    and unquoted text has its backslash escapes collapsed. Quoted text of two
    characters or less yields an empty string.
    """
    if not s:
        return ""

    if s[0] == "'":
        return s[1:-1] if len(s) > 2 else ""

    if s[0] == '"':
        return unslash(s[1:-1]) if len(s) > 2 else ""

    return unslash(s)


def render(line: str, words: Iterable[Word], keep: KeepMode) -> List[str]:
    """
    Turn words into tokens.

    Args:
        line (str): The text the words were assembled from.
        words (Iterable[Word]): The words of the line.
        keep (KeepMode): Whether to strip quotes and whether to emit delimiters.

    Returns:
        List[str]: The tokens.
    """
    tokens: List[str] = []

    for word in words:
        texts = (span.text(line) for span in word.spans)
        if keep == KeepMode.NOTHING:
            texts = (unquote(t) for t in texts)

        tokens.append("".join(texts))

        if keep == KeepMode.DELIMITERS and not word.delimiter.is_null:
            tokens.append(word.delimiter.text(line))

    return tokens
