"""String helpers."""

from __future__ import annotations

from typing import List

_QUOTES = frozenset("\"'\u201c\u201d`")
_CURLY_PAIR = frozenset("\u201c\u201d")


def _matches_quote(opened: str, char: str) -> bool:
    if opened != char and {opened, char} == _CURLY_PAIR:
        return True
    return opened == char


def split_csv(text: str) -> List[str]:
    """Split on commas, trimming whitespace around unquoted words.

    Commas inside a quoted section are kept; the quotes themselves are dropped.
    """
    output: List[str] = []
    word: List[str] = []
    opened = None
    for char in text:
        if opened is None:
            if char in _QUOTES:
                opened = char
            elif char == ",":
                output.append("".join(word).strip())
                word = []
            else:
                word.append(char)
        elif _matches_quote(opened, char):
            opened = None
        else:
            word.append(char)
    if word:
        output.append("".join(word).strip())
    return output