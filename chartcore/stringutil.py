"""Small string helpers."""

from __future__ import annotations

_QUOTES = frozenset({'"', "'", "\u201c", "\u201d", "`"})
_CURLY_PAIR = frozenset({"\u201c", "\u201d"})


def _matches_quote(opened: str, char: str) -> bool:
    if opened in _CURLY_PAIR and char in _CURLY_PAIR:
        return True
    return opened == char


def split_csv(text: str) -> list[str]:
    """Split on commas, trimming each field unless the whitespace is quoted.

    Quoted sections may contain commas; the quote characters themselves
    are dropped. Curly double quotes close each other.
    """
    output: list[str] = []
    word: list[str] = []
    opened: str | None = None
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