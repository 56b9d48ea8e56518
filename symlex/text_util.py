"""Helpers for decoding character and string literals and counting their lines."""

from __future__ import annotations

_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")

_ESCAPES = {
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    "r": "\r",
}

_BREAKS = ("\r", "\n")


def to_upper(s: str) -> str:
    """Upper-case the ASCII letters of ``s``."""
    return s.translate(_UPPER)


def to_lower(s: str) -> str:
    """Lower-case the ASCII letters of ``s``."""
    return s.translate(_LOWER)


def special_char(c: str) -> str:
    """Return the character an escape letter stands for; other characters map to themselves."""
    return _ESCAPES.get(c, c)


def actual_char(symbol: str) -> str:
    """Decode a quoted character literal such as ``'a'`` or ``'\\n'``."""
    if len(symbol) < 2:
        raise ValueError(f"malformed character literal: {symbol!r}")
    if symbol[1] != "\\":
        return symbol[1]
    if len(symbol) < 3:
        raise ValueError(f"malformed character literal: {symbol!r}")
    return special_char(symbol[2])


def _char_at(s: str, index: int) -> str:
    return s[index] if index < len(s) else ""


def _escaped_breaks(s: str, start: int, stop: int) -> int:
    """Count backslash-newline continuations whose backslash lies in ``s[start:stop]``."""
    breaks = 0
    i = start
    while i < stop:
        if s[i] == "\\":
            i += 1
            follower = _char_at(s, i)
            if follower in _BREAKS:
                if follower == "\r":
                    i += 1
                breaks += 1
        i += 1
    return breaks


def string_line_count(s: str) -> int:
    """Number of source lines a quoted string literal spans."""
    return 1 + _escaped_breaks(s, 1, len(s) - 1)


def single_comment_line_count(s: str) -> int:
    """Number of source lines a ``//`` comment spans, counting backslash continuations."""
    return 1 + _escaped_breaks(s, 0, len(s))


def multi_comment_line_count(s: str) -> int:
    """Number of source lines a block comment spans; ``\\r`` swallows the character after it."""
    lines = 1
    i = 0
    while i < len(s):
        if s[i] in _BREAKS:
            if s[i] == "\r":
                i += 1
            lines += 1
        i += 1
    return lines


def actual_string(s: str) -> str:
    """Decode a quoted string literal: resolve escapes and drop line continuations."""
    decoded = []
    i = 1
    stop = len(s) - 1
    while i < stop:
        if s[i] == "\\":
            i += 1
            follower = _char_at(s, i)
            if follower in _BREAKS:
                if follower == "\r":
                    i += 1
            else:
                decoded.append(special_char(follower))
        else:
            decoded.append(s[i])
        i += 1
    return "".join(decoded)