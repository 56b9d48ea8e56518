"""Error reporting for the lexical analyser, with a running error count."""

from __future__ import annotations

from enum import IntEnum


class LexicalError(IntEnum):
    """Kinds of lexical error, each with the label used in its report."""

    TOO_MANY_DECIMAL = 0
    ILL_NUMBER = 1
    INVALID_IDENTIFIER = 2
    MULTI_CHARACTER = 3
    UNFINISHED_CHARACTER = 4
    EMPTY_CHARACTER = 5
    UNFINISHED_STRING = 6
    UNFINISHED_COMMENT = 7
    UNRECOGNIZED = 8

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    LexicalError.TOO_MANY_DECIMAL: "TOO_MANY_DECIMAL_POINTS",
    LexicalError.ILL_NUMBER: "ILLFORMED_NUMBER",
    LexicalError.INVALID_IDENTIFIER: "INVALID_ID_SUFFIX_NUM_PREFIX",
    LexicalError.MULTI_CHARACTER: "MULTICHAR_CONST_CHAR",
    LexicalError.UNFINISHED_CHARACTER: "UNFINISHED_CONST_CHAR",
    LexicalError.EMPTY_CHARACTER: "EMPTY_CONST_CHAR",
    LexicalError.UNFINISHED_STRING: "UNFINISHED_STRING",
    LexicalError.UNFINISHED_COMMENT: "UNFINISHED_COMMENT",
    LexicalError.UNRECOGNIZED: "UNRECOGNIZED_CHAR",
}


class ErrorHandler:
    """Formats error reports and counts how many were produced."""

    def __init__(self) -> None:
        self.error_count = 0

    def error(self, message: str, line: int) -> str:
        """Count an error and return its report line."""
        self.error_count += 1
        return f"Error at line# {line}: {message}"

    def lexical_error(self, kind: LexicalError | int, line: int, lexeme: str = "") -> str:
        """Count a lexical error of ``kind`` and return its report line.

        Raises ValueError if ``kind`` is not a known lexical error.
        """
        kind = LexicalError(kind)
        return self.error(f"{kind.label} {lexeme}", line)