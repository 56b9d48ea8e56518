"""Tracks the current source line while lexemes are consumed."""

from __future__ import annotations

from dataclasses import dataclass

from .text_util import multi_comment_line_count, single_comment_line_count, string_line_count


@dataclass
class LineTracker:
    """Current line number, advanced by newlines and multi-line lexemes."""

    line: int = 1

    def new_line(self) -> None:
        """Advance past one newline."""
        self.line += 1

    def string(self, text: str) -> None:
        """Advance past the extra lines of a string literal."""
        self.line += string_line_count(text) - 1

    def single_comment(self, text: str) -> None:
        """Advance past the extra lines of a ``//`` comment."""
        self.line += single_comment_line_count(text) - 1

    def multi_comment(self, text: str) -> None:
        """Advance past the extra lines of a block comment."""
        self.line += multi_comment_line_count(text) - 1