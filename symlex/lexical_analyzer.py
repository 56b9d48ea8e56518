"""Actions taken for each kind of lexeme the scanner recognises."""

from __future__ import annotations

from typing import TextIO

from .errors import ErrorHandler, LexicalError
from .line_tracker import LineTracker
from .symbol_table import SymbolTable
from .tokens import LogType, TokenType, format_token, log_data


class LexicalAnalyzer:
    """Writes tokens and log entries for lexemes and keeps the symbol table in step."""

    def __init__(
        self,
        table: SymbolTable,
        error_handler: ErrorHandler,
        log: TextIO,
        token_out: TextIO,
    ) -> None:
        self.table = table
        self.error_handler = error_handler
        self.log = log
        self.token_out = token_out
        self.tracker = LineTracker(1)

    @property
    def line_count(self) -> int:
        return self.tracker.line

    @property
    def error_count(self) -> int:
        return self.error_handler.error_count

    def _emit(self, token: TokenType, entry: LogType, text: str) -> None:
        self.token_out.write(format_token(token, text) + "\n")
        self.log.write(log_data(entry, self.tracker.line, text) + "\n")

    def _report(self, kind: LexicalError, text: str) -> None:
        self.log.write(self.error_handler.lexical_error(kind, self.tracker.line, text) + "\n")

    def _install_id(self, text: str) -> None:
        if self.table.insert(text, "ID"):
            self.log.write(self.table.format_all(skip_empty=True))
        else:
            self.log.write(f"\t{text} already exisits in the current ScopeTable\n")

    def handle_white_space(self, text: str) -> None:
        """Whitespace produces nothing."""

    def handle_new_line(self, text: str) -> None:
        self.tracker.new_line()

    def handle_keyword(self, text: str) -> None:
        self._emit(TokenType.KEYWORD, LogType.KEYWORD, text)

    def handle_operator(self, text: str) -> None:
        """Emit an operator; braces also open and close scopes."""
        if text == "{":
            self.table.enter_scope()
        elif text == "}":
            current = self.table.current_scope
            if current is not None and current.parent is not None:
                self.table.exit_scope()
        self._emit(TokenType.OPERATOR, LogType.OPERATOR, text)

    def handle_integer(self, text: str) -> None:
        self._emit(TokenType.INTEGER, LogType.INTEGER, text)

    def handle_floating_point(self, text: str) -> None:
        self._emit(TokenType.FLOAT, LogType.FLOAT, text)

    def handle_too_many_decimal(self, text: str) -> None:
        self._report(LexicalError.TOO_MANY_DECIMAL, text)

    def handle_ill_num(self, text: str) -> None:
        self._report(LexicalError.ILL_NUMBER, text)

    def handle_identifier(self, text: str) -> None:
        """Emit an identifier and install it in the current scope."""
        self._emit(TokenType.IDENTIFIER, LogType.IDENTIFIER, text)
        self._install_id(text)

    def handle_non_identifier(self, text: str) -> None:
        self._report(LexicalError.INVALID_IDENTIFIER, text)

    def handle_unfinished_char(self, text: str) -> None:
        self._report(LexicalError.UNFINISHED_CHARACTER, text)

    def handle_empty_char(self, text: str) -> None:
        self._report(LexicalError.EMPTY_CHARACTER, text)

    def handle_valid_char(self, text: str) -> None:
        self._emit(TokenType.CHARACTER, LogType.CHARACTER, text)

    def handle_multi_char(self, text: str) -> None:
        self._report(LexicalError.MULTI_CHARACTER, text)

    def handle_unfinished_string(self, text: str) -> None:
        """Report an unfinished string at the line where it ends."""
        self.tracker.string(text)
        self._report(LexicalError.UNFINISHED_STRING, text)

    def handle_valid_string(self, text: str) -> None:
        """Emit a string at the line where it starts, then advance past it."""
        self._emit(TokenType.STRING, LogType.STRING, text)
        self.tracker.string(text)

    def handle_single_comment(self, text: str) -> None:
        self.log.write(log_data(LogType.SINGLE_COMMENT, self.tracker.line, text) + "\n")
        self.tracker.single_comment(text)

    def handle_unfinished_comment(self, text: str) -> None:
        """Report an unfinished comment at the line where input ended."""
        self.tracker.multi_comment(text)
        self._report(LexicalError.UNFINISHED_COMMENT, text)

    def handle_multi_comment(self, text: str) -> None:
        self.log.write(log_data(LogType.MULTI_COMMENT, self.tracker.line, text) + "\n")
        self.tracker.multi_comment(text)

    def handle_unrecognized(self, text: str) -> None:
        self._report(LexicalError.UNRECOGNIZED, text)