"""Token and log-line formatting for recognised lexemes."""

from __future__ import annotations

from enum import IntEnum

from .text_util import actual_char, actual_string, string_line_count, to_upper

OPERATOR_TYPES: dict[str, str] = {
    "+": "ADDOP",
    "-": "ADDOP",
    "*": "MULOP",
    "/": "MULOP",
    "%": "MULOP",
    "++": "INCOP",
    "--": "INCOP",
    "<": "RELOP",
    "<=": "RELOP",
    ">": "RELOP",
    ">=": "RELOP",
    "==": "RELOP",
    "!=": "RELOP",
    "=": "ASSIGNOP",
    "||": "LOGICOP",
    "&&": "LOGICOP",
    "&": "BITOP",
    "|": "BITOP",
    "^": "BITOP",
    "<<": "BITOP",
    ">>": "BITOP",
    "!": "NOT",
    "(": "LPAREN",
    ")": "RPAREN",
    "{": "LCURL",
    "}": "RCURL",
    "[": "LSQUARE",
    "]": "RSQUARE",
    ",": "COMMA",
    ";": "SEMICOLON",
}


class TokenType(IntEnum):
    """Kinds of token written to the token stream."""

    KEYWORD = 0
    INTEGER = 1
    FLOAT = 2
    CHARACTER = 3
    STRING = 4
    OPERATOR = 5
    IDENTIFIER = 6


class LogType(IntEnum):
    """Kinds of entry written to the log."""

    KEYWORD = 0
    INTEGER = 1
    FLOAT = 2
    CHARACTER = 3
    STRING = 4
    OPERATOR = 5
    IDENTIFIER = 6
    SINGLE_COMMENT = 7
    MULTI_COMMENT = 8


def _string_kind(lexeme: str) -> str:
    return ("MULTI" if string_line_count(lexeme) > 1 else "SINGLE") + " LINE STRING"


def _operator_type(lexeme: str) -> str:
    return OPERATOR_TYPES.get(lexeme, "")


def token_text(type_: str, symbol: str) -> str:
    """Render a token as ``<type, symbol>``."""
    return f"<{type_}, {symbol}>"


def format_token(kind: TokenType, lexeme: str) -> str:
    """Render the token for ``lexeme`` of the given kind."""
    kind = TokenType(kind)
    if kind is TokenType.KEYWORD:
        return token_text(to_upper(lexeme), lexeme)
    if kind is TokenType.INTEGER:
        return token_text("CONST_INT", lexeme)
    if kind is TokenType.FLOAT:
        return token_text("CONST_FLOAT", lexeme)
    if kind is TokenType.CHARACTER:
        return token_text("CONST_CHAR", actual_char(lexeme))
    if kind is TokenType.STRING:
        return token_text(_string_kind(lexeme), actual_string(lexeme))
    if kind is TokenType.OPERATOR:
        return token_text(_operator_type(lexeme), lexeme)
    return token_text("ID", lexeme)


def log_message(token: str, lexeme: str, line: int) -> str:
    """Render one log line for a recognised token."""
    return f"Line# {line}: Token <{token}> Lexeme {lexeme} found"


def log_data(kind: LogType, line: int, lexeme: str) -> str:
    """Render the log line for ``lexeme`` of the given kind found at ``line``."""
    kind = LogType(kind)
    if kind is LogType.KEYWORD:
        return log_message(to_upper(lexeme), lexeme, line)
    if kind is LogType.INTEGER:
        return log_message("CONST_INT", lexeme, line)
    if kind is LogType.FLOAT:
        return log_message("CONST_FLOAT", lexeme, line)
    if kind is LogType.CHARACTER:
        return log_message("CONST_CHAR", actual_char(lexeme), line)
    if kind is LogType.STRING:
        return log_message(_string_kind(lexeme), lexeme, line)
    if kind is LogType.OPERATOR:
        return log_message(_operator_type(lexeme), lexeme, line)
    if kind is LogType.IDENTIFIER:
        return log_message("ID", lexeme, line)
    if kind is LogType.SINGLE_COMMENT:
        return log_message("SINGLE LINE COMMENT", lexeme, line)
    return log_message("MULTI LINE COMMENT", lexeme, line)