"""Scoped symbol tables, a symbol-table command interpreter, and lexeme handling helpers."""

__version__ = "0.1.0"
__all__ = [
    "commands",
    "errors",
    "lexical_analyzer",
    "line_tracker",
    "symbol_table",
    "text_util",
    "tokens",
]