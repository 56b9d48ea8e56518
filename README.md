# symlex

This package provides scoped symbol tables and the building blocks of a lexical
analyzer for a small C-like language.

## Modules

- `symlex.symbol_table` holds the functions `sdbm_hash` and `bounded_sdbm_hash`
  and the classes `SymbolInfo`, `ScopeTable` and `SymbolTable`.
  - A `ScopeTable` has a fixed number of buckets, and each bucket holds a chain
    of symbols. It supports `insert`, `find`, `erase`, `location_of` and
    `format`. `location_of` returns the 1-based (bucket, position in chain).
    With `skip_empty=True`, `format` leaves out empty buckets.
  - A `SymbolTable` is a stack of nested scopes. It supports `enter_scope`,
    `exit_scope`, `insert`, `erase`, `find`, `scope_id_of`, `location_of`,
    `format_current` and `format_all`. Lookups search from the innermost scope
    outward. `insert` and `erase` act on the current scope only.
  - `bounded_hash=True` selects the 32-bit hash that is reduced modulo the bucket
    count at every step. The default is the 64-bit hash.
- `symlex.commands` holds `split_tokens`, `CommandInterpreter`, `run` and
  `main`. They interpret a line-oriented command language that drives a symbol
  table.
- `symlex.text_util` holds `to_upper`, `to_lower`, `special_char`,
  `actual_char`, `actual_string`, `string_line_count`,
  `single_comment_line_count` and `multi_comment_line_count`. These decode
  character and string literals and count the lines that strings and comments
  span.
- `symlex.errors` holds `ErrorHandler` and the `LexicalError` kinds.
  `ErrorHandler.error` and `ErrorHandler.lexical_error` return lines of the form
  `Error at line# N: ...` and count them in `error_count`.
- `symlex.tokens` holds `TokenType`, `LogType`, `OPERATOR_TYPES`, `token_text`,
  `format_token`, `log_message` and `log_data`. Together they produce token
  lines such as `<CONST_INT, 42>` and log lines such as
  `Line# 3: Token <ID> Lexeme x found`.
- `symlex.line_tracker` holds `LineTracker`, which keeps the current source line
  in `line`. Newlines, strings and comments advance it.
- `symlex.lexical_analyzer` holds `LexicalAnalyzer`. Its `handle_*` methods
  write token and log lines to the streams it is given, report lexical errors,
  and install identifiers in a `SymbolTable`. `{` opens a scope and `}` closes
  one. It exposes `line_count` and `error_count`.

## Command-line use

```
symlex INPUT OUTPUT
```

The same command can be run as `python -m symlex.commands INPUT OUTPUT`.

The first line of `INPUT` gives the number of buckets per scope table. Every
line after that is a command:

| Command    | Effect                                                    |
|------------|-----------------------------------------------------------|
| `I name type` | insert into the current scope                          |
| `L name`   | look up through all scopes                                |
| `D name`   | delete from the current scope                             |
| `S`        | enter a new scope                                         |
| `E`        | exit the current scope; the outermost cannot be removed   |
| `P C` / `P A` | print the current scope / all scopes                   |
| `Q`        | remove every scope and stop                               |

Example input:

```
7
I foo FUNCTION
I i VAR
L foo
S
I x NUMBER
P A
D i
E
Q
```

The output file echoes each command as `Cmd N: ...` and records what the command
did, for example `Inserted in ScopeTable# 1 at position B, C` or
`'foo' found in ScopeTable# 1 at position B, C`. When a command has the wrong
number of words, the report is `Number of parameters mismatch for the command X`.
The exit status is 1 when a file is missing or cannot be opened, or when the
input does not start with a bucket count.

## Library use

```python
import io

from symlex.errors import ErrorHandler
from symlex.lexical_analyzer import LexicalAnalyzer
from symlex.symbol_table import SymbolTable

table = SymbolTable(7)
table.insert("x", "ID")
table.enter_scope()
table.insert("y", "ID")
print(table.scope_id_of("x"), table.location_of("y"))
print(table.format_all())

log, tokens = io.StringIO(), io.StringIO()
lexer = LexicalAnalyzer(SymbolTable(10), ErrorHandler(), log, tokens)
lexer.handle_keyword("int")
lexer.handle_identifier("count")
lexer.handle_operator(";")
lexer.handle_new_line("\n")
lexer.handle_too_many_decimal("1.2.3")
print(tokens.getvalue())
print(log.getvalue(), lexer.line_count, lexer.error_count)
```

## What it does not do

The package does not scan source text into lexemes. `LexicalAnalyzer` acts only
on lexemes that the caller has already matched, through its `handle_*` methods.
No command runs the lexical analyzer over a file.

## Tests

```
pip install -e .[test]
pytest
```