"""Command interpreter that drives a symbol table from a script of one-letter commands."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, Sequence

from .symbol_table import SymbolTable

_BUCKET_COUNT = re.compile(r"\s*([+-]?\d+)")


def split_tokens(line: str) -> list[str]:
    """Split ``line`` on single spaces, dropping empty pieces."""
    return [token for token in line.split(" ") if token]


class CommandInterpreter:
    """Executes insert, lookup, delete, scope, print and quit commands on a symbol table."""

    def __init__(self, num_buckets: int) -> None:
        self.table = SymbolTable(num_buckets, bounded_hash=True)
        self.finished = False
        self._commands: dict[str, tuple[int, Callable[[list[str]], str]]] = {
            "I": (3, self._insert),
            "L": (2, self._lookup),
            "D": (2, self._delete),
            "S": (1, self._enter_scope),
            "E": (1, self._exit_scope),
            "P": (2, self._print),
            "Q": (1, self._quit),
        }

    def execute(self, line: str) -> str:
        """Run one command line and return the text it reports."""
        tokens = split_tokens(line)
        if not tokens:
            return ""
        command = tokens[0][0]
        entry = self._commands.get(command)
        if entry is None:
            return ""
        if command == "Q":
            self.finished = True
        arity, handler = entry
        if len(tokens) != arity:
            return f"\tNumber of parameters mismatch for the command {tokens[0]}\n"
        return handler(tokens)

    def _position(self, name: str) -> tuple[int, int, int]:
        bucket, chain = self.table.location_of(name) or (0, 0)
        scope = self.table.scope_id_of(name) or 0
        return scope, bucket, chain

    def _insert(self, tokens: list[str]) -> str:
        name, type_ = tokens[1], tokens[2]
        if not self.table.insert(name, type_):
            return f"\t'{name}' already exists in the current ScopeTable\n"
        scope, bucket, chain = self._position(name)
        return f"\tInserted in ScopeTable# {scope} at position {bucket}, {chain}\n"

    def _lookup(self, tokens: list[str]) -> str:
        name = tokens[1]
        if self.table.find(name) is None:
            return f"\t'{name}' not found in any of the ScopeTables\n"
        scope, bucket, chain = self._position(name)
        return f"\t'{name}' found in ScopeTable# {scope} at position {bucket}, {chain}\n"

    def _delete(self, tokens: list[str]) -> str:
        name = tokens[1]
        scope, bucket, chain = self._position(name)
        if self.table.erase(name):
            return f"\tDeleted '{name}' from ScopeTable# {scope} at position {bucket}, {chain}\n"
        return "\tNot found in the current ScopeTable\n"

    def _enter_scope(self, tokens: list[str]) -> str:
        if self.table.enter_scope():
            return f"\tScopeTable# {self.table.current_scope.id} created\n"
        return ""

    def _exit_scope(self, tokens: list[str]) -> str:
        current = self.table.current_scope
        if current.parent is None:
            return f"\tScopeTable# {current.id} cannot be removed\n"
        self.table.exit_scope()
        return f"\tScopeTable# {current.id} removed\n"

    def _print(self, tokens: list[str]) -> str:
        kind = tokens[1][0]
        if kind == "C":
            return self.table.format_current()
        if kind == "A":
            return self.table.format_all()
        return ""

    def _quit(self, tokens: list[str]) -> str:
        removed = []
        while self.table.current_scope is not None:
            scope_id = self.table.current_scope.id
            if self.table.exit_scope():
                removed.append(f"\tScopeTable# {scope_id} removed\n")
        return "".join(removed)


def run(text: str) -> str:
    """Run a whole script: a bucket count followed by one command per line."""
    match = _BUCKET_COUNT.match(text)
    if match is None:
        raise ValueError("expected the number of buckets at the start of the input")
    interpreter = CommandInterpreter(int(match.group(1)))
    _, _, rest = text[match.end():].partition("\n")
    lines = rest.split("\n")
    if lines[-1] == "":
        lines.pop()

    output = [f"\tScopeTable# {interpreter.table.current_scope.id} created\n"]
    for count, line in enumerate(lines, start=1):
        output.append(f"Cmd {count}: {line}\n")
        output.append(interpreter.execute(line))
        if interpreter.finished:
            break
    return "".join(output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a command script from the first file and write the report to the second."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 1:
        print("Please provide input file name and try again", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8", newline="") as source:
            text = source.read()
    except OSError:
        print("Cannot open specified input file", file=sys.stderr)
        return 1
    if len(args) < 2:
        print("Please provide output file name and try again", file=sys.stderr)
        return 1
    try:
        report = run(text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        with open(args[1], "w", encoding="utf-8", newline="") as target:
            target.write(report)
    except OSError:
        print("Cannot open specified output file", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())