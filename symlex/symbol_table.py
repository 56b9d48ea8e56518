"""Scoped symbol tables built from chained hash buckets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _signed_bytes(name: str) -> Iterator[int]:
    """Yield the UTF-8 bytes of ``name`` as signed 8-bit values."""
    for byte in name.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def sdbm_hash(name: str) -> int:
    """Return the 64-bit sdbm hash of ``name`` (hash * 65599 + c, wrapping)."""
    value = 0
    for c in _signed_bytes(name):
        value = (c + (value << 6) + (value << 16) - value) & _MASK64
    return value


def bounded_sdbm_hash(name: str, num_buckets: int) -> int:
    """Return the 32-bit sdbm hash of ``name``, reduced modulo ``num_buckets`` at every step."""
    if num_buckets <= 0:
        raise ValueError("number of buckets must be positive")
    value = 0
    for c in _signed_bytes(name):
        value = (c + (value << 6) + (value << 16) - value) & _MASK32
        value %= num_buckets
    return value


@dataclass
class SymbolInfo:
    """A named symbol with its type."""

    name: str
    type_: str = ""


class ScopeTable:
    """One scope: a fixed number of buckets, each holding a chain of symbols."""

    def __init__(
        self,
        num_buckets: int,
        scope_id: int = 1,
        parent: Optional["ScopeTable"] = None,
        bounded_hash: bool = False,
    ) -> None:
        if num_buckets <= 0:
            raise ValueError("number of buckets must be positive")
        self.num_buckets = num_buckets
        self.id = scope_id
        self.parent = parent
        self.bounded_hash = bounded_hash
        self._buckets: list[list[SymbolInfo]] = [[] for _ in range(num_buckets)]

    def _index(self, name: str) -> int:
        if self.bounded_hash:
            return bounded_sdbm_hash(name, self.num_buckets) % self.num_buckets
        return sdbm_hash(name) % self.num_buckets

    def __iter__(self) -> Iterator[SymbolInfo]:
        for chain in self._buckets:
            yield from chain

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def insert(self, name: str, type_: str) -> bool:
        """Add a symbol at the end of its chain; False if the name is already here."""
        chain = self._buckets[self._index(name)]
        if any(symbol.name == name for symbol in chain):
            return False
        chain.append(SymbolInfo(name, type_))
        return True

    def find(self, name: str) -> Optional[SymbolInfo]:
        """Return the symbol called ``name`` in this scope, or None."""
        return next(
            (symbol for symbol in self._buckets[self._index(name)] if symbol.name == name),
            None,
        )

    def erase(self, name: str) -> bool:
        """Remove the symbol called ``name``; False if it is not in this scope."""
        chain = self._buckets[self._index(name)]
        for position, symbol in enumerate(chain):
            if symbol.name == name:
                del chain[position]
                return True
        return False

    def location_of(self, name: str) -> Optional[tuple[int, int]]:
        """Return the 1-based (bucket, position in chain) of ``name``, or None."""
        index = self._index(name)
        for position, symbol in enumerate(self._buckets[index], start=1):
            if symbol.name == name:
                return index + 1, position
        return None

    def format(self, skip_empty: bool = False) -> str:
        """Render the scope, one line per bucket; empty buckets omitted if ``skip_empty``."""
        lines = [f"\tScopeTable# {self.id}\n"]
        for index, chain in enumerate(self._buckets, start=1):
            if skip_empty and not chain:
                continue
            entries = "".join(f"<{symbol.name},{symbol.type_}> " for symbol in chain)
            lines.append(f"\t{index}--> {entries}\n")
        return "".join(lines)


class SymbolTable:
    """A stack of nested scopes, searched from the innermost outward."""

    def __init__(self, num_buckets: int, bounded_hash: bool = False) -> None:
        if num_buckets <= 0:
            raise ValueError("number of buckets must be positive")
        self.num_buckets = num_buckets
        self.bounded_hash = bounded_hash
        self._scope_count = 1
        self.current_scope: Optional[ScopeTable] = self._new_scope(None)

    def _new_scope(self, parent: Optional[ScopeTable]) -> ScopeTable:
        return ScopeTable(self.num_buckets, parent=parent, bounded_hash=self.bounded_hash)

    def __iter__(self) -> Iterator[ScopeTable]:
        """Yield the scopes from the current one out to the outermost."""
        scope = self.current_scope
        while scope is not None:
            yield scope
            scope = scope.parent

    def enter_scope(self) -> bool:
        """Open a new innermost scope.

        Returns False when there was no enclosing scope; the new scope then keeps id 1.
        """
        scope = self._new_scope(self.current_scope)
        self.current_scope = scope
        if scope.parent is None:
            return False
        self._scope_count += 1
        scope.id = self._scope_count
        return True

    def exit_scope(self) -> bool:
        """Drop the innermost scope; False if there is none."""
        if self.current_scope is None:
            return False
        self.current_scope = self.current_scope.parent
        return True

    def insert(self, name: str, type_: str) -> bool:
        """Insert into the current scope, recreating one if every scope was closed."""
        if self.current_scope is None:
            self.current_scope = self._new_scope(None)
        return self.current_scope.insert(name, type_)

    def erase(self, name: str) -> bool:
        """Remove ``name`` from the current scope only."""
        if self.current_scope is None:
            return False
        return self.current_scope.erase(name)

    def find(self, name: str) -> Optional[SymbolInfo]:
        """Return the innermost visible symbol called ``name``, or None."""
        for scope in self:
            symbol = scope.find(name)
            if symbol is not None:
                return symbol
        return None

    def scope_id_of(self, name: str) -> Optional[int]:
        """Return the id of the innermost scope holding ``name``, or None."""
        return next((scope.id for scope in self if scope.find(name) is not None), None)

    def location_of(self, name: str) -> Optional[tuple[int, int]]:
        """Return the location of ``name`` in the innermost scope holding it, or None."""
        for scope in self:
            location = scope.location_of(name)
            if location is not None:
                return location
        return None

    def format_current(self, skip_empty: bool = False) -> str:
        """Render the current scope, or an empty string if there is none."""
        if self.current_scope is None:
            return ""
        return self.current_scope.format(skip_empty)

    def format_all(self, skip_empty: bool = False) -> str:
        """Render every scope from the current one outward."""
        return "".join(scope.format(skip_empty) for scope in self)