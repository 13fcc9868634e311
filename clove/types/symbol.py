from __future__ import annotations
import threading
from itertools import count


class Symbol:
    """An interned name. Identity is the id handed out by a SymbolTable,
    together with the name so ids from different tables do not collide."""

    __slots__ = ("name", "id")

    def __init__(self, name: str, id: int):
        self.name = name
        self.id = id

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.name!r}, {self.id})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Session-scoped name -> Symbol table.

    Equal names intern to equal ids within one table. Ids are assigned in
    first-intern order. Duplicated sessions share a table across threads, so
    interning is guarded by a lock.
    """

    __slots__ = ("_symbols", "_ids", "_lock")

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}
        self._ids = count()
        self._lock = threading.Lock()

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is not None:
            return sym
        with self._lock:
            sym = self._symbols.get(name)
            if sym is None:
                sym = Symbol(name, next(self._ids))
                self._symbols[name] = sym
            return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self):
        return f"<SymbolTable {len(self)} symbols>"
