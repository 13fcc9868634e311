"""Runtime environment for Clove.

The Environment owns the session's symbol table and its global bindings of
Symbols to Lisp values. Names are interned through `intern`, which is the
capability the reader consumes; bindings are keyed by the resulting Symbols.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from clove import LispValue
from clove.errors import CloveTypeError, CloveUnboundSymbol
from clove.types.symbol import Symbol, SymbolTable


class Environment:
    """Mapping from Symbols to Lisp values, backed by a session symbol table."""

    __slots__ = ("symbols", "vars")

    def __init__(self, symbols: Optional[SymbolTable] = None):
        self.symbols: SymbolTable = symbols if symbols is not None else SymbolTable()
        self.vars: dict[Symbol, LispValue] = {}

    def intern(self, name: str) -> Symbol:
        return self.symbols.intern(name)

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value`. A plain string is interned first.

        Raises CloveTypeError if `name` is neither a Symbol nor a string.
        """
        if isinstance(name, str):
            name = self.intern(name)
        if not isinstance(name, Symbol):
            raise CloveTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> bool:
        return name in self.vars

    def lookup(self, name: Symbol | str) -> LispValue:
        """Look up the value bound to `name`.

        Raises CloveUnboundSymbol if not found.
        """
        if isinstance(name, str):
            name = self.intern(name)
        try:
            return self.vars[name]
        except KeyError:
            raise CloveUnboundSymbol(f"Cannot lookup unbound symbol {name}") from None

    def duplicate(self) -> Environment:
        """Copy the bindings, sharing the symbol table so ids stay comparable."""
        dup = Environment(self.symbols)
        dup.vars = dict(self.vars)
        return dup

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self} {self.symbols!r}>"
