from __future__ import annotations
from pathlib import Path
from typing import Callable, Union

from clove import SExpression, LispValue
from clove.errors import CloveError, CloveNotAListError, CloveTypeError, CloveUnboundSymbol
from clove.listutils import is_list
from clove.loader import parse_all, load_file
from clove.types.builtin import Builtin, BuiltinFn
from clove.types.environment import Environment
from clove.types.nil import Null
from clove.types.symbol import Symbol
from clove.types.values import Pair


class Session:
    """
    One interpreter session: symbol table and bindings, registered macros,
    the loaded program, and a pluggable evaluator.

    The evaluator is injected as eval_fn(expr, session) -> value; reading and
    registration work without one, running a program needs it.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Session], LispValue] | None = None,
        env: Environment | None = None,
    ):
        self.eval_fn = eval_fn
        self.env: Environment = env if env is not None else Environment()
        self.macros: dict[Symbol, Builtin] = {}
        self.program: list[SExpression] = []

    def intern(self, name: str) -> Symbol:
        return self.env.intern(name)

    # --- Registration ---
    def add_function(self, name: str, fn: BuiltinFn) -> Builtin:
        builtin = Builtin(name, fn)
        self.env.define(self.intern(name), builtin)
        return builtin

    def add_macro(self, name: str, fn: BuiltinFn) -> Builtin:
        builtin = Builtin(name, fn)
        self.macros[self.intern(name)] = builtin
        return builtin

    def call(self, name: str, args: list[LispValue]) -> LispValue:
        fn = self.env.lookup(self.intern(name))
        if not isinstance(fn, Builtin):
            raise CloveTypeError(f"{name} is not a function")
        return fn(self, args)

    def expand_macro(self, name: str, args: list[SExpression]) -> SExpression:
        macro = self.macros.get(self.intern(name))
        if macro is None:
            raise CloveUnboundSymbol(f"No macro named {name}")
        return macro(self, args)

    # --- Loading ---
    def load_expressions(self, forms: list[SExpression]) -> None:
        """Append forms to the program. Call forms must be proper lists."""
        for form in forms:
            if isinstance(form, Pair) and not is_list(form):
                raise CloveNotAListError(f"Cannot load improper form {form}")
        self.program.extend(forms)

    def load_string(self, code: str) -> None:
        forms, err = parse_all(code, self.env)
        if err is not None:
            raise err
        self.load_expressions(forms)

    def load_file(self, name: Union[str, Path]) -> None:
        forms, err = load_file(name, self.env)
        if err is not None:
            raise err
        self.load_expressions(forms)

    # --- Running ---
    def run(self) -> LispValue:
        """Evaluate the loaded program in order, returning the last value."""
        if self.eval_fn is None:
            raise CloveError("No evaluator configured for this session")
        result: LispValue = Null
        for form in self.program:
            result = self.eval_fn(form, self)
        return result

    def duplicate(self) -> Session:
        """A fresh session sharing symbols and evaluator, with copied bindings."""
        dup = Session(self.eval_fn, self.env.duplicate())
        dup.macros = dict(self.macros)
        return dup
