"""Host-function representation for functions and macros registered on a Session."""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from clove import LispValue

if TYPE_CHECKING:
    from clove.session import Session

BuiltinFn = Callable[["Session", str, list], LispValue]


class Builtin:
    """A named host function called as fn(session, name, args)."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, session: Session, args: list) -> LispValue:
        return self.fn(session, self.name, list(args))

    def __str__(self) -> str:
        return f"<builtin {self.name}>"

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"
