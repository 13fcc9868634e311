"""Compound and character values of the Sexp model, with equality and printing.

`Pair` is a mutable cons cell, `Array` a mutable sequence read from `[...]`,
and `Char` a single character kept distinct from one-letter strings.
Equality between any two expressions goes through `sexp_equal`, which keeps
the variants apart where Python would conflate them (`True == 1`,
`1 == 1.0`, `[1] == Array([1])`).
"""

from __future__ import annotations

from io import StringIO

from clove.types.nil import NullType, EndType
from clove.types.symbol import Symbol

NAMED_CHARS: dict[str, str] = {
    " ": "space",
    "\n": "newline",
    "\t": "tab",
    "\r": "return",
}

STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
}

_ATOM_TYPES = (bool, int, float, str)


class Pair:
    """A cons cell."""

    __slots__ = ("head", "tail")
    __match_args__ = ("head", "tail")

    def __init__(self, head, tail):
        self.head = head
        self.tail = tail

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pair):
            return False
        return sexp_equal(self, other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self) -> str:
        return sexp_string(self)

    def __str__(self) -> str:
        return sexp_string(self)


class Array(list):
    """An ordered, mutable sequence of expressions (literal `[...]`)."""

    __slots__ = ()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Array):
            return False
        return sexp_equal(self, other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Array({list.__repr__(self)})"

    def __str__(self) -> str:
        return sexp_string(self)


class Char:
    """A single character."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: str):
        if len(value) != 1:
            raise ValueError(f"Char must hold exactly one character, got {value!r}")
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Char) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Char, self.value))

    def __repr__(self) -> str:
        return f"Char({self.value!r})"

    def __str__(self) -> str:
        return "#\\" + NAMED_CHARS.get(self.value, self.value)


def sexp_equal(a, b) -> bool:
    """Structural equality over expressions, exact about variants.

    Pair spines are walked iteratively; heads and arrays recurse.
    """
    while isinstance(a, Pair) and isinstance(b, Pair):
        if a is b:
            return True
        if not sexp_equal(a.head, b.head):
            return False
        a, b = a.tail, b.tail
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    if isinstance(a, Array) or isinstance(b, Array):
        if not (isinstance(a, Array) and isinstance(b, Array)):
            return False
        return len(a) == len(b) and all(sexp_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, _ATOM_TYPES) or isinstance(b, _ATOM_TYPES):
        return type(a) is type(b) and a == b
    return a == b


def _write_string(buffer: StringIO, s: str) -> None:
    buffer.write('"')
    for ch in s:
        buffer.write(STRING_ESCAPES.get(ch, ch))
    buffer.write('"')


def _write_sexp(buffer: StringIO, expr) -> None:
    if isinstance(expr, Pair):
        buffer.write("(")
        _write_sexp(buffer, expr.head)
        tail = expr.tail
        while isinstance(tail, Pair):
            buffer.write(" ")
            _write_sexp(buffer, tail.head)
            tail = tail.tail
        if not isinstance(tail, NullType):
            buffer.write(" . ")
            _write_sexp(buffer, tail)
        buffer.write(")")
    elif isinstance(expr, Array):
        buffer.write("[")
        for i, item in enumerate(expr):
            if i:
                buffer.write(" ")
            _write_sexp(buffer, item)
        buffer.write("]")
    elif isinstance(expr, bool):
        buffer.write("true" if expr else "false")
    elif isinstance(expr, str):
        _write_string(buffer, expr)
    elif isinstance(expr, float):
        buffer.write(repr(expr))
    elif isinstance(expr, (int, Symbol, Char, NullType, EndType)):
        buffer.write(str(expr))
    else:
        # Host objects (channels, coroutines, builtins) print themselves
        buffer.write(str(expr))


def sexp_string(expr) -> str:
    """Render an expression in reader syntax, e.g. `(1 "a" . #\\b)`."""
    with StringIO() as buffer:
        _write_sexp(buffer, expr)
        return buffer.getvalue()
