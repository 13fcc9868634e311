"""Structural utilities over cons lists.

All traversals walk the spine iteratively and build new chains from the back,
so list length is never bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Callable, Iterable

from clove import SExpression
from clove.errors import CloveNotAListError
from clove.types.nil import Null
from clove.types.values import Pair


def cons(head: SExpression, tail: SExpression) -> Pair:
    return Pair(head, tail)


def is_list(expr: SExpression) -> bool:
    """True iff `expr` is Null or a Pair chain ending in Null."""
    while isinstance(expr, Pair):
        expr = expr.tail
    return expr is Null


def list_to_sequence(expr: SExpression) -> list[SExpression]:
    if not is_list(expr):
        raise CloveNotAListError(f"{expr} is not a list")
    items: list[SExpression] = []
    while expr is not Null:
        items.append(expr.head)
        expr = expr.tail
    return items


def list_length(expr: SExpression) -> int:
    if not is_list(expr):
        raise CloveNotAListError(f"{expr} is not a list")
    n = 0
    while expr is not Null:
        n += 1
        expr = expr.tail
    return n


def make_list(expressions: Iterable[SExpression], tail: SExpression = Null) -> SExpression:
    """Build a right-nested chain of `expressions` ending in `tail`."""
    result = tail
    for expr in reversed(list(expressions)):
        result = Pair(expr, result)
    return result


def map_list(fn: Callable[[SExpression], SExpression], expr: SExpression) -> SExpression:
    """Apply `fn` to each element, left to right, returning a new list.

    The first exception raised by `fn` propagates immediately; elements after
    it are never visited. Raises CloveNotAListError when the walk reaches
    something that is neither Null nor a Pair.
    """
    mapped: list[SExpression] = []
    while expr is not Null:
        if not isinstance(expr, Pair):
            raise CloveNotAListError(f"{expr} is not a list")
        mapped.append(fn(expr.head))
        expr = expr.tail
    return make_list(mapped)


def concat_list(a: SExpression, b: SExpression) -> SExpression:
    """Return `a` followed by `b` without mutating `a`.

    A fresh spine is built for `a`; `b` itself becomes the final tail.
    """
    if not is_list(b):
        raise CloveNotAListError(f"{b} is not a list")
    heads: list[SExpression] = []
    while isinstance(a, Pair):
        heads.append(a.head)
        a = a.tail
    if a is not Null:
        raise CloveNotAListError(f"cannot append past improper tail {a}")
    return make_list(heads, b)
