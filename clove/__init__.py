# Core type aliases for Clove's data model.
# Reader output and runtime values share one closed set of variants:
# Null, End, Pair, Symbol, int, float, bool, Char, str and Array.
# Fixed-width integers are plain Python ints, range checked by the reader.
#
# Naming guidance:
# - SExpression: Use in reader/list-utility code to denote syntactic forms (code-as-data).
# - LispValue:  Use in session/extension code to denote evaluated values.
# Both aliases resolve to the same union and are interchangeable.

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from clove.types.nil import NullType, EndType
    from clove.types.symbol import Symbol
    from clove.types.values import Pair, Char, Array

SExpression = Union[
    "NullType", "EndType", "Pair", "Symbol", int, float, bool, "Char", str, "Array"
]
# Runtime values may also include host objects (channels, coroutines, builtins)
LispValue = Any

# Evaluator function type: injected into a Session as eval_fn(expr, session)
EvaluatorFn = Callable[..., LispValue]
