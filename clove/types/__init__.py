from clove.types.nil import Null, NullType, End, EndType
from clove.types.symbol import Symbol, SymbolTable
from clove.types.values import Pair, Array, Char, sexp_equal, sexp_string
from clove.types.environment import Environment
from clove.types.builtin import Builtin

__all__ = [
    "Null",
    "NullType",
    "End",
    "EndType",
    "Symbol",
    "SymbolTable",
    "Pair",
    "Array",
    "Char",
    "sexp_equal",
    "sexp_string",
    "Environment",
    "Builtin",
]
