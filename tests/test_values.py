import copy
import pickle

import pytest

from clove.types.nil import Null, NullType, End, EndType
from clove.types.symbol import SymbolTable
from clove.types.values import Pair, Array, Char, sexp_equal, sexp_string
from clove.listutils import make_list


def test_sentinels_are_singletons():
    assert NullType() is Null
    assert EndType() is End
    assert copy.deepcopy(Null) is Null
    assert pickle.loads(pickle.dumps(End)) is End


@pytest.mark.parametrize("other", [End, None, False, 0, "", [], Array([]), "()"])
def test_null_equals_only_itself(other):
    assert Null != other
    assert not bool(Null)


@pytest.mark.parametrize("other", [Null, None, False, 0, ""])
def test_end_equals_only_itself(other):
    assert End != other


def test_symbol_interning():
    table = SymbolTable()
    a = table.intern("a")
    assert table.intern("a") is a
    assert table.intern("b") != a
    assert "a" in table
    assert len(table) == 2


def test_symbols_from_separate_tables_use_their_ids():
    t1, t2 = SymbolTable(), SymbolTable()
    t2.intern("other")
    assert t1.intern("x").id != t2.intern("x").id


def test_symbols_with_same_id_and_different_names_differ():
    x = SymbolTable().intern("x")
    y = SymbolTable().intern("y")
    assert x.id == y.id
    assert x != y
    assert not sexp_equal(make_list([x]), make_list([y]))


@pytest.mark.parametrize(
    "a, b",
    [
        (True, 1),
        (1, 1.0),
        (Char("a"), "a"),
        (Array([1]), make_list([1])),
        (Pair(1, 2), Pair(1, make_list([2]))),
        (Array([True]), Array([1])),
    ]
)
def test_variants_are_kept_apart(a, b):
    assert not sexp_equal(a, b)
    # Python itself says True == 1; inside expressions they differ
    assert Array([a]) != Array([b])
    assert make_list([a]) != make_list([b])


def test_pairs_and_arrays_are_unhashable():
    with pytest.raises(TypeError):
        hash(Pair(1, 2))
    with pytest.raises(TypeError):
        hash(Array([]))


def test_char_requires_one_character():
    with pytest.raises(ValueError):
        Char("ab")


@pytest.mark.parametrize(
    "source, printed",
    [
        ("()", "()"),
        ("(1 2 3)", "(1 2 3)"),
        ("(1 2 . 3)", "(1 2 . 3)"),
        ("[1 [true false] ()]", "[1 [true false] ()]"),
        ("{a 1}", "(hash a 1)"),
        ("'x", "(quote x)"),
        ('"a\\"b\\n"', '"a\\"b\\n"'),
        ("#\\a", "#\\a"),
        ("#\\space", "#\\space"),
        ("1.5", "1.5"),
    ]
)
def test_printing(parse, source, printed):
    assert sexp_string(parse(source)) == printed


def test_print_end():
    assert str(End) == "End"
