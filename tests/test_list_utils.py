import pytest
from hypothesis import given, strategies as st

from clove.errors import CloveNotAListError
from clove.listutils import (
    cons,
    is_list,
    list_to_sequence,
    list_length,
    make_list,
    map_list,
    concat_list,
)
from clove.types.nil import Null, End
from clove.types.values import Pair, Array


def test_null_is_empty_list():
    assert is_list(Null)
    assert list_to_sequence(Null) == []
    assert list_length(Null) == 0
    assert make_list([]) is Null


def test_make_list_is_right_nested():
    assert make_list([1, 2, 3]) == Pair(1, Pair(2, Pair(3, Null)))
    assert make_list([1, 2], 3) == Pair(1, Pair(2, 3))


def test_make_list_accepts_any_iterable():
    assert make_list(x for x in (1, 2)) == cons(1, cons(2, Null))


@pytest.mark.parametrize(
    "value",
    [Pair(1, 2), Pair(1, Pair(2, 3)), 1, "abc", End, Array([1, 2])]
)
def test_not_a_list(value):
    assert not is_list(value)
    with pytest.raises(CloveNotAListError):
        list_to_sequence(value)
    with pytest.raises(CloveNotAListError):
        list_length(value)


def test_read_lists_round_trip(parse):
    assert list_to_sequence(parse("(1 2 3)")) == [1, 2, 3]
    with pytest.raises(CloveNotAListError):
        list_to_sequence(parse("(1 2 . 3)"))


def test_map_list_preserves_order():
    assert map_list(lambda x: x * 10, make_list([1, 2, 3])) == make_list([10, 20, 30])
    assert map_list(lambda x: x, Null) is Null


def test_map_list_does_not_mutate_input():
    original = make_list([1, 2, 3])
    map_list(lambda x: -x, original)
    assert list_to_sequence(original) == [1, 2, 3]


def test_map_list_stops_at_first_failure():
    seen = []

    def fn(x):
        seen.append(x)
        if x == 3:
            raise ValueError("bad element")
        return x

    with pytest.raises(ValueError, match="bad element"):
        map_list(fn, make_list([1, 2, 3, 4, 5]))
    assert seen == [1, 2, 3]


@pytest.mark.parametrize("value", [5, "abc", Pair(1, 2)])
def test_map_list_rejects_non_lists(value):
    with pytest.raises(CloveNotAListError):
        map_list(lambda x: x, value)


def test_concat_list():
    a = make_list([1, 2])
    b = make_list([3, 4])
    result = concat_list(a, b)
    assert list_to_sequence(result) == [1, 2, 3, 4]
    assert list_to_sequence(a) == [1, 2]


def test_concat_list_reuses_second_list():
    a = make_list([1])
    b = make_list([2, 3])
    result = concat_list(a, b)
    assert result.tail is b
    assert result is not a


def test_concat_list_with_empty():
    b = make_list([1])
    assert concat_list(Null, b) is b
    assert concat_list(make_list([1, 2]), Null) == make_list([1, 2])


def test_concat_list_errors():
    with pytest.raises(CloveNotAListError):
        concat_list(make_list([1]), Pair(2, 3))
    with pytest.raises(CloveNotAListError):
        concat_list(make_list([1]), 2)
    with pytest.raises(CloveNotAListError):
        concat_list(Pair(1, 2), make_list([3]))


def test_long_lists_do_not_recurse():
    n = 100_000
    lst = make_list(range(n))
    assert list_length(lst) == n
    assert list_length(concat_list(lst, lst)) == 2 * n
    assert list_length(map_list(lambda x: x + 1, lst)) == n
    assert lst == make_list(range(n))


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_concat_length_and_order(xs, ys):
    a = make_list(xs)
    b = make_list(ys)
    result = concat_list(a, b)
    assert list_to_sequence(a) == xs
    assert list_length(result) == len(xs) + len(ys)
    assert list_to_sequence(result) == xs + ys
