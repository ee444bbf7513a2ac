import pytest

from jbob.errors import ImproperListError
from jbob.types.function import NativeFunction
from jbob.types.nil import Null, NullType
from jbob.types.pair import Pair, iter_list


def test_null_is_unique_and_falsy():
    assert NullType() is Null
    assert not Null
    assert str(Null) == "()"


def test_pair_equality_is_structural():
    a = Pair.from_iterable([1, 2])
    b = Pair.from_iterable([1, 2])
    assert a is not b
    assert a == b
    assert a != Pair.from_iterable([1, 3])
    assert a != Pair.from_iterable([1, 2, 3])
    assert Pair(1, 2) != Pair.from_iterable([1, 2])


def test_pair_equality_short_circuits_on_shared_tail():
    tail = Pair.from_iterable(range(5))
    assert Pair(0, tail) == Pair(0, tail)


def test_pair_equality_on_long_lists():
    n = 50_000
    assert Pair.from_iterable(range(n)) == Pair.from_iterable(range(n))


def test_pair_is_immutable():
    p = Pair(1, 2)
    with pytest.raises(AttributeError):
        p.car = 3


def test_nested_equality_uses_symbol_identity(symbols):
    a = Pair(symbols.intern("a"), Null)
    assert a == Pair(symbols.intern("a"), Null)
    assert a != Pair(symbols.intern("b"), Null)


def test_printing(symbols):
    value = Pair.from_iterable([Pair(1, symbols.intern("a")), Null])
    assert str(value) == "((1 . a) ())"
    assert str(Pair.from_iterable([1, 2, 3])) == "(1 2 3)"
    assert str(Pair.from_iterable([1, 2], tail=3)) == "(1 2 . 3)"
    assert str(-7) == "-7"


def test_function_printing(symbols):
    named = NativeFunction(symbols.intern("car"), 1, lambda args: Null)
    anonymous = NativeFunction(None, 1, lambda args: Null)
    assert str(named) == "#<function 'car'>"
    assert str(anonymous) == "#<function>"


def test_functions_compare_by_identity():
    op = lambda args: Null  # noqa: E731
    f = NativeFunction(None, 1, op)
    g = NativeFunction(None, 1, op)
    assert f == f
    assert f != g


def test_iter_list():
    assert list(iter_list(Pair.from_iterable([1, 2, 3]))) == [1, 2, 3]
    assert list(iter_list(Null)) == []
    with pytest.raises(ImproperListError):
        list(iter_list(Pair(1, 2)))
    with pytest.raises(ImproperListError):
        list(iter_list(5))
