import pytest
from hypothesis import given, strategies as st

from jbob.errors import ArityError
from jbob.interpreter import Interpreter
from jbob.types.function import Closure, NativeFunction
from jbob.types.nil import Null
from jbob.types.pair import Pair

# One interpreter shared by the property tests; they never define anything
SHARED = Interpreter()


def test_prelude_bindings(interp):
    natives = {"atom": 1, "cons": 2, "car": 1, "cdr": 1, "equal": 2, "natp": 1, "+": 2, "<": 2}
    for name, arity in natives.items():
        fn = interp.env.lookup(interp.intern(name))
        assert isinstance(fn, NativeFunction)
        assert fn.arity == arity
        assert str(fn.name) == name
    size = interp.env.lookup(interp.intern("size"))
    assert isinstance(size, Closure)
    assert size.arity == 1


def test_atom(interp):
    assert interp.eval("(atom '())") is interp.t
    assert interp.eval("(atom 'a)") is interp.t
    assert interp.eval("(atom 0)") is interp.t
    assert interp.eval("(atom '(1))") is Null


def test_cons_car_cdr(interp):
    assert interp.eval("(cons 1 2)") == Pair(1, 2)
    assert interp.eval("(car (cons 1 2))") == 1
    assert interp.eval("(cdr (cons 1 2))") == 2
    assert interp.eval("(cons 1 '(2 3))") == Pair.from_iterable([1, 2, 3])


def test_car_and_cdr_are_total(interp):
    assert interp.eval("(car 'a)") is Null
    assert interp.eval("(cdr 5)") is Null
    assert interp.eval("(car '())") is Null
    assert interp.eval("(cdr '())") is Null


def test_equal(interp):
    assert interp.eval("(equal '(1 2) '(1 2))") is interp.t
    assert interp.eval("(equal 'a 'a)") is interp.t
    assert interp.eval("(equal 'a 'b)") is Null
    assert interp.eval("(equal '(1 (2 a)) '(1 (2 a)))") is interp.t
    assert interp.eval("(equal '(1 2) '(1 2 3))") is Null
    assert interp.eval("(equal 1 '1)") is interp.t
    assert interp.eval("(equal '() '())") is interp.t


def test_equal_on_functions_is_identity(interp):
    assert interp.eval("(equal car car)") is interp.t
    assert interp.eval("(equal car cdr)") is Null


def test_natp(interp):
    assert interp.eval("(natp -1)") is Null
    assert interp.eval("(natp 0)") is interp.t
    assert interp.eval("(natp 12)") is interp.t
    assert interp.eval("(natp 'a)") is Null
    assert interp.eval("(natp '(1))") is Null


def test_plus_and_less_than_read_non_integers_as_zero(interp):
    assert interp.eval("(+ 2 3)") == 5
    assert interp.eval("(+ 'a 3)") == 3
    assert interp.eval("(+ '(1) '())") == 0
    assert interp.eval("(< 1 2)") is interp.t
    assert interp.eval("(< 2 1)") is Null
    assert interp.eval("(< 'a 1)") is interp.t
    assert interp.eval("(< -1 'a)") is interp.t


@given(st.integers(), st.integers())
def test_arithmetic_agrees_with_python(a, b):
    assert SHARED.eval(f"(+ {a} {b})") == a + b
    assert SHARED.eval(f"(< {a} {b})") is SHARED.bool_value(a < b)


def test_size_counts_cons_cells(interp):
    assert interp.eval("(size '(1 2 3 4 5 6))") == 6
    assert interp.eval("(size 'a)") == 0
    assert interp.eval("(size '((1 2) 3))") == 4
    assert interp.eval("(size (cons 1 2))") == 1


def test_native_arity_errors_name_the_function(interp):
    with pytest.raises(ArityError) as info:
        interp.eval("(cons 1)")
    message = str(info.value)
    assert "cons" in message
    assert "1" in message and "2" in message
