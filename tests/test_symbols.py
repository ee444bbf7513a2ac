import pytest
from hypothesis import given, strategies as st

from jbob.errors import JBobError
from jbob.types.symbol import Symbol, SymbolTable


@given(st.text(max_size=20))
def test_intern_is_idempotent(name):
    table = SymbolTable()
    assert table.intern(name) is table.intern(name)


def test_distinct_names_give_distinct_symbols(symbols):
    a = symbols.intern("a")
    b = symbols.intern("b")
    assert a is not b
    assert a != b


def test_equality_is_identity_not_text():
    # Same text through two tables: different symbols
    a1 = SymbolTable().intern("a")
    a2 = SymbolTable().intern("a")
    assert str(a1) == str(a2)
    assert a1 != a2
    assert len({a1, a2}) == 2


def test_symbols_only_come_from_a_table():
    with pytest.raises(JBobError):
        Symbol("loose")


def test_symbols_are_immutable(symbols):
    sym = symbols.intern("x")
    with pytest.raises(AttributeError):
        sym.name = "y"


def test_table_only_grows(symbols):
    assert len(symbols) == 0
    symbols.intern("x")
    symbols.intern("x")
    symbols.intern("y")
    assert len(symbols) == 2
    assert "x" in symbols
    assert "z" not in symbols


def test_symbol_prints_as_its_text(symbols):
    assert str(symbols.intern("dethm.align/align")) == "dethm.align/align"
