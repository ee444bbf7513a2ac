import pytest

from jbob.interpreter import Interpreter
from jbob.types.environment import Environment
from jbob.types.symbol import SymbolTable


@pytest.fixture
def interp():
    """A fresh interpreter with the prelude loaded."""
    return Interpreter()


@pytest.fixture
def symbols():
    return SymbolTable()


@pytest.fixture
def env():
    return Environment()
