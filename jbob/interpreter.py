from __future__ import annotations

import logging
import sys
from pathlib import Path

from jbob import LispValue, SExpression
from jbob import config
from jbob.builtin.env_builtin import register
from jbob.errors import JBobRecursionError, LibraryNotFoundError, ParseError
from jbob.evaluation.builder import AstBuilder
from jbob.evaluation.evaluator import evaluate
from jbob.reader.parser import read_file, read_str
from jbob.types.environment import Environment
from jbob.types.nil import Null
from jbob.types.symbol import Symbol, SymbolTable

logger = logging.getLogger(__name__)


def _ensure_recursion_limit(limit: int) -> None:
    # No tail calls are eliminated, so recursive J-Bob code needs a deep stack
    if sys.getrecursionlimit() < limit:
        logger.debug("raising recursion limit from %d to %d", sys.getrecursionlimit(), limit)
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    Reads and evaluates J-Bob source against one persistent global environment.
    Definitions made by earlier calls are visible to later ones.
    """

    def __init__(self, prelude: str | None = None):
        _ensure_recursion_limit(config.get_recursion_limit())
        self.symbols = SymbolTable()
        self.builder = AstBuilder(self.symbols)
        self.env: Environment = Environment()
        register(self.env, self.symbols)
        self.t: Symbol = self.symbols.intern("t")
        self.loaded: set[Path] = set()

        if prelude:
            self.eval(prelude)

    def intern(self, name: str) -> Symbol:
        return self.symbols.intern(name)

    def bool_value(self, b: bool) -> LispValue:
        return self.t if b else Null

    def read(self, code: str) -> SExpression:
        """Parse exactly one expression, interning through this interpreter."""
        return read_str(code, self.symbols)

    def eval_value(self, value: SExpression) -> LispValue:
        """Build and evaluate one already-read form in the global environment."""
        try:
            return evaluate(self.builder.build(value), self.env)
        except RecursionError as err:
            raise JBobRecursionError("stack exhausted during evaluation") from err

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in order; return the last value, () if none."""
        result: LispValue = Null
        for form in read_file(code, self.symbols):
            result = self.eval_value(form)
        return result

    def is_valid_sexpr(self, code: str) -> bool:
        """True when `code` is exactly one complete expression."""
        try:
            read_str(code, SymbolTable())
        except ParseError:
            return False
        return True

    def load_file(self, path: str | Path) -> LispValue:
        path = Path(path)
        logger.debug("loading %s", path)
        result = self.eval(path.read_text(encoding="utf-8"))
        self.loaded.add(path.resolve())
        return result

    def require(self, name: str) -> LispValue:
        """Load library `name` from the search path unless it is already loaded."""
        filename = name if Path(name).suffix == config.LIBRARY_SUFFIX else name + config.LIBRARY_SUFFIX
        for root in config.get_library_roots():
            candidate = root / filename
            if candidate.is_file():
                if candidate.resolve() in self.loaded:
                    return Null
                return self.load_file(candidate)
        raise LibraryNotFoundError(f"library '{name}' not found in search path")
