"""Runtime environment for J-Bob.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Environments are shared by reference: a
closure keeps the very Environment it was defined in, so a later `define`
into that frame is visible to the closure. This is what lets a function
body call itself by name.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from jbob import LispValue
from jbob.errors import UnboundVariableError
from jbob.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def make_child(self) -> Environment:
        """Return a new empty frame whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any local binding."""
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises UnboundVariableError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariableError(f"variable `{name}` is not defined")
        return env.vars[name]

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
