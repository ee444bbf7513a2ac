from __future__ import annotations
import logging

from jbob.errors import JBobError

logger = logging.getLogger(__name__)

# Only SymbolTable holds this key, so only SymbolTable can mint symbols
_INTERN_KEY = object()


class Symbol:
    """An interned name.

    Equality and hashing are inherited from `object`, i.e. by identity. Two
    symbols are the same symbol only if they came from the same SymbolTable
    entry; the text is never compared.
    """

    __slots__ = ("name",)

    def __init__(self, name: str, key: object = None):
        if key is not _INTERN_KEY:
            raise JBobError(f"symbol {name!r} must be created with SymbolTable.intern")
        self.name = name

    def __setattr__(self, attr, value):
        if hasattr(self, "name"):
            raise AttributeError("Symbol is immutable")
        object.__setattr__(self, attr, value)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Maps strings to their unique Symbol. Entries are never removed."""

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, name: str) -> Symbol:
        symbol = self._symbols.get(name)
        if symbol is None:
            symbol = Symbol(name, _INTERN_KEY)
            self._symbols[name] = symbol
            logger.debug("interned %r (%d symbols)", name, len(self._symbols))
        return symbol

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
