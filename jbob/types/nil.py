from __future__ import annotations


class NullType:
    """The empty list. Also the only false value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Null"
    def __str__(self): return "()"
    def __bool__(self): return False


Null = NullType()
