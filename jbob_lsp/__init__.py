"""J-Bob Language Server package.

This package provides:
- A pygls-based Language Server for J-Bob source files.
- A static indexer that reads and builds top-level forms without evaluating them.
"""

__all__ = [
    "server",
    "indexer",
]
