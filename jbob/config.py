from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Library sources are looked up relative to the working directory by default
_DEFAULT_LIBRARY_DIRS = [Path('.')]
_DEFAULT_RECURSION_LIMIT = 10_000
LIBRARY_SUFFIX = '.scm'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_library_roots() -> List[Path]:
    return paths_from_env('JBOB_PATH', _DEFAULT_LIBRARY_DIRS)


def get_recursion_limit() -> int:
    return int_from_env('JBOB_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
