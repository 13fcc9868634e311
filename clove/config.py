from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Integer literals of every radix read into one signed 64-bit range
SEXP_INT_BITS = 64
SEXP_INT_MIN = -(1 << (SEXP_INT_BITS - 1))
SEXP_INT_MAX = (1 << (SEXP_INT_BITS - 1)) - 1

SOURCE_SUFFIX = '.lisp'


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_load_path() -> List[Path]:
    """Directories searched by the program loader, from CLOVE_PATH."""
    return paths_from_env('CLOVE_PATH', [Path.cwd()])
