from __future__ import annotations

"""
Reader diagnostics for Clove documents.

The whole buffer is read with a throwaway symbol table; nothing is evaluated.
The first reader failure becomes a single Diagnostic at the offending token.
"""

from typing import List

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from clove.loader import parse_all
from clove.types.symbol import SymbolTable

SOURCE = "clove-ls"


def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def collect_diagnostics(text: str) -> List[Diagnostic]:
    _, err = parse_all(text, SymbolTable())
    if err is None:
        return []

    token = getattr(err, "token", None)
    if token is None:
        rng = _mk_range(0, 0)
    else:
        rng = _mk_range(token.line, token.column, max(token.length or len(token.text), 1))
    message = getattr(err, "message", str(err))
    return [
        Diagnostic(
            range=rng,
            message=message,
            severity=DiagnosticSeverity.Error,
            source=SOURCE,
        )
    ]
