"""Clove Language Server package.

This package provides:
- A pygls-based Language Server for the Clove Lisp dialect.
- Reader diagnostics computed without evaluating the document.
"""

__all__ = [
    "server",
    "diagnostics",
]
