from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Union

from clove import SExpression
from clove.config import get_load_path, SOURCE_SUFFIX
from clove.errors import CloveError
from clove.reader.lexer import TokenStream, lex
from clove.reader.parser import Parser, SymbolInterner
from clove.types.nil import End

logger = logging.getLogger(__name__)

LoadFailure = Union[CloveError, OSError]


def parse_all(
    source: Union[str, TokenStream], env: SymbolInterner
) -> tuple[list[SExpression], Optional[LoadFailure]]:
    """Read top-level forms until the input is exhausted or reading fails.

    Returns the forms read so far together with the failure (None on a clean
    end); the caller decides whether the failure is fatal.
    """
    stream = TokenStream(lex(source)) if isinstance(source, str) else source
    parser = Parser(stream, env)
    forms: list[SExpression] = []
    while True:
        try:
            expr = parser.parse_expression()
        except (CloveError, OSError) as err:
            return forms, err
        if expr is End:
            return forms, None
        forms.append(expr)


# Map a bare program name to a .lisp file underneath the load path

def resolve_source(name: Union[str, Path]) -> Optional[Path]:
    path = Path(name)
    if path.is_file():
        return path
    rel = path if path.suffix else path.with_suffix(SOURCE_SUFFIX)
    for root in get_load_path():
        candidate = root / rel
        if candidate.is_file():
            return candidate
    return None


def load_file(
    name: Union[str, Path], env: SymbolInterner
) -> tuple[list[SExpression], Optional[LoadFailure]]:
    p = resolve_source(name)
    if p is None:
        raise FileNotFoundError(f"Cannot find program '{name}' in CLOVE_PATH")
    logger.debug("loading %s", p)
    forms, err = parse_all(p.read_text(encoding='utf-8'), env)
    if err is not None:
        logger.debug("stopped reading %s after %d forms: %s", p, len(forms), err)
    return forms, err
