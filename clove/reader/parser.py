"""
  Clove Reader

Recursive-descent parser from a TokenStream to Sexp values:

    - ()            -> Null
    - (a b c)       -> Pair(a, Pair(b, Pair(c, Null)))
    - (a . b)       -> Pair(a, b)
    - [a b]         -> Array([a, b])
    - {k v}         -> (hash k v)
    - 'x `x ~x ~@x  -> (quote x) (syntax-quote x) (unquote x) (unquote-splicing x)
    - symbols       -> Symbol, interned through the environment
    - integers      -> int, every radix checked against the 64-bit range
    - end of input  -> End (only between top-level forms)
"""

from __future__ import annotations

import math
import re
from typing import Iterator, Protocol

from clove import SExpression
from clove.config import SEXP_INT_MIN, SEXP_INT_MAX
from clove.errors import (
    CloveSyntaxError,
    CloveUnexpectedEnd,
    CloveNumericConversionError,
)
from clove.listutils import make_list
from clove.reader.lexer import Token, TokenType, TokenStream, lex
from clove.types.nil import Null, End
from clove.types.symbol import Symbol
from clove.types.values import Pair, Array, Char


class SymbolInterner(Protocol):
    def intern(self, name: str) -> Symbol: ...


QUOTE_FORMS: dict[TokenType, str] = {
    TokenType.QUOTE: "quote",
    TokenType.BACKTICK: "syntax-quote",
    TokenType.TILDE: "unquote",
    TokenType.TILDE_AT: "unquote-splicing",
}

INTEGER_RADIXES: dict[TokenType, tuple[int, re.Pattern]] = {
    TokenType.DECIMAL: (10, re.compile(r"[-+]?[0-9]+")),
    TokenType.HEX: (16, re.compile(r"[-+]?[0-9a-fA-F]+")),
    TokenType.OCTAL: (8, re.compile(r"[-+]?[0-7]+")),
    TokenType.BINARY: (2, re.compile(r"[-+]?[01]+")),
}


def parse_integer(tok: Token) -> int:
    base, digits = INTEGER_RADIXES[tok.type]
    # int() would also accept underscores, whitespace and 0x-style prefixes
    if not digits.fullmatch(tok.text):
        raise CloveNumericConversionError(
            f"Invalid base-{base} integer literal {tok.text!r}", tok
        )
    value = int(tok.text, base)
    if not SEXP_INT_MIN <= value <= SEXP_INT_MAX:
        raise CloveNumericConversionError(
            f"Integer literal {tok.text!r} out of range", tok
        )
    return value


def parse_float(tok: Token) -> float:
    try:
        value = float(tok.text)
    except ValueError:
        raise CloveNumericConversionError(
            f"Invalid float literal {tok.text!r}", tok
        ) from None
    if math.isinf(value) and "inf" not in tok.text.lower():
        raise CloveNumericConversionError(
            f"Float literal {tok.text!r} out of range", tok
        )
    return value


class Parser:
    """Reads Sexp values from a TokenStream, interning symbols through `env`."""

    def __init__(self, stream: TokenStream, env: SymbolInterner):
        self.stream = stream
        self.env = env

    def _call_form(self, name: str, *args: SExpression) -> SExpression:
        return make_list([self.env.intern(name), *args])

    def _parse_required(self) -> SExpression:
        """Parse an expression that must exist; End here means truncated input."""
        tok = self.stream.peek()
        expr = self.parse_expression()
        if expr is End:
            raise CloveUnexpectedEnd("Unexpected end of input", tok)
        return expr

    def parse_expression(self) -> SExpression:
        tok = self.stream.next()
        typ = tok.type

        if typ is TokenType.LPAREN:
            return self.parse_list()
        if typ is TokenType.LSQUARE:
            return self.parse_array()
        if typ is TokenType.LCURLY:
            return self.parse_hash()

        # Quote forms wrap exactly the next expression
        if typ in QUOTE_FORMS:
            return self._call_form(QUOTE_FORMS[typ], self._parse_required())

        if typ is TokenType.SYMBOL:
            return self.env.intern(tok.text)
        if typ is TokenType.BOOL:
            return tok.text == "true"
        if typ in INTEGER_RADIXES:
            return parse_integer(tok)
        if typ is TokenType.FLOAT:
            return parse_float(tok)
        if typ is TokenType.STRING:
            return tok.text
        if typ is TokenType.CHAR:
            if len(tok.text) != 1:
                raise CloveSyntaxError(f"Invalid character literal {tok.text!r}", tok)
            return Char(tok.text)
        if typ is TokenType.END:
            return End

        raise CloveSyntaxError(f"Invalid syntax, didn't know what to do with {tok}", tok)

    def parse_list(self) -> SExpression:
        """Read the rest of a list after its '('.

        Builds the same right-nested chain as the recursive grammar
        list := ')' | expr '.' expr ')' | expr list, iterating over elements.
        """
        items: list[SExpression] = []
        while True:
            tok = self.stream.peek()
            if tok.type is TokenType.END:
                raise CloveUnexpectedEnd("Unexpected end of input inside list", tok)
            if tok.type is TokenType.RPAREN:
                self.stream.next()
                return make_list(items)

            items.append(self.parse_expression())

            if self.stream.peek().type is TokenType.DOT:
                self.stream.next()
                tail = self._parse_required()
                close = self.stream.next()
                if close.type is TokenType.END:
                    raise CloveUnexpectedEnd("Unexpected end of input after dotted pair", close)
                if close.type is not TokenType.RPAREN:
                    raise CloveSyntaxError("extra value in dotted pair", close)
                return make_list(items, tail)

    def _parse_sequence(self, closer: TokenType, what: str) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            tok = self.stream.peek()
            if tok.type is TokenType.END:
                raise CloveUnexpectedEnd(f"Unexpected end of input inside {what}", tok)
            if tok.type is closer:
                self.stream.next()
                return items
            items.append(self.parse_expression())

    def parse_array(self) -> Array:
        return Array(self._parse_sequence(TokenType.RSQUARE, "array"))

    def parse_hash(self) -> Pair:
        # Sugar only: the evaluator builds the map and checks key/value pairing
        items = self._parse_sequence(TokenType.RCURLY, "hash literal")
        return Pair(self.env.intern("hash"), make_list(items))

    def iter_forms(self) -> Iterator[SExpression]:
        """Yield top-level forms until the stream is exhausted."""
        while (expr := self.parse_expression()) is not End:
            yield expr


def read(source: str, env: SymbolInterner) -> SExpression:
    """Read the first form of `source`, or End if it holds none."""
    return Parser(TokenStream(lex(source)), env).parse_expression()


def read_all(source: str, env: SymbolInterner) -> list[SExpression]:
    """Read every form of `source`, raising on the first failure."""
    return list(Parser(TokenStream(lex(source)), env).iter_forms())
