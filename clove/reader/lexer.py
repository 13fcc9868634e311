"""
  Clove Lexer and token stream

- Streaming, lazy tokenization: `lex` is a generator, errors surface when the
  offending token is pulled.
- Every token carries its classification, its decoded text, a 0-based
  line/column position and the length of its raw source text.
- Numeric prefixes come after an optional minus sign in every radix.
- Atoms are cut out first and classified by full match afterwards:

    - .            -> DOT
    - true/false   -> BOOL
    - 0x1F, -0x1F  -> HEX     (text "1F", "-1F")
    - 0b101        -> BINARY  (text "101")
    - 017, -017    -> OCTAL   (text "017", "-017"), so -017 is -15
    - -42, 0, 08   -> DECIMAL
    - 1.5, .5, 2e10 -> FLOAT   ((1 .2) is a one-element list holding 0.2)
    - anything else -> SYMBOL
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from clove.errors import CloveSourceError


class TokenType(Enum):
    LPAREN = "("
    RPAREN = ")"
    LSQUARE = "["
    RSQUARE = "]"
    LCURLY = "{"
    RCURLY = "}"
    DOT = "."
    QUOTE = "'"
    BACKTICK = "`"
    TILDE = "~"
    TILDE_AT = "~@"
    SYMBOL = "symbol"
    BOOL = "bool"
    DECIMAL = "decimal"
    HEX = "hex"
    OCTAL = "octal"
    BINARY = "binary"
    CHAR = "char"
    STRING = "string"
    FLOAT = "float"
    END = "end"


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    line: int = 0
    column: int = 0
    length: int = 0

    def __str__(self) -> str:
        if self.type is TokenType.END:
            return "end of input"
        return f"{self.type.name} {self.text!r}"


TOKEN_RE = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<punct>~@|[()\[\]{}'`~])"  # delimiters and quote markers
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<char>#\\(?:(?i:newline|space|tab|return)|.)(?=[\s()\[\]{}'`~\";]|\Z))"  # named or single-char, then a delimiter
    r'|(?P<atom>[^\s()\[\]{}\'`~";]+)',  # everything else is classified below
    re.DOTALL,
)

HEX_RE = re.compile(r"(-?)0x([0-9a-fA-F]+)")
BINARY_RE = re.compile(r"(-?)0b([01]+)")
OCTAL_RE = re.compile(r"-?0[0-7]+")
DECIMAL_RE = re.compile(r"-?[0-9]+")
FLOAT_RE = re.compile(
    r"-?(?:[0-9]*\.[0-9]+(?:[eE][-+]?[0-9]+)?|[0-9]+\.(?:[eE][-+]?[0-9]+)?|[0-9]+[eE][-+]?[0-9]+)"
)
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
    "tab": "\t",
    "return": "\r",
}

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
}


def decode_string(raw: str) -> str:
    """Strip the quotes from a string token and resolve its escapes."""
    return ESCAPE_RE.sub(lambda m: STRING_ESCAPES.get(m.group(1), m.group(1)), raw[1:-1])


def classify_atom(text: str) -> tuple[TokenType, str]:
    if text == ".":
        return TokenType.DOT, text
    if text in ("true", "false"):
        return TokenType.BOOL, text
    if m := HEX_RE.fullmatch(text):
        return TokenType.HEX, m.group(1) + m.group(2)
    if m := BINARY_RE.fullmatch(text):
        return TokenType.BINARY, m.group(1) + m.group(2)
    if OCTAL_RE.fullmatch(text):
        return TokenType.OCTAL, text
    if DECIMAL_RE.fullmatch(text):
        return TokenType.DECIMAL, text
    if FLOAT_RE.fullmatch(text):
        return TokenType.FLOAT, text
    return TokenType.SYMBOL, text


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens, finishing with a single END token."""
    pos = 0
    n = len(source)
    line = 0
    line_start = 0

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # Only an opening quote without its closing quote fails every pattern
            raise CloveSourceError(
                "Unterminated string",
                Token(TokenType.STRING, source[pos:], line, pos - line_start, n - pos),
            )
        kind = m.lastgroup
        text = m.group(kind)
        column = pos - line_start
        length = len(text)

        if kind == "punct":
            yield Token(TokenType(text), text, line, column, length)
        elif kind == "string":
            yield Token(TokenType.STRING, decode_string(text), line, column, length)
        elif kind == "char":
            name = text[2:]
            if len(name) > 1:
                name = NAMED_CHARS[name.lower()]
            yield Token(TokenType.CHAR, name, line, column, length)
        elif kind == "atom":
            if text.startswith("#\\"):
                raise CloveSourceError(
                    f"Invalid character literal {text!r}",
                    Token(TokenType.CHAR, text, line, column, length),
                )
            typ, payload = classify_atom(text)
            yield Token(typ, payload, line, column, length)

        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = m.start() + text.rfind("\n") + 1
        pos = m.end()

    yield Token(TokenType.END, "", line, pos - line_start)


class TokenStream:
    """One-token lookahead over any Token iterator.

    Once the underlying iterator is exhausted the same END token is returned
    forever; one is synthesized if the iterator never produced it.
    """

    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self._end: Optional[Token] = None

    def _pull(self) -> Token:
        if self._end is not None:
            return self._end
        tok = next(self.tokens, None)
        if tok is None:
            tok = Token(TokenType.END, "")
        if tok.type is TokenType.END:
            self._end = tok
        return tok

    def peek(self) -> Token:
        if not self.buffer:
            self.buffer.append(self._pull())
        return self.buffer[0]

    def next(self) -> Token:
        if self.buffer:
            return self.buffer.pop(0)
        return self._pull()

    @classmethod
    def from_source(cls, source: str) -> TokenStream:
        return cls(lex(source))
