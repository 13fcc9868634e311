from clove.reader.lexer import Token, TokenType, TokenStream, lex
from clove.reader.parser import Parser, read, read_all

__all__ = [
    "Token",
    "TokenType",
    "TokenStream",
    "lex",
    "Parser",
    "read",
    "read_all",
]
