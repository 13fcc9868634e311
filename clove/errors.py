from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from clove.reader.lexer import Token


class CloveError(Exception):
    """ Base class for all Clove errors"""
    pass


class CloveReaderError(CloveError):
    """ Base class for errors raised while turning source into expressions.

    Carries the offending token (when known) so callers can report a position.
    """

    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(message)
        self.message = message
        self.token = token

    def __str__(self) -> str:
        if self.token is None:
            return self.message
        return f"{self.message} (line {self.token.line + 1}, column {self.token.column + 1})"


class CloveSourceError(CloveReaderError):
    """ Raised when the lexer cannot classify the input"""


class CloveUnexpectedEnd(CloveReaderError):
    """ Raised when input ends before a form is complete"""


class CloveSyntaxError(CloveReaderError):
    """ Raised when a token appears where no production matches"""


class CloveNumericConversionError(CloveReaderError):
    """ Raised when a numeric literal does not fit its radix or width"""


class CloveNotAListError(CloveError):
    """ Raised when a proper list is required and something else is given"""


class CloveUnboundSymbol(CloveError):
    """ Raised when a symbol is used before it is bound"""


class CloveArityError(CloveError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class CloveTypeError(CloveError):
    """ Raised when the types of arguments passed to a function are incorrect"""
