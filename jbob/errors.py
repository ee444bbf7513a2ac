from __future__ import annotations


class JBobError(Exception):
    """ Base class for all J-Bob errors"""

    def within(self, context: str) -> JBobError:
        """Return a new error of the same kind with `context` prefixed to its message."""
        return type(self)(f"{context}: {self}")


class ParseError(JBobError):
    """ Raised when source text is not a well-formed s-expression"""

    def __init__(self, message: str, line: int = 0, column: int = 0, source_line: str = ""):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.source_line = source_line

    def __str__(self) -> str:
        if not self.line:
            return self.message
        caret = " " * (self.column - 1) + "^"
        return (
            f"parse error at line {self.line}, column {self.column}: {self.message}\n"
            f"{self.source_line}\n{caret}"
        )


class BuildError(JBobError):
    """ Raised when a form cannot be turned into an executable tree"""


class ImproperListError(BuildError):
    """ Raised when a proper list is required but the tail is not ()"""


class UnboundVariableError(JBobError):
    """ Raised when a variable is used before it is defined"""


class NotCallableError(JBobError):
    """ Raised when a non-function value is applied"""


class ArityError(JBobError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class JBobRecursionError(JBobError):
    """ Raised when evaluation exhausts the Python stack"""


class LibraryNotFoundError(JBobError):
    """ Raised when a required library is not on the search path"""
